"""
Projection calculators for DinDin.

Purpose
-------
Deterministic future-value arithmetic behind the two calculators of the
site: compound growth of a lump sum plus monthly contributions, and the
retirement funding gap under the 4% withdrawal rule.

Key Mathematical Framework
--------------------------
- Monthly rate: r = annual_rate_percent / 100 / 12
- Balance evolution (add-then-grow): B_{t+1} = (B_t + C)(1 + r), B_0 = P
- Total invested: P + C * 12 * years
- Retirement capital: K = 12 * income / 0.04
- Gap closing payment: PMT = G * r / ((1 + r)^n - 1), r = 0.10 / 12

Each deposit earns interest in the month it is made. This ordering is
fixed: results must match the values users already see on the site, so
grow-then-add is not an alternative.

Key components
--------------
- ProjectionInput / ProjectionResult and project_compound_growth()
- RetirementInput / RetirementResult and project_retirement_need()
- projection_schedule(): year-by-year balances for charts

Example
-------
>>> inp = ProjectionInput(initial_amount=10_000, monthly_contribution=500,
...                       annual_rate_percent=12, years=10)
>>> result = project_compound_growth(inp)
>>> result.total_invested
70000.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
import pandas as pd

from .constants import (
    MAX_AGE,
    MAX_PROJECTION_YEARS,
    MONTHS_PER_YEAR,
    RETIREMENT_ANNUAL_RETURN,
    WITHDRAWAL_RATE,
)
from .exceptions import InvalidInputError
from .utils import (
    annual_percent_to_monthly,
    check_finite,
    check_non_negative,
    future_value_annuity_payment,
)

__all__ = [
    "ProjectionInput",
    "ProjectionResult",
    "RetirementInput",
    "RetirementResult",
    "project_compound_growth",
    "project_retirement_need",
    "projection_schedule",
]

logger = logging.getLogger(__name__)


def _check_balance(balance: float, inp: ProjectionInput) -> float:
    """Raise if the projected balance left the float range."""
    if not math.isfinite(balance):
        raise InvalidInputError(
            f"Projection overflows: {inp.annual_rate_percent}% a.a. over "
            f"{inp.years} years does not give a finite balance."
        )
    return balance


def _check_whole(name: str, value) -> int:
    """Return *value* as int, raising if it has a fractional part."""
    try:
        whole = int(value)
    except (TypeError, ValueError, OverflowError):
        whole = None
    if isinstance(value, bool) or whole is None or whole != value:
        raise InvalidInputError(f"{name} must be a whole number (got {value}).")
    return whole


# ---------------------------------------------------------------------------
# Compound growth
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionInput:
    """
    Inputs of the compound interest calculator.

    Parameters
    ----------
    initial_amount : float
        Lump sum invested at month 0 (R$, >= 0).
    monthly_contribution : float
        Deposit made every month (R$, >= 0).
    annual_rate_percent : float
        Nominal annual rate in percent (12 for 12% a.a.). May be zero or
        negative to model a loss, must be finite.
    years : int
        Number of years to project (0..MAX_PROJECTION_YEARS).
    """
    initial_amount: float
    monthly_contribution: float
    annual_rate_percent: float
    years: int

    def __post_init__(self):
        check_non_negative("initial_amount", self.initial_amount)
        check_non_negative("monthly_contribution", self.monthly_contribution)
        check_finite("annual_rate_percent", self.annual_rate_percent)
        years = _check_whole("years", self.years)
        if years < 0:
            raise InvalidInputError(f"years must be non-negative (got {years}).")
        if years > MAX_PROJECTION_YEARS:
            raise InvalidInputError(
                f"years must be at most {MAX_PROJECTION_YEARS} (got {years})."
            )
        object.__setattr__(self, "years", years)

    @property
    def months(self) -> int:
        return self.years * MONTHS_PER_YEAR

    @property
    def monthly_rate(self) -> float:
        return annual_percent_to_monthly(self.annual_rate_percent)


@dataclass(frozen=True)
class ProjectionResult:
    """Projected balance split into money put in and interest earned."""
    total_invested: float
    total_interest: float
    final_amount: float


def project_compound_growth(inp: ProjectionInput) -> ProjectionResult:
    """
    Project a balance under monthly compounding with monthly deposits.

    Parameters
    ----------
    inp : ProjectionInput
        Validated calculator inputs.

    Returns
    -------
    ProjectionResult
        final_amount after years * 12 add-then-grow steps,
        total_invested = initial + contribution * months and
        total_interest = final_amount - total_invested.

    Notes
    -----
    - years == 0 returns the initial amount untouched
    - With a zero rate, final_amount == total_invested exactly
    - No rounding is applied; round at presentation time

    Raises
    ------
    InvalidInputError
        If the rate is so extreme that the balance is no longer a
        finite number.

    Examples
    --------
    >>> r = project_compound_growth(ProjectionInput(1000, 0, 0, 5))
    >>> r.final_amount, r.total_interest
    (1000.0, 0.0)
    """
    rate = inp.monthly_rate
    balance = float(inp.initial_amount)
    for _ in range(inp.months):
        balance = (balance + inp.monthly_contribution) * (1.0 + rate)
    _check_balance(balance, inp)

    total_invested = float(inp.initial_amount + inp.monthly_contribution * inp.months)
    logger.debug(
        "compound growth: %d months at %.6f monthly -> %.2f",
        inp.months, rate, balance,
    )
    return ProjectionResult(
        total_invested=total_invested,
        total_interest=balance - total_invested,
        final_amount=balance,
    )


def projection_schedule(inp: ProjectionInput) -> pd.DataFrame:
    """
    Year-by-year balances of a compound growth projection.

    Runs the same add-then-grow iteration as project_compound_growth()
    and records the balance at the end of every year, so the last row
    always equals the calculator result.

    Returns
    -------
    pd.DataFrame
        Indexed by ``year`` (0..years) with columns ``balance``,
        ``invested`` and ``interest``.
    """
    rate = inp.monthly_rate
    years = np.arange(inp.years + 1)
    balance = np.empty(inp.years + 1, dtype=float)
    invested = inp.initial_amount + inp.monthly_contribution * MONTHS_PER_YEAR * years

    current = float(inp.initial_amount)
    balance[0] = current
    for year in range(1, inp.years + 1):
        for _ in range(MONTHS_PER_YEAR):
            current = (current + inp.monthly_contribution) * (1.0 + rate)
        balance[year] = _check_balance(current, inp)

    df = pd.DataFrame(
        {
            "balance": balance,
            "invested": invested.astype(float),
            "interest": balance - invested,
        },
        index=pd.Index(years, name="year"),
    )
    return df


# ---------------------------------------------------------------------------
# Retirement
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RetirementInput:
    """
    Inputs of the retirement calculator.

    Parameters
    ----------
    current_age : int
        Age today (>= 0).
    retirement_age : int
        Planned retirement age, strictly greater than current_age and at
        most MAX_AGE.
    desired_monthly_income : float
        Monthly income wanted during retirement (R$, >= 0).
    current_savings : float
        Money already saved (R$, >= 0).
    """
    current_age: int
    retirement_age: int
    desired_monthly_income: float
    current_savings: float

    def __post_init__(self):
        current = _check_whole("current_age", self.current_age)
        retirement = _check_whole("retirement_age", self.retirement_age)
        if current < 0:
            raise InvalidInputError(f"current_age must be non-negative (got {current}).")
        if retirement <= current:
            raise InvalidInputError(
                f"retirement_age ({retirement}) must be greater than "
                f"current_age ({current})."
            )
        if retirement > MAX_AGE:
            raise InvalidInputError(
                f"retirement_age must be at most {MAX_AGE} (got {retirement})."
            )
        check_non_negative("desired_monthly_income", self.desired_monthly_income)
        check_non_negative("current_savings", self.current_savings)
        object.__setattr__(self, "current_age", current)
        object.__setattr__(self, "retirement_age", retirement)


@dataclass(frozen=True)
class RetirementResult:
    """
    Retirement funding analysis.

    Attributes
    ----------
    years_to_retirement : int
        retirement_age - current_age.
    total_needed : float
        Capital that sustains the desired income under the 4% rule.
    future_value_of_current_savings : float
        Current savings grown at 10% a.a. until retirement.
    monthly_contribution_needed : float
        Level monthly deposit that closes the remaining gap by retirement.
    """
    years_to_retirement: int
    total_needed: float
    future_value_of_current_savings: float
    monthly_contribution_needed: float

    @property
    def still_needed(self) -> float:
        """Gap left after the current savings have grown."""
        return max(0.0, self.total_needed - self.future_value_of_current_savings)


def project_retirement_need(inp: RetirementInput) -> RetirementResult:
    """
    Size the retirement capital and the monthly effort to reach it.

    Parameters
    ----------
    inp : RetirementInput
        Validated calculator inputs.

    Returns
    -------
    RetirementResult

    Notes
    -----
    - total_needed = desired_monthly_income * 12 / 0.04
    - future value of savings compounds yearly at 10%
    - the monthly payment uses r = 0.10 / 12 over years * 12 months and
      is zero when savings already cover the target

    Examples
    --------
    >>> inp = RetirementInput(30, 60, desired_monthly_income=5000, current_savings=50_000)
    >>> project_retirement_need(inp).total_needed
    1500000.0
    """
    years = inp.retirement_age - inp.current_age
    total_needed = inp.desired_monthly_income * MONTHS_PER_YEAR / WITHDRAWAL_RATE
    fv_savings = inp.current_savings * (1.0 + RETIREMENT_ANNUAL_RETURN) ** years
    still_needed = max(0.0, total_needed - fv_savings)

    monthly_rate = RETIREMENT_ANNUAL_RETURN / MONTHS_PER_YEAR
    monthly_needed = future_value_annuity_payment(
        still_needed, monthly_rate, years * MONTHS_PER_YEAR
    )
    logger.debug(
        "retirement: %d years, needed %.2f, savings grow to %.2f, gap %.2f",
        years, total_needed, fv_savings, still_needed,
    )
    return RetirementResult(
        years_to_retirement=years,
        total_needed=float(total_needed),
        future_value_of_current_savings=float(fv_savings),
        monthly_contribution_needed=float(monthly_needed),
    )
