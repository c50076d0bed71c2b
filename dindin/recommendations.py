"""
Recommendation selector for DinDin.

Purpose
-------
Maps a small financial profile (income, expenses, risk profile, age) to
a bundle of investment suggestions. This is the deterministic answer the
site gives when the external text generator is unavailable, so it must
always produce a complete, sensible bundle for any valid profile.

Selection Rules
---------------
- available_to_invest = income - essential - discretionary, must be > 0
- income level: < R$ 3.000 low, < R$ 8.000 medium, otherwise high
- risk capacity (age): < 35 high, < 50 medium, otherwise low
- the risk profile picks one fixed catalog (see catalog.py) with five
  domestic and five international suggestions
- narrative fields are the catalog templates filled with the profile

Key components
--------------
- FinancialProfile: validated selector input
- InvestmentSuggestion / RecommendationBundle: selector output
- generate_recommendations(): the selector
- recommend_allocation(): the simpler profile-only allocation used by
  the compound interest calculator page

Example
-------
>>> profile = FinancialProfile(
...     monthly_income=3000, monthly_essential_expenses=2000,
...     monthly_discretionary_expenses=500,
...     risk_profile=RiskProfile.CONSERVATIVE, age=30,
... )
>>> bundle = generate_recommendations(profile)
>>> len(bundle.domestic_suggestions), len(bundle.international_suggestions)
(5, 5)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from .catalog import CAPACITY_WARNINGS, SuggestionTemplate, catalog_for
from .constants import (
    COMFORTABLE_BUDGET_THRESHOLD,
    LOW_INCOME_THRESHOLD,
    MEDIUM_INCOME_THRESHOLD,
    MAX_PROJECTION_YEARS,
    MIDDLE_AGE_INVESTOR,
    MONTHS_PER_YEAR,
    SMALL_BUDGET_THRESHOLD,
    YOUNG_INVESTOR_AGE,
)
from .exceptions import InvalidFinancialProfileError, InvalidInputError
from .types import IncomeLevel, Region, RiskLevel, RiskProfile
from .utils import check_non_negative, format_currency

__all__ = [
    "RiskProfile",
    "FinancialProfile",
    "InvestmentSuggestion",
    "RecommendationBundle",
    "AllocationRecommendation",
    "classify_income",
    "classify_risk_capacity",
    "generate_recommendations",
    "recommend_allocation",
]

logger = logging.getLogger(__name__)

EMERGENCY_RESERVE_MONTHS = 6


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FinancialProfile:
    """
    Monthly budget and investor characteristics.

    Parameters
    ----------
    monthly_income : float
        Net monthly income (R$, >= 0).
    monthly_essential_expenses : float
        Rent, food, bills (R$, >= 0).
    monthly_discretionary_expenses : float
        Leisure spending (R$, >= 0).
    risk_profile : RiskProfile
        Chosen by the user, never inferred.
    age : int
        Investor age in years (> 0).

    Notes
    -----
    A profile with nothing left to invest is still a valid object; the
    selector is the one that rejects it.
    """
    monthly_income: float
    monthly_essential_expenses: float
    monthly_discretionary_expenses: float
    risk_profile: RiskProfile
    age: int

    def __post_init__(self):
        for name in ("monthly_income", "monthly_essential_expenses",
                     "monthly_discretionary_expenses"):
            try:
                check_non_negative(name, getattr(self, name))
            except InvalidInputError as e:
                raise InvalidFinancialProfileError(str(e)) from e
        try:
            risk_profile = RiskProfile(self.risk_profile)
        except ValueError:
            raise InvalidFinancialProfileError(
                f"risk_profile must be one of "
                f"{[p.value for p in RiskProfile]}, got {self.risk_profile!r}."
            ) from None
        try:
            age_ok = not isinstance(self.age, bool) and int(self.age) == self.age > 0
        except (TypeError, ValueError, OverflowError):
            age_ok = False
        if not age_ok:
            raise InvalidFinancialProfileError(
                f"age must be a positive whole number (got {self.age})."
            )
        object.__setattr__(self, "risk_profile", risk_profile)
        object.__setattr__(self, "age", int(self.age))

    @property
    def available_to_invest(self) -> float:
        """Money left each month after essential and discretionary expenses."""
        return (
            self.monthly_income
            - self.monthly_essential_expenses
            - self.monthly_discretionary_expenses
        )

    @property
    def monthly_expenses(self) -> float:
        return self.monthly_essential_expenses + self.monthly_discretionary_expenses


@dataclass(frozen=True)
class InvestmentSuggestion:
    """
    One suggested investment inside a bundle.

    ``expected_return_description`` is free text: sources mix fixed rates
    ("13,75% a.a.") and ranges ("16-22% a.a.").
    """
    name: str
    allocation_percent: float
    expected_return_description: str
    risk_level: RiskLevel
    rationale: str
    concept_explanation: str
    practical_steps: str
    minimum_amount: float
    recommended_horizon: str
    region: Region


@dataclass(frozen=True)
class RecommendationBundle:
    """
    Domestic and international suggestions plus summary and warnings.

    Attributes
    ----------
    domestic_suggestions : tuple of InvestmentSuggestion
    international_suggestions : tuple of InvestmentSuggestion
    summary : str
    warnings : tuple of str
    """
    domestic_suggestions: Tuple[InvestmentSuggestion, ...]
    international_suggestions: Tuple[InvestmentSuggestion, ...]
    summary: str
    warnings: Tuple[str, ...]

    def allocation_total(self, region: Union[Region, str]) -> float:
        """Sum of allocation_percent for one region (should be 100)."""
        suggestions = (
            self.domestic_suggestions
            if Region(region) is Region.DOMESTIC
            else self.international_suggestions
        )
        return float(sum(s.allocation_percent for s in suggestions))


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_income(monthly_income: float) -> IncomeLevel:
    """Bucket a monthly income into low / medium / high."""
    if monthly_income < LOW_INCOME_THRESHOLD:
        return IncomeLevel.LOW
    if monthly_income < MEDIUM_INCOME_THRESHOLD:
        return IncomeLevel.MEDIUM
    return IncomeLevel.HIGH


def classify_risk_capacity(age: int) -> RiskLevel:
    """Capacity to absorb losses given the investor's age."""
    if age < YOUNG_INVESTOR_AGE:
        return RiskLevel.HIGH
    if age < MIDDLE_AGE_INVESTOR:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


# ---------------------------------------------------------------------------
# Selector
# ---------------------------------------------------------------------------

def _narrative_context(profile: FinancialProfile, income_level: IncomeLevel) -> dict:
    available = profile.available_to_invest
    return {
        "age": profile.age,
        "income_level": income_level.value,
        "income": format_currency(profile.monthly_income),
        "available": format_currency(available),
        "reserve": format_currency(profile.monthly_expenses * EMERGENCY_RESERVE_MONTHS),
        "budget_note": (
            "a small starting amount" if available < SMALL_BUDGET_THRESHOLD else "your budget"
        ),
        "wealth_note": (
            "your current wealth"
            if available > COMFORTABLE_BUDGET_THRESHOLD
            else "starting gradually"
        ),
    }


def _fill(template: SuggestionTemplate, context: dict) -> InvestmentSuggestion:
    return InvestmentSuggestion(
        name=template.name,
        allocation_percent=float(template.allocation_percent),
        expected_return_description=template.expected_return,
        risk_level=template.risk_level,
        rationale=template.rationale.format(**context),
        concept_explanation=template.concept.format(**context),
        practical_steps=template.practical_steps.format(**context),
        minimum_amount=float(template.minimum_amount),
        recommended_horizon=template.horizon,
        region=template.region,
    )


def generate_recommendations(profile: FinancialProfile) -> RecommendationBundle:
    """
    Build the recommendation bundle for a financial profile.

    Parameters
    ----------
    profile : FinancialProfile
        Validated profile.

    Returns
    -------
    RecommendationBundle
        Five domestic and five international suggestions (allocations sum
        to 100 per region), a summary and caller-specific warnings.

    Raises
    ------
    InvalidFinancialProfileError
        If available_to_invest is not strictly positive.

    Notes
    -----
    Pure and deterministic: identical profiles yield identical bundles.
    """
    available = profile.available_to_invest
    if not math.isfinite(available) or available <= 0:
        raise InvalidFinancialProfileError(
            f"available_to_invest must be positive, got {available:.2f}. "
            f"Expenses ({profile.monthly_expenses:.2f}) consume the whole "
            f"monthly income ({profile.monthly_income:.2f})."
        )

    income_level = classify_income(profile.monthly_income)
    capacity = classify_risk_capacity(profile.age)
    catalog = catalog_for(profile.risk_profile)
    logger.debug(
        "selector: profile=%s income_level=%s capacity=%s available=%.2f",
        profile.risk_profile.value, income_level.value, capacity.value, available,
    )

    context = _narrative_context(profile, income_level)
    warnings = tuple(w.format(**context) for w in catalog.warnings)
    warnings += (CAPACITY_WARNINGS[capacity].format(**context),)

    return RecommendationBundle(
        domestic_suggestions=tuple(_fill(t, context) for t in catalog.domestic),
        international_suggestions=tuple(_fill(t, context) for t in catalog.international),
        summary=catalog.summary.format(**context),
        warnings=warnings,
    )


# ---------------------------------------------------------------------------
# Profile-only allocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class _AllocationModel:
    expected_return_percent: float
    allocation: Mapping[str, float]
    narrative: str
    risk_level: RiskLevel


ALLOCATION_MODELS: Mapping[RiskProfile, _AllocationModel] = MappingProxyType({
    RiskProfile.CONSERVATIVE: _AllocationModel(
        expected_return_percent=10.0,
        allocation=MappingProxyType({
            "Savings/CDB": 40,
            "Tesouro Direto": 30,
            "LCI/LCA": 20,
            "DI Funds": 10,
        }),
        narrative=(
            "For your conservative profile, focus on fixed income with liquidity and "
            "safety. CDBs and Tesouro Direto preserve capital while paying more than "
            "the savings account."
        ),
        risk_level=RiskLevel.LOW,
    ),
    RiskProfile.MODERATE: _AllocationModel(
        expected_return_percent=14.0,
        allocation=MappingProxyType({
            "Fixed Income": 50,
            "Blue Chip Stocks": 25,
            "Real Estate Funds": 15,
            "Multimarket Funds": 10,
        }),
        narrative=(
            "Your moderate profile allows a good mix of fixed income and equities. "
            "Keep a solid fixed income base and diversify into established companies."
        ),
        risk_level=RiskLevel.MEDIUM,
    ),
    RiskProfile.AGGRESSIVE: _AllocationModel(
        expected_return_percent=18.0,
        allocation=MappingProxyType({
            "Growth Stocks": 40,
            "Value Stocks": 20,
            "Real Estate Funds": 15,
            "International ETFs": 15,
            "Cryptocurrencies": 5,
            "Fixed Income": 5,
        }),
        narrative=(
            "As an aggressive investor you can explore higher risk and return assets. "
            "Focus on growth stocks and diversify internationally, keeping only a "
            "small fixed income reserve."
        ),
        risk_level=RiskLevel.HIGH,
    ),
})


@dataclass(frozen=True)
class AllocationRecommendation:
    """
    Profile-level allocation with a rough projection.

    Attributes
    ----------
    risk_profile : RiskProfile
    recommendation : str
        Narrative for the profile.
    suggested_allocation : Mapping[str, float]
        Asset class → percent, sums to 100.
    expected_return_percent : float
        Assumed annual return in percent.
    projected_value : float
    total_invested : float
    total_gains : float
    risk_level : RiskLevel
    """
    risk_profile: RiskProfile
    recommendation: str
    suggested_allocation: Mapping[str, float]
    expected_return_percent: float
    projected_value: float
    total_invested: float
    total_gains: float
    risk_level: RiskLevel


def recommend_allocation(
    risk_profile: Union[RiskProfile, str],
    amount: float,
    time_horizon: float,
    monthly_contribution: float = 0.0,
) -> AllocationRecommendation:
    """
    Suggest an asset-class allocation for a risk profile.

    The projection is deliberately coarse: every contribution of the
    horizon is added up front and grown yearly at the profile's
    expected return,
        projected = (amount + monthly * 12 * years) * (1 + r) ** years.
    It overstates growth compared to project_compound_growth() and is
    only meant as an order of magnitude next to the allocation.

    Raises
    ------
    InvalidInputError
        If amount, time_horizon or monthly_contribution is negative,
        time_horizon exceeds MAX_PROJECTION_YEARS, the risk profile is
        unknown, or the projection is not a finite number.
    """
    check_non_negative("amount", amount)
    check_non_negative("time_horizon", time_horizon)
    check_non_negative("monthly_contribution", monthly_contribution)
    if time_horizon > MAX_PROJECTION_YEARS:
        raise InvalidInputError(
            f"time_horizon must be at most {MAX_PROJECTION_YEARS} (got {time_horizon})."
        )
    try:
        profile = RiskProfile(risk_profile)
    except ValueError:
        raise InvalidInputError(f"Unknown risk profile: {risk_profile!r}") from None

    model = ALLOCATION_MODELS[profile]
    total_invested = amount + monthly_contribution * MONTHS_PER_YEAR * time_horizon
    projected = total_invested * (1.0 + model.expected_return_percent / 100.0) ** time_horizon
    if not math.isfinite(projected):
        raise InvalidInputError(
            f"Projection of {amount} over {time_horizon} years is not a finite number."
        )

    return AllocationRecommendation(
        risk_profile=profile,
        recommendation=model.narrative,
        suggested_allocation=model.allocation,
        expected_return_percent=model.expected_return_percent,
        projected_value=float(projected),
        total_invested=float(total_invested),
        total_gains=float(projected - total_invested),
        risk_level=model.risk_level,
    )
