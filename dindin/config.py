"""
Configuration management module for DinDin.

Purpose
-------
Pydantic request models for every calculator of the site plus the global
application settings. Request models validate the JSON the web client
posts (camelCase keys) or the options given on the command line
(snake_case names) and build the engine dataclasses.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Two spellings: ``initialAmount`` and ``initial_amount`` both accepted
- Environment-aware: AppSettings reads DINDIN_* variables and .env files

Example
-------
>>> from dindin.config import CompoundInterestRequest
>>> req = CompoundInterestRequest.model_validate(
...     {"initialAmount": 10000, "monthlyContribution": 500,
...      "interestRate": 12, "timePeriod": 10}
... )
>>> req.to_input().years
10
>>> req.model_dump(by_alias=True)["interestRate"]
12.0
"""

from __future__ import annotations
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .comparison import DEFAULT_SELECTION, ComparisonResult, compare_investments
from .constants import CURRENCY_SYMBOL, MAX_AGE, MAX_PROJECTION_YEARS
from .exceptions import ConfigurationError
from .projection import ProjectionInput, RetirementInput
from .recommendations import (
    AllocationRecommendation,
    FinancialProfile,
    recommend_allocation,
)

__all__ = [
    "CompoundInterestRequest",
    "RetirementRequest",
    "FinancialProfileConfig",
    "ComparisonRequest",
    "AllocationRequest",
    "AppSettings",
    "load_settings",
]

RiskProfileName = Literal["conservative", "moderate", "aggressive"]

_REQUEST_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    populate_by_name=True,
    allow_inf_nan=False,
)


# ---------------------------------------------------------------------------
# Calculators
# ---------------------------------------------------------------------------

class CompoundInterestRequest(BaseModel):
    """
    Compound interest calculator form.

    Attributes
    ----------
    initial_amount : float
        Lump sum invested today (R$). JSON key ``initialAmount``.
    monthly_contribution : float
        Monthly deposit (R$). JSON key ``monthlyContribution``.
    interest_rate : float
        Annual rate in percent (-100 to 1000). JSON key ``interestRate``.
    time_period : int
        Years to project. JSON key ``timePeriod``.

    Examples
    --------
    >>> CompoundInterestRequest(initial_amount=0, monthly_contribution=100,
    ...                         interest_rate=0, time_period=1).to_input().months
    12
    """

    model_config = _REQUEST_CONFIG

    initial_amount: float = Field(
        ge=0, alias="initialAmount", description="Initial amount (R$)"
    )
    monthly_contribution: float = Field(
        default=0.0, ge=0, alias="monthlyContribution",
        description="Monthly contribution (R$)"
    )
    interest_rate: float = Field(
        ge=-100, le=1000, alias="interestRate",
        description="Annual interest rate (%)"
    )
    time_period: int = Field(
        ge=0, le=MAX_PROJECTION_YEARS, alias="timePeriod",
        description="Projection horizon (years)"
    )

    def to_input(self) -> ProjectionInput:
        return ProjectionInput(
            initial_amount=self.initial_amount,
            monthly_contribution=self.monthly_contribution,
            annual_rate_percent=self.interest_rate,
            years=self.time_period,
        )


class RetirementRequest(BaseModel):
    """
    Retirement calculator form.

    ``retirement_age`` must be strictly greater than ``current_age``.
    """

    model_config = _REQUEST_CONFIG

    current_age: int = Field(
        ge=0, le=MAX_AGE, alias="currentAge", description="Age today"
    )
    retirement_age: int = Field(
        ge=1, le=MAX_AGE, alias="retirementAge", description="Planned retirement age"
    )
    desired_income: float = Field(
        ge=0, alias="desiredIncome", description="Desired monthly income (R$)"
    )
    current_savings: float = Field(
        default=0.0, ge=0, alias="currentSavings", description="Current savings (R$)"
    )

    @field_validator("retirement_age")
    @classmethod
    def validate_retirement_age(cls, v, info):
        """Ensure retirement_age > current_age."""
        current_age = info.data.get("current_age")
        if current_age is not None and v <= current_age:
            raise ValueError(
                f"retirement_age ({v}) must be greater than current_age ({current_age})"
            )
        return v

    def to_input(self) -> RetirementInput:
        return RetirementInput(
            current_age=self.current_age,
            retirement_age=self.retirement_age,
            desired_monthly_income=self.desired_income,
            current_savings=self.current_savings,
        )


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

class FinancialProfileConfig(BaseModel):
    """
    Financial profile form of the recommendation page.

    Attributes
    ----------
    monthly_income : float
        Net monthly income (R$). JSON key ``monthlyIncome``.
    monthly_expenses : float
        Essential expenses (R$). JSON key ``monthlyExpenses``.
    leisure_expenses : float
        Discretionary expenses (R$). JSON key ``leisureExpenses``.
    investment_profile : str
        "conservative", "moderate" or "aggressive". JSON key
        ``investmentProfile``.
    age : int
        Investor age (1-120).

    Notes
    -----
    The model does not require a positive surplus: a profile that spends
    its whole income is stored as-is, and the selector rejects it.
    """

    model_config = _REQUEST_CONFIG

    monthly_income: float = Field(ge=0, alias="monthlyIncome")
    monthly_expenses: float = Field(ge=0, alias="monthlyExpenses")
    leisure_expenses: float = Field(default=0.0, ge=0, alias="leisureExpenses")
    investment_profile: RiskProfileName = Field(alias="investmentProfile")
    age: int = Field(ge=1, le=MAX_AGE)

    def to_profile(self) -> FinancialProfile:
        return FinancialProfile(
            monthly_income=self.monthly_income,
            monthly_essential_expenses=self.monthly_expenses,
            monthly_discretionary_expenses=self.leisure_expenses,
            risk_profile=self.investment_profile,
            age=self.age,
        )


class ComparisonRequest(BaseModel):
    """Investment comparator form: a lump sum, a period and the products to compare."""

    model_config = _REQUEST_CONFIG

    amount: float = Field(gt=0, description="Amount invested (R$)")
    period: int = Field(ge=1, le=50, description="Holding period (years)")
    investments: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SELECTION),
        min_length=1,
        description="Product ids to compare",
    )

    def evaluate(self) -> List[ComparisonResult]:
        return compare_investments(self.amount, self.period, self.investments)


class AllocationRequest(BaseModel):
    """Profile-only allocation shown next to the compound interest calculator."""

    model_config = _REQUEST_CONFIG

    profile: RiskProfileName
    amount: float = Field(ge=0)
    time_horizon: float = Field(ge=0, le=MAX_PROJECTION_YEARS, alias="timeHorizon")
    monthly_contribution: float = Field(default=0.0, ge=0, alias="monthlyContribution")

    def evaluate(self) -> AllocationRecommendation:
        return recommend_allocation(
            self.profile, self.amount, self.time_horizon, self.monthly_contribution
        )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    are prefixed with DINDIN_ (e.g., DINDIN_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    debug : bool
        Force DEBUG logging regardless of log_level.
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR".
    currency_symbol : str
        Prefix used when formatting money in the CLI.

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.currency_symbol
    'R$'
    """

    model_config = SettingsConfigDict(
        env_prefix="DINDIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    currency_symbol: str = Field(
        default=CURRENCY_SYMBOL,
        min_length=1,
        description="Currency symbol for formatted output"
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


def load_settings(**overrides) -> AppSettings:
    """
    Load AppSettings from the environment, raising ConfigurationError.

    Examples
    --------
    >>> load_settings(log_level="DEBUG").log_level
    'DEBUG'
    """
    try:
        return AppSettings(**overrides)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid DINDIN_* settings: {e}") from e
