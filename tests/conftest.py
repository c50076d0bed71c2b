"""
Pytest configuration and fixtures for DinDin test suite.

This module provides reusable fixtures for testing all DinDin components.
Fixtures follow the principle of "arrange-act-assert" with clear separation.
"""

import pytest

from dindin.projection import ProjectionInput, RetirementInput
from dindin.recommendations import FinancialProfile
from dindin.types import RiskProfile


# ---------------------------------------------------------------------------
# Calculator Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def projection_input() -> ProjectionInput:
    """
    Reference compound interest case.

    R$ 10.000 initial, R$ 500/month, 12% a.a., 10 years
    """
    return ProjectionInput(
        initial_amount=10_000,
        monthly_contribution=500,
        annual_rate_percent=12,
        years=10,
    )


@pytest.fixture
def retirement_input() -> RetirementInput:
    """
    Reference retirement case.

    30 → 60 years old, R$ 5.000/month desired, R$ 50.000 saved
    """
    return RetirementInput(
        current_age=30,
        retirement_age=60,
        desired_monthly_income=5000,
        current_savings=50_000,
    )


# ---------------------------------------------------------------------------
# Profile Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def conservative_profile() -> FinancialProfile:
    """
    Conservative investor with a small surplus.

    Income 3.000, essential 2.000, leisure 500 → R$ 500 available
    """
    return FinancialProfile(
        monthly_income=3000,
        monthly_essential_expenses=2000,
        monthly_discretionary_expenses=500,
        risk_profile=RiskProfile.CONSERVATIVE,
        age=30,
    )


@pytest.fixture
def moderate_profile() -> FinancialProfile:
    """Moderate investor, high income (R$ 8.000), 40 years old (R$ 3.000 available)."""
    return FinancialProfile(
        monthly_income=8000,
        monthly_essential_expenses=4000,
        monthly_discretionary_expenses=1000,
        risk_profile=RiskProfile.MODERATE,
        age=40,
    )


@pytest.fixture
def aggressive_profile() -> FinancialProfile:
    """Aggressive investor, high income, 55 years old (R$ 10.000 available)."""
    return FinancialProfile(
        monthly_income=20_000,
        monthly_essential_expenses=7000,
        monthly_discretionary_expenses=3000,
        risk_profile=RiskProfile.AGGRESSIVE,
        age=55,
    )


@pytest.fixture
def broke_profile() -> FinancialProfile:
    """Profile whose expenses consume the whole income."""
    return FinancialProfile(
        monthly_income=3000,
        monthly_essential_expenses=2500,
        monthly_discretionary_expenses=500,
        risk_profile=RiskProfile.MODERATE,
        age=30,
    )


@pytest.fixture(params=list(RiskProfile), ids=lambda p: p.value)
def any_profile(request) -> FinancialProfile:
    """Same budget under each of the three risk profiles."""
    return FinancialProfile(
        monthly_income=6000,
        monthly_essential_expenses=3000,
        monthly_discretionary_expenses=1000,
        risk_profile=request.param,
        age=35,
    )


# ---------------------------------------------------------------------------
# JSON Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def profile_payload() -> dict:
    """Financial profile as posted by the web client."""
    return {
        "monthlyIncome": 8000,
        "monthlyExpenses": 4000,
        "leisureExpenses": 1000,
        "investmentProfile": "moderate",
        "age": 40,
    }


def make_suggestion(name, allocation, category="domestic"):
    return {
        "name": name,
        "allocation": allocation,
        "expectedReturn": "12% a.a.",
        "risk": "low",
        "reason": "reason",
        "theory": "theory",
        "practice": "practice",
        "minAmount": 100,
        "timeHorizon": "1+ year",
        "category": category,
    }


@pytest.fixture
def generator_payload() -> dict:
    """Well-formed payload from an external text generator."""
    return {
        "nationalInvestments": [
            make_suggestion("Tesouro Selic", 60),
            make_suggestion("CDB", 40),
        ],
        "internationalInvestments": [
            make_suggestion("S&P 500 ETF", 100, "international"),
        ],
        "summary": "Generated summary",
        "warnings": ["Generated warning"],
    }
