"""
Global constants for DinDin.

Purpose
-------
Centralizes the policy numbers used by the calculators, the
recommendation selector and the investment comparator. These are
policy, not configuration: changing one changes the answers the
application gives, so they live in code and are covered by tests.

Usage
-----
>>> from dindin.constants import WITHDRAWAL_RATE, MONTHS_PER_YEAR
>>>
>>> total_needed = desired_income * MONTHS_PER_YEAR / WITHDRAWAL_RATE

Categories
----------
- Time: month/year conversions, horizon bounds
- Retirement: withdrawal rule, assumed return
- Profiling: income and age thresholds, budget thresholds
- Comparator: income tax brackets
- Formatting: currency symbol
"""

from typing import Tuple

__all__ = [
    # Time
    "MONTHS_PER_YEAR",
    "MAX_PROJECTION_YEARS",
    "MAX_AGE",
    # Retirement
    "WITHDRAWAL_RATE",
    "RETIREMENT_ANNUAL_RETURN",
    # Profiling
    "LOW_INCOME_THRESHOLD",
    "MEDIUM_INCOME_THRESHOLD",
    "YOUNG_INVESTOR_AGE",
    "MIDDLE_AGE_INVESTOR",
    "SMALL_BUDGET_THRESHOLD",
    "COMFORTABLE_BUDGET_THRESHOLD",
    "ALLOCATION_TOLERANCE",
    # Comparator
    "REGRESSIVE_TAX_BRACKETS",
    "FLAT_INCOME_TAX",
    # Formatting
    "CURRENCY_SYMBOL",
]


# =============================================================================
# Time
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (compounding periods per year)."""

MAX_PROJECTION_YEARS: int = 100
"""Longest projection horizon in years (1200 monthly steps)."""

MAX_AGE: int = 120
"""Oldest age accepted for an investor or a retirement date."""


# =============================================================================
# Retirement
# =============================================================================

WITHDRAWAL_RATE: float = 0.04
"""Annual withdrawal rate used to size the retirement capital (4% rule)."""

RETIREMENT_ANNUAL_RETURN: float = 0.10
"""Assumed annual return for current savings and future contributions."""


# =============================================================================
# Profiling
# =============================================================================

LOW_INCOME_THRESHOLD: float = 3000.0
"""Monthly income (R$) below which income is classified as low."""

MEDIUM_INCOME_THRESHOLD: float = 8000.0
"""Monthly income (R$) below which income is classified as medium."""

YOUNG_INVESTOR_AGE: int = 35
"""Below this age the capacity to absorb losses is considered high."""

MIDDLE_AGE_INVESTOR: int = 50
"""Below this age (and from YOUNG_INVESTOR_AGE) capacity is medium."""

SMALL_BUDGET_THRESHOLD: float = 1000.0
"""Monthly amount (R$) below which the budget is treated as a small start."""

COMFORTABLE_BUDGET_THRESHOLD: float = 3000.0
"""Monthly amount (R$) above which managed funds fit the current wealth."""

ALLOCATION_TOLERANCE: float = 1.0
"""Maximum deviation (percentage points) of a region's allocation sum from 100."""


# =============================================================================
# Comparator
# =============================================================================

REGRESSIVE_TAX_BRACKETS: Tuple[Tuple[float, float], ...] = (
    (2.0, 0.15),
    (1.0, 0.175),
    (0.0, 0.20),
)
"""(minimum holding years, income tax rate) pairs, longest holding first."""

FLAT_INCOME_TAX: float = 0.15
"""Income tax on profits for products under the flat rule (stocks, crypto)."""


# =============================================================================
# Formatting
# =============================================================================

CURRENCY_SYMBOL: str = "R$"
"""Default currency symbol for reports and narrative text."""
