"""
Type definitions for DinDin.

Purpose
-------
Provides the enumerations shared by the selector, the catalog and the
comparator, plus TypedDict definitions for the JSON dictionaries the
web client exchanges with the engine. Using TypedDicts documents the
camelCase wire shapes next to the snake_case Python objects.

Usage
-----
>>> from dindin.types import RiskProfile, ProjectionResultDict
>>>
>>> RiskProfile("moderate") is RiskProfile.MODERATE
True
>>> payload: ProjectionResultDict = {
...     "totalInvested": 70_000.0,
...     "totalInterest": 45_000.0,
...     "finalAmount": 115_000.0,
... }

Type Definitions
----------------
RiskProfile, RiskLevel, Region, IncomeLevel, AssetClass, Taxation
    String enums; values are the lowercase identifiers used in JSON.

ProjectionResultDict, RetirementResultDict
    Calculator responses.

SuggestionDict, BundleDict
    Recommendation bundle as produced by the selector or the external
    text generator.

ComparisonRowDict
    One row of the investment comparator.
"""

from enum import Enum
from typing import List

from typing_extensions import TypedDict

__all__ = [
    "RiskProfile",
    "RiskLevel",
    "Region",
    "IncomeLevel",
    "AssetClass",
    "Taxation",
    "ProjectionResultDict",
    "RetirementResultDict",
    "SuggestionDict",
    "BundleDict",
    "ComparisonRowDict",
]


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class RiskProfile(str, Enum):
    """Investor risk tolerance chosen by the user; selects the catalog."""
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class RiskLevel(str, Enum):
    """Risk of a single product or suggestion."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Region(str, Enum):
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


class IncomeLevel(str, Enum):
    """Monthly income bucket (see constants.LOW_INCOME_THRESHOLD)."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AssetClass(str, Enum):
    FIXED_INCOME = "fixed_income"
    EQUITIES = "equities"
    CRYPTO = "crypto"


class Taxation(str, Enum):
    """Income tax rule applied to a product's profit."""
    REGRESSIVE = "regressive"
    FLAT = "flat"
    EXEMPT = "exempt"


# ---------------------------------------------------------------------------
# JSON shapes
# ---------------------------------------------------------------------------

class ProjectionResultDict(TypedDict):
    """
    Compound interest calculator response.

    Attributes
    ----------
    totalInvested : float
        Initial amount plus every monthly contribution.
    totalInterest : float
        finalAmount - totalInvested.
    finalAmount : float
        Projected balance.
    """

    totalInvested: float
    totalInterest: float
    finalAmount: float


class RetirementResultDict(TypedDict):
    """
    Retirement calculator response.

    ``monthlyNeeded`` keeps the key name the web client already reads.
    """

    yearsToRetirement: int
    totalNeeded: float
    monthlyNeeded: float
    futureValueOfCurrentSavings: float


class SuggestionDict(TypedDict):
    """
    One investment suggestion on the wire.

    Attributes
    ----------
    name : str
        Display label.
    allocation : float
        Share of the region's portfolio in percent.
    expectedReturn : str
        Free text ("13,75% a.a.", "16-22% a.a.").
    risk : str
        "low", "medium" or "high".
    reason, theory, practice : str
        Rationale, concept explanation and practical steps.
    minAmount : float
        Minimum amount to start (R$).
    timeHorizon : str
        Recommended holding period, free text.
    category : str
        "domestic" or "international".
    """

    name: str
    allocation: float
    expectedReturn: str
    risk: str
    reason: str
    theory: str
    practice: str
    minAmount: float
    timeHorizon: str
    category: str


class BundleDict(TypedDict):
    """Full recommendation bundle on the wire."""

    nationalInvestments: List[SuggestionDict]
    internationalInvestments: List[SuggestionDict]
    summary: str
    warnings: List[str]


class ComparisonRowDict(TypedDict):
    """One product in the investment comparator, after tax and fees."""

    name: str
    finalAmount: float
    profit: float
    profitPercent: float
    risk: str
    type: str
