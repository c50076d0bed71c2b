"""
DinDin — Financial Projection & Recommendation Engine

Personal finance calculators and rule-based investment recommendations
for Brazilian investors.

Modules
-------
- projection      : Compound interest and retirement calculators
- recommendations : Financial profile, recommendation selector, profile allocation
- catalog         : Fixed suggestion catalogs per risk profile
- comparison      : Investment comparator (after income tax and fees)
- advisor         : External text generator with rule-based fallback
- config          : Pydantic request models and application settings
- serialization   : camelCase JSON shapes and versioned files
- plotting        : Matplotlib charts
- utils           : Shared utilities (validation, rates, formatting)

"""

from .projection import (
    ProjectionInput,
    ProjectionResult,
    RetirementInput,
    RetirementResult,
    project_compound_growth,
    project_retirement_need,
)
from .recommendations import (
    FinancialProfile,
    InvestmentSuggestion,
    RecommendationBundle,
    generate_recommendations,
)
from .types import RiskProfile
from . import utils

__version__ = "0.1.0"
