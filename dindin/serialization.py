"""
Serialization module for DinDin.

Purpose
-------
Converts engine results to the camelCase JSON dictionaries the web
client reads, parses incoming JSON through the pydantic request models,
and persists profiles and results to versioned JSON files.

Supports serialization of:
- ProjectionResult / RetirementResult (calculators)
- RecommendationBundle (selector or text generator)
- ComparisonResult lists (comparator)
- AllocationRecommendation (profile-only allocation)
- FinancialProfile files

Design Principles
-----------------
- Wire-compatible: keys match what the web client already consumes
- Validated: all parsing goes through dindin.config request models
- Backward compatible: files carry a schema version, mismatches warn

Example
-------
>>> from dindin.serialization import profile_from_dict, bundle_to_dict
>>> from dindin.recommendations import generate_recommendations
>>> profile = profile_from_dict({
...     "monthlyIncome": 8000, "monthlyExpenses": 4000,
...     "leisureExpenses": 1000, "investmentProfile": "moderate", "age": 40,
... })
>>> payload = bundle_to_dict(generate_recommendations(profile))
>>> len(payload["nationalInvestments"])
5
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Sequence, Union
from pathlib import Path
import json
import warnings

from pydantic import ValidationError as PydanticValidationError

from .comparison import ComparisonResult
from .config import CompoundInterestRequest, FinancialProfileConfig, RetirementRequest
from .exceptions import InvalidInputError
from .projection import ProjectionInput, ProjectionResult, RetirementInput, RetirementResult
from .recommendations import (
    AllocationRecommendation,
    FinancialProfile,
    InvestmentSuggestion,
    RecommendationBundle,
)
from .types import (
    BundleDict,
    ComparisonRowDict,
    ProjectionResultDict,
    RetirementResultDict,
    SuggestionDict,
)

__all__ = [
    "SCHEMA_VERSION",
    "projection_result_to_dict",
    "retirement_result_to_dict",
    "suggestion_to_dict",
    "bundle_to_dict",
    "comparison_to_dict",
    "allocation_to_dict",
    "profile_to_dict",
    "profile_from_dict",
    "projection_input_from_dict",
    "retirement_input_from_dict",
    "save_result",
    "load_result",
    "save_profile",
    "load_profile",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Results → JSON
# ---------------------------------------------------------------------------

def projection_result_to_dict(result: ProjectionResult) -> ProjectionResultDict:
    return {
        "totalInvested": result.total_invested,
        "totalInterest": result.total_interest,
        "finalAmount": result.final_amount,
    }


def retirement_result_to_dict(result: RetirementResult) -> RetirementResultDict:
    """
    Retirement result in the web client's shape.

    The monthly contribution is published as ``monthlyNeeded``.
    """
    return {
        "yearsToRetirement": result.years_to_retirement,
        "totalNeeded": result.total_needed,
        "monthlyNeeded": result.monthly_contribution_needed,
        "futureValueOfCurrentSavings": result.future_value_of_current_savings,
    }


def suggestion_to_dict(suggestion: InvestmentSuggestion) -> SuggestionDict:
    return {
        "name": suggestion.name,
        "allocation": suggestion.allocation_percent,
        "expectedReturn": suggestion.expected_return_description,
        "risk": suggestion.risk_level.value,
        "reason": suggestion.rationale,
        "theory": suggestion.concept_explanation,
        "practice": suggestion.practical_steps,
        "minAmount": suggestion.minimum_amount,
        "timeHorizon": suggestion.recommended_horizon,
        "category": suggestion.region.value,
    }


def bundle_to_dict(bundle: RecommendationBundle) -> BundleDict:
    return {
        "nationalInvestments": [suggestion_to_dict(s) for s in bundle.domestic_suggestions],
        "internationalInvestments": [
            suggestion_to_dict(s) for s in bundle.international_suggestions
        ],
        "summary": bundle.summary,
        "warnings": list(bundle.warnings),
    }


def comparison_to_dict(results: Sequence[ComparisonResult]) -> List[ComparisonRowDict]:
    """Comparator rows in ranking order; ``type`` carries the asset class."""
    return [
        {
            "name": r.name,
            "finalAmount": r.final_amount,
            "profit": r.profit,
            "profitPercent": r.profit_percent,
            "risk": r.risk_level.value,
            "type": r.asset_class.value,
        }
        for r in results
    ]


def allocation_to_dict(rec: AllocationRecommendation) -> Dict[str, Any]:
    return {
        "profile": rec.risk_profile.value,
        "recommendation": rec.recommendation,
        "suggestedAllocation": dict(rec.suggested_allocation),
        "expectedReturn": rec.expected_return_percent,
        "projectedValue": rec.projected_value,
        "totalInvested": rec.total_invested,
        "totalGains": rec.total_gains,
        "riskLevel": rec.risk_level.value,
    }


def profile_to_dict(profile: FinancialProfile) -> Dict[str, Any]:
    return {
        "monthlyIncome": profile.monthly_income,
        "monthlyExpenses": profile.monthly_essential_expenses,
        "leisureExpenses": profile.monthly_discretionary_expenses,
        "investmentProfile": profile.risk_profile.value,
        "age": profile.age,
    }


# ---------------------------------------------------------------------------
# JSON → inputs
# ---------------------------------------------------------------------------

def _validate(model_cls, data: Mapping[str, Any]):
    if not isinstance(data, Mapping):
        raise InvalidInputError(
            f"{model_cls.__name__} expects a JSON object, got {type(data).__name__}."
        )
    try:
        return model_cls.model_validate(dict(data))
    except PydanticValidationError as e:
        raise InvalidInputError(f"Invalid {model_cls.__name__}: {e}") from e


def profile_from_dict(data: Mapping[str, Any]) -> FinancialProfile:
    """
    Build a FinancialProfile from camelCase or snake_case keys.

    Raises
    ------
    InvalidInputError
        On missing keys, wrong types or out-of-range values.
    """
    return _validate(FinancialProfileConfig, data).to_profile()


def projection_input_from_dict(data: Mapping[str, Any]) -> ProjectionInput:
    return _validate(CompoundInterestRequest, data).to_input()


def retirement_input_from_dict(data: Mapping[str, Any]) -> RetirementInput:
    return _validate(RetirementRequest, data).to_input()


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def _read_versioned(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        config = json.load(f)

    if not isinstance(config, dict):
        raise InvalidInputError(f"{path} does not contain a JSON object.")

    schema_version = config.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"File schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )
    return config


def _write_versioned(path: Path, key: str, data: Any) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"schema_version": SCHEMA_VERSION, key: data}, f,
                  indent=2, ensure_ascii=False)


def save_result(data: Union[Mapping[str, Any], Sequence[Any]], path: Path) -> None:
    """
    Save a serialized result (output of a ``*_to_dict`` helper) to JSON.

    Examples
    --------
    >>> save_result(projection_result_to_dict(result), Path("projection.json"))
    """
    payload = dict(data) if isinstance(data, Mapping) else list(data)
    _write_versioned(path, "result", payload)


def load_result(path: Path) -> Any:
    """Load a result saved with save_result()."""
    config = _read_versioned(Path(path))
    if "result" not in config:
        raise InvalidInputError(f"{path} has no 'result' entry.")
    return config["result"]


def save_profile(profile: FinancialProfile, path: Path) -> None:
    _write_versioned(path, "profile", profile_to_dict(profile))


def load_profile(path: Path) -> FinancialProfile:
    """
    Load a FinancialProfile saved with save_profile().

    Raises
    ------
    InvalidInputError
        If the file has no ``profile`` entry or the profile is invalid.
    """
    config = _read_versioned(Path(path))
    if "profile" not in config:
        raise InvalidInputError(f"{path} has no 'profile' entry.")
    return profile_from_dict(config["profile"])
