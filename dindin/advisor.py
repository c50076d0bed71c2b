"""
Personalized recommendations with a deterministic fallback.

Purpose
-------
The site first asks an external generative-text service for a bundle
and answers with the rule-based selector when that service fails or
returns something unusable. No network client lives here: anything
implementing TextGenerator can be plugged in.

Flow
----
1. Reject profiles with nothing to invest (same error as the selector),
   before any external call.
2. Ask the generator, validate its JSON payload.
3. On any failure, log a warning and return generate_recommendations().

Example
-------
>>> response = personalized_recommendations(profile)          # no generator
>>> response.source
'fallback'
>>> response = personalized_recommendations(profile, MyClient())
>>> response.source in {"generator", "fallback"}
True
"""

from __future__ import annotations

import logging
import math
import unicodedata
from dataclasses import dataclass
from typing import Any, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import Protocol, runtime_checkable

from .constants import ALLOCATION_TOLERANCE
from .exceptions import AdvisorError, InvalidFinancialProfileError
from .recommendations import (
    FinancialProfile,
    InvestmentSuggestion,
    RecommendationBundle,
    generate_recommendations,
)
from .types import Region, RiskLevel

__all__ = [
    "TextGenerator",
    "AdvisorResponse",
    "bundle_from_payload",
    "personalized_recommendations",
]

logger = logging.getLogger(__name__)

Source = Literal["generator", "fallback"]


@runtime_checkable
class TextGenerator(Protocol):
    """Anything that turns a profile into a recommendation payload."""

    def generate(self, profile: FinancialProfile) -> Mapping[str, Any]:
        ...


@dataclass(frozen=True)
class AdvisorResponse:
    """Bundle plus where it came from ("generator" or "fallback")."""
    bundle: RecommendationBundle
    source: Source


# ---------------------------------------------------------------------------
# Payload validation
# ---------------------------------------------------------------------------

# Generators prompted in Portuguese answer "Baixo" / "Médio" / "Alto".
_RISK_LABELS = {
    "baixo": RiskLevel.LOW,
    "medio": RiskLevel.MEDIUM,
    "alto": RiskLevel.HIGH,
}


def _normalize_risk(value: Any) -> Any:
    """Map a Portuguese risk label to RiskLevel, ignoring case and accents."""
    if not isinstance(value, str):
        return value
    folded = unicodedata.normalize("NFKD", value.strip().lower())
    folded = "".join(c for c in folded if not unicodedata.combining(c))
    return _RISK_LABELS.get(folded, folded)


class _SuggestionPayload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    name: str = Field(min_length=1)
    allocation: float = Field(ge=0, le=100)
    expectedReturn: str
    risk: RiskLevel
    reason: str
    theory: str
    practice: str
    minAmount: float = Field(default=0.0, ge=0)
    timeHorizon: str
    category: str = ""

    @field_validator("risk", mode="before")
    @classmethod
    def normalize_risk(cls, v):
        return _normalize_risk(v)


class _BundlePayload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    nationalInvestments: List[_SuggestionPayload] = Field(min_length=1)
    internationalInvestments: List[_SuggestionPayload] = Field(min_length=1)
    summary: str
    warnings: List[str] = Field(default_factory=list)


def _to_suggestion(item: _SuggestionPayload, region: Region) -> InvestmentSuggestion:
    return InvestmentSuggestion(
        name=item.name,
        allocation_percent=item.allocation,
        expected_return_description=item.expectedReturn,
        risk_level=item.risk,
        rationale=item.reason,
        concept_explanation=item.theory,
        practical_steps=item.practice,
        minimum_amount=item.minAmount,
        recommended_horizon=item.timeHorizon,
        region=region,
    )


def bundle_from_payload(payload: Mapping[str, Any]) -> RecommendationBundle:
    """
    Convert a generator JSON payload into a RecommendationBundle.

    Suggestions are assigned to a region by the list they appear in, not
    by their ``category`` text.

    Raises
    ------
    AdvisorError
        If the payload is not a mapping, misses required keys, has values
        of the wrong type, or a region's allocations do not add up to 100.
    """
    if not isinstance(payload, Mapping):
        raise AdvisorError(
            f"Generator payload must be a JSON object, got {type(payload).__name__}."
        )
    try:
        parsed = _BundlePayload.model_validate(dict(payload))
    except PydanticValidationError as e:
        raise AdvisorError(f"Malformed generator payload: {e}") from e

    bundle = RecommendationBundle(
        domestic_suggestions=tuple(
            _to_suggestion(s, Region.DOMESTIC) for s in parsed.nationalInvestments
        ),
        international_suggestions=tuple(
            _to_suggestion(s, Region.INTERNATIONAL) for s in parsed.internationalInvestments
        ),
        summary=parsed.summary,
        warnings=tuple(parsed.warnings),
    )
    for region in Region:
        total = bundle.allocation_total(region)
        if abs(total - 100.0) > ALLOCATION_TOLERANCE:
            raise AdvisorError(
                f"{region.value} allocations sum to {total:.1f}%, expected 100%."
            )
    return bundle


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def personalized_recommendations(
    profile: FinancialProfile,
    generator: Optional[TextGenerator] = None,
) -> AdvisorResponse:
    """
    Recommendations from the generator when possible, the selector otherwise.

    Parameters
    ----------
    profile : FinancialProfile
    generator : TextGenerator, optional
        External text generator. When None the selector answers directly.

    Returns
    -------
    AdvisorResponse

    Raises
    ------
    InvalidFinancialProfileError
        If the profile has nothing to invest. The generator is not called.
    """
    available = profile.available_to_invest
    if not math.isfinite(available) or available <= 0:
        raise InvalidFinancialProfileError(
            f"available_to_invest must be positive, got {available:.2f}."
        )

    if generator is None:
        return AdvisorResponse(generate_recommendations(profile), "fallback")

    try:
        bundle = bundle_from_payload(generator.generate(profile))
    except Exception as e:
        logger.warning("text generator failed, using rule-based recommendations: %s", e)
        return AdvisorResponse(generate_recommendations(profile), "fallback")

    logger.debug("recommendations served by %s", type(generator).__name__)
    return AdvisorResponse(bundle, "generator")
