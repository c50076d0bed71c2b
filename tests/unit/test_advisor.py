"""
Unit tests for advisor module.

Tests payload validation and the generator → fallback flow with fake
text generators.
"""

import logging

import pytest

from dindin.advisor import (
    AdvisorResponse,
    TextGenerator,
    bundle_from_payload,
    personalized_recommendations,
)
from dindin.exceptions import AdvisorError, InvalidFinancialProfileError
from dindin.recommendations import generate_recommendations
from dindin.types import Region, RiskLevel


# ---------------------------------------------------------------------------
# Fake generators
# ---------------------------------------------------------------------------

class StaticGenerator:
    """Returns a fixed payload and records the calls."""

    def __init__(self, payload):
        self.payload = payload
        self.calls = 0

    def generate(self, profile):
        self.calls += 1
        return self.payload


class FailingGenerator:
    """Simulates a network or quota error."""

    def __init__(self):
        self.calls = 0

    def generate(self, profile):
        self.calls += 1
        raise ConnectionError("service unavailable")


# ---------------------------------------------------------------------------
# bundle_from_payload Tests
# ---------------------------------------------------------------------------

class TestBundleFromPayload:
    """Tests for bundle_from_payload."""

    def test_valid_payload(self, generator_payload):
        bundle = bundle_from_payload(generator_payload)

        assert [s.name for s in bundle.domestic_suggestions] == ["Tesouro Selic", "CDB"]
        assert bundle.international_suggestions[0].region is Region.INTERNATIONAL
        assert bundle.domestic_suggestions[0].risk_level is RiskLevel.LOW
        assert bundle.summary == "Generated summary"
        assert bundle.warnings == ("Generated warning",)

    def test_region_comes_from_list(self, generator_payload):
        """A mislabeled category does not move a suggestion."""
        generator_payload["nationalInvestments"][0]["category"] = "international"
        bundle = bundle_from_payload(generator_payload)
        assert all(s.region is Region.DOMESTIC for s in bundle.domestic_suggestions)

    def test_extra_keys_ignored(self, generator_payload):
        generator_payload["model"] = "some-llm"
        generator_payload["internationalInvestments"][0]["ticker"] = "IVVB11"
        bundle_from_payload(generator_payload)

    def test_warnings_optional(self, generator_payload):
        del generator_payload["warnings"]
        assert bundle_from_payload(generator_payload).warnings == ()

    def test_missing_key_rejected(self, generator_payload):
        del generator_payload["summary"]
        with pytest.raises(AdvisorError, match="Malformed"):
            bundle_from_payload(generator_payload)

    @pytest.mark.parametrize("label, expected", [
        ("Baixo", RiskLevel.LOW),
        ("Médio", RiskLevel.MEDIUM),
        ("medio", RiskLevel.MEDIUM),
        ("ALTO", RiskLevel.HIGH),
        ("High", RiskLevel.HIGH),
    ])
    def test_portuguese_risk_labels(self, generator_payload, label, expected):
        generator_payload["nationalInvestments"][0]["risk"] = label
        bundle = bundle_from_payload(generator_payload)
        assert bundle.domestic_suggestions[0].risk_level is expected

    def test_bad_risk_rejected(self, generator_payload):
        generator_payload["nationalInvestments"][0]["risk"] = "extreme"
        with pytest.raises(AdvisorError):
            bundle_from_payload(generator_payload)

    def test_empty_region_rejected(self, generator_payload):
        generator_payload["internationalInvestments"] = []
        with pytest.raises(AdvisorError):
            bundle_from_payload(generator_payload)

    def test_allocations_must_sum_to_100(self, generator_payload):
        generator_payload["nationalInvestments"][0]["allocation"] = 30
        with pytest.raises(AdvisorError, match="domestic allocations sum to 70.0%"):
            bundle_from_payload(generator_payload)

    def test_rounding_tolerated(self, generator_payload):
        generator_payload["nationalInvestments"][0]["allocation"] = 60.5
        bundle_from_payload(generator_payload)

    def test_non_mapping_rejected(self):
        with pytest.raises(AdvisorError, match="JSON object"):
            bundle_from_payload(["not", "a", "bundle"])


# ---------------------------------------------------------------------------
# personalized_recommendations Tests
# ---------------------------------------------------------------------------

class TestPersonalizedRecommendations:
    """Tests for personalized_recommendations."""

    def test_fakes_satisfy_protocol(self, generator_payload):
        assert isinstance(StaticGenerator(generator_payload), TextGenerator)
        assert isinstance(FailingGenerator(), TextGenerator)

    def test_no_generator_uses_selector(self, conservative_profile):
        response = personalized_recommendations(conservative_profile)

        assert isinstance(response, AdvisorResponse)
        assert response.source == "fallback"
        assert response.bundle == generate_recommendations(conservative_profile)

    def test_generator_answer_used(self, moderate_profile, generator_payload):
        generator = StaticGenerator(generator_payload)
        response = personalized_recommendations(moderate_profile, generator)

        assert response.source == "generator"
        assert response.bundle.summary == "Generated summary"
        assert generator.calls == 1

    def test_generator_error_falls_back(self, moderate_profile, caplog):
        with caplog.at_level(logging.WARNING, logger="dindin.advisor"):
            response = personalized_recommendations(moderate_profile, FailingGenerator())

        assert response.source == "fallback"
        assert response.bundle == generate_recommendations(moderate_profile)
        assert "service unavailable" in caplog.text

    def test_malformed_payload_falls_back(self, moderate_profile):
        response = personalized_recommendations(
            moderate_profile, StaticGenerator({"summary": "incomplete"})
        )
        assert response.source == "fallback"
        assert len(response.bundle.domestic_suggestions) == 5

    def test_precondition_checked_before_generator(self, broke_profile, generator_payload):
        generator = StaticGenerator(generator_payload)
        with pytest.raises(InvalidFinancialProfileError):
            personalized_recommendations(broke_profile, generator)
        assert generator.calls == 0

    def test_portuguese_payload_used(self, moderate_profile, generator_payload):
        """Payload labelled the way a Portuguese prompt answers."""
        for item in generator_payload["nationalInvestments"]:
            item["risk"], item["category"] = "Baixo", "Nacional"
        international = generator_payload["internationalInvestments"][0]
        international["risk"], international["category"] = "Médio", "Internacional"

        response = personalized_recommendations(moderate_profile, StaticGenerator(generator_payload))

        assert response.source == "generator"
        assert response.bundle.international_suggestions[0].risk_level is RiskLevel.MEDIUM
