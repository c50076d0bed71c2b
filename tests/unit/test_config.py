"""
Unit tests for config.py Pydantic models.

Tests validation, aliases, conversion to engine inputs and application
settings.
"""

import pytest

from dindin.config import (
    AllocationRequest,
    AppSettings,
    ComparisonRequest,
    CompoundInterestRequest,
    FinancialProfileConfig,
    RetirementRequest,
    load_settings,
)
from dindin.exceptions import ConfigurationError
from dindin.types import RiskProfile


class TestCompoundInterestRequest:
    """Tests for CompoundInterestRequest validation."""

    def test_camel_case_keys(self):
        """Web client payload is accepted as-is."""
        req = CompoundInterestRequest.model_validate({
            "initialAmount": 10_000,
            "monthlyContribution": 500,
            "interestRate": 12,
            "timePeriod": 10,
        })
        assert req.initial_amount == 10_000
        assert req.time_period == 10

    def test_snake_case_names(self):
        req = CompoundInterestRequest(initial_amount=1, interest_rate=5, time_period=2)
        assert req.monthly_contribution == 0.0

    def test_to_input(self):
        inp = CompoundInterestRequest(
            initial_amount=1000, monthly_contribution=100, interest_rate=6, time_period=3
        ).to_input()
        assert inp.annual_rate_percent == 6
        assert inp.months == 36

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            CompoundInterestRequest(initial_amount=-1, interest_rate=5, time_period=2)

    def test_horizon_bounds(self):
        with pytest.raises(ValueError):
            CompoundInterestRequest(initial_amount=1, interest_rate=5, time_period=101)

    def test_fractional_years_rejected(self):
        with pytest.raises(ValueError):
            CompoundInterestRequest(initial_amount=1, interest_rate=5, time_period=2.5)

    def test_nan_rate_rejected(self):
        with pytest.raises(ValueError):
            CompoundInterestRequest(initial_amount=1, interest_rate=float("nan"), time_period=2)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            CompoundInterestRequest(
                initial_amount=1, interest_rate=5, time_period=2, inflation=4
            )

    def test_immutable(self):
        req = CompoundInterestRequest(initial_amount=1, interest_rate=5, time_period=2)
        with pytest.raises(Exception):
            req.time_period = 3

    def test_dump_by_alias(self):
        req = CompoundInterestRequest(initial_amount=1, interest_rate=5, time_period=2)
        dumped = req.model_dump(by_alias=True)
        assert set(dumped) == {"initialAmount", "monthlyContribution", "interestRate", "timePeriod"}


class TestRetirementRequest:
    """Tests for RetirementRequest validation."""

    def test_valid(self):
        req = RetirementRequest.model_validate({
            "currentAge": 30, "retirementAge": 60,
            "desiredIncome": 5000, "currentSavings": 50_000,
        })
        inp = req.to_input()
        assert inp.retirement_age == 60
        assert inp.desired_monthly_income == 5000

    def test_retirement_age_must_exceed_current(self):
        with pytest.raises(ValueError, match="must be greater than current_age"):
            RetirementRequest(current_age=60, retirement_age=60, desired_income=1000)

    def test_age_bounds(self):
        with pytest.raises(ValueError):
            RetirementRequest(current_age=30, retirement_age=150, desired_income=1000)


class TestFinancialProfileConfig:
    """Tests for FinancialProfileConfig."""

    def test_to_profile(self, profile_payload):
        profile = FinancialProfileConfig.model_validate(profile_payload).to_profile()
        assert profile.risk_profile is RiskProfile.MODERATE
        assert profile.monthly_discretionary_expenses == 1000
        assert profile.available_to_invest == 3000

    def test_unknown_profile_rejected(self, profile_payload):
        profile_payload["investmentProfile"] = "reckless"
        with pytest.raises(ValueError):
            FinancialProfileConfig.model_validate(profile_payload)

    def test_leisure_defaults_to_zero(self, profile_payload):
        del profile_payload["leisureExpenses"]
        config = FinancialProfileConfig.model_validate(profile_payload)
        assert config.leisure_expenses == 0.0

    def test_overspending_profile_accepted(self, profile_payload):
        profile_payload["monthlyExpenses"] = 9000
        config = FinancialProfileConfig.model_validate(profile_payload)
        assert config.to_profile().available_to_invest < 0

    def test_age_zero_rejected(self, profile_payload):
        profile_payload["age"] = 0
        with pytest.raises(ValueError):
            FinancialProfileConfig.model_validate(profile_payload)


class TestComparisonRequest:
    """Tests for ComparisonRequest."""

    def test_default_selection(self):
        req = ComparisonRequest(amount=1000, period=2)
        assert req.investments == ["cdb", "acoes", "fiis"]
        assert len(req.evaluate()) == 3

    def test_amount_must_be_positive(self):
        with pytest.raises(ValueError):
            ComparisonRequest(amount=0, period=2)

    def test_period_bounds(self):
        with pytest.raises(ValueError):
            ComparisonRequest(amount=1000, period=0)
        with pytest.raises(ValueError):
            ComparisonRequest(amount=1000, period=51)

    def test_empty_selection_rejected(self):
        with pytest.raises(ValueError):
            ComparisonRequest(amount=1000, period=2, investments=[])


class TestAllocationRequest:
    """Tests for AllocationRequest."""

    def test_evaluate(self):
        rec = AllocationRequest.model_validate({
            "profile": "aggressive", "amount": 1000,
            "timeHorizon": 5, "monthlyContribution": 100,
        }).evaluate()
        assert rec.expected_return_percent == 18.0
        assert rec.total_invested == pytest.approx(1000 + 100 * 60)

    def test_unknown_profile_rejected(self):
        with pytest.raises(ValueError):
            AllocationRequest(profile="yolo", amount=1000, time_horizon=5)


class TestAppSettings:
    """Tests for AppSettings with environment variables."""

    def test_defaults(self, monkeypatch):
        for var in ("DINDIN_DEBUG", "DINDIN_LOG_LEVEL", "DINDIN_CURRENCY_SYMBOL"):
            monkeypatch.delenv(var, raising=False)
        settings = AppSettings(_env_file=None)

        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.currency_symbol == "R$"
        assert settings.effective_log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DINDIN_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("DINDIN_CURRENCY_SYMBOL", "US$")
        settings = AppSettings(_env_file=None)

        assert settings.log_level == "WARNING"
        assert settings.currency_symbol == "US$"

    def test_debug_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("DINDIN_DEBUG", "true")
        settings = AppSettings(_env_file=None)
        assert settings.effective_log_level == "DEBUG"

    def test_load_settings_invalid_level(self, monkeypatch):
        monkeypatch.setenv("DINDIN_LOG_LEVEL", "TRACE")
        with pytest.raises(ConfigurationError, match="DINDIN_"):
            load_settings()

    def test_load_settings_overrides(self):
        assert load_settings(log_level="ERROR").log_level == "ERROR"
