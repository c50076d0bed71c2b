"""
Unit tests for the exception hierarchy.

Callers catch DinDinError (everything) or ValidationError (bad input)
without importing each concrete class.
"""

import pytest

from dindin.exceptions import (
    AdvisorError,
    ConfigurationError,
    DinDinError,
    InvalidFinancialProfileError,
    InvalidInputError,
    ValidationError,
)
from dindin.projection import ProjectionInput
from dindin.recommendations import generate_recommendations


class TestHierarchy:
    """Test exception inheritance."""

    @pytest.mark.parametrize("exc", [InvalidInputError, InvalidFinancialProfileError])
    def test_validation_family(self, exc):
        assert issubclass(exc, ValidationError)
        assert issubclass(exc, DinDinError)

    @pytest.mark.parametrize("exc", [ConfigurationError, AdvisorError])
    def test_not_validation_errors(self, exc):
        assert issubclass(exc, DinDinError)
        assert not issubclass(exc, ValidationError)

    def test_catch_all(self, broke_profile):
        """One except clause covers calculators and selector."""
        with pytest.raises(DinDinError):
            ProjectionInput(-1, 0, 0, 1)
        with pytest.raises(DinDinError):
            generate_recommendations(broke_profile)
