"""
Custom exceptions for DinDin.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across the calculators, the recommendation selector and the advisor.
All exceptions inherit from DinDinError, enabling catch-all handling
when needed.

Exception Hierarchy
-------------------
DinDinError (base)
├── ConfigurationError - Invalid configuration or settings
├── ValidationError - Data validation failures
│   ├── InvalidInputError - Calculator input contract violations
│   └── InvalidFinancialProfileError - Profile cannot be invested from
└── AdvisorError - External text generator failed or returned garbage

Usage
-----
>>> from dindin.exceptions import InvalidInputError, DinDinError
>>>
>>> # Raise specific exception
>>> raise InvalidInputError("years must be non-negative, got -1")
>>>
>>> # Catch all DinDin exceptions
>>> try:
...     result = project_retirement_need(inp)
>>> except DinDinError as e:
...     print(f"DinDin error: {e}")
"""


class DinDinError(Exception):
    """
    Base exception for all DinDin errors.

    Examples
    --------
    >>> try:
    ...     bundle = generate_recommendations(profile)
    ... except DinDinError as e:
    ...     logger.error(f"Recommendation failed: {e}")
    """
    pass


class ConfigurationError(DinDinError):
    """
    Invalid configuration or settings.

    Raised when a settings value or a configuration file cannot be used:
    - Unknown risk profile names in a profile file
    - Settings values outside their allowed range

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "log_level must be one of DEBUG, INFO, WARNING, ERROR, got 'TRACE'."
    ... )
    """
    pass


class ValidationError(DinDinError):
    """
    Data validation failures.

    Parent of the typed contract errors raised by the engine. Catch this
    to handle any bad-input condition without caring which calculator
    produced it.
    """
    pass


class InvalidInputError(ValidationError):
    """
    Calculator input contract violation.

    Raised by the projection calculators and the comparator when:
    - A currency amount is negative
    - A rate is NaN or infinite
    - retirement_age <= current_age
    - An unknown product id is requested

    Examples
    --------
    >>> raise InvalidInputError(
    ...     f"retirement_age ({retirement_age}) must be greater than "
    ...     f"current_age ({current_age})."
    ... )
    """
    pass


class InvalidFinancialProfileError(ValidationError):
    """
    Financial profile that cannot receive recommendations.

    Raised by the recommendation selector when the money left after
    essential and discretionary expenses is zero or negative, or when
    profile fields are out of range.

    Examples
    --------
    >>> raise InvalidFinancialProfileError(
    ...     f"available_to_invest must be positive, got {available:.2f}. "
    ...     f"Expenses consume the whole monthly income."
    ... )
    """
    pass


class AdvisorError(DinDinError):
    """
    External text generator failure.

    Raised when the generative-text service errors out or returns a
    payload that does not describe a valid recommendation bundle. The
    advisor catches it and answers with the deterministic selector.
    """
    pass
