"""General utilities for DinDin

Contents
--------
- Validation helpers
- Rate conversions (annual percent → monthly)
- Annuity helpers (level payment for a future-value target)
- Formatting helpers (format_currency, axis formatters)
"""

from __future__ import annotations

import math

from .constants import CURRENCY_SYMBOL, MONTHS_PER_YEAR
from .exceptions import InvalidInputError

__all__ = [
    # Validation
    "check_non_negative",
    "check_finite",
    # Rates
    "annual_percent_to_monthly",
    # Annuities
    "future_value_annuity_payment",
    # Formatting
    "format_currency",
    "thousands_formatter",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_finite(name: str, value: float) -> None:
    """Raise if *value* is NaN or infinite."""
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be a finite number (got {value}).")


def check_non_negative(name: str, value: float) -> None:
    """Raise if *value* is negative (strict) or not finite."""
    check_finite(name, value)
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative (got {value}).")


# ---------------------------------------------------------------------------
# Rate conversions
# ---------------------------------------------------------------------------

def annual_percent_to_monthly(rate_percent: float) -> float:
    """Convert a nominal annual percentage to a monthly rate.

    Uses simple division (12% a.a. → 1% a.m.), the convention of the
    Brazilian calculators, not the compounded (1 + r) ** (1/12) - 1.
    """
    return rate_percent / 100.0 / MONTHS_PER_YEAR


# ---------------------------------------------------------------------------
# Annuity helpers
# ---------------------------------------------------------------------------

def future_value_annuity_payment(target: float, monthly_rate: float, months: int) -> float:
    """Level monthly payment whose future value reaches *target*.

    Solves PMT * ((1 + r) ** n - 1) / r == target for PMT.

    Degenerate cases are defined instead of dividing by zero:
    - target <= 0: nothing to save, returns 0.0
    - months == 0: the whole target is due now, returns target
    - r == 0: plain division target / months

    Raises InvalidInputError when (1 + r) ** months overflows a float.
    """
    if target <= 0:
        return 0.0
    if months <= 0:
        return float(target)
    if monthly_rate == 0:
        return target / months
    try:
        growth = (1.0 + monthly_rate) ** months
    except OverflowError:
        raise InvalidInputError(
            f"Annuity growth overflows over {months} months at {monthly_rate} monthly."
        ) from None
    return target * monthly_rate / (growth - 1.0)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_currency(value: float, decimals: int = 2, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Format a monetary value with Brazilian digit grouping.

    Parameters
    ----------
    value : float
        Monetary value in reais.
    decimals : int, default 2
        Number of decimal places to display.
    symbol : str, default "R$"
        Currency symbol prefix.

    Returns
    -------
    str
        Formatted currency string.

    Examples
    --------
    >>> format_currency(1234.5)
    'R$ 1.234,50'
    >>> format_currency(1_500_000, decimals=0)
    'R$ 1.500.000'
    >>> format_currency(-20)
    '-R$ 20,00'
    """
    body = f"{abs(value):,.{decimals}f}"
    body = body.replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol} {body}"


def thousands_formatter(x, pos):
    """
    Format axis values as thousands for matplotlib FuncFormatter.

    - 115_000 → "115k"
    - 1_500 → "1.5k"
    - 0 → "0"
    """
    if x == 0:
        return '0'
    val = x / 1e3
    return f'{val:.0f}k' if val == int(val) else f'{val:.1f}k'
