"""
Investment comparator for DinDin.

Purpose
-------
Side-by-side comparison of common Brazilian investments for a single
lump sum held for a number of years, net of income tax and fees.

Computation
-----------
For each selected product with annual rate ``rate`` (percent):

- gross final amount: amount * (1 + rate / 100 / 12) ** (years * 12)
- profit taxed by the product's rule:
    regressive  20% (< 1 year), 17,5% (< 2 years), 15% (>= 2 years)
    flat        15%
    exempt      0%
- fees: final amount * fee / 100, taken from the net profit

Results are sorted by net final amount, best first.

Example
-------
>>> rows = compare_investments(10_000, 5, ["cdb", "poupanca"])
>>> [r.product_id for r in rows]
['cdb', 'poupanca']
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from .constants import (
    FLAT_INCOME_TAX,
    MAX_PROJECTION_YEARS,
    MONTHS_PER_YEAR,
    REGRESSIVE_TAX_BRACKETS,
)
from .exceptions import InvalidInputError
from .types import AssetClass, RiskLevel, Taxation
from .utils import annual_percent_to_monthly, check_finite

__all__ = [
    "Product",
    "ComparisonResult",
    "PRODUCTS",
    "DEFAULT_SELECTION",
    "income_tax_rate",
    "compare_investments",
    "comparison_table",
]


@dataclass(frozen=True)
class Product:
    """
    A product available in the comparator.

    Parameters
    ----------
    product_id : str
        Stable identifier used by the web client.
    name : str
        Display name.
    asset_class : AssetClass
    annual_rate : float
        Expected annual return in percent.
    risk_level : RiskLevel
    minimum_amount : float
        Minimum investment (R$).
    liquidity : str
        "daily", "30d", "90d", "1y" or "long".
    taxation : Taxation
    fee_percent : float
        Fees charged on the final amount, in percent.
    """
    product_id: str
    name: str
    asset_class: AssetClass
    annual_rate: float
    risk_level: RiskLevel
    minimum_amount: float
    liquidity: str
    taxation: Taxation
    fee_percent: float


def _product(*args) -> Product:
    return Product(*args)


PRODUCTS: Mapping[str, Product] = MappingProxyType({
    p.product_id: p for p in (
        _product("poupanca", "Poupança", AssetClass.FIXED_INCOME, 6.8, RiskLevel.LOW,
                 0, "daily", Taxation.EXEMPT, 0.0),
        _product("cdb", "CDB 100% CDI", AssetClass.FIXED_INCOME, 13.75, RiskLevel.LOW,
                 100, "daily", Taxation.REGRESSIVE, 0.0),
        _product("tesouro_selic", "Tesouro Selic", AssetClass.FIXED_INCOME, 13.65,
                 RiskLevel.LOW, 30, "daily", Taxation.REGRESSIVE, 0.1),
        _product("lci", "LCI", AssetClass.FIXED_INCOME, 12.5, RiskLevel.LOW,
                 1000, "90d", Taxation.EXEMPT, 0.0),
        _product("acoes", "Ações IBOVESPA", AssetClass.EQUITIES, 15.5, RiskLevel.HIGH,
                 100, "daily", Taxation.FLAT, 0.0),
        _product("fiis", "FIIs", AssetClass.EQUITIES, 12.8, RiskLevel.MEDIUM,
                 100, "daily", Taxation.EXEMPT, 0.0),
        _product("bitcoin", "Bitcoin", AssetClass.CRYPTO, 25.0, RiskLevel.HIGH,
                 50, "daily", Taxation.FLAT, 0.5),
    )
})
"""Read-only product catalog keyed by product_id."""

DEFAULT_SELECTION = ("cdb", "acoes", "fiis")


@dataclass(frozen=True)
class ComparisonResult:
    """Net outcome of one product over the comparison period."""
    product_id: str
    name: str
    final_amount: float
    profit: float
    profit_percent: float
    risk_level: RiskLevel
    asset_class: AssetClass


def income_tax_rate(taxation: Taxation, years: float) -> float:
    """Income tax rate on profit for a product held *years* years."""
    taxation = Taxation(taxation)
    if taxation is Taxation.EXEMPT:
        return 0.0
    if taxation is Taxation.FLAT:
        return FLAT_INCOME_TAX
    for min_years, rate in REGRESSIVE_TAX_BRACKETS:
        if years >= min_years:
            return rate
    return REGRESSIVE_TAX_BRACKETS[-1][1]


def _evaluate(product: Product, amount: float, years: float) -> ComparisonResult:
    months = years * MONTHS_PER_YEAR
    final = amount * (1.0 + annual_percent_to_monthly(product.annual_rate)) ** months
    profit = final - amount

    net_profit = profit * (1.0 - income_tax_rate(product.taxation, years))
    net_profit -= final * product.fee_percent / 100.0

    return ComparisonResult(
        product_id=product.product_id,
        name=product.name,
        final_amount=amount + net_profit,
        profit=net_profit,
        profit_percent=net_profit / amount * 100.0,
        risk_level=product.risk_level,
        asset_class=product.asset_class,
    )


def compare_investments(
    amount: float,
    period_years: float,
    product_ids: Optional[Iterable[str]] = None,
) -> List[ComparisonResult]:
    """
    Compare products for a lump sum held *period_years* years.

    Parameters
    ----------
    amount : float
        Amount invested at the start (R$, > 0).
    period_years : float
        Holding period in years (> 0, at most MAX_PROJECTION_YEARS).
    product_ids : iterable of str, optional
        Products to compare. Defaults to DEFAULT_SELECTION. Duplicates
        are compared once.

    Returns
    -------
    list of ComparisonResult
        Sorted by final_amount, highest first.

    Raises
    ------
    InvalidInputError
        On non-positive amount or period, a period above
        MAX_PROJECTION_YEARS, an empty selection or an unknown product id.
    """
    check_finite("amount", amount)
    check_finite("period_years", period_years)
    if amount <= 0:
        raise InvalidInputError(f"amount must be positive (got {amount}).")
    if period_years <= 0:
        raise InvalidInputError(f"period_years must be positive (got {period_years}).")
    if period_years > MAX_PROJECTION_YEARS:
        raise InvalidInputError(
            f"period_years must be at most {MAX_PROJECTION_YEARS} (got {period_years})."
        )

    ids = list(dict.fromkeys(DEFAULT_SELECTION if product_ids is None else product_ids))
    if not ids:
        raise InvalidInputError("Select at least one investment to compare.")
    unknown = [i for i in ids if i not in PRODUCTS]
    if unknown:
        raise InvalidInputError(
            f"Unknown investments: {unknown}. Available: {sorted(PRODUCTS)}."
        )

    results = [_evaluate(PRODUCTS[i], amount, period_years) for i in ids]
    return sorted(results, key=lambda r: r.final_amount, reverse=True)


def comparison_table(results: Sequence[ComparisonResult]) -> pd.DataFrame:
    """Tabular view of comparator results, indexed by product name."""
    columns = ["final_amount", "profit", "profit_percent", "risk_level", "asset_class"]
    if not results:
        return pd.DataFrame(columns=columns)
    rows = [
        {
            "name": r.name,
            "final_amount": r.final_amount,
            "profit": r.profit,
            "profit_percent": r.profit_percent,
            "risk_level": r.risk_level.value,
            "asset_class": r.asset_class.value,
        }
        for r in results
    ]
    return pd.DataFrame(rows).set_index("name")[columns]
