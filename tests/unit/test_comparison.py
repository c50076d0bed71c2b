"""
Unit tests for comparison module.

Tests the investment comparator: product catalog, income tax rules,
net results and ranking.
"""

import pytest

from dindin.comparison import (
    DEFAULT_SELECTION,
    PRODUCTS,
    compare_investments,
    comparison_table,
    income_tax_rate,
)
from dindin.exceptions import InvalidInputError
from dindin.types import AssetClass, RiskLevel, Taxation


def gross_final(amount, rate_percent, years):
    return amount * (1 + rate_percent / 100 / 12) ** (years * 12)


# ---------------------------------------------------------------------------
# Catalog Tests
# ---------------------------------------------------------------------------

class TestProducts:
    """Tests for the PRODUCTS catalog."""

    def test_seven_products(self):
        assert set(PRODUCTS) == {
            "poupanca", "cdb", "tesouro_selic", "lci", "acoes", "fiis", "bitcoin"
        }

    def test_ids_match_keys(self):
        assert all(key == p.product_id for key, p in PRODUCTS.items())

    def test_default_selection_exists(self):
        assert all(pid in PRODUCTS for pid in DEFAULT_SELECTION)

    def test_reference_rates(self):
        assert PRODUCTS["poupanca"].annual_rate == 6.8
        assert PRODUCTS["cdb"].annual_rate == 13.75
        assert PRODUCTS["bitcoin"].asset_class is AssetClass.CRYPTO
        assert PRODUCTS["bitcoin"].fee_percent == 0.5
        assert PRODUCTS["lci"].taxation is Taxation.EXEMPT

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            PRODUCTS["new"] = PRODUCTS["cdb"]


# ---------------------------------------------------------------------------
# Tax Tests
# ---------------------------------------------------------------------------

class TestIncomeTax:
    """Tests for income_tax_rate."""

    @pytest.mark.parametrize("years, rate", [
        (0.5, 0.20),
        (1, 0.175),
        (1.5, 0.175),
        (2, 0.15),
        (10, 0.15),
    ])
    def test_regressive_brackets(self, years, rate):
        assert income_tax_rate(Taxation.REGRESSIVE, years) == rate

    def test_flat_rate(self):
        assert income_tax_rate(Taxation.FLAT, 0.5) == 0.15
        assert income_tax_rate(Taxation.FLAT, 20) == 0.15

    def test_exempt(self):
        assert income_tax_rate("exempt", 3) == 0.0


# ---------------------------------------------------------------------------
# Comparator Tests
# ---------------------------------------------------------------------------

class TestCompareInvestments:
    """Tests for compare_investments."""

    def test_exempt_product_has_no_deductions(self):
        [result] = compare_investments(10_000, 5, ["poupanca"])
        assert result.final_amount == pytest.approx(gross_final(10_000, 6.8, 5))

    def test_regressive_tax_applied(self):
        [result] = compare_investments(10_000, 5, ["cdb"])
        profit = gross_final(10_000, 13.75, 5) - 10_000
        assert result.profit == pytest.approx(profit * 0.85)
        assert result.final_amount == pytest.approx(10_000 + profit * 0.85)

    def test_short_period_uses_higher_bracket(self):
        [result] = compare_investments(10_000, 1, ["cdb"])
        profit = gross_final(10_000, 13.75, 1) - 10_000
        assert result.profit == pytest.approx(profit * (1 - 0.175))

    def test_fee_deducted_from_profit(self):
        [result] = compare_investments(1000, 3, ["bitcoin"])
        final = gross_final(1000, 25.0, 3)
        expected = (final - 1000) * 0.85 - final * 0.005
        assert result.profit == pytest.approx(expected)
        assert result.profit_percent == pytest.approx(expected / 1000 * 100)

    def test_sorted_best_first(self):
        results = compare_investments(10_000, 5, list(PRODUCTS))
        finals = [r.final_amount for r in results]
        assert finals == sorted(finals, reverse=True)
        assert len(results) == 7

    def test_cdb_beats_savings(self):
        results = compare_investments(10_000, 5, ["poupanca", "cdb"])
        assert [r.product_id for r in results] == ["cdb", "poupanca"]

    def test_default_selection(self):
        results = compare_investments(5000, 2)
        assert {r.product_id for r in results} == set(DEFAULT_SELECTION)

    def test_duplicates_compared_once(self):
        results = compare_investments(5000, 2, ["cdb", "cdb", "lci"])
        assert len(results) == 2

    def test_result_carries_risk_and_class(self):
        [result] = compare_investments(1000, 2, ["fiis"])
        assert result.risk_level is RiskLevel.MEDIUM
        assert result.asset_class is AssetClass.EQUITIES

    def test_unknown_product_rejected(self):
        with pytest.raises(InvalidInputError, match="Unknown investments"):
            compare_investments(1000, 2, ["cdb", "nft"])

    def test_empty_selection_rejected(self):
        with pytest.raises(InvalidInputError, match="at least one"):
            compare_investments(1000, 2, [])

    @pytest.mark.parametrize("amount", [0, -100])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(InvalidInputError, match="amount must be positive"):
            compare_investments(amount, 2)

    def test_non_positive_period_rejected(self):
        with pytest.raises(InvalidInputError, match="period_years"):
            compare_investments(1000, 0)

    def test_period_upper_bound(self):
        with pytest.raises(InvalidInputError, match="at most 100"):
            compare_investments(1000, 1e6, ["bitcoin"])


class TestComparisonTable:
    """Tests for comparison_table."""

    def test_table_follows_ranking(self):
        results = compare_investments(10_000, 5, ["poupanca", "cdb", "bitcoin"])
        df = comparison_table(results)
        assert list(df.index) == [r.name for r in results]
        assert list(df.columns) == [
            "final_amount", "profit", "profit_percent", "risk_level", "asset_class"
        ]
        assert df.loc["Bitcoin", "asset_class"] == "crypto"

    def test_empty_table(self):
        df = comparison_table([])
        assert df.empty
