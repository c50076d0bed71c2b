"""
Unit tests for plotting.py module.

Tests chart construction for:
- plot_projection(): growth curve from projection_schedule
- plot_comparison(): comparator bars
- plot_allocation(): bundle allocation pie
"""

import pytest

# Use non-interactive backend for testing
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from dindin.comparison import compare_investments
from dindin.plotting import plot_allocation, plot_comparison, plot_projection
from dindin.projection import ProjectionInput
from dindin.recommendations import RecommendationBundle, generate_recommendations


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


# ============================================================================
# PROJECTION
# ============================================================================

class TestPlotProjection:
    """Test plot_projection."""

    def test_returns_fig_ax(self, projection_input):
        fig, ax = plot_projection(projection_input)
        assert fig is ax.figure
        # balance and invested lines
        assert len(ax.get_lines()) == 2

    def test_line_has_point_per_year(self, projection_input):
        _, ax = plot_projection(projection_input)
        xdata = ax.get_lines()[0].get_xdata()
        assert len(xdata) == projection_input.years + 1

    def test_custom_title(self, projection_input):
        _, ax = plot_projection(projection_input, title="My plan")
        assert ax.get_title() == "My plan"

    def test_draws_into_existing_axes(self, projection_input):
        fig, ax = plt.subplots()
        out_fig, out_ax = plot_projection(projection_input, ax=ax)
        assert out_ax is ax
        assert out_fig is fig

    def test_save_path(self, tmp_path):
        path = tmp_path / "growth.png"
        plot_projection(ProjectionInput(1000, 100, 10, 3), save_path=str(path))
        assert path.exists()
        assert path.stat().st_size > 0


# ============================================================================
# COMPARISON
# ============================================================================

class TestPlotComparison:
    """Test plot_comparison."""

    def test_one_bar_per_product(self):
        results = compare_investments(10_000, 5, ["poupanca", "cdb", "bitcoin"])
        _, ax = plot_comparison(results)
        assert len(ax.patches) == 3

    def test_best_product_on_top(self):
        results = compare_investments(10_000, 5, ["poupanca", "cdb"])
        _, ax = plot_comparison(results)
        assert ax.patches[-1].get_width() == pytest.approx(results[0].final_amount)

    def test_empty_results_rejected(self):
        with pytest.raises(ValueError):
            plot_comparison([])


# ============================================================================
# ALLOCATION
# ============================================================================

class TestPlotAllocation:
    """Test plot_allocation."""

    def test_domestic_pie(self, conservative_profile):
        bundle = generate_recommendations(conservative_profile)
        _, ax = plot_allocation(bundle)
        assert len(ax.patches) == 5
        assert "Domestic" in ax.get_title()

    def test_international_pie(self, moderate_profile):
        bundle = generate_recommendations(moderate_profile)
        _, ax = plot_allocation(bundle, "international")
        assert "International" in ax.get_title()

    def test_empty_region_rejected(self):
        bundle = RecommendationBundle((), (), "", ())
        with pytest.raises(ValueError, match="no domestic suggestions"):
            plot_allocation(bundle)
