"""
Plotting utilities for DinDin.

Purpose
-------
Matplotlib renditions of the charts shown on the site: the compound
interest growth curve, the investment comparator bars and the
recommendation allocation pie.

Every function accepts an optional ``ax`` to draw into an existing
figure, an optional ``save_path``, and returns ``(fig, ax)``.
matplotlib is imported lazily so the engine can be used without a
display backend.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .comparison import ComparisonResult
from .projection import ProjectionInput, projection_schedule
from .recommendations import RecommendationBundle
from .types import AssetClass, Region
from .utils import thousands_formatter

__all__ = ["plot_projection", "plot_comparison", "plot_allocation"]

ASSET_CLASS_COLORS = {
    AssetClass.FIXED_INCOME: "#2E86AB",
    AssetClass.EQUITIES: "#F18F01",
    AssetClass.CRYPTO: "#C73E1D",
}


def _figure(ax, figsize):
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure
    return fig, ax


def _finish(fig, save_path: Optional[str]):
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, bbox_inches='tight', dpi=150)


def plot_projection(
    inp: ProjectionInput,
    ax=None,
    figsize: tuple = (10, 6),
    title: Optional[str] = None,
    save_path: Optional[str] = None,
):
    """
    Balance vs. money invested, one point per year.

    The shaded area between the two curves is the interest earned.

    Parameters
    ----------
    inp : ProjectionInput
        Calculator inputs; the curve comes from projection_schedule().
    ax : matplotlib.axes.Axes, optional
        Axes to draw into. A new figure is created when None.
    figsize : tuple, default (10, 6)
    title : str, optional
    save_path : str, optional
        If given, the figure is saved there at 150 dpi.

    Returns
    -------
    (fig, ax)
    """
    from matplotlib.ticker import FuncFormatter

    schedule = projection_schedule(inp)
    fig, ax = _figure(ax, figsize)

    years = schedule.index.to_numpy()
    ax.plot(years, schedule["balance"], label="Balance", color="#2E86AB", linewidth=2.5)
    ax.plot(years, schedule["invested"], label="Invested", color="#A23B72",
            linewidth=2, linestyle="--")
    ax.fill_between(years, schedule["invested"], schedule["balance"],
                    color="#2E86AB", alpha=0.15, label="Interest")

    ax.set_xlabel("Year", fontsize=11)
    ax.set_ylabel("Amount (R$)", fontsize=11)
    ax.set_title(
        title or f"Compound growth at {inp.annual_rate_percent:g}% a.a.",
        fontsize=12, fontweight='bold',
    )
    ax.yaxis.set_major_formatter(FuncFormatter(thousands_formatter))
    ax.legend(loc='upper left', fontsize=10)
    ax.grid(True, alpha=0.3)

    _finish(fig, save_path)
    return fig, ax


def plot_comparison(
    results: Sequence[ComparisonResult],
    ax=None,
    figsize: tuple = (10, 6),
    title: Optional[str] = None,
    save_path: Optional[str] = None,
):
    """Horizontal bars of net final amounts, best product on top."""
    from matplotlib.patches import Patch
    from matplotlib.ticker import FuncFormatter

    if not results:
        raise ValueError("plot_comparison requires at least one result")

    fig, ax = _figure(ax, figsize)
    ordered = list(results)[::-1]
    names = [r.name for r in ordered]
    values = [r.final_amount for r in ordered]
    colors = [ASSET_CLASS_COLORS[r.asset_class] for r in ordered]

    ax.barh(names, values, color=colors, alpha=0.85)
    for y, r in enumerate(ordered):
        ax.text(r.final_amount, y, f" {r.profit_percent:+.1f}%", va='center', fontsize=9)

    ax.set_xlabel("Final amount after tax and fees (R$)", fontsize=11)
    ax.set_title(title or "Investment comparison", fontsize=12, fontweight='bold')
    ax.xaxis.set_major_formatter(FuncFormatter(thousands_formatter))
    present = dict.fromkeys(r.asset_class for r in results)
    ax.legend(
        handles=[Patch(color=ASSET_CLASS_COLORS[c], label=c.value.replace('_', ' '))
                 for c in present],
        loc='lower right', fontsize=9,
    )
    ax.grid(True, alpha=0.3, axis='x')

    _finish(fig, save_path)
    return fig, ax


def plot_allocation(
    bundle: RecommendationBundle,
    region: Union[Region, str] = Region.DOMESTIC,
    ax=None,
    figsize: tuple = (8, 8),
    title: Optional[str] = None,
    save_path: Optional[str] = None,
):
    """Pie chart of one region's allocation in a recommendation bundle."""
    region = Region(region)
    suggestions = (
        bundle.domestic_suggestions
        if region is Region.DOMESTIC
        else bundle.international_suggestions
    )
    if not suggestions:
        raise ValueError(f"bundle has no {region.value} suggestions to plot")

    fig, ax = _figure(ax, figsize)
    ax.pie(
        [s.allocation_percent for s in suggestions],
        labels=[s.name for s in suggestions],
        autopct='%1.0f%%',
        startangle=90,
        wedgeprops={'linewidth': 1, 'edgecolor': 'white'},
    )
    ax.axis('equal')
    ax.set_title(title or f"{region.value.title()} allocation",
                 fontsize=12, fontweight='bold')

    _finish(fig, save_path)
    return fig, ax
