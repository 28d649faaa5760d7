"""
Percentile curve chart for the Percentile Chart Plotter.

Draws percentile rank (y, 0–100) against data value (x) for one
view-model.  Numeric samples get a linear x-axis over the rounded
domain; temporal samples get a ``matplotlib.dates`` time axis.  The
101 points are drawn as hidden markers so a hover handler can
highlight them.

A degraded view-model draws no axes at all, only its diagnostic text.
"""

from typing import List, Optional, Tuple

import matplotlib.dates as mdates
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter, MaxNLocator

from .constants import (
    KIND_TEMPORAL, MARGIN, LEGEND_SIZE, AXIS_SIZE, POINT_RADIUS,
    Y_TICK_COUNT, X_TICK_COUNT, Y_AXIS_TITLE, VALUE_TOOLTIP_TITLE,
    DIAGNOSTIC_TEXT_COLOR, EXPORT_TEXT_COLOR,
)
from .data_model import PercentileChartViewModel, PercentilePoint, PlotArea, Viewport


def plot_area(viewport: Viewport) -> PlotArea:
    """Plotting rectangle (pixels, origin bottom-left) for *viewport*.

    Margins, the legend band (left and bottom) and the axis band
    (right) are subtracted.  Width and height never drop below 1 so the
    scales stay constructible on tiny viewports.
    """
    width = viewport.width - MARGIN['left'] - MARGIN['right'] - LEGEND_SIZE - AXIS_SIZE
    height = viewport.height - MARGIN['top'] - MARGIN['bottom'] - LEGEND_SIZE
    return PlotArea(
        left=MARGIN['left'] + LEGEND_SIZE,
        bottom=MARGIN['bottom'] + LEGEND_SIZE,
        width=max(width, 1),
        height=max(height, 1),
    )


def _axes_rect(viewport: Viewport) -> Tuple[float, float, float, float]:
    area = plot_area(viewport)
    w = max(viewport.width, 1)
    h = max(viewport.height, 1)
    return (
        area.left / w,
        area.bottom / h,
        min(area.width / w, 1.0),
        min(area.height / h, 1.0),
    )


def _x_values(model: PercentileChartViewModel) -> list:
    values = [p.value for p in model.points]
    if model.x_domain.kind == KIND_TEMPORAL:
        return mdates.date2num(values)
    return [float(v) for v in values]


def tooltip_items(model: PercentileChartViewModel, point: PercentilePoint) -> List[Tuple[str, str]]:
    """Tooltip rows for one point: percentile rank and formatted value."""
    return [
        (Y_AXIS_TITLE, str(point.percentile)),
        (VALUE_TOOLTIP_TITLE, model.formatter.format(point.value)),
    ]


def point_at_percentile(model: PercentileChartViewModel, y: float) -> Optional[PercentilePoint]:
    """Point whose percentile is nearest to the y coordinate *y*."""
    if model is None or model.is_degraded:
        return None
    index = int(round(y))
    index = min(max(index, 0), len(model.points) - 1)
    return model.points[index]


def render_percentile_chart(
    fig: Figure,
    model: PercentileChartViewModel,
    *,
    viewport: Optional[Viewport] = None,
    for_export: bool = False,
) -> None:
    """Render the percentile curve on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    model : PercentileChartViewModel
        Output of ``build_view_model``.
    viewport : Viewport or None
        When given, the axes are placed with the fixed pixel margins
        and bands; otherwise ``tight_layout`` decides.
    for_export : bool
        If ``True``, use light-theme text colours.
    """
    fig.clf()

    # ── Degraded model: diagnostic text only ────────────────────────
    if model.is_degraded:
        fig.text(
            0.5, 0.5, model.diagnostic or "",
            ha='center', va='center', fontsize=10,
            color=DIAGNOSTIC_TEXT_COLOR,
        )
        return

    if viewport is not None:
        ax = fig.add_axes(_axes_rect(viewport))
    else:
        ax = fig.add_subplot(111)

    settings = model.settings
    formatter = model.formatter
    domain = model.x_domain

    # ── Scales ───────────────────────────────────────────────────────
    if domain.kind == KIND_TEMPORAL:
        ax.xaxis_date()
        ax.set_xlim(mdates.date2num(domain.lower), mdates.date2num(domain.upper))
        ax.xaxis.set_major_locator(mdates.AutoDateLocator(maxticks=X_TICK_COUNT))
        ax.xaxis.set_major_formatter(FuncFormatter(
            lambda x, _pos: formatter.format(mdates.num2date(x))
        ))
    else:
        ax.set_xlim(domain.lower, domain.upper)
        ax.xaxis.set_major_locator(MaxNLocator(nbins=X_TICK_COUNT))
        ax.xaxis.set_major_formatter(FuncFormatter(
            lambda x, _pos: formatter.format(x)
        ))

    y_lo, y_hi = model.y_domain
    ax.set_ylim(y_lo, y_hi)
    ax.yaxis.set_major_locator(MaxNLocator(nbins=Y_TICK_COUNT, integer=True))

    # Full-size tick lines behave like gridlines
    ax.grid(linewidth=0.4, alpha=0.5)

    # ── Curve ────────────────────────────────────────────────────────
    xs = _x_values(model)
    ys = [p.percentile for p in model.points]
    ax.plot(
        xs, ys,
        color=settings.fill_color, linewidth=1.5, zorder=3,
        label='percentile curve',
    )

    # Hover targets, invisible until highlighted
    ax.scatter(
        xs, ys,
        s=(POINT_RADIUS * 2) ** 2, c=settings.fill_color,
        alpha=0.0, zorder=4, label='percentile points',
    )

    # ── Legends (axis titles) ────────────────────────────────────────
    label_kw = {'fontsize': 8}
    if for_export:
        label_kw['color'] = EXPORT_TEXT_COLOR
    for legend in model.legends:
        if legend.axis == "x":
            ax.set_xlabel(legend.text, **label_kw)
        elif legend.axis == "y":
            ax.set_ylabel(legend.text, **label_kw)

    if viewport is None:
        fig.tight_layout(pad=1.5)
