"""
View-model assembly for the Percentile Chart Plotter.

``build_view_model`` is the whole data-to-model transformation:

    raw dataset → validation → percentiles → settings → view-model

Input problems never raise here; they produce a degraded model whose
only content is a diagnostic legend.  Missing metadata and missing user
settings fall back to the defaults in ``constants``.
"""

from typing import Optional, Tuple

from matplotlib.colors import is_color_like

from .capabilities import UserSettings
from .constants import (
    DEFAULT_FILL_COLOR, DEFAULT_PRECISION, DEFAULT_AXIS_TITLE, MIN_PRECISION,
    Y_AXIS_TITLE, AXIS_TITLE_JOINER, INVALID_DATA_LEGEND, NO_DATA_LEGEND,
    X_TICK_COUNT,
)
from .data_model import (
    ChartSettings, ColumnData, Legend, PercentileChartViewModel, SampleDataset,
)
from .formatting import create_formatter
from .percentiles import compute_percentiles, domain_for_points
from .validator import sample_kind


# ── Settings resolution ──────────────────────────────────────────────────

def resolve_fill_color(user: Optional[UserSettings]) -> str:
    if user is None or not user.fill_color or not is_color_like(user.fill_color):
        return DEFAULT_FILL_COLOR
    return user.fill_color


def resolve_precision(user: Optional[UserSettings]) -> int:
    """Configured precision, raised to 0 when negative."""
    if user is None or user.label_precision is None:
        return DEFAULT_PRECISION
    precision = int(user.label_precision)
    if precision < MIN_PRECISION:
        return MIN_PRECISION
    return precision


def _display_name(column: Optional[ColumnData]) -> Optional[str]:
    if column is None:
        return None
    return column.metadata.display_name or None


def resolve_axis_title(dataset: SampleDataset, used_values: bool) -> str:
    """x-axis title from the column display names.

    ``"<values> per <category>"`` when the values column drives the
    axis, otherwise the category column's name.  Empty when a needed
    name is missing.
    """
    category_name = _display_name(dataset.category)
    if used_values:
        value_name = _display_name(dataset.values)
        if category_name and value_name:
            return f"{value_name}{AXIS_TITLE_JOINER}{category_name}"
        return DEFAULT_AXIS_TITLE
    return category_name or DEFAULT_AXIS_TITLE


def resolve_format_string(
    dataset: SampleDataset,
    user: Optional[UserSettings],
    used_values: bool = False,
) -> Optional[str]:
    """User ``general.formatString`` override, else the sampled column's.

    When the values column drives the axis but declares no format, the
    category column's format is used.
    """
    if user is not None and user.format_string:
        return user.format_string
    if used_values and dataset.values.metadata.format_string:
        return dataset.values.metadata.format_string
    if dataset.category is None:
        return None
    return dataset.category.metadata.format_string


def parse_settings(
    dataset: SampleDataset,
    user: Optional[UserSettings],
    used_values: bool,
) -> ChartSettings:
    return ChartSettings(
        fill_color=resolve_fill_color(user),
        precision=resolve_precision(user),
        axis_title=resolve_axis_title(dataset, used_values),
    )


def build_legends(settings: ChartSettings) -> Tuple[Legend, Legend]:
    """x-axis title below the plot, fixed ``"Percentile"`` beside it."""
    return (
        Legend(text=settings.axis_title, axis="x"),
        Legend(text=Y_AXIS_TITLE, axis="y"),
    )


# ── Sample selection ─────────────────────────────────────────────────────

def select_sample(dataset: Optional[SampleDataset]):
    """Return ``(values, used_values)`` or ``(None, False)``.

    The values column wins when it is bound and carries values.
    """
    if dataset is None:
        return None, False
    if dataset.values is not None and len(dataset.values.values) > 0:
        return dataset.values.values, True
    if dataset.category is None:
        return None, False
    return dataset.category.values, False


# ── Assembly ─────────────────────────────────────────────────────────────

def build_view_model(
    dataset: Optional[SampleDataset],
    user_settings: Optional[UserSettings] = None,
) -> PercentileChartViewModel:
    """Turn a raw dataset and user settings into a render-ready model.

    Parameters
    ----------
    dataset : SampleDataset or None
    user_settings : UserSettings or None
        Missing fields fall back to defaults.

    Returns
    -------
    PercentileChartViewModel
        Full model, or a degraded one (``is_degraded``) carrying a single
        diagnostic legend when the sample is absent, empty or invalid.
    """
    values, used_values = select_sample(dataset)
    if values is None or len(values) == 0:
        return PercentileChartViewModel.degraded(NO_DATA_LEGEND)

    kind = sample_kind(values)
    if kind is None:
        return PercentileChartViewModel.degraded(INVALID_DATA_LEGEND)

    points = compute_percentiles(values, kind)
    settings = parse_settings(dataset, user_settings, used_values)
    lower = points[0].value
    upper = points[-1].value
    formatter = create_formatter(
        resolve_format_string(dataset, user_settings, used_values),
        value=lower,
        value2=upper,
        precision=settings.precision,
        tick_count=X_TICK_COUNT,
    )

    return PercentileChartViewModel(
        points=points,
        settings=settings,
        formatter=formatter,
        x_domain=domain_for_points(points, kind),
        legends=build_legends(settings),
    )
