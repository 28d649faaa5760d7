"""
Data model for the Percentile Chart Plotter.

Immutable dataclasses for the raw sample handed over by the host (one
or two columns plus metadata) and for the render-ready view-model
produced from it.  A view-model is built fresh on every update and
never mutated; renderers receive it read-only.

Missing metadata is modelled as ``None``.  A degraded view-model (bad
input) carries ``None`` in every data field and a single diagnostic
legend, so renderers have one guard: ``model.is_degraded``.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .constants import Y_DOMAIN


@dataclass(frozen=True)
class ColumnMetadata:
    """Descriptive metadata for one data column.

    Parameters
    ----------
    display_name : str or None
        Column header shown to the user, e.g. ``"Response time"``.
    format_string : str or None
        Declared format string, e.g. ``"0.00"``, ``"$#,0"`` or
        ``"yyyy-MM-dd"``.
    """
    display_name: Optional[str] = None
    format_string: Optional[str] = None


@dataclass(frozen=True)
class ColumnData:
    """One column of raw values in source order."""
    metadata: ColumnMetadata
    values: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class SampleDataset:
    """Raw dataset as delivered by the host.

    The curve is computed from ``values`` when that column is present,
    otherwise from ``category``.  Values are kept raw (numbers,
    datetimes, or whatever the source contained) so that validation
    can decide on the whole sample.

    Parameters
    ----------
    category : ColumnData or None
        Grouping column (always bound by the host).
    values : ColumnData or None
        Optional measure column distinct from the category column.
    """
    category: Optional[ColumnData]
    values: Optional[ColumnData] = None


@dataclass(frozen=True)
class PercentilePoint:
    """One point of the percentile curve.

    ``value`` is a number for numeric samples and a ``datetime`` for
    temporal ones.
    """
    percentile: int
    value: Any


@dataclass(frozen=True)
class ChartSettings:
    """Resolved user settings (defaults already applied)."""
    fill_color: str
    precision: int
    axis_title: str


@dataclass(frozen=True)
class AxisDomain:
    """Value range of the x-axis.

    Parameters
    ----------
    lower, upper : float or datetime
        Domain bounds, ``lower < upper`` after padding.
    kind : str
        ``"numeric"`` (rounded outward to multiples of 10) or
        ``"temporal"`` (unrounded time scale).
    """
    lower: Any
    upper: Any
    kind: str


@dataclass(frozen=True)
class Legend:
    """Legend text and the axis it belongs to.

    ``axis`` is ``"x"``, ``"y"`` or ``None`` for the diagnostic legend of
    a degraded model.
    """
    text: str
    axis: Optional[str] = None


@dataclass(frozen=True)
class Viewport:
    """Available drawing area in pixels."""
    width: float
    height: float


@dataclass(frozen=True)
class PlotArea:
    """Plotting rectangle left after margins, legend and axis bands."""
    left: float
    bottom: float
    width: float
    height: float


@dataclass(frozen=True)
class PercentileChartViewModel:
    """Render-ready model for one update cycle.

    Parameters
    ----------
    points : tuple of PercentilePoint or None
        Exactly 101 points (percentile 0..100), ``None`` when degraded.
    settings : ChartSettings or None
    formatter : ValueFormatter or None
        Pure ``value → str`` used for tick labels and tooltips.
    x_domain : AxisDomain or None
    y_domain : tuple of int
        Always ``(0, 100)``.
    legends : tuple of Legend
        Two axis legends, or one diagnostic legend when degraded.
    """
    points: Optional[Tuple[PercentilePoint, ...]]
    settings: Optional[ChartSettings]
    formatter: Any
    x_domain: Optional[AxisDomain]
    y_domain: Tuple[int, int] = Y_DOMAIN
    legends: Tuple[Legend, ...] = field(default_factory=tuple)

    @property
    def is_degraded(self) -> bool:
        return self.points is None or self.settings is None

    @property
    def diagnostic(self) -> Optional[str]:
        """The diagnostic legend text of a degraded model."""
        if not self.is_degraded or not self.legends:
            return None
        return self.legends[0].text

    @classmethod
    def degraded(cls, message: str) -> "PercentileChartViewModel":
        """Build the error-only model shown in place of the chart."""
        return cls(
            points=None,
            settings=None,
            formatter=None,
            x_domain=None,
            legends=(Legend(text=message),),
        )
