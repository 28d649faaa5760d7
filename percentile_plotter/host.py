"""
Host adapter for the Percentile Chart Plotter.

``PercentileChartVisual`` follows the host lifecycle: ``init`` once,
``update`` on every data / size / settings change, ``destroy`` on
removal.  Each update builds a brand-new view-model and redraws the
bound figure from it; nothing is patched incrementally.
"""

from typing import Optional

from matplotlib.figure import Figure

from .capabilities import UserSettings, enumerate_object_instances
from .chart_percentile import render_percentile_chart
from .constants import SCREEN_DPI
from .data_model import PercentileChartViewModel, SampleDataset, Viewport
from .percentiles import percentile_range
from .view_model import build_view_model


class PercentileChartVisual:
    """One chart instance bound to a matplotlib figure."""

    def __init__(self):
        self._fig: Optional[Figure] = None
        self._model: Optional[PercentileChartViewModel] = None

    @property
    def model(self) -> Optional[PercentileChartViewModel]:
        return self._model

    @property
    def figure(self) -> Optional[Figure]:
        return self._fig

    def init(self, fig: Figure) -> None:
        """Bind *fig* as the drawing surface."""
        self._fig = fig
        # Warm the shared table before the first update
        percentile_range()

    def update(
        self,
        dataset: Optional[SampleDataset],
        viewport: Viewport,
        user_settings: Optional[UserSettings] = None,
        *,
        for_export: bool = False,
        resize_figure: bool = True,
    ) -> Optional[PercentileChartViewModel]:
        """Rebuild the model and redraw.

        A ``None`` dataset means the host sent no data; the current
        drawing is left as is and ``None`` is returned.  Pass
        ``resize_figure=False`` when a canvas already keeps the figure
        at the viewport size.
        """
        if dataset is None:
            return None
        if self._fig is None:
            raise RuntimeError("PercentileChartVisual.update() called before init()")

        model = self._model = build_view_model(dataset, user_settings)

        dpi = self._fig.get_dpi() or SCREEN_DPI
        if resize_figure and viewport.width > 0 and viewport.height > 0:
            self._fig.set_size_inches(viewport.width / dpi, viewport.height / dpi)

        render_percentile_chart(
            self._fig, model, viewport=viewport, for_export=for_export,
        )
        return model

    def destroy(self) -> None:
        self._fig = None
        self._model = None

    def enumerate_object_instances(self, object_name: str) -> list:
        return enumerate_object_instances(self._model, object_name)
