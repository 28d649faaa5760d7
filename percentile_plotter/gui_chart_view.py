"""
Chart view widget (right side) for the Percentile Chart Plotter.

Hosts a matplotlib FigureCanvas driven by ``PercentileChartVisual``,
with a navigation toolbar, export buttons, and a hover tooltip that
highlights the nearest percentile point.
"""

import os

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFileDialog, QMessageBox,
)

import matplotlib
matplotlib.use('QtAgg')
import matplotlib.dates as mdates
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)

from .capabilities import UserSettings
from .chart_percentile import point_at_percentile, tooltip_items
from .constants import DARK_COLORS, PLOT_STYLE_DARK, DEFAULT_VIEWPORT, KIND_TEMPORAL
from .data_model import SampleDataset, Viewport
from .export import copy_to_clipboard, export_figure
from .host import PercentileChartVisual
from .theme import apply_plot_style


class ChartView(QWidget):
    """Single percentile chart with canvas, toolbar, export and hover."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        # ── Toolbar row ──────────────────────────────────────────────
        toolbar_row = QHBoxLayout()
        toolbar_row.setSpacing(4)

        w, h = DEFAULT_VIEWPORT
        self._fig = Figure(figsize=(w / 100, h / 100), dpi=100)
        self._fig.set_facecolor(DARK_COLORS['bg_alt'])
        self._canvas = FigureCanvas(self._fig)
        self._toolbar = NavigationToolbar(self._canvas, self)

        toolbar_row.addWidget(self._toolbar)
        toolbar_row.addStretch()

        self._btn_copy = QPushButton("Copy to Clipboard")
        self._btn_copy.clicked.connect(lambda *_: self._on_copy())
        toolbar_row.addWidget(self._btn_copy)

        self._btn_export = QPushButton("Export SVG/PNG...")
        self._btn_export.clicked.connect(lambda *_: self.export_chart())
        toolbar_row.addWidget(self._btn_export)

        layout.addLayout(toolbar_row)
        layout.addWidget(self._canvas, 1)

        self._visual = PercentileChartVisual()
        self._visual.init(self._fig)
        self._dataset = None
        self._settings = None
        self._hover_artists = []

        self._canvas.mpl_connect('motion_notify_event', self._on_hover)

        apply_plot_style(PLOT_STYLE_DARK)

    @property
    def fig(self) -> Figure:
        return self._fig

    @property
    def visual(self) -> PercentileChartVisual:
        return self._visual

    def update_chart(self, dataset: SampleDataset, settings: UserSettings) -> None:
        """Rebuild the view-model and redraw at the canvas size."""
        self._dataset = dataset
        self._settings = settings
        self._hover_artists = []
        apply_plot_style(PLOT_STYLE_DARK)
        self._visual.update(
            dataset, self._viewport(), settings, resize_figure=False,
        )
        self._canvas.draw_idle()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self._dataset is not None:
            self.update_chart(self._dataset, self._settings)

    def closeEvent(self, event):
        self._visual.destroy()
        super().closeEvent(event)

    def _viewport(self) -> Viewport:
        size = self._canvas.size()
        if size.width() <= 1 or size.height() <= 1:
            return Viewport(*DEFAULT_VIEWPORT)
        return Viewport(size.width(), size.height())

    # ── Hover tooltip ────────────────────────────────────────────────

    def _clear_hover(self):
        for artist in self._hover_artists:
            artist.remove()
        self._hover_artists = []

    def _on_hover(self, event):
        model = self._visual.model
        if model is None or model.is_degraded or event.inaxes is None:
            if self._hover_artists:
                self._clear_hover()
                self._canvas.draw_idle()
            return

        point = point_at_percentile(model, event.ydata)
        if point is None:
            return

        ax = event.inaxes
        x = point.value
        if model.x_domain.kind == KIND_TEMPORAL:
            x = mdates.date2num(x)

        self._clear_hover()
        marker, = ax.plot(
            [x], [point.percentile], 'o',
            color=model.settings.fill_color, markersize=8, zorder=5,
        )
        text = "\n".join(f"{name}: {value}" for name, value in tooltip_items(model, point))
        note = ax.annotate(
            text, xy=(x, point.percentile),
            xytext=(10, -10), textcoords='offset points',
            fontsize=7, va='top',
            bbox=dict(boxstyle='round', fc=DARK_COLORS['bg_widget'],
                      ec=DARK_COLORS['accent']),
        )
        self._hover_artists = [marker, note]
        self._canvas.draw_idle()

    # ── Export ───────────────────────────────────────────────────────

    def _on_copy(self):
        if copy_to_clipboard(self._fig):
            self.window().statusBar().showMessage("Chart copied to clipboard", 3000)
        else:
            QMessageBox.warning(self, "Copy Failed",
                                "Could not copy chart to clipboard.")

    def export_chart(self) -> None:
        """Ask for a file name and export the chart (SVG or PNG)."""
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Chart",
            "", "SVG Files (*.svg);;PNG Files (*.png);;All Files (*)",
        )
        if not path:
            return
        self._clear_hover()
        try:
            written = export_figure(self._fig, path)
        except (OSError, ValueError) as exc:
            QMessageBox.critical(self, "Export Error", f"Failed to export: {exc}")
            return
        self.window().statusBar().showMessage(
            f"Exported to {os.path.basename(written)}", 3000
        )
