"""
Main window for the Percentile Chart Plotter.

Hosts the ConfigPanel (left) and ChartView (right) in a horizontal
splitter, with a menu bar and status bar.
"""

import sys

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QScrollArea,
    QMessageBox,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from . import APP_NAME, APP_VERSION
from .gui_config_panel import ConfigPanel
from .gui_chart_view import ChartView


class PlotterMainWindow(QMainWindow):
    """Main window for the Percentile Chart Plotter."""

    def __init__(self):
        super().__init__()

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1000, 640)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self.statusBar().showMessage("Ready: load a sample CSV to begin")

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        self._config_panel = ConfigPanel()
        scroll = QScrollArea()
        scroll.setWidget(self._config_panel)
        scroll.setWidgetResizable(True)
        scroll.setMinimumWidth(280)
        scroll.setMaximumWidth(420)

        self._chart_view = ChartView()

        splitter.addWidget(scroll)
        splitter.addWidget(self._chart_view)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([320, 680])

        main_layout.addWidget(splitter)

    def _setup_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")

        act_open = QAction("Open Sample CSV...", self)
        act_open.triggered.connect(lambda *_: self._config_panel.browse_file())
        file_menu.addAction(act_open)

        act_example = QAction("Load Example Data", self)
        act_example.triggered.connect(lambda *_: self.load_example())
        file_menu.addAction(act_example)

        file_menu.addSeparator()

        act_export = QAction("Export Chart...", self)
        act_export.triggered.connect(lambda *_: self._export_current())
        file_menu.addAction(act_export)

        file_menu.addSeparator()

        act_exit = QAction("Exit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        help_menu = menubar.addMenu("Help")
        act_about = QAction("About", self)
        act_about.triggered.connect(lambda *_: self._show_about())
        help_menu.addAction(act_about)

    def _connect_signals(self):
        self._config_panel.files_loaded.connect(self._on_files_loaded)
        self._config_panel.generate_button.clicked.connect(
            lambda *_: self._on_generate()
        )
        self._config_panel.config_changed.connect(self._on_config_changed)

    # ── Public API ───────────────────────────────────────────────────

    def open_file(self, path: str) -> None:
        """Load *path* as if chosen in the file dialog."""
        self._config_panel.load_file(path)

    def load_example(self) -> None:
        """Generate the example sample and load it."""
        self._config_panel.load_example()

    # ── Slots ────────────────────────────────────────────────────────

    def _on_files_loaded(self, dataset):
        if dataset is None:
            self.statusBar().showMessage("Data load cleared")
            return
        self._on_generate()

    def _on_config_changed(self):
        if self._config_panel.get_dataset() is None:
            return
        try:
            self._render()
        except Exception as exc:
            # Mid-edit settings may be transiently unusable (e.g. a
            # half-typed colour); report without a dialog.
            print(f"[percentile] Settings change render warning: {exc}",
                  file=sys.stderr)

    def _on_generate(self):
        """Slot: Generate Chart button clicked."""
        if self._config_panel.get_dataset() is None:
            QMessageBox.warning(
                self, "No Data",
                "Please load a sample CSV before generating the chart.",
            )
            return

        self.statusBar().showMessage("Generating chart...")
        try:
            model = self._render()
        except Exception as exc:
            QMessageBox.critical(
                self, "Chart Generation Error",
                f"An error occurred while generating the chart:\n\n{exc}",
            )
            self.statusBar().showMessage("Chart generation failed")
            return

        if model is not None and model.is_degraded:
            self.statusBar().showMessage(model.diagnostic, 5000)
        else:
            self.statusBar().showMessage("Chart generated", 5000)

    def _render(self):
        self._chart_view.update_chart(
            self._config_panel.get_dataset(),
            self._config_panel.get_user_settings(),
        )
        return self._chart_view.visual.model

    def _export_current(self):
        if self._chart_view.visual.model is None:
            QMessageBox.warning(
                self, "Nothing to Export",
                "No chart is currently displayed.",
            )
            return
        self._chart_view.export_chart()

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Plots the percentile distribution (0th–100th) of one "
            f"column of numeric or date values.</p>"
            f"<p>Hover the curve to read the value at each percentile.</p>",
        )
