"""
Configuration panel (left side) for the Percentile Chart Plotter.

Sample file input, line colour, label precision, format string, and
the Generate button.  Emits ``files_loaded`` with the parsed
``SampleDataset`` and ``config_changed`` whenever a setting moves.
"""

import os
import warnings

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox,
    QLabel, QPushButton, QLineEdit, QComboBox, QSpinBox,
    QFileDialog, QMessageBox,
)
from PySide6.QtCore import Signal

from .capabilities import UserSettings
from .constants import (
    DARK_COLORS, FILL_COLOR_OPTIONS, DEFAULT_FILL_COLOR, DEFAULT_PRECISION,
)
from .csv_parser import load_sample_csv, sample_summary
from .data_model import SampleDataset


class ConfigPanel(QWidget):
    """Left-side configuration panel with the sample file and chart options."""

    config_changed = Signal()
    files_loaded = Signal(object)  # emits SampleDataset or None

    def __init__(self, parent=None):
        super().__init__(parent)
        self._file_path = ''
        self._dataset = None
        self._setup_ui()
        self._connect_signals()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(8)

        # ── Group 1: Sample File ─────────────────────────────────────
        grp_file = QGroupBox("Sample File")
        file_layout = QVBoxLayout(grp_file)
        file_layout.setSpacing(4)

        row = QHBoxLayout()
        self._edt_file = QLineEdit()
        self._edt_file.setReadOnly(True)
        self._edt_file.setPlaceholderText("No file selected")
        self._btn_browse = QPushButton("Browse...")
        self._btn_browse.setFixedWidth(80)
        row.addWidget(self._edt_file, 1)
        row.addWidget(self._btn_browse)
        file_layout.addLayout(row)

        self._lbl_file_status = QLabel("")
        self._lbl_file_status.setStyleSheet(
            f"color: {DARK_COLORS['fg_dim']}; font-size: 11px;"
        )
        self._lbl_file_status.setWordWrap(True)
        file_layout.addWidget(self._lbl_file_status)

        layout.addWidget(grp_file)

        # ── Group 2: Data Point ──────────────────────────────────────
        grp_point = QGroupBox("Data Point")
        point_layout = QFormLayout(grp_point)

        self._cmb_fill = QComboBox()
        self._cmb_fill.setEditable(True)
        self._cmb_fill.addItems(FILL_COLOR_OPTIONS)
        self._cmb_fill.setCurrentText(DEFAULT_FILL_COLOR)
        self._cmb_fill.setToolTip("Named colour or #RRGGBB")
        point_layout.addRow("Fill:", self._cmb_fill)

        layout.addWidget(grp_point)

        # ── Group 3: Labels ──────────────────────────────────────────
        grp_labels = QGroupBox("Labels")
        labels_layout = QFormLayout(grp_labels)

        # Negative input is allowed; it is clamped to 0 when resolved
        self._spn_precision = QSpinBox()
        self._spn_precision.setRange(-5, 10)
        self._spn_precision.setValue(DEFAULT_PRECISION)
        labels_layout.addRow("Decimal places:", self._spn_precision)

        self._edt_format = QLineEdit()
        self._edt_format.setPlaceholderText("column default")
        self._edt_format.setToolTip(
            "Overrides the column format, e.g. 0.00, $#,0, 0%, yyyy-MM-dd"
        )
        labels_layout.addRow("Format:", self._edt_format)

        layout.addWidget(grp_labels)

        # ── Actions ──────────────────────────────────────────────────
        c = DARK_COLORS
        self._btn_generate = QPushButton("Generate Chart")
        self._btn_generate.setStyleSheet(
            f"QPushButton {{ background-color: {c['accent']}; "
            f"color: {c['bg']}; font-weight: bold; padding: 10px; }}"
            f"QPushButton:hover {{ background-color: {c['accent_hover']}; }}"
        )
        self._btn_generate.setEnabled(False)
        layout.addWidget(self._btn_generate)

        self._btn_example = QPushButton("Load Example Data")
        layout.addWidget(self._btn_example)

        layout.addStretch()

    # ── Signal connections ───────────────────────────────────────────

    def _connect_signals(self):
        self._btn_browse.clicked.connect(lambda *_: self.browse_file())
        self._btn_example.clicked.connect(lambda *_: self.load_example())

        # config_changed takes no arguments; absorb the signal payloads
        self._cmb_fill.currentTextChanged.connect(
            lambda *_: self.config_changed.emit()
        )
        self._spn_precision.valueChanged.connect(
            lambda *_: self.config_changed.emit()
        )
        self._edt_format.editingFinished.connect(
            lambda *_: self.config_changed.emit()
        )

    # ── Slot implementations ─────────────────────────────────────────

    def browse_file(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Select Sample CSV File",
            "", "CSV Files (*.csv);;All Files (*)",
        )
        if path:
            self.load_file(path)

    def load_example(self) -> None:
        """Generate and load the example response-time sample."""
        from .example_data import generate_example_csvs
        import tempfile

        example_dir = os.path.join(
            tempfile.gettempdir(), 'percentile_plotter_example'
        )
        paths = generate_example_csvs(example_dir)
        self.load_file(paths['response_times'])

    def load_file(self, path: str) -> None:
        """Parse *path* and emit ``files_loaded``."""
        self._file_path = path
        self._edt_file.setText(os.path.basename(path))
        self._edt_file.setToolTip(path)

        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always")
                dataset = load_sample_csv(path)
        except (ValueError, FileNotFoundError, OSError) as exc:
            self._set_status(f"Error: {exc}", DARK_COLORS['red'])
            self._btn_generate.setEnabled(False)
            self._dataset = None
            self.files_loaded.emit(None)
            QMessageBox.critical(self, "Data Load Error", str(exc))
            return

        self._dataset = dataset
        name, n_rows = sample_summary(dataset)
        if caught:
            self._set_status(str(caught[0].message), DARK_COLORS['yellow'])
        else:
            self._set_status(
                f"Loaded: {n_rows} rows of '{name or 'unnamed'}'",
                DARK_COLORS['green'],
            )

        self._btn_generate.setEnabled(True)
        self.files_loaded.emit(dataset)

    def _set_status(self, text: str, color: str) -> None:
        self._lbl_file_status.setText(text)
        self._lbl_file_status.setStyleSheet(f"color: {color}; font-size: 11px;")

    # ── Public API ───────────────────────────────────────────────────

    def get_config(self) -> dict:
        """Return current configuration as a flat dict."""
        return {
            'fill_color': self._cmb_fill.currentText().strip(),
            'label_precision': self._spn_precision.value(),
            'format_string': self._edt_format.text().strip(),
        }

    def get_user_settings(self) -> UserSettings:
        return UserSettings.from_config(self.get_config())

    def get_dataset(self) -> SampleDataset:
        """Return the currently loaded dataset, or ``None``."""
        return self._dataset

    @property
    def generate_button(self) -> QPushButton:
        """Access to the Generate button for external signal connection."""
        return self._btn_generate
