"""
Entry point for the Percentile Chart Plotter.

Usage:
    python -m percentile_plotter [sample.csv]
    python -m percentile_plotter --example
    python -m percentile_plotter --version
"""

import os
import sys
import traceback

# (import name, distribution name)
_REQUIRED = (
    ("numpy", "numpy"),
    ("matplotlib", "matplotlib"),
    ("PySide6", "PySide6"),
)


def _missing_packages():
    missing = []
    for module_name, dist_name in _REQUIRED:
        try:
            __import__(module_name)
        except ImportError:
            missing.append(dist_name)
    return missing


def _exception_hook(exc_type, exc_value, exc_tb):
    """Report uncaught errors on stderr and, with a GUI up, in a dialog."""
    detail = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
    print(f"Unhandled exception in the plotter:\n{detail}", file=sys.stderr)

    try:
        from PySide6.QtWidgets import QApplication, QMessageBox
    except ImportError:
        return
    if QApplication.instance() is None:
        return
    QMessageBox.critical(
        None, "Percentile Chart Plotter",
        f"The chart could not be drawn:\n\n"
        f"{exc_type.__name__}: {exc_value}\n\n"
        f"The full traceback was written to the console.",
    )


def _split_args(argv):
    """``(flags, positional)`` from the raw argument list."""
    flags = {a for a in argv if a.startswith('-')}
    positional = [a for a in argv if not a.startswith('-')]
    return flags, positional


def main():
    """Launch the Percentile Chart Plotter GUI."""
    flags, positional = _split_args(sys.argv[1:])

    if '--version' in flags:
        from . import APP_NAME, APP_VERSION
        print(f"{APP_NAME} {APP_VERSION}")
        return

    missing = _missing_packages()
    if missing:
        print(
            f"Percentile Chart Plotter needs: {', '.join(missing)}\n"
            f"    pip install {' '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)

    sys.excepthook = _exception_hook

    # matplotlib must bind to PySide6 before any widget module loads
    os.environ.setdefault("QT_API", "pyside6")
    import matplotlib
    matplotlib.use('QtAgg')

    from PySide6.QtGui import QFont, QFontDatabase
    from PySide6.QtWidgets import QApplication

    from .constants import FONT_FAMILIES
    from .gui_main import PlotterMainWindow
    from .theme import get_dark_stylesheet

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    available = set(QFontDatabase.families())
    font = QFont()
    font.setFamily(next((f for f in FONT_FAMILIES if f in available), font.family()))
    font.setPointSize(10)
    app.setFont(font)
    app.setStyleSheet(get_dark_stylesheet())

    window = PlotterMainWindow()
    window.show()

    if positional:
        window.open_file(positional[0])
    elif '--example' in flags:
        window.load_example()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
