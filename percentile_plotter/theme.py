"""
Theme and stylesheet for the Percentile Chart Plotter.

Dark Qt stylesheet for the desktop shell and the helper that pushes a
matplotlib style dict (dark preview or light export) into rcParams.
"""

from .constants import DARK_COLORS


def get_dark_stylesheet() -> str:
    """Qt stylesheet for the dark GUI."""
    c = DARK_COLORS
    return f"""
    QMainWindow, QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 13px;
    }}
    QGroupBox {{
        border: 1px solid {c['border']};
        border-radius: 6px;
        margin-top: 12px;
        padding-top: 16px;
        font-weight: bold;
        color: {c['accent']};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 12px;
        padding: 0 6px;
    }}
    QPushButton {{
        background-color: {c['bg_widget']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 6px 16px;
    }}
    QPushButton:hover {{
        background-color: {c['selection']};
        border-color: {c['accent']};
    }}
    QPushButton:disabled {{
        color: {c['fg_dim']};
        background-color: {c['bg']};
    }}
    QLineEdit, QSpinBox, QComboBox {{
        background-color: {c['bg_input']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 4px 8px;
    }}
    QLineEdit:focus, QSpinBox:focus, QComboBox:focus {{
        border-color: {c['accent']};
    }}
    QStatusBar, QMenuBar {{
        background-color: {c['bg_alt']};
        color: {c['fg_dim']};
    }}
    QMenu {{
        background-color: {c['bg_widget']};
        border: 1px solid {c['border']};
    }}
    QMenu::item:selected, QMenuBar::item:selected {{
        background-color: {c['selection']};
    }}
    QSplitter::handle {{
        background-color: {c['border']};
    }}
    """


def apply_plot_style(style_dict: dict) -> None:
    """Apply a style dictionary to matplotlib rcParams.

    Parameters
    ----------
    style_dict : dict
        One of ``PLOT_STYLE_DARK`` or ``PLOT_STYLE_LIGHT``.
    """
    import matplotlib as mpl
    for key, value in style_dict.items():
        mpl.rcParams[key] = value
