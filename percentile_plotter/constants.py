"""
Constants for the Percentile Chart Plotter.

Centralises default chart settings, layout bands, percentile table
sizes, display-unit thresholds, colour palettes, font families and the
matplotlib style dicts for GUI preview and export.
"""

from datetime import timedelta

# ── Named column indices in the input CSV ────────────────────────────────
COL_CATEGORY = 0
COL_VALUES = 1

# ── Value kinds (domain strategy selector) ───────────────────────────────
KIND_NUMERIC = "numeric"
KIND_TEMPORAL = "temporal"

# ── Percentile table ─────────────────────────────────────────────────────
PERCENTILE_RANGE_SIZE = 100      # 0..99 → 99 interior quantiles
PERCENTILE_COUNT = 101           # percentiles 0..100 inclusive

# ── Axis domain ──────────────────────────────────────────────────────────
DOMAIN_ROUNDING_STEP = 10
DOMAIN_ROUNDING_EPSILON = 0.499999
DEFAULT_NUMERIC_PADDING = 10
DEFAULT_TEMPORAL_PADDING = timedelta(days=1)
Y_DOMAIN = (0, 100)
Y_TICK_COUNT = 5
X_TICK_COUNT = 10

# ── Legends ──────────────────────────────────────────────────────────────
Y_AXIS_TITLE = "Percentile"
VALUE_TOOLTIP_TITLE = "Value"
AXIS_TITLE_JOINER = " per "
INVALID_DATA_LEGEND = "Invalid data: use numeric values"
NO_DATA_LEGEND = "No data to display"

# ── Default chart settings ───────────────────────────────────────────────
DEFAULT_FILL_COLOR = "teal"
DEFAULT_PRECISION = 2
DEFAULT_AXIS_TITLE = ""
MIN_PRECISION = 0

# ── Layout (pixels, same units as the viewport) ──────────────────────────
MARGIN = {'top': 10, 'right': 10, 'bottom': 10, 'left': 10}
LEGEND_SIZE = 50
AXIS_SIZE = 30
POINT_RADIUS = 5
DEFAULT_VIEWPORT = (640, 400)
SCREEN_DPI = 100

# ── Display units (largest first) ────────────────────────────────────────
DISPLAY_UNITS = (
    (1e12, "T"),
    (1e9, "bn"),
    (1e6, "M"),
    (1e3, "K"),
)

# ── Font family fallback chain ───────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Ubuntu", "Helvetica", "Arial", "sans-serif",
]

# ── Dark GUI colour palette ──────────────────────────────────────────────
DARK_COLORS = {
    'bg':           '#1e1e2e',
    'bg_alt':       '#252536',
    'bg_widget':    '#2a2a3c',
    'bg_input':     '#333348',
    'fg':           '#cdd6f4',
    'fg_dim':       '#9399b2',
    'accent':       '#89b4fa',
    'accent_hover': '#74c7ec',
    'green':        '#a6e3a1',
    'yellow':       '#f9e2af',
    'red':          '#f38ba8',
    'border':       '#45475a',
    'selection':    '#45475a',
}

# ── Fill colour choices offered in the config panel ──────────────────────
FILL_COLOR_OPTIONS = [
    "teal", "#0033A1", "#ED7D31", "#70AD47", "#C00000",
    "#7030A0", "#404040",
]

# ── Export / light-theme text colours ────────────────────────────────────
EXPORT_TEXT_COLOR = '#333333'
EXPORT_BG_COLOR = '#ffffff'
DIAGNOSTIC_TEXT_COLOR = '#C00000'

# ── Export settings ──────────────────────────────────────────────────────
EXPORT_DPI = 300
CLIPBOARD_DPI = 150

# ── Matplotlib dark-theme style dict (GUI preview) ──────────────────────
PLOT_STYLE_DARK = {
    'figure.facecolor':  DARK_COLORS['bg_alt'],
    'axes.facecolor':    DARK_COLORS['bg_widget'],
    'axes.edgecolor':    DARK_COLORS['border'],
    'axes.labelcolor':   DARK_COLORS['fg'],
    'text.color':        DARK_COLORS['fg'],
    'xtick.color':       DARK_COLORS['fg_dim'],
    'ytick.color':       DARK_COLORS['fg_dim'],
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'grid.color':        DARK_COLORS['border'],
}

# ── Matplotlib light-theme style dict (export) ──────────────────────────
PLOT_STYLE_LIGHT = {
    'figure.facecolor':  EXPORT_BG_COLOR,
    'axes.facecolor':    EXPORT_BG_COLOR,
    'axes.edgecolor':    EXPORT_TEXT_COLOR,
    'axes.labelcolor':   '#1a1a2e',
    'text.color':        '#1a1a2e',
    'xtick.color':       EXPORT_TEXT_COLOR,
    'ytick.color':       EXPORT_TEXT_COLOR,
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'grid.color':        '#cccccc',
}
