"""
Percentile Chart Plotter v1.0.0

Distribution plotting tool: reads one column of numeric or temporal
samples, computes the 101 percentile bands (0th through 100th) and
draws the percentile-to-value curve with formatted axes and legends.

The data-to-model transformation (validation, percentiles, settings,
formatting) is GUI-free and can be driven headlessly through
``build_view_model`` and ``render_percentile_chart``.
"""

APP_NAME = "Percentile Chart Plotter"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-18"
__version__ = APP_VERSION
