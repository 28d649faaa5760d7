"""Light-theme export of rendered charts."""

from __future__ import annotations

from matplotlib.colors import to_hex

from percentile_plotter.chart_percentile import render_percentile_chart
from percentile_plotter.data_model import PercentileChartViewModel
from percentile_plotter.export import (
    copy_to_clipboard,
    export_figure,
    figure_to_svg,
)
from percentile_plotter.view_model import build_view_model


def _dark_chart(fig, dataset):
    render_percentile_chart(fig, build_view_model(dataset))
    fig.set_facecolor("#1e1e1e")
    ax = fig.axes[0]
    ax.set_facecolor("#252526")
    ax.xaxis.label.set_color("#d4d4d4")
    return ax


def test_svg_text_contains_document(fig, uniform_dataset) -> None:
    """The SVG string is a complete document."""

    render_percentile_chart(fig, build_view_model(uniform_dataset))
    svg = figure_to_svg(fig)
    assert svg.lstrip().startswith("<?xml")
    assert "<svg" in svg


def test_export_restores_screen_colours(fig, uniform_dataset) -> None:
    """Light colours are only applied while the file is written."""

    ax = _dark_chart(fig, uniform_dataset)
    figure_to_svg(fig)

    assert to_hex(fig.get_facecolor()) == "#1e1e1e"
    assert to_hex(ax.get_facecolor()) == "#252526"
    assert to_hex(ax.xaxis.label.get_color()) == "#d4d4d4"


def test_export_figure_by_extension(tmp_path, fig, uniform_dataset) -> None:
    """.png and .svg are honoured; anything else gets .svg appended."""

    render_percentile_chart(fig, build_view_model(uniform_dataset))

    png = export_figure(fig, str(tmp_path / "chart.png"))
    assert png.endswith("chart.png")
    with open(png, "rb") as fh:
        assert fh.read(8) == b"\x89PNG\r\n\x1a\n"

    svg = export_figure(fig, str(tmp_path / "chart.SVG"))
    assert svg.endswith("chart.SVG")

    other = export_figure(fig, str(tmp_path / "chart"))
    assert other.endswith("chart.svg")
    assert (tmp_path / "chart.svg").read_text(encoding="utf-8").count("<svg") == 1


def test_degraded_chart_exports_its_diagnostic(fig) -> None:
    """The diagnostic text survives the light theme."""

    render_percentile_chart(fig, PercentileChartViewModel.degraded("No data to display"))
    svg = figure_to_svg(fig)
    assert "<svg" in svg
    assert to_hex(fig.texts[0].get_color()) == "#c00000"


def test_clipboard_without_application(fig, uniform_dataset) -> None:
    """No running QApplication means no clipboard."""

    render_percentile_chart(fig, build_view_model(uniform_dataset))
    assert copy_to_clipboard(fig) is False
