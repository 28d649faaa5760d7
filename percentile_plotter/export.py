"""
Export utilities for the Percentile Chart Plotter.

SVG and PNG export with automatic light-theme switching (dark GUI
preview → white-background file), plus clipboard copy.  The theme
switch is undone in a ``try/finally`` so the on-screen figure is never
left in export colours.
"""

import io
import os

from matplotlib.figure import Figure

from .constants import (
    EXPORT_DPI, CLIPBOARD_DPI, PLOT_STYLE_LIGHT, DIAGNOSTIC_TEXT_COLOR,
)


def _save_figure_state(fig: Figure) -> dict:
    """Capture every colour ``_apply_light_theme`` changes."""
    state = {
        'fig_facecolor': fig.get_facecolor(),
        'fig_text_colors': [t.get_color() for t in fig.texts],
        'axes_states': [],
    }
    for ax in fig.get_axes():
        ax_state = {
            'facecolor': ax.get_facecolor(),
            'xlabel_color': ax.xaxis.label.get_color(),
            'ylabel_color': ax.yaxis.label.get_color(),
            'spine_colors': {
                name: spine.get_edgecolor()
                for name, spine in ax.spines.items()
            },
            'tick_label_colors_x': [t.get_color() for t in ax.get_xticklabels()],
            'tick_label_colors_y': [t.get_color() for t in ax.get_yticklabels()],
            'grid_colors': [
                line.get_color()
                for line in ax.get_xgridlines() + ax.get_ygridlines()
            ],
            'xtick_mark_color': None,
            'ytick_mark_color': None,
        }
        xticks = ax.xaxis.get_major_ticks()
        if xticks:
            ax_state['xtick_mark_color'] = xticks[0].tick1line.get_color()
        yticks = ax.yaxis.get_major_ticks()
        if yticks:
            ax_state['ytick_mark_color'] = yticks[0].tick1line.get_color()
        state['axes_states'].append(ax_state)
    return state


def _apply_light_theme(fig: Figure) -> None:
    light = PLOT_STYLE_LIGHT
    fig.set_facecolor(light['figure.facecolor'])

    # Diagnostic text keeps its warning colour
    for text in fig.texts:
        if text.get_color() != DIAGNOSTIC_TEXT_COLOR:
            text.set_color(light['text.color'])

    for ax in fig.get_axes():
        ax.set_facecolor(light['axes.facecolor'])
        ax.xaxis.label.set_color(light['axes.labelcolor'])
        ax.yaxis.label.set_color(light['axes.labelcolor'])
        for spine in ax.spines.values():
            spine.set_edgecolor(light['axes.edgecolor'])
        ax.tick_params(axis='x', colors=light['xtick.color'],
                       labelcolor=light['xtick.color'])
        ax.tick_params(axis='y', colors=light['ytick.color'],
                       labelcolor=light['ytick.color'])
        for line in ax.get_xgridlines() + ax.get_ygridlines():
            line.set_color(light['grid.color'])


def _restore_figure_state(fig: Figure, state: dict) -> None:
    fig.set_facecolor(state['fig_facecolor'])
    for text, color in zip(fig.texts, state['fig_text_colors']):
        text.set_color(color)

    for ax, ax_state in zip(fig.get_axes(), state['axes_states']):
        ax.set_facecolor(ax_state['facecolor'])
        ax.xaxis.label.set_color(ax_state['xlabel_color'])
        ax.yaxis.label.set_color(ax_state['ylabel_color'])
        for name, color in ax_state['spine_colors'].items():
            ax.spines[name].set_edgecolor(color)

        # tick_params sets marks and labels together; labels go after
        if ax_state['xtick_mark_color'] is not None:
            ax.tick_params(axis='x', colors=ax_state['xtick_mark_color'])
        if ax_state['ytick_mark_color'] is not None:
            ax.tick_params(axis='y', colors=ax_state['ytick_mark_color'])
        for label, color in zip(ax.get_xticklabels(), ax_state['tick_label_colors_x']):
            label.set_color(color)
        for label, color in zip(ax.get_yticklabels(), ax_state['tick_label_colors_y']):
            label.set_color(color)

        for line, color in zip(
            ax.get_xgridlines() + ax.get_ygridlines(), ax_state['grid_colors']
        ):
            line.set_color(color)


def _save_light(fig: Figure, target, *, fmt: str, dpi: int) -> None:
    state = _save_figure_state(fig)
    try:
        _apply_light_theme(fig)
        fig.savefig(
            target,
            format=fmt,
            dpi=dpi,
            facecolor=fig.get_facecolor(),
            edgecolor='none',
        )
    finally:
        _restore_figure_state(fig, state)


def export_svg(fig: Figure, filepath: str) -> None:
    """Export figure as SVG with the light theme."""
    _save_light(fig, filepath, fmt='svg', dpi=EXPORT_DPI)


def export_png(fig: Figure, filepath: str, *, dpi: int = EXPORT_DPI) -> None:
    """Export figure as PNG with the light theme.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
    filepath : str
        Output file path (should end with ``.png``).
    dpi : int
        Export resolution (default 300).
    """
    _save_light(fig, filepath, fmt='png', dpi=dpi)


def figure_to_svg(fig: Figure) -> str:
    """Return the light-theme SVG document for *fig* as text."""
    buf = io.BytesIO()
    _save_light(fig, buf, fmt='svg', dpi=EXPORT_DPI)
    return buf.getvalue().decode('utf-8')


def export_figure(fig: Figure, filepath: str) -> str:
    """Export by file extension (``.svg`` or ``.png``, default SVG).

    Returns the path actually written.
    """
    ext = os.path.splitext(filepath)[1].lower()
    if ext == '.png':
        export_png(fig, filepath)
        return filepath
    if ext != '.svg':
        filepath += '.svg'
    export_svg(fig, filepath)
    return filepath


def copy_to_clipboard(fig: Figure, dpi: int = CLIPBOARD_DPI) -> bool:
    """Copy figure to the system clipboard as a PNG image.

    Returns ``True`` on success, ``False`` if no clipboard is available.
    """
    try:
        from PySide6.QtWidgets import QApplication
        from PySide6.QtGui import QImage
    except ImportError:
        return False

    if QApplication.instance() is None:
        return False
    clipboard = QApplication.clipboard()
    if clipboard is None:
        return False

    buf = io.BytesIO()
    _save_light(fig, buf, fmt='png', dpi=dpi)
    img = QImage()
    img.loadFromData(buf.getvalue())
    clipboard.setImage(img)
    return True
