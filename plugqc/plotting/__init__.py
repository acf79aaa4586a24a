"""Plotting API for plug quality assessment."""

from plugqc.plotting.qc import (
    BoxplotReporter,
    plot_control_boxplot,
    plot_quality_assessment,
)
from plugqc.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle, style_rc

__all__ = [
    "PlotStyle",
    "DEFAULT_PLOT_STYLE",
    "style_rc",
    "plot_control_boxplot",
    "plot_quality_assessment",
    "BoxplotReporter",
]
