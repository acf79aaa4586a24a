"""Plot style for quality-assessment figures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PlotStyle:
    """Panel geometry, colours and font sizes for the box-plot figure."""

    dpi: int = 200
    panel_size: tuple[float, float] = (3.2, 5.0)
    box_color: str = "#d9d9d9"
    fence_color: str = "#c0392b"
    outlier_color: str = "#e67e22"
    flier_size: float = 4.0
    show_fences: bool = True
    axis_label_fontsize: int = 10
    title_fontsize: int = 10
    subtitle_fontsize: int = 8


DEFAULT_PLOT_STYLE = PlotStyle()


def style_rc(style: PlotStyle = DEFAULT_PLOT_STYLE) -> dict[str, Any]:
    """rcParams overrides used while a figure is being drawn."""
    return {
        "figure.dpi": style.dpi,
        "savefig.dpi": style.dpi,
        "savefig.facecolor": "white",
        "axes.titlesize": style.title_fontsize,
        "axes.labelsize": style.axis_label_fontsize,
        "axes.grid": False,
    }
