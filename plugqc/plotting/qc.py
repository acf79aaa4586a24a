"""Box-and-whisker diagnostics of pooled control values."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.axes
import matplotlib.figure
import matplotlib.pyplot as plt
import numpy as np

from plugqc.core.types import RunReport
from plugqc.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle, style_rc


def plot_control_boxplot(
    ax: matplotlib.axes.Axes,
    report: RunReport,
    *,
    ylabel: str = "orange (all replicates, all samples)",
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> None:
    """Draw one run's pooled control distribution annotated with its summary."""
    values = np.asarray(report.control_values, dtype=float)
    ax.boxplot(
        values,
        whis=report.interval.whisker,
        patch_artist=True,
        widths=0.5,
        boxprops={"facecolor": style.box_color},
        medianprops={"color": "black"},
        flierprops={
            "marker": "o",
            "markersize": style.flier_size,
            "markerfacecolor": style.outlier_color,
            "markeredgecolor": "none",
        },
    )
    if style.show_fences:
        for y in (report.interval.lower, report.interval.upper):
            ax.axhline(y, color=style.fence_color, linestyle="--", linewidth=0.8)
    title, removed, counts = report.summary_lines()
    ax.set_title(title, fontsize=style.title_fontsize)
    ax.set_xlabel(f"{removed}\n{counts}", fontsize=style.subtitle_fontsize)
    ax.set_ylabel(ylabel, fontsize=style.axis_label_fontsize)
    ax.set_xticks([])


def plot_quality_assessment(
    reports: Sequence[RunReport],
    *,
    ylabel: str = "orange (all replicates, all samples)",
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> tuple[matplotlib.figure.Figure, np.ndarray]:
    """Lay out one box-plot panel per run, side by side."""
    if not reports:
        raise ValueError("At least one run report is required.")
    n = len(reports)
    width, height = style.panel_size
    with plt.rc_context(style_rc(style)):
        fig, axes = plt.subplots(1, n, figsize=(width * n, height), squeeze=False)
        for ax, report in zip(axes[0], reports):
            plot_control_boxplot(ax, report, ylabel=ylabel, style=style)
        fig.tight_layout()
    return fig, axes[0]


class BoxplotReporter:
    """Collects run reports and renders them as one multi-panel figure."""

    def __init__(
        self,
        out_path: str | Path | None = None,
        *,
        ylabel: str = "orange (all replicates, all samples)",
        style: PlotStyle = DEFAULT_PLOT_STYLE,
    ) -> None:
        self.out_path = Path(out_path) if out_path is not None else None
        self.ylabel = ylabel
        self.style = style
        self.reports: list[RunReport] = []

    def report(self, run_report: RunReport) -> None:
        self.reports.append(run_report)

    def render(self) -> matplotlib.figure.Figure:
        fig, _ = plot_quality_assessment(
            self.reports, ylabel=self.ylabel, style=self.style
        )
        return fig

    def save(self, out_path: str | Path | None = None) -> Path:
        target = Path(out_path) if out_path is not None else self.out_path
        if target is None:
            raise ValueError("No output path given for the quality-assessment figure.")
        target.parent.mkdir(parents=True, exist_ok=True)
        fig = self.render()
        try:
            fig.savefig(target, dpi=self.style.dpi, facecolor="white", bbox_inches="tight")
        finally:
            plt.close(fig)
        return target
