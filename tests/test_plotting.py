import matplotlib

matplotlib.use("Agg")

from pathlib import Path

import matplotlib.pyplot as plt
import pytest

from plugqc.core.batch import quality_assessment
from plugqc.core.filtering import filter_run_with_report
from plugqc.plotting.qc import BoxplotReporter, plot_control_boxplot, plot_quality_assessment
from plugqc.reporting import CompositeReporter, RecordingReporter


def test_boxplot_annotated_with_summary(e2e_run):
    _, report = filter_run_with_report(e2e_run, 1)
    fig, ax = plt.subplots()
    plot_control_boxplot(ax, report)
    assert ax.get_title() == "run 1: median=2.0, IQR=1.0"
    assert "samples removed: none" in ax.get_xlabel()
    assert "outliers = 1" in ax.get_xlabel()
    assert ax.get_ylabel() == "orange (all replicates, all samples)"
    plt.close(fig)


def test_one_panel_per_run(e2e_run, sample):
    rec = RecordingReporter()
    quality_assessment([e2e_run, {"X": sample(1.0, 2.0, 3.0, 4.0)}], reporter=rec)
    fig, axes = plot_quality_assessment(rec.reports)
    assert len(axes) == 2
    assert axes[1].get_title().startswith("run 2")
    plt.close(fig)


def test_no_reports_rejected():
    with pytest.raises(ValueError):
        plot_quality_assessment([])


def test_boxplot_reporter_saves_png(tmp_path: Path, e2e_run):
    box = BoxplotReporter(tmp_path / "figs" / "qa.png")
    quality_assessment([e2e_run], reporter=CompositeReporter(box, RecordingReporter()))
    out = box.save()
    assert out.exists()
    assert out.stat().st_size > 0


def test_boxplot_reporter_requires_path(e2e_run):
    box = BoxplotReporter()
    box.report(filter_run_with_report(e2e_run, 1)[1])
    with pytest.raises(ValueError, match="No output path"):
        box.save()


def test_figure_drawn_with_style_dpi_without_leaking_rcparams(e2e_run):
    from plugqc.plotting.styles import PlotStyle

    _, report = filter_run_with_report(e2e_run, 1)
    before = plt.rcParams["figure.dpi"]
    fig, _ = plot_quality_assessment([report], style=PlotStyle(dpi=73))
    assert fig.dpi == 73
    assert plt.rcParams["figure.dpi"] == before
    plt.close(fig)
