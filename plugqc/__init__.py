"""plugqc public API."""

from plugqc._version import __version__
from plugqc.core.batch import quality_assessment
from plugqc.core.errors import EmptyRunError, QualityAssessmentError, SchemaMismatchError
from plugqc.core.filtering import filter_run, filter_run_with_report
from plugqc.core.schema import make_sample
from plugqc.core.threshold import estimate_acceptance_interval
from plugqc.core.types import AcceptanceInterval, FilterConfig, ReplicateRecord, RunReport
from plugqc.reporting import LoggingReporter, NullReporter, RecordingReporter


def plot_quality_assessment(*args, **kwargs):
    """Lazy wrapper to avoid importing matplotlib at import time."""
    from plugqc.plotting.qc import plot_quality_assessment as _plot_quality_assessment

    return _plot_quality_assessment(*args, **kwargs)


__all__ = [
    "__version__",
    "quality_assessment",
    "filter_run",
    "filter_run_with_report",
    "estimate_acceptance_interval",
    "make_sample",
    "FilterConfig",
    "AcceptanceInterval",
    "RunReport",
    "ReplicateRecord",
    "QualityAssessmentError",
    "EmptyRunError",
    "SchemaMismatchError",
    "NullReporter",
    "RecordingReporter",
    "LoggingReporter",
    "plot_quality_assessment",
]
