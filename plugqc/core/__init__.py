"""Core quality-assessment subpackage."""

from plugqc.core.batch import quality_assessment
from plugqc.core.errors import EmptyRunError, QualityAssessmentError, SchemaMismatchError
from plugqc.core.filtering import filter_run, filter_run_with_report, pool_control_values
from plugqc.core.schema import empty_like, make_sample, validate_run
from plugqc.core.threshold import estimate_acceptance_interval
from plugqc.core.types import AcceptanceInterval, FilterConfig, ReplicateRecord, RunReport

__all__ = [
    "FilterConfig",
    "AcceptanceInterval",
    "RunReport",
    "ReplicateRecord",
    "QualityAssessmentError",
    "EmptyRunError",
    "SchemaMismatchError",
    "estimate_acceptance_interval",
    "pool_control_values",
    "filter_run",
    "filter_run_with_report",
    "quality_assessment",
    "make_sample",
    "empty_like",
    "validate_run",
]
