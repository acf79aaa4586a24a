"""Exception types raised by plug quality assessment."""

from __future__ import annotations


class QualityAssessmentError(ValueError):
    """Base class for malformed replicate input."""


class EmptyRunError(QualityAssessmentError):
    """Raised when a run has no control values to estimate a threshold from."""


class SchemaMismatchError(QualityAssessmentError):
    """Raised when samples in a run do not share one column set."""
