"""Diagnostic sinks receiving one ``RunReport`` per filtered run."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from plugqc.core.types import RunReport


@runtime_checkable
class Reporter(Protocol):
    def report(self, run_report: RunReport) -> None: ...


class NullReporter:
    """Discards every report."""

    def report(self, run_report: RunReport) -> None:
        return None


class RecordingReporter:
    """Keeps reports in arrival order."""

    def __init__(self) -> None:
        self.reports: list[RunReport] = []

    def report(self, run_report: RunReport) -> None:
        self.reports.append(run_report)


class LoggingReporter:
    """Writes one log record per run with the summary text."""

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        self.logger = logger or logging.getLogger("plugqc")
        self.level = int(level)

    def report(self, run_report: RunReport) -> None:
        lines = run_report.summary_lines()
        if run_report.removed_samples:
            lines.append(
                f"sample(s) {', '.join(run_report.removed_samples)} have less than "
                f"{run_report.min_replicates} replicates and will therefore be removed"
            )
        self.logger.log(self.level, "\n".join(lines))


class CompositeReporter:
    """Forwards each report to several sinks in order."""

    def __init__(self, *reporters: Reporter) -> None:
        self.reporters = list(reporters)

    def report(self, run_report: RunReport) -> None:
        for r in self.reporters:
            r.report(run_report)
