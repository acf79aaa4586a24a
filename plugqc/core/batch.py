"""Apply the run filter to every run of an experiment."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pandas as pd

from plugqc.config import resolve_filter_config
from plugqc.core.filtering import Run, filter_run_with_report
from plugqc.core.types import FilterConfig, RunReport
from plugqc.parallel import ordered_map

if TYPE_CHECKING:
    from plugqc.reporting import Reporter

logger = logging.getLogger(__name__)


def _indexed_runs(
    runs: Sequence[Mapping[str, pd.DataFrame]] | Mapping[str, Mapping[str, pd.DataFrame]],
) -> list[tuple[Any, Mapping[str, pd.DataFrame]]]:
    if isinstance(runs, Mapping):
        return [(label, run) for label, run in runs.items()]
    if isinstance(runs, (str, bytes)) or not isinstance(runs, Sequence):
        raise TypeError(
            f"runs must be a sequence or mapping of runs, got {type(runs).__name__}."
        )
    return [(i, run) for i, run in enumerate(runs, start=1)]


def quality_assessment(
    runs: Sequence[Mapping[str, pd.DataFrame]] | Mapping[str, Mapping[str, pd.DataFrame]],
    *,
    config: FilterConfig | str | Path | None = None,
    reporter: Reporter | None = None,
    n_jobs: int = 1,
) -> list[Run]:
    """Remove control-channel outlier replicates from every run.

    Runs are labelled 1..n for sequences and by key for mappings. The result
    lists filtered runs in input order. ``config`` may also be a path to a JSON
    filter config. Reporter calls are serialised so each run's diagnostics
    arrive as one block even when ``n_jobs > 1``.
    """
    cfg = resolve_filter_config(config)
    indexed = _indexed_runs(runs)
    lock = threading.Lock()

    def _one(item: tuple[Any, Mapping[str, pd.DataFrame]]) -> tuple[Run, RunReport]:
        label, run = item
        out, report = filter_run_with_report(run, label, config=cfg)
        if reporter is not None:
            with lock:
                reporter.report(report)
        return out, report

    results = ordered_map(_one, indexed, n_jobs=n_jobs)
    n_removed = sum(len(report.removed_samples) for _, report in results)
    logger.debug("quality assessment: %d runs, %d samples emptied", len(results), n_removed)
    return [out for out, _ in results]
