"""Per-run outlier filtering of replicate records on the control channel."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from plugqc.core.errors import EmptyRunError
from plugqc.core.schema import empty_like, validate_run
from plugqc.core.threshold import estimate_acceptance_interval
from plugqc.core.types import FilterConfig, RunReport

if TYPE_CHECKING:
    from plugqc.reporting import Reporter

logger = logging.getLogger(__name__)

Run = dict[str, pd.DataFrame]


def pool_control_values(
    run: Mapping[str, pd.DataFrame], control_column: str = "orange"
) -> np.ndarray:
    """Concatenate the control values of every record in every sample.

    Missing and infinite values are left out of the pool.
    """
    parts = [
        np.asarray(sample[control_column], dtype=float).ravel()
        for sample in run.values()
        if len(sample) > 0
    ]
    if not parts:
        return np.zeros(0, dtype=float)
    pooled = np.concatenate(parts)
    return pooled[np.isfinite(pooled)]


def filter_run_with_report(
    run: Mapping[str, pd.DataFrame],
    index: Any,
    *,
    config: FilterConfig | None = None,
) -> tuple[Run, RunReport]:
    """Filter one run and return it together with its diagnostic summary.

    Records are kept when ``lower < control < upper``. Samples left with fewer
    than ``config.min_replicates`` records are replaced by a zero-row table with
    the same columns. The input run is not modified.
    """
    cfg = config or FilterConfig()
    validate_run(run, cfg.control_column)

    pooled = pool_control_values(run, cfg.control_column)
    if pooled.size == 0:
        raise EmptyRunError(
            f"Run {index} has no '{cfg.control_column}' values to estimate a threshold from."
        )
    interval = estimate_acceptance_interval(pooled, whisker=cfg.whisker)

    out: Run = {}
    removed: list[str] = []
    n_kept = 0
    for name, sample in run.items():
        keep = interval.contains(sample[cfg.control_column].to_numpy(dtype=float))
        kept = sample.loc[keep].copy()
        if len(kept) < cfg.min_replicates:
            removed.append(str(name))
            out[name] = empty_like(sample)
        else:
            out[name] = kept
            n_kept += len(kept)

    report = RunReport(
        index=index,
        interval=interval,
        n_total=int(pooled.size),
        n_outliers=int(interval.outlier_mask(pooled).sum()),
        removed_samples=tuple(removed),
        n_kept_records=n_kept,
        min_replicates=int(cfg.min_replicates),
        control_values=pooled,
    )
    logger.debug(
        "run %s: fence=(%.4g, %.4g) kept=%d removed=%s",
        index,
        interval.lower,
        interval.upper,
        n_kept,
        removed or "none",
    )
    return out, report


def filter_run(
    run: Mapping[str, pd.DataFrame],
    index: Any,
    *,
    config: FilterConfig | None = None,
    reporter: Reporter | None = None,
) -> Run:
    """Filter one run, sending its diagnostic summary to ``reporter``."""
    out, report = filter_run_with_report(run, index, config=config)
    if reporter is not None:
        reporter.report(report)
    return out
