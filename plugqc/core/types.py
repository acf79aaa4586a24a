"""Typed configuration and result containers for quality assessment."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator

import numpy as np


@dataclass(frozen=True)
class FilterConfig:
    """Outlier rule applied to every run."""

    control_column: str = "orange"
    whisker: float = 1.5
    min_replicates: int = 2

    def __post_init__(self) -> None:
        if not str(self.control_column):
            raise ValueError("control_column must be a non-empty column name.")
        if not math.isfinite(float(self.whisker)) or float(self.whisker) < 0:
            raise ValueError("whisker must be finite and >= 0.")
        if int(self.min_replicates) != self.min_replicates or self.min_replicates < 0:
            raise ValueError("min_replicates must be an integer >= 0.")


@dataclass(frozen=True)
class AcceptanceInterval:
    """Tukey fence computed from pooled control values.

    Unpacks as ``(lower, upper)``.
    """

    lower: float
    upper: float
    q1: float
    q3: float
    iqr: float
    median: float
    n: int
    whisker: float = 1.5

    def __iter__(self) -> Iterator[float]:
        yield self.lower
        yield self.upper

    def contains(self, values: Any) -> np.ndarray:
        """Strict membership: ``lower < x < upper``. NaN is never inside."""
        arr = np.asarray(values, dtype=float)
        return (arr > self.lower) & (arr < self.upper)

    def outlier_mask(self, values: Any) -> np.ndarray:
        """Values outside the closed interval ``[lower, upper]``."""
        arr = np.asarray(values, dtype=float)
        return (arr < self.lower) | (arr > self.upper)


@dataclass(frozen=True)
class RunReport:
    """Diagnostic summary for one filtered run."""

    index: Any
    interval: AcceptanceInterval
    n_total: int
    n_outliers: int
    removed_samples: tuple[str, ...]
    n_kept_records: int
    min_replicates: int
    control_values: np.ndarray = field(repr=False, compare=False)

    def summary_lines(self) -> list[str]:
        if self.removed_samples:
            removed = "samples removed: " + ",".join(self.removed_samples)
        else:
            removed = "samples removed: none"
        return [
            f"run {self.index}: median={round(self.interval.median, 2)}, "
            f"IQR={round(self.interval.iqr, 3)}",
            removed,
            f"total = {self.n_total}   outliers = {self.n_outliers}",
        ]


@dataclass(frozen=True)
class ReplicateRecord:
    """One replicate measurement: the control value plus any other fields."""

    orange: float
    fields: dict[str, Any] = field(default_factory=dict)

    def as_row(self, control_column: str = "orange") -> dict[str, Any]:
        if control_column in self.fields:
            raise ValueError(
                f"Field '{control_column}' duplicates the control value of the record."
            )
        return {control_column: float(self.orange), **self.fields}
