"""Tukey-fence acceptance interval for pooled control values."""

from __future__ import annotations

import math

import numpy as np

from plugqc.core.types import AcceptanceInterval
from plugqc.core.utils import finite_1d

DEFAULT_WHISKER = 1.5


def estimate_acceptance_interval(
    values: np.ndarray, whisker: float = DEFAULT_WHISKER
) -> AcceptanceInterval:
    """Return ``[Q1 - whisker*IQR, Q3 + whisker*IQR]`` for ``values``.

    Quartiles use linear interpolation between order statistics
    (Hyndman-Fan type 7), pinned explicitly so results do not depend on the
    numpy default. Fewer than four values are accepted and give whatever the
    quantile rule yields.
    """
    arr = finite_1d("values", values)
    w = float(whisker)
    if not math.isfinite(w) or w < 0:
        raise ValueError("whisker must be finite and >= 0.")

    q1, median, q3 = np.quantile(arr, [0.25, 0.5, 0.75], method="linear")
    iqr = float(q3 - q1)
    return AcceptanceInterval(
        lower=float(q1) - w * iqr,
        upper=float(q3) + w * iqr,
        q1=float(q1),
        q3=float(q3),
        iqr=iqr,
        median=float(median),
        n=int(arr.size),
        whisker=w,
    )
