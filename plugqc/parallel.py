"""Order-stable map over independent work items."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def ordered_map(
    func: Callable[[T], R],
    items: Iterable[T],
    *,
    n_jobs: int = 1,
) -> list[R]:
    """Apply ``func`` to every item; output order always follows input order.

    ``n_jobs > 1`` runs on a thread pool. The first exception raised by any
    item propagates to the caller.
    """
    seq = list(items)
    if not seq:
        return []

    jobs = max(1, int(n_jobs))
    if jobs == 1 or len(seq) == 1:
        return [func(item) for item in seq]

    with ThreadPoolExecutor(max_workers=min(jobs, len(seq))) as ex:
        return list(ex.map(func, seq))
