from __future__ import annotations

import pandas as pd
import pytest


def _sample(*orange: float) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "orange": [float(v) for v in orange],
            "green": [float(i) for i in range(len(orange))],
            "peak": [f"p{i}" for i in range(len(orange))],
        }
    )


@pytest.fixture
def sample():
    return _sample


@pytest.fixture
def e2e_run() -> dict[str, pd.DataFrame]:
    return {
        "A": _sample(1.0, 2.0, 100.0),
        "B": _sample(1.5, 2.5),
    }
