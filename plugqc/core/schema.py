"""Sample construction and run-level schema validation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import pandas as pd
from pandas.api.types import is_numeric_dtype

from plugqc.core.errors import SchemaMismatchError
from plugqc.core.types import ReplicateRecord


def make_sample(
    records: Iterable[ReplicateRecord | Mapping[str, Any]],
    *,
    columns: Sequence[str] | None = None,
    control_column: str = "orange",
) -> pd.DataFrame:
    """Build a sample table from replicate records or plain row mappings.

    With no records, ``columns`` gives the schema of the empty table.
    """
    rows: list[dict[str, Any]] = []
    for rec in records:
        if isinstance(rec, ReplicateRecord):
            rows.append(rec.as_row(control_column))
        elif isinstance(rec, Mapping):
            rows.append(dict(rec))
        else:
            raise TypeError(
                f"Replicate records must be ReplicateRecord or mappings, got {type(rec).__name__}."
            )
    if not rows:
        cols = list(columns) if columns is not None else [control_column]
        return pd.DataFrame(
            {c: pd.Series(dtype=float if c == control_column else object) for c in cols}
        )

    reference = list(columns) if columns is not None else list(rows[0])
    if control_column not in reference:
        raise SchemaMismatchError(f"Records have no control field '{control_column}'.")
    expected = set(reference)
    for i, row in enumerate(rows):
        keys = set(row)
        if keys != expected:
            missing = sorted(expected - keys)
            extra = sorted(keys - expected)
            raise SchemaMismatchError(
                f"Record {i} does not match fields {reference} "
                f"(missing: {missing}, unexpected: {extra})."
            )
    return pd.DataFrame(rows, columns=reference)


def empty_like(sample: pd.DataFrame) -> pd.DataFrame:
    """Zero-row copy of ``sample`` keeping its column names and dtypes."""
    return sample.iloc[0:0].copy()


def validate_run(run: Mapping[str, pd.DataFrame], control_column: str = "orange") -> list[str]:
    """Check that every sample is a table with one shared schema.

    Field types are compared as numeric or not across non-empty samples.
    Returns the shared column names. Raises ``SchemaMismatchError`` otherwise.
    """
    if not isinstance(run, Mapping):
        raise SchemaMismatchError(
            f"A run must map sample names to tables, got {type(run).__name__}."
        )
    reference: list[str] | None = None
    reference_name: str | None = None
    kinds: dict[str, bool] | None = None
    kinds_name: str | None = None
    for name, sample in run.items():
        if not isinstance(sample, pd.DataFrame):
            raise SchemaMismatchError(
                f"Sample '{name}' must be a pandas DataFrame, got {type(sample).__name__}."
            )
        cols = [str(c) for c in sample.columns]
        if len(set(cols)) != len(cols):
            raise SchemaMismatchError(f"Sample '{name}' has duplicated column names.")
        if control_column not in cols:
            raise SchemaMismatchError(
                f"Sample '{name}' has no control column '{control_column}'."
            )
        if len(sample) > 0 and not is_numeric_dtype(sample[control_column]):
            raise SchemaMismatchError(
                f"Control column '{control_column}' of sample '{name}' is not numeric."
            )
        if reference is None:
            reference, reference_name = cols, str(name)
        elif set(cols) != set(reference):
            raise SchemaMismatchError(
                f"Sample '{name}' columns {cols} differ from sample "
                f"'{reference_name}' columns {reference}."
            )
        if len(sample) == 0:
            continue
        numeric = {str(c): bool(is_numeric_dtype(sample[c])) for c in sample.columns}
        if kinds is None:
            kinds, kinds_name = numeric, str(name)
            continue
        drift = sorted(c for c in numeric if numeric[c] != kinds.get(c))
        if drift:
            raise SchemaMismatchError(
                f"Sample '{name}' field types of {drift} differ from sample '{kinds_name}'."
            )
    return list(reference or [])
