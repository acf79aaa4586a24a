"""Filter configuration from JSON files."""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any

from plugqc.core.types import FilterConfig


def filter_config_from_dict(data: dict[str, Any]) -> FilterConfig:
    allowed = {f.name for f in fields(FilterConfig)}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValueError(
            f"Unknown filter config key(s): {', '.join(unknown)}. "
            f"Allowed: {', '.join(sorted(allowed))}."
        )
    return FilterConfig(**data)


def load_filter_config(path: str | Path) -> FilterConfig:
    """Read a ``FilterConfig`` from a JSON object; absent keys keep defaults."""
    cfg_path = Path(path)
    if cfg_path.suffix.lower() != ".json":
        raise ValueError(f"Filter config '{cfg_path}' must be a .json file.")
    if not cfg_path.is_file():
        raise FileNotFoundError(f"Filter config not found: {cfg_path}")

    text = cfg_path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(
            f"Filter config '{cfg_path}' is not valid JSON "
            f"(line {exc.lineno}, column {exc.colno}): {exc.msg}"
        ) from exc
    if not isinstance(data, dict):
        raise ValueError(
            f"Filter config '{cfg_path}' must hold a JSON object, not {type(data).__name__}."
        )
    return filter_config_from_dict(data)


def resolve_filter_config(config: FilterConfig | str | Path | None) -> FilterConfig:
    """Accept a ready config, a path to a JSON config, or ``None`` for defaults."""
    if config is None:
        return FilterConfig()
    if isinstance(config, FilterConfig):
        return config
    if isinstance(config, (str, Path)):
        return load_filter_config(config)
    raise TypeError(
        f"config must be a FilterConfig or a path, got {type(config).__name__}."
    )
