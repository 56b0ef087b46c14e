"""
Small numeric, lookup and file helpers shared by both scoring engines.
"""

import json
import math
from pathlib import Path
from typing import Any

import yaml


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, 17.5 -> 18)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def format_years(value: float) -> str:
    """Render a year count without a trailing '.0' for whole numbers."""
    return f"{value:g}"


def pick(source: Any, *keys: str, default: Any = None) -> Any:
    """
    Return the first truthy value found under any of ``keys``.

    Works on mappings and on plain objects (attribute access), so callers can
    pass either API dicts or model instances.
    """
    if source is None:
        return default
    for key in keys:
        if isinstance(source, dict):
            value = source.get(key)
        else:
            value = getattr(source, key, None)
        if value:
            return value
    return default


def read_document(path: Path) -> Any:
    """Parse a YAML or JSON file (JSON is chosen by the ``.json`` suffix)."""
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            return json.load(f)
        return yaml.safe_load(f)
