"""Small general-purpose helpers."""

from __future__ import annotations

import copy
import math
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx

T = TypeVar("T")


def stringify_query_value(value: Any) -> str:
    """String form of a query parameter value.

    Booleans become ``true``/``false`` and sequences are comma-joined.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_query_value(item) for item in value)
    return str(value)


def is_empty(value: Any) -> bool:
    """True for None, blank strings, and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def generate_url(base_url: str, params: Mapping[str, Any]) -> str:
    """Append ``params`` to ``base_url`` as a query string, skipping None values."""
    query = {
        key: stringify_query_value(value)
        for key, value in params.items()
        if value is not None
    }
    if not query:
        return base_url
    return f"{base_url}?{httpx.QueryParams(query)}"


def calculate_percentage(value: float, total: float) -> int:
    """Whole-number percentage of ``value`` in ``total``; 0 when total is 0."""
    if total == 0:
        return 0
    # Half-up rounding
    return math.floor(value / total * 100 + 0.5)


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}..."


def deep_clone(obj: T) -> T:
    return copy.deepcopy(obj)
