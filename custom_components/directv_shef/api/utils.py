"""Small utility helpers for the API client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def safe_int(value: Any) -> int:
    """Convert to int or return 0."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def safe_str(value: Any) -> str:
    """Convert to str, mapping None to an empty string."""
    if value is None:
        return ""

    return str(value)


def safe_bool(value: Any) -> bool:
    """Convert JSON booleans, numbers and "true"/"false" strings."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")

    return bool(value)


def format_param(value: Any) -> str | None:
    """Format a query parameter value, returning None for absent values."""
    if value is None:
        return None

    if isinstance(value, bool):
        return "true" if value else "false"

    text = str(value).strip()

    return text or None


def clean_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Drop absent or empty parameters and stringify the rest."""
    if not params:
        return {}

    out: dict[str, str] = {}
    for key, value in params.items():
        text = format_param(value)
        if text is not None:
            out[key] = text

    return out
