"""Small general-purpose helpers."""

from __future__ import annotations

from typing import Any

__all__ = ["in_threshold"]


def in_threshold(value: Any, target: Any, threshold: Any) -> bool:
    """Return True when ``value`` lies within ``threshold`` of ``target`` (inclusive)."""
    return target - threshold <= value <= target + threshold