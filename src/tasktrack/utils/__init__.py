"""Utility functions."""

from .datetime import ensure_utc, from_iso, now_utc, resolve_now
from .formatting import format_clock, format_duration_long, format_duration_short

__all__ = [
    "ensure_utc",
    "format_clock",
    "format_duration_long",
    "format_duration_short",
    "from_iso",
    "now_utc",
    "resolve_now",
]
