"""Utilities for datetime handling."""

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Return a timezone-aware datetime, treating naive values as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def resolve_now(now: datetime | None) -> datetime:
    """Use ``now`` (naive values taken as UTC) or the current UTC time."""
    if now is None:
        return now_utc()
    return ensure_utc(now)


def from_iso(value: str) -> datetime:
    """Parse ISO format string to a timezone-aware datetime."""
    # Handle both 'Z' suffix and explicit timezone
    return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
