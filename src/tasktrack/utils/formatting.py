"""Human-readable rendering of elapsed seconds."""


def _split(seconds: float) -> tuple[int, int, int]:
    total = int(seconds)
    return total // 3600, (total % 3600) // 60, total % 60


def format_clock(seconds: float) -> str:
    """Format as H:MM:SS when at least an hour, otherwise M:SS."""
    hours, minutes, secs = _split(seconds)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_duration_long(seconds: float) -> str:
    """Format as '2 hours 5 minutes' or '5 minutes'."""
    hours, minutes, _ = _split(seconds)
    if hours > 0:
        return f"{hours} hours {minutes} minutes"
    return f"{minutes} minutes"


def format_duration_short(seconds: float) -> str:
    """Format as 'H:MM' or 'M min'."""
    hours, minutes, _ = _split(seconds)
    if hours > 0:
        return f"{hours}:{minutes:02d}"
    return f"{minutes} min"
