"""Date parsing, ISO normalization, and display formatting"""

from datetime import date, datetime, time, timezone


_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
)


def parse_date(value) -> datetime | None:
    """Parse a frontmatter date into an aware UTC datetime, or None if unparseable.

    Accepts ``date``/``datetime`` objects and strings, tried as ISO-8601 first,
    then a few common written forms. Naive values are taken as UTC. Values that
    fall off the calendar once shifted to UTC are treated as unparseable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    else:
        parsed = _parse_text(str(value).strip())
        if parsed is None:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


def _parse_text(text: str) -> datetime | None:
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def to_iso(value: datetime) -> str:
    """2024-01-05T00:00:00.000Z"""
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sanitize_date(value) -> str | None:
    parsed = parse_date(value)
    return to_iso(parsed) if parsed else None


def timestamp(value: str | None) -> float:
    """Seconds since the epoch for an ISO date string; missing or invalid dates count as the epoch."""
    parsed = parse_date(value) if value else None
    return parsed.timestamp() if parsed else 0.0


def format_display_date(value: str | None, fallback: str = "Unknown") -> str:
    """'2024-01-05T00:00:00.000Z' -> 'Jan 5, 2024' (UTC)."""
    parsed = parse_date(value) if value else None
    if parsed is None:
        return fallback
    return f"{parsed:%b} {parsed.day}, {parsed.year}"
