from datetime import datetime, timezone


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_long_date(value: datetime) -> str:
    """Long English date, e.g. ``October 19, 2026``."""
    return f"{value:%B} {value.day}, {value.year}"
