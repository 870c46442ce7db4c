"""Front matter date parsing and normalization"""

from datetime import date, datetime, timezone


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 date or timestamp into an aware UTC datetime.

    A bare date is midnight UTC; naive timestamps are taken as UTC.
    Raises ValueError for anything else, including instants outside the
    representable range once shifted to UTC.
    """
    try:
        dt = datetime.fromisoformat(value.strip())
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (AttributeError, ValueError, OverflowError):
        raise ValueError(f"unparseable date {value!r}") from None


def normalize_date(value) -> str:
    """Return an ISO string for a YAML date/datetime or a validated date string."""
    if isinstance(value, (date, datetime)):
        value = value.isoformat()
    if isinstance(value, str):
        parse_instant(value)
        return value.strip()
    raise ValueError(f"expected a date, got {type(value).__name__}")
