"""
Exercise Tracker API - Date Helpers.

All datetimes handled by the service are naive UTC, matching what MongoDB
hands back for BSON dates.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Union

from tracker.utils.errors import ValidationError

# Rendered form, e.g. "Sun Jan 15 2023"
DATE_STRING_FORMAT = "%a %b %d %Y"

_DATE_ONLY_FORMAT = "%Y-%m-%d"
_EXTRA_FORMATS = (
    DATE_STRING_FORMAT,
    "%B %d, %Y",
    "%b %d, %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
)


def utc_now() -> datetime:
    """Current time as naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _is_date_only(value: str) -> bool:
    try:
        datetime.strptime(value, _DATE_ONLY_FORMAT)
    except ValueError:
        return False
    return True


def parse_date(value: Union[str, date, datetime, None], field: str = "date") -> Optional[datetime]:
    """
    Parse a client-supplied date.

    Accepts ``YYYY-MM-DD``, ISO 8601 datetimes (with or without offset) and
    a handful of written forms, including the rendered ``Sun Jan 15 2023``.
    Blank values count as absent.

    Args:
        value: Raw value from the request.
        field: Field name used in the error message.

    Returns:
        Naive UTC datetime, or None if the value is absent.

    Raises:
        ValidationError: If the value cannot be read as a date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    text = str(value).strip()
    if not text:
        return None

    try:
        return _to_naive_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in _EXTRA_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise ValidationError(f"Invalid {field}: {text}")


def parse_upper_bound(value: Optional[str], field: str = "to") -> Optional[datetime]:
    """
    Parse an inclusive upper bound for log queries.

    A bare calendar date covers the whole of that day.
    """
    parsed = parse_date(value, field)
    if parsed is None:
        return None
    if _is_date_only(str(value).strip()):
        return datetime.combine(parsed.date(), time.max)
    return parsed


def format_date(value: datetime) -> str:
    """Render a datetime as a calendar-date string without time of day."""
    return value.strftime(DATE_STRING_FORMAT)
