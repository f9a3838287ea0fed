"""Exercise Tracker API - Utilities Package."""

from tracker.utils.dates import format_date, parse_date, parse_upper_bound
from tracker.utils.errors import (
    TrackerException,
    ValidationError,
    NotFoundError,
    PersistenceError,
)

__all__ = [
    "format_date",
    "parse_date",
    "parse_upper_bound",
    "TrackerException",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
]
