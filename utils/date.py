"""Calendar date coercion helpers."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional, Union

from dateutil.parser import isoparse

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime]


class InvalidDateError(ValueError):
    """Raised when a date-bearing field cannot be read as a calendar date."""


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, date or datetime to a calendar date.
    Accepts 'YYYY-MM-DD', 'YYYYMMDD' and full ISO-8601 timestamps.
    Anything else, including None, raises InvalidDateError.
    """
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        try:
            return isoparse(text).date()
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(f"Unsupported date string: {date_like!r}") from exc
    raise InvalidDateError(f"Unsupported value for date: {date_like!r}")


def datetime_to_str(date_like: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(date_like).strftime(DATE_FMT)


def resolve_as_of(as_of: Optional[DateLike]) -> date:
    """Reference day for forward-looking calculations; today when omitted."""
    if as_of is None:
        return date.today()
    return to_date(as_of)


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def to_instant(value: Optional[Union[date, datetime]]) -> Optional[datetime]:
    """Promote a calendar date to midnight UTC; datetimes and None pass through."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise TypeError(f"Expected a date or datetime, got {type(value)}")
