from __future__ import annotations

from datetime import date, datetime, time, timezone

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` (or a full ISO datetime, keeping only its date)."""
    if not isinstance(value, str) or len(value) < 10:
        raise ValidationError("date must be an ISO date (YYYY-MM-DD)")
    try:
        if len(value) == 10:
            return date.fromisoformat(value)
        # fromisoformat before 3.11 rejects the "Z" suffix
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise ValidationError("date must be an ISO date (YYYY-MM-DD)")


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def date_to_datetime(value: date) -> datetime:
    """BSON has no date type: store calendar dates as (naive) UTC midnight."""
    return datetime.combine(value, time.min)


def datetime_to_date(value: datetime | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def now_utc() -> datetime:
    """Current UTC time as a naive datetime, the way pymongo returns it.

    Note: Wrapped so tests can patch it easier. Mongo keeps millisecond precision.
    """
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
