"""Date helpers for schedule derivation.

All comparisons happen on calendar dates, which is the same as
normalizing both sides to local midnight.
"""

from datetime import date, datetime

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta


def coerce_date(value: object) -> date | None:
    """Convert a record's date field to a ``date``.

    Accepts ``date``, ``datetime`` and ISO 8601 strings (``"2024-03-01"``,
    ``"2024-03-01T00:00:00.000Z"``). Returns None for anything missing or
    unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return coerce_date(isoparse(text))
        except (ValueError, OverflowError):
            return None
    return None


def resolve_as_of(as_of: date | datetime | None = None) -> date:
    """Return the classification date, reading the clock when not given.

    Called once per operation so each call sees the current time. Aware
    datetimes are converted to local time first, the same way
    :func:`coerce_date` treats due dates.
    """
    if as_of is None:
        return datetime.now().date()
    return coerce_date(as_of)


def add_months(anchor: date, months: int) -> date:
    """Advance ``anchor`` by whole calendar months.

    Days past the end of the target month clamp to its last day
    (Jan 31 + 1 month -> Feb 28/29).
    """
    return anchor + relativedelta(months=months)


def days_between(earlier: date, later: date) -> int:
    """Whole days from ``earlier`` to ``later`` (negative if reversed)."""
    return (later - earlier).days
