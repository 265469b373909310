"""Business day arithmetic."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from django.utils import timezone

from revlist.calendar.models import Holiday


#: The values of :py:meth:`datetime.date.weekday` that fall on a weekend.
WEEKEND_DAYS = {5, 6}


def is_business_day(day, holidays=()):
    """Return whether a day is a business day.

    Args:
        day (datetime.date):
            The day to check.

        holidays (set of datetime.date, optional):
            The holidays to treat as non-working days.

    Returns:
        bool:
        ``True`` if the day is neither on a weekend nor a holiday.
    """
    return day.weekday() not in WEEKEND_DAYS and day not in holidays


def get_holidays() -> set[date]:
    """Return the days of all stored holidays.

    Returns:
        set of datetime.date:
        The holiday days.
    """
    return set(Holiday.objects.values_list('day', flat=True))


def get_nth_business_day(
    timestamp: datetime,
    n: int,
    holidays: Optional[set[date]] = None,
) -> datetime:
    """Return the timestamp of the Nth business day from a starting point.

    This walks one calendar day at a time in the direction of ``n``,
    counting only days that are neither weekends nor :py:class:`Holiday`
    entries. The time of day is kept from ``timestamp``.

    Args:
        timestamp (datetime.datetime):
            The starting point. If this is timezone-aware, the day is
            determined in the current time zone.

        n (int):
            The number of business days to move. Negative values move into
            the past.

        holidays (set of datetime.date, optional):
            The holidays to skip. If not provided, they're loaded from the
            database.

    Returns:
        datetime.datetime:
        The resulting timestamp.
    """
    if holidays is None:
        holidays = get_holidays()

    interval = timedelta(days=1 if n > 0 else -1)
    result = timestamp
    remaining = abs(n)

    while remaining > 0:
        result += interval

        if timezone.is_aware(result):
            day = timezone.localtime(result).date()
        else:
            day = result.date()

        if is_business_day(day, holidays):
            remaining -= 1

    return result
