"""Date helpers for the rolling lookback window."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timezone


def shift_months(day: date, months: int) -> date:
    """Move `day` by a number of calendar months, clamping to the month's end."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def compute_cutoff(now: datetime | None = None, months: int = 6) -> str:
    """Return the ISO date `months` before `now` (UTC)."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return shift_months(now.date(), -months).isoformat()
