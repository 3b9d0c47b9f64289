"""Report date range helpers."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable

from .models import DateRange


def domain_trailing_day_range(today_provider: Callable[[], date] = date.today) -> DateRange:
    """Build the yesterday-through-today report range.

    Args:
        today_provider: Callable returning the local calendar date.

    Returns:
        DateRange: ISO formatted (yesterday, today) pair.
    """

    today = today_provider()
    yesterday = today - timedelta(days=1)
    return DateRange(start_date=yesterday.isoformat(), end_date=today.isoformat())
