import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Tuple, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

# Monday-first order used by numpy weekmasks and the weekly trend.
MONDAY_FIRST = [1, 2, 3, 4, 5, 6, 0]
SHORT_NAMES = {1: "Mon", 2: "Tue", 3: "Wed", 4: "Thu", 5: "Fri", 6: "Sat", 0: "Sun"}


def weekday(d: DateLike) -> int:
    """
    Weekday id with Sunday as 0 and Saturday as 6.
    """
    return (d.weekday() + 1) % 7


def is_rest_day(d: DateLike, rest_days: Iterable[int]) -> bool:
    return weekday(d) in set(rest_days)


def weekmask(rest_days: Iterable[int]) -> str:
    """
    numpy weekmask ("1111100" style, Monday first) marking work days.
    """
    rest = set(rest_days)
    return "".join("0" if day_id in rest else "1" for day_id in MONDAY_FIRST)


def days_before(today: DateLike) -> List[date]:
    """
    Every calendar day from January 1 of today's year up to, but excluding, today.
    """
    if isinstance(today, datetime):
        today = today.date()
    year_start = today.replace(month=1, day=1)
    days = pd.date_range(year_start, today - timedelta(days=1), freq="D")
    return [ts.date() for ts in days]


def count_work_days(start: date, end: date, rest_days: Iterable[int]) -> int:
    """
    Counts non-rest days between start and end, both inclusive.
    """
    if end < start:
        return 0
    mask = weekmask(rest_days)
    if "1" not in mask:
        return 0
    bdc = np.busdaycalendar(weekmask=mask)
    count = int(np.busday_count(start, end + timedelta(days=1), busdaycal=bdc))
    logger.debug(f"Work days between {start} and {end}: {count}")
    return count


def month_work_days(d: date, rest_days: Iterable[int]) -> Tuple[int, int]:
    """
    Work days elapsed in d's month (through d) and the month's total.
    """
    rest_days = list(rest_days)
    month_start = d.replace(day=1)
    month_end = date(d.year, d.month, calendar.monthrange(d.year, d.month)[1])
    return count_work_days(month_start, d, rest_days), count_work_days(month_start, month_end, rest_days)
