"""
Period aggregator.

Month-to-date and year-to-date totals:
- today's live earnings from the instant calculator
- every earlier day of the year from history when recorded
- otherwise an estimate from the current schedule (0 on rest days, the
  full daily target on work days)

The weekly trend is a projection of the current schedule, NOT history.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List

import pandas as pd

from salary_ticker.domain.models import AggregateStats, DailyRecord, ScheduleConfig, TrendPoint
from salary_ticker.engine.earnings import compute_work_stats, daily_target
from salary_ticker.utils.workdays import MONDAY_FIRST, SHORT_NAMES, days_before, is_rest_day


def _index_history(history: Iterable[DailyRecord]) -> Dict[str, DailyRecord]:
    return {record.date: record for record in history}


def aggregate(
    config: ScheduleConfig,
    now: datetime,
    history: Iterable[DailyRecord] = (),
) -> AggregateStats:
    """
    Roll today's live value and every earlier day of the year into totals.
    """
    target = daily_target(config)
    today_earnings = compute_work_stats(config, now).current_earnings
    records = _index_history(history)

    month_total = 0.0
    year_total = 0.0

    for day in days_before(now):
        record = records.get(day.isoformat())
        if record is not None:
            daily_income = record.earned
        elif is_rest_day(day, config.rest_days):
            daily_income = 0.0
        else:
            daily_income = target

        year_total += daily_income
        if day.month == now.month:
            month_total += daily_income

    month_total += today_earnings
    year_total += today_earnings

    return AggregateStats(
        today_earnings=today_earnings,
        month_total=month_total,
        year_total=year_total,
        current_daily_target=target,
    )


def weekly_trend(config: ScheduleConfig) -> List[TrendPoint]:
    """Projected income per weekday, Monday through Sunday."""
    target = daily_target(config)
    points = []
    for day_id in MONDAY_FIRST:
        rest = day_id in config.rest_days
        points.append(
            TrendPoint(
                weekday=day_id,
                name=SHORT_NAMES[day_id],
                income=0.0 if rest else target,
                is_rest_day=rest,
            )
        )
    return points


def trend_frame(points: List[TrendPoint]) -> pd.DataFrame:
    """Weekly trend as a DataFrame (Day / Income / RestDay) for rendering and export."""
    return pd.DataFrame(
        {
            "Day": [p.name for p in points],
            "Income": [round(p.income, 2) for p in points],
            "RestDay": [p.is_rest_day for p in points],
        }
    )
