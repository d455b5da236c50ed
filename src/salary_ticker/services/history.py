# src/salary_ticker/services/history.py
"""
Day close-out: turns finished days into DailyRecord entries so later salary
changes do not rewrite the past.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

from salary_ticker.domain.models import DailyRecord, ScheduleConfig, UserSettings
from salary_ticker.engine.earnings import daily_target
from salary_ticker.utils.logger import get_logger
from salary_ticker.utils.workdays import days_before, is_rest_day

logger = get_logger(__name__)


def record_day(config: ScheduleConfig, day: date) -> DailyRecord:
    """
    Record for a finished day under the given schedule. A finished work day
    earned the full daily target, whatever the hours say.
    """
    rest = is_rest_day(day, config.rest_days)
    earned = 0.0 if rest else daily_target(config)
    return DailyRecord(
        date=day.isoformat(),
        earned=earned,
        is_rest_day=rest,
        salary_snapshot=config.monthly_salary,
    )


def close_out(settings: UserSettings, today: date | datetime) -> UserSettings:
    """
    Copy of settings with a record for every earlier day of the year that
    has none yet. Existing records are left untouched.
    """
    schedule = settings.schedule
    recorded = {r.date for r in settings.history}

    new_records = [
        record_day(schedule, day)
        for day in days_before(today)
        if day.isoformat() not in recorded
    ]
    if new_records:
        logger.info("Recorded %d past day(s), through %s", len(new_records), new_records[-1].date)

    history = sorted(settings.history + new_records, key=lambda r: r.date)
    return replace(settings, history=history)
