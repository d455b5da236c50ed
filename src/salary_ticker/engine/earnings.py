"""
Instant earnings calculator.

Maps (schedule, wall-clock instant) to the money accrued so far today.
Pure: no state, no I/O, safe to call on every UI tick.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Tuple

from salary_ticker.domain.models import ScheduleConfig, WorkStats
from salary_ticker.utils.workdays import is_rest_day

# Average weeks per month. Fixed approximation, kept for figure compatibility.
WEEKS_PER_MONTH = 4.33


def daily_target(config: ScheduleConfig) -> float:
    """Portion of the monthly salary attributed to one work day."""
    avg_work_days_per_month = max(1, config.work_days_per_week * WEEKS_PER_MONTH)
    return config.monthly_salary / avg_work_days_per_month


def hourly_rate(config: ScheduleConfig) -> float:
    """Daily target spread over the work window; 0 when the window is empty."""
    start, end = work_window(config, date.today())
    hours = (end - start).total_seconds() / 3600
    if hours <= 0:
        return 0.0
    return daily_target(config) / hours


def work_window(config: ScheduleConfig, day: date) -> Tuple[datetime, datetime]:
    start = datetime.combine(day, config.start_time)
    end = datetime.combine(day, config.end_time)
    return start, end


def compute_work_stats(config: ScheduleConfig, now: datetime) -> WorkStats:
    """
    Earnings accrued at `now`, with progress and working/resting flags.

    Rest days report 100% progress (nothing left to do). A window whose end
    is not after its start accrues nothing.
    """
    if is_rest_day(now, config.rest_days):
        return WorkStats(
            current_earnings=0.0,
            elapsed_time_seconds=0.0,
            progress_percentage=100.0,
            is_working=False,
            is_rest_day=True,
        )

    start, end = work_window(config, now.date())
    total_work_seconds = (end - start).total_seconds()
    if total_work_seconds <= 0:
        return WorkStats(
            current_earnings=0.0,
            elapsed_time_seconds=0.0,
            progress_percentage=0.0,
            is_working=False,
            is_rest_day=False,
        )

    target = daily_target(config)
    per_second_rate = target / total_work_seconds

    elapsed = (now.replace(tzinfo=None) - start).total_seconds()

    # Finished: snap to the exact target so rate * seconds cannot drift.
    if elapsed >= total_work_seconds:
        return WorkStats(
            current_earnings=target,
            elapsed_time_seconds=total_work_seconds,
            progress_percentage=100.0,
            is_working=False,
            is_rest_day=False,
        )

    is_working = True
    if elapsed < 0:
        elapsed = 0.0
        is_working = False

    progress = elapsed / total_work_seconds * 100
    return WorkStats(
        current_earnings=elapsed * per_second_rate,
        elapsed_time_seconds=elapsed,
        progress_percentage=min(100.0, max(0.0, progress)),
        is_working=is_working,
        is_rest_day=False,
    )
