from __future__ import annotations

import io
from datetime import datetime
from typing import List, Optional, Tuple

from salary_ticker.domain.models import AggregateStats, ScheduleConfig, TrendPoint, WorkStats
from salary_ticker.engine.aggregation import trend_frame
from salary_ticker.engine.earnings import daily_target, hourly_rate
from salary_ticker.presentation.formatting import fmt_duration, fmt_money, fmt_percent, progress_bar


def _status_label(stats: WorkStats) -> str:
    if stats.is_rest_day:
        return "REST DAY"
    if stats.is_working:
        return "WORKING"
    if stats.progress_percentage >= 100:
        return "DONE FOR TODAY"
    return "NOT STARTED"


def render_dashboard(
    stats: WorkStats,
    schedule: ScheduleConfig,
    now: datetime,
    quote: Optional[str] = None,
) -> str:
    out = io.StringIO()

    print("=" * 60, file=out)
    print(f"SALARY TICKER - {now.strftime('%a %Y-%m-%d %H:%M:%S')}", file=out)
    print("=" * 60, file=out)
    print(f"Status:        {_status_label(stats)}", file=out)

    if stats.is_rest_day:
        print("Today is a rest day. Nothing to earn, nothing to do.", file=out)
    else:
        decimals = 2 if stats.progress_percentage >= 100 else 4
        print(f"Earned today:  {fmt_money(stats.current_earnings, decimals)}", file=out)
        print(f"Daily target:  {fmt_money(daily_target(schedule))}", file=out)
        print(f"Hourly rate:   {fmt_money(hourly_rate(schedule))} / hour", file=out)
        print(f"Work window:   {schedule.work_start_hour} - {schedule.work_end_hour}", file=out)
        print(f"Time worked:   {fmt_duration(stats.elapsed_time_seconds)}", file=out)
        print(
            f"Progress:      {progress_bar(stats.progress_percentage)} {fmt_percent(stats.progress_percentage)}",
            file=out,
        )
        if not schedule.has_valid_window:
            print("WARNING: work end is not after work start; nothing accrues.", file=out)

    if quote:
        print(file=out)
        print(f'  "{quote}"', file=out)

    return out.getvalue()


def render_stats(
    aggregate: AggregateStats,
    trend: List[TrendPoint],
    now: datetime,
    work_days: Optional[Tuple[int, int]] = None,
) -> str:
    out = io.StringIO()

    print("=" * 60, file=out)
    print(f"INCOME OVERVIEW - {now.strftime('%Y-%m-%d %H:%M')}", file=out)
    print("=" * 60, file=out)
    print(f"Today:          {fmt_money(aggregate.today_earnings)}", file=out)
    print(f"This month:     {fmt_money(aggregate.month_total)}", file=out)
    print(f"Year to date:   {fmt_money(aggregate.year_total, 0)}", file=out)
    print(f"Daily target:   {fmt_money(aggregate.current_daily_target)}", file=out)
    if work_days is not None:
        elapsed, total = work_days
        print(f"Work days:      {elapsed} of {total} this month", file=out)

    print(file=out)
    print("== Weekly Trend (projection from current schedule, not history) ==", file=out)
    print(file=out)
    print(trend_frame(trend).to_string(index=False), file=out)
    print(file=out)
    print("Past days without a record are estimated from the current schedule.", file=out)

    return out.getvalue()
