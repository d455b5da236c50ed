"""Period aggregator and weekly trend projection."""

import pytest

from conftest import at
from salary_ticker.domain.models import DailyRecord, ScheduleConfig
from salary_ticker.engine.aggregation import aggregate, trend_frame, weekly_trend
from salary_ticker.engine.earnings import compute_work_stats, daily_target


# 2026-01-01 is a Thursday; 2026-01-05 a Monday.

class TestAggregate:
    def test_first_week_of_year(self, schedule):
        target = daily_target(schedule)
        result = aggregate(schedule, at("2026-01-05", "13:30"))

        # Thu + Fri estimated, Sat + Sun rest, half of Monday live
        assert result.today_earnings == pytest.approx(target / 2)
        assert result.year_total == pytest.approx(2.5 * target)
        assert result.month_total == pytest.approx(2.5 * target)
        assert result.current_daily_target == target

    def test_new_years_day_is_only_today(self, schedule):
        now = at("2026-01-01", "12:00")
        result = aggregate(schedule, now)
        live = compute_work_stats(schedule, now).current_earnings

        assert result.today_earnings == live
        assert result.month_total == live
        assert result.year_total == live

    def test_month_boundary(self, schedule):
        # January 2026 has 22 weekdays; Feb 1 is a Sunday; Monday before start.
        result = aggregate(schedule, at("2026-02-02", "08:00"))
        target = daily_target(schedule)

        assert result.today_earnings == 0
        assert result.month_total == 0
        assert result.year_total == pytest.approx(22 * target)

    def test_today_after_work_adds_full_target(self, schedule):
        result = aggregate(schedule, at("2026-01-05", "19:00"))
        target = daily_target(schedule)
        assert result.today_earnings == target
        assert result.year_total == pytest.approx(3 * target)

    def test_rest_day_today(self, schedule):
        result = aggregate(schedule, at("2026-01-03", "12:00"))  # Saturday
        target = daily_target(schedule)
        assert result.today_earnings == 0
        assert result.year_total == pytest.approx(2 * target)

    def test_degenerate_window_still_estimates_past_days(self):
        config = ScheduleConfig(10000, frozenset({0, 6}), "18:00", "09:00")
        result = aggregate(config, at("2026-01-05", "12:00"))
        assert result.today_earnings == 0
        assert result.year_total == pytest.approx(2 * daily_target(config))

    def test_idempotent(self, schedule):
        history = [DailyRecord("2026-01-02", 123.0, False, 9000)]
        now = at("2026-03-10", "10:45")
        assert aggregate(schedule, now, history) == aggregate(schedule, now, history)


class TestHistoryPrecedence:
    def test_recorded_values_replace_estimates(self, schedule):
        target = daily_target(schedule)
        history = [
            DailyRecord("2026-01-02", 100.0, False, 8000),
            DailyRecord("2026-01-03", 50.0, True, 8000),  # worked a Saturday
        ]
        result = aggregate(schedule, at("2026-01-05", "13:30"), history)

        # Jan 1 estimated, Jan 2 and 3 recorded, Jan 4 rest, half of today
        assert result.year_total == pytest.approx(target + 100 + 50 + 0.5 * target)
        assert result.month_total == result.year_total

    def test_recorded_zero_on_a_work_day(self, schedule):
        history = [DailyRecord("2026-01-01", 0.0, False, 10000)]
        result = aggregate(schedule, at("2026-01-02", "08:00"), history)
        assert result.year_total == 0

    def test_only_current_month_counts_toward_month(self, schedule):
        target = daily_target(schedule)
        history = [
            DailyRecord("2026-01-30", 1000.0, False, 10000),
            DailyRecord("2026-02-02", 10.0, False, 10000),
        ]
        result = aggregate(schedule, at("2026-02-03", "08:00"), history)

        assert result.month_total == pytest.approx(10.0)
        assert result.year_total == pytest.approx(21 * target + 1000 + 10)

    def test_records_outside_the_walk_are_ignored(self, schedule):
        history = [
            DailyRecord("2025-12-31", 99999.0, False, 10000),
            DailyRecord("2026-01-05", 99999.0, False, 10000),  # today
            DailyRecord("2026-06-01", 99999.0, False, 10000),
        ]
        with_history = aggregate(schedule, at("2026-01-05", "13:30"), history)
        without = aggregate(schedule, at("2026-01-05", "13:30"))
        assert with_history == without


class TestWeeklyTrend:
    def test_monday_to_sunday(self, schedule):
        points = weekly_trend(schedule)
        assert [p.name for p in points] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert [p.weekday for p in points] == [1, 2, 3, 4, 5, 6, 0]

    def test_rest_days_are_zero(self, schedule):
        target = daily_target(schedule)
        points = weekly_trend(schedule)
        assert [p.income for p in points] == [target] * 5 + [0.0, 0.0]
        assert [p.is_rest_day for p in points] == [False] * 5 + [True, True]

    def test_frame(self, schedule):
        df = trend_frame(weekly_trend(schedule))
        assert list(df.columns) == ["Day", "Income", "RestDay"]
        assert len(df) == 7
        assert df.loc[0, "Income"] == pytest.approx(461.89)
        assert df.loc[6, "Income"] == 0
