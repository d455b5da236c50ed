import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from salary_ticker.application.ticker_app import TickerApplication
from salary_ticker.data.settings_store import load_settings, reset_settings, save_settings
from salary_ticker.domain.models import parse_clock
from salary_ticker.engine.earnings import compute_work_stats, daily_target
from salary_ticker.presentation.formatting import fmt_money
from salary_ticker.services.quote_service import pick_quote


def _clock(value: str) -> str:
    try:
        parse_clock(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    return value


def _rest_day(value: str) -> int:
    try:
        day = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"rest day must be an integer 0-6, got {value!r}")
    if not 0 <= day <= 6:
        raise argparse.ArgumentTypeError(f"rest day must be 0 (Sun) to 6 (Sat), got {day}")
    return day


def _salary(value: str) -> float:
    try:
        amount = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"salary must be a number, got {value!r}")
    if amount < 0:
        raise argparse.ArgumentTypeError("salary must be non-negative")
    return amount


def _interval(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"interval must be a number of seconds, got {value!r}")
    if seconds < 0:
        raise argparse.ArgumentTypeError("interval must be non-negative")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="salary-ticker",
        description="Real-time salary ticker: what you have earned, right now.",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings file. Defaults to SALARY_TICKER_SETTINGS_PATH or ~/.salary_ticker/settings.json",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    setup = sub.add_parser("setup", help="Create or update salary and schedule")
    setup.add_argument("--salary", type=_salary, help="Monthly salary")
    setup.add_argument(
        "--rest-days",
        type=_rest_day,
        nargs="*",
        help="Rest weekdays, 0=Sun .. 6=Sat (e.g. --rest-days 0 6)",
    )
    setup.add_argument("--start", type=_clock, help="Work start, HH:MM")
    setup.add_argument("--end", type=_clock, help="Work end, HH:MM")

    dashboard = sub.add_parser("dashboard", help="Today's live earnings")
    dashboard.add_argument("--watch", action="store_true", help="Keep refreshing until Ctrl+C")
    dashboard.add_argument("--interval", type=_interval, default=None, help="Refresh interval in seconds")
    dashboard.add_argument("--quote", action="store_true", help="Include a motivational quote")

    stats = sub.add_parser("stats", help="Today / month / year totals and weekly projection")
    stats.add_argument("--watch", action="store_true", help="Keep refreshing until Ctrl+C")
    stats.add_argument("--interval", type=_interval, default=None, help="Refresh interval in seconds")
    stats.add_argument("--csv", type=Path, default=None, help="Also export totals to this CSV file")

    sub.add_parser("quote", help="Print a motivational quote")
    sub.add_parser("close-day", help="Record every finished day of this year into history")
    sub.add_parser("reset", help="Forget stored settings")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    app = TickerApplication(settings_path=args.settings)

    if args.command == "setup":
        settings = load_settings(args.settings)
        updates = {"has_completed_onboarding": True}
        if args.salary is not None:
            updates["monthly_salary"] = args.salary
        if args.rest_days is not None:
            updates["rest_days"] = sorted(set(args.rest_days))
        if args.start is not None:
            updates["work_start_hour"] = args.start
        if args.end is not None:
            updates["work_end_hour"] = args.end
        settings = replace(settings, **updates)

        schedule = settings.schedule
        if not schedule.has_valid_window:
            print(
                f"WARNING: work end {schedule.work_end_hour} is not after start {schedule.work_start_hour}; "
                "no earnings will accrue.",
                file=sys.stderr,
            )
        path = save_settings(settings, args.settings)
        print(f"Saved to {path}")
        print(f"Working {schedule.work_days_per_week} days / week, daily target {fmt_money(daily_target(schedule))}")
        return 0

    if args.command == "dashboard":
        if args.watch:
            app.watch("dashboard", interval=args.interval)
        else:
            print(app.dashboard(with_quote=args.quote), end="")
        return 0

    if args.command == "stats":
        if args.csv is not None:
            path = app.export_stats(args.csv)
            print(f"Exported to {path}")
        if args.watch:
            app.watch("stats", interval=args.interval)
        else:
            print(app.stats(), end="")
        return 0

    if args.command == "quote":
        settings = app.load()
        stats = compute_work_stats(settings.schedule, app.clock())
        print(pick_quote(stats, settings.monthly_salary))
        return 0

    if args.command == "close-day":
        settings = app.close_day()
        print(f"History holds {len(settings.history)} day(s)")
        return 0

    if args.command == "reset":
        reset_settings(args.settings)
        print("Settings cleared")
        return 0

    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
