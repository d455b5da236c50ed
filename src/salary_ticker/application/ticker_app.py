from __future__ import annotations

import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TextIO

import pandas as pd

from salary_ticker.data.settings_store import load_settings, save_settings
from salary_ticker.domain.models import UserSettings
from salary_ticker.engine.aggregation import aggregate, trend_frame, weekly_trend
from salary_ticker.engine.earnings import compute_work_stats
from salary_ticker.presentation.console import render_dashboard, render_stats
from salary_ticker.services.history import close_out
from salary_ticker.services.quote_service import pick_quote
from salary_ticker.utils.config import config
from salary_ticker.utils.logger import get_logger
from salary_ticker.utils.workdays import month_work_days

logger = get_logger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"


class TickerApplication:
    """
    Application-layer orchestration: load settings, compute, render.
    Owns the refresh timer; the engine never does.
    """

    def __init__(
        self,
        *,
        settings_path: Optional[Path] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.settings_path = settings_path
        self.clock = clock

    def load(self) -> UserSettings:
        return load_settings(self.settings_path)

    def dashboard(self, *, with_quote: bool = False, now: Optional[datetime] = None) -> str:
        settings = self.load()
        now = now or self.clock()
        stats = compute_work_stats(settings.schedule, now)
        quote = pick_quote(stats, settings.monthly_salary) if with_quote else None
        return render_dashboard(stats, settings.schedule, now, quote)

    def stats(self, *, now: Optional[datetime] = None) -> str:
        settings = self.load()
        now = now or self.clock()
        schedule = settings.schedule
        result = aggregate(schedule, now, settings.history)
        work_days = month_work_days(now.date(), schedule.rest_days)
        return render_stats(result, weekly_trend(schedule), now, work_days)

    def export_stats(self, output_path: Path, *, now: Optional[datetime] = None) -> Path:
        """Write totals and the weekly projection to one CSV."""
        settings = self.load()
        now = now or self.clock()
        result = aggregate(settings.schedule, now, settings.history)

        totals = pd.DataFrame(
            {
                "Metric": ["Today", "Month", "Year", "DailyTarget"],
                "Value": [
                    round(result.today_earnings, 2),
                    round(result.month_total, 2),
                    round(result.year_total, 2),
                    round(result.current_daily_target, 2),
                ],
            }
        )
        trend = trend_frame(weekly_trend(settings.schedule)).rename(columns={"Day": "Metric", "Income": "Value"})
        trend["Metric"] = "Projected " + trend["Metric"]

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        pd.concat([totals, trend[["Metric", "Value"]]], ignore_index=True).to_csv(output_path, index=False)
        logger.info("Exported stats to %s", output_path)
        return output_path

    def close_day(self, *, now: Optional[datetime] = None) -> UserSettings:
        settings = close_out(self.load(), now or self.clock())
        save_settings(settings, self.settings_path)
        return settings

    def watch(
        self,
        view: str = "dashboard",
        *,
        interval: Optional[float] = None,
        ticks: Optional[int] = None,
        stream: TextIO = sys.stdout,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """
        Re-render `view` every `interval` seconds until interrupted or
        `ticks` renders have happened. Returns the number of renders.
        """
        interval = config.refresh_interval if interval is None else interval
        settings = self.load()
        quote = None
        if view == "dashboard":
            quote = pick_quote(compute_work_stats(settings.schedule, self.clock()), settings.monthly_salary)

        rendered = 0
        try:
            while ticks is None or rendered < ticks:
                now = self.clock()
                if view == "stats":
                    schedule = settings.schedule
                    text = render_stats(
                        aggregate(schedule, now, settings.history),
                        weekly_trend(schedule),
                        now,
                        month_work_days(now.date(), schedule.rest_days),
                    )
                else:
                    text = render_dashboard(compute_work_stats(settings.schedule, now), settings.schedule, now, quote)
                stream.write(CLEAR_SCREEN + text)
                stream.flush()
                rendered += 1
                if ticks is None or rendered < ticks:
                    sleep(interval)
        except KeyboardInterrupt:
            logger.debug("Watch interrupted after %d renders", rendered)
        return rendered
