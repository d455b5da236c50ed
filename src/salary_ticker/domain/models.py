from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import time
from typing import FrozenSet, List, Optional

CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_clock(value: str) -> time:
    """Parse an "HH:MM" wall-clock string into a time."""
    match = CLOCK_PATTERN.match(str(value).strip())
    if not match:
        raise ValueError(f"Invalid clock value {value!r}, expected HH:MM")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid clock value {value!r}, expected HH:MM")
    return time(hour, minute)


# ------------------------------------------------------------
# Schedule (input to every calculation)
# ------------------------------------------------------------
@dataclass(frozen=True)
class ScheduleConfig:
    monthly_salary: float
    rest_days: FrozenSet[int]   # 0 = Sunday .. 6 = Saturday
    work_start_hour: str        # "09:00"
    work_end_hour: str          # "18:00"

    def __post_init__(self):
        if self.monthly_salary < 0:
            raise ValueError("monthly_salary must be non-negative")
        rest_days = frozenset(int(d) for d in self.rest_days)
        bad = sorted(d for d in rest_days if d < 0 or d > 6)
        if bad:
            raise ValueError(f"rest_days out of range 0..6: {bad}")
        object.__setattr__(self, "rest_days", rest_days)
        parse_clock(self.work_start_hour)
        parse_clock(self.work_end_hour)

    @property
    def start_time(self) -> time:
        return parse_clock(self.work_start_hour)

    @property
    def end_time(self) -> time:
        return parse_clock(self.work_end_hour)

    @property
    def has_valid_window(self) -> bool:
        return self.end_time > self.start_time

    @property
    def work_days_per_week(self) -> int:
        return 7 - len(self.rest_days)


# ------------------------------------------------------------
# Historical day (written once by the recorder, read-only afterwards)
# ------------------------------------------------------------
@dataclass(frozen=True)
class DailyRecord:
    date: str               # ISO "YYYY-MM-DD"
    earned: float
    is_rest_day: bool
    salary_snapshot: float  # salary in effect that day

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "earned": self.earned,
            "isRestDay": self.is_rest_day,
            "salarySnapshot": self.salary_snapshot,
        }

    @classmethod
    def from_dict(cls, raw: dict) -> "DailyRecord":
        return cls(
            date=str(raw["date"]),
            earned=float(raw["earned"]),
            is_rest_day=bool(raw.get("isRestDay", False)),
            salary_snapshot=float(raw.get("salarySnapshot", 0)),
        )


# ------------------------------------------------------------
# Computed values (recreated on every tick)
# ------------------------------------------------------------
@dataclass(frozen=True)
class WorkStats:
    current_earnings: float
    elapsed_time_seconds: float
    progress_percentage: float
    is_working: bool
    is_rest_day: bool


@dataclass(frozen=True)
class AggregateStats:
    today_earnings: float
    month_total: float
    year_total: float
    current_daily_target: float


@dataclass(frozen=True)
class TrendPoint:
    weekday: int    # 0 = Sunday
    name: str       # "Mon".."Sun"
    income: float
    is_rest_day: bool


@dataclass(frozen=True)
class Quote:
    text: str
    author: str
    kind: str       # "fun" | "serious" | "rest"


# ------------------------------------------------------------
# Persisted settings blob
# ------------------------------------------------------------
@dataclass
class UserSettings:
    monthly_salary: float = 10000
    rest_days: List[int] = field(default_factory=lambda: [0, 6])
    work_start_hour: str = "09:00"
    work_end_hour: str = "18:00"
    has_completed_onboarding: bool = False
    privacy_mode: bool = False  # stored for round-trips only; amounts are never masked here
    history: List[DailyRecord] = field(default_factory=list)

    @property
    def schedule(self) -> ScheduleConfig:
        return ScheduleConfig(
            monthly_salary=float(self.monthly_salary),
            rest_days=frozenset(self.rest_days),
            work_start_hour=self.work_start_hour,
            work_end_hour=self.work_end_hour,
        )

    def record_for(self, iso_date: str) -> Optional[DailyRecord]:
        for record in self.history:
            if record.date == iso_date:
                return record
        return None

    def to_dict(self) -> dict:
        return {
            "monthlySalary": self.monthly_salary,
            "restDays": sorted(self.rest_days),
            "workStartHour": self.work_start_hour,
            "workEndHour": self.work_end_hour,
            "hasCompletedOnboarding": self.has_completed_onboarding,
            "privacyMode": self.privacy_mode,
            "history": [r.to_dict() for r in self.history],
        }

    @classmethod
    def from_dict(cls, raw: dict) -> "UserSettings":
        """Merge a persisted blob over the defaults."""
        defaults = cls()
        return cls(
            monthly_salary=float(raw.get("monthlySalary", defaults.monthly_salary)),
            rest_days=[int(d) for d in raw.get("restDays", defaults.rest_days)],
            work_start_hour=str(raw.get("workStartHour", defaults.work_start_hour)),
            work_end_hour=str(raw.get("workEndHour", defaults.work_end_hour)),
            has_completed_onboarding=bool(
                raw.get("hasCompletedOnboarding", defaults.has_completed_onboarding)
            ),
            privacy_mode=bool(raw.get("privacyMode") or False),
            history=[DailyRecord.from_dict(r) for r in raw.get("history") or []],
        )
