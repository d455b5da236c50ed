from datetime import datetime

import pytest

from salary_ticker.domain.models import ScheduleConfig


@pytest.fixture
def schedule() -> ScheduleConfig:
    """10000 a month, weekends off, 09:00-18:00."""
    return ScheduleConfig(
        monthly_salary=10000,
        rest_days=frozenset({0, 6}),
        work_start_hour="09:00",
        work_end_hour="18:00",
    )


def at(day: str, clock: str) -> datetime:
    return datetime.strptime(f"{day} {clock}", "%Y-%m-%d %H:%M")
