"""Pytest configuration and fixtures for taskplan tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import date, datetime, timedelta

import pytest

from taskplan.blackouts import BlackoutSlot
from taskplan.logger import reset_logger
from taskplan.models import CandidateTask

# 2025-01-06 is a Monday
MONDAY = date(2025, 1, 6)
MONDAY_MORNING = datetime(2025, 1, 6, 9, 0)


@pytest.fixture(autouse=True)
def _clean_logger() -> Iterator[None]:
    """Drop handlers bound to captured streams between tests."""
    yield
    reset_logger()


@pytest.fixture
def make_task() -> Callable[..., CandidateTask]:
    """Factory for candidate tasks with sensible defaults."""

    def _make(
        title: str = "Implement API endpoint",
        hours: float = 2.0,
        *,
        description: str = "",
        category: str = "API",
        priority: int | None = None,
    ) -> CandidateTask:
        return CandidateTask(
            title=title,
            description=description,
            estimated_hours=hours,
            category=category,
            priority=priority,
        )

    return _make


def full_day(day: date) -> BlackoutSlot:
    """Full-day blackout slot."""
    return BlackoutSlot(date=day, is_full_day=True)


def partial(day: date, start: str, end: str) -> BlackoutSlot:
    """Partial blackout slot from HH:MM strings."""
    return BlackoutSlot.model_validate(
        {"date": day, "isFullDay": False, "startTime": start, "endTime": end}
    )


def blackout_range(first: date, days: int) -> list[BlackoutSlot]:
    """Consecutive full-day slots starting at first."""
    return [full_day(first + timedelta(days=i)) for i in range(days)]
