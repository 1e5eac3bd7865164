"""Scheduler package - calendar-aware sequential task scheduling.

Pipeline, leaves first:
- availability: work window, weekend and blackout predicates, day stepping
- normalizer: bounds task durations, splitting oversized tasks
- estimator: coarse available-hours estimate before a deadline
- allocator: sequential workload allocation under a per-day cap
- projector: completion instants for scheduled tasks
- feasibility: required versus available hours

Main entry points:
- PlanningService: runs the whole pipeline for one request
- plan_schedule: functional wrapper around PlanningService
"""

from .allocator import WorkloadAllocator
from .availability import (
    WorkCalendar,
    is_blocked,
    is_full_day_blocked,
    is_weekend,
    is_working_window,
    next_available_instant,
)
from .config import SchedulingConfig
from .core import AllocationResult, DayWorkload, FeasibilityReport, PlanResult
from .estimator import calculate_available_hours
from .feasibility import judge_feasibility
from .normalizer import calculate_total_hours, normalize_granularity
from .projector import project_completion
from .service import PlanningService, plan_schedule

__all__ = [
    # Configuration
    "SchedulingConfig",
    # Result dataclasses
    "AllocationResult",
    "DayWorkload",
    "FeasibilityReport",
    "PlanResult",
    # Calendar availability
    "WorkCalendar",
    "is_blocked",
    "is_full_day_blocked",
    "is_weekend",
    "is_working_window",
    "next_available_instant",
    # Pipeline stages
    "normalize_granularity",
    "calculate_total_hours",
    "calculate_available_hours",
    "WorkloadAllocator",
    "project_completion",
    "judge_feasibility",
    # High-level service
    "PlanningService",
    "plan_schedule",
]
