"""Sequential workload allocator.

Walks tasks strictly in order and assigns each a start instant inside the work
window, skipping weekends and blackout slots, and sharing a per-day hour cap
across every task that lands on the same day.
"""

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from taskplan.logger import debug_enabled, get_logger
from taskplan.models import CandidateTask, Role, ScheduledTask, TaskDependency

from .availability import WorkCalendar
from .core import AllocationResult, DayWorkload

logger = get_logger()

# Float noise tolerance when comparing hour amounts
EPSILON = 1e-9


def task_id_for(index: int) -> str:
    """Return the id assigned to the task at a zero-based schedule position."""
    return f"task-{index + 1}"


class WorkloadAllocator:
    """Assigns start instants to an ordered task list under a daily hour cap.

    The cursor and workload map live on the instance and change only inside
    allocate(); create a new allocator for each run.
    """

    def __init__(
        self,
        tasks: Sequence[CandidateTask],
        start: datetime,
        calendar: WorkCalendar,
        *,
        role: Role,
        max_hours_per_day: float | None = None,
    ) -> None:
        """Initialize the allocator.

        Args:
            tasks: Normalized tasks in schedule order (never reordered)
            start: Earliest instant work may begin, typically "now"
            calendar: Work window and blackout slots
            role: Role recorded on every scheduled task
            max_hours_per_day: Daily cap; defaults to the calendar config's value
        """
        self.tasks = list(tasks)
        self.calendar = calendar
        self.role = role
        self.max_hours_per_day = (
            max_hours_per_day
            if max_hours_per_day is not None
            else calendar.config.max_hours_per_day
        )
        if self.max_hours_per_day <= 0:
            raise ValueError("max_hours_per_day must be positive")
        self._cursor = start
        self._workloads: dict[date, DayWorkload] = {}

    def allocate(self) -> AllocationResult:
        """Schedule every task in order.

        Returns:
            AllocationResult with one ScheduledTask per input task and the
            per-day workload map

        Raises:
            SchedulingError: If the calendar has no available day within the
                lookahead horizon
        """
        scheduled: list[ScheduledTask] = []
        previous_id = {i: task_id_for(i - 1) for i in range(1, len(self.tasks))}

        for index, task in enumerate(self.tasks):
            start_time = self._allocate_task(index, task)
            dependencies = []
            if index in previous_id:
                dependencies.append(TaskDependency(task_id=previous_id[index]))

            scheduled.append(
                ScheduledTask(
                    id=task_id_for(index),
                    title=task.title,
                    description=task.description,
                    estimated_hours=task.estimated_hours,
                    start_time=start_time,
                    role=self.role,
                    dependencies=dependencies,
                )
            )
            logger.changes(
                f"Scheduled {task_id_for(index)} '{task.title}' at "
                f"{start_time:%Y-%m-%d %H:%M} ({task.estimated_hours:g}h)"
            )

        return AllocationResult(scheduled_tasks=scheduled, workloads=dict(self._workloads))

    def _allocate_task(self, index: int, task: CandidateTask) -> datetime:
        """Commit all hours of one task and return the instant work on it began."""
        remaining = task.estimated_hours
        start_time: datetime | None = None
        cursor = self._cursor

        while remaining > EPSILON:
            cursor = self.calendar.snap_to_window(cursor)

            if not self.calendar.is_day_available(cursor.date()) or self.calendar.is_blocked(
                cursor
            ):
                logger.checks(f"  {cursor:%Y-%m-%d %H:%M} unavailable, moving to next day")
                cursor = self.calendar.next_available(cursor)
                continue

            workload = self._workloads.setdefault(cursor.date(), DayWorkload(date=cursor.date()))
            capacity = min(
                self.max_hours_per_day - workload.total_hours,
                self.calendar.hours_left_in_window(cursor),
                remaining,
            )

            if debug_enabled():
                logger.debug(
                    f"    cursor={cursor:%Y-%m-%d %H:%M} committed={workload.total_hours:g}h "
                    f"remaining={remaining:g}h capacity={capacity:g}h"
                )

            if capacity > EPSILON:
                if start_time is None:
                    start_time = cursor
                workload.commit(index, capacity, cursor)
                remaining -= capacity
                cursor += timedelta(hours=capacity)
                if remaining <= EPSILON:
                    break
            else:
                logger.checks(f"  {cursor.date()} is full ({workload.total_hours:g}h committed)")

            cursor = self.calendar.next_available(cursor)

        self._cursor = cursor
        # Only reachable with None for zero-hour tasks, which normalization rules out
        return start_time if start_time is not None else cursor
