"""High-level planning service."""

from collections.abc import Mapping, Sequence
from datetime import datetime

from taskplan.blackouts import BlackoutSlot
from taskplan.logger import get_logger
from taskplan.models import BackendTask, CandidateTask, Role
from taskplan.roles import role_label

from .allocator import WorkloadAllocator
from .availability import WorkCalendar
from .config import SchedulingConfig
from .core import PlanResult
from .estimator import calculate_available_hours
from .feasibility import judge_feasibility
from .normalizer import calculate_total_hours, normalize_granularity
from .projector import project_completion

logger = get_logger()


class PlanningService:
    """Turns role-filtered candidate tasks into a deadline-bounded schedule.

    This service coordinates:
    - granularity normalization
    - the available-hours estimate and feasibility judgement
    - sequential workload allocation
    - completion projection for the backend task list

    Every run is self-contained; nothing is shared between calls to plan().
    """

    def __init__(  # noqa: PLR0913 - planning inputs are independent parameters
        self,
        tasks: Sequence[CandidateTask],
        deadline: datetime,
        *,
        role: Role,
        blackout_slots: Sequence[BlackoutSlot] | None = None,
        config: SchedulingConfig | None = None,
        now: datetime | None = None,
        role_labels: Mapping[Role, str] | None = None,
    ):
        """Initialize the planning service.

        Args:
            tasks: Candidate tasks in schedule order, already filtered for the role
            deadline: Instant all work should be finished by
            role: Role the plan is for
            blackout_slots: Days or time ranges when no work is scheduled
            config: Scheduling configuration (defaults to SchedulingConfig())
            now: Planning reference instant (defaults to the current local time)
            role_labels: Optional overrides for backend role display labels
        """
        self.tasks = list(tasks)
        self.deadline = deadline
        self.role = role
        self.blackout_slots = list(blackout_slots or [])
        self.config = config or SchedulingConfig()
        self.now = now or datetime.now()  # noqa: DTZ005
        self.role_labels = role_labels

    def plan(self) -> PlanResult:
        """Normalize, estimate, allocate and project.

        Returns:
            PlanResult with scheduled tasks, hour totals, feasibility and warnings

        Raises:
            SchedulingError: If the blackout calendar leaves no available day
                within the lookahead horizon
        """
        normalized = normalize_granularity(
            self.tasks,
            cap=self.config.granularity_cap,
            minimum=self.config.granularity_minimum,
        )
        total_hours = calculate_total_hours(normalized)
        available_hours = calculate_available_hours(
            self.deadline,
            self.blackout_slots,
            self.config.working_hours_per_day,
            now=self.now,
        )
        deadline_passed = self.deadline < self.now
        report = judge_feasibility(
            total_hours,
            available_hours,
            task_count=len(normalized),
            deadline_passed=deadline_passed,
        )

        calendar = WorkCalendar(self.blackout_slots, self.config)
        allocation = WorkloadAllocator(
            normalized,
            self.now,
            calendar,
            role=self.role,
            max_hours_per_day=self.config.max_hours_per_day,
        ).allocate()

        label = role_label(self.role, self.role_labels)
        backend_tasks: list[BackendTask] = []
        overruns: list[tuple[str, str, datetime]] = []
        for task in allocation.scheduled_tasks:
            completion = project_completion(task.start_time, task.estimated_hours, calendar)
            backend_tasks.append(
                BackendTask(
                    title=task.title,
                    consume_time=task.estimated_hours,
                    deadline=completion,
                    user_role=label,
                )
            )
            if completion > self.deadline:
                overruns.append((task.id, task.title, completion))

        warnings = list(report.warnings)
        if overruns and not deadline_passed:
            task_id, title, completion = overruns[0]
            warnings.append(
                f"{len(overruns)} task(s) projected to finish after the deadline "
                f"{self.deadline:%Y-%m-%d %H:%M}; first is {task_id} '{title}' "
                f"at {completion:%Y-%m-%d %H:%M}"
            )

        for warning in warnings:
            logger.warning(warning)

        return PlanResult(
            scheduled_tasks=allocation.scheduled_tasks,
            total_estimated_hours=total_hours,
            available_hours=available_hours,
            is_feasible=report.is_feasible,
            backend_tasks=backend_tasks,
            warnings=warnings,
        )


def plan_schedule(  # noqa: PLR0913 - mirrors the planning inputs
    tasks: Sequence[CandidateTask],
    deadline: datetime,
    blackout_slots: Sequence[BlackoutSlot] | None = None,
    working_hours_per_day: float = 8.0,
    max_hours_per_day: float = 8.0,
    *,
    role: Role = Role.BACKEND,
    now: datetime | None = None,
) -> PlanResult:
    """Plan tasks with default calendar settings and the given daily hour figures."""
    config = SchedulingConfig(
        working_hours_per_day=working_hours_per_day,
        max_hours_per_day=max_hours_per_day,
    )
    return PlanningService(
        tasks,
        deadline,
        role=role,
        blackout_slots=blackout_slots,
        config=config,
        now=now,
    ).plan()
