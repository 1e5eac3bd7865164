"""Core dataclasses for the scheduling system."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from taskplan.models import BackendTask, ScheduledTask


def _default_str_list() -> list[str]:
    return []


@dataclass
class WorkloadEntry:
    """Hours of one task committed on one day."""

    task_index: int
    hours: float
    start: datetime


@dataclass
class DayWorkload:
    """Cumulative hours committed on a calendar day during one allocation run."""

    date: date
    total_hours: float = 0.0
    entries: list[WorkloadEntry] = field(default_factory=list[WorkloadEntry])

    def commit(self, task_index: int, hours: float, start: datetime) -> None:
        self.total_hours += hours
        self.entries.append(WorkloadEntry(task_index, hours, start))


@dataclass
class AllocationResult:
    """Result from the workload allocator."""

    scheduled_tasks: list[ScheduledTask]
    workloads: dict[date, DayWorkload]


@dataclass
class FeasibilityReport:
    """Outcome of comparing required hours against available hours."""

    total_hours: float
    available_hours: float
    is_feasible: bool
    warnings: list[str] = field(default_factory=_default_str_list)


@dataclass
class PlanResult:
    """Complete result of a planning run."""

    scheduled_tasks: list[ScheduledTask]
    total_estimated_hours: float
    available_hours: float
    is_feasible: bool
    backend_tasks: list[BackendTask]
    warnings: list[str] = field(default_factory=_default_str_list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the wire field names of the plan response."""
        data: dict[str, Any] = {
            "tasks": [task.to_dict() for task in self.scheduled_tasks],
            "totalEstimatedHours": self.total_estimated_hours,
            "availableHours": self.available_hours,
            "isFeasible": self.is_feasible,
        }
        if self.warnings:
            data["warnings"] = list(self.warnings)
        data["backendTasks"] = [task.to_dict() for task in self.backend_tasks]
        return data
