"""Data models for taskplan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

START_TIME_FORMAT = "%Y-%m-%d %H:%M"
BACKEND_DEADLINE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Role(str, Enum):
    """Execution role a plan is generated for."""

    FRONTEND = "Frontend"
    BACKEND = "Backend"
    TEST = "Test"


@dataclass(frozen=True)
class CandidateTask:
    """A work item with an estimated duration, as supplied by the extractor."""

    title: str
    description: str
    estimated_hours: float
    category: str = ""
    priority: int | None = None


@dataclass(frozen=True)
class TaskDependency:
    """Ordering edge to the task scheduled immediately before this one."""

    task_id: str
    type: str = "after"

    def to_dict(self) -> dict[str, str]:
        return {"taskId": self.task_id, "type": self.type}


@dataclass
class ScheduledTask:
    """A task with its assigned start instant.

    estimated_hours is the full duration even when the allocator spread the
    work over several days.
    """

    id: str
    title: str
    description: str
    estimated_hours: float
    start_time: datetime
    role: Role
    dependencies: list[TaskDependency] = field(default_factory=list[TaskDependency])

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "estimatedHours": self.estimated_hours,
            "suggestedStartTime": self.start_time.strftime(START_TIME_FORMAT),
            "role": self.role.value,
        }
        if self.dependencies:
            data["dependencies"] = [dep.to_dict() for dep in self.dependencies]
        return data


@dataclass
class BackendTask:
    """Projection of a scheduled task for the downstream task tracker."""

    title: str
    consume_time: float
    deadline: datetime  # Projected completion instant
    user_role: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "consume_time": self.consume_time,
            "deadline": self.deadline.strftime(BACKEND_DEADLINE_FORMAT),
            "user_role": self.user_role,
        }
