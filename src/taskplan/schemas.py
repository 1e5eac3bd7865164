"""Pydantic schemas for plan request validation."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .blackouts import BlackoutSlot
from .models import CandidateTask, Role


class CandidateTaskSchema(BaseModel):
    """Schema for one candidate task."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    description: str = ""
    estimated_hours: float = Field(gt=0, alias="estimatedHours")
    category: str = ""
    priority: int | None = None

    def to_task(self) -> CandidateTask:
        return CandidateTask(
            title=self.title,
            description=self.description,
            estimated_hours=self.estimated_hours,
            category=self.category,
            priority=self.priority,
        )


class PlanRequestSchema(BaseModel):
    """Schema for a whole plan request file."""

    model_config = ConfigDict(populate_by_name=True)

    role: Role
    deadline: datetime
    tasks: list[CandidateTaskSchema] = Field(default_factory=list)
    blackout_slots: list[BlackoutSlot] = Field(default_factory=list, alias="unavailableSlots")
    working_hours_per_day: float | None = Field(
        default=None, ge=1, le=24, alias="workingHoursPerDay"
    )
    max_hours_per_day: float | None = Field(default=None, gt=0, alias="maxHoursPerDay")

    @field_validator("deadline", mode="before")
    @classmethod
    def coerce_deadline(cls, v: Any) -> Any:
        """Accept bare dates (midnight) and drop any UTC offset.

        All instants are interpreted in one local reference time, so an offset
        is discarded rather than converted.
        """
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time(0, 0))
        if isinstance(v, datetime) and v.tzinfo is not None:
            return v.replace(tzinfo=None)
        return v

    @field_validator("deadline", mode="after")
    @classmethod
    def strip_parsed_offset(cls, v: datetime) -> datetime:
        """Drop an offset that came from a string like 2025-01-20T18:00Z."""
        return v.replace(tzinfo=None)

    @field_validator("tasks", "blackout_slots", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> Any:
        """Treat an empty YAML key as an empty list."""
        if v is None:
            return []
        return v
