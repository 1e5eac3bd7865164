"""Configuration classes for the scheduling system."""

from datetime import time

from pydantic import BaseModel, Field, field_validator, model_validator

from taskplan.blackouts import parse_time_of_day


class SchedulingConfig(BaseModel):
    """Calendar and workload settings for a scheduling run."""

    # Daily work window, [start, end)
    work_day_start: time = time(10, 30)
    work_day_end: time = time(18, 0)

    # Per-day cap enforced by the allocator
    max_hours_per_day: float = Field(default=8.0, gt=0)
    # Hours credited per available day by the estimator
    working_hours_per_day: float = Field(default=8.0, gt=0, le=24)

    # Task granularity bounds
    granularity_cap: float = Field(default=4.0, gt=0)
    granularity_minimum: float = Field(default=1.0, gt=0)

    # Consecutive unavailable days tolerated before giving up
    max_lookahead_days: int = Field(default=366, ge=1)

    @field_validator("work_day_start", "work_day_end", mode="before")
    @classmethod
    def coerce_time_of_day(cls, v: object) -> object:
        """Accept HH:MM strings and YAML base-60 integers."""
        return parse_time_of_day(v)

    @model_validator(mode="after")
    def validate_bounds(self) -> "SchedulingConfig":
        """Ensure the work window and granularity bounds are ordered."""
        if self.work_day_end <= self.work_day_start:
            raise ValueError("work_day_end must be after work_day_start")
        if self.granularity_minimum > self.granularity_cap:
            raise ValueError("granularity_minimum must not exceed granularity_cap")
        return self
