"""Blackout slots: calendar days, or parts of days, when no work is scheduled."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MINUTES_PER_HOUR = 60


def parse_time_of_day(value: Any) -> Any:
    """Normalize time-of-day input before pydantic validation.

    Accepts "HH:MM" strings and time objects. YAML 1.1 reads an unquoted 10:30
    as the base-60 integer 630, which is mapped back to "10:30". Empty strings
    become None.
    """
    if value is None or isinstance(value, dt.time):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid time of day: {value!r}")
    if isinstance(value, int):
        hours, minutes = divmod(value, MINUTES_PER_HOUR)
        return f"{hours:02d}:{minutes:02d}"
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class BlackoutSlot(BaseModel):
    """An unavailable calendar day, or a time range within one day.

    A partial slot (is_full_day false) is expected to carry both start_time and
    end_time. A partial slot missing either time is accepted but never blocks
    anything; see is_malformed.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: dt.date
    is_full_day: bool = Field(default=False, alias="isFullDay")
    start_time: dt.time | None = Field(default=None, alias="startTime")
    end_time: dt.time | None = Field(default=None, alias="endTime")

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def coerce_time_of_day(cls, v: Any) -> Any:
        """Accept HH:MM strings and YAML base-60 integers."""
        return parse_time_of_day(v)

    @model_validator(mode="after")
    def validate_time_range(self) -> BlackoutSlot:
        """Ensure start_time is before end_time when both are given."""
        if (
            not self.is_full_day
            and self.start_time is not None
            and self.end_time is not None
            and self.end_time <= self.start_time
        ):
            raise ValueError("end time must be after start time")
        return self

    @property
    def is_malformed(self) -> bool:
        """True for a partial slot without both bounds."""
        return not self.is_full_day and (self.start_time is None or self.end_time is None)

    def blocks(self, instant: dt.datetime) -> bool:
        """Check whether this slot covers the instant.

        Both bounds of a partial slot are inclusive: an instant exactly at
        end_time is blocked.
        """
        if instant.date() != self.date:
            return False
        if self.is_full_day:
            return True
        if self.start_time is None or self.end_time is None:
            return False
        return self.start_time <= instant.time() <= self.end_time

    def blocks_whole_day(self, day: dt.date) -> bool:
        """Check whether this is a full-day slot on the given day."""
        return self.is_full_day and self.date == day
