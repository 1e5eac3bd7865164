"""Plan request loading and config discovery."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from . import context
from .blackouts import BlackoutSlot
from .exceptions import ParseError, ValidationError
from .models import CandidateTask, Role
from .schemas import PlanRequestSchema
from .unified_config import CONFIG_FILENAME, UnifiedConfig, load_unified_config


@dataclass
class PlanRequest:
    """A validated plan request."""

    role: Role
    deadline: datetime
    tasks: list[CandidateTask]
    blackout_slots: list[BlackoutSlot] = field(default_factory=list[BlackoutSlot])
    working_hours_per_day: float | None = None
    max_hours_per_day: float | None = None


def parse_plan_request(data: Any) -> PlanRequest:
    """Validate raw request data (as decoded from YAML or JSON).

    Raises:
        ParseError: If the data is not a mapping
        ValidationError: If any field is missing or invalid
    """
    if not isinstance(data, dict):
        raise ParseError("Plan request must contain a mapping at the root level")

    try:
        schema = PlanRequestSchema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid plan request: {e}") from e

    return PlanRequest(
        role=schema.role,
        deadline=schema.deadline,
        tasks=[task.to_task() for task in schema.tasks],
        blackout_slots=list(schema.blackout_slots),
        working_hours_per_day=schema.working_hours_per_day,
        max_hours_per_day=schema.max_hours_per_day,
    )


def load_plan_request(path: Path | str) -> PlanRequest:
    """Load and validate a plan request file (YAML, or JSON as a YAML subset)."""
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    return parse_plan_request(data)


def config_candidates(request_path: Path | None = None) -> list[Path]:
    """Paths checked for a unified config, most specific first.

    A --config path is the only candidate when given. Otherwise the request file's directory
    is searched before the working directory.
    """
    explicit = context.get_config_path()
    if explicit is not None:
        return [explicit]
    candidates = [Path(request_path).parent / CONFIG_FILENAME] if request_path else []
    candidates.append(Path(CONFIG_FILENAME))
    return candidates


def discover_config(request_path: Path | None = None) -> UnifiedConfig | None:
    """Load the first existing config from config_candidates(), if any."""
    for candidate in config_candidates(request_path):
        if candidate.is_file():
            return load_unified_config(candidate)
    return None
