"""Unified configuration loader for scheduling settings, blackouts and roles.

A single taskplan_config.yaml holds calendar settings shared by every plan
request: the scheduler section, company-wide blackout slots, and role keyword
and label overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .blackouts import BlackoutSlot
from .exceptions import ParseError, ValidationError
from .models import Role
from .roles import DEFAULT_ROLE_KEYWORDS, DEFAULT_ROLE_LABELS
from .scheduler import SchedulingConfig

CONFIG_FILENAME = "taskplan_config.yaml"


class RolesConfig(BaseModel):
    """Per-role keyword and label overrides."""

    keywords: dict[Role, list[str]] = Field(default_factory=dict)
    labels: dict[Role, str] = Field(default_factory=dict)

    def effective_keywords(self) -> dict[Role, list[str]]:
        """Defaults with configured roles replaced wholesale."""
        merged = {role: list(words) for role, words in DEFAULT_ROLE_KEYWORDS.items()}
        merged.update(self.keywords)
        return merged

    def effective_labels(self) -> dict[Role, str]:
        merged = dict(DEFAULT_ROLE_LABELS)
        merged.update(self.labels)
        return merged


class UnifiedConfig(BaseModel):
    """Unified configuration shared across plan requests."""

    scheduler: SchedulingConfig = Field(default_factory=SchedulingConfig)
    blackout_slots: list[BlackoutSlot] = Field(default_factory=list[BlackoutSlot])
    roles: RolesConfig = Field(default_factory=RolesConfig)


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load unified configuration from a YAML file.

    Args:
        config_path: Path to taskplan_config.yaml

    Returns:
        UnifiedConfig; missing sections take their defaults

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ParseError: If the file is not valid YAML or not a mapping
        ValidationError: If a section is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse config YAML: {e}") from e

    if data is None:
        return UnifiedConfig()

    if not isinstance(data, dict):
        raise ParseError("Config must contain a mapping at the root level")

    try:
        return UnifiedConfig.model_validate(
            {
                "scheduler": data.get("scheduler") or {},
                "blackout_slots": data.get("blackout_slots") or [],
                "roles": data.get("roles") or {},
            }
        )
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid config {config_path}: {e}") from e
