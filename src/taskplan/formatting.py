"""Rendering of plan results for the CLI."""

from __future__ import annotations

import json
from enum import Enum

import yaml

from .models import BACKEND_DEADLINE_FORMAT, START_TIME_FORMAT, CandidateTask
from .scheduler import PlanResult


class OutputFormat(str, Enum):
    """Supported plan output formats."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


def format_hours(hours: float) -> str:
    """Format an hour amount compactly, e.g. 2.5 -> "2.5h"."""
    return f"{hours:g}h"


def render_text(result: PlanResult) -> str:
    """Render a plan as an aligned, human-readable table."""
    lines: list[str] = []

    if result.scheduled_tasks:
        id_width = max(len(task.id) for task in result.scheduled_tasks)
        for task, backend in zip(result.scheduled_tasks, result.backend_tasks, strict=True):
            after = f"  (after {task.dependencies[0].task_id})" if task.dependencies else ""
            lines.append(
                f"{task.id:<{id_width}}  {task.start_time.strftime(START_TIME_FORMAT)}"
                f" -> {backend.deadline.strftime(BACKEND_DEADLINE_FORMAT)}"
                f"  {format_hours(task.estimated_hours):>6}  {task.title}{after}"
            )
    else:
        lines.append("No tasks scheduled.")

    lines.append("")
    lines.append(
        f"Total: {format_hours(result.total_estimated_hours)}  "
        f"Available: {format_hours(result.available_hours)}  "
        f"Feasible: {'yes' if result.is_feasible else 'no'}"
    )

    if result.warnings:
        lines.append("Warnings:")
        lines.extend(f"  - {warning}" for warning in result.warnings)

    return "\n".join(lines) + "\n"


def render_plan(result: PlanResult, output_format: OutputFormat) -> str:
    """Render a plan in the requested format."""
    if output_format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n"
    if output_format == OutputFormat.YAML:
        return yaml.safe_dump(
            result.to_dict(), allow_unicode=True, default_flow_style=False, sort_keys=False
        )
    return render_text(result)


def render_tasks(tasks: list[CandidateTask]) -> str:
    """Render a candidate task list, one task per line."""
    return "".join(f"{format_hours(task.estimated_hours):>6}  {task.title}\n" for task in tasks)
