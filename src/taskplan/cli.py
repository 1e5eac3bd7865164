"""Command-line interface for taskplan."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError as PydanticValidationError

from . import context
from .exceptions import TaskplanError
from .formatting import OutputFormat, format_hours, render_plan, render_tasks
from .loader import PlanRequest, discover_config, load_plan_request
from .logger import setup_logger
from .roles import filter_tasks_by_role
from .scheduler import (
    PlanningService,
    SchedulingConfig,
    calculate_available_hours,
    normalize_granularity,
)
from .unified_config import UnifiedConfig

app = typer.Typer(
    name="taskplan",
    help="Turn estimated work items into a deadline-bounded day-by-day schedule",
    add_completion=False,
)


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _parse_instant(value: str | None, option: str) -> datetime | None:
    return None if value is None else _require_instant(value, option)


def _require_instant(value: str, option: str) -> datetime:
    try:
        return datetime.fromisoformat(value).replace(tzinfo=None)
    except ValueError:
        raise _fail(f"Invalid {option} '{value}'. Use ISO format, e.g. 2025-01-06T09:00") from None


def _load_config(request_path: Path | None) -> UnifiedConfig:
    config_path = context.get_config_path()
    if config_path is not None and not config_path.exists():
        raise _fail(f"Config file not found: {config_path}")
    return discover_config(request_path) or UnifiedConfig()


def _effective_scheduling_config(
    config: UnifiedConfig, request: PlanRequest, max_hours_per_day: float | None
) -> SchedulingConfig:
    """Layer request and CLI overrides onto the configured scheduler settings."""
    overrides: dict[str, Any] = {}
    if request.working_hours_per_day is not None:
        overrides["working_hours_per_day"] = request.working_hours_per_day
    if request.max_hours_per_day is not None:
        overrides["max_hours_per_day"] = request.max_hours_per_day
    if max_hours_per_day is not None:
        overrides["max_hours_per_day"] = max_hours_per_day
    try:
        return SchedulingConfig.model_validate({**config.scheduler.model_dump(), **overrides})
    except PydanticValidationError as e:
        raise _fail(f"Invalid scheduling settings: {e}") from None


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show allocations, 2=show checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to unified config file (default: taskplan_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for taskplan commands."""
    setup_logger(verbose)
    context.set_config_path(config)


@app.command()
def plan(  # noqa: PLR0913 - CLI command needs multiple options
    file: Annotated[Path, typer.Argument(help="Path to the plan request YAML/JSON file")],
    *,
    now: Annotated[
        str | None,
        typer.Option("--now", help="Planning reference time (ISO, default: current time)"),
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TEXT,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
    filter_role: Annotated[
        bool,
        typer.Option("--filter-role", help="Drop tasks without a keyword for the request's role"),
    ] = False,
    max_hours_per_day: Annotated[
        float | None,
        typer.Option("--max-hours-per-day", help="Override the per-day workload cap"),
    ] = None,
) -> None:
    """Schedule the tasks of a plan request and report feasibility."""
    reference = _parse_instant(now, "--now")
    try:
        request = load_plan_request(file)
        config = _load_config(file)
        scheduling_config = _effective_scheduling_config(config, request, max_hours_per_day)

        tasks = request.tasks
        if filter_role:
            tasks = filter_tasks_by_role(tasks, request.role, config.roles.effective_keywords())

        result = PlanningService(
            tasks,
            request.deadline,
            role=request.role,
            blackout_slots=[*config.blackout_slots, *request.blackout_slots],
            config=scheduling_config,
            now=reference,
            role_labels=config.roles.effective_labels(),
        ).plan()
    except TaskplanError as e:
        raise _fail(str(e)) from None

    rendered = render_plan(result, output_format)
    if output:
        output.write_text(rendered, encoding="utf-8")
        typer.echo(f"Plan written to {output}")
    else:
        typer.echo(rendered, nl=False)


@app.command()
def hours(
    deadline: Annotated[str, typer.Option("--deadline", "-d", help="Deadline (ISO date-time)")],
    *,
    now: Annotated[
        str | None,
        typer.Option("--now", help="Planning reference time (ISO, default: current time)"),
    ] = None,
    request_file: Annotated[
        Path | None,
        typer.Option("--request", "-r", help="Plan request whose blackout slots to apply"),
    ] = None,
    working_hours: Annotated[
        float | None,
        typer.Option("--working-hours", help="Hours credited per available day", min=1, max=24),
    ] = None,
) -> None:
    """Estimate the working hours available before a deadline."""
    deadline_at = _require_instant(deadline, "--deadline")
    reference = _parse_instant(now, "--now")
    try:
        config = _load_config(request_file)
        slots = list(config.blackout_slots)
        if request_file is not None:
            slots.extend(load_plan_request(request_file).blackout_slots)
    except TaskplanError as e:
        raise _fail(str(e)) from None

    per_day = working_hours if working_hours is not None else config.scheduler.working_hours_per_day
    available = calculate_available_hours(deadline_at, slots, per_day, now=reference)
    typer.echo(format_hours(available))


@app.command()
def normalize(
    file: Annotated[Path, typer.Argument(help="Path to the plan request YAML/JSON file")],
) -> None:
    """Print the request's tasks after granularity normalization."""
    try:
        request = load_plan_request(file)
        config = _load_config(file)
    except TaskplanError as e:
        raise _fail(str(e)) from None

    tasks = normalize_granularity(
        request.tasks,
        cap=config.scheduler.granularity_cap,
        minimum=config.scheduler.granularity_minimum,
    )
    typer.echo(render_tasks(tasks), nl=False)


def main() -> None:
    """Entry point for the taskplan console script."""
    app()
