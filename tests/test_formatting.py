"""Tests for plan rendering."""

import json
from collections.abc import Callable
from datetime import datetime

import yaml

from taskplan.formatting import OutputFormat, render_plan, render_tasks, render_text
from taskplan.models import CandidateTask
from taskplan.scheduler import plan_schedule
from tests.conftest import MONDAY_MORNING

MakeTask = Callable[..., CandidateTask]

DEADLINE = datetime(2025, 1, 20, 18, 0)


def test_text_lists_tasks_and_totals(make_task: MakeTask) -> None:
    result = plan_schedule(
        [make_task("Login API", 4.0), make_task("Audit table", 2.0)], DEADLINE, now=MONDAY_MORNING
    )
    text = render_text(result)

    assert "task-1  2025-01-06 10:30 -> 2025-01-06 14:30:00      4h  Login API\n" in text
    assert "Audit table  (after task-1)" in text
    assert "Total: 6h  Available: 80h  Feasible: yes" in text
    assert "Warnings:" not in text


def test_text_shows_warnings(make_task: MakeTask) -> None:
    result = plan_schedule([make_task()], datetime(2025, 1, 1), now=MONDAY_MORNING)
    text = render_text(result)

    assert "Feasible: no" in text
    assert "Warnings:\n  - " in text


def test_text_without_tasks() -> None:
    result = plan_schedule([], DEADLINE, now=MONDAY_MORNING)
    assert render_text(result).startswith("No tasks scheduled.\n")


def test_json_keeps_non_ascii_labels(make_task: MakeTask) -> None:
    result = plan_schedule([make_task()], DEADLINE, now=MONDAY_MORNING)
    rendered = render_plan(result, OutputFormat.JSON)

    assert "后端开发" in rendered
    assert json.loads(rendered) == result.to_dict()


def test_yaml_round_trips(make_task: MakeTask) -> None:
    result = plan_schedule([make_task()], DEADLINE, now=MONDAY_MORNING)
    assert yaml.safe_load(render_plan(result, OutputFormat.YAML)) == result.to_dict()


def test_render_tasks(make_task: MakeTask) -> None:
    assert render_tasks([make_task("A", 1.5), make_task("B", 4.0)]) == "  1.5h  A\n    4h  B\n"
