"""Feasibility judgement for a normalized task list."""

from .core import FeasibilityReport


def judge_feasibility(
    total_hours: float,
    available_hours: float,
    *,
    task_count: int,
    deadline_passed: bool = False,
) -> FeasibilityReport:
    """Compare required hours against available hours and collect warnings."""
    is_feasible = total_hours <= available_hours
    warnings: list[str] = []

    if deadline_passed and task_count > 0:
        warnings.append("Deadline is already in the past; no working hours remain before it.")

    if not is_feasible:
        warnings.append(
            f"Total estimated hours ({total_hours:g}h) exceed the hours available before "
            f"the deadline ({available_hours:g}h); consider moving the deadline or "
            "reducing scope."
        )

    if task_count == 0:
        warnings.append("No tasks to schedule after filtering and normalization.")

    return FeasibilityReport(
        total_hours=total_hours,
        available_hours=available_hours,
        is_feasible=is_feasible,
        warnings=warnings,
    )
