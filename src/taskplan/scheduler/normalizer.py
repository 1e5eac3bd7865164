"""Task granularity normalization."""

import math
from collections.abc import Iterable, Sequence
from dataclasses import replace

from taskplan.logger import get_logger
from taskplan.models import CandidateTask

logger = get_logger()

DEFAULT_GRANULARITY_CAP = 4.0
DEFAULT_GRANULARITY_MINIMUM = 1.0


def normalize_granularity(
    tasks: Iterable[CandidateTask],
    cap: float = DEFAULT_GRANULARITY_CAP,
    minimum: float = DEFAULT_GRANULARITY_MINIMUM,
) -> list[CandidateTask]:
    """Bound every task's duration into [minimum, cap].

    Tasks up to the cap pass through with the duration raised to at least the
    minimum. Larger tasks are replaced, in place, by ceil(hours / cap) equal
    chunks titled "<title> (i/n)". Order is preserved and already-bounded input
    comes back unchanged.

    Args:
        tasks: Candidate tasks in schedule order
        cap: Largest duration a single task may have
        minimum: Smallest duration a single task may have

    Returns:
        New list of tasks, each with estimated_hours in [minimum, cap]
    """
    normalized: list[CandidateTask] = []

    for task in tasks:
        if task.estimated_hours <= cap:
            normalized.append(replace(task, estimated_hours=max(minimum, task.estimated_hours)))
            continue

        num_chunks = math.ceil(task.estimated_hours / cap)
        chunk_hours = min(cap, max(minimum, task.estimated_hours / num_chunks))
        logger.checks(
            f"Splitting '{task.title}' ({task.estimated_hours}h) into {num_chunks} "
            f"chunks of {chunk_hours:g}h"
        )
        for i in range(num_chunks):
            normalized.append(
                replace(
                    task,
                    title=f"{task.title} ({i + 1}/{num_chunks})",
                    estimated_hours=chunk_hours,
                )
            )

    return normalized


def calculate_total_hours(tasks: Sequence[CandidateTask]) -> float:
    """Sum the estimated hours of all tasks."""
    return sum(task.estimated_hours for task in tasks)
