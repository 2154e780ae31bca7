# src/task_pipeline/analysis/analyzer.py

from __future__ import annotations

"""
Read-only queries and aggregations over a fixed task snapshot.

The snapshot is copied into a tuple on construction, so later changes to the
caller's collection are invisible here and one analyzer can be shared freely.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import datetime

from ..core.ports import Predicate
from ..tasks.predicates import TaskPredicate
from ..tasks.processors import TaskProcessor
from ..tasks.task_models import Priority, Status, Task

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"


class TaskAnalyzer:
    def __init__(self, tasks: Iterable[Task] | None) -> None:
        self._tasks: tuple[Task, ...] = tuple(tasks) if tasks is not None else ()
        logger.debug("TaskAnalyzer snapshot size=%d", len(self._tasks))

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- filtering / mapping ----

    def filter_tasks(self, predicate: Predicate | TaskPredicate) -> list[Task]:
        return TaskProcessor.filter(predicate).process(self._tasks)

    def filter_with_custom_predicate(self, predicate: Predicate | TaskPredicate) -> list[Task]:
        return self.filter_tasks(predicate)

    def get_task_titles(self) -> list[str]:
        return [t.title for t in self._tasks]

    def get_top_priority_tasks(self, limit: int) -> list[Task]:
        """Highest priority first (stable), then the first `limit` tasks; limit < 0 gives []."""
        return TaskProcessor.sort_by_priority().and_then(
            TaskProcessor.limit(max(0, limit))
        ).process(self._tasks)

    # ---- grouping / counting ----

    def group_by_status(self) -> dict[Status, list[Task]]:
        groups: dict[Status, list[Task]] = {}
        for t in self._tasks:
            groups.setdefault(t.status, []).append(t)
        return groups

    def partition_by_overdue(self, now: datetime | None = None) -> dict[bool, list[Task]]:
        """Both keys are always present, even when one side is empty."""
        parts: dict[bool, list[Task]] = {True: [], False: []}
        for t in self._tasks:
            parts[t.is_overdue(now)].append(t)
        return parts

    def count_tasks_by_priority(self) -> dict[Priority, int]:
        return dict(Counter(t.priority for t in self._tasks))

    # ---- estimates ----

    def _estimates(self) -> list[int]:
        return [t.estimated_hours for t in self._tasks if t.estimated_hours is not None]

    def get_total_estimated_hours(self) -> int | None:
        """Sum of known estimates; None (not 0) when no task has one."""
        hours = self._estimates()
        return sum(hours) if hours else None

    def get_average_estimated_hours(self) -> float | None:
        hours = self._estimates()
        return sum(hours) / len(hours) if hours else None

    def are_all_tasks_assigned(self) -> bool:
        """True if every task carries an hour estimate ("assigned" means "estimated" here)."""
        return all(t.estimated_hours is not None for t in self._tasks)

    # ---- tags ----

    def get_all_unique_tags(self) -> set[str]:
        tags: set[str] = set()
        for t in self._tasks:
            tags |= t.tags
        return tags

    def get_all_tags_sorted(self) -> list[str]:
        """Every tag of every task (repeats across tasks kept), sorted."""
        return sorted(tag for t in self._tasks for tag in t.tags)

    # ---- overdue ----

    def has_overdue_tasks(self, now: datetime | None = None) -> bool:
        return any(t.is_overdue(now) for t in self._tasks)

    # ---- lookups ----

    def find_task_by_id(self, task_id: int | None) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def get_task_summary(self, task_id: int | None) -> str:
        task = self.find_task_by_id(task_id)
        if task is None:
            return TASK_NOT_FOUND
        return f"{task.title} - {task.status}"
