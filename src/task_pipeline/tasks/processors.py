# src/task_pipeline/tasks/processors.py

from __future__ import annotations

"""
Pipeline stages over an ordered sequence of tasks.

Every stage returns a new list and leaves its input untouched. Sorts are stable.
"""

import logging
from collections.abc import Sequence

from ..core.errors import InvalidArgumentError, require
from ..core.ports import Predicate, Process, Transform
from .predicates import TaskPredicate
from .task_models import Status, Task
from .transformers import TaskTransformer

logger = logging.getLogger(__name__)


class TaskProcessor:
    __slots__ = ("_fn",)

    def __init__(self, fn: Process) -> None:
        self._fn = require(fn, "processor function")

    @classmethod
    def of(cls, fn: Process | TaskProcessor) -> TaskProcessor:
        if isinstance(fn, TaskProcessor):
            return fn
        return cls(fn)

    def process(self, tasks: Sequence[Task]) -> list[Task]:
        return list(self._fn(tasks))

    __call__ = process

    def and_then(self, other: Process | TaskProcessor) -> TaskProcessor:
        after = TaskProcessor.of(require(other, "other"))
        return TaskProcessor(lambda tasks: after.process(self.process(tasks)))

    # ---- factories ----

    @staticmethod
    def identity() -> TaskProcessor:
        return TaskProcessor(list)

    @staticmethod
    def filter(predicate: Predicate | TaskPredicate) -> TaskProcessor:
        test = TaskPredicate.of(require(predicate, "predicate"))
        return TaskProcessor(lambda tasks: [t for t in tasks if test(t)])

    @staticmethod
    def transform(transformer: Transform | TaskTransformer) -> TaskProcessor:
        fn = TaskTransformer.of(require(transformer, "transformer"))
        return TaskProcessor(lambda tasks: [fn(t) for t in tasks])

    @staticmethod
    def sort_by_priority() -> TaskProcessor:
        """Highest weight first; ties keep their input order."""
        return TaskProcessor(lambda tasks: sorted(tasks, key=lambda t: -t.priority.weight))

    @staticmethod
    def sort_by_due_date() -> TaskProcessor:
        """Earliest due date first; tasks without a due date go last."""
        return TaskProcessor(
            lambda tasks: sorted(tasks, key=lambda t: (t.due_date is None, t.due_date))
        )

    @staticmethod
    def limit(n: int) -> TaskProcessor:
        require(n, "n")
        if n < 0:
            raise InvalidArgumentError(f"limit must be >= 0, got {n}")
        return TaskProcessor(lambda tasks: list(tasks[:n]))

    @staticmethod
    def remove_duplicates() -> TaskProcessor:
        """Drop later tasks equal to an earlier one (full value equality)."""

        def _dedupe(tasks: Sequence[Task]) -> list[Task]:
            seen: set[Task] = set()
            out: list[Task] = []
            for t in tasks:
                if t in seen:
                    continue
                seen.add(t)
                out.append(t)
            return out

        return TaskProcessor(_dedupe)

    @staticmethod
    def batch_update_status(status: Status) -> TaskProcessor:
        return TaskProcessor.transform(TaskTransformer.set_status(status))

    @staticmethod
    def log_tasks(
        message: str,
        *,
        level: int = logging.INFO,
        preview_limit: int = 5,
    ) -> TaskProcessor:
        """Pass-through stage that logs the sequence size and a title preview."""

        def _log(tasks: Sequence[Task]) -> list[Task]:
            out = list(tasks)
            if logger.isEnabledFor(level):
                titles = [t.title for t in out[: max(0, preview_limit)]]
                more = len(out) - len(titles)
                suffix = f" (+{more} more)" if more > 0 else ""
                logger.log(level, "%s: %d task(s) %s%s", message, len(out), titles, suffix)
            return out

        return TaskProcessor(_log)
