# src/task_pipeline/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the pipeline.

Everything the caller plugs in is a plain function value; loading and persisting
snapshots is done by external collaborators behind the two Protocols below.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task

Predicate = Callable[["Task"], bool]
Transform = Callable[["Task"], "Task"]
Process = Callable[[Sequence["Task"]], list["Task"]]
# Classic three-way comparator: negative / zero / positive.
Comparator = Callable[["Task", "Task"], int]

TaskSupplier = Callable[[], "Task"]
TaskConsumer = Callable[["Task"], None]
BatchConsumer = Callable[[list["Task"]], None]
TaskMerger = Callable[["Task", "Task"], "Task"]


class TaskSource(Protocol):
    """Supplies an ordered snapshot of tasks (database, file, API, ...)."""

    def load_tasks(self) -> Sequence[Task]: ...


class TaskSink(Protocol):
    """Optionally persists a pipeline result."""

    def save_tasks(self, tasks: Sequence[Task]) -> None: ...
