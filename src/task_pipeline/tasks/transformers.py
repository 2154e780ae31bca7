# src/task_pipeline/tasks/transformers.py

from __future__ import annotations

from ..core.errors import InvalidArgumentError, require
from ..core.ports import Transform
from .task_models import Priority, Status, Task


class TaskTransformer:
    """
    Pure Task -> Task function producing a modified copy.

    and_then() composes left to right: t.and_then(u) applies t first, then u.
    Composition is not commutative (add_tag("x") then remove_tag("x") cancels,
    the reverse order does not).
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Transform) -> None:
        self._fn = require(fn, "transformer function")

    @classmethod
    def of(cls, fn: Transform | TaskTransformer) -> TaskTransformer:
        if isinstance(fn, TaskTransformer):
            return fn
        return cls(fn)

    def apply(self, task: Task) -> Task:
        if task is None:
            raise InvalidArgumentError("cannot transform a missing task")
        return self._fn(task)

    __call__ = apply

    def and_then(self, other: Transform | TaskTransformer) -> TaskTransformer:
        after = TaskTransformer.of(require(other, "other"))
        return TaskTransformer(lambda task: after.apply(self.apply(task)))

    # ---- factories ----

    @staticmethod
    def identity() -> TaskTransformer:
        return TaskTransformer(lambda task: task)

    @staticmethod
    def set_status(status: Status) -> TaskTransformer:
        new_status = Status.coerce(status)
        return TaskTransformer(lambda task: task.with_status(new_status))

    @staticmethod
    def set_priority(priority: Priority) -> TaskTransformer:
        new_priority = Priority.coerce(priority)
        return TaskTransformer(lambda task: task.with_priority(new_priority))

    @staticmethod
    def add_tag(tag: str) -> TaskTransformer:
        require(tag, "tag")
        return TaskTransformer(lambda task: task.with_tags(task.tags | {tag}))

    @staticmethod
    def remove_tag(tag: str) -> TaskTransformer:
        require(tag, "tag")
        return TaskTransformer(lambda task: task.with_tags(task.tags - {tag}))

    @staticmethod
    def set_estimated_hours(hours: int) -> TaskTransformer:
        require(hours, "hours")
        if hours < 0:
            raise InvalidArgumentError(f"hours must be non-negative, got {hours}")
        return TaskTransformer(lambda task: task.with_estimated_hours(hours))

    @staticmethod
    def mark_complete() -> TaskTransformer:
        return TaskTransformer.set_status(Status.DONE)

    @staticmethod
    def mark_in_progress() -> TaskTransformer:
        return TaskTransformer.set_status(Status.IN_PROGRESS)
