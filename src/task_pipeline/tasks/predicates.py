# src/task_pipeline/tasks/predicates.py

from __future__ import annotations

"""
Composable boolean tests over a Task.

A TaskPredicate wraps a plain function and never mutates its operands:
and_/or_/negate (and the &, |, ~ operators) return new predicates.
"""

from ..core.errors import require
from ..core.ports import Predicate
from .task_models import Priority, Status, Task


class TaskPredicate:
    __slots__ = ("_fn",)

    def __init__(self, fn: Predicate) -> None:
        self._fn = require(fn, "predicate function")

    @classmethod
    def of(cls, fn: Predicate | TaskPredicate) -> TaskPredicate:
        if isinstance(fn, TaskPredicate):
            return fn
        return cls(fn)

    def test(self, task: Task) -> bool:
        return bool(self._fn(task))

    __call__ = test

    # ---- combinators ----

    def and_(self, other: Predicate | TaskPredicate) -> TaskPredicate:
        right = TaskPredicate.of(require(other, "other"))
        return TaskPredicate(lambda task: self.test(task) and right.test(task))

    def or_(self, other: Predicate | TaskPredicate) -> TaskPredicate:
        right = TaskPredicate.of(require(other, "other"))
        return TaskPredicate(lambda task: self.test(task) or right.test(task))

    def negate(self) -> TaskPredicate:
        return TaskPredicate(lambda task: not self.test(task))

    def __and__(self, other: Predicate | TaskPredicate) -> TaskPredicate:
        return self.and_(other)

    def __or__(self, other: Predicate | TaskPredicate) -> TaskPredicate:
        return self.or_(other)

    def __invert__(self) -> TaskPredicate:
        return self.negate()

    # ---- factories ----

    @staticmethod
    def always() -> TaskPredicate:
        return TaskPredicate(lambda _task: True)

    @staticmethod
    def never() -> TaskPredicate:
        return TaskPredicate(lambda _task: False)

    @staticmethod
    def by_status(status: Status) -> TaskPredicate:
        wanted = Status.coerce(status)
        return TaskPredicate(lambda task: task.status == wanted)

    @staticmethod
    def by_priority(priority: Priority) -> TaskPredicate:
        wanted = Priority.coerce(priority)
        return TaskPredicate(lambda task: task.priority == wanted)

    @staticmethod
    def has_tag(tag: str) -> TaskPredicate:
        require(tag, "tag")
        return TaskPredicate(lambda task: tag in task.tags)

    @staticmethod
    def is_overdue() -> TaskPredicate:
        return TaskPredicate(lambda task: task.is_overdue())

    @staticmethod
    def is_active() -> TaskPredicate:
        return TaskPredicate(lambda task: task.is_active())
