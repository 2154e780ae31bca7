# src/task_pipeline/tasks/comparators.py

from __future__ import annotations

"""
Three-way comparators over tasks, for sort_by_multiple_criteria().

A comparator is a plain (a, b) -> int function: negative if a sorts first,
positive if b sorts first, zero on a tie.
"""

from collections.abc import Callable
from typing import Any

from ..core.errors import require
from ..core.ports import Comparator
from .task_models import Task


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def comparing(key: Callable[[Task], Any], *, reverse: bool = False) -> Comparator:
    """Compare by key(task). None keys always sort last, in both directions."""
    require(key, "key")
    sign = -1 if reverse else 1

    def compare(a: Task, b: Task) -> int:
        ka, kb = key(a), key(b)
        if ka is None or kb is None:
            return (ka is None) - (kb is None)
        return sign * _cmp(ka, kb)

    return compare


def reversed_order(comparator: Comparator) -> Comparator:
    require(comparator, "comparator")
    return lambda a, b: -comparator(a, b)


def then_comparing(*comparators: Comparator) -> Comparator:
    """Lexicographic combination; the first comparator is the primary key."""
    chain = [c for c in comparators if c is not None]

    def compare(a: Task, b: Task) -> int:
        for c in chain:
            result = c(a, b)
            if result:
                return result
        return 0

    return compare


def by_priority() -> Comparator:
    """Highest priority weight first."""
    return comparing(lambda t: t.priority.weight, reverse=True)


def by_due_date() -> Comparator:
    return comparing(lambda t: t.due_date)


def by_title() -> Comparator:
    return comparing(lambda t: t.title)


def by_created_at() -> Comparator:
    return comparing(lambda t: t.created_at)


def by_id() -> Comparator:
    return comparing(lambda t: t.id)
