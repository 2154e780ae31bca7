# tests/test_predicates.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from task_pipeline.core.errors import InvalidArgumentError
from task_pipeline.tasks.predicates import TaskPredicate
from task_pipeline.tasks.task_models import Priority, Status


def test_by_status(make_task) -> None:
    todo = make_task(status=Status.TODO)
    done = make_task(status=Status.DONE)

    assert TaskPredicate.by_status(Status.TODO).test(todo)
    assert not TaskPredicate.by_status(Status.TODO).test(done)
    assert TaskPredicate.by_status(Status.DONE)(done)


def test_by_priority(make_task) -> None:
    high = make_task(priority=Priority.HIGH)
    low = make_task(priority=Priority.LOW)

    assert TaskPredicate.by_priority(Priority.HIGH).test(high)
    assert not TaskPredicate.by_priority(Priority.HIGH).test(low)


def test_has_tag(make_task) -> None:
    tagged = make_task(tags={"urgent"})
    untagged = make_task(tags=set())

    assert TaskPredicate.has_tag("urgent").test(tagged)
    assert not TaskPredicate.has_tag("urgent").test(untagged)
    assert not TaskPredicate.has_tag("missing").test(tagged)


def test_is_overdue_and_is_active(make_task) -> None:
    overdue = make_task(due_date=datetime.now() - timedelta(days=1))
    upcoming = make_task(due_date=datetime.now() + timedelta(days=1))

    assert TaskPredicate.is_overdue().test(overdue)
    assert not TaskPredicate.is_overdue().test(upcoming)
    assert TaskPredicate.is_active().test(make_task(status=Status.IN_PROGRESS))
    assert not TaskPredicate.is_active().test(make_task(status=Status.CANCELLED))


def test_and_or_negate(make_task) -> None:
    high_active = make_task(status=Status.IN_PROGRESS, priority=Priority.HIGH)
    low_active = make_task(status=Status.IN_PROGRESS, priority=Priority.LOW)
    high_cancelled = make_task(status=Status.CANCELLED, priority=Priority.HIGH)

    both = TaskPredicate.by_priority(Priority.HIGH).and_(TaskPredicate.is_active())
    either = TaskPredicate.by_priority(Priority.HIGH).or_(TaskPredicate.is_active())
    inactive = TaskPredicate.is_active().negate()

    assert both.test(high_active)
    assert not both.test(low_active)
    assert not both.test(high_cancelled)

    assert either.test(high_cancelled)
    assert either.test(low_active)

    assert inactive.test(high_cancelled)
    assert not inactive.test(high_active)


def test_operator_forms_match_named_combinators(make_task) -> None:
    task = make_task(status=Status.TODO, priority=Priority.LOW, tags={"x"})
    high = TaskPredicate.by_priority(Priority.HIGH)
    tagged = TaskPredicate.has_tag("x")

    assert (high | tagged).test(task) == high.or_(tagged).test(task)
    assert (high & tagged).test(task) == high.and_(tagged).test(task)
    assert (~high).test(task) == high.negate().test(task)


def test_combinators_short_circuit(make_task) -> None:
    calls: list[str] = []

    def spy(task) -> bool:
        calls.append("spy")
        return True

    TaskPredicate.never().and_(spy).test(make_task())
    TaskPredicate.always().or_(spy).test(make_task())

    assert calls == []


def test_combination_is_associative(make_task) -> None:
    a = TaskPredicate.is_active()
    b = TaskPredicate.has_tag("x")
    c = TaskPredicate.by_priority(Priority.HIGH)
    tasks = [
        make_task(status=s, tags=t, priority=p)
        for s in (Status.TODO, Status.DONE)
        for t in ({"x"}, set())
        for p in (Priority.HIGH, Priority.LOW)
    ]

    for task in tasks:
        assert ((a & b) & c).test(task) == (a & (b & c)).test(task)
        assert ((a | b) | c).test(task) == (a | (b | c)).test(task)


def test_missing_arguments_raise() -> None:
    with pytest.raises(InvalidArgumentError):
        TaskPredicate.by_status(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        TaskPredicate.by_priority(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        TaskPredicate.has_tag(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        TaskPredicate.always().and_(None)  # type: ignore[arg-type]


def test_unknown_enum_values_raise_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError, match="unknown status"):
        TaskPredicate.by_status("BOGUS")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="unknown priority"):
        TaskPredicate.by_priority(9)  # type: ignore[arg-type]
