# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from task_pipeline.tasks.task_models import Priority, Status, Task

NOW = datetime(2026, 3, 10, 12, 0, 0)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def make_task() -> Callable[..., Task]:
    """
    Factory for tasks with sensible defaults.

    created_at is pinned so that equality between separately built tasks is predictable.
    """

    def _make(
        id: int | None = 1,
        title: str = "Test Task",
        *,
        description: str | None = "Description",
        priority: Priority = Priority.MEDIUM,
        status: Status = Status.TODO,
        tags: set[str] | None = None,
        due_date: datetime | None = None,
        estimated_hours: int | None = 5,
    ) -> Task:
        return Task(
            id=id,
            title=title,
            description=description,
            priority=priority,
            status=status,
            tags=frozenset(tags or ()),
            created_at=NOW - timedelta(days=7),
            due_date=due_date,
            estimated_hours=estimated_hours,
        )

    return _make


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with the engine and bootstrap helpers.

    A SimpleNamespace keeps tests independent of the real environment.
    """
    return SimpleNamespace(
        app_name="task-pipeline-test",
        log_level="DEBUG",
        log_dir=None,
        log_to_file=False,
        default_batch_size=3,
        log_preview_limit=2,
    )
