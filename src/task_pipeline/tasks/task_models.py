# src/task_pipeline/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import IntEnum, StrEnum

from ..core.errors import InvalidArgumentError


class Priority(IntEnum):
    """Ordered task priority; the integer value is the sort weight."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def weight(self) -> int:
        return int(self.value)

    @classmethod
    def coerce(cls, raw: object) -> Priority:
        if raw is None:
            raise InvalidArgumentError("priority is required")
        try:
            return cls(raw)
        except ValueError:
            raise InvalidArgumentError(f"unknown priority: {raw!r}") from None


class Status(StrEnum):
    """
    Task status.

    No transition graph is enforced here: any status may follow any status.
    Transitions happen only through explicit transformers.
    """

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    BLOCKED = "BLOCKED"
    DONE = "DONE"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (Status.DONE, Status.CANCELLED)

    @classmethod
    def coerce(cls, raw: object) -> Status:
        if raw is None:
            raise InvalidArgumentError("status is required")
        try:
            return cls(raw)
        except ValueError:
            raise InvalidArgumentError(f"unknown status: {raw!r}") from None


def _normalize_tags(tags: Iterable[str] | None) -> frozenset[str]:
    if tags is None:
        return frozenset()
    if isinstance(tags, str):
        # A bare string would otherwise be split into characters.
        return frozenset({tags})
    return frozenset(tags)


@dataclass(frozen=True, slots=True)
class Task:
    """
    Immutable task record.

    Every "update" goes through one of the with_* helpers (or dataclasses.replace)
    and yields a new Task; equality and hashing cover all fields.
    """

    id: int | None
    title: str
    description: str | None = None
    priority: Priority = Priority.MEDIUM
    status: Status = Status.TODO
    tags: frozenset[str] = field(default_factory=frozenset)
    created_at: datetime = field(default_factory=datetime.now)
    due_date: datetime | None = None
    estimated_hours: int | None = None

    def __post_init__(self) -> None:
        if self.title is None:
            raise InvalidArgumentError("title is required")
        if self.estimated_hours is not None and self.estimated_hours < 0:
            raise InvalidArgumentError(
                f"estimated_hours must be non-negative, got {self.estimated_hours}"
            )
        object.__setattr__(self, "priority", Priority.coerce(self.priority))
        object.__setattr__(self, "status", Status.coerce(self.status))
        object.__setattr__(self, "tags", _normalize_tags(self.tags))

    # ---- derived state ----

    def is_overdue(self, now: datetime | None = None) -> bool:
        """True if due_date lies strictly in the past and the task is not DONE/CANCELLED."""
        if self.due_date is None or self.status.is_terminal:
            return False
        if now is None:
            now = datetime.now(tz=self.due_date.tzinfo)
        return self.due_date < now

    def is_active(self) -> bool:
        return self.status in (Status.TODO, Status.IN_PROGRESS)

    # ---- derived copies ----

    def with_status(self, status: Status) -> Task:
        return replace(self, status=status)

    def with_priority(self, priority: Priority) -> Task:
        return replace(self, priority=priority)

    def with_tags(self, tags: Iterable[str]) -> Task:
        return replace(self, tags=_normalize_tags(tags))

    def with_estimated_hours(self, hours: int | None) -> Task:
        return replace(self, estimated_hours=hours)
