# src/task_pipeline/core/errors.py

from __future__ import annotations

from typing import Any


class InvalidArgumentError(ValueError):
    """A required argument was missing or out of range at a call boundary."""


def require(value: Any, name: str) -> Any:
    """Return value unchanged, or raise InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(f"{name} is required")
    return value
