# src/task_pipeline/processing/engine.py

from __future__ import annotations

"""
Pipeline engine.

Orchestrates processors/transformers/predicates over a task snapshot:
- process_pipeline(): compose a list of stages and run them in order
- batch_process() / process_tasks_with_side_effects(): synchronous callbacks, input order
- generate_task_stream(): lazy, pull-based, unbounded task generator

Faults raised by caller-supplied functions propagate unchanged.
"""

import functools
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from ..core.errors import InvalidArgumentError, require
from ..core.ports import (
    BatchConsumer,
    Comparator,
    Predicate,
    Process,
    TaskConsumer,
    TaskMerger,
    TaskSink,
    TaskSource,
    TaskSupplier,
    Transform,
)
from ..tasks.comparators import then_comparing
from ..tasks.predicates import TaskPredicate
from ..tasks.processors import TaskProcessor
from ..tasks.task_models import Task
from ..tasks.transformers import TaskTransformer

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10


def _snapshot(tasks: Iterable[Task] | None) -> list[Task]:
    """Absent collections are treated as empty."""
    if tasks is None:
        return []
    return list(tasks)


class TaskProcessingEngine:
    def __init__(self, settings: Any = None) -> None:
        # Only default_batch_size is read; any object carrying it will do.
        # Missing or non-positive values fall back, same rule as Settings.from_env().
        size = getattr(settings, "default_batch_size", None)
        if size is None or int(size) <= 0:
            size = DEFAULT_BATCH_SIZE
        self._default_batch_size = int(size)

    @property
    def default_batch_size(self) -> int:
        return self._default_batch_size

    # ---- pipelines ----

    def process_pipeline(
        self,
        tasks: Sequence[Task] | None,
        operations: Iterable[Process | TaskProcessor | None] | None,
    ) -> list[Task]:
        """
        Compose operations left to right (None entries are skipped) and apply them.

        An empty or missing operation list is the identity.
        """
        items = _snapshot(tasks)
        stages = [TaskProcessor.of(op) for op in (operations or []) if op is not None]
        if not stages:
            return items

        pipeline = functools.reduce(TaskProcessor.and_then, stages)
        logger.debug("Running pipeline stages=%d tasks=%d", len(stages), len(items))
        return pipeline.process(items)

    def filter_and_transform(
        self,
        tasks: Sequence[Task] | None,
        predicate: Predicate | TaskPredicate,
        transformer: Transform | TaskTransformer,
    ) -> list[Task]:
        stage = TaskProcessor.filter(require(predicate, "predicate")).and_then(
            TaskProcessor.transform(require(transformer, "transformer"))
        )
        return stage.process(_snapshot(tasks))

    def transform_all(
        self,
        tasks: Sequence[Task] | None,
        transformer: Transform | TaskTransformer,
    ) -> list[Task]:
        stage = TaskProcessor.transform(require(transformer, "transformer"))
        return stage.process(_snapshot(tasks))

    def run(
        self,
        source: TaskSource,
        operations: Iterable[Process | TaskProcessor | None] | None,
        sink: TaskSink | None = None,
    ) -> list[Task]:
        """Load a snapshot from source, run the pipeline, optionally hand the result to sink."""
        require(source, "source")
        result = self.process_pipeline(source.load_tasks(), operations)
        if sink is not None:
            sink.save_tasks(result)
            logger.debug("Saved pipeline result tasks=%d", len(result))
        return result

    # ---- side effects ----

    def process_tasks_with_side_effects(
        self,
        tasks: Iterable[Task] | None,
        effect: TaskConsumer,
    ) -> None:
        require(effect, "effect")
        for task in _snapshot(tasks):
            effect(task)

    def batch_process(
        self,
        tasks: Sequence[Task] | None,
        batch_size: int | None,
        processor: BatchConsumer,
    ) -> None:
        """
        Call processor once per contiguous chunk of at most batch_size tasks.

        batch_size=None uses the configured default. Chunk i covers
        [i * batch_size, min((i + 1) * batch_size, total)).
        """
        require(processor, "processor")
        size = self._default_batch_size if batch_size is None else batch_size
        if size <= 0:
            raise InvalidArgumentError(f"batch_size must be > 0, got {size}")

        items = _snapshot(tasks)
        total = len(items)
        logger.debug("Batch processing tasks=%d batch_size=%d", total, size)
        for start in range(0, total, size):
            processor(items[start : start + size])

    # ---- single values ----

    def get_or_create_default(self, maybe_task: Task | None, supplier: TaskSupplier) -> Task:
        """Return maybe_task, or supplier() if it is None. supplier is never called otherwise."""
        require(supplier, "supplier")
        if maybe_task is not None:
            return maybe_task
        return supplier()

    def merge_tasks(self, a: Task, b: Task, merger: TaskMerger) -> Task:
        return require(merger, "merger")(a, b)

    def get_highest_priority_task_title(self, tasks: Iterable[Task] | None) -> str | None:
        """Title of the highest-priority task; the first one wins on ties."""
        best: Task | None = None
        for task in _snapshot(tasks):
            if best is None or task.priority.weight > best.priority.weight:
                best = task
        return best.title if best is not None else None

    # ---- sorting ----

    def sort_by_multiple_criteria(
        self,
        tasks: Sequence[Task] | None,
        comparators: Sequence[Comparator | None] | None,
    ) -> list[Task]:
        """Stable lexicographic sort; the first comparator is the primary key."""
        items = _snapshot(tasks)
        chain = [c for c in (comparators or []) if c is not None]
        if not chain:
            return items
        return sorted(items, key=functools.cmp_to_key(then_comparing(*chain)))

    # ---- lazy generation ----

    def generate_task_stream(self, supplier: TaskSupplier) -> Iterator[Task]:
        """
        Infinite, pull-based stream: supplier runs once per element requested.

        Never materialize it whole; bound it first (itertools.islice, next(), ...).
        """
        require(supplier, "supplier")
        return _supply_forever(supplier)


def _supply_forever(supplier: TaskSupplier) -> Iterator[Task]:
    while True:
        yield supplier()
