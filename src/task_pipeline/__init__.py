"""
Composable in-memory task pipeline.

Public surface:
- Task / Priority / Status: immutable task records
- TaskPredicate / TaskTransformer / TaskProcessor: combinable pipeline building blocks
- TaskProcessingEngine: orchestration helpers (pipelines, batching, lazy streams)
- TaskAnalyzer: read-only aggregation over a task snapshot
"""

from .analysis.analyzer import TaskAnalyzer
from .core.errors import InvalidArgumentError
from .processing.engine import TaskProcessingEngine
from .tasks.predicates import TaskPredicate
from .tasks.processors import TaskProcessor
from .tasks.task_models import Priority, Status, Task
from .tasks.transformers import TaskTransformer

__all__ = [
    "InvalidArgumentError",
    "Priority",
    "Status",
    "Task",
    "TaskAnalyzer",
    "TaskPredicate",
    "TaskProcessingEngine",
    "TaskProcessor",
    "TaskTransformer",
]
