# src/task_pipeline/bootstrap.py

"""
Composition root.

Loads settings once, wires logging, and builds engine/analyzer instances.
Keeping settings injectable keeps tests free of hidden global config reads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .analysis.analyzer import TaskAnalyzer
from .config import Settings, get_settings
from .logging_setup import setup_logging
from .processing.engine import TaskProcessingEngine
from .tasks.processors import TaskProcessor
from .tasks.task_models import Task

logger = logging.getLogger(__name__)


def init_logging(settings: Settings | None = None) -> None:
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )
    logger.info("Logging ready for %s (level=%s)", settings.app_name, settings.log_level)


def create_engine(*, settings: Settings | None = None) -> TaskProcessingEngine:
    if settings is None:
        settings = get_settings()
    return TaskProcessingEngine(settings)


def create_analyzer(tasks: Iterable[Task] | None) -> TaskAnalyzer:
    return TaskAnalyzer(tasks)


def log_stage(
    message: str,
    *,
    settings: Settings | None = None,
    level: int = logging.INFO,
) -> TaskProcessor:
    """TaskProcessor.log_tasks() with the configured title preview size."""
    if settings is None:
        settings = get_settings()
    return TaskProcessor.log_tasks(message, level=level, preview_limit=settings.log_preview_limit)
