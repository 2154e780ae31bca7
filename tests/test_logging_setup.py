# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_pipeline import bootstrap
from task_pipeline.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    """
    Drop the handlers setup_logging() installs once the test is done.

    Handlers that existed before belong to pytest's per-phase log capture, which
    detaches them itself, so they are not re-attached here.
    """
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_pipeline.processing.engine", logging.DEBUG))
    assert f.filter(_record("task_pipeline", logging.INFO))
    assert not f.filter(_record("urllib3.connectionpool", logging.INFO))
    assert f.filter(_record("urllib3.connectionpool", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(restore_root_logging, tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING, log_to_file=True)

    logging.getLogger("task_pipeline.test").debug("hello file")
    for h in restore_root_logging.handlers:
        h.flush()

    log_file = tmp_path / "logs" / "task_pipeline.log"
    assert log_file.exists()
    assert "hello file" in log_file.read_text("utf-8")


def test_setup_logging_replaces_handlers(restore_root_logging) -> None:
    setup_logging(console_level=logging.INFO)
    setup_logging(console_level=logging.INFO)

    assert len(restore_root_logging.handlers) == 1


def test_init_logging_from_settings(restore_root_logging, settings, tmp_path: Path) -> None:
    settings.log_dir = tmp_path
    settings.log_to_file = True

    bootstrap.init_logging(settings)

    assert (tmp_path / "task_pipeline.log").exists()
    console = restore_root_logging.handlers[0]
    assert console.level == logging.DEBUG
