"""
Pytest configuration and shared fixtures for monolog-factory tests.
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from monolog_factory.config.settings import runtime_options
from monolog_factory.handlers import HandlerRegistry


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def include_dir(temp_dir):
    """Directory used as the resolver's include path."""
    path = temp_dir / "include"
    path.mkdir()
    return path


@pytest.fixture
def work_dir(temp_dir, monkeypatch):
    """Empty working directory so relative names never resolve by accident."""
    path = temp_dir / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove discovery settings inherited from the developer's shell."""
    monkeypatch.delenv("MONOLOG_CFG", raising=False)
    monkeypatch.delenv("MONOLOG_INCLUDE_PATH", raising=False)


@pytest.fixture(autouse=True)
def clean_runtime_options():
    """Restore the process option store after each test."""
    saved = dict(runtime_options)
    runtime_options.clear()
    yield runtime_options
    runtime_options.clear()
    runtime_options.update(saved)


def write_config(path: Path, handlers: Optional[List[Dict[str, Any]]] = None, **extra) -> Path:
    """Write a configuration document and return its path."""
    document = dict(extra)
    if handlers is not None:
        document["handlers"] = handlers
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def config_writer():
    """Expose write_config to tests."""
    return write_config


class RecordingHandler(logging.Handler):
    """Handler that keeps every record it receives."""

    def __init__(self, level=logging.NOTSET, tag: Optional[str] = None):
        super().__init__(level)
        self.tag = tag
        self.records: List[logging.LogRecord] = []
        self.closed = False

    def emit(self, record: logging.LogRecord):
        self.records.append(record)

    def close(self):
        self.closed = True
        super().close()


@pytest.fixture
def recording_registry():
    """Registry with recording handlers under the names A, B and Recording."""
    return HandlerRegistry(
        {
            "A": lambda **kwargs: RecordingHandler(tag="A", **kwargs),
            "B": lambda **kwargs: RecordingHandler(tag="B", **kwargs),
            "Recording": RecordingHandler,
        }
    )
