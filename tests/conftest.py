"""
Shared pytest fixtures for dualcargo tests.

This module provides:
- A clean service container and environment for every test
- RecordingExecutor: a fake command executor with scripted exit codes
- A presenter writing to in-memory streams
"""

import io
from collections.abc import Sequence
from pathlib import Path

import pytest

from dualcargo.core.bootstrap import reset
from dualcargo.presenters.console import ConsolePresenter


class RecordingExecutor:
    """Fake ICommandExecutor that records argv and returns scripted codes.

    Exit codes are consumed in order; once exhausted, 0 is returned. An
    exception instance in the list is raised instead of returned.
    """

    def __init__(self, exit_codes: Sequence[int | Exception] = (), events: list | None = None):
        self.exit_codes = list(exit_codes)
        self.calls: list[list[str]] = []
        self.signal_handlers: list = []
        self.events = events if events is not None else []

    def execute(self, argv: Sequence[str], signal_handler=None) -> int:
        self.calls.append(list(argv))
        self.signal_handlers.append(signal_handler)
        self.events.append(("execute", list(argv)))
        code = self.exit_codes.pop(0) if self.exit_codes else 0
        if isinstance(code, Exception):
            raise code
        return code


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Reset the container and drop DUALCARGO_* variables for each test."""
    import os

    for name in list(os.environ):
        if name.upper().startswith("DUALCARGO_"):
            monkeypatch.delenv(name, raising=False)
    reset()
    yield
    reset()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_executor():
    """Factory for RecordingExecutor instances."""
    return RecordingExecutor


@pytest.fixture
def presenter_streams():
    """In-memory stdout/stderr for a ConsolePresenter."""
    return io.StringIO(), io.StringIO()


@pytest.fixture
def presenter(presenter_streams) -> ConsolePresenter:
    out, err = presenter_streams
    return ConsolePresenter(use_color=False, file=out, err_file=err)
