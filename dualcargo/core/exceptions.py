"""
Exception hierarchy for dualcargo.

A failing cargo invocation is not an exception: its exit code is propagated
as the process status. These exceptions cover the cases where dualcargo
itself cannot do its job, and carry the status the CLI exits with.
"""

from __future__ import annotations

from typing import Any


class DualCargoException(Exception):
    """
    Base exception for all dualcargo errors.

    Keyword arguments other than ``cause`` are kept as debugging context;
    ``None`` values are dropped.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (keys, programs, commands)
        exit_code: Exit status the CLI uses for this error
        recoverable: Whether a retry could succeed
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(self, message: str, *, cause: BaseException | None = None, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class DualCargoConfigError(DualCargoException):
    """Base class for configuration errors."""


class ConfigValidationError(DualCargoConfigError, ValueError):
    """
    A configured value is invalid, e.g. an unknown log level.

    Context: ``key`` (dotted path of the offending value), ``value``.
    """


class DualCargoExecutionError(DualCargoException):
    """Base class for errors starting the build tool."""

    recoverable = False


class ToolNotFoundError(DualCargoExecutionError):
    """The build tool executable is not on PATH. Context: ``program``."""

    exit_code = 127


class ExecutionError(DualCargoExecutionError):
    """
    The build tool exists but could not be started (permission denied,
    bad interpreter). Context: ``command``.
    """

    exit_code = 126
