"""
Logger interface for internal diagnostics.

The status line and error messages shown to the user go through
IPresenter; ILogger carries what a developer needs to see why a run did
what it did (argv, pids, exit statuses, interrupts).
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Diagnostic logger with printf-style arguments."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any) -> None: ...
