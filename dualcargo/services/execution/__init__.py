"""Execution services for dualcargo test/check commands."""

from .args import CommandPlanner, build_argv, scope_args
from .executor import SubprocessCommandExecutor, normalize_exit_code
from .runner import DualRunner, status_line
from .signal_handler import ProcessSignalHandler

__all__ = [
    "CommandPlanner",
    "DualRunner",
    "ProcessSignalHandler",
    "SubprocessCommandExecutor",
    "build_argv",
    "normalize_exit_code",
    "scope_args",
    "status_line",
]
