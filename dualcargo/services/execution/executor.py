"""
Subprocess executor for build tool invocations.

Runs one command with inherited stdin/stdout/stderr and reports its exit
status the way a POSIX shell would.
"""

import subprocess
from collections.abc import Sequence

from ...core.exceptions import ExecutionError, ToolNotFoundError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.run import ISignalHandler

# Exit status base for a child terminated by a signal (128 + signal number).
SIGNAL_EXIT_BASE = 128


def normalize_exit_code(returncode: int) -> int:
    """Map a Popen return code onto a shell-style exit status.

    Popen reports a child killed by signal N as -N; the shell reports
    128 + N.
    """
    if returncode < 0:
        return SIGNAL_EXIT_BASE - returncode
    return returncode


class SubprocessCommandExecutor:
    """
    Executes external commands as child processes.

    The child inherits the parent's environment, working directory and
    standard streams. There is no timeout.
    """

    def __init__(self, logger: ILogger | None = None) -> None:
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.container import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def execute(
        self,
        argv: Sequence[str],
        signal_handler: ISignalHandler | None = None,
    ) -> int:
        """
        Run argv to completion.

        Args:
            argv: Program and arguments
            signal_handler: Installed while the child runs, if given

        Returns:
            Exit status of the child (128 + N if killed by signal N)

        Raises:
            ToolNotFoundError: If the program does not exist
            ExecutionError: If the program cannot be started
        """
        command = list(argv)
        self.logger.debug("Executing: %s", command)

        if signal_handler is not None:
            signal_handler.install()

        proc: subprocess.Popen | None = None
        try:
            proc = self._spawn(command)
            self.logger.debug("Process started: pid=%d", proc.pid)
            returncode = proc.wait()
        except KeyboardInterrupt:
            # Only reachable without a handler installed
            self.logger.debug("KeyboardInterrupt caught during wait")
            if proc is None:
                raise
            returncode = proc.wait()
        finally:
            if proc is not None and proc.poll() is None:
                self.logger.debug("Killing child process pid=%d", proc.pid)
                proc.kill()
                proc.wait()
            if signal_handler is not None:
                signal_handler.restore()

        exit_code = normalize_exit_code(returncode)
        self.logger.debug("Process exited: returncode=%d, exit_code=%d", returncode, exit_code)
        return exit_code

    def _spawn(self, command: list[str]) -> subprocess.Popen:
        try:
            return subprocess.Popen(command)
        except FileNotFoundError as e:
            raise ToolNotFoundError(
                f"{command[0]}: command not found",
                program=command[0],
                cause=e,
            ) from e
        except OSError as e:
            raise ExecutionError(
                f"{command[0]}: cannot execute: {e.strerror or e}",
                command=" ".join(command),
                cause=e,
            ) from e
