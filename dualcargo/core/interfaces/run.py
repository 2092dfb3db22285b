"""
Protocols for the process-level collaborators of a dual run.

The runner depends on these rather than on subprocess and signal directly,
so tests can substitute a recording executor and a scripted interrupt.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class ISignalHandler(Protocol):
    """Records SIGINT while a child process runs."""

    def install(self) -> None: ...

    def restore(self) -> None: ...

    def is_interrupted(self) -> bool:
        """True once any interrupt arrived since construction."""
        ...


@runtime_checkable
class ICommandExecutor(Protocol):
    """Runs one external command to completion."""

    def execute(
        self,
        argv: Sequence[str],
        signal_handler: ISignalHandler | None = None,
    ) -> int:
        """
        Run argv with inherited stdio and wait for it.

        When a signal handler is given it is installed for the lifetime of
        the child and restored afterwards.

        Returns:
            The exit status, using 128 + N for a child killed by signal N.

        Raises:
            ToolNotFoundError: If argv[0] cannot be found
            ExecutionError: If the process cannot be started
        """
        ...
