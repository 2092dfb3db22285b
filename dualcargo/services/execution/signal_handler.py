"""
SIGINT handling while cargo runs.

Ctrl-C reaches cargo directly through the terminal's process group, so the
first interrupt only needs to be recorded: the runner waits for cargo to
exit and then stops instead of starting the next invocation. A second
Ctrl-C exits dualcargo at once with the shell's SIGINT status.
"""

import signal
from signal import Handlers

from ...core.interfaces.logger import ILogger

SIGINT_EXIT_CODE = 130


class ProcessSignalHandler:
    """
    Counts SIGINTs received while installed.

    The count survives install()/restore() cycles, so one handler guards
    both invocations of a run.
    """

    def __init__(self, logger: ILogger | None = None) -> None:
        self._logger = logger
        self._interrupt_count = 0
        self._saved_handler: Handlers | None = None
        self._installed = False

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ...core.container import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def install(self) -> None:
        if self._installed:
            return
        self._saved_handler = signal.signal(signal.SIGINT, self._handle_signal)  # type: ignore[assignment]
        self._installed = True
        self.logger.debug("SIGINT handler installed")

    def restore(self) -> None:
        if not self._installed:
            return
        signal.signal(signal.SIGINT, self._saved_handler)
        self._saved_handler = None
        self._installed = False
        self.logger.debug("SIGINT handler restored")

    def is_interrupted(self) -> bool:
        return self._interrupt_count > 0

    def should_abort(self) -> bool:
        return self._interrupt_count >= 2

    def get_interrupt_count(self) -> int:
        return self._interrupt_count

    def _handle_signal(self, signum: int, frame) -> None:
        self._interrupt_count += 1
        self.logger.debug("SIGINT received (%d)", self._interrupt_count)
        if self.should_abort():
            self.logger.debug("Second interrupt, exiting with %d", SIGINT_EXIT_CODE)
            raise SystemExit(SIGINT_EXIT_CODE)
