"""
Console presenter for terminal output.
"""

import sys
from typing import TextIO

from ..core.interfaces.presenter import IPresenter

RED = "\033[91m"
RESET = "\033[0m"


class ConsolePresenter(IPresenter):
    """
    Writes the status line to stdout and errors to stderr.

    The status line is plain text, as `echo` would print it. Errors are red
    when stderr is a terminal.
    """

    def __init__(
        self,
        use_color: bool = True,
        file: TextIO | None = None,
        err_file: TextIO | None = None,
    ) -> None:
        """
        Args:
            use_color: Allow ANSI styling on a terminal
            file: Status stream (defaults to sys.stdout at write time)
            err_file: Error stream (defaults to sys.stderr at write time)
        """
        self._file = file
        self._err_file = err_file
        self._use_color = use_color

    # Looked up per write so click's CliRunner stream swapping is honoured
    @property
    def out(self) -> TextIO:
        return self._file or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err_file or sys.stderr

    def _styled(self, text: str, style: str, stream: TextIO) -> str:
        if self._use_color and stream.isatty():
            return f"{style}{text}{RESET}"
        return text

    def print_status(self, message: str) -> None:
        print(message, file=self.out, flush=True)

    def print_error(self, message: str) -> None:
        print(self._styled(f"Error: {message}", RED, self.err), file=self.err, flush=True)
