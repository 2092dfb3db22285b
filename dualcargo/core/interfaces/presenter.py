"""
Presenter interface for user-facing output.
"""

from abc import ABC, abstractmethod


class IPresenter(ABC):
    """
    Owns the status line and error messages shown to the user.

    Subprocess output never passes through a presenter: children write
    straight to the inherited file descriptors.
    """

    @abstractmethod
    def print_status(self, message: str) -> None:
        """
        Print a status line on stdout.

        Implementations must flush before returning so the line appears
        ahead of any output from a child process started afterwards.
        """

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print a one-line error on stderr."""
