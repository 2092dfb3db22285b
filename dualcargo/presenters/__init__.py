"""
Output presenters for dualcargo CLI.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
