"""
Interfaces between dualcargo's CLI layer and its services.
"""

from .logger import ILogger
from .presenter import IPresenter
from .run import ICommandExecutor, ISignalHandler

__all__ = [
    "ICommandExecutor",
    "ILogger",
    "IPresenter",
    "ISignalHandler",
]
