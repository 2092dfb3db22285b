"""
Core infrastructure for dualcargo.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Protocol definitions for all service interfaces
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, reset_container, resolve_or_default
from .exceptions import (
    ConfigValidationError,
    DualCargoConfigError,
    DualCargoException,
    DualCargoExecutionError,
    ExecutionError,
    ToolNotFoundError,
)

__all__ = [
    "ConfigValidationError",
    "DualCargoConfigError",
    "DualCargoException",
    "DualCargoExecutionError",
    "ExecutionError",
    "ServiceContainer",
    "ToolNotFoundError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "reset_container",
    "resolve_or_default",
]
