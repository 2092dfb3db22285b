"""
Pydantic models for dualcargo.

All models use Pydantic v2 with strict validation.
"""

from .base import DualCargoBaseModel, ImmutableModel
from .config import CargoConfig, LoggingConfig, OutputConfig
from .run import (
    CommandPlan,
    Invocation,
    InvocationOutcome,
    RunResult,
    Scope,
    ScopeKind,
    Subcommand,
)

__all__ = [
    "CargoConfig",
    "CommandPlan",
    "DualCargoBaseModel",
    "ImmutableModel",
    "Invocation",
    "InvocationOutcome",
    "LoggingConfig",
    "OutputConfig",
    "RunResult",
    "Scope",
    "ScopeKind",
    "Subcommand",
]
