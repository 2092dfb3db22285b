"""
Configuration models.

Provides Pydantic models for dualcargo configuration with validation.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import NoDecode

from .base import DualCargoBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(DualCargoBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    # Coerce env strings; ignore keys this version does not know
    model_config = ConfigDict(strict=False, extra="ignore")


class CargoConfig(ConfigBaseModel):
    """Build tool configuration section."""

    program: Annotated[str, Field(min_length=1)] = "cargo"
    # Environment values arrive as plain strings and are split below
    extra_args: Annotated[list[str], NoDecode] = Field(default_factory=list)

    @field_validator("extra_args", mode="before")
    @classmethod
    def parse_space_separated(cls, v: Any) -> list[str]:
        """Accept a whitespace-separated string as well as a list."""
        if isinstance(v, str):
            return v.split()
        return v if v else []


class OutputConfig(ConfigBaseModel):
    """Output configuration section."""

    quiet: bool = False


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v
