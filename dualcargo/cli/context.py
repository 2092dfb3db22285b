"""
Click context object for the dualcargo CLI.

DualCargoContext is created once per invocation, by the `dualcargo` group
or by a standalone script, and travels to commands via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class DualCargoContext:
    """Working directory and the configuration loaded for it."""

    cwd: Path
    config: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, cwd: Path | None = None) -> DualCargoContext:
        """Load configuration by walking up from cwd (default: Path.cwd()).

        Raises:
            ConfigValidationError: If the configuration holds invalid values
        """
        from ..config import load_config

        cwd = cwd or Path.cwd()
        return cls(cwd=cwd, config=load_config(start_dir=str(cwd)))

    @property
    def config_file(self) -> str | None:
        return self.config.get("_config_file")

    @property
    def config_error(self) -> str | None:
        return self.config.get("_config_error")
