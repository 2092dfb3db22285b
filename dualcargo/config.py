"""Configuration loading for dualcargo."""

from pathlib import Path
from typing import Any

from .core.settings import find_config_file, load_settings

__all__ = ["find_config_file", "load_config"]


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict[str, Any]:
    """
    Effective configuration as a plain dict, defaults included.

    `_config_file` names the file that was read; `_config_error` records a
    file that could not be read or parsed.

    Raises:
        ConfigValidationError: If a configured value is invalid
    """
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()
