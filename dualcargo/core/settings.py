"""
Pydantic Settings for dualcargo configuration.

Settings come from (highest first) init values, DUALCARGO_* environment
variables, then the nearest TOML file: `.dualcargo/config.toml`, or a
`Cargo.toml` carrying a `[workspace.metadata.dualcargo]` or
`[package.metadata.dualcargo]` table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict, SettingsError

from .exceptions import ConfigValidationError
from .models.config import CargoConfig, LoggingConfig, OutputConfig

CONFIG_DIR_NAME = ".dualcargo"
CONFIG_FILE_NAME = "config.toml"
CARGO_MANIFEST_NAME = "Cargo.toml"
METADATA_TABLES = ("workspace", "package")


def _get_logger():
    from ..services.logging import NullLogger
    from .container import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _manifest_section(manifest: dict[str, Any]) -> dict[str, Any] | None:
    """The `metadata.dualcargo` table of a parsed Cargo.toml, workspace first."""
    for table in METADATA_TABLES:
        section = manifest.get(table, {}).get("metadata", {}).get("dualcargo")
        if isinstance(section, dict):
            return section
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _has_manifest_section(manifest: Path) -> bool:
    try:
        return _manifest_section(_read_toml(manifest)) is not None
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        _get_logger().debug("Skipping %s: %s", manifest, e)
        return False


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Walk up from start_dir (or cwd) to the nearest config file.

    In each directory `.dualcargo/config.toml` wins over a Cargo.toml; a
    Cargo.toml without a dualcargo table, or one that does not parse, is
    passed over.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        manifest = directory / CARGO_MANIFEST_NAME
        if manifest.is_file() and _has_manifest_section(manifest):
            return manifest

    return None


@dataclass
class ConfigFileData:
    """Sections read from a config file, plus where they came from."""

    sections: dict[str, Any] = field(default_factory=dict)
    path: Path | None = None
    error: str | None = None

    @classmethod
    def load(cls, path: Path | None) -> ConfigFileData:
        """Read path; decode and OS errors are recorded, not raised."""
        if path is None:
            return cls()

        try:
            data = _read_toml(path)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            return cls(path=path, error=f"Failed to parse config file: {e}")
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            return cls(path=path, error=f"Failed to read config file: {e}")

        if path.name == CARGO_MANIFEST_NAME:
            data = _manifest_section(data) or {}
        return cls(sections=data, path=path)


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source serving the sections of an already-read config file."""

    def __init__(self, settings_cls: type[BaseSettings], file_data: ConfigFileData) -> None:
        super().__init__(settings_cls)
        self.file_data = file_data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.file_data.sections.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {
            name: value
            for name, value in self.file_data.sections.items()
            if name in self.settings_cls.model_fields
        }


# pydantic-settings builds sources from a classmethod; load_settings()
# hands the file it read over through this slot.
_pending_file_data: ConfigFileData | None = None


class DualCargoSettings(BaseSettings):
    """Merged dualcargo settings.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (DUALCARGO_<section>__<field>)
    3. TOML config file
    4. Model defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="DUALCARGO_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    cargo: CargoConfig = Field(default_factory=CargoConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = TomlConfigSource(settings_cls, _pending_file_data or ConfigFileData())
        return init_settings, env_settings, toml_source

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dict; `_config_file`/`_config_error` only when set."""
        result = self.model_dump(include={"cargo", "output", "logging"})
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> DualCargoSettings:
    """Load dualcargo settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Raises:
        ConfigValidationError: If a configured value is invalid
    """
    global _pending_file_data

    file_data = ConfigFileData.load(config_path or find_config_file(start_dir))

    _pending_file_data = file_data
    try:
        settings = DualCargoSettings()
    except ValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigValidationError(
            f"Invalid configuration: {first.get('msg', e)}",
            key=key or None,
            cause=e,
        ) from e
    except SettingsError as e:
        # Raised by the env source when a structured value does not decode
        raise ConfigValidationError(f"Invalid configuration: {e}", cause=e) from e
    finally:
        _pending_file_data = None

    if file_data.path is not None and file_data.error is None:
        settings._config_file = str(file_data.path)
    settings._config_error = file_data.error
    return settings
