"""
Pydantic Settings for digestkit configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsError

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import HashConfig, LoggingConfig

CONFIG_DIR_NAME = ".digestkit"
CONFIG_FILE_NAME = "config.toml"


def _get_logger():
    from ..services.logging import get_logger

    return get_logger()


def find_config_file(start_dir: str | Path | None = None) -> Path | None:
    """
    Find .digestkit/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.digestkit] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "digestkit" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Read a config file and return its digestkit table.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Failed to parse config file: {e}", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Failed to read config file: {e}", file_path=str(path), cause=e
        ) from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("digestkit", {})
    return data


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from a discovered TOML config file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | Path | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: Path | None = None
        self.config_error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)
        if path is None:
            return self._data

        try:
            self._data = read_config_file(path)
            self.config_file = path
        except ConfigFileError as e:
            # An explicitly requested file must be usable
            if self._config_path is not None:
                raise
            _get_logger().warning("Ignoring config file %s: %s", path, e.message)
            self.config_error = e.message

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        return self._load_toml().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return {k: v for k, v in self._load_toml().items() if k in self.settings_cls.model_fields}


class DigestKitSettings(BaseSettings):
    """digestkit configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (DIGESTKIT_<section>__<field>)
    3. TOML config file (.digestkit/config.toml or pyproject.toml [tool.digestkit])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "DIGESTKIT_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()

    # Set by load_settings, not read from config
    config_file: Path | None = None
    config_error: str | None = None

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key (e.g., 'hash.algorithm')."""
        obj: Any = self
        for part in key.split("."):
            if not hasattr(obj, part):
                return default
            obj = getattr(obj, part)
        return obj


def load_settings(
    config_path: Path | None = None,
    start_dir: str | Path | None = None,
    **overrides: Any,
) -> DigestKitSettings:
    """Load digestkit settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit section values, highest priority

    Returns:
        DigestKitSettings instance with all sources merged

    Raises:
        ConfigFileError: If config_path is given and cannot be loaded
        ConfigValidationError: If a configured value is invalid
    """
    toml_source = TomlConfigSource(DigestKitSettings, config_path, start_dir)

    class _Settings(DigestKitSettings):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource,
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, toml_source)

    try:
        settings = _Settings(**overrides)
    except ValidationError as e:
        raise _invalid_config(e, toml_source.config_file) from e
    except SettingsError as e:
        # Raised for environment values that are not valid JSON objects
        raise ConfigValidationError(str(e), cause=e) from e
    return DigestKitSettings.model_construct(
        hash=settings.hash,
        logging=settings.logging,
        config_file=toml_source.config_file,
        config_error=toml_source.config_error,
    )


def _invalid_config(error: ValidationError, config_file: Path | None) -> ConfigValidationError:
    """Describe the first failing field as 'Invalid config value for <key>: <reason>'."""
    first = error.errors()[0]
    key = ".".join(str(part) for part in first["loc"])
    return ConfigValidationError(
        f"Invalid config value for {key}: {first['msg']}",
        key=key,
        config_file=str(config_file) if config_file else None,
        cause=error,
    )
