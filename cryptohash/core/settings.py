"""
Settings loaded from TOML and CRYPTOHASH_* environment variables.

Priority, highest first:
1. Keyword arguments to CryptoHashSettings
2. CRYPTOHASH_<SECTION>__<FIELD> environment variables
3. ``.cryptohash/config.toml`` or a ``[tool.cryptohash]`` table in pyproject.toml
4. Model defaults
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import PrivateAttr, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    PyprojectTomlConfigSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .exceptions import ConfigValidationError
from .models.config import HashConfig, LoggingConfig

CONFIG_DIR_NAME = ".cryptohash"
CONFIG_FILE_NAME = "config.toml"

log = logging.getLogger(__name__)

_selected_file: ContextVar[Path | None] = ContextVar("cryptohash_config_file", default=None)


def _has_tool_table(pyproject: Path) -> bool:
    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        log.debug("Skipping %s: %s", pyproject, e)
        return False
    return "cryptohash" in data.get("tool", {})


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Walk up from start_dir (or cwd) to the first directory holding
    ``.cryptohash/config.toml`` or a pyproject.toml with ``[tool.cryptohash]``.
    """
    start = Path(start_dir) if start_dir else Path.cwd()
    for parent in [start, *start.parents]:
        candidate = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = parent / "pyproject.toml"
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


class CryptoHashSettings(BaseSettings):
    """All configuration sections, merged from every source."""

    model_config = SettingsConfigDict(
        env_prefix="CRYPTOHASH_",
        env_nested_delimiter="__",
        extra="ignore",
        pyproject_toml_table_header=("tool", "cryptohash"),
    )

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        path = _selected_file.get()
        if path is None:
            return (init_settings, env_settings)
        if path.name == "pyproject.toml":
            file_source: PydanticBaseSettingsSource = PyprojectTomlConfigSettingsSource(
                settings_cls, toml_file=path
            )
        else:
            file_source = TomlConfigSettingsSource(settings_cls, toml_file=path)
        return (init_settings, env_settings, file_source)

    @property
    def config_file(self) -> str | None:
        """Path of the config file that was read, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the config file was ignored, if it could not be read or parsed."""
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        result = self.model_dump(mode="json")
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


def _build(path: Path | None) -> CryptoHashSettings:
    token = _selected_file.set(path)
    try:
        return CryptoHashSettings()
    finally:
        _selected_file.reset(token)


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> CryptoHashSettings:
    """
    Load settings from the config file and environment.

    An unreadable or malformed file is logged and skipped; the reason is kept
    on ``config_error``. A value that fails validation is not skipped.

    Raises:
        ConfigValidationError: A file or environment value is invalid
    """
    path = config_path or find_config_file(start_dir)
    error: str | None = None
    try:
        try:
            settings = _build(path)
        except (tomllib.TOMLDecodeError, OSError) as e:
            log.warning("Ignoring config file %s: %s", path, e)
            error = f"Failed to load config file: {e}"
            path = None
            settings = _build(None)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigValidationError(
            f"Invalid value for {key}: {first['msg']}",
            key=key,
            file_path=str(path) if path else None,
        ) from e

    settings._config_file = str(path) if path else None
    settings._config_error = error
    return settings
