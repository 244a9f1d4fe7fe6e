"""Configuration lookup for `cryptohash config`."""

from pathlib import Path
from typing import Any

from .core.exceptions import ConfigValidationError
from .core.models.config import HashConfig, LoggingConfig
from .core.settings import load_settings

CONFIG_KEYS = {
    "hash.default": "Algorithm used by `cryptohash digest` when -a is not given",
    "hash.checksum_format": "How the CLI prints adler32/crc32 values (decimal, hex)",
    "logging.level": "Log level (debug, info, warning, error)",
    "logging.console": "Write diagnostics to stderr",
    "logging.file": "Write diagnostics to ~/.cryptohash/cryptohash.log",
}


def _defaults() -> dict[str, Any]:
    return {
        "hash": HashConfig().model_dump(mode="json"),
        "logging": LoggingConfig().model_dump(mode="json"),
    }


def _lookup(config: dict, key: str) -> Any:
    section, name = key.split(".", 1)
    return config[section][name]


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """Merged configuration as a plain nested dict."""
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()


def config_get(key: str, start_dir: str | None = None) -> Any:
    """
    Current value of one config key.

    Raises:
        ConfigValidationError: Unknown key, or the configuration is invalid
    """
    if key not in CONFIG_KEYS:
        raise ConfigValidationError(f"Unknown config key: {key}", key=key)
    return _lookup(load_config(start_dir=start_dir), key)


def config_list(start_dir: str | None = None) -> dict[str, dict[str, Any]]:
    """Every config key with its description, default and current value."""
    config = load_config(start_dir=start_dir)
    defaults = _defaults()
    return {
        key: {
            "description": description,
            "default": _lookup(defaults, key),
            "value": _lookup(config, key),
        }
        for key, description in CONFIG_KEYS.items()
    }
