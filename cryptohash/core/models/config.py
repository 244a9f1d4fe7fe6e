"""
Configuration sections.

Each model is one TOML table (``[hash]``, ``[logging]``). Values coming from
TOML or CRYPTOHASH_* variables are coerced and validated on load.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from ...hashing.algorithms import Algorithm

ChecksumFormat = Literal["decimal", "hex"]
LogLevel = Literal["debug", "info", "warning", "error"]

_SECTION_CONFIG = ConfigDict(validate_assignment=True, extra="ignore")


def _fold(v: Any) -> Any:
    return v.strip().lower() if isinstance(v, str) else v


class HashConfig(BaseModel):
    """``[hash]``: algorithm and checksum rendering used by ``cryptohash digest``."""

    model_config = _SECTION_CONFIG

    default: Algorithm = Algorithm.SHA256
    checksum_format: ChecksumFormat = "decimal"

    @field_validator("default", "checksum_format", mode="before")
    @classmethod
    def normalize_name(cls, v: Any) -> Any:
        return _fold(v)


class LoggingConfig(BaseModel):
    """``[logging]``: where diagnostics go."""

    model_config = _SECTION_CONFIG

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        return _fold(v)
