"""
Pydantic models for cryptohash configuration.
"""

from .config import ChecksumFormat, HashConfig, LoggingConfig, LogLevel

__all__ = [
    "ChecksumFormat",
    "HashConfig",
    "LogLevel",
    "LoggingConfig",
]
