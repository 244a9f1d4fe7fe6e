"""
Service implementations for cryptohash.
"""

from .logging import LOGGER_NAME, configure_logging, reset_logging

__all__ = [
    "LOGGER_NAME",
    "configure_logging",
    "reset_logging",
]
