"""
Click command implementations for cryptohash CLI.

Each module corresponds to a cryptohash command (e.g., digest.py implements
'cryptohash digest').
"""

from .algorithms import algorithms
from .config import config
from .digest import digest

COMMANDS = [
    algorithms,
    config,
    digest,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "config",
    "digest",
]
