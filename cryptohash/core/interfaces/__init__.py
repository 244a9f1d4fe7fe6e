"""
Abstract interfaces for cryptohash.
"""

from .hasher import Hasher

__all__ = [
    "Hasher",
]
