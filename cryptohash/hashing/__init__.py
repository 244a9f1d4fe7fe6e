"""
Hash algorithm registry and dispatch.

Algorithms are selected at runtime by name (case- and whitespace-insensitive)
or by passing a custom Hasher. The digest primitives come from hashlib, zlib
and pycryptodome; this package only maps names to them and formats output.
"""

from .algorithms import ALIASES, Algorithm
from .dispatch import perform_cryptohash
from .registry import ALGORITHMS, AlgorithmRegistry
from .strategies import (
    DEFAULT_STRATEGIES,
    ChecksumStrategy,
    HashStrategy,
    HexDigestStrategy,
    IdentityStrategy,
)

__all__ = [
    "ALGORITHMS",
    "ALIASES",
    "DEFAULT_STRATEGIES",
    "Algorithm",
    "AlgorithmRegistry",
    "ChecksumStrategy",
    "HashStrategy",
    "HexDigestStrategy",
    "IdentityStrategy",
    "perform_cryptohash",
]
