"""
cryptohash: hash or checksum an input with an algorithm chosen at runtime.

Example:
    >>> from cryptohash import perform_cryptohash
    >>> perform_cryptohash("abc", "md5")
    '900150983CD24FB0D6963F7D28E17F72'
    >>> perform_cryptohash(b"abc", " CRC32 ")
    891568578
"""

import logging

from .core.exceptions import CryptoHashException, UnknownAlgorithmError
from .core.interfaces.hasher import Hasher
from .hashing import ALGORITHMS, ALIASES, Algorithm, AlgorithmRegistry, perform_cryptohash

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALGORITHMS",
    "ALIASES",
    "Algorithm",
    "AlgorithmRegistry",
    "CryptoHashException",
    "Hasher",
    "UnknownAlgorithmError",
    "perform_cryptohash",
]
