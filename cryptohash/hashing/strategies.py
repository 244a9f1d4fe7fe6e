"""
Hash algorithm strategy implementations.

Each strategy wraps one external digest primitive and turns its output into
the cryptohash digest format. None of them keep state between calls, and
none of them write to the input.
"""

import hashlib
import zlib
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from Crypto.Hash import RIPEMD160

from .algorithms import Algorithm


def as_bytes(data: Any) -> Any:
    """Encode text as UTF-8; pass every other value through for the library to judge."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm: the Algorithm this strategy computes
    - compute(): pure function from input to digest

    Strategies are callable, so a registry entry can be used directly
    as ``registry[alg](data)``.
    """

    algorithm: Algorithm

    @abstractmethod
    def compute(self, data: Any) -> Any:
        """Compute the digest of data."""
        pass

    def __call__(self, data: Any) -> Any:
        return self.compute(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.algorithm.value!r})"


class IdentityStrategy(HashStrategy):
    """Returns the input unchanged. Useful for debugging and testing pipelines."""

    algorithm = Algorithm.NONE

    def compute(self, data: Any) -> Any:
        return data


class HexDigestStrategy(HashStrategy):
    """Cryptographic hash rendered as an uppercase hex string."""

    def __init__(self, algorithm: Algorithm, factory: Callable[[Any], Any]):
        """
        Args:
            algorithm: Algorithm identifier
            factory: Constructor taking the input and returning an object
                with hexdigest(), e.g. hashlib.sha256
        """
        self.algorithm = algorithm
        self._factory = factory

    def compute(self, data: Any) -> str:
        return self._factory(as_bytes(data)).hexdigest().upper()


class ChecksumStrategy(HashStrategy):
    """Non-cryptographic 32-bit checksum, returned as an unsigned int."""

    def __init__(self, algorithm: Algorithm, func: Callable[[Any], int]):
        self.algorithm = algorithm
        self._func = func

    def compute(self, data: Any) -> int:
        return self._func(as_bytes(data)) & 0xFFFFFFFF


def _ripemd160(data: Any) -> Any:
    # hashlib only offers ripemd160 when OpenSSL ships the legacy provider
    return RIPEMD160.new(data)


DEFAULT_STRATEGIES: tuple[HashStrategy, ...] = (
    IdentityStrategy(),
    HexDigestStrategy(Algorithm.MD5, hashlib.md5),
    HexDigestStrategy(Algorithm.SHA1, hashlib.sha1),
    HexDigestStrategy(Algorithm.SHA256, hashlib.sha256),
    HexDigestStrategy(Algorithm.SHA384, hashlib.sha384),
    HexDigestStrategy(Algorithm.SHA512, hashlib.sha512),
    HexDigestStrategy(Algorithm.RMD160, _ripemd160),
    ChecksumStrategy(Algorithm.ADLER32, zlib.adler32),
    ChecksumStrategy(Algorithm.CRC32, zlib.crc32),
)
