"""
Digest dispatch.

Resolves an algorithm selector and computes the digest of an input.
"""

from __future__ import annotations

from typing import Any

from ..core.interfaces.hasher import Hasher
from .algorithms import Algorithm
from .registry import ALGORITHMS


def _get_logger():
    from ..core.container import services

    return services.logger()


def perform_cryptohash(data: Any, algorithm: Any) -> Any:
    """
    Hash data with the given algorithm.

    Args:
        data: Input to hash. ``str`` is encoded as UTF-8; bytes-like values
            are passed to the digest library as-is.
        algorithm: One of
            - a Hasher (any object with ``hexdigest(data)``), called directly
              and its result returned verbatim
            - an Algorithm member
            - an algorithm name, matched ignoring case and surrounding whitespace

    Returns:
        Uppercase hex string for cryptographic hashes, int for adler32/crc32,
        ``data`` itself for 'none', or whatever a custom Hasher returns.

    Raises:
        UnknownAlgorithmError: If algorithm is neither a Hasher nor a known
            name. The error carries the selector exactly as given.

    Errors from the digest libraries themselves (e.g. TypeError for an
    unhashable input) propagate unchanged.
    """
    if isinstance(algorithm, Hasher):
        _get_logger().debug("Hashing with custom hasher %s", type(algorithm).__name__)
        return algorithm.hexdigest(data)

    resolved = Algorithm.parse(algorithm)
    _get_logger().debug("Hashing with %s", resolved.value)
    return ALGORITHMS[resolved](data)
