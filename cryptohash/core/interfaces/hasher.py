"""
Custom hasher interface.

Callers that need an algorithm outside the built-in set implement Hasher
and pass the instance to perform_cryptohash() in place of an algorithm name.
"""

from abc import ABC, abstractmethod
from typing import Any


class Hasher(ABC):
    """
    Interface for objects that compute a digest from an input.

    Subclassing is the explicit way in. Any class with a callable
    ``hexdigest`` attribute (plain method, classmethod or staticmethod) is
    also treated as a Hasher, so duck-typed wrappers need not inherit.

    The check is structural only: hashlib objects have a zero-argument
    ``hexdigest()`` and therefore count as Hashers, but calling them with the
    input raises TypeError. Wrap them instead:

        class Blake2s(Hasher):
            def hexdigest(self, data):
                return hashlib.blake2s(data).hexdigest()

        perform_cryptohash(b"abc", Blake2s())
    """

    @abstractmethod
    def hexdigest(self, data: Any) -> Any:
        """
        Compute the digest of ``data``.

        Args:
            data: Input passed to perform_cryptohash(), untouched

        Returns:
            Digest in whatever form the implementation chooses
        """

    @classmethod
    def __subclasshook__(cls, subclass: type) -> bool:
        if cls is Hasher and callable(getattr(subclass, "hexdigest", None)):
            return True
        return NotImplemented
