"""
Algorithm identifiers.

Parsing a caller-supplied name into an Algorithm is a separate, explicit step
from looking the algorithm up in the registry.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..core.exceptions import UnknownAlgorithmError


class Algorithm(str, Enum):
    """Canonical identifiers of the built-in algorithms, in registry order."""

    NONE = "none"
    MD5 = "md5"
    SHA1 = "sha1"
    SHA2 = "sha2"  # alias of SHA256, see ALIASES
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    RMD160 = "rmd160"
    ADLER32 = "adler32"
    CRC32 = "crc32"

    def __str__(self) -> str:
        return self.value

    @property
    def is_checksum(self) -> bool:
        """True for the non-cryptographic checksums, whose digest is an int."""
        return self in (Algorithm.ADLER32, Algorithm.CRC32)

    @classmethod
    def parse(cls, name: Any) -> Algorithm:
        """
        Parse a user-supplied algorithm name.

        Surrounding whitespace is stripped and case is ignored.

        Args:
            name: Algorithm name such as 'SHA256' or ' md5 '

        Returns:
            Matching Algorithm member

        Raises:
            UnknownAlgorithmError: If name is not a string or names no algorithm.
                The error carries ``name`` exactly as given.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            try:
                return cls(name.strip().lower())
            except ValueError:
                pass
        raise UnknownAlgorithmError(name, available=[a.value for a in cls])


# Names that stay permanently synonymous with another algorithm.
ALIASES: dict[Algorithm, Algorithm] = {
    Algorithm.SHA2: Algorithm.SHA256,
}
