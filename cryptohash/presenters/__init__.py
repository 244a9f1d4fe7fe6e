"""
Output formatting for the cryptohash CLI.
"""

from .formatting import format_checksum, format_digest

__all__ = [
    "format_checksum",
    "format_digest",
]
