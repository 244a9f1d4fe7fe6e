"""
Formatting utilities for cryptohash CLI output.

The library returns checksums as plain ints; turning them into text is a
presentation decision made here.
"""

from __future__ import annotations

from typing import Any


def format_checksum(value: int, checksum_format: str = "decimal") -> str:
    """Format a 32-bit checksum.

    Args:
        value: Unsigned checksum value
        checksum_format: 'decimal' or 'hex' (8 uppercase hex digits)

    Returns:
        Checksum as text

    Examples:
        >>> format_checksum(891568578)
        '891568578'
        >>> format_checksum(891568578, "hex")
        '352441C2'
        >>> format_checksum(1, "hex")
        '00000001'
    """
    if checksum_format == "hex":
        return f"{value:08X}"
    if checksum_format == "decimal":
        return str(value)
    raise ValueError(f"Unknown checksum format: {checksum_format}")


def format_digest(value: Any, checksum_format: str = "decimal") -> str | bytes:
    """Format any perform_cryptohash() result for printing.

    ints are treated as checksums; str and bytes (from 'none' or a custom
    hasher) are returned untouched; anything else goes through str().
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return format_checksum(value, checksum_format)
    if isinstance(value, (str, bytes)):
        return value
    return str(value)
