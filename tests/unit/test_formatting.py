"""
Unit tests for CLI output formatting.
"""

import pytest

from cryptohash.presenters.formatting import format_checksum, format_digest


class TestFormatChecksum:
    """Tests for format_checksum."""

    def test_decimal(self):
        assert format_checksum(891568578) == "891568578"

    def test_hex_is_fixed_width_uppercase(self):
        assert format_checksum(0x352441C2, "hex") == "352441C2"
        assert format_checksum(1, "hex") == "00000001"

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            format_checksum(1, "octal")


class TestFormatDigest:
    """Tests for format_digest."""

    def test_hex_string_untouched(self):
        assert format_digest("ABCDEF") == "ABCDEF"

    def test_bytes_untouched(self):
        assert format_digest(b"raw") == b"raw"

    def test_int_uses_checksum_format(self):
        assert format_digest(38600999, "hex") == "024D0127"
        assert format_digest(38600999) == "38600999"

    def test_other_values_stringified(self):
        assert format_digest(True) == "True"
        assert format_digest(["a"]) == "['a']"
