"""
Unit tests for algorithm name parsing.
"""

import pytest

from cryptohash.core.exceptions import UnknownAlgorithmError
from cryptohash.hashing.algorithms import ALIASES, Algorithm


class TestAlgorithmParse:
    """Tests for Algorithm.parse."""

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_canonical_names(self, algorithm):
        """Every canonical lowercase name parses to its member."""
        assert Algorithm.parse(algorithm.value) is algorithm

    @pytest.mark.parametrize("name", ["SHA256", "Sha256", "  sha256", "sha256\n", "\tSHA256 "])
    def test_case_and_whitespace_ignored(self, name):
        """Case and surrounding whitespace do not matter."""
        assert Algorithm.parse(name) is Algorithm.SHA256

    def test_member_passes_through(self):
        """An Algorithm member is returned as-is."""
        assert Algorithm.parse(Algorithm.CRC32) is Algorithm.CRC32

    def test_unknown_name_keeps_original_selector(self):
        """The error carries the selector before stripping and lowercasing."""
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            Algorithm.parse("  Not-A-Real-Algorithm ")
        assert exc_info.value.algorithm == "  Not-A-Real-Algorithm "

    def test_inner_whitespace_not_ignored(self):
        """Only surrounding whitespace is stripped."""
        with pytest.raises(UnknownAlgorithmError):
            Algorithm.parse("sha 256")

    def test_empty_string_is_unknown(self):
        """An empty name is rejected."""
        with pytest.raises(UnknownAlgorithmError):
            Algorithm.parse("")

    @pytest.mark.parametrize("selector", [None, 256, b"md5"])
    def test_non_string_is_unknown(self, selector):
        """Values that are neither str nor Algorithm are rejected."""
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            Algorithm.parse(selector)
        assert exc_info.value.algorithm == selector


class TestAlgorithmProperties:
    """Tests for Algorithm helpers and the alias table."""

    def test_checksums(self):
        """Only adler32 and crc32 are checksums."""
        assert {a for a in Algorithm if a.is_checksum} == {Algorithm.ADLER32, Algorithm.CRC32}

    def test_str_is_value(self):
        """str() gives the identifier."""
        assert str(Algorithm.RMD160) == "rmd160"

    def test_sha2_aliases_sha256(self):
        """sha2 is an explicit alias of sha256."""
        assert ALIASES == {Algorithm.SHA2: Algorithm.SHA256}
