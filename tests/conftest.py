"""
Shared pytest fixtures for cryptohash tests.

- Every test starts with no container overrides or log handlers (nothing bootstrapped)
- CRYPTOHASH_* environment variables are cleared so local settings
  don't leak into config tests
- known_digests: reference digests of b"abc" for every algorithm
"""

import os

import pytest

from cryptohash.core.container import reset

ABC_DIGESTS = {
    "md5": "900150983CD24FB0D6963F7D28E17F72",
    "sha1": "A9993E364706816ABA3E25717850C26C9CD0D89D",
    "sha2": "BA7816BF8F01CFEA414140DE5DAE2223B00361A396177A9CB410FF61F20015AD",
    "sha256": "BA7816BF8F01CFEA414140DE5DAE2223B00361A396177A9CB410FF61F20015AD",
    "sha384": (
        "CB00753F45A35E8BB5A03D699AC65007272C32AB0EDED163"
        "1A8B605A43FF5BED8086072BA1E7CC2358BAECA134C825A7"
    ),
    "sha512": (
        "DDAF35A193617ABACC417349AE20413112E6FA4E89A97EA20A9EEEE64B55D39A"
        "2192992A274FC1A836BA3C23A3FEEBBD454D4423643CE80E2A9AC94FA54CA49F"
    ),
    "rmd160": "8EB208F7E05D987A9B044A8E98C6B087F15A0BFC",
    "adler32": 0x024D0127,
    "crc32": 0x352441C2,
}


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Reset the service container and scrub CRYPTOHASH_* env vars around each test."""
    for key in list(os.environ):
        if key.upper().startswith("CRYPTOHASH_"):
            monkeypatch.delenv(key)
    reset()
    yield
    reset()


@pytest.fixture
def known_digests() -> dict:
    """Digests of b"abc" keyed by algorithm name."""
    return dict(ABC_DIGESTS)
