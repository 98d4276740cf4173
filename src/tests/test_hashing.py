"""Tests for Keccak-256 hashing."""

from unittest.mock import patch

import pytest

from abisel.core.constants import KECCAK256_EMPTY, SHA3_256_EMPTY
from abisel.core.hashing import HasherUnavailableError, keccak256, verify_keccak_backend


def test_empty_input_is_keccak_not_sha3():
    digest = keccak256(b"")
    assert digest.hex() == KECCAK256_EMPTY
    assert digest.hex() != SHA3_256_EMPTY


def test_digest_is_32_bytes():
    assert len(keccak256(b"transfer(address,uint256)")) == 32
    assert len(keccak256(b"x" * 10_000)) == 32


def test_known_digest():
    assert (
        keccak256(b"transfer(address,uint256)").hex()
        == "a9059cbb2ab09eb219583f4a59a5d0623ade346d962bcd4e46b11da047c9049b"
    )


def test_accepts_bytearray_and_memoryview():
    expected = keccak256(b"abc")
    assert keccak256(bytearray(b"abc")) == expected
    assert keccak256(memoryview(b"abc")) == expected


def test_rejects_text():
    with pytest.raises(TypeError):
        keccak256("abc")


class TestVerifyKeccakBackend:
    """Tests for the startup backend check."""

    def test_real_backend_passes(self):
        verify_keccak_backend()

    def test_sha3_substitution_is_fatal(self):
        with patch(
            "abisel.core.hashing.keccak256", return_value=bytes.fromhex(SHA3_256_EMPTY)
        ):
            with pytest.raises(HasherUnavailableError, match="SHA3-256"):
                verify_keccak_backend()

    def test_unexpected_digest_is_fatal(self):
        with patch("abisel.core.hashing.keccak256", return_value=b"\x00" * 32):
            with pytest.raises(HasherUnavailableError, match="unexpected digest"):
                verify_keccak_backend()

    def test_missing_backend_is_fatal(self):
        with patch(
            "abisel.core.hashing.Web3.keccak",
            side_effect=ImportError("No module named 'Crypto'"),
        ):
            with pytest.raises(HasherUnavailableError, match="could not be loaded"):
                verify_keccak_backend()
