"""Keccak-256 hashing"""

from web3 import Web3

from abisel.core.constants import KECCAK256_EMPTY, SHA3_256_EMPTY


class HasherUnavailableError(RuntimeError):
    """Raised when no usable Keccak-256 backend is available."""


def keccak256(data: bytes) -> bytes:
    """Return the 32 byte Keccak-256 digest of data."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"keccak256 expects bytes, got {type(data).__name__}")
    return bytes(Web3.keccak(primitive=bytes(data)))


def verify_keccak_backend() -> None:
    """Check the hash backend against the known Keccak-256 empty digest.

    NIST SHA3-256 pads differently from the Keccak variant used by Ethereum,
    so a backend that silently swaps one for the other produces wrong
    selectors. Run this once at startup.
    """
    try:
        digest = keccak256(b"").hex()
    except Exception as e:
        raise HasherUnavailableError(f"Keccak-256 backend could not be loaded: {e}") from e

    if digest == SHA3_256_EMPTY:
        raise HasherUnavailableError("Hash backend returned SHA3-256 instead of Keccak-256")
    if digest != KECCAK256_EMPTY:
        raise HasherUnavailableError(f"Hash backend returned an unexpected digest: {digest}")
