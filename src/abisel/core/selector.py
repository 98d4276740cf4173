"""Signature to selector derivation"""

from abisel.core.constants import SELECTOR_SIZE
from abisel.core.hashing import keccak256


class InvalidInputError(ValueError):
    """Raised when a signature or revert payload cannot be used."""


def selector_bytes(signature: str) -> bytes:
    """Return the raw 4 byte selector of a signature.

    The signature is hashed byte for byte: spacing, casing and type names
    are not normalized.
    """
    if not isinstance(signature, str):
        raise InvalidInputError(f"Signature must be a string, got {type(signature).__name__}")
    if not signature:
        raise InvalidInputError("Signature must not be empty")

    try:
        encoded = signature.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInputError(f"Signature is not valid UTF-8 text: {e}") from e

    return keccak256(encoded)[:SELECTOR_SIZE]


def derive_selector(signature: str) -> str:
    """Return the 0x-prefixed lowercase hex selector of a signature.

    >>> derive_selector("transfer(address,uint256)")
    '0xa9059cbb'
    """
    return f"0x{selector_bytes(signature).hex()}"
