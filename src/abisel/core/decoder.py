"""Revert data decoding"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from eth_abi import decode
from eth_abi.exceptions import DecodingError, ParseError
from hexbytes import HexBytes
from loguru import logger
from pydantic import BaseModel, Field

from abisel.core.abi import AbiSelector, build_selectors, load_abi
from abisel.core.constants import ERROR_SELECTOR, PANIC_CODES, PANIC_SELECTOR, SELECTOR_SIZE
from abisel.core.selector import InvalidInputError


class ErrorDataError(ValueError):
    """Raised when a revert payload does not match its selector's arguments."""


class DecodedError(BaseModel):
    """A revert payload resolved to its error and arguments."""

    selector: str
    name: str
    signature: str
    args: Dict[str, Any] = Field(default_factory=dict)

    def describe(self) -> str:
        """Render as Name(key=value, ...)"""
        args = ", ".join(f"{key}={value}" for key, value in self.args.items())
        return f"{self.name}({args})"


def _to_bytes(data: Union[str, bytes]) -> bytes:
    # HexBytes left-pads odd-length hex, which would shift the selector
    if isinstance(data, str) and len(data.removeprefix("0x")) % 2:
        raise InvalidInputError(f"Revert data has an odd number of hex digits: {data!r}")

    try:
        raw = bytes(HexBytes(data))
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"Revert data is not valid hex: {data!r}") from e

    if len(raw) < SELECTOR_SIZE:
        raise InvalidInputError("Revert data is shorter than a selector")
    return raw


def selector_of(data: Union[str, bytes]) -> str:
    """Return the leading selector of revert data."""
    return f"0x{_to_bytes(data)[:SELECTOR_SIZE].hex()}"


class ErrorDecoder:
    """Resolve revert data to Error(string), Panic(uint256) or ABI custom errors."""

    def __init__(self, abis: Optional[List[List[dict]]] = None):
        """Initialize with an optional list of ABIs to take custom errors from."""
        self._selectors: Dict[str, AbiSelector] = {}
        for abi in abis or []:
            self.register_abi(abi)

    def register_abi(self, abi: List[dict]) -> int:
        """Add the error entries of an ABI. Returns how many were new."""
        added = 0
        for selector, entry in build_selectors(abi, kinds=("error",)).items():
            if selector in self._selectors:
                continue
            self._selectors[selector] = entry
            added += 1
        return added

    def load_abi_file(self, path: Union[str, Path]) -> int:
        """Load an ABI file and register its errors."""
        added = self.register_abi(load_abi(path))
        logger.debug(f"Loaded {added} error selectors from {path}")
        return added

    def known_selectors(self) -> Dict[str, AbiSelector]:
        """Return a copy of the custom error table."""
        return dict(self._selectors)

    def decode(self, data: Union[str, bytes]) -> Optional[DecodedError]:
        """Decode revert data. Returns None for unknown selectors."""
        raw = _to_bytes(data)
        selector = f"0x{raw[:SELECTOR_SIZE].hex()}"
        payload = raw[SELECTOR_SIZE:]

        if selector == ERROR_SELECTOR:
            (message,) = self._decode_args(selector, ["string"], payload)
            return DecodedError(
                selector=selector,
                name="Error",
                signature="Error(string)",
                args={"message": message},
            )

        if selector == PANIC_SELECTOR:
            (code,) = self._decode_args(selector, ["uint256"], payload)
            return DecodedError(
                selector=selector,
                name="Panic",
                signature="Panic(uint256)",
                args={"code": hex(code), "reason": PANIC_CODES.get(code, "Unknown panic code")},
            )

        entry = self._selectors.get(selector)
        if entry is None:
            logger.debug(f"Unknown custom error (selector={selector})")
            return None

        values = self._decode_args(selector, entry.types, payload)
        return DecodedError(
            selector=selector,
            name=entry.name,
            signature=entry.signature,
            args=dict(zip(entry.names, values)),
        )

    @staticmethod
    def _decode_args(selector: str, types: List[str], payload: bytes) -> tuple:
        try:
            return decode(types, payload)
        except (DecodingError, ParseError, OverflowError, ValueError) as e:
            # ValueError covers bad UTF-8 in strings and invalid ABI types
            raise ErrorDataError(f"Could not decode arguments for {selector}: {e}") from e
