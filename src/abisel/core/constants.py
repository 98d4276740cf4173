"""Core constants"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

ENV_PATH = PROJECT_ROOT / "abisel.env"

SELECTOR_SIZE = 4

# Digests of the empty input, used to tell Keccak-256 apart from SHA3-256
KECCAK256_EMPTY = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
SHA3_256_EMPTY = "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"

ERROR_SELECTOR = "0x08c379a0"  # Error(string)
PANIC_SELECTOR = "0x4e487b71"  # Panic(uint256)

PANIC_CODES = {
    0x00: "Generic compiler inserted panic",
    0x01: "Assertion failed",
    0x11: "Arithmetic overflow or underflow",
    0x12: "Division or modulo by zero",
    0x21: "Invalid enum conversion",
    0x22: "Incorrectly encoded storage byte array",
    0x31: "Pop on empty array",
    0x32: "Array index out of bounds",
    0x41: "Too much memory allocated",
    0x51: "Called a zero-initialized internal function",
}
