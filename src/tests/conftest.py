import json
import sys
from pathlib import Path

import pytest

# Ensure src is in path
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def mock_env_setup(monkeypatch):
    """Keep a local abisel.env or shell variables from leaking into tests."""
    monkeypatch.setattr("abisel.core.settings.load_dotenv", lambda *args, **kwargs: None)
    for name in ("ABISEL_SIGNATURE", "ABISEL_LOG_LEVEL", "ABISEL_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def token_abi():
    """A small ABI with errors, functions and an event."""
    return [
        {"type": "constructor", "inputs": [{"type": "string", "name": "name"}]},
        {"type": "error", "name": "Unauthorized", "inputs": []},
        {
            "type": "error",
            "name": "InsufficientBalance",
            "inputs": [
                {"type": "uint256", "name": "available"},
                {"type": "uint256", "name": "required"},
            ],
        },
        {
            "type": "function",
            "name": "transfer",
            "inputs": [
                {"type": "address", "name": "to"},
                {"type": "uint256", "name": "amount"},
            ],
            "outputs": [{"type": "bool", "name": ""}],
            "stateMutability": "nonpayable",
        },
        {
            "type": "event",
            "name": "Transfer",
            "inputs": [
                {"type": "address", "name": "from", "indexed": True},
                {"type": "address", "name": "to", "indexed": True},
                {"type": "uint256", "name": "value", "indexed": False},
            ],
        },
        {"type": "fallback", "stateMutability": "payable"},
    ]


@pytest.fixture
def token_abi_file(tmp_path, token_abi):
    """Write the token ABI as a compiler artifact."""
    path = tmp_path / "Token.json"
    path.write_text(json.dumps({"contractName": "Token", "abi": token_abi}))
    return path
