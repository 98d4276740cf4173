"""ABI selector tables"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Union

from loguru import logger
from pydantic import BaseModel, Field

from abisel.core.selector import derive_selector

SELECTOR_KINDS = ("error", "function")


class AbiSelector(BaseModel):
    """Selector of a single ABI error or function entry."""

    kind: str
    name: str
    signature: str
    selector: str
    types: List[str] = Field(default_factory=list)
    names: List[str] = Field(default_factory=list)


def load_abi(path: Union[str, Path]) -> List[dict]:
    """Load an ABI from a JSON file.

    Both bare ABI lists and compiler artifacts with an "abi" key are accepted.
    """
    with open(path, "r", encoding="utf-8") as abi_file:
        contract_abi = json.load(abi_file)

    if isinstance(contract_abi, dict) and "abi" in contract_abi:
        contract_abi = contract_abi["abi"]

    if not isinstance(contract_abi, list):
        raise ValueError(f"{path} does not contain an ABI list")
    if not all(isinstance(entry, dict) for entry in contract_abi):
        raise ValueError(f"{path} contains ABI entries that are not objects")

    return contract_abi


def canonical_type(param: dict) -> str:
    """Return the canonical type of an ABI parameter, expanding tuples."""
    if not isinstance(param, dict) or "type" not in param:
        raise ValueError(f"ABI parameter without a type: {param!r}")
    param_type = param["type"]
    if param_type.startswith("tuple"):
        inner = ",".join(canonical_type(c) for c in param.get("components", []))
        # Keep array suffixes like [] or [2]
        return f"({inner}){param_type[len('tuple'):]}"
    return param_type


def signature_for(entry: dict) -> str:
    """Build the canonical signature of an ABI entry."""
    types = [canonical_type(i) for i in entry.get("inputs", [])]
    return _join_signature(entry["name"], types)


def _join_signature(name: str, types: List[str]) -> str:
    return f"{name}({','.join(types)})"


def build_selectors(
    abi: List[dict], kinds: Iterable[str] = SELECTOR_KINDS
) -> Dict[str, AbiSelector]:
    """Map selector hex to the ABI entries of the requested kinds."""
    kinds = set(kinds)
    selectors: Dict[str, AbiSelector] = {}

    for entry in abi:
        if not isinstance(entry, dict):
            raise ValueError(f"ABI entry is not an object: {entry!r}")

        kind = entry.get("type")
        if kind not in kinds or not entry.get("name"):
            continue

        inputs = entry.get("inputs", [])
        types = [canonical_type(i) for i in inputs]
        signature = _join_signature(entry["name"], types)
        selector = derive_selector(signature)

        if selector in selectors:
            logger.warning(
                f"Selector collision on {selector}: keeping {selectors[selector].signature}, "
                f"ignoring {signature}"
            )
            continue

        selectors[selector] = AbiSelector(
            kind=kind,
            name=entry["name"],
            signature=signature,
            selector=selector,
            types=types,
            names=[i.get("name") or f"arg{n}" for n, i in enumerate(inputs)],
        )

    logger.debug(f"Built {len(selectors)} selectors for kinds {sorted(kinds)}")
    return selectors
