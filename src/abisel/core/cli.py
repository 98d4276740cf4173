"""CLI"""

from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger

from abisel.core.abi import SELECTOR_KINDS, build_selectors, load_abi
from abisel.core.decoder import ErrorDecoder, selector_of
from abisel.core.hashing import HasherUnavailableError, verify_keccak_backend
from abisel.core.selector import InvalidInputError, derive_selector
from abisel.core.settings import settings
from abisel.core.utils import configure_logger

abisel_cli = typer.Typer(help="Ethereum ABI selector tools")


@abisel_cli.callback()
def main():
    """Configure logging and check the hash backend"""
    configure_logger(settings.log_level, settings.log_file)
    try:
        verify_keccak_backend()
    except HasherUnavailableError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=2)


@abisel_cli.command("selector")
def selector(
    signature: Optional[str] = typer.Argument(
        None,
        help="Signature such as 'Transfer(address,uint256)'. Defaults to ABISEL_SIGNATURE.",
    ),
    raw: bool = typer.Option(False, "--raw", "-r", help="Print only the selector"),
):
    """Compute the 4 byte selector of a signature"""
    if signature is None:
        signature = settings.signature
    if signature is None:
        typer.echo("Error: no signature given and ABISEL_SIGNATURE is not set")
        raise typer.Exit(code=1)

    try:
        result = derive_selector(signature)
    except InvalidInputError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    logger.debug(f"{signature} -> {result}")
    typer.echo(result if raw else f"Error Selector: {result}")


@abisel_cli.command("abi")
def abi_selectors(
    path: Path = typer.Argument(..., help="ABI JSON file or compiler artifact"),
    kind: str = typer.Option(
        "all",
        "--kind",
        "-k",
        help="Entries to list: error, function or all",
    ),
):
    """List the selectors of an ABI"""
    if kind == "all":
        kinds = SELECTOR_KINDS
    elif kind in SELECTOR_KINDS:
        kinds = (kind,)
    else:
        typer.echo(f"Error: unknown kind '{kind}'")
        raise typer.Exit(code=1)

    try:
        selectors = build_selectors(load_abi(path), kinds=kinds)
    except (OSError, ValueError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    for entry in sorted(selectors.values(), key=lambda s: s.signature):
        typer.echo(f"{entry.selector}  {entry.signature}")


@abisel_cli.command("decode")
def decode_error(
    data: str = typer.Argument(..., help="Revert data as hex"),
    abi_paths: Optional[List[Path]] = typer.Option(
        None,
        "--abi",
        "-a",
        help="ABI file to take custom errors from. Can be repeated.",
    ),
):
    """Decode revert data"""
    decoder = ErrorDecoder()
    try:
        for path in abi_paths or []:
            decoder.load_abi_file(path)
        decoded = decoder.decode(data)
    except (OSError, ValueError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    if decoded is None:
        typer.echo(f"Unknown custom error (selector={selector_of(data)})")
        raise typer.Exit(code=1)

    typer.echo(decoded.describe())


if __name__ == "__main__":
    abisel_cli()
