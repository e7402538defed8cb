from __future__ import annotations

import sys

import click

from ..web3 import (
    Web3UtilsError,
    is_address,
    is_address_checksum,
    sha3,
    to_checksum_address,
)


@click.group()
def address() -> None:
    """Checksum and validate Ethereum addresses."""
    pass


@address.command()
@click.argument("value")
def checksum(value: str) -> None:
    """Print VALUE in EIP-55 checksum form."""
    try:
        click.echo(to_checksum_address(value))
    except Web3UtilsError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


@address.command()
@click.argument("value")
def validate(value: str) -> None:
    """Check that VALUE is a valid address (exit 1 if not)."""
    if not is_address(value):
        click.secho(f"Invalid address: {value}", fg="red")
        sys.exit(1)

    if is_address_checksum(value):
        click.secho("Valid address (checksummed)", fg="green")
    else:
        click.secho("Valid address (no checksum)", fg="green")
        click.echo(click.style("  Checksum: ", dim=True) + to_checksum_address(value))


@click.command("sha3")
@click.argument("value")
def sha3_cmd(value: str) -> None:
    """Keccak-256 of VALUE (0x-prefixed values are hashed as bytes)."""
    try:
        digest = sha3(value)
    except Web3UtilsError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    click.echo(digest if digest is not None else "null")
