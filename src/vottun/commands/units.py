"""
Units - Convert amounts between ether units.

All conversions are exact; fractional wei is reported, never rounded.
"""

from __future__ import annotations

import sys

import click

from ..web3 import UNITS, Web3UtilsError, format_units, to_ether, to_wei


_UNIT_CHOICE = click.Choice(sorted(UNITS), case_sensitive=True)


@click.group()
def units() -> None:
    """Convert amounts between wei, gwei, ether, ..."""
    pass


@units.command("to-wei")
@click.argument("amount")
@click.option("--unit", default="ether", type=_UNIT_CHOICE, show_default=True,
              help="Unit AMOUNT is expressed in")
def to_wei_cmd(amount: str, unit: str) -> None:
    """Convert AMOUNT (e.g. 100.001) to wei."""
    try:
        click.echo(to_wei(amount, unit))
    except Web3UtilsError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


@units.command("from-wei")
@click.argument("amount")
@click.option("--unit", default="ether", type=_UNIT_CHOICE, show_default=True,
              help="Target unit")
def from_wei_cmd(amount: str, unit: str) -> None:
    """Convert AMOUNT wei to UNIT as an exact decimal."""
    try:
        click.echo(format_units(amount, unit))
    except Web3UtilsError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


@units.command("to-ether")
@click.argument("amount")
@click.option("--unit", default="wei", type=_UNIT_CHOICE, show_default=True,
              help="Unit AMOUNT is expressed in")
def to_ether_cmd(amount: str, unit: str) -> None:
    """Convert AMOUNT in UNIT to whole ether plus remaining wei."""
    try:
        ether, wei = to_ether(amount, unit)
    except Web3UtilsError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    click.echo(f"{ether} ether")
    if wei:
        click.echo(click.style(f"  + {wei} wei", dim=True))
