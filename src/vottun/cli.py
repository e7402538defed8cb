"""
Vottun CLI

Command-line interface for the Vottun blockchain API and the bundled
web3 utilities.

Commands:
  units    - Convert amounts between ether units
  address  - Checksum and validate addresses
  sha3     - Keccak-256 hash
  erc20    - Deploy and operate ERC-20 tokens
  erc721   - Deploy and operate ERC-721 collections
  whoami   - Show the configured API credentials
"""

from __future__ import annotations

import logging
import sys

import click

from .config import VOTTUN_ENV, load_settings


# ============ Constants ============

VERSION = "1.0.0"


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="vottun")
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP requests")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Vottun blockchain API client and web3 utilities."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .commands.address import address, sha3_cmd
from .commands.erc20 import erc20
from .commands.erc721 import erc721
from .commands.units import units

cli.add_command(units)
cli.add_command(address)
cli.add_command(sha3_cmd)
cli.add_command(erc20)
cli.add_command(erc721)


# ============ Identity ============


@cli.command()
def whoami() -> None:
    """Show the configured application and network."""
    try:
        settings = load_settings()
    except ValueError as exc:
        click.echo(f"No credentials found: {exc}")
        click.echo(f"Set VOTTUN_API_KEY and VOTTUN_APPLICATION_VKN in {VOTTUN_ENV}.")
        sys.exit(1)

    click.echo(f"Application: {settings.application_vkn}")
    click.echo(f"Network:     {settings.network}")
    click.echo(f"API:         {settings.base_url}")
