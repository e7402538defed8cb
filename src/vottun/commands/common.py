from __future__ import annotations

import sys
from typing import NoReturn, Optional

import click

from ..client import VottunClient
from ..config import VOTTUN_ENV, load_settings
from ..errors import VottunError
from ..web3 import Web3UtilsError, is_decimal, to_wei


def open_client() -> tuple[VottunClient, int]:
    """Build a client from the saved settings; returns it with the default network.

    The client is closed when the current click context ends.
    """
    try:
        settings = load_settings()
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        click.echo(f"Set VOTTUN_API_KEY and VOTTUN_APPLICATION_VKN in {VOTTUN_ENV}.")
        sys.exit(1)
    client = VottunClient.from_settings(settings)
    click.get_current_context().call_on_close(client.close)
    return client, settings.network


def resolve_network(network: Optional[int], default: int) -> int:
    return network if network is not None else default


def parse_amount(amount: str, unit: str) -> int:
    """Convert a human decimal amount to wei or exit with an error.

    Hex strings are refused here, so ``1e3`` is never read as 0x1e3.
    """
    if not is_decimal(amount):
        click.secho(f"ERROR: Invalid amount {amount!r}: expected a decimal number", fg="red")
        sys.exit(1)
    try:
        return to_wei(amount, unit)
    except Web3UtilsError as exc:
        click.secho(f"ERROR: Invalid amount {amount!r}: {exc}", fg="red")
        sys.exit(1)


def fail(exc: VottunError, action: str) -> NoReturn:
    click.secho(f"{action} failed: {exc}", fg="red")
    sys.exit(exc.exit_code)
