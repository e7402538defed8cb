"""
ERC-20 token operations through the Vottun API.

The contract address comes from --contract (or VOTTUN_ERC20_CONTRACT);
the network from --network (or VOTTUN_NETWORK, default Polygon Amoy).
"""

from __future__ import annotations

from typing import Optional

import click

from ..erc import ERC20Client
from ..errors import VottunError
from ..web3 import UNITS, format_units
from . import common

_UNIT_CHOICE = click.Choice(sorted(UNITS), case_sensitive=True)


@click.group()
@click.option("--network", type=int, envvar="VOTTUN_NETWORK", default=None,
              help="Chain ID (default: VOTTUN_NETWORK or 80002)")
@click.option("--contract", envvar="VOTTUN_ERC20_CONTRACT", default=None,
              help="ERC-20 contract address")
@click.pass_context
def erc20(ctx: click.Context, network: Optional[int], contract: Optional[str]) -> None:
    """ERC-20 token operations.

    \b
    Examples:
      vottun erc20 deploy --name TestToken --symbol TST --supply 1000000
      vottun erc20 --contract 0xAbC... transfer --to 0x... --amount 100.001
      vottun erc20 --contract 0xAbC... balance 0x...
    """
    ctx.ensure_object(dict)
    ctx.obj["network"] = network
    ctx.obj["contract"] = contract


def _token(ctx: click.Context) -> ERC20Client:
    client, default_network = common.open_client()
    network = common.resolve_network(ctx.obj["network"], default_network)
    return ERC20Client(client, network, ctx.obj["contract"])


@erc20.command()
@click.option("--name", required=True, help="Token name")
@click.option("--symbol", required=True, help="Token symbol")
@click.option("--alias", default=None, help="Alias (default: name)")
@click.option("--supply", required=True, help="Initial supply in --unit")
@click.option("--unit", default="ether", type=_UNIT_CHOICE, show_default=True)
@click.option("--gas-limit", default=None, type=int, help="Gas limit")
@click.pass_context
def deploy(
    ctx: click.Context,
    name: str,
    symbol: str,
    alias: Optional[str],
    supply: str,
    unit: str,
    gas_limit: Optional[int],
) -> None:
    """Deploy a new ERC-20 token."""
    initial_supply = common.parse_amount(supply, unit)
    token = _token(ctx)

    click.echo(f"=== Deploy {symbol} (network {token.network}) ===")
    click.echo(click.style("  Supply: ", dim=True) + f"{supply} {unit} ({initial_supply} wei)")

    try:
        tx_hash = token.deploy(name, symbol, alias or name, initial_supply, gas_limit)
    except VottunError as exc:
        common.fail(exc, "Deploy")

    click.secho("  Deployment submitted!", fg="green")
    click.echo(click.style("  TX: ", dim=True) + tx_hash)
    if token.contract_address:
        click.echo(click.style("  Contract: ", dim=True) + token.contract_address)


@erc20.command()
@click.option("--to", "recipient", required=True, help="Recipient address (0x...)")
@click.option("--amount", required=True, help="Amount in --unit (e.g. 100.001)")
@click.option("--unit", default="ether", type=_UNIT_CHOICE, show_default=True)
@click.option("--gas-limit", default=None, type=int, help="Gas limit")
@click.pass_context
def transfer(
    ctx: click.Context,
    recipient: str,
    amount: str,
    unit: str,
    gas_limit: Optional[int],
) -> None:
    """Transfer tokens from the caller to a recipient."""
    raw_amount = common.parse_amount(amount, unit)
    try:
        tx_hash = _token(ctx).transfer(recipient, raw_amount, gas_limit)
    except VottunError as exc:
        common.fail(exc, "Transfer")

    click.secho("Transfer submitted!", fg="green")
    click.echo(click.style("  TX: ", dim=True) + tx_hash)


@erc20.command()
@click.argument("holder")
@click.option("--unit", default="ether", type=_UNIT_CHOICE, show_default=True,
              help="Display unit")
@click.pass_context
def balance(ctx: click.Context, holder: str, unit: str) -> None:
    """Show the token balance of HOLDER."""
    try:
        wei = _token(ctx).balance_of(holder)
    except VottunError as exc:
        common.fail(exc, "Balance query")

    click.echo(f"{format_units(wei, unit)} {unit} ({wei} wei)")


@erc20.command()
@click.option("--owner", required=True, help="Token owner address")
@click.option("--spender", required=True, help="Spender address")
@click.option("--unit", default="ether", type=_UNIT_CHOICE, show_default=True,
              help="Display unit")
@click.pass_context
def allowance(ctx: click.Context, owner: str, spender: str, unit: str) -> None:
    """Show how much SPENDER may still spend for OWNER."""
    try:
        wei = _token(ctx).allowance(owner, spender)
    except VottunError as exc:
        common.fail(exc, "Allowance query")

    click.echo(f"{format_units(wei, unit)} {unit} ({wei} wei)")


@erc20.command("increase-allowance")
@click.option("--spender", required=True, help="Spender address")
@click.option("--amount", required=True, help="Amount in --unit")
@click.option("--unit", default="ether", type=_UNIT_CHOICE, show_default=True)
@click.option("--gas-limit", default=None, type=int, help="Gas limit")
@click.pass_context
def increase_allowance(
    ctx: click.Context,
    spender: str,
    amount: str,
    unit: str,
    gas_limit: Optional[int],
) -> None:
    """Increase the allowance of SPENDER."""
    raw_amount = common.parse_amount(amount, unit)
    try:
        tx_hash = _token(ctx).increase_allowance(spender, raw_amount, gas_limit)
    except VottunError as exc:
        common.fail(exc, "increaseAllowance")

    click.secho("Allowance increase submitted!", fg="green")
    click.echo(click.style("  TX: ", dim=True) + tx_hash)


@erc20.command("decrease-allowance")
@click.option("--spender", required=True, help="Spender address")
@click.option("--amount", required=True, help="Amount in --unit")
@click.option("--unit", default="ether", type=_UNIT_CHOICE, show_default=True)
@click.option("--gas-limit", default=None, type=int, help="Gas limit")
@click.pass_context
def decrease_allowance(
    ctx: click.Context,
    spender: str,
    amount: str,
    unit: str,
    gas_limit: Optional[int],
) -> None:
    """Decrease the allowance of SPENDER."""
    raw_amount = common.parse_amount(amount, unit)
    try:
        tx_hash = _token(ctx).decrease_allowance(spender, raw_amount, gas_limit)
    except VottunError as exc:
        common.fail(exc, "decreaseAllowance")

    click.secho("Allowance decrease submitted!", fg="green")
    click.echo(click.style("  TX: ", dim=True) + tx_hash)


@erc20.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show name, symbol, decimals and total supply."""
    token = _token(ctx)
    try:
        name = token.name()
        symbol = token.symbol()
        decimals = token.decimals()
        total_supply = token.total_supply()
    except VottunError as exc:
        common.fail(exc, "Token query")

    click.echo(f"=== {symbol} (network {token.network}) ===")
    click.echo(click.style("  Contract: ", dim=True) + str(token.contract_address))
    click.echo(click.style("  Name:     ", dim=True) + name)
    click.echo(click.style("  Symbol:   ", dim=True) + symbol)
    click.echo(click.style("  Decimals: ", dim=True) + str(decimals))
    if decimals == 18:
        click.echo(click.style("  Supply:   ", dim=True) + f"{format_units(total_supply)} ({total_supply} wei)")
    else:
        click.echo(click.style("  Supply:   ", dim=True) + str(total_supply))
