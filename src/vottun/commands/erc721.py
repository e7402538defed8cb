"""
ERC-721 collection operations through the Vottun API.

The contract address comes from --contract (or VOTTUN_ERC721_CONTRACT).
"""

from __future__ import annotations

from typing import Optional

import click

from ..erc import ERC721Client
from ..errors import VottunError
from . import common


@click.group()
@click.option("--network", type=int, envvar="VOTTUN_NETWORK", default=None,
              help="Chain ID (default: VOTTUN_NETWORK or 80002)")
@click.option("--contract", envvar="VOTTUN_ERC721_CONTRACT", default=None,
              help="ERC-721 contract address")
@click.pass_context
def erc721(ctx: click.Context, network: Optional[int], contract: Optional[str]) -> None:
    """ERC-721 (NFT) operations.

    \b
    Examples:
      vottun erc721 deploy --name Badges --symbol BDG
      vottun erc721 --contract 0xAbC... mint --to 0x... --token-id 1 \\
          --ipfs-uri ipfs://... --ipfs-hash Qm...
      vottun erc721 --contract 0xAbC... owner 1
    """
    ctx.ensure_object(dict)
    ctx.obj["network"] = network
    ctx.obj["contract"] = contract


def _collection(ctx: click.Context) -> ERC721Client:
    client, default_network = common.open_client()
    network = common.resolve_network(ctx.obj["network"], default_network)
    return ERC721Client(client, network, ctx.obj["contract"])


@erc721.command()
@click.option("--name", required=True, help="Collection name")
@click.option("--symbol", required=True, help="Collection symbol")
@click.option("--alias", default=None, help="Alias")
@click.option("--gas-limit", default=None, type=int, help="Gas limit")
@click.pass_context
def deploy(
    ctx: click.Context,
    name: str,
    symbol: str,
    alias: Optional[str],
    gas_limit: Optional[int],
) -> None:
    """Deploy a new ERC-721 collection."""
    collection = _collection(ctx)
    try:
        tx_hash = collection.deploy(name, symbol, alias, gas_limit)
    except VottunError as exc:
        common.fail(exc, "Deploy")

    click.secho("Deployment submitted!", fg="green")
    click.echo(click.style("  TX: ", dim=True) + tx_hash)
    if collection.contract_address:
        click.echo(click.style("  Contract: ", dim=True) + collection.contract_address)


@erc721.command()
@click.option("--to", "recipient", required=True, help="Recipient address (0x...)")
@click.option("--token-id", required=True, type=int, help="Token ID to mint")
@click.option("--ipfs-uri", required=True, help="IPFS URI of the metadata")
@click.option("--ipfs-hash", required=True, help="IPFS hash of the metadata")
@click.option("--royalty", default=None, type=int, help="Royalty percentage")
@click.option("--gas-limit", default=None, type=int, help="Gas limit")
@click.pass_context
def mint(
    ctx: click.Context,
    recipient: str,
    token_id: int,
    ipfs_uri: str,
    ipfs_hash: str,
    royalty: Optional[int],
    gas_limit: Optional[int],
) -> None:
    """Mint a new NFT to a recipient."""
    try:
        tx_hash = _collection(ctx).mint(
            recipient, token_id, ipfs_uri, ipfs_hash,
            royalty_percentage=royalty, gas_limit=gas_limit,
        )
    except VottunError as exc:
        common.fail(exc, "Mint")

    click.secho(f"Mint of #{token_id} submitted!", fg="green")
    click.echo(click.style("  TX: ", dim=True) + tx_hash)


@erc721.command()
@click.argument("token_id", type=int)
@click.option("--from", "from_address", required=True, help="Current owner address")
@click.option("--to", "to_address", required=True, help="Recipient address")
@click.pass_context
def transfer(ctx: click.Context, token_id: int, from_address: str, to_address: str) -> None:
    """Transfer NFT TOKEN_ID."""
    try:
        tx_hash = _collection(ctx).transfer(token_id, from_address, to_address)
    except VottunError as exc:
        common.fail(exc, "Transfer")

    click.secho("Transfer submitted!", fg="green")
    click.echo(click.style("  TX: ", dim=True) + tx_hash)


@erc721.command()
@click.argument("token_id", type=int)
@click.pass_context
def owner(ctx: click.Context, token_id: int) -> None:
    """Show the owner of TOKEN_ID."""
    try:
        click.echo(_collection(ctx).owner_of(token_id))
    except VottunError as exc:
        common.fail(exc, "Owner query")


@erc721.command()
@click.argument("holder")
@click.pass_context
def balance(ctx: click.Context, holder: str) -> None:
    """Show how many NFTs HOLDER owns."""
    try:
        click.echo(_collection(ctx).balance_of(holder))
    except VottunError as exc:
        common.fail(exc, "Balance query")
