"""
ERC-721 (NFT) operations through the Vottun API.

Every endpoint of this family is a POST, reads included.
"""

from __future__ import annotations

from typing import Optional

from .base import TokenClient


class ERC721Client(TokenClient):
    standard = "erc721"

    def deploy(
        self,
        name: str,
        symbol: str,
        alias: Optional[str] = None,
        gas_limit: Optional[int] = None,
    ) -> str:
        """
        Deploy a new ERC-721 collection.

        Args:
            name: Collection name
            symbol: Collection symbol
            alias: Alias in the Vottun dashboard (optional)
            gas_limit: Gas limit (optional)

        Returns:
            Deployment transaction hash
        """
        self._require_network()
        self._require(name=name, symbol=symbol)

        response = self.client.post(
            self._uri("deploy"),
            {
                "network": self.network,
                "name": name,
                "symbol": symbol,
                "alias": alias or "",
                "gasLimit": int(gas_limit or 0),
            },
        )
        return self._deployed(response)

    def mint(
        self,
        recipient_address: str,
        token_id: int,
        ipfs_uri: str,
        ipfs_hash: str,
        royalty_percentage: Optional[int] = None,
        gas_limit: Optional[int] = None,
    ) -> str:
        """
        Mint token ``token_id`` to ``recipient_address``.

        Args:
            recipient_address: Address receiving the NFT
            token_id: ID of the token to mint
            ipfs_uri: IPFS URI of the token metadata
            ipfs_hash: IPFS hash of the token metadata
            royalty_percentage: Creator royalty (optional)
            gas_limit: Gas limit (optional)

        Returns:
            Mint transaction hash
        """
        payload = self._require_contract()
        self._require(
            recipient_address=recipient_address,
            token_id=token_id,
            ipfs_uri=ipfs_uri,
            ipfs_hash=ipfs_hash,
        )

        payload.update(
            recipientAddress=recipient_address,
            tokenId=int(token_id),
            ipfsUri=ipfs_uri,
            ipfsHash=ipfs_hash,
            royaltyPercentage=int(royalty_percentage or 0),
            gasLimit=int(gas_limit or 0),
        )
        return self._field(self.client.post(self._uri("mint"), payload), "txHash")

    def transfer(self, token_id: int, from_address: str, to_address: str) -> str:
        payload = self._require_contract()
        self._require(token_id=token_id, from_address=from_address, to_address=to_address)

        payload.update({"id": int(token_id), "from": from_address, "to": to_address})
        return self._field(self.client.post(self._uri("transfer"), payload), "txHash")

    def balance_of(self, address: str) -> int:
        """Number of NFTs of this collection held by ``address``."""
        payload = self._require_contract()
        self._require(address=address)
        payload["address"] = address
        return int(self._field(self.client.post(self._uri("balanceOf"), payload), "balance"))

    def token_uri(self) -> str:
        response = self.client.post(self._uri("tokenUri"), self._require_contract())
        return self._field(response, "uri")

    def owner_of(self, token_id: int) -> str:
        payload = self._require_contract()
        self._require(token_id=token_id)
        payload["id"] = int(token_id)
        return self._field(self.client.post(self._uri("ownerOf"), payload), "owner")
