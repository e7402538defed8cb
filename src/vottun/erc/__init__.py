"""
ERC - Per-standard token clients for the Vottun API.

- erc20:  Fungible tokens (deploy, transfer, allowances, metadata)
- erc721: NFT collections (deploy, mint, transfer, ownership)
"""

from .erc20 import ERC20Client
from .erc721 import ERC721Client

__all__ = ["ERC20Client", "ERC721Client"]
