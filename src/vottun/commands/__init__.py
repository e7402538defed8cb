"""
Commands - Implementations of the ``vottun`` CLI groups.

- units:   Convert amounts between ether units
- address: Checksum and validate addresses, Keccak hashing
- erc20:   Deploy and operate ERC-20 tokens
- erc721:  Deploy and operate ERC-721 collections
"""
