__all__ = [
    # API client
    "VottunClient",
    "VottunSettings",
    "load_settings",
    "save_settings",
    # Token clients
    "ERC20Client",
    "ERC721Client",
    # Errors
    "VottunError",
    "VottunApiError",
    "VottunHttpError",
    "VottunTransportError",
    "ContractNotConfiguredError",
    "MissingArgumentError",
    # Web3 utilities
    "UNITS",
    "to_wei",
    "from_wei",
    "to_ether",
    "format_units",
    "to_hex",
    "hex_to_bin",
    "sha3",
    "is_address",
    "to_checksum_address",
    "is_address_checksum",
]

from .client import VottunClient
from .config import VottunSettings, load_settings, save_settings
from .erc import ERC20Client, ERC721Client
from .errors import (
    ContractNotConfiguredError,
    MissingArgumentError,
    VottunApiError,
    VottunError,
    VottunHttpError,
    VottunTransportError,
)
from .web3 import (
    UNITS,
    format_units,
    from_wei,
    hex_to_bin,
    is_address,
    is_address_checksum,
    sha3,
    to_checksum_address,
    to_ether,
    to_hex,
    to_wei,
)
