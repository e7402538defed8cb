from __future__ import annotations

from typing import Any, Optional

from ..client import VottunClient
from ..errors import ContractNotConfiguredError, MissingArgumentError, VottunError
from ..web3.units import to_wei


class TokenClient:
    """Shared state and checks for the per-standard clients."""

    standard: str = ""

    def __init__(
        self,
        client: VottunClient,
        network: int,
        contract_address: Optional[str] = None,
    ) -> None:
        self.client = client
        self.network = int(network)
        self.contract_address = contract_address

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(network={self.network}, "
            f"contract_address={self.contract_address!r})"
        )

    def _uri(self, operation: str) -> str:
        return f"erc/v1/{self.standard}/{operation}"

    def _require_network(self) -> None:
        if not self.network:
            raise ContractNotConfiguredError(
                f"A network ID is required to deploy a {self.standard.upper()} contract."
            )

    def _require_contract(self) -> dict[str, Any]:
        """Check the contract is configured and return its identifying fields."""
        if not self.contract_address or not self.network:
            raise ContractNotConfiguredError("Contract address and network are required.")
        return {"contractAddress": self.contract_address, "network": self.network}

    @staticmethod
    def _require(**values: Any) -> None:
        missing = [name for name, value in values.items() if value is None or value == ""]
        if missing:
            raise MissingArgumentError(f"Missing required argument(s): {', '.join(missing)}")

    @staticmethod
    def _amount(value: int | str) -> int:
        """Normalise a wei amount given as int or numeric string."""
        return to_wei(value, "wei")

    @staticmethod
    def _field(response: dict[str, Any], key: str) -> Any:
        try:
            return response[key]
        except KeyError:
            raise VottunError(f"Response is missing '{key}': {response!r}") from None

    def _deployed(self, response: dict[str, Any]) -> str:
        """Remember the new contract address and return the deployment tx hash."""
        if response.get("contractAddress") and response.get("txHash"):
            self.contract_address = response["contractAddress"]
        return self._field(response, "txHash")
