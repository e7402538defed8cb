"""
ERC-20 operations through the Vottun API.

Write operations (deploy, transfer, allowance changes) are POST requests
that return the transaction hash.  Reads are GET requests and need no gas.
Amounts are in wei; use ``vottun.web3.to_wei`` to convert human units::

    token = ERC20Client(client, network=80002)
    token.deploy("TestToken", "TST", "TestToken", to_wei("1000000", "ether"))
    token.transfer(recipient, to_wei("100.001", "ether"))
"""

from __future__ import annotations

from typing import Optional

from .base import TokenClient


class ERC20Client(TokenClient):
    standard = "erc20"

    def deploy(
        self,
        name: str,
        symbol: str,
        alias: str,
        initial_supply: int | str,
        gas_limit: Optional[int] = None,
    ) -> str:
        """
        Deploy a new ERC-20 contract.

        The contract address from the response becomes this client's
        ``contract_address``.

        Args:
            name: Token name
            symbol: Token symbol
            alias: Token alias in the Vottun dashboard
            initial_supply: Initial supply in wei
            gas_limit: Gas limit (optional)

        Returns:
            Deployment transaction hash
        """
        self._require_network()
        self._require(name=name, symbol=symbol, initial_supply=initial_supply)

        response = self.client.post(
            self._uri("deploy"),
            {
                "network": self.network,
                "name": name,
                "symbol": symbol,
                "alias": alias or "",
                "initialSupply": self._amount(initial_supply),
                "gasLimit": int(gas_limit or 0),
            },
        )
        return self._deployed(response)

    def transfer(
        self,
        recipient: str,
        amount: int | str,
        gas_limit: Optional[int] = None,
    ) -> str:
        """Transfer ``amount`` wei from the caller to ``recipient``."""
        payload = self._require_contract()
        self._require(recipient=recipient, amount=amount)

        payload.update(
            recipient=recipient,
            amount=self._amount(amount),
            gasLimit=int(gas_limit or 0),
        )
        return self._field(self.client.post(self._uri("transfer"), payload), "txHash")

    def transfer_from(
        self,
        sender: str,
        recipient: str,
        amount: int | str,
        gas_limit: Optional[int] = None,
    ) -> str:
        """Transfer ``amount`` wei from ``sender`` to ``recipient`` using the caller's allowance."""
        payload = self._require_contract()
        self._require(sender=sender, recipient=recipient, amount=amount)

        payload.update(
            sender=sender,
            recipient=recipient,
            amount=self._amount(amount),
            gasLimit=int(gas_limit or 0),
        )
        return self._field(self.client.post(self._uri("transferFrom"), payload), "txHash")

    def increase_allowance(
        self,
        spender: str,
        added_value: int | str,
        gas_limit: Optional[int] = None,
    ) -> str:
        payload = self._require_contract()
        self._require(spender=spender, added_value=added_value)

        payload.update(
            spender=spender,
            addedValue=self._amount(added_value),
            gasLimit=int(gas_limit or 0),
        )
        return self._field(self.client.post(self._uri("increaseAllowance"), payload), "txHash")

    def decrease_allowance(
        self,
        spender: str,
        subtracted_value: int | str,
        gas_limit: Optional[int] = None,
    ) -> str:
        payload = self._require_contract()
        self._require(spender=spender, subtracted_value=subtracted_value)

        # The API spells the field "substractedValue"
        payload.update(
            spender=spender,
            substractedValue=self._amount(subtracted_value),
            gasLimit=int(gas_limit or 0),
        )
        return self._field(self.client.post(self._uri("decreaseAllowance"), payload), "txHash")

    def allowance(self, owner: str, spender: str) -> int:
        """Amount of wei ``spender`` may still transfer on behalf of ``owner``."""
        params = self._require_contract()
        self._require(owner=owner, spender=spender)
        params.update(owner=owner, spender=spender)
        return int(self._field(self.client.get(self._uri("allowance"), params), "allowance"))

    def name(self) -> str:
        response = self.client.get(self._uri("name"), self._require_contract())
        return self._field(response, "name")

    def symbol(self) -> str:
        response = self.client.get(self._uri("symbol"), self._require_contract())
        return self._field(response, "symbol")

    def total_supply(self) -> int:
        response = self.client.get(self._uri("totalSupply"), self._require_contract())
        return int(self._field(response, "totalSupply"))

    def decimals(self) -> int:
        response = self.client.get(self._uri("decimals"), self._require_contract())
        return int(self._field(response, "decimals"))

    def balance_of(self, address: str) -> int:
        """Token balance of ``address`` in wei."""
        params = self._require_contract()
        self._require(address=address)
        params["address"] = address
        return int(self._field(self.client.get(self._uri("balanceOf"), params), "balance"))
