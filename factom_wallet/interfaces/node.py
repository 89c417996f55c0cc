from abc import ABC, abstractmethod
from typing import Optional

from factom_wallet.core.exceptions import ClientError
from factom_wallet.core.wallet_types import AddressKind
from factom_wallet.crypto.address import Address
from factom_wallet.interfaces.rpc import JSONRPCClient

BALANCE_METHODS = {
    AddressKind.FACTOID: "factoid-balance",
    AddressKind.ENTRY_CREDIT: "entry-credit-balance",
}

class NodeInterface(ABC):
    """Abstract base class for ledger node queries"""

    @abstractmethod
    def fetch_balance(self, address: Address) -> int:
        """Get balance for address"""
        pass

class FactomdClient(NodeInterface):
    """factomd ledger node"""

    def __init__(self, url: str = "http://localhost:8088/v2", timeout: float = 30.0,
                 rpc: Optional[JSONRPCClient] = None, **kwargs):
        self.rpc = rpc or JSONRPCClient(url, timeout=timeout, **kwargs)

    def fetch_balance(self, address: Address) -> int:
        """Balance in factoshis or entry credits; secrets query their public address"""
        public = address.public_address()
        result = self.rpc.call(BALANCE_METHODS[public.kind], {"address": str(public)})
        try:
            balance = int(result["balance"])
        except (KeyError, TypeError, ValueError) as e:
            raise ClientError(f"malformed balance response: {result!r}") from e
        if balance < 0:
            raise ClientError(f"negative balance for {public}: {balance}")
        return balance

    def close(self):
        self.rpc.close()
