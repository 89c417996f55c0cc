from typing import List, Optional, Union

from factom_wallet.core.config import WalletConfig
from factom_wallet.core.wallet_types import AddressFilter, AddressKind
from factom_wallet.crypto.address import Address
from factom_wallet.interfaces.node import FactomdClient, NodeInterface
from factom_wallet.interfaces.wallet import WalletdClient, WalletInterface

class Client(WalletInterface, NodeInterface):
    """Wallet daemon plus ledger node behind one object"""

    def __init__(self, config: Optional[WalletConfig] = None,
                 wallet: Optional[WalletInterface] = None,
                 node: Optional[NodeInterface] = None):
        self.config = config or WalletConfig()
        self.wallet = wallet or WalletdClient(
            self.config.walletd_url,
            timeout=self.config.request_timeout,
            user_agent=self.config.user_agent
        )
        self.node = node or FactomdClient(
            self.config.factomd_url,
            timeout=self.config.request_timeout,
            user_agent=self.config.user_agent
        )

    def save(self, address: Address) -> None:
        self.wallet.save(address)

    def remove(self, address: Address) -> None:
        self.wallet.remove(address)

    def list_addresses(self, selection: Union[AddressFilter, AddressKind] = AddressFilter.ALL) -> List[Address]:
        return self.wallet.list_addresses(selection)

    def fetch_private_counterpart(self, address: Address) -> Address:
        return self.wallet.fetch_private_counterpart(address)

    def fetch_balance(self, address: Address) -> int:
        return self.node.fetch_balance(address)

    def close(self):
        for backend in (self.wallet, self.node):
            if hasattr(backend, 'close'):
                backend.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
