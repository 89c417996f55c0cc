from factom_wallet.interfaces.rpc import JSONRPCClient
from factom_wallet.interfaces.wallet import WalletInterface, WalletdClient
from factom_wallet.interfaces.node import NodeInterface, FactomdClient
from factom_wallet.interfaces.client import Client

__all__ = [
    'JSONRPCClient',
    'WalletInterface',
    'WalletdClient',
    'NodeInterface',
    'FactomdClient',
    'Client'
]
