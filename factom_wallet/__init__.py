from factom_wallet.core.config import WalletConfig, load_config
from factom_wallet.core.wallet_types import AddressKind, Polarity, AddressFilter
from factom_wallet.crypto.address import Address, parse_address, parse_public_address
from factom_wallet.crypto.address import parse_private_address, parse_address_as
from factom_wallet.crypto.address import is_valid_address, generate_private_address
from factom_wallet.interfaces.client import Client

__version__ = "1.0.0"
__all__ = [
    'WalletConfig',
    'load_config',
    'AddressKind',
    'Polarity',
    'AddressFilter',
    'Address',
    'parse_address',
    'parse_public_address',
    'parse_private_address',
    'parse_address_as',
    'is_valid_address',
    'generate_private_address',
    'Client'
]
