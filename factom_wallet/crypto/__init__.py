from factom_wallet.crypto.address import (
    Address, parse_address, parse_public_address, parse_private_address,
    parse_address_as, is_valid_address, generate_private_address
)
from factom_wallet.crypto import base58check, key_management, prefixes

__all__ = [
    'Address',
    'parse_address',
    'parse_public_address',
    'parse_private_address',
    'parse_address_as',
    'is_valid_address',
    'generate_private_address',
    'base58check',
    'key_management',
    'prefixes'
]
