from factom_wallet.core.config import WalletConfig, load_config
from factom_wallet.core.wallet_types import AddressKind, Polarity, AddressFilter
from factom_wallet.core.exceptions import (
    WalletError, AddressError, InvalidTypeError, InvalidLengthError,
    InvalidFormatError, ChecksumError, InvalidPrefixError,
    UnrecognizedPrefixError, ClientError, RPCError, ConfigError
)

__all__ = [
    'WalletConfig',
    'load_config',
    'AddressKind',
    'Polarity',
    'AddressFilter',
    'WalletError',
    'AddressError',
    'InvalidTypeError',
    'InvalidLengthError',
    'InvalidFormatError',
    'ChecksumError',
    'InvalidPrefixError',
    'UnrecognizedPrefixError',
    'ClientError',
    'RPCError',
    'ConfigError'
]
