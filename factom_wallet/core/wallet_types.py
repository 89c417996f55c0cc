# factom_wallet/core/wallet_types.py
from enum import Enum


class Polarity(Enum):
    """Whether an address may be shared or holds a secret seed"""
    PUBLIC = "public"
    PRIVATE = "private"

class AddressKind(Enum):
    """Address kinds, valued by their human readable prefix"""
    FACTOID = "FA"
    FACTOID_SECRET = "Fs"
    ENTRY_CREDIT = "EC"
    ENTRY_CREDIT_SECRET = "Es"

    @classmethod
    def from_string(cls, value: str) -> "AddressKind":
        """Accept either the prefix ("Fs") or the member name ("factoid_secret")"""
        for kind in cls:
            if value == kind.value or value.upper() == kind.name:
                return kind
        raise ValueError(f"unknown address kind: {value}")

class AddressFilter(Enum):
    """Selection used when listing addresses held by the wallet"""
    ALL = "all"
    PUBLIC = "public"
    PRIVATE = "private"
    FACTOID = "factoid"
    ENTRY_CREDIT = "entry_credit"
