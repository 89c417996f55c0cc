import logging
from dataclasses import dataclass, field
from typing import Optional

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from factom_wallet.core.exceptions import (
    AddressError, InvalidLengthError, InvalidPrefixError, InvalidTypeError
)
from factom_wallet.core.wallet_types import AddressKind, Polarity
from factom_wallet.crypto import base58check, key_management, prefixes

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Address:
    """
    A 32-byte payload tagged with its address kind.

    Values are immutable and compare by kind and payload. The text form is
    computed from the two on every ``str()`` call.
    """
    kind: AddressKind
    payload: bytes = field(default=bytes(base58check.PAYLOAD_LENGTH))

    def __post_init__(self):
        if not isinstance(self.kind, AddressKind):
            raise InvalidTypeError(f"unknown address kind: {self.kind!r}")
        if not isinstance(self.payload, (bytes, bytearray, memoryview)):
            raise InvalidTypeError()
        payload = bytes(self.payload)
        if len(payload) != base58check.PAYLOAD_LENGTH:
            raise InvalidLengthError()
        object.__setattr__(self, 'payload', payload)

    @classmethod
    def zero(cls, kind: AddressKind) -> "Address":
        """All-zero payload; a legal, encodable address"""
        return cls(kind)

    @classmethod
    def parse(cls, text: str, kind: Optional[AddressKind] = None) -> "Address":
        if kind is None:
            return parse_address(text)
        return parse_address_as(text, kind)

    @classmethod
    def generate(cls, kind: AddressKind) -> "Address":
        return generate_private_address(kind)

    def __str__(self) -> str:
        return base58check.encode(self.prefix, self.payload)

    def __repr__(self) -> str:
        if self.is_private:
            return f"Address({self.kind.value}, <secret>)"
        return f"Address({self.kind.value}, {self})"

    def __bytes__(self) -> bytes:
        return self.payload

    @property
    def prefix(self) -> bytes:
        return prefixes.prefix_for(self.kind)

    @property
    def prefix_string(self) -> str:
        """Human readable prefix, e.g. "FA" """
        return self.kind.value

    @property
    def polarity(self) -> Polarity:
        return prefixes.polarity_of(self.kind)

    @property
    def is_public(self) -> bool:
        return self.polarity is Polarity.PUBLIC

    @property
    def is_private(self) -> bool:
        return self.polarity is Polarity.PRIVATE

    def public_address(self) -> "Address":
        """The public address: derived for private kinds, self otherwise"""
        if self.is_public:
            return self
        return Address(prefixes.public_kind_of(self.kind),
                       key_management.derive_public_payload(self.kind, self.payload))

    def private_key(self) -> Ed25519PrivateKey:
        if not self.is_private:
            raise AddressError(f"{self.kind.value} address holds no private key")
        return key_management.private_key_from_seed(self.payload)

    def public_key(self) -> bytes:
        """Raw Ed25519 public key (Fs, Es and EC addresses only)"""
        if self.is_private:
            return key_management.public_key_from_seed(self.payload)
        if self.kind is AddressKind.ENTRY_CREDIT:
            return self.payload
        raise AddressError("FA address holds an RCD hash, not a public key")

    def rcd(self) -> bytes:
        """Type 1 redeem condition for a factoid secret"""
        if self.kind is not AddressKind.FACTOID_SECRET:
            raise AddressError(f"{self.kind.value} address has no known RCD")
        return key_management.rcd_from_public_key(self.public_key())

    def rcd_hash(self) -> bytes:
        if self.kind is AddressKind.FACTOID:
            return self.payload
        if self.kind is AddressKind.FACTOID_SECRET:
            return self.public_address().payload
        raise AddressError(f"{self.kind.value} address has no RCD hash")

    def to_json(self) -> str:
        return f'"{self}"'

    # External wallet and node operations. ``client`` is anything exposing
    # the Client methods, see factom_wallet.interfaces.client.

    def save(self, client) -> None:
        client.save(self)

    def remove(self, client) -> None:
        client.remove(self)

    def get_private_address(self, client=None) -> "Address":
        if self.is_private:
            return self
        if client is None:
            raise AddressError("a client is required to look up a private address")
        return client.fetch_private_counterpart(self)

    def get_balance(self, client) -> int:
        return client.fetch_balance(self)


def parse_address(text: str) -> Address:
    """Parse any registered address kind"""
    prefix, payload = base58check.decode(text)
    return Address(prefixes.kind_for_prefix(prefix), payload)

def parse_public_address(text: str) -> Address:
    address = parse_address(text)
    if not address.is_public:
        raise InvalidPrefixError()
    return address

def parse_private_address(text: str) -> Address:
    address = parse_address(text)
    if not address.is_private:
        raise InvalidPrefixError()
    return address

def parse_address_as(text: str, kind: AddressKind) -> Address:
    """Parse text that must be exactly of the given kind"""
    prefix, payload = base58check.decode(text)
    if prefix != prefixes.prefix_for(kind):
        raise InvalidPrefixError()
    return Address(kind, payload)

def is_valid_address(text: str, kind: Optional[AddressKind] = None) -> bool:
    try:
        Address.parse(text, kind)
    except AddressError:
        return False
    return True

def generate_private_address(kind: AddressKind) -> Address:
    """Fresh private address from a random seed"""
    if prefixes.polarity_of(kind) is not Polarity.PRIVATE:
        raise InvalidPrefixError(f"cannot generate a {kind.value} address, it has no seed")
    address = Address(kind, key_management.generate_seed())
    logger.info(f"Generated new {kind.value} address for {address.public_address()}")
    return address
