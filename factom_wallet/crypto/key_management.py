import secrets
from typing import Callable, Dict

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from factom_wallet.core.exceptions import (
    InvalidLengthError, InvalidPrefixError, InvalidTypeError
)
from factom_wallet.core.wallet_types import AddressKind
from factom_wallet.crypto.base58check import PAYLOAD_LENGTH, double_sha256

# Redeem Condition Datastructure type 1: a single Ed25519 public key
RCD_TYPE_1 = b'\x01'


def _check_seed(seed: bytes) -> bytes:
    if not isinstance(seed, (bytes, bytearray, memoryview)):
        raise InvalidTypeError()
    seed = bytes(seed)
    if len(seed) != PAYLOAD_LENGTH:
        raise InvalidLengthError()
    return seed

def generate_seed() -> bytes:
    """32 bytes from the operating system CSPRNG"""
    return secrets.token_bytes(PAYLOAD_LENGTH)

def private_key_from_seed(seed: bytes) -> Ed25519PrivateKey:
    """The seed is the raw RFC 8032 Ed25519 private key"""
    return Ed25519PrivateKey.from_private_bytes(_check_seed(seed))

def public_key_from_seed(seed: bytes) -> bytes:
    """Raw 32-byte Ed25519 public key for a seed"""
    public_key = private_key_from_seed(seed).public_key()
    return public_key.public_bytes(Encoding.Raw, PublicFormat.Raw)

def rcd_from_public_key(public_key: bytes) -> bytes:
    return RCD_TYPE_1 + bytes(public_key)

def rcd_hash(rcd: bytes) -> bytes:
    """Double SHA-256 commitment to a redeem condition"""
    return double_sha256(rcd)

def factoid_payload_from_seed(seed: bytes) -> bytes:
    """Public factoid payload: the RCD hash of the seed's public key"""
    return rcd_hash(rcd_from_public_key(public_key_from_seed(seed)))

def entry_credit_payload_from_seed(seed: bytes) -> bytes:
    """Public entry credit payload: the raw public key itself"""
    return public_key_from_seed(seed)

DERIVATIONS: Dict[AddressKind, Callable[[bytes], bytes]] = {
    AddressKind.FACTOID_SECRET: factoid_payload_from_seed,
    AddressKind.ENTRY_CREDIT_SECRET: entry_credit_payload_from_seed,
}

def derive_public_payload(kind: AddressKind, seed: bytes) -> bytes:
    """Map a private kind's seed to the payload of its public address"""
    try:
        derive = DERIVATIONS[kind]
    except KeyError:
        raise InvalidPrefixError(f"cannot derive a public address from {kind.value}") from None
    return derive(seed)
