from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from factom_wallet.core.exceptions import UnrecognizedPrefixError
from factom_wallet.core.wallet_types import AddressKind, Polarity


@dataclass(frozen=True)
class KindInfo:
    """Static metadata for one address kind"""
    kind: AddressKind
    prefix: bytes
    polarity: Polarity
    public_kind: AddressKind


REGISTRY: Mapping[AddressKind, KindInfo] = MappingProxyType({
    AddressKind.FACTOID: KindInfo(
        AddressKind.FACTOID, b'\x5f\xb1', Polarity.PUBLIC, AddressKind.FACTOID),
    AddressKind.FACTOID_SECRET: KindInfo(
        AddressKind.FACTOID_SECRET, b'\x64\x78', Polarity.PRIVATE, AddressKind.FACTOID),
    AddressKind.ENTRY_CREDIT: KindInfo(
        AddressKind.ENTRY_CREDIT, b'\x59\x2a', Polarity.PUBLIC, AddressKind.ENTRY_CREDIT),
    AddressKind.ENTRY_CREDIT_SECRET: KindInfo(
        AddressKind.ENTRY_CREDIT_SECRET, b'\x5d\xb6', Polarity.PRIVATE, AddressKind.ENTRY_CREDIT),
})

_BY_PREFIX: Mapping[bytes, AddressKind] = MappingProxyType(
    {info.prefix: kind for kind, info in REGISTRY.items()}
)

if len(_BY_PREFIX) != len(REGISTRY):
    raise ValueError("address prefixes must be unique")


def info_for(kind: AddressKind) -> KindInfo:
    return REGISTRY[kind]

def prefix_for(kind: AddressKind) -> bytes:
    return REGISTRY[kind].prefix

def polarity_of(kind: AddressKind) -> Polarity:
    return REGISTRY[kind].polarity

def public_kind_of(kind: AddressKind) -> AddressKind:
    """Kind of the public address a kind derives to (itself for public kinds)"""
    return REGISTRY[kind].public_kind

def kind_for_prefix(prefix: bytes) -> AddressKind:
    """Resolve a 2-byte prefix, raising UnrecognizedPrefixError if unknown"""
    try:
        return _BY_PREFIX[bytes(prefix)]
    except KeyError:
        raise UnrecognizedPrefixError() from None

def kinds(polarity: Optional[Polarity] = None) -> Tuple[AddressKind, ...]:
    """All registered kinds, optionally only those of one polarity"""
    return tuple(kind for kind, info in REGISTRY.items()
                 if polarity is None or info.polarity is polarity)
