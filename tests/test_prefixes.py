import pytest

from factom_wallet.core.exceptions import UnrecognizedPrefixError
from factom_wallet.core.wallet_types import AddressKind, Polarity
from factom_wallet.crypto import prefixes


def test_every_kind_is_registered_with_a_unique_prefix():
    assert set(prefixes.REGISTRY) == set(AddressKind)
    all_prefixes = [info.prefix for info in prefixes.REGISTRY.values()]
    assert len(set(all_prefixes)) == len(all_prefixes)
    assert all(len(p) == 2 for p in all_prefixes)


@pytest.mark.parametrize("kind,prefix", [
    (AddressKind.FACTOID, b"\x5f\xb1"),
    (AddressKind.FACTOID_SECRET, b"\x64\x78"),
    (AddressKind.ENTRY_CREDIT, b"\x59\x2a"),
    (AddressKind.ENTRY_CREDIT_SECRET, b"\x5d\xb6"),
])
def test_prefix_table(kind, prefix):
    assert prefixes.prefix_for(kind) == prefix
    assert prefixes.kind_for_prefix(prefix) is kind


def test_polarity_and_public_kind():
    assert prefixes.polarity_of(AddressKind.FACTOID) is Polarity.PUBLIC
    assert prefixes.polarity_of(AddressKind.ENTRY_CREDIT_SECRET) is Polarity.PRIVATE
    assert prefixes.public_kind_of(AddressKind.FACTOID_SECRET) is AddressKind.FACTOID
    assert prefixes.public_kind_of(AddressKind.ENTRY_CREDIT_SECRET) is AddressKind.ENTRY_CREDIT
    assert prefixes.public_kind_of(AddressKind.ENTRY_CREDIT) is AddressKind.ENTRY_CREDIT


def test_kinds_by_polarity():
    assert set(prefixes.kinds(Polarity.PRIVATE)) == {
        AddressKind.FACTOID_SECRET, AddressKind.ENTRY_CREDIT_SECRET}
    assert set(prefixes.kinds()) == set(AddressKind)


def test_unknown_prefix():
    with pytest.raises(UnrecognizedPrefixError):
        prefixes.kind_for_prefix(b"\x50\x50")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        prefixes.REGISTRY[AddressKind.FACTOID] = None


def test_prefix_lookup_is_complete():
    assert len(prefixes._BY_PREFIX) == len(prefixes.REGISTRY)
