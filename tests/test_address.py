import pytest

from factom_wallet.core.exceptions import (
    AddressError, ChecksumError, InvalidLengthError, InvalidPrefixError,
    InvalidTypeError, UnrecognizedPrefixError
)
from factom_wallet.core.wallet_types import AddressKind, Polarity
from factom_wallet.crypto import base58check
from factom_wallet.crypto.address import (
    Address, generate_private_address, is_valid_address, parse_address,
    parse_address_as, parse_private_address, parse_public_address
)

from tests.conftest import ADDRESS_BY_KIND, EC_ADDRESS, ES_ADDRESS, FA_ADDRESS, FS_ADDRESS


def unknown_prefix_string() -> str:
    payload = parse_address(FA_ADDRESS).payload
    return base58check.encode(b"\x50\x50", payload)


def test_parse_any(kind_and_text):
    kind, text = kind_and_text
    address = parse_address(text)
    assert address.kind is kind
    assert str(address) == text
    assert address.prefix_string == text[:2]


def test_parse_public(kind_and_text):
    kind, text = kind_and_text
    if text[1] == 's':
        with pytest.raises(InvalidPrefixError) as excinfo:
            parse_public_address(text)
        assert str(excinfo.value) == "invalid prefix"
        return
    assert str(parse_public_address(text)) == text


def test_parse_private(kind_and_text):
    kind, text = kind_and_text
    if text[1] != 's':
        with pytest.raises(InvalidPrefixError):
            parse_private_address(text)
        return
    assert str(parse_private_address(text)) == text


def test_parse_as_kind_is_exclusive(kind_and_text):
    kind, text = kind_and_text
    for other in AddressKind:
        if other is kind:
            assert parse_address_as(text, other).kind is kind
        else:
            with pytest.raises(InvalidPrefixError):
                parse_address_as(text, other)


@pytest.mark.parametrize("parse", [parse_address, parse_public_address, parse_private_address])
def test_too_short(parse):
    with pytest.raises(InvalidLengthError) as excinfo:
        parse("too short")
    assert str(excinfo.value) == "invalid length"


@pytest.mark.parametrize("parse", [parse_address, parse_public_address, parse_private_address])
def test_unrecognized_prefix(parse):
    with pytest.raises(UnrecognizedPrefixError) as excinfo:
        parse(unknown_prefix_string())
    assert str(excinfo.value) == "unrecognized prefix"


def test_unknown_prefix_as_kind_is_invalid_prefix():
    with pytest.raises(InvalidPrefixError):
        parse_address_as(unknown_prefix_string(), AddressKind.FACTOID)


def test_checksum_reported_before_prefix():
    # a corrupted Fs string parsed as FA must report the checksum
    with pytest.raises(ChecksumError):
        parse_address_as(FS_ADDRESS[:-1] + ("e" if FS_ADDRESS[-1] != "e" else "f"),
                         AddressKind.FACTOID)


def test_is_valid_address():
    assert is_valid_address(FA_ADDRESS)
    assert is_valid_address(FA_ADDRESS, AddressKind.FACTOID)
    assert not is_valid_address(FA_ADDRESS, AddressKind.ENTRY_CREDIT)
    assert not is_valid_address(FA_ADDRESS[:-1] + "e")
    assert not is_valid_address(None)


def test_payload_length_enforced():
    with pytest.raises(InvalidLengthError):
        Address(AddressKind.FACTOID, bytes(31))
    with pytest.raises(InvalidTypeError):
        Address(AddressKind.FACTOID, "not bytes")
    with pytest.raises(InvalidTypeError):
        Address("FA", bytes(32))


def test_value_semantics():
    a = parse_address(FA_ADDRESS)
    b = Address(AddressKind.FACTOID, bytearray(a.payload))
    assert a == b
    assert hash(a) == hash(b)
    assert isinstance(b.payload, bytes)
    assert a != Address(AddressKind.ENTRY_CREDIT, a.payload)
    with pytest.raises(AttributeError):
        a.payload = bytes(32)


def test_zero_address_is_legal():
    zero = Address.zero(AddressKind.ENTRY_CREDIT)
    assert zero.payload == bytes(32)
    assert parse_address(str(zero)) == zero


def test_bytes_and_polarity():
    fs = parse_address(FS_ADDRESS)
    assert bytes(fs) == fs.payload
    assert fs.polarity is Polarity.PRIVATE
    assert fs.is_private and not fs.is_public


def test_repr_hides_secrets():
    assert FS_ADDRESS not in repr(parse_address(FS_ADDRESS))
    assert FA_ADDRESS in repr(parse_address(FA_ADDRESS))


def test_factoid_secret_derivation():
    pub = parse_address(FA_ADDRESS)
    priv = parse_address(FS_ADDRESS)
    assert priv.public_address() == pub
    assert pub.public_address() == pub
    assert pub.rcd_hash() == priv.rcd_hash()
    assert priv.rcd() == b"\x01" + priv.public_key()


def test_entry_credit_secret_derivation():
    pub = parse_address(EC_ADDRESS)
    priv = parse_address(ES_ADDRESS)
    assert priv.public_address() == pub
    assert pub.public_key() == priv.public_key()


def test_kind_specific_accessors():
    fa = parse_address(FA_ADDRESS)
    ec = parse_address(EC_ADDRESS)
    with pytest.raises(AddressError):
        fa.public_key()
    with pytest.raises(AddressError):
        ec.rcd_hash()
    with pytest.raises(AddressError):
        ec.private_key()
    with pytest.raises(AddressError):
        ec.rcd()


def test_private_key_signs_for_public_key():
    es = parse_address(ES_ADDRESS)
    signature = es.private_key().sign(b"message")
    assert len(signature) == 64


@pytest.mark.parametrize("kind", [AddressKind.FACTOID_SECRET, AddressKind.ENTRY_CREDIT_SECRET])
def test_generate(kind):
    first = generate_private_address(kind)
    second = Address.generate(kind)
    assert first.kind is kind
    assert first != second
    assert parse_private_address(str(first)) == first
    assert first.public_address().is_public


@pytest.mark.parametrize("kind", [AddressKind.FACTOID, AddressKind.ENTRY_CREDIT])
def test_generate_rejects_public_kinds(kind):
    with pytest.raises(InvalidPrefixError):
        generate_private_address(kind)


def test_parse_classmethod():
    assert Address.parse(EC_ADDRESS) == Address.parse(EC_ADDRESS, AddressKind.ENTRY_CREDIT)
    with pytest.raises(InvalidPrefixError):
        Address.parse(EC_ADDRESS, AddressKind.FACTOID)


def test_all_vectors_encode_back():
    for kind, text in ADDRESS_BY_KIND.items():
        assert str(Address(kind, parse_address(text).payload)) == text
