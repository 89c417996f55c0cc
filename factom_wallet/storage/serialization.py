"""
JSON and raw column adapters for addresses.

JSON carries the canonical text form as a plain string. Storage columns
carry only the 32-byte payload; the column's declared type supplies the
kind when reading it back.
"""
import json
import sqlite3
from typing import Any, Dict, Union

from factom_wallet.core.exceptions import (
    InvalidFormatError, InvalidLengthError, InvalidTypeError
)
from factom_wallet.core.wallet_types import AddressKind
from factom_wallet.crypto.address import Address, parse_address_as
from factom_wallet.crypto.base58check import PAYLOAD_LENGTH

# sqlite declared column type -> kind stored in it
COLUMN_TYPES: Dict[str, AddressKind] = {
    "FA_ADDRESS": AddressKind.FACTOID,
    "FS_ADDRESS": AddressKind.FACTOID_SECRET,
    "EC_ADDRESS": AddressKind.ENTRY_CREDIT,
    "ES_ADDRESS": AddressKind.ENTRY_CREDIT_SECRET,
}


def _json_kind(value: Any) -> str:
    """Name of the JSON type a decoded value came from"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__

class AddressJSONEncoder(json.JSONEncoder):
    """JSON encoder rendering addresses as their text form"""

    def default(self, o):
        if isinstance(o, Address):
            return str(o)
        return super().default(o)

def marshal_json(address: Address) -> str:
    return json.dumps(str(address))

def unmarshal_json(data: Union[str, bytes], kind: AddressKind) -> Address:
    """
    Decode a JSON document holding one address string of the given kind.

    Raises InvalidTypeError when data is not text or the document is not a
    JSON string, InvalidFormatError when it is not valid JSON, and otherwise
    whatever parse_address_as raises. Nothing is returned on failure, so a
    caller's existing address is never half-written.
    """
    if not isinstance(data, (str, bytes, bytearray)):
        raise InvalidTypeError(f"cannot unmarshal {type(data).__name__}, expected JSON text")
    try:
        value = json.loads(data)
    except ValueError as e:
        raise InvalidFormatError(f"invalid JSON: {e}") from e
    if not isinstance(value, str):
        raise InvalidTypeError(f"cannot unmarshal {_json_kind(value)} into address string")
    return parse_address_as(value, kind)

def scan(value: Any, kind: AddressKind) -> Address:
    """Build an address of the given kind from a raw 32-byte column value"""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidTypeError()
    payload = bytes(value)
    if len(payload) != PAYLOAD_LENGTH:
        raise InvalidLengthError()
    return Address(kind, payload)

def to_raw_bytes(address: Address) -> bytes:
    return address.payload

def register_sqlite_adapters() -> None:
    """
    Store addresses as BLOB payloads in sqlite3.

    Columns declared as FA_ADDRESS, FS_ADDRESS, EC_ADDRESS or ES_ADDRESS come
    back as addresses on connections opened with
    ``detect_types=sqlite3.PARSE_DECLTYPES``.
    """
    sqlite3.register_adapter(Address, to_raw_bytes)
    for column_type, kind in COLUMN_TYPES.items():
        sqlite3.register_converter(column_type, lambda value, kind=kind: scan(value, kind))
