from factom_wallet.storage.serialization import (
    AddressJSONEncoder, marshal_json, unmarshal_json, scan, to_raw_bytes,
    register_sqlite_adapters
)

__all__ = [
    'AddressJSONEncoder',
    'marshal_json',
    'unmarshal_json',
    'scan',
    'to_raw_bytes',
    'register_sqlite_adapters'
]
