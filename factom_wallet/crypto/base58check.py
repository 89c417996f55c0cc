"""
Base58check codec for 32-byte address payloads.

Layout of the decoded buffer (38 bytes):

    prefix (2) || payload (32) || checksum (4)

where ``checksum = sha256(sha256(prefix || payload))[:4]``. The buffer is
rendered with the bitcoin base58 alphabet, which yields a 52 character
string for every prefix in use.
"""
import hashlib
from typing import Tuple

import base58

from factom_wallet.core.exceptions import (
    ChecksumError, InvalidFormatError, InvalidLengthError, InvalidTypeError
)

PREFIX_LENGTH = 2
PAYLOAD_LENGTH = 32
CHECKSUM_LENGTH = 4
DECODED_LENGTH = PREFIX_LENGTH + PAYLOAD_LENGTH + CHECKSUM_LENGTH
ENCODED_LENGTH = 52

ALPHABET = base58.BITCOIN_ALPHABET.decode('ascii')


def double_sha256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def checksum(data: bytes) -> bytes:
    """First four bytes of the double SHA-256 of data"""
    return double_sha256(data)[:CHECKSUM_LENGTH]


def encode(prefix: bytes, payload: bytes) -> str:
    """Encode prefix and payload into the checksummed text form"""
    if len(prefix) != PREFIX_LENGTH or len(payload) != PAYLOAD_LENGTH:
        raise InvalidLengthError()

    body = bytes(prefix) + bytes(payload)
    return base58.b58encode(body + checksum(body)).decode('ascii')


def decode(text: str) -> Tuple[bytes, bytes]:
    """
    Decode a checksummed address string into ``(prefix, payload)``.

    Checks run in a fixed order: text length, alphabet and decoded length,
    then checksum. The prefix is returned as-is for the caller to resolve.
    """
    if not isinstance(text, str):
        raise InvalidTypeError()

    if len(text) != ENCODED_LENGTH:
        raise InvalidLengthError()

    try:
        raw = base58.b58decode(text)
    except ValueError:
        # invalid base58 character
        raise InvalidFormatError() from None

    if len(raw) != DECODED_LENGTH:
        raise InvalidFormatError()

    body, check = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    if checksum(body) != check:
        raise ChecksumError()

    return body[:PREFIX_LENGTH], body[PREFIX_LENGTH:]
