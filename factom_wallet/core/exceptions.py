from typing import Any, Optional


class WalletError(Exception):
    """Base exception for wallet errors"""
    pass

class AddressError(WalletError, ValueError):
    """Invalid address error"""
    message = "invalid address"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

class InvalidTypeError(AddressError, TypeError):
    """Input is not a string or bytes-like value"""
    message = "invalid type"

class InvalidLengthError(AddressError):
    """Text or raw buffer has the wrong length"""
    message = "invalid length"

class InvalidFormatError(AddressError):
    """Decoded bytes are not prefix, payload and checksum"""
    message = "invalid format: version and/or checksum bytes missing"

class ChecksumError(AddressError):
    """Trailing checksum does not match"""
    message = "checksum error"

class InvalidPrefixError(AddressError):
    """Known prefix, but not the kind or polarity asked for"""
    message = "invalid prefix"

class UnrecognizedPrefixError(AddressError):
    """Prefix is not in the registry"""
    message = "unrecognized prefix"

class ClientError(WalletError):
    """Wallet daemon or node could not be reached"""
    pass

class RPCError(ClientError):
    """JSON-RPC error object returned by a remote daemon"""

    def __init__(self, code: int, message: str, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        detail = f"{message}: {data}" if data else message
        super().__init__(f"jsonrpc error {code}: {detail}")

class ConfigError(WalletError):
    """Configuration errors"""
    pass
