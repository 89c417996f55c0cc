import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Union

from factom_wallet.core.exceptions import ClientError, InvalidPrefixError
from factom_wallet.core.wallet_types import AddressFilter, AddressKind, Polarity
from factom_wallet.crypto.address import Address, parse_address, parse_private_address
from factom_wallet.crypto.prefixes import info_for
from factom_wallet.interfaces.rpc import JSONRPCClient

logger = logging.getLogger(__name__)

class WalletInterface(ABC):
    """Abstract base class for wallet key stores"""

    @abstractmethod
    def save(self, address: Address) -> None:
        """Store a private address"""
        pass

    @abstractmethod
    def remove(self, address: Address) -> None:
        """Delete an address and its secret"""
        pass

    @abstractmethod
    def list_addresses(self, selection: Union[AddressFilter, AddressKind] = AddressFilter.ALL) -> List[Address]:
        """List stored addresses"""
        pass

    @abstractmethod
    def fetch_private_counterpart(self, address: Address) -> Address:
        """Look up the private address for a public one"""
        pass

def matches(address: Address, selection: Union[AddressFilter, AddressKind]) -> bool:
    """Whether an address is included by a list selection"""
    if isinstance(selection, AddressKind):
        return address.kind is selection
    if selection is AddressFilter.ALL:
        return True
    if selection is AddressFilter.PUBLIC:
        return address.is_public
    if selection is AddressFilter.PRIVATE:
        return address.is_private
    public_kind = info_for(address.kind).public_kind
    if selection is AddressFilter.FACTOID:
        return public_kind is AddressKind.FACTOID
    if selection is AddressFilter.ENTRY_CREDIT:
        return public_kind is AddressKind.ENTRY_CREDIT
    raise ValueError(f"unknown address selection: {selection!r}")

class WalletdClient(WalletInterface):
    """factom-walletd backed key store"""

    def __init__(self, url: str = "http://localhost:8089/v2", timeout: float = 30.0,
                 rpc: Optional[JSONRPCClient] = None, **kwargs):
        self.rpc = rpc or JSONRPCClient(url, timeout=timeout, **kwargs)

    def save(self, address: Address) -> None:
        if not address.is_private:
            raise InvalidPrefixError(f"only secret addresses can be saved, got {address.kind.value}")
        self.rpc.call("import-addresses", {"addresses": [{"secret": str(address)}]})
        logger.info(f"Saved {address.kind.value} address for {address.public_address()}")

    def remove(self, address: Address) -> None:
        public = address.public_address()
        self.rpc.call("remove-address", {"address": str(public)})
        logger.info(f"Removed address {public}")

    def list_addresses(self, selection: Union[AddressFilter, AddressKind] = AddressFilter.ALL) -> List[Address]:
        result = self._call_for_object("all-addresses")
        pairs = result.get("addresses") or []
        if not isinstance(pairs, list) or not all(isinstance(p, dict) for p in pairs):
            raise ClientError("all-addresses: malformed response")
        return [address for address in self._parse_pairs(pairs)
                if matches(address, selection)]

    def fetch_private_counterpart(self, address: Address) -> Address:
        if address.is_private:
            return address
        result = self._call_for_object("address", {"address": str(address)})
        if not isinstance(result.get("secret"), str):
            raise ClientError("address: response carries no secret")
        secret = parse_private_address(result["secret"])
        if secret.public_address() != address:
            raise ClientError(f"wallet returned a secret that does not match {address}")
        return secret

    def _call_for_object(self, method: str, params: Optional[Dict] = None) -> Dict:
        result = self.rpc.call(method, params)
        if not isinstance(result, dict):
            raise ClientError(f"{method}: malformed response")
        return result

    def _parse_pairs(self, pairs: List[Dict[str, str]]) -> Iterator[Address]:
        for pair in pairs:
            for key in ("public", "secret"):
                if pair.get(key):
                    yield parse_address(pair[key])

    def close(self):
        self.rpc.close()
