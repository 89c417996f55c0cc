#!/usr/bin/env python3
"""
Factom address tool
Parse, derive and generate addresses; query walletd and factomd via RPC
"""

import argparse
import sys
from typing import List, Optional

from factom_wallet.core.config import load_config
from factom_wallet.core.exceptions import WalletError
from factom_wallet.core.wallet_types import AddressFilter, AddressKind
from factom_wallet.crypto.address import (
    generate_private_address, parse_address_as, parse_address,
    parse_private_address
)
from factom_wallet.interfaces.client import Client
from factom_wallet.utils.logging import get_logger, setup_logging

logger = get_logger("factom_cli")

def cmd_parse(args, client_factory) -> int:
    if args.kind:
        address = parse_address_as(args.address, AddressKind.from_string(args.kind))
    else:
        address = parse_address(args.address)
    print(f"kind:     {address.kind.value}")
    print(f"polarity: {address.polarity.value}")
    if address.is_public:
        print(f"payload:  {address.payload.hex()}")
    else:
        print(f"public:   {address.public_address()}")
    return 0

def cmd_derive(args, client_factory) -> int:
    print(parse_private_address(args.secret).public_address())
    return 0

def cmd_generate(args, client_factory) -> int:
    address = generate_private_address(AddressKind.from_string(args.kind))
    print(f"secret: {address}")
    print(f"public: {address.public_address()}")
    if args.save:
        with client_factory() as client:
            address.save(client)
    return 0

def cmd_balance(args, client_factory) -> int:
    address = parse_address(args.address)
    with client_factory() as client:
        print(address.get_balance(client))
    return 0

def cmd_list(args, client_factory) -> int:
    selection = AddressFilter(args.filter)
    with client_factory() as client:
        for address in client.list_addresses(selection):
            print(address if address.is_public else f"{address.kind.value} <secret>")
    return 0

COMMANDS = {
    'parse': cmd_parse,
    'derive': cmd_derive,
    'generate': cmd_generate,
    'balance': cmd_balance,
    'list': cmd_list,
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Factom address tool')
    parser.add_argument('--config', help='YAML configuration file')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Override the configured log level')

    subparsers = parser.add_subparsers(dest='command', required=True)

    parse_parser = subparsers.add_parser('parse', help='Validate and describe an address')
    parse_parser.add_argument('address', help='Address string')
    parse_parser.add_argument('--kind', choices=[k.value for k in AddressKind],
                              help='Require this address kind')

    derive_parser = subparsers.add_parser('derive', help='Print the public address of a secret')
    derive_parser.add_argument('secret', help='Fs or Es address')

    generate_parser = subparsers.add_parser('generate', help='Generate a new secret address')
    generate_parser.add_argument('kind', choices=['Fs', 'Es'])
    generate_parser.add_argument('--save', action='store_true',
                                 help='Import the new secret into factom-walletd')

    balance_parser = subparsers.add_parser('balance', help='Query factomd for a balance')
    balance_parser.add_argument('address', help='Address string')

    list_parser = subparsers.add_parser('list', help='List factom-walletd addresses')
    list_parser.add_argument('--filter', default='all', choices=[f.value for f in AddressFilter])

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(args.log_level or config.log_level, config.log_file, config.log_format)
        return COMMANDS[args.command](args, lambda: Client(config))
    except WalletError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
