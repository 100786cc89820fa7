"""Command line front end: ``alex genkey | pubkey | encrypt | decrypt | version | help``.

encrypt/decrypt (aliases enc/dec) are placeholders that exit with status 1.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from . import __version__
from .config import load_settings
from .keys import GenerationError, InvalidKeySymbol, KeyPairService, PrivateKey, WrongKeyLength
from .logger import cli_logger

EXIT_OK = 0
EXIT_NOT_IMPLEMENTED = 1
EXIT_BAD_SYMBOL = 3
EXIT_WRONG_LENGTH = 4
EXIT_GENERATION_FAILED = 5

DESCRIPTION = "alex(andria) - encrypt and decrypt messages efficiently"

# encrypt/decrypt carry no message format yet
STUB_COMMANDS = {"encrypt": "encrypt", "enc": "encrypt", "decrypt": "decrypt", "dec": "decrypt"}


def main(argv: Optional[Sequence[str]] = None, service: Optional[KeyPairService] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    log = cli_logger(load_settings(), debug=args.debug)
    log.debug(f"command={args.command}")

    if args.command is None or args.command == "help":
        parser.print_help()
        return EXIT_OK
    if args.command == "version":
        print(f"alex(andria) {__version__}")
        return EXIT_OK
    if args.command in STUB_COMMANDS:
        print(f"{STUB_COMMANDS[args.command]}: not implemented", file=sys.stderr)
        return EXIT_NOT_IMPLEMENTED

    service = service or KeyPairService()
    if args.command == "genkey":
        return _genkey(service, log)
    return _pubkey(service, log, args.key)


def _genkey(service: KeyPairService, log) -> int:
    try:
        key = service.generate()
    except GenerationError as exc:
        log.debug(f"random source failure: {exc!r}")
        print(f"genkey failed: {exc}", file=sys.stderr)
        return EXIT_GENERATION_FAILED
    print(key)
    return EXIT_OK


def _pubkey(service: KeyPairService, log, key_text: Optional[str]) -> int:
    if key_text is None:
        key_text = sys.stdin.readline()
    key_text = key_text.strip()

    try:
        priv = PrivateKey.from_string(key_text)
    except InvalidKeySymbol as exc:
        log.debug(f"rejected key text: bad byte 0x{exc.byte:x}")
        print(f"pubkey failed: invalid character {_describe_byte(exc.byte)} in private key", file=sys.stderr)
        return EXIT_BAD_SYMBOL
    except WrongKeyLength as exc:
        log.debug(f"rejected key text: {exc.length} bytes")
        print(f"pubkey failed: private key decodes to {exc.length} bytes, expected 32", file=sys.stderr)
        return EXIT_WRONG_LENGTH

    print(service.derive_public_key(priv))
    return EXIT_OK


def _describe_byte(byte: int) -> str:
    if byte < 0x80:
        return repr(chr(byte))
    return f"0x{byte:x}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="alex", description=DESCRIPTION)
    parser.add_argument("-d", "--debug", action="store_true", help="Print debug info to stderr")

    # lets -d/--debug follow the command too; SUPPRESS keeps the top-level value
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-d", "--debug", action="store_true", default=argparse.SUPPRESS, help="Print debug info to stderr")

    sub = parser.add_subparsers(dest="command", metavar="<command>")

    sub.add_parser("genkey", parents=[common], help="Generate a new private key")
    pubkey = sub.add_parser("pubkey", parents=[common], help="Generate public key from private key")
    pubkey.add_argument("key", nargs="?", help="Private key text (read from stdin when omitted)")
    sub.add_parser("encrypt", aliases=["enc"], parents=[common], help="Encrypt a message (not implemented)")
    sub.add_parser("decrypt", aliases=["dec"], parents=[common], help="Decrypt a message (not implemented)")
    sub.add_parser("version", parents=[common], help="Print version information")
    sub.add_parser("help", parents=[common], help="Show this help")

    return parser


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
