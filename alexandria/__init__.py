"""
Alexandria
==========
Transcription-friendly text for X25519 key material.

Provides:
- Base58 codec for arbitrary byte strings (alexandria.base58)
- Strict 32-byte key text codec, key values and key-pair service (alexandria.keys)
- The ``alex`` command-line tool (alexandria.cli)
"""

from .base58 import BadSymbol
from .keys import (
    KeyDecodeError, InvalidKeySymbol, WrongKeyLength, GenerationError,
    PrivateKey, PublicKey, KeyPairService, encode_key, decode_key,
)

__version__ = "0.1.0"

__all__ = [
    "BadSymbol",
    "KeyDecodeError",
    "InvalidKeySymbol",
    "WrongKeyLength",
    "GenerationError",
    "PrivateKey",
    "PublicKey",
    "KeyPairService",
    "encode_key",
    "decode_key",
    "gen_key",
    "pub_key",
]


def gen_key() -> PrivateKey:
    """Generate a private key from OS entropy."""
    return KeyPairService().generate()


def pub_key(text: str) -> PublicKey:
    """Public key for the base58 private key ``text``."""
    return KeyPairService().derive_public_key(PrivateKey.from_string(text))
