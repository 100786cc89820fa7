"""
alexandria.keys
---------------
X25519 key material and its base58 text form.

- encode_key() / decode_key(): strict 32-byte key <-> base58 text
- PrivateKey / PublicKey: immutable key values that print as base58
- KeyPairService: private key generation and public key derivation, built
  on injectable SecureRandom and X25519Derive capabilities

The defaults use os.urandom and the X25519 implementation from
``cryptography``; tests swap in deterministic fakes.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol
import os

from cryptography.hazmat.primitives.asymmetric import x25519

from . import base58

KEY_LENGTH = 32


# --------- Errors ----------
class KeyDecodeError(ValueError):
    """Base class for every failure of decode_key()."""


class InvalidKeySymbol(KeyDecodeError):
    def __init__(self, byte: int):
        self.byte = byte
        super().__init__(f"invalid base58 character 0x{byte:x} in key")


class WrongKeyLength(KeyDecodeError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"key must decode to {KEY_LENGTH} bytes, got {length}")


class GenerationError(RuntimeError):
    """The random source could not supply key material."""


# --------- Text codec ----------
def encode_key(data: bytes) -> str:
    if len(data) != KEY_LENGTH:
        raise ValueError(f"key must be {KEY_LENGTH} bytes, got {len(data)}")
    return base58.encode(data)


def decode_key(text: str) -> bytes:
    """
    Parse base58 ``text`` into exactly 32 bytes of key material.

    Raises InvalidKeySymbol for a character outside the alphabet and
    WrongKeyLength when the decoded value is not 32 bytes long. Short or
    long values are never padded or truncated.
    """
    try:
        raw = base58.decode(text)
    except base58.BadSymbol as exc:
        raise InvalidKeySymbol(exc.byte) from exc
    if len(raw) != KEY_LENGTH:
        raise WrongKeyLength(len(raw))
    return bytes(raw)


# --------- Key values ----------
def _check_length(kind: str, data: bytes) -> bytes:
    data = bytes(data)
    if len(data) != KEY_LENGTH:
        raise ValueError(f"{kind} must be {KEY_LENGTH} bytes, got {len(data)}")
    return data


@dataclass(frozen=True)
class PrivateKey:
    data: bytes

    def __post_init__(self):
        object.__setattr__(self, "data", _check_length("private key", self.data))

    def __str__(self) -> str:
        return encode_key(self.data)

    def __repr__(self) -> str:
        # never render scalar material
        return "PrivateKey(<redacted>)"

    @classmethod
    def from_string(cls, text: str) -> "PrivateKey":
        return cls(decode_key(text))


@dataclass(frozen=True)
class PublicKey:
    data: bytes

    def __post_init__(self):
        object.__setattr__(self, "data", _check_length("public key", self.data))

    def __str__(self) -> str:
        return encode_key(self.data)

    @classmethod
    def from_string(cls, text: str) -> "PublicKey":
        return cls(decode_key(text))


# --------- Capabilities ----------
class SecureRandom(Protocol):
    def fill(self, buffer: bytearray) -> None:
        """Overwrite every byte of ``buffer``; raise on failure."""
        ...


class X25519Derive(Protocol):
    def derive_public(self, private_key: bytes) -> bytes:
        ...


class SystemRandom:
    """OS entropy via os.urandom."""

    def fill(self, buffer: bytearray) -> None:
        buffer[:] = os.urandom(len(buffer))


class CryptographyX25519:
    """X25519 base-point multiplication from the ``cryptography`` package."""

    def derive_public(self, private_key: bytes) -> bytes:
        sk = x25519.X25519PrivateKey.from_private_bytes(private_key)
        return sk.public_key().public_bytes_raw()


# --------- Key pairs ----------
class KeyPairService:
    def __init__(self, rng: Optional[SecureRandom] = None, x25519_impl: Optional[X25519Derive] = None):
        self.rng = rng or SystemRandom()
        self.x25519 = x25519_impl or CryptographyX25519()

    def generate(self) -> PrivateKey:
        """
        Draw a new private key from the random source.

        Any failure of the source is fatal for this call and surfaces as
        GenerationError; there is no retry.
        """
        buf = bytearray(KEY_LENGTH)
        try:
            self.rng.fill(buf)
        except Exception as exc:
            raise GenerationError(f"random source failed: {exc}") from exc
        if len(buf) != KEY_LENGTH:
            raise GenerationError(f"random source returned {len(buf)} bytes, expected {KEY_LENGTH}")
        return PrivateKey(bytes(buf))

    def derive_public_key(self, private_key: PrivateKey) -> PublicKey:
        return PublicKey(self.x25519.derive_public(private_key.data))
