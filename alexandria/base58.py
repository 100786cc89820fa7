"""
alexandria.base58
-----------------
Base58 text codec for arbitrary byte strings.

Bytes are read as one big-endian unsigned integer and rewritten in base 58
using an alphabet without look-alike characters (no 0, O, I or l). Leading
zero bytes are carried over one-to-one as leading "1" symbols, so the
conversion is exact in both directions.

Both directions use schoolbook long multiplication over a scratch buffer,
which is plenty for key-sized inputs.
"""

from __future__ import annotations
from typing import Dict, Union

__all__ = ["ALPHABET", "DIGITS", "BadSymbol", "encode", "decode"]

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# symbol byte value -> alphabet index; anything missing is not base58
DIGITS: Dict[int, int] = {ord(c): i for i, c in enumerate(ALPHABET)}

_ZERO = ALPHABET[0]

BytesLike = Union[bytes, bytearray, memoryview]


class BadSymbol(ValueError):
    """Raised by decode() on the first character outside the alphabet."""

    def __init__(self, byte: int):
        self.byte = byte
        super().__init__(f"invalid base58 character 0x{byte:x}")


def encode(data: BytesLike) -> str:
    data = bytes(data)
    # 7/5 is just over log_58(256)
    scratch = [0] * (1 + len(data) * 7 // 5)

    for d256 in data:
        # X = X * 256 + d256, in base 58
        carry = d256
        for i in range(len(scratch) - 1, -1, -1):
            carry += scratch[i] << 8
            scratch[i] = carry % 58
            carry //= 58
        assert carry == 0

    zeros = len(data) - len(data.lstrip(b"\x00"))
    start = 0
    while start < len(scratch) and scratch[start] == 0:
        start += 1

    return _ZERO * zeros + "".join(ALPHABET[d] for d in scratch[start:])


def _symbol_byte(ch: str) -> int:
    """First UTF-8 byte of ``ch``; stray bytes from surrogateescape come back as themselves."""
    try:
        return ch.encode("utf-8", "surrogateescape")[0]
    except UnicodeEncodeError:
        return ch.encode("utf-8", "surrogatepass")[0]


def decode(text: str) -> bytes:
    """
    Decode base58 ``text`` back into bytes.

    Raises BadSymbol for the first character of ``text`` that is not in the
    alphabet; nothing after it is looked at.
    """
    # 11/15 is just over log_256(58)
    scratch = bytearray(1 + len(text) * 11 // 15)

    for ch in text:
        digit = DIGITS.get(ord(ch))
        if digit is None:
            raise BadSymbol(_symbol_byte(ch))
        # X = X * 58 + digit, in base 256
        carry = digit
        for i in range(len(scratch) - 1, -1, -1):
            carry += scratch[i] * 58
            scratch[i] = carry & 0xFF
            carry >>= 8
        assert carry == 0

    zeros = len(text) - len(text.lstrip(_ZERO))
    return b"\x00" * zeros + bytes(scratch).lstrip(b"\x00")
