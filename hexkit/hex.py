"""
Conversion between binary data and hex strings.

This module provides:
- to_hex / to_hex_multiple: bytes to lowercase hex, no prefix
- from_hex: validated hex to bytes, accepting surrounding whitespace
  and an optional 0x prefix
- Hex: the protocol for types that round-trip through hex
- serialize_to_hex: emit a Hex value through a serializer sink

Error precedence in from_hex is fixed: an odd length is reported before
non-ASCII input, which is reported before any bad digit.
"""
from __future__ import annotations

import string
from typing import Any, Iterable, Protocol, TypeVar, runtime_checkable

from .errors import HexConversionError, InvalidCharacter, LengthError

_HEX_DIGITS = frozenset(string.hexdigits)

# Unicode White_Space. str.strip() with no argument also drops U+001C..U+001F.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

H = TypeVar("H", bound="Hex")


@runtime_checkable
class Hex(Protocol):
    """
    Protocol for types that can represent themselves as a hex string
    and be rebuilt from one.

    Implementations usually delegate to their own byte form plus the
    module level to_hex() / from_hex().
    """

    @classmethod
    def from_hex(cls: type[H], hex_str: str) -> H:
        """
        Build an instance from a hex string.

        Raises:
            HexError: incorrect string length, non hex characters,
                or a value the type cannot represent
        """
        ...

    def to_hex(self) -> str:
        """Return the hex string representation of the value."""
        ...


@runtime_checkable
class Serializer(Protocol):
    """Sink of a structured serialization framework that accepts string scalars."""

    def serialize_str(self, value: str) -> Any:
        ...


class ScalarSerializer:
    """Serializer sink that hands the string straight back."""

    def serialize_str(self, value: str) -> str:
        return value


def _format_byte(byte: int) -> str:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte must be in range(0, 256), got {byte!r}")
    return format(byte, "02x")


def to_hex(data: bytes | bytearray | memoryview | Iterable[int]) -> str:
    """
    Encode bytes into a lowercase hex string without prefix.

    Args:
        data: bytes-like object or any iterable of ints in 0..255

    Raises:
        ValueError: an int from an iterable is outside 0..255

    Returns:
        Two hex digits per byte, e.g. "0a0b0c0d"

    Example:
        >>> to_hex([10, 11, 12, 13])
        '0a0b0c0d'
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).hex()
    return "".join(_format_byte(byte) for byte in data)


def to_hex_multiple(sequences: Iterable[bytes | bytearray | Iterable[int]]) -> list[str]:
    """Encode each byte sequence in order, one hex string per sequence."""
    return [to_hex(seq) for seq in sequences]


def _parse_byte(pair: str) -> int:
    # int(..., 16) would also accept signs, underscores and padding
    if not all(c in _HEX_DIGITS for c in pair):
        raise ValueError(f"invalid digit found in base 16 byte: {pair!r}")
    return int(pair, 16)


def from_hex(hex_str: str) -> bytes:
    """
    Decode a hex string into bytes.

    Leading/trailing whitespace is ignored and a single "0x" prefix is
    dropped. Upper case digits are accepted.

    Args:
        hex_str: Hex string, e.g. "0x800000ff"

    Returns:
        Decoded bytes

    Raises:
        LengthError: odd number of UTF-8 bytes after trimming
        HexConversionError: input contains non-ASCII characters
        InvalidCharacter: a character pair is not valid base 16
    """
    hex_trim = hex_str.strip(_WHITESPACE)
    encoded_len = len(hex_trim.encode("utf-8", "surrogatepass"))
    if encoded_len % 2 == 1:
        raise LengthError(details={"length": encoded_len})
    if not hex_str.isascii():
        raise HexConversionError(details={"reason": "non-ascii input"})
    if hex_trim[:2] == "0x":
        hex_trim = hex_trim[2:]

    result = bytearray(len(hex_trim) // 2)
    for i in range(len(result)):
        pair = hex_trim[2 * i:2 * (i + 1)]
        try:
            result[i] = _parse_byte(pair)
        except ValueError as e:
            raise InvalidCharacter(
                cause=e,
                details={"position": 2 * i, "pair": pair},
            ) from e
    return bytes(result)


def serialize_to_hex(value: Hex, serializer: Serializer) -> Any:
    """
    Write the hex string of a Hex value through a serializer sink.

    Returns whatever the sink's serialize_str() returns.
    """
    return serializer.serialize_str(value.to_hex())


__all__ = [
    "Hex",
    "Serializer",
    "ScalarSerializer",
    "to_hex",
    "to_hex_multiple",
    "from_hex",
    "serialize_to_hex",
]
