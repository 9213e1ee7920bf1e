"""Variable-length integer encoding used by the game protocol.

Values are written seven bits at a time, least significant group first, with
the high bit of each byte set while more bytes follow. Negative numbers are
encoded through their two's complement form, so a negative VarInt always
takes five bytes and a negative VarLong ten.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, Union, runtime_checkable

SEGMENT_BITS = 0x7F
CONTINUE_BIT = 0x80

_INT32_MIN, _INT32_MAX = -(1 << 31), (1 << 31) - 1
_INT64_MIN, _INT64_MAX = -(1 << 63), (1 << 63) - 1


@runtime_checkable
class ByteSource(Protocol):
    """Anything that hands out one unsigned byte at a time."""

    def read_ubyte(self) -> int: ...


Source = Union[ByteSource, Iterable[int]]


def _byte_reader(source: Source) -> Callable[[], int]:
    if isinstance(source, ByteSource):
        return source.read_ubyte
    iterator = iter(source)

    def read() -> int:
        try:
            return next(iterator)
        except StopIteration:
            raise ValueError("Input ended before the last byte of the variable-length integer") from None

    return read


def _encode(value: int, bits: int) -> bytes:
    value &= (1 << bits) - 1
    out = bytearray()
    while True:
        segment = value & SEGMENT_BITS
        value >>= 7
        if value == 0:
            out.append(segment)
            return bytes(out)
        out.append(segment | CONTINUE_BIT)


def _decode(source: Source, bits: int, name: str) -> int:
    read = _byte_reader(source)
    value = 0
    position = 0
    while True:
        current = read()
        value |= (current & SEGMENT_BITS) << position
        if not current & CONTINUE_BIT:
            break
        position += 7
        if position >= bits:
            raise ValueError(f"{name} is too big")
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def encode_varint(value: int) -> bytes:
    """Encode a signed 32-bit integer as a VarInt."""
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"VarInt value out of range: {value}")
    return _encode(value, 32)


def decode_varint(source: Source) -> int:
    """Read a VarInt from a byte source or an iterable of byte values."""
    return _decode(source, 32, "VarInt")


def encode_varlong(value: int) -> bytes:
    """Encode a signed 64-bit integer as a VarLong."""
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"VarLong value out of range: {value}")
    return _encode(value, 64)


def decode_varlong(source: Source) -> int:
    """Read a VarLong from a byte source or an iterable of byte values."""
    return _decode(source, 64, "VarLong")


def encoding_length(value: int) -> int:
    """Number of bytes the variable-length encoding of ``value`` takes."""
    if value < 0:
        value &= (1 << 64) - 1
    length = 1
    while value & ~SEGMENT_BITS:
        value >>= 7
        length += 1
    return length