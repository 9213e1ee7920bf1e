"""A growable byte queue with typed readers and writers for the wire format."""

from __future__ import annotations

import struct
import uuid
import zlib
from collections.abc import Iterable
from typing import Union

from blockhost.varint import decode_varint, decode_varlong, encode_varint, encode_varlong


class BufferUnderflowError(ValueError):
    """Raised when a read needs more bytes than the buffer holds."""


class ByteBuffer:
    """Bytes written at the end and read from the front.

    Plain multi-byte writers use little-endian order; the ``be_`` variants use
    network (big-endian) order.
    """

    def __init__(self, data: Union[bytes, bytearray, Iterable[int]] = b"") -> None:
        self._data = bytearray(data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ByteBuffer({bytes(self._data)!r})"

    @property
    def data(self) -> bytes:
        """A copy of the bytes not yet read."""
        return bytes(self._data)

    def append(self, other: Union["ByteBuffer", bytes, bytearray]) -> None:
        """Add the contents of another buffer or bytes object to the end."""
        self._data += other.data if isinstance(other, ByteBuffer) else bytes(other)

    # -- primitives -------------------------------------------------------

    def _pack(self, fmt: str, value) -> None:
        try:
            self._data += struct.pack(fmt, value)
        except (struct.error, OverflowError) as err:
            raise ValueError(f"Cannot write {value!r}: {err}") from err

    def _take(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {size}")
        if len(self._data) < size:
            raise BufferUnderflowError("Buffer too small")
        chunk = bytes(self._data[:size])
        del self._data[:size]
        return chunk

    def _unpack(self, fmt: str):
        return struct.unpack(fmt, self._take(struct.calcsize(fmt)))[0]

    def _peek(self, fmt: str, offset: int):
        size = struct.calcsize(fmt)
        start = offset * size
        if offset < 0 or len(self._data) < start + size:
            raise BufferUnderflowError("Buffer too small")
        return struct.unpack_from(fmt, self._data, start)[0]

    # -- booleans and bytes -----------------------------------------------

    def write_boolean(self, value: bool) -> None:
        self.write_byte(1 if value else 0)

    def read_boolean(self) -> bool:
        return self.read_byte() == 1

    def write_byte(self, value: int) -> None:
        self._pack("<b", value)

    def read_byte(self) -> int:
        return self._unpack("<b")

    def peek_byte(self, offset: int = 0) -> int:
        return self._peek("<b", offset)

    def write_bytes(self, values: Iterable[int]) -> None:
        """Write signed byte values."""
        items = list(values)
        try:
            self._data += struct.pack(f"<{len(items)}b", *items)
        except struct.error as err:
            raise ValueError(f"Cannot write bytes: {err}") from err

    def read_bytes(self, count: int) -> list[int]:
        """Read ``count`` bytes as signed values."""
        raw = self._take(count)
        return list(struct.unpack(f"<{count}b", raw))

    def write_ubyte(self, value: int, offset: int | None = None) -> None:
        """Append an unsigned byte, or overwrite the byte at ``offset``.

        Writing past the end pads the buffer with zero bytes.
        """
        if offset is None:
            self._pack("<B", value)
            return
        if offset < 0:
            raise ValueError(f"Offset must not be negative: {offset}")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Cannot write {value!r} as an unsigned byte")
        if len(self._data) < offset + 1:
            self._data.extend(bytes(offset + 1 - len(self._data)))
        self._data[offset] = value

    def read_ubyte(self) -> int:
        return self._unpack("<B")

    def peek_ubyte(self, offset: int = 0) -> int:
        return self._peek("<B", offset)

    def write_ubytes(self, values: Union[bytes, bytearray, Iterable[int]]) -> None:
        self._data += bytes(values)

    def read_ubytes(self, count: int) -> bytes:
        return self._take(count)

    # -- integers ---------------------------------------------------------

    def write_short(self, value: int) -> None:
        self._pack("<h", value)

    def read_short(self) -> int:
        return self._unpack("<h")

    def write_be_short(self, value: int) -> None:
        self._pack(">h", value)

    def read_be_short(self) -> int:
        return self._unpack(">h")

    def write_ushort(self, value: int) -> None:
        self._pack("<H", value)

    def read_ushort(self) -> int:
        return self._unpack("<H")

    def write_be_ushort(self, value: int) -> None:
        self._pack(">H", value)

    def read_be_ushort(self) -> int:
        return self._unpack(">H")

    def write_int(self, value: int) -> None:
        self._pack("<i", value)

    def read_int(self) -> int:
        return self._unpack("<i")

    def write_be_int(self, value: int) -> None:
        self._pack(">i", value)

    def read_be_int(self) -> int:
        return self._unpack(">i")

    def write_uint(self, value: int) -> None:
        self._pack("<I", value)

    def read_uint(self) -> int:
        return self._unpack("<I")

    def write_be_uint(self, value: int) -> None:
        self._pack(">I", value)

    def read_be_uint(self) -> int:
        return self._unpack(">I")

    def write_long(self, value: int) -> None:
        self._pack("<q", value)

    def read_long(self) -> int:
        return self._unpack("<q")

    def write_be_long(self, value: int) -> None:
        self._pack(">q", value)

    def read_be_long(self) -> int:
        return self._unpack(">q")

    def write_ulong(self, value: int) -> None:
        self._pack("<Q", value)

    def read_ulong(self) -> int:
        return self._unpack("<Q")

    def write_be_ulong(self, value: int) -> None:
        self._pack(">Q", value)

    def read_be_ulong(self) -> int:
        return self._unpack(">Q")

    # -- floating point ---------------------------------------------------

    def write_float(self, value: float) -> None:
        self._pack("<f", value)

    def read_float(self) -> float:
        return self._unpack("<f")

    def write_be_float(self, value: float) -> None:
        self._pack(">f", value)

    def read_be_float(self) -> float:
        return self._unpack(">f")

    def write_double(self, value: float) -> None:
        self._pack("<d", value)

    def read_double(self) -> float:
        return self._unpack("<d")

    def write_be_double(self, value: float) -> None:
        self._pack(">d", value)

    def read_be_double(self) -> float:
        return self._unpack(">d")

    # -- strings ----------------------------------------------------------

    def write_string(self, value: str) -> None:
        """Write a VarInt byte length followed by the UTF-8 bytes."""
        encoded = value.encode("utf-8")
        self.write_varint(len(encoded))
        self._data += encoded

    def read_string(self) -> str:
        length = self.read_varint()
        if length <= 0:
            return ""
        return self.read_ubytes(length).decode("utf-8")

    def write_string_modified_utf8(self, value: str) -> None:
        """Write a big-endian length and the string in modified UTF-8.

        Each UTF-16 code unit is encoded separately, and NUL becomes the
        two-byte sequence C0 80.
        """
        raw = value.encode("utf-16-le", "surrogatepass")
        units = struct.unpack(f"<{len(raw) // 2}H", raw)
        encoded = bytearray()
        for unit in units:
            if 0x0001 <= unit <= 0x007F:
                encoded.append(unit)
            elif unit <= 0x07FF:
                encoded += bytes((0xC0 | (unit >> 6) & 0x1F, 0x80 | unit & 0x3F))
            else:
                encoded += bytes((
                    0xE0 | (unit >> 12) & 0x0F,
                    0x80 | (unit >> 6) & 0x3F,
                    0x80 | unit & 0x3F,
                ))
        if len(encoded) > 0xFFFF:
            raise ValueError("String too long for modified UTF-8 encoding")
        self.write_be_ushort(len(encoded))
        self._data += encoded

    def read_string_modified_utf8(self) -> str:
        length = self.read_be_ushort()
        raw = iter(self.read_ubytes(length))
        units: list[int] = []
        for first in raw:
            if first >> 4 == 0b1111 or first >> 6 == 0b10:
                raise ValueError("First byte in modified UTF-8 group did not match expected pattern.")
            if first >> 4 == 0b1110:
                second = next(raw, None)
                if second is None:
                    raise ValueError("Expected 2nd byte in 3-byte modified UTF-8 group, found only 1.")
                third = next(raw, None)
                if third is None:
                    raise ValueError("Expected 3rd byte in 3-byte modified UTF-8 group, found only 2.")
                if second >> 6 != 0b10 or third >> 6 != 0b10:
                    raise ValueError(
                        "2nd or 3rd byte in 3-byte modified UTF-8 group did not match expected pattern."
                    )
                units.append((first & 0x0F) << 12 | (second & 0x3F) << 6 | third & 0x3F)
            elif first >> 5 == 0b110:
                second = next(raw, None)
                if second is None:
                    raise ValueError("Expected 2nd byte in 2-byte modified UTF-8 group, found only 1.")
                if second >> 6 != 0b10:
                    raise ValueError("2nd byte in 2-byte modified UTF-8 group did not match expected pattern.")
                units.append((first & 0x1F) << 6 | second & 0x3F)
            else:
                units.append(first)
        return struct.pack(f"<{len(units)}H", *units).decode("utf-16-le", "surrogatepass")

    # -- variable-length integers -------------------------------------------

    def write_varint(self, value: int) -> None:
        self._data += encode_varint(value)

    def read_varint(self) -> int:
        return decode_varint(self)

    def write_varlong(self, value: int) -> None:
        self._data += encode_varlong(value)

    def read_varlong(self) -> int:
        return decode_varlong(self)

    # -- identifiers --------------------------------------------------------

    def write_uuid(self, value: uuid.UUID) -> None:
        self._data += value.bytes

    def read_uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes=self._take(16))

    # -- compression ----------------------------------------------------------

    def compress(self) -> None:
        """Replace the contents with their zlib-deflated form."""
        self._data = bytearray(zlib.compress(bytes(self._data), zlib.Z_DEFAULT_COMPRESSION))

    def decompress(self) -> None:
        """Replace zlib-deflated contents with the inflated bytes."""
        inflater = zlib.decompressobj()
        self._data = bytearray(inflater.decompress(bytes(self._data)))