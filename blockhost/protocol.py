"""Packet framing: connection states, packet decoding and encoding."""

from __future__ import annotations

import zlib
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union

from blockhost.bytebuffer import ByteBuffer
from blockhost.varint import CONTINUE_BIT, decode_varint, encode_varint

_MAX_VARINT_BYTES = 5


class ConnectionState(IntEnum):
    """Protocol phases; the values are the ones a handshake asks for."""

    HANDSHAKING = 0
    STATUS = 1
    LOGIN = 2
    CONFIGURATION = 3
    PLAY = 4


@dataclass
class Packet:
    """A decoded packet: its id and the payload that follows it."""

    packet_id: int
    payload: ByteBuffer = field(default_factory=ByteBuffer)


def _peek_varint(data: Union[bytes, bytearray]) -> Optional[tuple[int, int]]:
    """Decode a VarInt at the start of ``data`` without consuming it.

    Returns the value and its size in bytes, or None if more bytes are needed.
    """
    for index, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        if not byte & CONTINUE_BIT:
            return decode_varint(data[: index + 1]), index + 1
    if len(data) >= _MAX_VARINT_BYTES:
        raise ValueError("VarInt is too big")
    return None


class PacketDecoder:
    """Splits a stream of received bytes into packets.

    Set ``compressed`` once the peer has been told to compress; from then on
    every frame carries the uncompressed length before the packet id.
    """

    def __init__(self, compressed: bool = False) -> None:
        self.compressed = compressed
        self._pending = bytearray()

    @property
    def pending(self) -> int:
        """Number of received bytes not yet part of a complete packet."""
        return len(self._pending)

    def feed(self, data: Union[bytes, bytearray]) -> list[Packet]:
        """Add received bytes and return every packet they complete."""
        self._pending += data
        packets: list[Packet] = []
        while (packet := self._next_packet()) is not None:
            packets.append(packet)
        return packets

    def _next_packet(self) -> Optional[Packet]:
        header = _peek_varint(self._pending)
        if header is None:
            return None
        length, header_size = header
        if length < 0:
            raise ValueError(f"Invalid packet length: {length}")
        end = header_size + length
        if len(self._pending) < end:
            return None
        frame = ByteBuffer(self._pending[header_size:end])
        del self._pending[:end]
        if self.compressed:
            data_length = frame.read_varint()
            if data_length != 0:
                frame.decompress()
        packet_id = frame.read_varint()
        return Packet(packet_id, frame)


def encode_packet(
    packet_id: int,
    payload: Union[ByteBuffer, bytes, bytearray] = b"",
    compression_threshold: Optional[int] = None,
) -> bytes:
    """Frame a packet for sending.

    With ``compression_threshold`` None the frame is uncompressed. Otherwise
    payloads shorter than the threshold are sent with a zero data length and
    longer ones are deflated.
    """
    data = payload.data if isinstance(payload, ByteBuffer) else bytes(payload)
    body = encode_varint(packet_id) + data
    if compression_threshold is None:
        frame = body
    elif len(data) < compression_threshold:
        frame = encode_varint(0) + body
    else:
        frame = encode_varint(len(body)) + zlib.compress(body, zlib.Z_DEFAULT_COMPRESSION)
    return encode_varint(len(frame)) + frame