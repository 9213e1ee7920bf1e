import pytest

from blockhost.bytebuffer import ByteBuffer
from blockhost.protocol import ConnectionState, Packet, PacketDecoder, encode_packet
from blockhost.varint import decode_varint, encode_varint


def test_uncompressed_wire_bytes():
    assert encode_packet(0, b"\x01\x02") == b"\x03\x00\x01\x02"


def test_uncompressed_round_trip():
    payload = b"hello world"
    packets = PacketDecoder().feed(encode_packet(0x2A, payload))
    assert len(packets) == 1
    assert packets[0].packet_id == 0x2A
    assert packets[0].payload.data == payload


def test_accepts_bytebuffer_payload():
    buffer = ByteBuffer()
    buffer.write_be_long(99)
    (packet,) = PacketDecoder().feed(encode_packet(1, buffer))
    assert packet.payload.read_be_long() == 99


def test_compressed_below_threshold_has_zero_data_length():
    encoded = encode_packet(3, b"abc", compression_threshold=256)
    source = iter(encoded)
    frame_length = decode_varint(source)
    assert frame_length == len(encoded) - 1
    assert decode_varint(source) == 0
    (packet,) = PacketDecoder(compressed=True).feed(encoded)
    assert packet.packet_id == 3
    assert packet.payload.data == b"abc"


def test_compressed_above_threshold_round_trip():
    payload = b"x" * 5000
    encoded = encode_packet(7, payload, compression_threshold=256)
    assert len(encoded) < len(payload)
    source = iter(encoded)
    decode_varint(source)
    assert decode_varint(source) == len(encode_varint(7)) + len(payload)
    (packet,) = PacketDecoder(compressed=True).feed(encoded)
    assert packet.packet_id == 7
    assert packet.payload.data == payload


def test_feed_byte_by_byte():
    encoded = encode_packet(5, b"payload")
    decoder = PacketDecoder()
    collected = []
    for byte in encoded[:-1]:
        collected.extend(decoder.feed(bytes([byte])))
    assert collected == []
    assert decoder.pending == len(encoded) - 1
    collected.extend(decoder.feed(encoded[-1:]))
    assert [packet.packet_id for packet in collected] == [5]
    assert decoder.pending == 0


def test_several_packets_in_one_feed():
    stream = encode_packet(0, b"a") + encode_packet(1, b"bb") + encode_packet(2, b"")
    packets = PacketDecoder().feed(stream)
    assert [(p.packet_id, p.payload.data) for p in packets] == [(0, b"a"), (1, b"bb"), (2, b"")]


def test_partial_trailing_packet_is_kept():
    first = encode_packet(1, b"one")
    second = encode_packet(2, b"two")
    decoder = PacketDecoder()
    packets = decoder.feed(first + second[:2])
    assert [p.packet_id for p in packets] == [1]
    assert decoder.pending == 2
    packets = decoder.feed(second[2:])
    assert [p.payload.data for p in packets] == [b"two"]


def test_compression_switched_on_midstream():
    decoder = PacketDecoder()
    assert decoder.feed(encode_packet(1, b"plain"))[0].payload.data == b"plain"
    decoder.compressed = True
    big = bytes(range(256)) * 4
    (packet,) = decoder.feed(encode_packet(2, big, compression_threshold=64))
    assert packet.payload.data == big


def test_oversized_length_prefix_raises():
    with pytest.raises(ValueError):
        PacketDecoder().feed(b"\xff\xff\xff\xff\xff\x01")


def test_negative_length_raises():
    with pytest.raises(ValueError):
        PacketDecoder().feed(encode_varint(-1))


def test_packet_defaults_to_empty_payload():
    packet = Packet(ConnectionState.LOGIN)
    assert packet.packet_id == 2
    assert len(packet.payload) == 0