import pytest

from blockhost.bytebuffer import ByteBuffer
from blockhost.varint import (
    decode_varint,
    decode_varlong,
    encode_varint,
    encode_varlong,
    encoding_length,
)

INT32_VALUES = [0, 1, 127, 128, 255, 300, 25565, 2097151, 2147483647, -1, -2147483648]
INT64_VALUES = INT32_VALUES + [9223372036854775807, -9223372036854775808, 1 << 40]


def test_encode_varint_wire_bytes():
    assert encode_varint(300) == b"\xac\x02"


def test_encode_negative_one_takes_five_bytes():
    assert encode_varint(-1) == b"\xff\xff\xff\xff\x0f"


def test_encode_max_int():
    assert encode_varint(2147483647) == b"\xff\xff\xff\xff\x07"


@pytest.mark.parametrize("value", INT32_VALUES)
def test_varint_round_trip(value):
    assert decode_varint(encode_varint(value)) == value


@pytest.mark.parametrize("value", INT64_VALUES)
def test_varlong_round_trip(value):
    assert decode_varlong(encode_varlong(value)) == value


@pytest.mark.parametrize("value", INT32_VALUES)
def test_varint_and_varlong_agree_for_non_negative(value):
    if value >= 0:
        assert encode_varint(value) == encode_varlong(value)
    else:
        assert len(encode_varlong(value)) > len(encode_varint(value))


@pytest.mark.parametrize("value", INT64_VALUES)
def test_encoding_length_matches_encoded_size(value):
    assert encoding_length(value) == len(encode_varlong(value))


@pytest.mark.parametrize("value", INT32_VALUES)
def test_only_last_byte_lacks_continue_bit(value):
    encoded = encode_varint(value)
    flags = [byte >> 7 for byte in encoded]
    assert flags == [1] * (len(encoded) - 1) + [0]


def test_decode_stops_after_last_byte():
    stream = iter(encode_varint(300) + bytes([5]))
    assert decode_varint(stream) == 300
    assert next(stream) == 5


def test_decode_from_buffer_consumes_only_the_varint():
    buffer = ByteBuffer(encode_varint(25565) + b"rest")
    assert decode_varint(buffer) == 25565
    assert buffer.data == b"rest"


def test_varint_too_big():
    with pytest.raises(ValueError, match="VarInt is too big"):
        decode_varint(b"\xff" * 5)


def test_varlong_too_big():
    with pytest.raises(ValueError, match="VarLong is too big"):
        decode_varlong(b"\xff" * 10)


def test_truncated_input():
    with pytest.raises(ValueError):
        decode_varint(encode_varint(300)[:1])


@pytest.mark.parametrize("value", [2147483648, -2147483649])
def test_varint_out_of_range(value):
    with pytest.raises(ValueError):
        encode_varint(value)


def test_varlong_out_of_range():
    with pytest.raises(ValueError):
        encode_varlong(1 << 63)