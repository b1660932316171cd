import pytest

from microqr.bitstream import BitStream


def test_new_stream_is_empty():
    stream = BitStream()
    assert len(stream) == 0
    assert stream.to_bytes() == b""


def test_init_with_bits():
    stream = BitStream([1, 0, 1, 1])
    assert list(stream) == [1, 0, 1, 1]


def test_init_rejects_non_bits():
    with pytest.raises(ValueError):
        BitStream([0, 2])


def test_append_num_msb_first():
    stream = BitStream()
    stream.append_num(4, 0b1010)
    assert list(stream) == [1, 0, 1, 0]


def test_append_num_zero_bits_is_noop():
    stream = BitStream([1])
    stream.append_num(0, 0xFF)
    assert list(stream) == [1]


def test_append_num_negative_bits():
    with pytest.raises(ValueError):
        BitStream().append_num(-1, 1)


def test_append_num_full_byte_round_trip():
    stream = BitStream()
    stream.append_num(8, 0xA5)
    assert stream.to_bytes() == bytes([0xA5])


def test_append_bytes_round_trip():
    data = b"Hello, QR!\x00\xff"
    stream = BitStream()
    stream.append_bytes(data)
    assert len(stream) == len(data) * 8
    assert stream.to_bytes() == data


def test_append_empty_bytes():
    stream = BitStream([1, 1])
    stream.append_bytes(b"")
    assert len(stream) == 2


def test_to_bytes_pads_odd_bits():
    stream = BitStream([1, 0, 1])
    assert stream.to_bytes() == b"\xa0"


def test_to_bytes_length_rounds_up():
    stream = BitStream([1] * 13)
    assert len(stream.to_bytes()) == 2


def test_append_stream():
    first = BitStream([1, 0])
    second = BitStream([0, 1, 1])
    first.append(second)
    assert list(first) == [1, 0, 0, 1, 1]
    assert list(second) == [0, 1, 1]


def test_append_requires_stream():
    with pytest.raises(TypeError):
        BitStream().append(None)


def test_append_empty_stream():
    stream = BitStream([1])
    stream.append(BitStream())
    assert list(stream) == [1]


def test_reset_clears():
    stream = BitStream([1, 0, 1])
    stream.reset()
    assert len(stream) == 0
    stream.append_num(2, 3)
    assert list(stream) == [1, 1]


def test_equality():
    a = BitStream()
    a.append_bytes(b"\x0f")
    b = BitStream([0, 0, 0, 0, 1, 1, 1, 1])
    assert a == b


def test_large_append_grows():
    stream = BitStream()
    data = bytes(range(256)) * 2
    stream.append_bytes(data)
    assert len(stream) == 4096
    assert stream.to_bytes() == data