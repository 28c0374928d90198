import pytest

from budsproto.message.bytebuff import ByteBuffer
from budsproto.utils.byteutil import from_short


def test_len_and_get():
    buf = ByteBuffer([5, 6, 7])
    assert len(buf) == 3
    assert buf.get(0) == 5
    assert buf.get(2) == 7


def test_get_out_of_range():
    buf = ByteBuffer([1])
    with pytest.raises(IndexError):
        buf.get(1)
    with pytest.raises(IndexError):
        buf.get(-1)


def test_range():
    buf = ByteBuffer(b"abcdef")
    assert buf.range(1, 3) == b"bcd"
    with pytest.raises(IndexError):
        buf.range(4, 3)


def test_get_int_little_endian():
    assert ByteBuffer(b"\x01\x00\x00\x00").get_int(0) == 1


def test_get_int_round_trip():
    for value in (0, 255, 65536, 0xDEADBEEF, 0xFFFFFFFF):
        buf = ByteBuffer(b"\x00" + value.to_bytes(4, "little"))
        assert buf.get_int(1) == value


def test_get_int_too_short():
    with pytest.raises(IndexError):
        ByteBuffer(b"\x01\x02\x03").get_int(0)


def test_get_short_round_trip():
    for value in (-32768, -1, 0, 1, 32767):
        assert ByteBuffer(from_short(value)).get_short(0) == value


def test_get_bool_only_one_is_true():
    buf = ByteBuffer([0, 1, 2])
    assert buf.get_bool(0) is False
    assert buf.get_bool(1) is True
    assert buf.get_bool(2) is False


def test_bin_digits():
    buf = ByteBuffer([0b1000_0101])
    assert buf.bin_digit_bool(0, 0)
    assert not buf.bin_digit_bool(0, 1)
    assert buf.bin_digit_bool(0, 2)
    assert buf.bin_digit_bool(0, 7)
    assert buf.bin_digit_val(0, 1) == 0
    assert buf.bin_digit_val(0, 2) == 1 << 2


def test_hex_str():
    buf = ByteBuffer([0x00, 0xAA, 0xBB, 0x0C])
    assert buf.get_hex_str(1, 3) == "aa:bb:0c"
    assert buf.get_hex_str(0, 0) == ""


def test_hex_str_shape():
    buf = ByteBuffer(bytes(range(6)))
    text = buf.get_hex_str(0, 6)
    parts = text.split(":")
    assert len(parts) == 6
    assert bytes(int(p, 16) for p in parts) == bytes(range(6))