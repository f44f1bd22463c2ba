import io

import pytest

from swipekit.endian import (
    endian_swap16,
    endian_swap32,
    read_le_int16,
    read_le_int32,
    write_big_endian,
    write_little_endian,
)


def test_swap16_pinned():
    assert endian_swap16(0x1234) == 0x3412


def test_swap32_pinned():
    assert endian_swap32(0x12345678) == 0x78563412


@pytest.mark.parametrize("value", [0, 1, 0xFF, 0x1234, 0xFFFF, 0xABCD])
def test_swap16_is_involution(value):
    assert endian_swap16(endian_swap16(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0xFF00FF00, 0x12345678, 0xFFFFFFFF])
def test_swap32_is_involution(value):
    assert endian_swap32(endian_swap32(value)) == value


def test_write_little_endian_bytes():
    buf = io.BytesIO()
    assert write_little_endian(buf, 0x1234, 2) == 2
    assert buf.getvalue() == b"\x34\x12"


@pytest.mark.parametrize("value,size", [(0x1234, 2), (0x12345678, 4), (7, 4)])
def test_big_endian_is_reverse_of_little(value, size):
    le, be = io.BytesIO(), io.BytesIO()
    write_little_endian(le, value, size)
    write_big_endian(be, value, size)
    assert be.getvalue() == le.getvalue()[::-1]


@pytest.mark.parametrize("value", [0, 1, -1, -2, 32767, -32768])
def test_int16_round_trip(value):
    buf = io.BytesIO()
    write_little_endian(buf, value, 2)
    buf.seek(0)
    assert read_le_int16(buf) == value


@pytest.mark.parametrize("value", [0, 1, -1, 2**31 - 1, -(2**31), 123456])
def test_int32_round_trip(value):
    buf = io.BytesIO()
    write_little_endian(buf, value, 4)
    buf.seek(0)
    assert read_le_int32(buf) == value


def test_short_read_raises():
    with pytest.raises(EOFError):
        read_le_int32(io.BytesIO(b"\x01\x02"))