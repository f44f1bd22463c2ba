"""Byte-order swapping and little/big-endian integer I/O on binary streams."""

from __future__ import annotations

from typing import BinaryIO


def endian_swap16(value: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    value &= 0xFFFF
    return ((value >> 8) | (value << 8)) & 0xFFFF


def endian_swap32(value: int) -> int:
    """Reverse the four bytes of a 32-bit value."""
    value &= 0xFFFFFFFF
    return (
        (value >> 24)
        | ((value << 8) & 0x00FF0000)
        | ((value >> 8) & 0x0000FF00)
        | ((value << 24) & 0xFF000000)
    )


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_le_int16(stream: BinaryIO) -> int:
    """Read a signed little-endian 16-bit integer."""
    return int.from_bytes(_read_exact(stream, 2), "little", signed=True)


def read_le_int32(stream: BinaryIO) -> int:
    """Read a signed little-endian 32-bit integer."""
    return int.from_bytes(_read_exact(stream, 4), "little", signed=True)


def write_big_endian(stream: BinaryIO, value: int, size: int) -> int:
    """Write ``value`` as ``size`` big-endian bytes; return bytes written."""
    return stream.write(value.to_bytes(size, "big", signed=value < 0))


def write_little_endian(stream: BinaryIO, value: int, size: int) -> int:
    """Write ``value`` as ``size`` little-endian bytes; return bytes written."""
    return stream.write(value.to_bytes(size, "little", signed=value < 0))