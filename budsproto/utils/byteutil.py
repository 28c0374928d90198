"""Small helpers for working with raw protocol bytes."""

from __future__ import annotations

from collections.abc import Sequence


def to_u8(b: int) -> int:
    """Return ``b`` as an unsigned byte value."""
    return b & 0xFF


def value_of_left(b: int) -> int:
    """Return the high nibble of a byte (the left earbud's value)."""
    return (b & 0xF0) >> 4


def value_of_right(b: int) -> int:
    """Return the low nibble of a byte (the right earbud's value)."""
    return b & 0x0F


def from_short(i: int) -> bytes:
    """Encode the low 16 bits of ``i`` as two little-endian bytes."""
    return bytes((i & 0xFF, (i >> 8) & 0xFF))


def to_short(data: Sequence[int], offset: int) -> int:
    """Decode a signed little-endian 16-bit value starting at ``offset``."""
    if offset < 0 or offset + 2 > len(data):
        raise IndexError(f"cannot read a short at offset {offset} of {len(data)} bytes")
    return int.from_bytes(bytes(data[offset : offset + 2]), "little", signed=True)


def calc_current(value: int) -> float:
    """Scale a raw current reading and cut its decimal text to six characters."""
    current = value * 1.0e-4
    formatted = repr(current)
    if len(formatted) > 6:
        try:
            return float(formatted[:6])
        except ValueError:
            return current
    return current


def to_serial_number(data: Sequence[int], offset: int, length: int) -> str:
    """Read a serial number of ``length`` bytes.

    Returns an empty string if any byte is zero or the bytes are not UTF-8.
    """
    if offset < 0 or offset + length > len(data):
        raise IndexError(
            f"cannot read {length} bytes at offset {offset} of {len(data)} bytes"
        )
    raw = bytes(data[offset : offset + length])
    if 0 in raw:
        return ""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return ""