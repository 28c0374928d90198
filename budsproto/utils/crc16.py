"""CRC-16/CCITT checksum as used by the earbud protocol."""

from __future__ import annotations

from collections.abc import Sequence

_POLYNOMIAL = 0x1021


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            crc = ((crc << 1) ^ _POLYNOMIAL) if crc & 0x8000 else (crc << 1)
        table.append(crc & 0xFFFF)
    return tuple(table)


CRC16_TABLE = _build_table()


def _update(crc: int, data: Sequence[int]) -> int:
    for b in data:
        crc = CRC16_TABLE[((crc >> 8) ^ b) & 0xFF] ^ ((crc << 8) & 0xFFFF)
    return crc & 0xFFFF


def crc16_ccitt(data: Sequence[int], length: int) -> int:
    """Checksum of the first ``length`` bytes of ``data``."""
    if length < 0 or length > len(data):
        raise IndexError(f"length {length} out of range for {len(data)} bytes")
    return _update(0, data[:length])


def crc16_ccitt_range(data: Sequence[int], start: int, end: int) -> int:
    """Checksum of ``data[start:end]``."""
    if start < end and (start < 0 or end > len(data)):
        raise IndexError(f"range {start}..{end} out of range for {len(data)} bytes")
    return _update(0, data[start:end]) if start < end else 0