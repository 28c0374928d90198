"""Read-only view over a message payload with typed accessors."""

from __future__ import annotations

from collections.abc import Sequence

from ..utils import byteutil


class ByteBuffer:
    """Typed reads from a byte sequence at fixed offsets."""

    def __init__(self, data: Sequence[int]) -> None:
        self._data = bytes(data)

    def __len__(self) -> int:
        return len(self._data)

    def _check(self, offset: int, length: int) -> None:
        if offset < 0 or length < 0 or offset + length > len(self._data):
            raise IndexError(
                f"cannot read {length} bytes at offset {offset} of {len(self._data)}"
            )

    def range(self, offset: int, length: int) -> bytes:
        self._check(offset, length)
        return self._data[offset : offset + length]

    def get_int(self, offset: int) -> int:
        """Unsigned little-endian 32-bit value at ``offset``."""
        return int.from_bytes(self.range(offset, 4), "little")

    def get(self, offset: int) -> int:
        self._check(offset, 1)
        return self._data[offset]

    def get_short(self, offset: int) -> int:
        """Signed little-endian 16-bit value at ``offset``."""
        self._check(offset, 2)
        return byteutil.to_short(self._data, offset)

    def get_bool(self, offset: int) -> bool:
        return self.get(offset) == 1

    def bin_digit_val(self, offset: int, pos: int) -> int:
        return self.get(offset) & (1 << pos)

    def bin_digit_bool(self, offset: int, pos: int) -> bool:
        return self.bin_digit_val(offset, pos) != 0

    def get_hex_str(self, offset: int, length: int) -> str:
        """Bytes as lower-case hex pairs separated by colons."""
        return ":".join(f"{b:02x}" for b in self.range(offset, length))