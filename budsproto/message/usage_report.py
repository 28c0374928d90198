"""Usage statistics reported by the earbuds."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from . import ids
from .base import Payload
from .bytebuff import ByteBuffer

_ENTRY_SIZE = 9
_KEY_SIZE = 5


@dataclass(frozen=True)
class UsageReport:
    """Counters keyed by five-character names."""

    data: dict[str, int] = field(default_factory=dict)

    @classmethod
    def parse(cls, payload: Sequence[int]) -> UsageReport | None:
        """Decode a report; ``None`` if its length does not match its entry count.

        Raises ``ValueError`` if a key is not valid UTF-8.
        """
        buff = ByteBuffer(payload)
        count = buff.get(0)
        if len(buff) - 1 != count * _ENTRY_SIZE:
            return None
        data: dict[str, int] = {}
        for pos in range(1, 1 + count * _ENTRY_SIZE, _ENTRY_SIZE):
            key = buff.range(pos, _KEY_SIZE).decode("utf-8")
            data[key] = buff.get_int(pos + _KEY_SIZE)
        return cls(data)


@dataclass(frozen=True)
class UsageReportRequest(Payload):
    """Ask the earbuds for their usage report."""

    def message_id(self) -> int:
        return ids.USAGE_REPORT

    def data(self) -> bytes:
        return bytes([0])