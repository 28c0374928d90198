"""Framing of protocol messages: outgoing payloads and received messages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..model import Model
from ..utils import byteutil
from ..utils.crc16 import crc16_ccitt

EOM = 221
"""End of message marker."""

BOM = 253
"""Begin of message marker."""

PAYLOAD_START_INDEX = 3

_LENGTH_MASK = 1023
_FRAGMENT_BIT = 8192
_RESPONSE_BIT = 4096
_RESPONSE_HEADER_FLAG = 16


class Payload(ABC):
    """Something that can be framed and sent to the earbuds."""

    @abstractmethod
    def message_id(self) -> int:
        """The message identifier."""

    def data(self) -> bytes:
        """The payload data encoded for sending."""
        return b""

    def is_response(self) -> bool:
        return False

    def to_bytes(self) -> bytes:
        """Build the complete frame: BOM, header, id, data, CRC, EOM."""
        body = bytes([self.message_id()]) + bytes(self.data())
        crc = crc16_ccitt(body, len(body))
        header = self.create_header(len(body) + 2)
        return (
            bytes([BOM])
            + header
            + body
            + crc.to_bytes(2, "little")
            + bytes([EOM])
        )

    def create_header(self, length: int) -> bytes:
        """Two header bytes carrying ``length`` and the response flag."""
        header = bytearray(byteutil.from_short(length & _LENGTH_MASK))
        if self.is_response():
            header[1] |= _RESPONSE_HEADER_FLAG
        return bytes(header)


class Message:
    """A raw message received from a device of a given model."""

    def __init__(self, data: Sequence[int], model: Model) -> None:
        self.data = bytes(data)
        self.model = model

    def __repr__(self) -> str:
        return f"Message(data={self.data!r}, model={self.model})"

    def header(self) -> int:
        """The 16-bit header of the message."""
        return (byteutil.to_u8(self.data[2]) << 8) + byteutil.to_u8(self.data[1])

    def payload_length(self) -> int:
        return self.header() & _LENGTH_MASK

    def is_fragment(self) -> bool:
        """Whether the message is a fragment; only firmware updates use them."""
        return self.header() & _FRAGMENT_BIT != 0

    def is_response(self) -> bool:
        return self.header() & _RESPONSE_BIT != 0

    def payload_bytes(self) -> bytes:
        """Everything after the message id."""
        return self.data[PAYLOAD_START_INDEX + 1 :]

    def id(self) -> int:
        return self.data[PAYLOAD_START_INDEX]

    def is_message(self) -> bool:
        """Whether the end marker sits where the header says it should."""
        index = self.payload_length() + PAYLOAD_START_INDEX
        return index < len(self.data) and self.data[index] == EOM

    def check_crc(self) -> bool:
        """Verify the trailing checksum of the message."""
        if len(self.data) < 5:
            return False
        body = bytearray(self.data[PAYLOAD_START_INDEX:-1])
        if len(body) < 2:
            return False
        body[-1], body[-2] = body[-2], body[-1]
        return crc16_ccitt(body, len(body)) == 0