"""Status notifications sent by the earbuds."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from . import ids
from .base import Message, Payload
from .bud_property import Placement, Side


def _signed_byte(b: int) -> int:
    return ((b & 0xFF) ^ 0x80) - 0x80


@dataclass(frozen=True)
class AmbientModeUpdated(Payload):
    """Whether the earbuds switched ambient mode themselves."""

    ambient_mode: bool

    @classmethod
    def parse(cls, payload: Sequence[int]) -> AmbientModeUpdated:
        return cls(payload[0] == 1)

    @classmethod
    def from_message(cls, message: Message) -> AmbientModeUpdated:
        return cls.parse(message.payload_bytes())

    def message_id(self) -> int:
        return ids.AMBIENT_MODE_UPDATED


@dataclass(frozen=True)
class AncModeUpdated(Payload):
    """Whether noise cancelling was changed by a touchpad event."""

    anc_enabled: bool

    @classmethod
    def parse(cls, payload: Sequence[int]) -> AncModeUpdated:
        return cls(payload[0] == 1)

    @classmethod
    def from_message(cls, message: Message) -> AncModeUpdated:
        return cls.parse(message.payload_bytes())

    def message_id(self) -> int:
        return ids.NOISE_REDUCTION_MODE_UPDATE


@dataclass(frozen=True)
class StatusUpdate(Payload):
    """Battery levels and placement of both earbuds."""

    revision: int
    battery_left: int
    battery_right: int
    coupled: bool
    primary_earbud: int
    placement_left: Placement
    placement_right: Placement
    wearing_left: bool
    wearing_right: bool
    battery_case: int

    @classmethod
    def parse(cls, payload: Sequence[int]) -> StatusUpdate:
        placement_left = Placement.value(payload[5], Side.LEFT)
        placement_right = Placement.value(payload[5], Side.RIGHT)
        return cls(
            revision=payload[0],
            battery_left=_signed_byte(payload[1]),
            battery_right=_signed_byte(payload[2]),
            coupled=payload[3] == 1,
            primary_earbud=payload[4],
            placement_left=placement_left,
            placement_right=placement_right,
            wearing_left=placement_left is Placement.EAR,
            wearing_right=placement_right is Placement.EAR,
            battery_case=_signed_byte(payload[6]),
        )

    @classmethod
    def from_message(cls, message: Message) -> StatusUpdate:
        return cls.parse(message.payload_bytes())

    def message_id(self) -> int:
        return ids.STATUS_UPDATED


@dataclass(frozen=True)
class TouchUpdated(Payload):
    status: bool

    @classmethod
    def parse(cls, payload: Sequence[int]) -> TouchUpdated:
        return cls(payload[0] == 1)

    @classmethod
    def from_message(cls, message: Message) -> TouchUpdated:
        return cls.parse(message.payload_bytes())

    def message_id(self) -> int:
        return ids.TOUCH_UPDATED


@dataclass(frozen=True)
class TouchAction(Payload):
    """A tap on the touchpad of one earbud."""

    side: Side
    touch_count: int

    @classmethod
    def parse(cls, payload: Sequence[int]) -> TouchAction:
        side = Side.LEFT if payload[0] == 1 else Side.RIGHT
        return cls(side, payload[1])

    @classmethod
    def from_message(cls, message: Message) -> TouchAction:
        return cls.parse(message.payload_bytes())

    def message_id(self) -> int:
        return ids.TOUCHPAD_ACTION


@dataclass(frozen=True)
class VoiceWakeUpListeningStatus(Payload):
    voice_wakeup_listening_status: bool

    @classmethod
    def parse(cls, payload: Sequence[int]) -> VoiceWakeUpListeningStatus:
        return cls(payload[0] == 1)

    @classmethod
    def from_message(cls, message: Message) -> VoiceWakeUpListeningStatus:
        return cls.parse(message.payload_bytes())

    def message_id(self) -> int:
        return ids.VOICE_WAKE_UP_LISTENING_STATUS