"""The extended status notification, whose layout depends on the device model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..model import Model
from . import ids
from .base import Message, Payload
from .bud_property import AmbientType, EqualizerType, Placement, Side, TouchpadOption
from .bytebuff import ByteBuffer

DEVICE_COLOR_BLACK = 2
DEVICE_COLOR_PINK = 4
DEVICE_COLOR_WHITE = 0
DEVICE_COLOR_YELLOW = 3
TYPE_KERNEL = 0
TYPE_OPEN = 1


def _signed_byte(b: int) -> int:
    return ((b & 0xFF) ^ 0x80) - 0x80


@dataclass(frozen=True)
class ExtTapLockStatus:
    """Which touch gestures stay enabled while the touchpad lock is extended."""

    touch_an_hold_on: bool = False
    triple_tap_on: bool = False
    double_tap_on: bool = False
    tap_on: bool = False
    touch_controls_on: bool = False


@dataclass(frozen=True)
class ExtendedStatusUpdate(Payload):
    """Full device state reported by the earbuds."""

    revision: int
    ear_type: int
    battery_left: int
    battery_right: int
    coupled: bool
    primary_earbud: Side
    placement_left: Placement
    placement_right: Placement
    wearing_left: bool
    wearing_right: bool
    battery_case: int
    adjust_sound_sync: bool
    equalizer_type: EqualizerType
    touchpads_blocked: bool
    touchpad_option_left: TouchpadOption
    touchpad_option_right: TouchpadOption
    noise_reduction: bool
    voice_wake_up: bool
    color_left: int
    color_right: int
    ambient_sound_enabled: bool = False
    ambient_sound_volume: int = 0
    extra_high_ambient: bool = False
    ambient_mode: AmbientType = AmbientType.NORMAL
    outside_double_tap: bool = False
    tap_lock_status: ExtTapLockStatus = field(default_factory=ExtTapLockStatus)

    @classmethod
    def parse(cls, payload: Sequence[int], model: Model) -> ExtendedStatusUpdate:
        """Decode a payload sent by a device of ``model``.

        Raises ``ValueError`` for models whose layout is not known.
        """
        buff = ByteBuffer(payload)
        if model is Model.BUDS_LIVE:
            fields = _common(buff)
            fields.update(_settings(buff, base=8))
            fields.update(
                noise_reduction=buff.get_bool(12),
                voice_wake_up=buff.get_bool(13),
                color_left=buff.get_short(14),
                color_right=buff.get_short(16),
            )
        elif model is Model.BUDS_PLUS:
            revision = buff.get(0)
            fields = _common(buff)
            fields.update(_settings(buff, base=10))
            fields.update(
                noise_reduction=False,
                voice_wake_up=False,
                color_left=buff.get_short(15),
                color_right=buff.get_short(17),
                ambient_sound_enabled=buff.get_bool(8),
                ambient_sound_volume=buff.get(9),
                extra_high_ambient=buff.get_bool(19) if revision >= 9 else False,
            )
        elif model in (Model.BUDS_PRO, Model.BUDS_PRO2):
            revision = buff.get(0)
            if revision < 3:
                extra_high = buff.get_bool(22)
            elif revision >= 6:
                extra_high = buff.get_bool(30)
            else:
                extra_high = False
            fields = _common(buff)
            fields.update(_settings(buff, base=8))
            fields.update(
                noise_reduction=buff.get_bool(12),
                voice_wake_up=buff.get_bool(13),
                color_left=buff.get_short(14),
                color_right=buff.get_short(16),
                ambient_sound_volume=buff.get(23),
                extra_high_ambient=extra_high,
            )
        elif model is Model.BUDS2:
            fields = _common(buff)
            fields.update(_settings(buff, base=8))
            fields.update(
                noise_reduction=buff.get_bool(12),
                voice_wake_up=buff.get_bool(13),
                color_left=buff.get_short(14),
                color_right=buff.get_short(16),
                ambient_sound_volume=buff.get(23),
                extra_high_ambient=buff.get_bool(26),
                outside_double_tap=buff.get_bool(32),
                tap_lock_status=ExtTapLockStatus(
                    touch_an_hold_on=buff.bin_digit_bool(10, 0),
                    triple_tap_on=buff.bin_digit_bool(10, 1),
                    double_tap_on=buff.bin_digit_bool(10, 2),
                    tap_on=buff.bin_digit_bool(10, 3),
                    touch_controls_on=buff.bin_digit_bool(10, 7),
                ),
            )
        else:
            raise ValueError(f"extended status is not supported for {model}")
        return cls(**fields)

    @classmethod
    def from_message(cls, message: Message) -> ExtendedStatusUpdate:
        return cls.parse(message.payload_bytes(), message.model)

    def message_id(self) -> int:
        return ids.EXTENDED_STATUS_UPDATED


def _common(buff: ByteBuffer) -> dict[str, Any]:
    placement_left = Placement.value(buff.get(6), Side.LEFT)
    placement_right = Placement.value(buff.get(6), Side.RIGHT)
    return {
        "revision": buff.get(0),
        "ear_type": buff.get(1),
        "battery_left": _signed_byte(buff.get(2)),
        "battery_right": _signed_byte(buff.get(3)),
        "coupled": buff.get_bool(4),
        "primary_earbud": Side.from_bool(buff.get_bool(5)),
        "placement_left": placement_left,
        "placement_right": placement_right,
        "wearing_left": placement_left is Placement.EAR,
        "wearing_right": placement_right is Placement.EAR,
        "battery_case": _signed_byte(buff.get(7)),
    }


def _settings(buff: ByteBuffer, base: int) -> dict[str, Any]:
    """Sound sync, equalizer, touchpad lock and options at consecutive offsets."""
    option = buff.get(base + 3)
    return {
        "adjust_sound_sync": buff.get_bool(base),
        "equalizer_type": EqualizerType.decode(buff.get(base + 1)),
        "touchpads_blocked": buff.get_bool(base + 2),
        "touchpad_option_left": TouchpadOption.value(option, Side.LEFT),
        "touchpad_option_right": TouchpadOption.value(option, Side.RIGHT),
    }