"""Touchpad lock commands."""

from __future__ import annotations

from dataclasses import dataclass

from . import ids
from .base import Payload
from .extended_status import ExtTapLockStatus


@dataclass(frozen=True)
class LockTouchpad(Payload):
    """Lock or unlock the touchpads."""

    lock: bool

    def message_id(self) -> int:
        return ids.LOCK_TOUCHPAD

    def data(self) -> bytes:
        return bytes([int(self.lock)])


@dataclass(frozen=True)
class ExtLockTouchpad(Payload):
    """Lock individual touch gestures on models with the extended lock."""

    double_tap: bool  # next track
    tap_on: bool  # play / pause
    touch_and_hold: bool  # custom action
    touch_controls: bool
    triple_tap: bool  # previous track

    @classmethod
    def from_tap_lock_status(cls, status: ExtTapLockStatus) -> ExtLockTouchpad:
        return cls(
            double_tap=status.double_tap_on,
            tap_on=status.tap_on,
            touch_and_hold=status.touch_an_hold_on,
            touch_controls=status.touch_controls_on,
            triple_tap=status.triple_tap_on,
        )

    def message_id(self) -> int:
        return ids.LOCK_TOUCHPAD

    def data(self) -> bytes:
        return bytes(
            [
                int(self.touch_controls),
                int(self.tap_on),
                int(self.double_tap),
                int(self.triple_tap),
                int(self.touch_and_hold),
                0,
                0,
            ]
        )