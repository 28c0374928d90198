"""Command payloads sent to the earbuds."""

from __future__ import annotations

from dataclasses import dataclass

from . import ids
from .base import Payload
from .bud_property import TouchpadOption


@dataclass
class FindMyBud(Payload):
    """Start or stop the find-my-earbuds sound; resend with ``start=False`` to stop."""

    start: bool

    def message_id(self) -> int:
        return ids.FIND_MY_EARBUDS_START if self.start else ids.FIND_MY_EARBUDS_STOP


@dataclass
class MuteEarbud(Payload):
    """Mute one side while find-my-earbuds is running."""

    left_muted: bool
    right_muted: bool

    def message_id(self) -> int:
        return ids.MUTE_EARBUD

    def data(self) -> bytes:
        return bytes([int(self.left_muted), int(self.right_muted)])


@dataclass(frozen=True)
class SetNoiseReduction(Payload):
    """Enable or disable active noise cancelling."""

    noise_reduction: bool

    def message_id(self) -> int:
        return ids.SET_NOISE_REDUCTION

    def data(self) -> bytes:
        return bytes([int(self.noise_reduction)])


@dataclass(frozen=True)
class SetTouchpadOption(Payload):
    """Set the touch-and-hold action of each earbud."""

    left_option: TouchpadOption
    right_option: TouchpadOption

    def message_id(self) -> int:
        return ids.SET_TOUCHPAD_OPTION

    def data(self) -> bytes:
        return bytes([self.left_option.encode(), self.right_option.encode()])


@dataclass(frozen=True)
class SetManagerInfo(Payload):
    """Tell the earbuds about the managing client."""

    is_samsung_device: bool
    android_sdk: int
    client_type: int = 1  # 1 is the wearable app; other values are unknown

    @classmethod
    def create(cls, is_samsung_device: bool, android_sdk: int) -> SetManagerInfo:
        return cls(is_samsung_device, android_sdk, client_type=1)

    def message_id(self) -> int:
        return ids.MANAGER_INFO

    def data(self) -> bytes:
        return bytes(
            [self.client_type, 1 if self.is_samsung_device else 2, self.android_sdk]
        )


@dataclass(frozen=True)
class SetAmbientVolume(Payload):
    """Set the ambient volume level, from 1 (lowest) to 4 (highest)."""

    new_volume_lvl: int

    def message_id(self) -> int:
        return ids.AMBIENT_VOLUME

    def data(self) -> bytes:
        if self.new_volume_lvl < 1:
            raise ValueError(f"volume level must be at least 1, got {self.new_volume_lvl}")
        # The earbuds count levels from zero.
        return bytes([self.new_volume_lvl - 1])


@dataclass(frozen=True)
class SetAmbientMode(Payload):
    enabled: bool

    def message_id(self) -> int:
        return ids.SET_AMBIENT_MODE

    def data(self) -> bytes:
        return bytes([1 if self.enabled else 0])


@dataclass(frozen=True)
class SetExtraHighVolume(Payload):
    enabled: bool

    def message_id(self) -> int:
        return ids.EXTRA_HIGH_AMBIENT

    def data(self) -> bytes:
        return bytes([1 if self.enabled else 0])