"""Single-byte messages and the ready-made ones built on them."""

from __future__ import annotations

from dataclasses import dataclass

from . import ids
from .base import Payload
from .bud_property import EqualizerType


@dataclass(frozen=True)
class Simple(Payload):
    """A message carrying one data byte."""

    msg_id: int
    value: int
    response: bool = False

    def message_id(self) -> int:
        return self.msg_id

    def data(self) -> bytes:
        return bytes([self.value])

    def is_response(self) -> bool:
        return self.response


def new_response(message_id: int, data: int) -> Simple:
    return Simple(message_id, data, response=True)


def new_equalizer(equalizer: EqualizerType) -> Simple:
    return Simple(ids.EQUALIZER, equalizer.encode())


def new_adjust_sound_sync(adjust: bool) -> Simple:
    return Simple(ids.ADJUST_SOUND_SYNC, int(adjust))


def new_voice_noti_prepare(status: bool) -> Simple:
    return Simple(ids.VOICE_NOTI_STATUS, int(status))


def new_fit_check(run: bool) -> Simple:
    """Start or stop checking the fit of the earbuds."""
    return Simple(ids.CHECK_THE_FIT_OF_EARBUDS, 1 if run else 0)


def new_status_updated_response() -> Simple:
    return new_response(ids.STATUS_UPDATED, 0)


def new_extended_status_updated_response() -> Simple:
    return new_response(ids.EXTENDED_STATUS_UPDATED, 0)


def new_version_info_response() -> Simple:
    return new_response(ids.VERSION_INFO, 0)


def new_voice_wake_up_event_response() -> Simple:
    return new_response(ids.VOICE_WAKE_UP_EVENT, 0)