"""Per-earbud property values and the earbud side."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..utils import byteutil

T = TypeVar("T")
P = TypeVar("P", bound="BudProperty")


class Side(Enum):
    """The side of an earbud."""

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_bool(cls, value: bool) -> Side:
        """``True`` means left, ``False`` means right."""
        return cls.LEFT if value else cls.RIGHT


def match_side(left: T, right: T, side: Side) -> T:
    """Pick ``left`` or ``right`` according to ``side``."""
    return left if side is Side.LEFT else right


class BudProperty(Enum):
    """A property whose member values are the wire codes.

    Subclasses decode unknown codes to a fallback member through ``_missing_``.
    """

    @classmethod
    def side_value(cls, value: int, side: Side) -> int:
        """The nibble of ``value`` that belongs to ``side``."""
        if side is Side.LEFT:
            return byteutil.value_of_left(value)
        return byteutil.value_of_right(value)

    @classmethod
    def value(cls: type[P], value: int, side: Side) -> P:  # type: ignore[override]
        """Decode the property of ``side`` from a packed byte."""
        return cls.decode(cls.side_value(value, side))

    @classmethod
    def decode(cls: type[P], value: int) -> P:
        return cls(value)

    def encode(self) -> int:
        return self._value_


class Placement(BudProperty):
    """Where an earbud currently is."""

    UNDETECTED = 0
    EAR = 1
    OUTSIDE = 2
    IN_OPEN_CASE = 3
    IN_CLOSE_CASE = 4

    @classmethod
    def _missing_(cls, value):
        return cls.UNDETECTED if isinstance(value, int) else None


class TouchpadOption(BudProperty):
    """The action bound to holding the touchpad."""

    UNDETECTED = 0
    VOICE_COMMAND = 1
    NOISE_CANCELING = 2
    VOLUME = 3
    SPOTIFY = 4
    CUSTOM = 5
    DISCONNECT = 6

    @classmethod
    def _missing_(cls, value):
        return cls.UNDETECTED if isinstance(value, int) else None


class EqualizerType(BudProperty):
    """The selected equalizer preset."""

    NORMAL = 0
    BASS_BOOST = 1
    SOFT = 2
    DYNAMIC = 3
    CLEAR = 4
    TREBLE_BOOST = 5
    UNDETECTED = 10

    @classmethod
    def _missing_(cls, value):
        return cls.UNDETECTED if isinstance(value, int) else None


class AmbientType(BudProperty):
    """The ambient sound mode."""

    NORMAL = 0
    VOICE_FOCUS = 1

    @classmethod
    def _missing_(cls, value):
        return cls.NORMAL if isinstance(value, int) else None