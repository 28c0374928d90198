"""Debug requests and the diagnostic data the earbuds answer with."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..model import Model
from ..utils import byteutil
from . import ids
from .base import Message, Payload
from .bud_property import Side, match_side
from .bytebuff import ByteBuffer

_SERIAL_NUMBER_LENGTH = 11
_SKU_LENGTH = 14


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _scaled_f32(raw: int, factor: float) -> float:
    return _f32(_f32(raw) * _f32(factor))


class DebugVariant(Enum):
    """The kind of debug information to request; values are message ids."""

    SERIAL_NUMBER = ids.DEBUG_SERIAL_NUMBER
    GET_ALL_DATA = ids.DEBUG_GET_ALL_DATA
    SKU = ids.DEBUG_SKU


@dataclass(frozen=True)
class DebugRequest(Payload):
    """Ask the earbuds for a kind of debug information."""

    variant: DebugVariant

    def message_id(self) -> int:
        return self.variant.value

    def data(self) -> bytes:
        return b""


@dataclass(frozen=True)
class GetAllData:
    """Diagnostic readings of both earbuds."""

    msg_version: int = 0
    revision: int = 0
    hw_version: str = ""
    bt_address_right: str = ""
    bt_address_left: str = ""
    proximity_left: int = 0
    proximity_left_offset: int = 0
    proximity_right: int = 0
    proximity_right_offset: int = 0
    thermistor_left: float = 0.0
    thermistor_right: float = 0.0
    adc_soc_left: int = 0
    adc_vcell_left: float = 0.0
    adc_current_left: float = 0.0
    adc_soc_right: int = 0
    adc_vcell_right: float = 0.0
    adc_current_right: float = 0.0
    gyro_left_x: int = 0
    gyro_left_y: int = 0
    gyro_left_z: int = 0
    gyro_right_x: int = 0
    gyro_right_y: int = 0
    gyro_right_z: int = 0
    cradle_batt_left: int = 0
    cradle_batt_right: int = 0

    @classmethod
    def parse(cls, payload: Sequence[int], model: Model) -> GetAllData | None:
        """Decode the payload; ``None`` for models that do not report it."""
        buff = ByteBuffer(payload)
        version_byte = buff.get(1)
        revision = (version_byte & 0xF0) >> 4
        hw_version = f"rev{revision}{version_byte & 0x0F}"

        if model in (Model.BUDS, Model.BUDS_PRO2):
            return None

        fields = {
            "msg_version": buff.get(0),
            "revision": revision,
            "hw_version": hw_version,
            "bt_address_left": buff.get_hex_str(6, 6).upper(),
            "bt_address_right": buff.get_hex_str(12, 6).upper(),
            "proximity_left": buff.get_short(30),
            "proximity_left_offset": buff.get_short(32),
            "proximity_right": buff.get_short(34),
            "proximity_right_offset": buff.get_short(36),
            "thermistor_left": _scaled_f32(buff.get_short(38), 0.1),
            "thermistor_right": _scaled_f32(buff.get_short(40), 0.1),
            "adc_soc_left": buff.get_short(42),
            "adc_vcell_left": _scaled_f32(buff.get_short(44), 0.01),
            "adc_current_left": byteutil.calc_current(buff.get_short(46)),
            "adc_soc_right": buff.get_short(48),
            "adc_vcell_right": _scaled_f32(buff.get_short(50), 0.01),
            "adc_current_right": byteutil.calc_current(buff.get_short(52)),
            "cradle_batt_left": buff.get(82),
            "cradle_batt_right": buff.get(83),
        }

        if model is Model.BUDS_LIVE:
            fields.update(
                gyro_left_x=buff.get_short(84),
                gyro_left_y=buff.get_short(86),
                gyro_left_z=buff.get_short(88),
                gyro_right_x=buff.get_short(90),
                gyro_right_y=buff.get_short(92),
                gyro_right_z=buff.get_short(94),
            )

        return cls(**fields)

    @classmethod
    def from_message(cls, message: Message) -> GetAllData | None:
        return cls.parse(message.payload_bytes(), message.model)

    def bt_address(self, side: Side) -> str:
        return match_side(self.bt_address_left, self.bt_address_right, side)

    def proximity(self, side: Side) -> int:
        return match_side(self.proximity_left, self.proximity_right, side)

    def proximity_offset(self, side: Side) -> int:
        return match_side(self.proximity_left_offset, self.proximity_right_offset, side)

    def thermistor(self, side: Side) -> float:
        return match_side(self.thermistor_left, self.thermistor_right, side)

    def adc_soc(self, side: Side) -> int:
        return match_side(self.adc_soc_left, self.adc_soc_right, side)

    def adc_vcell(self, side: Side) -> float:
        return match_side(self.adc_vcell_left, self.adc_vcell_right, side)

    def adc_current(self, side: Side) -> float:
        return match_side(self.adc_current_left, self.adc_current_right, side)

    def cradle_battery(self, side: Side) -> int:
        return match_side(self.cradle_batt_left, self.cradle_batt_right, side)

    def gyro_x(self, side: Side) -> int:
        return match_side(self.gyro_left_x, self.gyro_right_x, side)

    def gyro_y(self, side: Side) -> int:
        return match_side(self.gyro_left_y, self.gyro_right_y, side)

    def gyro_z(self, side: Side) -> int:
        return match_side(self.gyro_left_z, self.gyro_right_z, side)


@dataclass(frozen=True)
class SerialNumber:
    """Serial numbers of both earbuds; empty where unavailable."""

    serial_number_left: str
    serial_number_right: str

    @classmethod
    def parse(cls, payload: Sequence[int]) -> SerialNumber:
        return cls(
            byteutil.to_serial_number(payload, 0, _SERIAL_NUMBER_LENGTH),
            byteutil.to_serial_number(
                payload, _SERIAL_NUMBER_LENGTH, _SERIAL_NUMBER_LENGTH
            ),
        )

    @classmethod
    def from_message(cls, message: Message) -> SerialNumber:
        return cls.parse(message.payload_bytes())


@dataclass(frozen=True)
class Sku:
    """Stock keeping units of both earbuds; empty where unavailable."""

    sku_left: str
    sku_right: str

    @classmethod
    def parse(cls, payload: Sequence[int]) -> Sku:
        return cls(
            byteutil.to_serial_number(payload, 0, _SKU_LENGTH),
            byteutil.to_serial_number(payload, _SKU_LENGTH, _SKU_LENGTH),
        )

    @classmethod
    def from_message(cls, message: Message) -> Sku:
        return cls.parse(message.payload_bytes())