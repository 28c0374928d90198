# budsproto

A pure Python library for building and parsing the messages exchanged with
Galaxy Buds earbuds over their RFCOMM serial channel. It has no dependencies
outside the standard library.

## Installing

```
pip install budsproto
```

## Sending commands

Every command is a `Payload` (from `budsproto.message.base`). Its `to_bytes()`
method returns the whole frame: start marker, header, message id, payload
data, CRC16 checksum and end marker.

```python
from budsproto.message.bud_property import EqualizerType
from budsproto.message.commands import FindMyBud, MuteEarbud
from budsproto.message.lock_touchpad import LockTouchpad
from budsproto.message.simple import new_equalizer

sock.send(LockTouchpad(lock=True).to_bytes())
sock.send(new_equalizer(EqualizerType.BASS_BOOST).to_bytes())

sock.send(FindMyBud(start=True).to_bytes())      # start beeping
sock.send(MuteEarbud(True, False).to_bytes())    # silence the left bud
sock.send(FindMyBud(start=False).to_bytes())     # stop
```

Available commands:

- `budsproto.message.commands`: `FindMyBud`, `MuteEarbud`,
  `SetNoiseReduction`, `SetTouchpadOption`, `SetManagerInfo`
  (`SetManagerInfo.create(is_samsung_device, android_sdk)`),
  `SetAmbientVolume` (level 1 to 4; a level below 1 raises `ValueError`),
  `SetAmbientMode`, `SetExtraHighVolume`.
- `budsproto.message.lock_touchpad`: `LockTouchpad` and `ExtLockTouchpad`,
  which can be built from a reported status with
  `ExtLockTouchpad.from_tap_lock_status(...)`.
- `budsproto.message.simple`: the one-byte `Simple` message and
  `new_equalizer`, `new_adjust_sound_sync`, `new_voice_noti_prepare`,
  `new_fit_check`, `new_response` and the ready-made responses
  `new_status_updated_response`, `new_extended_status_updated_response`,
  `new_version_info_response`, `new_voice_wake_up_event_response`.
- `budsproto.message.debug`: `DebugRequest(DebugVariant.SERIAL_NUMBER)`,
  `DebugVariant.GET_ALL_DATA` or `DebugVariant.SKU`.
- `budsproto.message.usage_report`: `UsageReportRequest()`.

Message ids are plain integers in `budsproto.message.ids`.

## Reading updates

Wrap received bytes in a `Message` together with the device model, check it,
and pass it to the parser for its id.

```python
from budsproto.message import ids
from budsproto.message.base import Message
from budsproto.message.extended_status import ExtendedStatusUpdate
from budsproto.message.updates import StatusUpdate, TouchAction
from budsproto.model import Model

message = Message(sock.recv(2048), Model.BUDS_LIVE)
if message.is_message() and message.check_crc():
    if message.id() == ids.STATUS_UPDATED:
        print(StatusUpdate.from_message(message))
    elif message.id() == ids.TOUCHPAD_ACTION:
        print(TouchAction.from_message(message))
    elif message.id() == ids.EXTENDED_STATUS_UPDATED:
        print(ExtendedStatusUpdate.from_message(message))
```

`Message` also offers `header()`, `payload_length()`, `is_fragment()`,
`is_response()` and `payload_bytes()`.

Parsers (each has `parse(payload)` and `from_message(message)`):

- `budsproto.message.updates`: `StatusUpdate`, `TouchAction`,
  `TouchUpdated`, `AmbientModeUpdated`, `AncModeUpdated`,
  `VoiceWakeUpListeningStatus`.
- `budsproto.message.extended_status`: `ExtendedStatusUpdate`, whose layout
  depends on the model. `parse(payload, model)` raises `ValueError` for
  `Model.BUDS`, whose layout is not known.
- `budsproto.message.debug`: `GetAllData` (returns `None` for `Model.BUDS`
  and `Model.BUDS_PRO2`; per-side readings through methods such as
  `bt_address(Side.LEFT)` or `thermistor(Side.RIGHT)`), `SerialNumber`, `Sku`.
- `budsproto.message.usage_report`: `UsageReport.parse(payload)` returns a
  report whose `data` maps counter names to values, or `None` when the length
  does not match the entry count.

Per-earbud values such as `Placement`, `TouchpadOption`, `EqualizerType` and
`AmbientType`, and the `Side` enum, are in `budsproto.message.bud_property`.

## Models and features

```python
from budsproto.model import Feature, Model

Model.BUDS_PRO.full_name()             # "Galaxy Buds Pro"
Model.BUDS2.has_feature(Feature.ANC)   # True
Model.BUDS_LIVE.features()             # list of Feature members
```

## Helpers

`budsproto.utils.crc16` provides `crc16_ccitt(data, length)` and
`crc16_ccitt_range(data, start, end)`; `budsproto.utils.byteutil` holds the
byte-level helpers used by the parsers.

## What it does not do

The package deals only with bytes. It does not open Bluetooth connections,
discover devices, split a stream of incoming bytes into frames, or offer a
command-line tool. Open the RFCOMM socket yourself; on Linux a standard
`socket.socket(socket.AF_BLUETOOTH, socket.SOCK_STREAM, socket.BTPROTO_RFCOMM)`
works.