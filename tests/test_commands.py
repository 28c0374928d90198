import pytest

from budsproto.message import ids
from budsproto.message.base import Message
from budsproto.message.bud_property import TouchpadOption
from budsproto.message.commands import (
    FindMyBud,
    MuteEarbud,
    SetAmbientMode,
    SetAmbientVolume,
    SetExtraHighVolume,
    SetManagerInfo,
    SetNoiseReduction,
    SetTouchpadOption,
)
from budsproto.model import Model


def test_find_my_bud_start_stop():
    find = FindMyBud(True)
    assert find.message_id() == ids.FIND_MY_EARBUDS_START
    assert find.data() == b""
    find.start = False
    assert find.message_id() == ids.FIND_MY_EARBUDS_STOP


def test_find_my_bud_frame():
    msg = Message(FindMyBud(True).to_bytes(), Model.BUDS_LIVE)
    assert msg.id() == ids.FIND_MY_EARBUDS_START
    assert msg.check_crc()
    assert msg.payload_length() == 3


@pytest.mark.parametrize("left, right", [(True, False), (False, True)])
def test_mute_earbud(left, right):
    mute = MuteEarbud(left, right)
    assert mute.message_id() == ids.MUTE_EARBUD
    assert mute.data() == bytes([left, right])


@pytest.mark.parametrize("flag", [True, False])
def test_flag_commands(flag):
    assert SetNoiseReduction(flag).data() == bytes([flag])
    assert SetNoiseReduction(flag).message_id() == ids.SET_NOISE_REDUCTION
    assert SetAmbientMode(flag).data() == bytes([flag])
    assert SetAmbientMode(flag).message_id() == ids.SET_AMBIENT_MODE
    assert SetExtraHighVolume(flag).data() == bytes([flag])
    assert SetExtraHighVolume(flag).message_id() == ids.EXTRA_HIGH_AMBIENT


def test_touchpad_option():
    cmd = SetTouchpadOption(TouchpadOption.VOLUME, TouchpadOption.SPOTIFY)
    assert cmd.message_id() == ids.SET_TOUCHPAD_OPTION
    left, right = cmd.data()
    assert TouchpadOption.decode(left) is TouchpadOption.VOLUME
    assert TouchpadOption.decode(right) is TouchpadOption.SPOTIFY


def test_manager_info():
    samsung = SetManagerInfo.create(True, 30)
    other = SetManagerInfo.create(False, 30)
    assert samsung.message_id() == ids.MANAGER_INFO
    assert samsung.client_type == 1
    assert samsung.data() == bytes([1, 1, 30])
    assert other.data() == bytes([1, 2, 30])


@pytest.mark.parametrize("level", [1, 2, 3, 4])
def test_ambient_volume_shift(level):
    cmd = SetAmbientVolume(level)
    assert cmd.message_id() == ids.AMBIENT_VOLUME
    assert cmd.data()[0] + 1 == level


def test_ambient_volume_zero_rejected():
    with pytest.raises(ValueError):
        SetAmbientVolume(0).to_bytes()


def test_command_frame_round_trip():
    cmd = SetManagerInfo.create(False, 29)
    msg = Message(cmd.to_bytes(), Model.BUDS2)
    assert msg.id() == ids.MANAGER_INFO
    assert msg.check_crc()
    assert msg.payload_bytes()[:3] == cmd.data()