import pytest

from budsproto.message import ids
from budsproto.message.base import Message
from budsproto.message.bud_property import EqualizerType
from budsproto.message.simple import (
    Simple,
    new_adjust_sound_sync,
    new_equalizer,
    new_extended_status_updated_response,
    new_fit_check,
    new_response,
    new_status_updated_response,
    new_version_info_response,
    new_voice_noti_prepare,
    new_voice_wake_up_event_response,
)
from budsproto.model import Model


def test_simple_fields():
    msg = Simple(ids.GAME_MODE, 1)
    assert msg.message_id() == ids.GAME_MODE
    assert msg.data() == bytes([1])
    assert msg.is_response() is False


def test_new_response():
    msg = new_response(ids.VERSION_INFO, 5)
    assert msg.is_response() is True
    assert msg.data() == bytes([5])
    assert msg.message_id() == ids.VERSION_INFO


@pytest.mark.parametrize("eq", list(EqualizerType))
def test_equalizer(eq):
    msg = new_equalizer(eq)
    assert msg.message_id() == ids.EQUALIZER
    assert EqualizerType.decode(msg.data()[0]) is eq


@pytest.mark.parametrize("flag", [True, False])
def test_bool_messages(flag):
    assert new_adjust_sound_sync(flag).data() == bytes([flag])
    assert new_adjust_sound_sync(flag).message_id() == ids.ADJUST_SOUND_SYNC
    assert new_voice_noti_prepare(flag).data() == bytes([flag])
    assert new_voice_noti_prepare(flag).message_id() == ids.VOICE_NOTI_STATUS
    assert new_fit_check(flag).data() == bytes([flag])
    assert new_fit_check(flag).message_id() == ids.CHECK_THE_FIT_OF_EARBUDS


@pytest.mark.parametrize(
    "factory, expected_id",
    [
        (new_status_updated_response, ids.STATUS_UPDATED),
        (new_extended_status_updated_response, ids.EXTENDED_STATUS_UPDATED),
        (new_version_info_response, ids.VERSION_INFO),
        (new_voice_wake_up_event_response, ids.VOICE_WAKE_UP_EVENT),
    ],
)
def test_responses_round_trip(factory, expected_id):
    msg = Message(factory().to_bytes(), Model.BUDS_LIVE)
    assert msg.id() == expected_id
    assert msg.is_response()
    assert msg.check_crc()
    assert msg.is_message()
    assert msg.payload_bytes()[0] == 0


def test_equalizer_frame_round_trip():
    frame = new_equalizer(EqualizerType.BASS_BOOST).to_bytes()
    msg = Message(frame, Model.BUDS)
    assert msg.id() == ids.EQUALIZER
    assert not msg.is_response()
    assert EqualizerType.decode(msg.payload_bytes()[0]) is EqualizerType.BASS_BOOST


def test_out_of_range_value():
    with pytest.raises(ValueError):
        Simple(ids.GAME_MODE, 256).data()