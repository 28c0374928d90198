import pytest

from budsproto.model import Feature, Model


@pytest.mark.parametrize(
    ("model", "name"),
    [
        (Model.BUDS, "Galaxy Buds"),
        (Model.BUDS_PLUS, "Galaxy Buds+"),
        (Model.BUDS_LIVE, "Galaxy Buds Live"),
        (Model.BUDS_PRO, "Galaxy Buds Pro"),
        (Model.BUDS_PRO2, "Galaxy Buds Pro 2"),
        (Model.BUDS2, "Galaxy Buds 2"),
    ],
)
def test_full_name_and_str(model, name):
    assert model.full_name() == name
    assert str(model) == name


def test_buds_features_in_order():
    assert Model.BUDS.features() == [
        Feature.BATTERY_TYPE,
        Feature.AMBIENT_SOUND,
        Feature.AMBIENT_VOICE_FOCUS,
    ]


def test_buds2_features_in_order():
    assert Model.BUDS2.features() == [
        Feature.ANC,
        Feature.AMBIENT_SOUND,
        Feature.OUTSIDE_DOUBLE_TAP,
        Feature.ADJUST_SOUND_SYNC,
        Feature.EXT_TOUCHPAD_LOCK,
    ]


def test_has_feature():
    assert Model.BUDS_LIVE.has_feature(Feature.ANC)
    assert Model.BUDS_LIVE.has_feature(Feature.RELIEVE_AMBIENT)
    assert not Model.BUDS.has_feature(Feature.ANC)
    assert Model.BUDS_PLUS.has_feature(Feature.SIDETONE)
    assert not Model.BUDS_PRO.has_feature(Feature.SIDETONE)


@pytest.mark.parametrize(
    "model",
    [
        Model.BUDS,
        Model.BUDS_PLUS,
        Model.BUDS_LIVE,
        Model.BUDS_PRO,
        Model.BUDS_PRO2,
        Model.BUDS2,
    ],
)
def test_has_feature_agrees_with_features(model):
    supported = {feature for feature in Feature if Model.has_feature(model, feature)}
    assert supported == set(Model.features(model))


def test_features_list_is_a_copy():
    features = Model.BUDS_PRO.features()
    features.clear()
    assert Model.BUDS_PRO.features() == [
        Feature.ANC,
        Feature.VOICE_WAKEUP,
        Feature.ADJUST_SOUND_SYNC,
    ]