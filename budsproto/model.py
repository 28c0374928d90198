"""Device models and the features each of them supports."""

from __future__ import annotations

from enum import Enum, auto


class Feature(Enum):
    """Features which only some models provide."""

    ANC = auto()
    AMBIENT_SOUND = auto()
    EXTRA_HIGH_AMBIENT_VOLUME = auto()
    AMBIENT_VOICE_FOCUS = auto()
    BATTERY_TYPE = auto()
    OUTSIDE_DOUBLE_TAP = auto()
    RELIEVE_AMBIENT = auto()
    SIDETONE = auto()
    VOICE_WAKEUP = auto()
    ADJUST_SOUND_SYNC = auto()
    EXT_TOUCHPAD_LOCK = auto()


class Model(Enum):
    """The device model; each value is its full product name."""

    BUDS = "Galaxy Buds"
    BUDS_PLUS = "Galaxy Buds+"
    BUDS_LIVE = "Galaxy Buds Live"
    BUDS_PRO = "Galaxy Buds Pro"
    BUDS_PRO2 = "Galaxy Buds Pro 2"
    BUDS2 = "Galaxy Buds 2"

    def features(self) -> list[Feature]:
        """All features available on this model."""
        return list(_FEATURES[self])

    def full_name(self) -> str:
        return self.value

    def has_feature(self, feature: Feature) -> bool:
        return feature in _FEATURES[self]

    def __str__(self) -> str:
        return self.full_name()


_FEATURES: dict[Model, tuple[Feature, ...]] = {
    Model.BUDS: (
        Feature.BATTERY_TYPE,
        Feature.AMBIENT_SOUND,
        Feature.AMBIENT_VOICE_FOCUS,
    ),
    Model.BUDS_PLUS: (
        Feature.AMBIENT_SOUND,
        Feature.OUTSIDE_DOUBLE_TAP,
        Feature.SIDETONE,
        Feature.EXTRA_HIGH_AMBIENT_VOLUME,
        Feature.ADJUST_SOUND_SYNC,
    ),
    Model.BUDS_LIVE: (
        Feature.ANC,
        Feature.RELIEVE_AMBIENT,
        Feature.VOICE_WAKEUP,
        Feature.ADJUST_SOUND_SYNC,
    ),
    Model.BUDS_PRO: (
        Feature.ANC,
        Feature.VOICE_WAKEUP,
        Feature.ADJUST_SOUND_SYNC,
    ),
    Model.BUDS_PRO2: (
        Feature.ANC,
        Feature.VOICE_WAKEUP,
        Feature.ADJUST_SOUND_SYNC,
    ),
    Model.BUDS2: (
        Feature.ANC,
        Feature.AMBIENT_SOUND,
        Feature.OUTSIDE_DOUBLE_TAP,
        Feature.ADJUST_SOUND_SYNC,
        Feature.EXT_TOUCHPAD_LOCK,
    ),
}