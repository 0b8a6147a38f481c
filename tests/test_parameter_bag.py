import pytest
from structlog.testing import capture_logs

from specialfx.errors import InvalidParameterName
from specialfx.kinds import EffectKind
from specialfx.models import Color, EffectDescriptor, ParameterBag


def test_bag_rejects_keys_outside_registry():
    with pytest.raises(InvalidParameterName):
        ParameterBag(EffectKind.EXPLOSION, {"pitch": "1.0"})


def test_bag_normalises_case():
    bag = ParameterBag(EffectKind.SOUND, {"NAME": "Click"})
    assert dict(bag) == {"name": "click"}


def test_bag_is_read_only():
    bag = ParameterBag(EffectKind.SOUND, {"name": "click"})
    with pytest.raises(TypeError):
        bag["name"] = "burp"


def test_bag_equality_includes_kind():
    assert ParameterBag(EffectKind.LIGHTNING, {"power": "1"}) == ParameterBag(
        EffectKind.LIGHTNING, {"power": "1"}
    )
    assert ParameterBag(EffectKind.LIGHTNING, {"power": "1"}) != ParameterBag(
        EffectKind.EXPLOSION, {"power": "1"}
    )


def test_typed_getters_use_defaults_when_absent():
    bag = ParameterBag(EffectKind.EFFECT)
    assert bag.get_int("radius", 64) == 64
    assert bag.get_float("data", 1.5) == 1.5
    assert bag.get_bool("data") is False
    assert bag.get_str("name") is None
    assert "name" not in bag


def test_get_int_truncates_decimals():
    bag = ParameterBag(EffectKind.LIGHTNING, {"power": "2.9"})
    assert bag.get_int("power") == 2


def test_get_int_invalid_falls_back_with_warning():
    bag = ParameterBag(EffectKind.EFFECT, {"radius": "far"})
    with capture_logs() as logs:
        assert bag.get_int("radius", 64) == 64
    assert any(entry["event"] == "Invalid integer parameter - using default" for entry in logs)


def test_get_float_invalid_falls_back():
    bag = ParameterBag(EffectKind.EXPLOSION, {"power": "huge"})
    assert bag.get_float("power", 0.0) == 0.0


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("yes", True), ("1", True), ("false", False), ("off", False)],
)
def test_get_bool_words(raw, expected):
    bag = ParameterBag(EffectKind.EXPLOSION, {"fire": raw})
    assert bag.get_bool("fire", not expected) is expected


def test_get_bool_invalid_uses_default():
    bag = ParameterBag(EffectKind.EXPLOSION, {"fire": "maybe"})
    with capture_logs() as logs:
        assert bag.get_bool("fire", True) is True
    assert logs and logs[0]["key"] == "fire"


def test_descriptor_is_frozen():
    descriptor = EffectDescriptor(EffectKind.LIGHTNING, ParameterBag(EffectKind.LIGHTNING))
    with pytest.raises(AttributeError):
        descriptor.volume_multiplier = 2.0


def test_descriptor_rejects_mismatched_bag():
    with pytest.raises(ValueError):
        EffectDescriptor(EffectKind.SOUND, ParameterBag(EffectKind.LIGHTNING))


def test_color_packing():
    color = Color.from_rgb(0x12AB34)
    assert (color.red, color.green, color.blue) == (0x12, 0xAB, 0x34)
    assert color.as_rgb() == 0x12AB34


def test_color_range_checked():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color.from_rgb(0x1000000)
