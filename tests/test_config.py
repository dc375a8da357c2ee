import pytest

from rdrop.config import CONFIG_SCHEMA, DropdownConfig
from rdrop.models import Anchor, ConfigError, GeometrySpec
from rdrop.validation import ConfigField, ConfigItems, ConfigValidator, coerce_to_bool, format_config_error

BASE = {"terminal": "kitty", "class": "kitty-dropterm"}


def test_minimal_config(test_logger):
    conf = DropdownConfig.from_dict(dict(BASE), test_logger)
    assert conf == DropdownConfig(terminal="kitty", class_name="kitty-dropterm")
    assert conf.anchor is Anchor.TOP
    assert conf.floating is True
    assert conf.lock is True


def test_full_config(test_logger):
    conf = DropdownConfig.from_dict(
        {**BASE, "width": 30, "height": 50, "margin": 20, "anchor": "right", "float": False, "lock": "no"},
        test_logger,
    )
    assert conf.geometry == GeometrySpec(width_percent=30, height_percent=50, margin=20, anchor=Anchor.RIGHT)
    assert conf.floating is False
    assert conf.lock is False


def test_legacy_keys(test_logger):
    conf = DropdownConfig.from_dict({**BASE, "gap": 12, "position": "B"}, test_logger)
    assert conf.margin == 12
    assert conf.anchor is Anchor.BOTTOM


def test_missing_required(test_logger):
    with pytest.raises(ConfigError) as exc:
        DropdownConfig.from_dict({"width": 40}, test_logger)
    message = str(exc.value)
    assert "'terminal': Missing required field" in message
    assert "'class': Missing required field" in message
    assert 'Add terminal = "value" to [rdrop]' in message


@pytest.mark.parametrize(
    "key,value,expected",
    [
        ("width", 101, "101 is out of range"),
        ("height", -1, "-1 is out of range"),
        ("width", "50%", "Expected int, got str"),
        ("height", 50.5, "Expected int, got float"),
        ("margin", -5, "-5 is negative"),
        ("gap", True, "Expected int, got bool"),
        ("anchor", "center", "invalid value 'center'"),
        ("float", "maybe", "Expected bool, got str"),
        ("terminal", 42, "Expected str, got int"),
    ],
)
def test_invalid_values(test_logger, key, value, expected):
    with pytest.raises(ConfigError, match=expected):
        DropdownConfig.from_dict({**BASE, key: value}, test_logger)


def test_percent_bounds_accepted(test_logger):
    conf = DropdownConfig.from_dict({**BASE, "width": 0, "height": 100}, test_logger)
    assert (conf.width, conf.height) == (0, 100)


def test_unknown_keys_warn(test_logger, mocker):
    warning = mocker.spy(test_logger, "warning")
    DropdownConfig.from_dict({**BASE, "widht": 30, "colour": "red"}, test_logger)
    messages = [call.args[0] for call in warning.call_args_list]
    assert "[rdrop] Unknown option 'widht' (did you mean 'width'?)" in messages
    assert "[rdrop] Unknown option 'colour' - will be ignored" in messages


# Validation framework


def test_config_field_defaults():
    field = ConfigField("test")
    assert field.name == "test"
    assert field.field_type is str
    assert field.required is False
    assert field.default is None
    assert field.choices is None
    assert field.aliases == ()


def test_config_items_lookup():
    assert CONFIG_SCHEMA.get("margin") is CONFIG_SCHEMA.get("gap")
    assert CONFIG_SCHEMA.get("nope") is None
    assert "position" in CONFIG_SCHEMA.known_keys


def test_choices_without_validator(test_logger):
    schema = ConfigItems(ConfigField("mode", str, choices=["a", "b"]))
    errors = ConfigValidator({"mode": "c"}, "test", test_logger).validate(schema)
    assert errors == ["[test] Config error for 'mode': Invalid value 'c' -> Valid options: 'a', 'b'"]


def test_alias_reported_under_used_name(test_logger):
    errors = ConfigValidator({"gap": -1}, "rdrop", test_logger).validate(CONFIG_SCHEMA)
    assert any(error.startswith("[rdrop] Config error for 'gap'") for error in errors)


def test_format_config_error():
    assert format_config_error("rdrop", "width", "bad") == "[rdrop] Config error for 'width': bad"
    assert format_config_error("rdrop", "width", "bad", "fix it") == "[rdrop] Config error for 'width': bad -> fix it"


@pytest.mark.parametrize(
    "value,expected",
    [(True, True), (False, False), ("yes", True), ("On", True), ("off", False), ("0", False), (None, True), (1, True)],
)
def test_coerce_to_bool(value, expected):
    assert coerce_to_bool(value, default=True) is expected
