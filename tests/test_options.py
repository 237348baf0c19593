import pytest
from pydantic import ValidationError

from safename import SanitizeOptions


def test_defaults():
    options = SanitizeOptions()
    assert options.padding == 0
    assert options.length == 255
    assert options.whitespace == " "
    assert options.replace == ""
    assert options.max_length == 255


def test_from_mapping_ignores_unknown_keys_and_none():
    options = SanitizeOptions.from_mapping({"padding": 5, "replace": None, "colour": "blue", 1: "x"})
    assert options.padding == 5
    assert options.replace == ""
    assert options.max_length == 250


def test_from_mapping_empty():
    assert SanitizeOptions.from_mapping(None) == SanitizeOptions()
    assert SanitizeOptions.from_mapping({}) == SanitizeOptions()


def test_numeric_strings_are_coerced():
    assert SanitizeOptions.from_mapping({"length": "100"}).length == 100


def test_wrong_types_are_rejected():
    with pytest.raises(ValidationError):
        SanitizeOptions.from_mapping({"length": "long"})


def test_options_are_immutable():
    options = SanitizeOptions()
    with pytest.raises(ValidationError):
        options.length = 10


def test_merged_keeps_unset_values():
    base = SanitizeOptions(replace="_", length=100)
    merged = base.merged({"length": 50, "whitespace": None})
    assert merged.replace == "_"
    assert merged.length == 50
    assert merged.whitespace == " "
    assert base.length == 100
    assert base.merged(None) is base


def test_coerce():
    options = SanitizeOptions(padding=3)
    assert SanitizeOptions.coerce(options) is options
    assert SanitizeOptions.coerce(options, length=10).max_length == 7
    assert SanitizeOptions.coerce({"padding": 2}, padding=4).padding == 4
    assert SanitizeOptions.coerce() == SanitizeOptions()
