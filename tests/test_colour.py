import pytest

from termsheet.colour import (
    COLOR_OPTION_NAMES,
    COLOR_OPTIONS,
    WHITE,
    ColorRGB,
    parse_hex_color,
)


def test_orange_hex():
    assert COLOR_OPTIONS["Orange"].hex() == "#FFA500"


@pytest.mark.parametrize("name", sorted(COLOR_OPTIONS))
def test_hex_round_trip(name):
    colour = COLOR_OPTIONS[name]
    assert parse_hex_color(colour.hex()) == colour


@pytest.mark.parametrize("name", sorted(COLOR_OPTIONS))
def test_excel_form_is_hex_without_hash(name):
    colour = COLOR_OPTIONS[name]
    assert "#" + colour.to_excel() == colour.hex()
    assert parse_hex_color(colour.to_excel()) == colour


def test_lowercase_hex_is_accepted():
    colour = ColorRGB(18, 171, 239)
    assert parse_hex_color(colour.hex().lower()) == colour


def test_default_white_and_black():
    assert COLOR_OPTIONS["White"].is_default_white()
    assert not COLOR_OPTIONS["White"].is_default_black()
    assert COLOR_OPTIONS["Black"].is_default_black()
    assert not COLOR_OPTIONS["Gray"].is_default_white()
    assert WHITE == COLOR_OPTIONS["White"]


def test_every_named_option_has_a_colour_except_custom():
    named = [name for name in COLOR_OPTION_NAMES if name != "Custom..."]
    parsed = {name: parse_hex_color(COLOR_OPTIONS[name].to_excel()) for name in named}
    assert parsed == {name: COLOR_OPTIONS[name] for name in named}
    assert "Custom..." not in COLOR_OPTIONS


def test_iteration_yields_components():
    assert tuple(ColorRGB(1, 2, 3)) == (1, 2, 3)


@pytest.mark.parametrize("text", ["#12345", "1234567", "", "#"])
def test_wrong_length_is_rejected(text):
    with pytest.raises(ValueError, match="expected 6 characters"):
        parse_hex_color(text)


@pytest.mark.parametrize(
    "text, component",
    [("GG0000", "red"), ("00ZZ00", "green"), ("0000+1", "blue")],
)
def test_bad_component_is_named(text, component):
    with pytest.raises(ValueError, match=component):
        parse_hex_color(text)


def test_out_of_range_component_is_rejected():
    with pytest.raises(ValueError):
        ColorRGB(256, 0, 0)