# tests/test_fields.py
import pytest

from subtrack_core.subtitles.utils.fields import (
    WHITE,
    RGBColor,
    parse_color,
    parse_flag,
    parse_float_field,
    parse_int_field,
    split_fields,
)


def test_color_is_blue_green_red():
    assert parse_color("&H0000FF&") == RGBColor(255, 0, 0)
    assert parse_color("&HFF0000&") == RGBColor(0, 0, 255)
    assert parse_color("&H00FF00&") == RGBColor(0, 255, 0)


def test_color_alpha_byte_is_ignored():
    assert parse_color("&H800000FF&") == RGBColor(255, 0, 0)


def test_color_without_closing_sentinel():
    assert parse_color("&H00FFFFFF") == WHITE
    assert parse_color(" &H000000FF ") == RGBColor(255, 0, 0)
    assert parse_color("&H0000FF&") == parse_color("&H0000FF")


@pytest.mark.parametrize("raw", ["", "garbage", "#FF0000", "&Hzz0000&", "&H&", "&H-1&", "&H0x00FF&", None])
def test_malformed_color_is_white(raw):
    assert parse_color(raw) == WHITE


def test_color_css_and_hex():
    color = RGBColor(255, 16, 0)
    assert color.to_css() == "rgb(255, 16, 0)"
    assert color.to_hex() == "#FF1000"


def test_flag_only_minus_one_is_true():
    assert parse_flag("-1") is True
    assert parse_flag(" -1 ") is True
    assert parse_flag("1") is False
    assert parse_flag("0") is False
    assert parse_flag(None) is False


def test_numbers_fall_back_to_default():
    assert parse_int_field("42", 7) == 42
    assert parse_int_field("20.9", 7) == 20
    assert parse_int_field("abc", 7) == 7
    assert parse_int_field(None, 7) == 7
    assert parse_float_field("1.5", 0.0) == 1.5
    assert parse_float_field("nan", 3.0) == 3.0
    assert parse_float_field("", 3.0) == 3.0


def test_split_fields_keeps_remainder():
    assert split_fields("a,b,c,d", 3) == ["a", "b", "c,d"]
    assert split_fields("a,b", 3) == ["a", "b"]
    with pytest.raises(ValueError):
        split_fields("a", 0)
