# tests/test_styles.py
import dataclasses

import pytest

from subtrack_core.subtitles.styles import StyleRecord, StyleTable
from subtrack_core.subtitles.utils.fields import WHITE, RGBColor


def _table(*style_lines):
    return StyleTable.parse(["[V4+ Styles]", *style_lines])


def test_parses_sample_styles(sample_lines):
    table = StyleTable.parse(sample_lines)

    assert len(table) == 2
    assert table.names() == ["Default", "Signs"]

    signs = table.get("Signs")
    assert signs.fontname == "Times New Roman"
    assert signs.fontsize == 36.0
    assert signs.primary_color == RGBColor(255, 0, 0)
    assert signs.outline_color == RGBColor(0, 0, 255)
    assert signs.bold is True
    assert signs.italic is True
    assert signs.underline is False
    assert signs.outline == 3.0
    assert signs.shadow == 1.0
    assert signs.alignment == 8
    assert (signs.margin_l, signs.margin_r, signs.margin_v) == (20, 20, 30)


def test_short_style_is_dropped():
    table = _table("Style: Short,Arial,20,&H0000FF&,&H0000FF&,&H0000FF&,&H0000FF&,0,0,0,0,100,100,0,0")
    assert "Short" not in table
    assert table.get("Short") is None
    assert len(table) == 0


def test_sixteen_fields_uses_defaults_for_the_rest():
    table = _table("Style: Min,Arial,20,&H0000FF&,&H0000FF&,&H0000FF&,&H0000FF&,0,0,0,0,100,100,0,0,3")
    style = table.get("Min")
    assert style.border_style == 3
    assert style.outline == 0.0
    assert style.shadow == 0.0
    assert style.alignment == 2
    assert (style.margin_l, style.margin_r, style.margin_v) == (0, 0, 0)


def test_bad_numbers_take_defaults():
    table = _table("Style: Bad,Arial,huge,nope,x,y,z,1,0,yes,-1,0,abc,0,0,0,1,1,42,a,b,c")
    style = table.get("Bad")
    assert style.fontsize == 16.0
    assert style.primary_color == WHITE
    assert style.bold is False
    assert style.underline is False
    assert style.strike_out is True
    assert style.scale_x == 100.0
    assert style.scale_y == 100.0
    assert style.border_style == 1
    assert style.alignment == 2
    assert (style.margin_l, style.margin_r, style.margin_v) == (0, 0, 0)


def test_last_style_with_same_name_wins():
    table = _table(
        "Style: Dup,Arial,20,&H0000FF&,&H0&,&H0&,&H0&,0,0,0,0,100,100,0,0,1,2,2,2,0,0,0",
        "Style: Dup,Verdana,30,&HFF0000&,&H0&,&H0&,&H0&,0,0,0,0,100,100,0,0,1,2,2,7,0,0,0",
    )
    assert len(table) == 1
    assert table.get("Dup").fontname == "Verdana"
    assert table.get("Dup").alignment == 7


def test_styles_outside_style_section_are_ignored():
    table = StyleTable.parse([
        "[Events]",
        "Style: Stray,Arial,20,&H0&,&H0&,&H0&,&H0&,0,0,0,0,100,100,0,0,1,2,2,2,0,0,0",
        "[v4+ styles]",
        "Format: Name, Fontname",
        "style: lower,Arial,20,&H0&,&H0&,&H0&,&H0&,0,0,0,0,100,100,0,0,1,2,2,2,0,0,0",
        "Style: Kept,Arial,20,&H0&,&H0&,&H0&,&H0&,0,0,0,0,100,100,0,0,1,2,2,2,0,0,0",
    ])
    assert table.names() == ["Kept"]


def test_extra_fields_are_ignored():
    record = StyleRecord.parse_line(
        "Style: Extra,Arial,20,&H0&,&H0&,&H0&,&H0&,0,0,0,0,100,100,0,0,1,2,2,9,1,2,3,1,junk"
    )
    assert record.alignment == 9
    assert record.margin_v == 3


def test_record_is_immutable():
    record = StyleRecord(name="X")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.fontsize = 99
