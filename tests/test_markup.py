# tests/test_markup.py
from subtrack_core.subtitles.markup import strip_override_tags, to_display_text


def test_tag_removed_and_hard_break_converted():
    assert to_display_text("{\\i1}Hi\\Nthere") == "Hi\nthere"


def test_soft_break_converted():
    assert to_display_text("one\\ntwo") == "one\ntwo"


def test_multiple_tags_are_removed_non_greedy():
    assert to_display_text("{\\b1}bold{\\b0} and {\\k20}ka{\\k30}ra") == "bold and kara"


def test_escape_inside_tag_is_discarded_with_tag():
    assert to_display_text("{\\N}a") == "a"


def test_other_escapes_left_verbatim():
    assert to_display_text("hard\\hspace") == "hard\\hspace"


def test_unclosed_brace_is_kept():
    assert strip_override_tags("a {b") == "a {b"


def test_plain_text_unchanged():
    assert to_display_text("Hello, world") == "Hello, world"
