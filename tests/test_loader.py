# tests/test_loader.py
import pytest

from subtrack_core.io.loader import (
    convert_to_ass,
    detect_encoding,
    load_track_file,
    read_subtitle_text,
)
from subtrack_core.subtitles.markup import to_display_text
from subtrack_core.subtitles.track import SubtitleLoadError

SRT = """1
00:00:01,000 --> 00:00:02,500
Hello, there
Second line

2
00:00:03,000 --> 00:00:04,000
Bye
"""


def test_reads_ass_verbatim(write_file, sample_ass):
    path = write_file("sample.ass", sample_ass)
    assert read_subtitle_text(path) == sample_ass


def test_utf16_with_bom(write_file, sample_ass):
    path = write_file("sample.ass", sample_ass, encoding="utf-16")
    track = load_track_file(path)
    assert len(track.events) == 4


def test_srt_is_converted_through_pysubs2(write_file):
    path = write_file("movie.srt", SRT)
    track = load_track_file(path)

    assert len(track.events) == 2
    first = track.events[0]
    assert (first.start_ms, first.end_ms) == (1000, 2500)
    assert to_display_text(first.text) == "Hello, there\nSecond line"
    assert track.style_for(first) is not None


def test_convert_rejects_unknown_format():
    with pytest.raises(SubtitleLoadError):
        convert_to_ass("this is not a subtitle file at all", source="notes.txt")


def test_empty_file_fails(write_file):
    path = write_file("empty.srt", "")
    with pytest.raises(SubtitleLoadError):
        read_subtitle_text(path)


def test_missing_file_fails(tmp_path):
    with pytest.raises(SubtitleLoadError):
        read_subtitle_text(tmp_path / "nope.ass")


def test_empty_ass_file_fails_at_load(write_file):
    path = write_file("blank.ass", "  \n")
    with pytest.raises(SubtitleLoadError):
        load_track_file(path)


def test_detect_encoding():
    assert detect_encoding(b"\xef\xbb\xbf[Events]") == ("utf-8-sig", True)
    assert detect_encoding("[Events]".encode("utf-8")) == ("utf-8", False)
    assert detect_encoding("[Events] café".encode("utf-8")) == ("utf-8", False)
    assert detect_encoding("é".encode("cp1252")) == ("cp1252", False)


def test_explicit_encoding(write_file):
    path = write_file("latin.ass", "[Script Info]\nTitle: café\n", encoding="latin1")
    assert "café" in read_subtitle_text(path, encoding="latin1")


def test_bomless_cp1252_is_not_read_as_utf16(tmp_path):
    text = "[Events]\nDialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,café au lait\n"
    raw = text.encode("cp1252")
    if len(raw) % 2:
        raw += b"\n"
    path = tmp_path / "western.ass"
    path.write_bytes(raw)

    assert detect_encoding(raw) == ("cp1252", False)
    track = load_track_file(path)
    assert [e.text for e in track.events] == ["café au lait"]
