# tests/test_cli.py
import pytest

from subtrack_core.cli import main


@pytest.fixture
def settings(tmp_path):
    return str(tmp_path / "settings.json")


def test_info(write_file, sample_ass, settings, capsys):
    path = write_file("s.ass", sample_ass)
    assert main(["--settings", settings, "info", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Title:  Test Subtitle" in out
    assert "Events: 4" in out
    assert "Range:  0:00:01.23 -> 0:00:18.99" in out
    assert "unknown style 'Missing'" in out


def test_at_prints_active_blocks(write_file, sample_ass, settings, capsys):
    path = write_file("s.ass", sample_ass)
    assert main(["--settings", settings, "at", str(path), "0:00:16.50"]) == 0
    out = capsys.readouterr().out
    assert "2 active at 0:00:16.50" in out
    assert "Sign text" in out
    assert "    here" in out
    assert "center/top" in out


def test_at_accepts_milliseconds(write_file, sample_ass, settings, capsys):
    path = write_file("s.ass", sample_ass)
    assert main(["--settings", settings, "at", str(path), "2000", "--platform", "ios"]) == 0
    assert "Hello, world!" in capsys.readouterr().out


def test_load_failure_exit_code(write_file, settings, capsys):
    path = write_file("empty.ass", "")
    assert main(["--settings", settings, "info", str(path)]) == 1
    assert "Failed to load subtitles" in capsys.readouterr().err


def test_bad_time_argument(write_file, sample_ass, settings):
    path = write_file("s.ass", sample_ass)
    with pytest.raises(SystemExit):
        main(["--settings", settings, "at", str(path), "12:34"])
