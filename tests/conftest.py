# tests/conftest.py
from pathlib import Path
import pytest

SAMPLE_ASS = """[Script Info]
; Test file
Title: Test Subtitle
ScriptType: v4.00+
PlayResX: 1920
PlayResY: 1080

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,48,&H00FFFFFF&,&H000000FF&,&H00000000&,&H00000000&,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1
Style: Signs,Times New Roman,36,&H0000FF&,&H000000FF&,&H00FF0000&,&H80000000&,-1,-1,0,0,100,100,0,0,1,3,1,8,20,20,30,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:05.00,0:00:08.50,Default,,0,0,0,,This is a test subtitle.
Dialogue: 0,0:00:01.23,0:00:04.56,Default,Alice,0,0,0,,Hello, world!
Comment: 0,0:00:10.00,0:00:12.00,Default,,0,0,0,,This is a comment.
Dialogue: 1,0:00:15.00,0:00:18.99,Signs,,0,0,0,,{\\pos(100,200)}Sign text\\Nhere
Dialogue: 0,0:00:16.00,0:00:17.00,Missing,,0,0,0,,Unknown style
"""


@pytest.fixture
def sample_ass() -> str:
    return SAMPLE_ASS


@pytest.fixture
def sample_lines(sample_ass):
    return sample_ass.splitlines()


@pytest.fixture
def write_file(tmp_path: Path):
    """Write text to a file under tmp_path and return its path."""
    def _write(name: str, text: str, encoding: str = 'utf-8') -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path
    return _write


@pytest.fixture
def app_config(tmp_path: Path):
    """AppConfig backed by a settings file in tmp_path."""
    from subtrack_core.config import AppConfig
    return AppConfig(tmp_path / 'settings.json')


@pytest.fixture
def capture_log():
    lines = []
    def cb(msg: str):
        lines.append(msg)
    return lines, cb


@pytest.fixture
def capture_surface():
    emitted = []
    def cb(blocks):
        emitted.append(blocks)
    return emitted, cb
