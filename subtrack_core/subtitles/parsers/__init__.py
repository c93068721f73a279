# subtrack_core/subtitles/parsers/__init__.py
