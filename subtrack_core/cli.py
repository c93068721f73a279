# subtrack_core/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import AppConfig
from .io.loader import load_track_file
from .subtitles.presentation import DisplayContext, PlatformClass, apply_event_margins, resolve
from .subtitles.markup import to_display_text
from .subtitles.track import SubtitleLoadError
from .subtitles.utils.timestamps import format_ass_timestamp, parse_timestamp_strict


def _print_info(track, out) -> None:
    start, end = track.events.timing_range()
    print(f"Title:  {track.title or '-'}", file=out)
    print(f"Styles: {len(track.styles)} ({', '.join(track.styles.names())})", file=out)
    print(f"Events: {len(track.events)}", file=out)
    print(f"Range:  {format_ass_timestamp(start)} -> {format_ass_timestamp(end)}", file=out)
    for style, count in sorted(track.events.style_counts().items()):
        print(f"  {style}: {count}", file=out)
    for warning in track.validate():
        print(f"  [!] {warning}", file=out)


def _print_active(track, time_ms: int, context: DisplayContext, out) -> None:
    active = track.active_at(time_ms)
    print(f"{len(active)} active at {format_ass_timestamp(time_ms)}", file=out)
    for event in sorted(active, key=lambda e: e.layer):
        attrs = apply_event_margins(resolve(track.style_for(event), context), event)
        print(
            f"- [layer {event.layer}] {event.style} "
            f"({attrs.horizontal.value}/{attrs.anchor.value}, {attrs.font_size:.1f}px, "
            f"{attrs.color.to_hex()})",
            file=out,
        )
        for line in to_display_text(event.text).split('\n'):
            print(f"    {line}", file=out)


def _parse_time_arg(value: str) -> int:
    if value.isdigit():
        return int(value)
    try:
        return parse_timestamp_strict(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="subtrack", description="ASS subtitle track inspector")
    p.add_argument("--settings", type=Path, help="settings JSON file")
    sub = p.add_subparsers(dest="command", required=True)

    p_info = sub.add_parser("info", help="summarize a subtitle file")
    p_info.add_argument("path", type=Path)

    p_at = sub.add_parser("at", help="show the styled subtitles active at a time")
    p_at.add_argument("path", type=Path)
    p_at.add_argument("time", type=_parse_time_arg, help="H:MM:SS.cc or milliseconds")
    p_at.add_argument("--width", type=float)
    p_at.add_argument("--height", type=float)
    p_at.add_argument("--platform", choices=[c.value for c in PlatformClass])

    args = p.parse_args(argv)

    config = AppConfig(args.settings) if args.settings else AppConfig()
    logging.basicConfig(
        level=getattr(logging, str(config.get('log_level', 'INFO')).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        track = load_track_file(
            args.path,
            encoding=config.get('source_encoding') or None,
            end_inclusive=bool(config.get('end_inclusive', True)),
        )
    except SubtitleLoadError as e:
        print(f"Failed to load subtitles: {e}", file=sys.stderr)
        return 1

    if args.command == "info":
        _print_info(track, sys.stdout)
        return 0

    context = DisplayContext(
        width=args.width or float(config.get('reference_width', 1280)),
        height=args.height or float(config.get('reference_height', 720)),
        platform=PlatformClass.from_name(args.platform or config.get('platform')),
        font_scale=dict(config.get('platform_font_scale') or {}),
    )
    _print_active(track, args.time, context, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
