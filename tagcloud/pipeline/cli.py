"""CLI entry point: tagcloud

Count words, pack them into a circular tag cloud, and emit a PNG and/or the
layout as JSON.

Examples
--------
# Layout JSON to stdout
tagcloud --input speech.txt

# Render an image and keep the layout
tagcloud --input speech.txt --out cloud.png --json layout.json

# Quick look at a handful of words with the packed boxes outlined
tagcloud --words red red green blue blue blue --out rgb.png --boxes

# Denser packing, custom font
tagcloud --input speech.txt --out cloud.png --restart_spiral --font /fonts/Inter.ttf
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Absolute imports so this file works both as `tagcloud` (installed entry point)
# and as `python -m tagcloud.pipeline.cli`.
from tagcloud.config import CloudConfig
from tagcloud.logging_config import setup_logging
from tagcloud.pipeline.frequency import tokenize
from tagcloud.pipeline.pipeline import TagCloud


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Pack words into a tag cloud sized by frequency",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--input", help="Input text file (UTF-8)")
    src.add_argument("--words", nargs="+", help="Words given directly on the command line")
    p.add_argument("--out", default=None, help="Output image (PNG / JPG)")
    p.add_argument("--json", default=None, help="Output layout JSON file")
    p.add_argument("--min_font", type=int, default=CloudConfig.min_font_size)
    p.add_argument("--max_font", type=int, default=CloudConfig.max_font_size)
    p.add_argument(
        "--font", action="append", default=[], help="TrueType font file (repeatable)"
    )
    p.add_argument(
        "--padding", type=int, default=CloudConfig.padding, help="Pixels around each tag"
    )
    p.add_argument(
        "--margin", type=int, default=CloudConfig.margin, help="Image border in pixels"
    )
    p.add_argument(
        "--no_lowercase", action="store_true", help="Keep the original letter case"
    )
    p.add_argument(
        "--restart_spiral",
        action="store_true",
        help="Search from the center for every tag (denser, slower)",
    )
    p.add_argument("--boxes", action="store_true", help="Outline packed rectangles")
    p.add_argument("--progress", action="store_true", help="Show a progress bar")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    p.add_argument("--log_file", default=None, help="Also write log messages to this file")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    config = CloudConfig(
        min_font_size=args.min_font,
        max_font_size=args.max_font,
        padding=args.padding,
        margin=args.margin,
        restart_spiral=args.restart_spiral,
        font_paths=[Path(f) for f in args.font],
        lowercase=not args.no_lowercase,
        show_progress=args.progress,
    )

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            sys.exit(f"Input not found: {input_path}")
        words = tokenize(input_path.read_text(encoding="utf-8"), config.lowercase)
    else:
        words = [w.lower() for w in args.words] if config.lowercase else args.words
        words = [w for w in words if w.strip()]

    if not words:
        sys.exit("No words to place")

    try:
        cloud = TagCloud(config=config)
    except ValueError as exc:
        sys.exit(str(exc))

    print(f"Placing {len(set(words))} tag(s) from {len(words)} word(s)", file=sys.stderr)
    layout = cloud.process(words)
    b = layout.bounds
    print(f"Cloud bounds: {b.width}x{b.height}", file=sys.stderr)

    json_str = TagCloud.to_json(layout)

    if args.json:
        Path(args.json).write_text(json_str)
        print(f"JSON  → {args.json}", file=sys.stderr)
    elif not args.out:
        print(json_str)

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        cloud.render(layout, draw_boxes=args.boxes).save(out)
        print(f"Image → {out}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
