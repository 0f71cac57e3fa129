#!/usr/bin/env python3
"""Render Hangul text with the composed jamo layouts.

Decomposes every syllable of TEXT, resolves its layout boxes, places the jamo
strokes and draws the result with Pillow. The resolved boxes and freehand
path data can also be dumped as text for the editors.

Usage:
    python render_syllables.py 한글 --out hangul.png --size 300 --debug-boxes
    python render_syllables.py 가 --boxes
    python render_syllables.py 가 --shapes strokes.json
"""

import argparse
import json
import logging
import sys

from hangul_lib.api import GlyphService
from hangul_lib.config import configure_logging
from hangul_lib.paths import to_path_d
from hangul_lib.utils.rendering import render_text_strip
from hangul_lib.utils.serialize import load_shapes

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Render Hangul syllables from jamo stroke data')
    parser.add_argument('text', type=str, help='Text to render; non-Hangul characters are skipped')
    parser.add_argument('--out', '-o', type=str, default=None,
                        help='Output PNG path (default: no image)')
    parser.add_argument('--size', '-s', type=int, default=400,
                        help='Pixel size of each syllable tile')
    parser.add_argument('--boxes', action='store_true',
                        help='Print the composed glyphs with their slot boxes as JSON')
    parser.add_argument('--debug-boxes', action='store_true',
                        help='Outline slot boxes in the rendered image')
    parser.add_argument('--shapes', type=str, default=None,
                        help='JSON file of freehand shapes; prints SVG path data for each')
    parser.add_argument('--log-level', type=str, default='INFO',
                        help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    return parser


def main(argv=None) -> int:
    """Parse command-line arguments and render.

    Returns:
        Process exit code: 0 on success, 1 when nothing could be composed.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    service = GlyphService()
    glyphs = service.compose_text(args.text)
    if not glyphs:
        logger.error("No Hangul characters in %r", args.text)
        return 1

    if args.boxes:
        print(json.dumps([g.to_dict() for g in glyphs], ensure_ascii=False, indent=2))

    if args.shapes:
        with open(args.shapes, encoding='utf-8') as f:
            shapes = load_shapes(f.read())
        for shape in shapes:
            print(f"{shape.id}\t{to_path_d(shape)}")

    if args.out:
        img = render_text_strip(glyphs, size=args.size, show_debug_boxes=args.debug_boxes)
        img.save(args.out)
        logger.info("Wrote %d syllables to %s", len(glyphs), args.out)

    return 0


if __name__ == '__main__':
    sys.exit(main())
