"""Raster previews of composed glyphs and freehand shapes.

This module draws composition results with Pillow. Composed glyphs are lists
of axis-aligned rectangles, so drawing them is exact; freehand shapes are
flattened into polylines, cubic segments sampled with numpy.

The module provides the following functions:
    render_composed: Draw the rectangles of one composed syllable.
    render_text_strip: Draw several composed syllables side by side.
    composed_mask: Binary mask of a composed syllable.
    flatten_shape: Polyline points of a freehand shape.
    render_shapes: Draw freehand shapes on the editor canvas.

Example usage:
    Rendering a syllable::

        from hangul_lib.api import GlyphService
        from hangul_lib.utils.rendering import render_composed

        glyph = GlyphService().compose_char('한')
        img = render_composed(glyph, size=400, show_debug_boxes=True)
        img.save('han.png')
"""

from __future__ import annotations
from typing import List, Sequence

import numpy as np
from PIL import Image, ImageDraw

from ..config import BOX_COLORS, CANVAS_HEIGHT, CANVAS_WIDTH
from ..domain.shapes import DEFAULT_COLOR, DEFAULT_WIDTH, CubicStroke, LineStroke, PathShape, Shape
from .geometry import sample_cubic


def render_composed(glyph, size: int = 400, fill='black', background='white',
                    show_debug_boxes: bool = False) -> Image.Image:
    """Draw a composed syllable.

    Args:
        glyph: ComposedGlyph to draw.
        size: Side of the square image in pixels. The glyph's own scale is
            mapped onto it.
        fill: Color of the stroke rectangles.
        background: Image background color.
        show_debug_boxes: Outline every slot box in its part color.

    Returns:
        RGB image of shape (size, size).
    """
    img = Image.new('RGB', (size, size), background)
    draw = ImageDraw.Draw(img)
    k = size / glyph.scale if glyph.scale else 1.0

    if show_debug_boxes:
        for part, box in glyph.slot_boxes.items():
            if not box.is_valid:
                continue
            x0, y0 = box.x * size, box.y * size
            x1, y1 = box.right * size, box.bottom * size
            draw.rectangle([x0, y0, x1, y1], outline=BOX_COLORS.get(part.value, '#888'), width=1)

    for placed in glyph.strokes:
        r = placed.rect
        if r.width <= 0 or r.height <= 0:
            continue
        draw.rectangle([r.x * k, r.y * k, (r.x + r.width) * k, (r.y + r.height) * k], fill=fill)

    return img


def render_text_strip(glyphs: Sequence, size: int = 400, gap: int = 0,
                      background='white', show_debug_boxes: bool = False) -> Image.Image:
    """Draw composed syllables left to right on one image."""
    count = max(len(glyphs), 1)
    strip = Image.new('RGB', (count * size + (count - 1) * gap, size), background)
    for i, glyph in enumerate(glyphs):
        tile = render_composed(glyph, size, background=background,
                               show_debug_boxes=show_debug_boxes)
        strip.paste(tile, (i * (size + gap), 0))
    return strip


def composed_mask(glyph, size: int = 100) -> np.ndarray:
    """Boolean array of shape (size, size); True where a stroke is drawn."""
    img = render_composed(glyph, size, fill='black', background='white').convert('L')
    return np.array(img) < 128


def flatten_shape(shape: Shape, n_samples: int = 24) -> List[tuple]:
    """Polyline through a shape, with cubic segments sampled.

    Raises:
        TypeError: For an unknown shape kind.
    """
    if isinstance(shape, LineStroke):
        return [shape.p0.to_tuple(), shape.p1.to_tuple()]
    if isinstance(shape, CubicStroke):
        return [tuple(p) for p in sample_cubic(shape.p0, shape.c1, shape.c2, shape.p1, n_samples)]
    if isinstance(shape, PathShape):
        if not shape.nodes:
            return []
        points = [shape.nodes[0].p.to_tuple()]
        for a, b in zip(shape.nodes, shape.nodes[1:]):
            if a.h2 is not None and b.h1 is not None:
                points.extend(tuple(p) for p in sample_cubic(a.p, a.h2, b.h1, b.p, n_samples)[1:])
            else:
                points.append(b.p.to_tuple())
        return points
    raise TypeError(f"Unknown shape kind: {type(shape).__name__}")


def render_shapes(shapes: Sequence[Shape], size: int = CANVAS_WIDTH,
                  background='white') -> Image.Image:
    """Draw freehand shapes, scaled from the editor canvas to size pixels."""
    img = Image.new('RGB', (size, size), background)
    draw = ImageDraw.Draw(img)
    k = size / max(CANVAS_WIDTH, CANVAS_HEIGHT)

    for shape in shapes:
        points = [(x * k, y * k) for x, y in flatten_shape(shape)]
        if len(points) < 2:
            continue
        width = max(1, int(round((shape.width or DEFAULT_WIDTH) * k)))
        draw.line(points, fill=shape.color or DEFAULT_COLOR, width=width, joint='curve')

    return img
