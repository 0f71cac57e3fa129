"""Clamped edits of box-relative jamo strokes.

The jamo editor changes stroke fields through a numeric inspector and
through arrow keys. Both go through these functions, which keep every
stroke inside its jamo box: the origin stays in ``[0, 1 - extent]`` and
the extent in ``[MIN_STROKE_EXTENT, 1 - origin]``.

Stroke lists are tuples of frozen StrokeRel; each edit returns a new tuple.
"""

from __future__ import annotations
from typing import Sequence, Tuple

from ..config import MIN_STROKE_EXTENT, MOVE_STEP, RESIZE_STEP
from ..domain.jamo import STROKE_FIELDS, StrokeRel
from ..utils.geometry import clamp

ARROW_KEYS = ('ArrowLeft', 'ArrowRight', 'ArrowUp', 'ArrowDown')


def clamp_stroke_field(stroke: StrokeRel, name: str, value: float) -> float:
    """Clamp a new field value so the stroke stays inside its box."""
    if name == 'x':
        return clamp(value, 0.0, 1.0 - stroke.width)
    if name == 'y':
        return clamp(value, 0.0, 1.0 - stroke.height)
    if name == 'width':
        return clamp(value, MIN_STROKE_EXTENT, 1.0 - stroke.x)
    if name == 'height':
        return clamp(value, MIN_STROKE_EXTENT, 1.0 - stroke.y)
    raise ValueError(f"Unknown stroke field: {name}. Valid: {list(STROKE_FIELDS)}")


def update_stroke_field(strokes: Sequence[StrokeRel], stroke_id: str, name: str,
                        value: float) -> Tuple[StrokeRel, ...]:
    """Set one field of one stroke, clamped.

    Strokes with other ids are returned unchanged. An unknown id leaves
    the whole list unchanged.
    """
    return tuple(
        s.with_field(name, clamp_stroke_field(s, name, value)) if s.stroke_id == stroke_id else s
        for s in strokes
    )


def nudge_stroke(strokes: Sequence[StrokeRel], stroke_id: str, key: str,
                 resize: bool = False) -> Tuple[StrokeRel, ...]:
    """Apply one arrow-key step to a stroke.

    Without resize the arrows move the stroke by MOVE_STEP; with resize
    left/right shrink/grow the width and up/down shrink/grow the height
    by RESIZE_STEP.

    Raises:
        ValueError: If key is not an arrow key.
    """
    if key not in ARROW_KEYS:
        raise ValueError(f"Unknown key: {key}")

    target = next((s for s in strokes if s.stroke_id == stroke_id), None)
    if target is None:
        return tuple(strokes)

    if resize:
        name = 'width' if key in ('ArrowLeft', 'ArrowRight') else 'height'
        sign = -1 if key in ('ArrowLeft', 'ArrowUp') else 1
        value = getattr(target, name) + sign * RESIZE_STEP
    else:
        name = 'x' if key in ('ArrowLeft', 'ArrowRight') else 'y'
        sign = -1 if key in ('ArrowLeft', 'ArrowUp') else 1
        value = getattr(target, name) + sign * MOVE_STEP

    return update_stroke_field(strokes, stroke_id, name, value)
