"""Glyph composition: stroke placement and clamped stroke edits."""

from .compositor import (
    ComposedGlyph,
    JamoBoxInfo,
    PlacedStroke,
    PreviewSize,
    Rect,
    combined_box,
    compose_syllable,
    map_stroke,
    map_stroke_exact,
    place_jamo,
    place_strokes,
    preview_dimensions,
    preview_strokes,
    resolve_jamo_box,
)
from .stroke_edit import clamp_stroke_field, nudge_stroke, update_stroke_field

__all__ = [
    'Rect', 'PlacedStroke', 'ComposedGlyph', 'JamoBoxInfo', 'PreviewSize',
    'map_stroke', 'map_stroke_exact', 'combined_box', 'place_strokes', 'place_jamo',
    'compose_syllable', 'resolve_jamo_box', 'preview_strokes', 'preview_dimensions',
    'clamp_stroke_field', 'update_stroke_field', 'nudge_stroke',
]
