"""Numeric helpers, rasterization and text serialization."""

from .geometry import clamp, endpoint_distances, sample_cubic, snap, snap_point
from .rendering import composed_mask, flatten_shape, render_composed, render_shapes, render_text_strip
from .serialize import (
    dump_boxes,
    dump_layout_schema,
    dump_shapes,
    format_jamo_entry,
    format_stroke,
    load_shapes,
)

__all__ = [
    'clamp', 'snap', 'snap_point', 'sample_cubic', 'endpoint_distances',
    'render_composed', 'render_text_strip', 'composed_mask', 'flatten_shape', 'render_shapes',
    'format_jamo_entry', 'format_stroke', 'dump_layout_schema', 'dump_boxes', 'dump_shapes', 'load_shapes',
]
