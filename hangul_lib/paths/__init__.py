"""Freehand stroke and path geometry.

    ShapeSession / DragSession: immutable editor state and whole-shape drags.
    merge_selected: join two strokes into a tangent-continuous path.
    path_commands / to_path_d: draw commands and SVG path data.
"""

from .commands import DrawCommand, path_commands, to_path_d
from .session import (
    DragSession,
    ShapeSession,
    clamp_by_key,
    default_stroke,
    drag_delta,
    snap_clamp_by_key,
)
from .merge import MergeResult, corner_handles, find_closest_endpoint, join_strokes, merge_selected

__all__ = [
    'DrawCommand', 'path_commands', 'to_path_d',
    'ShapeSession', 'DragSession', 'clamp_by_key', 'snap_clamp_by_key',
    'default_stroke', 'drag_delta',
    'MergeResult', 'merge_selected', 'find_closest_endpoint', 'corner_handles', 'join_strokes',
]
