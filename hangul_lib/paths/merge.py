"""Merge two freehand strokes into one multi-node path.

The selected stroke is joined to whichever other stroke has an endpoint
closest to one of its own endpoints. Both strokes are turned so that the
selected stroke ends at the joint and the other one starts there, and the
joint becomes a corner node whose handles follow the two tangents:

    L  = CORNER_HANDLE_RATIO * min(len_in, len_out)
    h1 = joint - dir_in * L
    h2 = joint + dir_out * L

``len_in``/``len_out`` are the lengths of the tangent vectors themselves:
the handle arm of a cubic, the chord of a line.

Example usage::

    from hangul_lib.paths import ShapeSession, merge_selected

    result = merge_selected(session)
    if result.merged:
        session = result.session
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from ..config import CORNER_HANDLE_RATIO, MERGE_SNAP_DISTANCE
from ..domain.geometry import Point
from ..domain.shapes import (
    DEFAULT_COLOR,
    DEFAULT_WIDTH,
    CubicStroke,
    LineStroke,
    Node,
    PathShape,
    Stroke,
    is_stroke,
    new_shape_id,
)
from ..utils.geometry import endpoint_distances
from .session import ShapeSession

logger = logging.getLogger(__name__)

# Endpoint pairings in tie-break order: (selected end, other end)
PAIRINGS = (('p0', 'p0'), ('p0', 'p1'), ('p1', 'p0'), ('p1', 'p1'))


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a merge attempt.

    Attributes:
        merged: False when nothing changed; session is then the input session.
        session: Session after the merge.
        path: The new path, when merged.
        removed_ids: Ids of the two strokes the path replaced.
    """
    merged: bool
    session: ShapeSession
    path: Optional[PathShape] = None
    removed_ids: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EndpointMatch:
    """Closest endpoint pair between the selected stroke and another."""
    other: Stroke
    own_end: str
    other_end: str
    distance: float


def find_closest_endpoint(selected: Stroke, shapes) -> Optional[EndpointMatch]:
    """Closest endpoint pairing over all other strokes.

    Paths are never candidates. Ties go to the earliest shape, then to
    the earliest pairing in PAIRINGS.
    """
    candidates = [s for s in shapes if is_stroke(s) and s.id != selected.id]
    if not candidates:
        return None

    own = [selected.p0, selected.p1]
    # Rows are candidates; columns follow PAIRINGS order
    table = np.stack([endpoint_distances(own, [s.p0, s.p1]).ravel() for s in candidates])
    flat = int(np.argmin(table))
    row, col = divmod(flat, len(PAIRINGS))
    own_end, other_end = PAIRINGS[col]
    return EndpointMatch(candidates[row], own_end, other_end, float(table[row, col]))


def _incoming_tangent(stroke: Stroke) -> Point:
    if isinstance(stroke, CubicStroke):
        return stroke.p1 - stroke.c2
    if isinstance(stroke, LineStroke):
        return stroke.p1 - stroke.p0
    raise TypeError(f"Unknown shape kind: {type(stroke).__name__}")


def _outgoing_tangent(stroke: Stroke) -> Point:
    if isinstance(stroke, CubicStroke):
        return stroke.c1 - stroke.p0
    if isinstance(stroke, LineStroke):
        return stroke.p1 - stroke.p0
    raise TypeError(f"Unknown shape kind: {type(stroke).__name__}")


def corner_handles(a: Stroke, b: Stroke,
                   ratio: float = CORNER_HANDLE_RATIO) -> Tuple[Point, Point]:
    """Incoming and outgoing handles at the joint a.p1 == b.p0.

    A zero tangent has no direction, so its handle sits on the joint.
    """
    tan_in = _incoming_tangent(a)
    tan_out = _outgoing_tangent(b)
    length = ratio * min(tan_in.length(), tan_out.length())
    joint = a.p1
    return joint - tan_in.normalized() * length, joint + tan_out.normalized() * length


def join_strokes(a: Stroke, b: Stroke, path_id: Optional[str] = None) -> PathShape:
    """Three-node path through a.p0, the joint a.p1, and b.p1.

    Both strokes must already be oriented so the joint is a.p1 and b.p0.
    Outer handles are kept from cubic strokes.
    """
    h1, h2 = corner_handles(a, b)
    nodes = (
        Node(a.p0, h2=a.c1 if isinstance(a, CubicStroke) else None),
        Node(a.p1, h1=h1, h2=h2),
        Node(b.p1, h1=b.c2 if isinstance(b, CubicStroke) else None),
    )
    color = a.color if a.color is not None else b.color
    width = a.width if a.width is not None else b.width
    return PathShape(
        id=path_id or new_shape_id(),
        nodes=nodes,
        color=color if color is not None else DEFAULT_COLOR,
        width=width if width is not None else DEFAULT_WIDTH,
    )


def merge_selected(session: ShapeSession, selected_id: Optional[str] = None,
                   snap_distance: float = MERGE_SNAP_DISTANCE) -> MergeResult:
    """Merge the selected stroke with its nearest neighbour.

    Args:
        session: Current shape session.
        selected_id: Stroke to merge; defaults to the session's selection.
        snap_distance: Largest endpoint gap that still merges.

    Returns:
        MergeResult. Nothing merges when the selection is a path or missing,
        or when no other stroke has an endpoint within snap_distance.
    """
    selected_id = selected_id if selected_id is not None else session.selected_id
    selected = session.get(selected_id) if selected_id is not None else None
    if selected is None or not is_stroke(selected):
        logger.debug("Merge skipped: %r is not a stroke", selected_id)
        return MergeResult(False, session)

    match = find_closest_endpoint(selected, session.shapes)
    if match is None or match.distance > snap_distance:
        logger.debug("Merge skipped: nearest endpoint %s away",
                     None if match is None else round(match.distance, 2))
        return MergeResult(False, session)

    a = selected.reversed() if match.own_end == 'p0' else selected
    b = match.other.reversed() if match.other_end == 'p1' else match.other
    path = join_strokes(a, b)

    removed = (selected.id, match.other.id)
    shapes = tuple(s for s in session.shapes if s.id not in removed) + (path,)
    logger.info("Merged strokes %s and %s into path %s (gap %.2f)",
                removed[0], removed[1], path.id, match.distance)
    return MergeResult(True, session.with_shapes(shapes, selected_id=path.id), path, removed)
