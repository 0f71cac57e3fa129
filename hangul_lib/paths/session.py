"""Immutable freehand shape editing session.

A ``ShapeSession`` is the whole editor state: the ordered shapes and the
selected id. Every edit returns a new session. Dragging a whole shape is
handled by ``DragSession``, which keeps a snapshot of the shape taken when
the drag started and positions it at snapshot + cumulative movement on every
frame, so rounding never accumulates across frames.

Point limits:
    p0/p1 stay on the canvas, [0, CANVAS_WIDTH] x [0, CANVAS_HEIGHT].
    c1/c2 may leave it by up to CTRL_MARGIN on every side.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..config import CANVAS_HEIGHT, CANVAS_WIDTH, CTRL_MARGIN, GRID
from ..domain.geometry import Point, bounds_of
from ..domain.shapes import (
    DEFAULT_COLOR,
    DEFAULT_WIDTH,
    CubicStroke,
    LineStroke,
    PathShape,
    Shape,
    anchor_points,
    new_shape_id,
)
from ..utils.geometry import clamp, snap, snap_point

logger = logging.getLogger(__name__)

POINT_KEYS = ('p0', 'p1', 'c1', 'c2')
CONTROL_KEYS = ('c1', 'c2')


def clamp_by_key(key: str, point: Point) -> Point:
    """Clamp a stroke point to the range its key allows."""
    if key not in POINT_KEYS:
        raise ValueError(f"Unknown point key: {key}. Valid: {list(POINT_KEYS)}")
    margin = CTRL_MARGIN if key in CONTROL_KEYS else 0
    return Point(
        clamp(point.x, -margin, CANVAS_WIDTH + margin),
        clamp(point.y, -margin, CANVAS_HEIGHT + margin),
    )


def snap_clamp_by_key(key: str, point: Point, grid: float = GRID) -> Point:
    return clamp_by_key(key, snap_point(point, grid))


def _limit(key: str, point: Point, snap_to_grid: bool) -> Point:
    return snap_clamp_by_key(key, point) if snap_to_grid else clamp_by_key(key, point)


def default_stroke() -> LineStroke:
    """Stroke the toolbar adds: a horizontal line across the canvas."""
    return LineStroke(new_shape_id(), Point(80, 260), Point(320, 260),
                      color=DEFAULT_COLOR, width=DEFAULT_WIDTH)


@dataclass(frozen=True)
class ShapeSession:
    """Ordered shapes plus the current selection."""
    shapes: Tuple[Shape, ...] = ()
    selected_id: Optional[str] = None

    @classmethod
    def sample(cls) -> ShapeSession:
        """The two strokes of a giyeok, one straight and one curved."""
        return cls((
            LineStroke(new_shape_id(), Point(120, 240), Point(260, 240),
                       color=DEFAULT_COLOR, width=DEFAULT_WIDTH),
            CubicStroke(new_shape_id(), Point(260, 240), Point(260, 360),
                        c1=Point(260, 260), c2=Point(260, 340),
                        color=DEFAULT_COLOR, width=DEFAULT_WIDTH),
        ))

    def get(self, shape_id: str) -> Optional[Shape]:
        return next((s for s in self.shapes if s.id == shape_id), None)

    @property
    def selected(self) -> Optional[Shape]:
        return self.get(self.selected_id) if self.selected_id is not None else None

    def with_shapes(self, shapes, selected_id: Optional[str] = None) -> ShapeSession:
        return ShapeSession(tuple(shapes), selected_id)

    def _replace_shape(self, shape: Shape) -> ShapeSession:
        return replace(self, shapes=tuple(shape if s.id == shape.id else s for s in self.shapes))

    def add_stroke(self, stroke: Optional[Shape] = None) -> ShapeSession:
        stroke = stroke if stroke is not None else default_stroke()
        return replace(self, shapes=self.shapes + (stroke,))

    def select(self, shape_id: Optional[str]) -> ShapeSession:
        return replace(self, selected_id=shape_id)

    def deselect(self) -> ShapeSession:
        return replace(self, selected_id=None)

    def remove_selected(self) -> ShapeSession:
        if self.selected_id is None:
            return self
        return ShapeSession(tuple(s for s in self.shapes if s.id != self.selected_id), None)

    def toggle_cubic(self) -> ShapeSession:
        """Turn the selected line into a cubic, or the selected cubic into a line.

        A new cubic gets its control points on its endpoints, so it draws
        the same line. Paths are left alone.
        """
        shape = self.selected
        if isinstance(shape, LineStroke):
            return self._replace_shape(shape.to_cubic())
        if isinstance(shape, CubicStroke):
            return self._replace_shape(shape.to_line())
        return self

    def move_point(self, shape_id: str, key: str, dx: float, dy: float,
                   snap_to_grid: bool = False) -> ShapeSession:
        """Move one point of a stroke by a frame delta, clamped.

        Paths have no editable points here; c1/c2 exist only on cubics.
        Both cases leave the session unchanged.
        """
        shape = self.get(shape_id)
        if not isinstance(shape, (LineStroke, CubicStroke)):
            return self
        if key in CONTROL_KEYS and not isinstance(shape, CubicStroke):
            return self
        current: Point = getattr(shape, key)
        moved = _limit(key, current.translated(dx, dy), snap_to_grid)
        return self._replace_shape(replace(shape, **{key: moved}))

    def commit_point(self, shape_id: str, key: str, snap_to_grid: bool = False) -> ShapeSession:
        """Final clamp (and optional snap) of a point when its handle is released."""
        return self.move_point(shape_id, key, 0.0, 0.0, snap_to_grid)


def _translate_snapshot(start: Shape, dx: float, dy: float, snap_to_grid: bool) -> Shape:
    if isinstance(start, PathShape):
        return start.translated(dx, dy)
    if isinstance(start, (LineStroke, CubicStroke)):
        moved = start.translated(dx, dy)
        points = {key: _limit(key, getattr(moved, key), snap_to_grid)
                  for key in POINT_KEYS if hasattr(moved, key)}
        return replace(moved, **points)
    raise TypeError(f"Unknown shape kind: {type(start).__name__}")


def drag_delta(start: Shape, mx: float, my: float, snap_to_grid: bool = False,
               grid: float = GRID) -> Tuple[float, float]:
    """Cumulative movement to apply to a snapshot, after snapping and clamping.

    Snapping moves the first anchor of the shape onto the grid. The delta is
    then clamped so every anchor stays on the canvas; handles may go off it.
    """
    anchors = anchor_points(start)
    if not anchors:
        return 0.0, 0.0
    dx, dy = mx, my
    if snap_to_grid:
        first = anchors[0]
        dx = snap(first.x + mx, grid) - first.x
        dy = snap(first.y + my, grid) - first.y
    min_x, min_y, max_x, max_y = bounds_of(anchors)
    return clamp(dx, -min_x, CANVAS_WIDTH - max_x), clamp(dy, -min_y, CANVAS_HEIGHT - max_y)


class DragSession:
    """Whole-shape drag with a snapshot taken at start.

    Usage::

        drag = DragSession()
        drag.start(session)
        session = drag.update(session, mx, my)        # on every frame
        session = drag.end(session, mx, my, snap_to_grid=True)

    ``mx``/``my`` are the movement since the drag started, not per-frame
    deltas. The drag is cancelled when the session's selection is no longer
    the shape it started on.
    """

    def __init__(self):
        self.shape_id: Optional[str] = None
        self.snapshot: Optional[Shape] = None

    @property
    def active(self) -> bool:
        return self.snapshot is not None

    def start(self, session: ShapeSession) -> bool:
        """Snapshot the selected shape. Returns False when nothing is selected."""
        shape = session.selected
        if shape is None:
            self.cancel()
            return False
        self.shape_id = shape.id
        self.snapshot = shape
        logger.debug("Drag started on %s", shape.id)
        return True

    def cancel(self) -> None:
        self.shape_id = None
        self.snapshot = None

    def _apply(self, session: ShapeSession, mx: float, my: float,
               snap_to_grid: bool) -> ShapeSession:
        if not self.active:
            return session
        if session.selected_id != self.shape_id or session.get(self.shape_id) is None:
            logger.debug("Drag on %s cancelled: selection changed", self.shape_id)
            self.cancel()
            return session
        dx, dy = drag_delta(self.snapshot, mx, my, snap_to_grid)
        return session._replace_shape(_translate_snapshot(self.snapshot, dx, dy, snap_to_grid))

    def update(self, session: ShapeSession, mx: float, my: float,
               snap_to_grid: bool = False) -> ShapeSession:
        """Position the dragged shape at snapshot + movement."""
        return self._apply(session, mx, my, snap_to_grid)

    def end(self, session: ShapeSession, mx: float = 0.0, my: float = 0.0,
            snap_to_grid: bool = False) -> ShapeSession:
        """Finish the drag; with snapping the final position is snapped once more."""
        if snap_to_grid:
            session = self._apply(session, mx, my, True)
        self.cancel()
        return session
