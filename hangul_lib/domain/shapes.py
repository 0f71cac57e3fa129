"""Freehand shape primitives.

Shapes drawn in the freehand editor are one of three kinds:

    LineStroke: straight segment p0 -> p1.
    CubicStroke: cubic Bezier p0 -> p1 with control points c1 (near p0)
        and c2 (near p1).
    PathShape: ordered nodes; the segment between two nodes is a cubic when
        the left node has an outgoing handle and the right node an incoming
        one, otherwise a line.

``Shape`` is the union of the three. Code that consumes shapes checks the
kind explicitly and raises TypeError for anything else.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple, Union
import uuid

from .geometry import Point

DEFAULT_COLOR = '#111'
DEFAULT_WIDTH = 18.0


def new_shape_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class LineStroke:
    """Straight stroke."""
    id: str
    p0: Point
    p1: Point
    color: Optional[str] = None
    width: Optional[float] = None

    kind = 'line'

    def reversed(self) -> LineStroke:
        return replace(self, p0=self.p1, p1=self.p0)

    def translated(self, dx: float, dy: float) -> LineStroke:
        return replace(self, p0=self.p0.translated(dx, dy), p1=self.p1.translated(dx, dy))

    def to_cubic(self) -> CubicStroke:
        """Cubic with handles on the endpoints; draws the same line."""
        return CubicStroke(self.id, self.p0, self.p1, c1=self.p0, c2=self.p1,
                           color=self.color, width=self.width)


@dataclass(frozen=True)
class CubicStroke:
    """Cubic Bezier stroke."""
    id: str
    p0: Point
    p1: Point
    c1: Point
    c2: Point
    color: Optional[str] = None
    width: Optional[float] = None

    kind = 'cubic'

    def reversed(self) -> CubicStroke:
        """Same curve walked from p1 to p0."""
        return replace(self, p0=self.p1, p1=self.p0, c1=self.c2, c2=self.c1)

    def translated(self, dx: float, dy: float) -> CubicStroke:
        return replace(
            self,
            p0=self.p0.translated(dx, dy),
            p1=self.p1.translated(dx, dy),
            c1=self.c1.translated(dx, dy),
            c2=self.c2.translated(dx, dy),
        )

    def to_line(self) -> LineStroke:
        return LineStroke(self.id, self.p0, self.p1, color=self.color, width=self.width)


@dataclass(frozen=True)
class Node:
    """Path anchor with optional incoming (h1) and outgoing (h2) handles."""
    p: Point
    h1: Optional[Point] = None
    h2: Optional[Point] = None

    def translated(self, dx: float, dy: float) -> Node:
        return Node(
            p=self.p.translated(dx, dy),
            h1=self.h1.translated(dx, dy) if self.h1 is not None else None,
            h2=self.h2.translated(dx, dy) if self.h2 is not None else None,
        )


@dataclass(frozen=True)
class PathShape:
    """Multi-node path, typically the result of merging two strokes."""
    id: str
    nodes: Tuple[Node, ...] = field(default_factory=tuple)
    color: Optional[str] = None
    width: Optional[float] = None

    kind = 'path'

    def translated(self, dx: float, dy: float) -> PathShape:
        return replace(self, nodes=tuple(n.translated(dx, dy) for n in self.nodes))


Stroke = Union[LineStroke, CubicStroke]
Shape = Union[LineStroke, CubicStroke, PathShape]


def is_stroke(shape: Shape) -> bool:
    return isinstance(shape, (LineStroke, CubicStroke))


def anchor_points(shape: Shape) -> List[Point]:
    """On-curve points of a shape (endpoints or path nodes)."""
    if isinstance(shape, (LineStroke, CubicStroke)):
        return [shape.p0, shape.p1]
    if isinstance(shape, PathShape):
        return [n.p for n in shape.nodes]
    raise TypeError(f"Unknown shape kind: {type(shape).__name__}")


def _point_or_none(d: Optional[dict]) -> Optional[Point]:
    return Point.from_dict(d) if d else None


def shape_to_dict(shape: Shape) -> Dict:
    """Tagged dict for JSON serialization."""
    d: Dict = {'type': shape.kind, 'id': shape.id}
    if isinstance(shape, LineStroke):
        d.update(p0=shape.p0.to_dict(), p1=shape.p1.to_dict())
    elif isinstance(shape, CubicStroke):
        d.update(p0=shape.p0.to_dict(), p1=shape.p1.to_dict(),
                 c1=shape.c1.to_dict(), c2=shape.c2.to_dict())
    elif isinstance(shape, PathShape):
        nodes = []
        for n in shape.nodes:
            nd: Dict = {'p': n.p.to_dict()}
            if n.h1 is not None:
                nd['h1'] = n.h1.to_dict()
            if n.h2 is not None:
                nd['h2'] = n.h2.to_dict()
            nodes.append(nd)
        d['nodes'] = nodes
    else:
        raise TypeError(f"Unknown shape kind: {type(shape).__name__}")
    if shape.color is not None:
        d['stroke'] = shape.color
    if shape.width is not None:
        d['strokeWidth'] = shape.width
    return d


def shape_from_dict(d: dict) -> Shape:
    """Inverse of shape_to_dict."""
    kind = d['type']
    color = d.get('stroke')
    width = d.get('strokeWidth')
    if kind == 'line':
        return LineStroke(d['id'], Point.from_dict(d['p0']), Point.from_dict(d['p1']),
                          color=color, width=width)
    if kind == 'cubic':
        return CubicStroke(d['id'], Point.from_dict(d['p0']), Point.from_dict(d['p1']),
                           Point.from_dict(d['c1']), Point.from_dict(d['c2']),
                           color=color, width=width)
    if kind == 'path':
        nodes = tuple(
            Node(Point.from_dict(n['p']), _point_or_none(n.get('h1')), _point_or_none(n.get('h2')))
            for n in d['nodes']
        )
        return PathShape(d['id'], nodes, color=color, width=width)
    raise ValueError(f"Unknown shape type: {kind}")
