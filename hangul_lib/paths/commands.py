"""Draw commands for freehand shapes.

Shapes are turned into a flat list of commands in absolute coordinates:

    ('M', (x, y))                       move to
    ('L', (x, y))                       line to
    ('C', (x1, y1), (x2, y2), (x, y))   cubic curve to

``to_path_d`` formats the same list as SVG path data.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from ..domain.geometry import Point
from ..domain.shapes import CubicStroke, LineStroke, PathShape, Shape


@dataclass(frozen=True)
class DrawCommand:
    """One draw command; points holds 1 point for M/L and 3 for C."""
    op: str
    points: Tuple[Point, ...]


def move_to(p: Point) -> DrawCommand:
    return DrawCommand('M', (p,))


def line_to(p: Point) -> DrawCommand:
    return DrawCommand('L', (p,))


def curve_to(c1: Point, c2: Point, p: Point) -> DrawCommand:
    return DrawCommand('C', (c1, c2, p))


def path_commands(shape: Shape) -> List[DrawCommand]:
    """Commands that draw a shape.

    Between two path nodes the segment is a cubic when the left node has an
    outgoing handle and the right node an incoming handle, otherwise a
    line. A path with no nodes draws nothing; a single-node path only moves.

    Raises:
        TypeError: For an unknown shape kind.
    """
    if isinstance(shape, LineStroke):
        return [move_to(shape.p0), line_to(shape.p1)]
    if isinstance(shape, CubicStroke):
        return [move_to(shape.p0), curve_to(shape.c1, shape.c2, shape.p1)]
    if isinstance(shape, PathShape):
        nodes = shape.nodes
        if not nodes:
            return []
        commands = [move_to(nodes[0].p)]
        for a, b in zip(nodes, nodes[1:]):
            if a.h2 is not None and b.h1 is not None:
                commands.append(curve_to(a.h2, b.h1, b.p))
            else:
                commands.append(line_to(b.p))
        return commands
    raise TypeError(f"Unknown shape kind: {type(shape).__name__}")


def _fmt(value: float) -> str:
    # Integral values print without a trailing ".0"
    text = f"{value:.3f}".rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def _fmt_point(p: Point) -> str:
    return f"{_fmt(p.x)},{_fmt(p.y)}"


def to_path_d(shape: Shape) -> str:
    """SVG path data for a shape, e.g. ``'M120,240L260,240'``."""
    return ''.join(
        cmd.op + ','.join(_fmt_point(p) for p in cmd.points)
        for cmd in path_commands(shape)
    )
