"""Geometric value objects for glyph layout and stroke editing."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Length when treated as a vector from origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Point:
        """Unit vector in same direction."""
        length = self.length()
        if length < 1e-9:
            return Point(0.0, 0.0)
        return self / length

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dict for JSON serialization."""
        return {'x': float(self.x), 'y': float(self.y)}

    @classmethod
    def from_dict(cls, d: dict) -> Point:
        return cls(d['x'], d['y'])


@dataclass(frozen=True)
class Padding:
    """Margins of a unit square, as fractions of its side.

    Attributes:
        top: Fraction reserved above the interior.
        bottom: Fraction reserved below the interior.
        left: Fraction reserved left of the interior.
        right: Fraction reserved right of the interior.
    """
    top: float
    bottom: float
    left: float
    right: float

    SIDES = ('top', 'bottom', 'left', 'right')

    @classmethod
    def uniform(cls, value: float) -> Padding:
        return cls(value, value, value, value)

    def replace_side(self, side: str, value: float) -> Padding:
        """Return a copy with one side changed."""
        if side not in self.SIDES:
            raise ValueError(f"Unknown padding side: {side}")
        values = self.to_dict()
        values[side] = value
        return Padding(**values)

    def to_dict(self) -> Dict[str, float]:
        return {
            'top': self.top,
            'bottom': self.bottom,
            'left': self.left,
            'right': self.right,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Padding:
        return cls(d['top'], d['bottom'], d['left'], d['right'])


@dataclass(frozen=True)
class BoxConfig:
    """Immutable box in the normalized 0..1 space of its parent square."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_valid(self) -> bool:
        """True when the box has positive extent on both axes."""
        return self.width > 0 and self.height > 0

    @property
    def aspect_ratio(self) -> float:
        if self.height <= 0:
            return 0.0
        return self.width / self.height

    def overlaps(self, other: BoxConfig) -> bool:
        """True when the interiors of the two boxes intersect."""
        return (self.x < other.right and other.x < self.right and
                self.y < other.bottom and other.y < self.bottom)

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

    @classmethod
    def from_dict(cls, d: dict) -> BoxConfig:
        return cls(d['x'], d['y'], d['width'], d['height'])


UNIT_BOX = BoxConfig(0.0, 0.0, 1.0, 1.0)


def box_from_padding(padding: Padding) -> BoxConfig:
    """Interior of the unit square left after removing padding.

    Padding that sums to 1 or more on an axis gives a box with zero or
    negative extent; check ``BoxConfig.is_valid`` before rendering.

    Example:
        >>> box = box_from_padding(Padding(top=0.1, bottom=0.1, left=0.2, right=0.2))
        >>> round(box.width, 6), round(box.height, 6)
        (0.6, 0.8)
    """
    return BoxConfig(
        x=padding.left,
        y=padding.top,
        width=1 - padding.left - padding.right,
        height=1 - padding.top - padding.bottom,
    )


def union_boxes(*boxes: BoxConfig) -> BoxConfig:
    """Smallest box containing every input box."""
    if not boxes:
        raise ValueError("union_boxes needs at least one box")
    if len(boxes) == 1:
        return boxes[0]
    min_x = min(b.x for b in boxes)
    min_y = min(b.y for b in boxes)
    max_x = max(b.right for b in boxes)
    max_y = max(b.bottom for b in boxes)
    return BoxConfig(min_x, min_y, max_x - min_x, max_y - min_y)


def bounds_of(points: List[Point]) -> Tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) of a list of points."""
    if not points:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
