"""Jamo glyph fragments.

A jamo is drawn as a handful of axis-aligned rectangular strokes. Stroke
coordinates are fractions of the jamo's own box, so the same data can be
placed into any slot box a layout produces.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class JamoType(Enum):
    """Position a jamo takes in a syllable."""
    CHOSEONG = 'choseong'
    JUNGSEONG = 'jungseong'
    JONGSEONG = 'jongseong'


class StrokeDirection(Enum):
    """Which dimension of a stroke keeps a constant visual thickness.

    HORIZONTAL strokes hold their height fixed and scale their width with
    the box; VERTICAL strokes hold their width fixed and scale their height.
    """
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'


STROKE_FIELDS = ('x', 'y', 'width', 'height')


@dataclass(frozen=True)
class StrokeRel:
    """One rectangular stroke relative to its jamo box (0..1 fractions)."""
    stroke_id: str
    x: float
    y: float
    width: float
    height: float
    direction: StrokeDirection

    @property
    def is_horizontal(self) -> bool:
        return self.direction is StrokeDirection.HORIZONTAL

    def with_field(self, name: str, value: float) -> StrokeRel:
        if name not in STROKE_FIELDS:
            raise ValueError(f"Unknown stroke field: {name}")
        return replace(self, **{name: value})

    def to_dict(self) -> Dict:
        return {
            'id': self.stroke_id,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'direction': self.direction.value,
        }

    @classmethod
    def from_dict(cls, d: dict) -> StrokeRel:
        return cls(
            stroke_id=d['id'],
            x=d['x'],
            y=d['y'],
            width=d['width'],
            height=d['height'],
            direction=StrokeDirection(d['direction']),
        )


@dataclass(frozen=True)
class LegacyBox:
    """Absolute box in the legacy authoring grid (20-unit cells)."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class JamoData:
    """Glyph data for a single jamo.

    Plain jamo carry a flat ``strokes`` tuple. Mixed vowels instead carry
    ``horizontal_strokes`` and ``vertical_strokes``; each group is laid out
    against its own sub-box (JU_H and JU_V).

    Attributes:
        char: Compatibility jamo character, e.g. 'ㄱ'.
        type: Syllable position of this entry.
        box: Legacy absolute authoring box.
        strokes: Strokes of a plain jamo.
        horizontal_strokes: Horizontal component strokes of a mixed vowel.
        vertical_strokes: Vertical component strokes of a mixed vowel.
    """
    char: str
    type: JamoType
    box: LegacyBox = field(default_factory=lambda: LegacyBox(2, 2, 20, 20))
    strokes: Tuple[StrokeRel, ...] = field(default_factory=tuple)
    horizontal_strokes: Optional[Tuple[StrokeRel, ...]] = None
    vertical_strokes: Optional[Tuple[StrokeRel, ...]] = None

    @property
    def is_mixed(self) -> bool:
        """True when the jamo splits its strokes into two component groups."""
        return self.horizontal_strokes is not None and self.vertical_strokes is not None

    @property
    def all_strokes(self) -> Tuple[StrokeRel, ...]:
        """Every stroke; horizontal group first for split jamo."""
        if self.horizontal_strokes is not None or self.vertical_strokes is not None:
            return tuple(self.horizontal_strokes or ()) + tuple(self.vertical_strokes or ())
        return self.strokes

    @property
    def horizontal_ids(self) -> FrozenSet[str]:
        return frozenset(s.stroke_id for s in self.horizontal_strokes or ())

    @property
    def vertical_ids(self) -> FrozenSet[str]:
        return frozenset(s.stroke_id for s in self.vertical_strokes or ())
