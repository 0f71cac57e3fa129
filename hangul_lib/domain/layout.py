"""Layout schema domain objects.

A layout schema describes how the unit square of a syllable block is cut
into named slots. The schema is declarative: an ordered list of axis splits
plus a padding. ``hangul_lib.layout.resolver`` turns it into boxes.

The module provides the following classes:
    Part: Slot names (initial consonant, vowel and its two components,
        final consonant).
    LayoutType: The ten structural syllable layouts.
    Split: A single axis-aligned cut.
    LayoutSchema: Slots, splits and padding for one layout type.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .geometry import Padding


class Part(Enum):
    """Slot of a syllable block.

    CH is the initial consonant, JU a single-box vowel, JU_H and JU_V the
    horizontal and vertical components of a mixed vowel, JO the final
    consonant.
    """
    CH = 'CH'
    JU = 'JU'
    JU_H = 'JU_H'
    JU_V = 'JU_V'
    JO = 'JO'


class LayoutType(Enum):
    """Structural arrangement of slots inside a syllable block."""
    CHOSEONG_ONLY = 'choseong-only'
    JUNGSEONG_VERTICAL_ONLY = 'jungseong-vertical-only'
    JUNGSEONG_HORIZONTAL_ONLY = 'jungseong-horizontal-only'
    JUNGSEONG_MIXED_ONLY = 'jungseong-mixed-only'
    CHOSEONG_JUNGSEONG_VERTICAL = 'choseong-jungseong-vertical'
    CHOSEONG_JUNGSEONG_HORIZONTAL = 'choseong-jungseong-horizontal'
    CHOSEONG_JUNGSEONG_MIXED = 'choseong-jungseong-mixed'
    CHOSEONG_JUNGSEONG_VERTICAL_JONGSEONG = 'choseong-jungseong-vertical-jongseong'
    CHOSEONG_JUNGSEONG_HORIZONTAL_JONGSEONG = 'choseong-jungseong-horizontal-jongseong'
    CHOSEONG_JUNGSEONG_MIXED_JONGSEONG = 'choseong-jungseong-mixed-jongseong'


class Axis(Enum):
    X = 'x'
    Y = 'y'


@dataclass(frozen=True)
class Split:
    """A cut position along one axis, in unit-square coordinates."""
    axis: Axis
    value: float

    def to_dict(self) -> dict:
        return {'axis': self.axis.value, 'value': self.value}

    @classmethod
    def from_dict(cls, d: dict) -> Split:
        return cls(axis=Axis(d['axis']), value=d['value'])


@dataclass(frozen=True)
class LayoutSchema:
    """Declarative layout for one LayoutType.

    Attributes:
        id: Layout type this schema describes.
        slots: Slot names the layout fills, in display order.
        splits: Ordered cuts. Order matters when two cuts share an axis:
            the second subdivides the region bounded by the first.
        padding: Outer margins, or None to use the resolver default.
    """
    id: LayoutType
    slots: Tuple[Part, ...]
    splits: Tuple[Split, ...] = field(default_factory=tuple)
    padding: Optional[Padding] = None

    def split_for(self, axis: Axis) -> Optional[Split]:
        """First split on the given axis."""
        for split in self.splits:
            if split.axis is axis:
                return split
        return None

    def splits_on(self, axis: Axis) -> List[Split]:
        """All splits on the given axis, in schema order."""
        return [s for s in self.splits if s.axis is axis]

    def with_split_value(self, index: int, value: float) -> LayoutSchema:
        splits = list(self.splits)
        splits[index] = replace(splits[index], value=value)
        return replace(self, splits=tuple(splits))

    def with_padding(self, padding: Padding) -> LayoutSchema:
        return replace(self, padding=padding)

    def to_dict(self) -> Dict:
        d: Dict = {
            'id': self.id.value,
            'slots': [p.value for p in self.slots],
        }
        if self.splits:
            d['splits'] = [s.to_dict() for s in self.splits]
        if self.padding is not None:
            d['padding'] = self.padding.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> LayoutSchema:
        padding = d.get('padding')
        return cls(
            id=LayoutType(d['id']),
            slots=tuple(Part(p) for p in d['slots']),
            splits=tuple(Split.from_dict(s) for s in d.get('splits', [])),
            padding=Padding.from_dict(padding) if padding else None,
        )
