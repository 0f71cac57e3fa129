"""Default layout schemas, one per LayoutType.

The values are hand-tuned; each schema fixes which slots a layout has and
how many splits on which axes it carries. Interactive edits produce new
schemas through ``LayoutSession`` and never mutate these.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

from ..domain.geometry import Padding
from ..domain.layout import Axis, LayoutSchema, LayoutType, Part, Split

# Used when a multi-slot schema carries no padding
DEFAULT_PADDING = Padding.uniform(0.05)

# Used when a schema has no splits and no padding (wider margins)
DEFAULT_SINGLE_SLOT_PADDING = Padding.uniform(0.15)


def _pad(top: float, bottom: float, left: float, right: float) -> Padding:
    return Padding(top=top, bottom=bottom, left=left, right=right)


_SCHEMAS = (
    LayoutSchema(
        id=LayoutType.CHOSEONG_ONLY,
        slots=(Part.CH,),
        padding=_pad(0.15, 0.15, 0.15, 0.15),
    ),
    LayoutSchema(
        id=LayoutType.JUNGSEONG_VERTICAL_ONLY,
        slots=(Part.JU,),
        padding=_pad(0.1, 0.1, 0.25, 0.25),
    ),
    LayoutSchema(
        id=LayoutType.JUNGSEONG_HORIZONTAL_ONLY,
        slots=(Part.JU,),
        padding=_pad(0.3, 0.3, 0.1, 0.1),
    ),
    LayoutSchema(
        id=LayoutType.JUNGSEONG_MIXED_ONLY,
        slots=(Part.JU_H, Part.JU_V),
        splits=(Split(Axis.X, 0.5), Split(Axis.Y, 0.5)),
        padding=_pad(0.15, 0.15, 0.15, 0.15),
    ),
    LayoutSchema(
        id=LayoutType.CHOSEONG_JUNGSEONG_VERTICAL,
        slots=(Part.CH, Part.JU),
        splits=(Split(Axis.X, 0.63),),
        padding=_pad(0.1, 0.1, 0.08, 0.08),
    ),
    LayoutSchema(
        id=LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL,
        slots=(Part.CH, Part.JU),
        splits=(Split(Axis.Y, 0.55),),
        padding=_pad(0.05, 0.05, 0.1, 0.1),
    ),
    LayoutSchema(
        id=LayoutType.CHOSEONG_JUNGSEONG_MIXED,
        slots=(Part.CH, Part.JU_H, Part.JU_V),
        splits=(Split(Axis.X, 0.58), Split(Axis.Y, 0.55)),
        padding=_pad(0.1, 0.1, 0.08, 0.07),
    ),
    LayoutSchema(
        id=LayoutType.CHOSEONG_JUNGSEONG_VERTICAL_JONGSEONG,
        slots=(Part.CH, Part.JU, Part.JO),
        splits=(Split(Axis.X, 0.62), Split(Axis.Y, 0.55)),
        padding=_pad(0.05, 0.05, 0.08, 0.08),
    ),
    LayoutSchema(
        id=LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL_JONGSEONG,
        slots=(Part.CH, Part.JU, Part.JO),
        splits=(Split(Axis.Y, 0.37), Split(Axis.Y, 0.60)),
        padding=_pad(0.02, 0.03, 0.1, 0.1),
    ),
    LayoutSchema(
        id=LayoutType.CHOSEONG_JUNGSEONG_MIXED_JONGSEONG,
        slots=(Part.CH, Part.JU_H, Part.JU_V, Part.JO),
        splits=(Split(Axis.X, 0.58), Split(Axis.Y, 0.55), Split(Axis.Y, 0.76)),
        padding=_pad(0.05, 0.05, 0.08, 0.06),
    ),
)

DEFAULT_LAYOUT_SCHEMAS: Mapping[LayoutType, LayoutSchema] = MappingProxyType(
    {schema.id: schema for schema in _SCHEMAS}
)


def get_default_schema(layout_type: LayoutType | str) -> LayoutSchema:
    """Default schema for a layout type (enum member or its string value).

    Raises:
        ValueError: If the string does not name a layout type.
    """
    if not isinstance(layout_type, LayoutType):
        layout_type = LayoutType(layout_type)
    return DEFAULT_LAYOUT_SCHEMAS[layout_type]
