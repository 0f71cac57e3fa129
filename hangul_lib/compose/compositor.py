"""Map jamo strokes into slot boxes.

Stroke coordinates are fractions of the jamo's own box. Placing a stroke
into a slot box maps its origin affinely:

    abs_x = (box.x + stroke.x * box.width) * scale
    abs_y = (box.y + stroke.y * box.height) * scale

Its extent is not simply stretched. A horizontal stroke keeps a fixed
height and scales its width with the box; a vertical stroke keeps a fixed
width and scales its height. Strokes therefore keep the same visual weight
in a tall narrow slot and in a short wide one.

Mixed vowels are placed against two boxes: strokes of the horizontal group
go into JU_H and strokes of the vertical group into JU_V. The union of the
two is only used for previews and selection, and for the odd stroke that
belongs to neither group.

Example:
    >>> from hangul_lib.hangul import decompose_syllable
    >>> from hangul_lib.layout import calculate_boxes, get_default_schema
    >>> syllable = decompose_syllable('가')
    >>> boxes = calculate_boxes(get_default_schema(syllable.layout_type))
    >>> glyph = compose_syllable(syllable, boxes)
    >>> [s.stroke_id for s in glyph.strokes]
    ['ㄱ-1', 'ㄱ-2', 'ㅏ-1', 'ㅏ-2']
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..config import PREVIEW_BASE_SIZE, STROKE_THICKNESS, VIEW_BOX_SIZE
from ..domain.geometry import UNIT_BOX, BoxConfig, union_boxes
from ..domain.jamo import JamoData, JamoType, StrokeDirection, StrokeRel
from ..domain.layout import LayoutType, Part
from ..hangul.data import get_jamo
from ..hangul.unicode import Syllable, VowelClass, classify_vowel

logger = logging.getLogger(__name__)

JamoLookup = Callable[[JamoType, Optional[str]], Optional[JamoData]]


@dataclass(frozen=True)
class Rect:
    """Absolute rectangle on the rendering surface."""
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class PlacedStroke:
    """A stroke after placement, tagged with where it came from."""
    part: Part
    jamo_char: str
    stroke_id: str
    direction: StrokeDirection
    rect: Rect


@dataclass(frozen=True)
class ComposedGlyph:
    """Every placed stroke of one syllable.

    Slot boxes are held in a read-only mapping and strokes in a tuple.

    Attributes:
        char: The source character.
        layout_type: Layout the syllable was classified into.
        scale: Canvas size the normalized boxes were multiplied by.
        slot_boxes: Normalized slot boxes used for placement.
        strokes: Placed strokes in choseong, jungseong, jongseong order.
    """
    char: str
    layout_type: LayoutType
    scale: float
    slot_boxes: Mapping[Part, BoxConfig] = field(default_factory=dict, hash=False)
    strokes: Tuple[PlacedStroke, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'slot_boxes', MappingProxyType(dict(self.slot_boxes)))
        object.__setattr__(self, 'strokes', tuple(self.strokes))

    def to_dict(self) -> Dict:
        return {
            'char': self.char,
            'layoutType': self.layout_type.value,
            'scale': self.scale,
            'boxes': {p.value: b.to_dict() for p, b in self.slot_boxes.items()},
            'strokes': [
                {'part': s.part.value, 'jamo': s.jamo_char, 'id': s.stroke_id, **s.rect.to_dict()}
                for s in self.strokes
            ],
        }


def map_stroke(stroke: StrokeRel, box: BoxConfig, scale: float = VIEW_BOX_SIZE,
               thickness: float = STROKE_THICKNESS) -> Rect:
    """Place a stroke into a box, holding its thickness constant.

    Args:
        stroke: Stroke relative to its jamo box.
        box: Box the jamo is placed in (normalized, or absolute with scale 1).
        scale: Multiplier from box units to canvas units.
        thickness: Fixed size of the stroke across its direction, in
            canvas units.

    Returns:
        Absolute rectangle.
    """
    x = (box.x + stroke.x * box.width) * scale
    y = (box.y + stroke.y * box.height) * scale
    if stroke.direction is StrokeDirection.HORIZONTAL:
        return Rect(x, y, stroke.width * box.width * scale, thickness)
    if stroke.direction is StrokeDirection.VERTICAL:
        return Rect(x, y, thickness, stroke.height * box.height * scale)
    raise ValueError(f"Unknown stroke direction: {stroke.direction}")


def map_stroke_exact(stroke: StrokeRel, box: BoxConfig, scale: float = VIEW_BOX_SIZE) -> Rect:
    """Place a stroke by plain box stretching (thickness scales too)."""
    return Rect(
        (box.x + stroke.x * box.width) * scale,
        (box.y + stroke.y * box.height) * scale,
        stroke.width * box.width * scale,
        stroke.height * box.height * scale,
    )


def combined_box(boxes: Mapping[Part, BoxConfig]) -> Optional[BoxConfig]:
    """Union of JU_H and JU_V, or None unless both are present."""
    ju_h = boxes.get(Part.JU_H)
    ju_v = boxes.get(Part.JU_V)
    if ju_h is None or ju_v is None:
        return None
    return union_boxes(ju_h, ju_v)


def place_strokes(strokes: Iterable[StrokeRel], jamo: JamoData, part: Part, box: BoxConfig,
                  ju_h: Optional[BoxConfig] = None, ju_v: Optional[BoxConfig] = None,
                  scale: float = VIEW_BOX_SIZE,
                  thickness: float = STROKE_THICKNESS) -> List[PlacedStroke]:
    """Place strokes of a jamo, routing mixed-vowel groups to their boxes.

    Args:
        strokes: Strokes to place; may be an edited draft of jamo's strokes.
        jamo: Reference jamo whose group membership decides the box.
        part: Slot tag for the result.
        box: Box used for plain jamo and for strokes in neither group.
        ju_h: Box of the horizontal group of a mixed vowel.
        ju_v: Box of the vertical group of a mixed vowel.
        scale: Multiplier from box units to canvas units.
        thickness: Fixed stroke thickness in canvas units.
    """
    split = jamo.is_mixed and ju_h is not None and ju_v is not None
    horizontal_ids = jamo.horizontal_ids if split else frozenset()
    vertical_ids = jamo.vertical_ids if split else frozenset()

    placed = []
    for stroke in strokes:
        if stroke.stroke_id in horizontal_ids:
            target = ju_h
        elif stroke.stroke_id in vertical_ids:
            target = ju_v
        else:
            target = box
        placed.append(PlacedStroke(
            part=part,
            jamo_char=jamo.char,
            stroke_id=stroke.stroke_id,
            direction=stroke.direction,
            rect=map_stroke(stroke, target, scale, thickness),
        ))
    return placed


def place_jamo(jamo: JamoData, boxes: Mapping[Part, BoxConfig], scale: float = VIEW_BOX_SIZE,
               thickness: float = STROKE_THICKNESS) -> List[PlacedStroke]:
    """Place every stroke of a jamo into the slot boxes of a layout.

    Choseong go into CH and jongseong into JO. A jungseong goes into JU, or
    into JU_H/JU_V when the layout has the mixed pair. A missing slot box
    places nothing.
    """
    if jamo.type is JamoType.CHOSEONG:
        part, box = Part.CH, boxes.get(Part.CH)
    elif jamo.type is JamoType.JONGSEONG:
        part, box = Part.JO, boxes.get(Part.JO)
    elif jamo.type is JamoType.JUNGSEONG:
        union = combined_box(boxes)
        if union is not None:
            return place_strokes(jamo.all_strokes, jamo, Part.JU, union,
                                 boxes[Part.JU_H], boxes[Part.JU_V], scale, thickness)
        part, box = Part.JU, boxes.get(Part.JU)
    else:
        raise ValueError(f"Unknown jamo type: {jamo.type}")

    if box is None:
        logger.warning("No %s box for jamo %r", part.value, jamo.char)
        return []
    return place_strokes(jamo.all_strokes, jamo, part, box, scale=scale, thickness=thickness)


def compose_syllable(syllable: Syllable, boxes: Mapping[Part, BoxConfig],
                     scale: float = VIEW_BOX_SIZE, thickness: float = STROKE_THICKNESS,
                     lookup: JamoLookup = get_jamo) -> ComposedGlyph:
    """Place all jamo of a decomposed syllable.

    Args:
        syllable: Decomposed syllable (its layout type is already decided).
        boxes: Slot boxes resolved for that layout type.
        scale: Canvas size.
        thickness: Fixed stroke thickness in canvas units.
        lookup: Jamo table lookup; defaults to the static table.

    Returns:
        ComposedGlyph. Jamo missing from the table are skipped.
    """
    placed: List[PlacedStroke] = []
    slots = (
        (JamoType.CHOSEONG, syllable.choseong),
        (JamoType.JUNGSEONG, syllable.jungseong),
        (JamoType.JONGSEONG, syllable.jongseong),
    )
    for jamo_type, char in slots:
        if not char:
            continue
        jamo = lookup(jamo_type, char)
        if jamo is None:
            logger.warning("No glyph data for %s %r in %r", jamo_type.value, char, syllable.char)
            continue
        placed.extend(place_jamo(jamo, boxes, scale, thickness))
    return ComposedGlyph(char=syllable.char, layout_type=syllable.layout_type,
                         scale=scale, slot_boxes=boxes, strokes=placed)


# ---------------------------------------------------------------------------
# Jamo editor preview
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class JamoBoxInfo:
    """Box a jamo is previewed in; ju_h/ju_v are set for mixed vowels."""
    box: BoxConfig
    ju_h: Optional[BoxConfig] = None
    ju_v: Optional[BoxConfig] = None

    @property
    def is_mixed(self) -> bool:
        return self.ju_h is not None and self.ju_v is not None


_VOWEL_LAYOUTS = {
    VowelClass.MIXED: (
        LayoutType.JUNGSEONG_MIXED_ONLY,
        LayoutType.CHOSEONG_JUNGSEONG_MIXED,
        LayoutType.CHOSEONG_JUNGSEONG_MIXED_JONGSEONG,
    ),
    VowelClass.VERTICAL: (
        LayoutType.JUNGSEONG_VERTICAL_ONLY,
        LayoutType.CHOSEONG_JUNGSEONG_VERTICAL,
        LayoutType.CHOSEONG_JUNGSEONG_VERTICAL_JONGSEONG,
    ),
    VowelClass.HORIZONTAL: (
        LayoutType.JUNGSEONG_HORIZONTAL_ONLY,
        LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL,
        LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL_JONGSEONG,
    ),
}

# Single component box a non-mixed vowel may use instead of JU
_COMPONENT_PART = {
    VowelClass.VERTICAL: Part.JU_V,
    VowelClass.HORIZONTAL: Part.JU_H,
}


def _vowel_box_info(char: str,
                    layout_boxes: Mapping[LayoutType, Mapping[Part, BoxConfig]]) -> JamoBoxInfo:
    vowel_class = classify_vowel(char)
    if vowel_class is None:
        return JamoBoxInfo(UNIT_BOX)

    for layout_type in _VOWEL_LAYOUTS[vowel_class]:
        boxes = layout_boxes.get(layout_type)
        if not boxes:
            continue
        if vowel_class is VowelClass.MIXED:
            union = combined_box(boxes)
            if union is not None:
                return JamoBoxInfo(union, boxes[Part.JU_H], boxes[Part.JU_V])
        else:
            component = boxes.get(_COMPONENT_PART[vowel_class])
            if component is not None:
                return JamoBoxInfo(component)
        if Part.JU in boxes:
            return JamoBoxInfo(boxes[Part.JU])
    return JamoBoxInfo(UNIT_BOX)


def resolve_jamo_box(jamo_type: JamoType, char: str,
                     layout_boxes: Mapping[LayoutType, Mapping[Part, BoxConfig]]) -> JamoBoxInfo:
    """Box the jamo editor previews a jamo in.

    Vowels use the first layout of their class that provides a box; mixed
    vowels get the union of JU_H and JU_V plus both component boxes.
    Consonants use the first layout (in LayoutType order) with a CH or JO
    box. Anything else gets the unit box.

    Args:
        jamo_type: Position of the jamo.
        char: Compatibility jamo character.
        layout_boxes: Resolved boxes for each layout type.
    """
    if jamo_type is JamoType.JUNGSEONG:
        return _vowel_box_info(char, layout_boxes)

    part = Part.CH if jamo_type is JamoType.CHOSEONG else Part.JO
    for layout_type in LayoutType:
        box = layout_boxes.get(layout_type, {}).get(part)
        if box is not None:
            return JamoBoxInfo(box)
    return JamoBoxInfo(UNIT_BOX)


def preview_strokes(strokes: Sequence[StrokeRel], jamo: JamoData, info: JamoBoxInfo,
                    scale: float = VIEW_BOX_SIZE,
                    thickness: float = STROKE_THICKNESS) -> List[PlacedStroke]:
    """Place draft strokes of a jamo in its preview box."""
    part = {
        JamoType.CHOSEONG: Part.CH,
        JamoType.JUNGSEONG: Part.JU,
        JamoType.JONGSEONG: Part.JO,
    }[jamo.type]
    return place_strokes(strokes, jamo, part, info.box, info.ju_h, info.ju_v, scale, thickness)


@dataclass(frozen=True)
class PreviewSize:
    """Pixel size and view-box size of a preview with the box's aspect."""
    width: float
    height: float
    view_width: float
    view_height: float


def preview_dimensions(box: BoxConfig, base_size: float = PREVIEW_BASE_SIZE,
                       view_size: float = VIEW_BOX_SIZE) -> PreviewSize:
    """Fit a preview to the aspect ratio of a box.

    The longer side gets base_size pixels; the view box keeps view_size
    units across and adjusts its height to the same aspect.
    """
    aspect = box.aspect_ratio or 1.0
    if aspect >= 1:
        width, height = base_size, base_size / aspect
    else:
        width, height = base_size * aspect, base_size
    return PreviewSize(width, height, view_size, view_size / aspect)
