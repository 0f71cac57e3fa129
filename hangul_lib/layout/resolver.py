"""Resolve layout schemas into slot boxes.

Each multi-slot layout type has a closed-form recipe that partitions the
padded unit square into named sub-rectangles. Recipes read one or two split
values by axis and fall back to a fixed default when a split is missing, so
a partially specified schema still renders.

Gap conventions:
    - Two-slot layouts leave half of the adjoining padding on each side of
      the cut.
    - Layouts with a jongseong or a mixed vowel leave 0.02 on each side of
      a cut (0.01 for the stacked horizontal-jongseong bands).

Split values are not validated here. Out-of-range values give degenerate
boxes, which are returned unchanged and logged at DEBUG; keeping edits in
range is the job of ``LayoutSession``.

Example:
    >>> from hangul_lib.layout import calculate_boxes, get_default_schema
    >>> from hangul_lib.domain import LayoutType, Part
    >>> boxes = calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL))
    >>> sorted(p.value for p in boxes)
    ['CH', 'JU']
"""

from __future__ import annotations
import logging
from typing import Callable, Dict

from ..domain.geometry import BoxConfig, Padding, box_from_padding
from ..domain.layout import Axis, LayoutSchema, LayoutType, Part
from .schemas import DEFAULT_PADDING, DEFAULT_SINGLE_SLOT_PADDING

logger = logging.getLogger(__name__)

BoxMap = Dict[Part, BoxConfig]

# Gap left on each side of a cut in three-slot and mixed layouts
SLOT_GAP = 0.02

# Gap left on each side of a cut between stacked bands
BAND_GAP = 0.01


def _split_value(schema: LayoutSchema, axis: Axis, default: float) -> float:
    split = schema.split_for(axis)
    return split.value if split is not None else default


def _ordered_split_values(schema: LayoutSchema, axis: Axis,
                          defaults: tuple[float, float]) -> tuple[float, float]:
    splits = schema.splits_on(axis)
    first = splits[0].value if len(splits) > 0 else defaults[0]
    second = splits[1].value if len(splits) > 1 else defaults[1]
    return first, second


def _vertical_split(schema: LayoutSchema, padding: Padding) -> BoxMap:
    """CH left of the x split, JU right, both full height."""
    split_x = _split_value(schema, Axis.X, 0.6)
    height = 1 - padding.top - padding.bottom
    return {
        Part.CH: BoxConfig(
            x=padding.left,
            y=padding.top,
            width=split_x - padding.left - padding.right * 0.5,
            height=height,
        ),
        Part.JU: BoxConfig(
            x=split_x + padding.left * 0.5,
            y=padding.top,
            width=1 - split_x - padding.right - padding.left * 0.5,
            height=height,
        ),
    }


def _horizontal_split(schema: LayoutSchema, padding: Padding) -> BoxMap:
    """CH above the y split, JU below, both full width."""
    split_y = _split_value(schema, Axis.Y, 0.55)
    width = 1 - padding.left - padding.right
    return {
        Part.CH: BoxConfig(
            x=padding.left,
            y=padding.top,
            width=width,
            height=split_y - padding.top - padding.bottom * 0.5,
        ),
        Part.JU: BoxConfig(
            x=padding.left,
            y=split_y + padding.top * 0.5,
            width=width,
            height=1 - split_y - padding.bottom - padding.top * 0.5,
        ),
    }


def _vertical_with_jongseong(schema: LayoutSchema, padding: Padding) -> BoxMap:
    """CH top-left, JU top-right, JO across the bottom."""
    split_x = _split_value(schema, Axis.X, 0.6)
    split_y = _split_value(schema, Axis.Y, 0.55)
    top_height = split_y - padding.top - SLOT_GAP
    return {
        Part.CH: BoxConfig(padding.left, padding.top,
                           split_x - padding.left - SLOT_GAP, top_height),
        Part.JU: BoxConfig(split_x + SLOT_GAP, padding.top,
                           1 - split_x - padding.right - SLOT_GAP, top_height),
        Part.JO: BoxConfig(padding.left, split_y + SLOT_GAP,
                           1 - padding.left - padding.right,
                           1 - split_y - padding.bottom - SLOT_GAP),
    }


def _horizontal_with_jongseong(schema: LayoutSchema, padding: Padding) -> BoxMap:
    """CH, JU and JO stacked as three full-width bands.

    The first y split bounds CH; the second, taken in schema order,
    subdivides the remainder between JU and JO.
    """
    split_y1, split_y2 = _ordered_split_values(schema, Axis.Y, (0.37, 0.60))
    width = 1 - padding.left - padding.right
    return {
        Part.CH: BoxConfig(padding.left, padding.top, width,
                           split_y1 - padding.top - BAND_GAP),
        Part.JU: BoxConfig(padding.left, split_y1 + BAND_GAP, width,
                           split_y2 - split_y1 - 2 * BAND_GAP),
        Part.JO: BoxConfig(padding.left, split_y2 + BAND_GAP, width,
                           1 - split_y2 - padding.bottom - BAND_GAP),
    }


def _mixed_vowel_boxes(split_x: float, split_y: float, padding: Padding,
                       vertical_bottom: float) -> BoxMap:
    """JU_H below split_y on the left, JU_V right of split_x."""
    return {
        Part.JU_H: BoxConfig(padding.left, split_y + SLOT_GAP,
                             split_x - padding.left - SLOT_GAP,
                             1 - split_y - padding.bottom - SLOT_GAP),
        Part.JU_V: BoxConfig(split_x + SLOT_GAP, padding.top,
                             1 - split_x - padding.right - SLOT_GAP,
                             vertical_bottom - padding.top),
    }


def _mixed(schema: LayoutSchema, padding: Padding) -> BoxMap:
    """CH top-left, JU_H bottom-left, JU_V full-height right."""
    split_x = _split_value(schema, Axis.X, 0.55)
    split_y = _split_value(schema, Axis.Y, 0.5)
    boxes = _mixed_vowel_boxes(split_x, split_y, padding, 1 - padding.bottom)
    boxes[Part.CH] = BoxConfig(padding.left, padding.top,
                               split_x - padding.left - SLOT_GAP,
                               split_y - padding.top - SLOT_GAP)
    return boxes


def _mixed_with_jongseong(schema: LayoutSchema, padding: Padding) -> BoxMap:
    """CH top-left, JU_H middle-left, JU_V right, JO bottom-left.

    The first y split separates CH from JU_H, the second marks the top of
    JO; JU_V spans the height of CH and JU_H together.
    """
    split_x = _split_value(schema, Axis.X, 0.55)
    split_y1, split_y2 = _ordered_split_values(schema, Axis.Y, (0.5, 0.75))
    left_width = split_x - padding.left - SLOT_GAP
    return {
        Part.CH: BoxConfig(padding.left, padding.top, left_width,
                           split_y1 - padding.top - SLOT_GAP),
        Part.JU_H: BoxConfig(padding.left, split_y1 + SLOT_GAP, left_width,
                             split_y2 - split_y1 - 2 * SLOT_GAP),
        Part.JU_V: BoxConfig(split_x + SLOT_GAP, padding.top,
                             1 - split_x - padding.right - SLOT_GAP,
                             split_y2 - padding.top - SLOT_GAP),
        Part.JO: BoxConfig(padding.left, split_y2 + SLOT_GAP, left_width,
                           1 - split_y2 - padding.bottom - SLOT_GAP),
    }


def _mixed_only(schema: LayoutSchema, padding: Padding) -> BoxMap:
    """JU_H bottom-left, JU_V full-height right."""
    split_x = _split_value(schema, Axis.X, 0.5)
    split_y = _split_value(schema, Axis.Y, 0.5)
    return _mixed_vowel_boxes(split_x, split_y, padding, 1 - padding.bottom)


RECIPES: Dict[LayoutType, Callable[[LayoutSchema, Padding], BoxMap]] = {
    LayoutType.CHOSEONG_JUNGSEONG_VERTICAL: _vertical_split,
    LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL: _horizontal_split,
    LayoutType.CHOSEONG_JUNGSEONG_VERTICAL_JONGSEONG: _vertical_with_jongseong,
    LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL_JONGSEONG: _horizontal_with_jongseong,
    LayoutType.CHOSEONG_JUNGSEONG_MIXED: _mixed,
    LayoutType.CHOSEONG_JUNGSEONG_MIXED_JONGSEONG: _mixed_with_jongseong,
    LayoutType.JUNGSEONG_MIXED_ONLY: _mixed_only,
}


def _single_slot(schema: LayoutSchema) -> BoxMap:
    if not schema.slots:
        return {}
    padding = schema.padding or DEFAULT_SINGLE_SLOT_PADDING
    return {schema.slots[0]: box_from_padding(padding)}


def calculate_boxes(schema: LayoutSchema) -> BoxMap:
    """Compute the normalized box of every slot of a schema.

    Args:
        schema: Layout schema to resolve.

    Returns:
        Dict mapping each Part the layout fills to its BoxConfig. A schema
        without splits fills only its first slot, with the whole padded
        interior.
    """
    if not schema.splits:
        return _single_slot(schema)

    recipe = RECIPES.get(schema.id)
    if recipe is None:
        # Single-slot layout types that happen to carry splits
        return _single_slot(schema)

    boxes = recipe(schema, schema.padding or DEFAULT_PADDING)

    degenerate = [part.value for part, box in boxes.items() if not box.is_valid]
    if degenerate:
        logger.debug("Degenerate boxes for %s: %s", schema.id.value, ', '.join(degenerate))
    return boxes
