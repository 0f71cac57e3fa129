"""Unit tests for layout resolution and the layout session.

Test coverage targets:
- calculate_boxes: every default schema, single-slot handling, determinism
- recipes: slot adjacency, gaps, split ordering, degenerate values
- get_default_schema: enum and string lookup
- LayoutSession: clamped split/padding edits, reset
"""

import unittest

from hangul_lib.domain import Axis, LayoutSchema, LayoutType, Padding, Part, Split
from hangul_lib.layout import (
    DEFAULT_LAYOUT_SCHEMAS,
    DEFAULT_SINGLE_SLOT_PADDING,
    LayoutSession,
    calculate_boxes,
    get_default_schema,
)
from hangul_lib.layout.resolver import SLOT_GAP

EPS = 1e-9


class TestDefaultSchemas(unittest.TestCase):
    """Every default schema resolves to valid boxes inside the unit square."""

    def test_ten_layouts(self):
        self.assertEqual(set(DEFAULT_LAYOUT_SCHEMAS), set(LayoutType))

    def test_all_boxes_valid_and_inside(self):
        for layout_type, schema in DEFAULT_LAYOUT_SCHEMAS.items():
            with self.subTest(layout=layout_type.value):
                boxes = calculate_boxes(schema)
                self.assertEqual(set(boxes), set(schema.slots))
                for box in boxes.values():
                    self.assertTrue(box.is_valid)
                    self.assertGreaterEqual(box.x, 0)
                    self.assertGreaterEqual(box.y, 0)
                    self.assertLessEqual(box.right, 1 + EPS)
                    self.assertLessEqual(box.bottom, 1 + EPS)

    def test_lookup_by_string(self):
        schema = get_default_schema('choseong-jungseong-vertical')
        self.assertIs(schema.id, LayoutType.CHOSEONG_JUNGSEONG_VERTICAL)

    def test_lookup_unknown_string_raises(self):
        with self.assertRaises(ValueError):
            get_default_schema('no-such-layout')

    def test_deterministic(self):
        schema = get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_MIXED_JONGSEONG)
        self.assertEqual(calculate_boxes(schema), calculate_boxes(schema))


class TestTwoSlotLayouts(unittest.TestCase):
    """Vertical and horizontal two-slot splits."""

    def test_vertical_values(self):
        boxes = calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL))
        ch, ju = boxes[Part.CH], boxes[Part.JU]
        # split 0.63, padding left/right 0.08, top/bottom 0.1
        self.assertAlmostEqual(ch.x, 0.08)
        self.assertAlmostEqual(ch.width, 0.51)
        self.assertAlmostEqual(ju.x, 0.67)
        self.assertAlmostEqual(ju.width, 0.25)
        self.assertAlmostEqual(ch.height, 0.8)
        self.assertAlmostEqual(ju.height, 0.8)

    def test_vertical_no_overlap(self):
        boxes = calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL))
        self.assertLessEqual(boxes[Part.CH].right, boxes[Part.JU].x)
        self.assertFalse(boxes[Part.CH].overlaps(boxes[Part.JU]))

    def test_horizontal_no_overlap(self):
        boxes = calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL))
        self.assertLessEqual(boxes[Part.CH].bottom, boxes[Part.JU].y)
        self.assertAlmostEqual(boxes[Part.CH].width, boxes[Part.JU].width)

    def test_missing_split_uses_default(self):
        schema = LayoutSchema(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL, (Part.CH, Part.JU),
                              splits=(Split(Axis.Y, 0.3),), padding=Padding.uniform(0.0))
        boxes = calculate_boxes(schema)
        # No x split: the cut falls at 0.6
        self.assertAlmostEqual(boxes[Part.CH].right, 0.6)


class TestJongseongLayouts(unittest.TestCase):
    """Three- and four-slot layouts."""

    def test_vertical_jongseong_gaps(self):
        boxes = calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL_JONGSEONG))
        ch, ju, jo = boxes[Part.CH], boxes[Part.JU], boxes[Part.JO]
        self.assertAlmostEqual(ju.x - ch.right, 2 * SLOT_GAP)
        self.assertAlmostEqual(jo.y - ch.bottom, 2 * SLOT_GAP)
        self.assertAlmostEqual(ch.y, ju.y)

    def test_horizontal_jongseong_bands_in_order(self):
        boxes = calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL_JONGSEONG))
        ch, ju, jo = boxes[Part.CH], boxes[Part.JU], boxes[Part.JO]
        self.assertLess(ch.bottom, ju.y)
        self.assertLess(ju.bottom, jo.y)
        self.assertAlmostEqual(ju.y, 0.38)
        self.assertAlmostEqual(jo.y, 0.61)

    def test_mixed_jongseong_vertical_component_spans(self):
        boxes = calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_MIXED_JONGSEONG))
        ju_v = boxes[Part.JU_V]
        self.assertAlmostEqual(ju_v.y, boxes[Part.CH].y)
        self.assertAlmostEqual(ju_v.bottom, boxes[Part.JU_H].bottom)
        self.assertLess(ju_v.bottom, boxes[Part.JO].y)
        for part in (Part.CH, Part.JU_H, Part.JO):
            self.assertFalse(ju_v.overlaps(boxes[part]))

    def test_mixed_pair(self):
        boxes = calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_MIXED))
        self.assertLess(boxes[Part.CH].bottom, boxes[Part.JU_H].y)
        self.assertLess(boxes[Part.JU_H].right, boxes[Part.JU_V].x)


class TestSingleSlot(unittest.TestCase):
    """Schemas without splits."""

    def test_default_single_slot_padding(self):
        schema = LayoutSchema(LayoutType.CHOSEONG_ONLY, (Part.CH,))
        box = calculate_boxes(schema)[Part.CH]
        self.assertAlmostEqual(box.x, DEFAULT_SINGLE_SLOT_PADDING.left)
        self.assertAlmostEqual(box.width, 0.7)

    def test_empty_slots(self):
        self.assertEqual(calculate_boxes(LayoutSchema(LayoutType.CHOSEONG_ONLY, ())), {})

    def test_single_slot_type_with_splits(self):
        """Splits on a single-slot layout are ignored."""
        schema = LayoutSchema(LayoutType.JUNGSEONG_VERTICAL_ONLY, (Part.JU,),
                              splits=(Split(Axis.X, 0.5),))
        self.assertEqual(list(calculate_boxes(schema)), [Part.JU])

    def test_out_of_range_split_not_validated(self):
        schema = LayoutSchema(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL, (Part.CH, Part.JU),
                              splits=(Split(Axis.X, 1.5),))
        boxes = calculate_boxes(schema)
        self.assertFalse(boxes[Part.JU].is_valid)


class TestLayoutSession(unittest.TestCase):
    """Clamped editing of schemas."""

    def setUp(self):
        self.session = LayoutSession()
        self.lt = LayoutType.CHOSEONG_JUNGSEONG_VERTICAL

    def test_update_split(self):
        updated = self.session.update_split(self.lt, 0, 0.7)
        self.assertEqual(updated.schema(self.lt).splits[0].value, 0.7)
        # Original session unchanged
        self.assertEqual(self.session.schema(self.lt).splits[0].value, 0.63)
        self.assertAlmostEqual(updated.boxes(self.lt)[Part.JU].x, 0.74)

    def test_update_split_clamped(self):
        self.assertEqual(self.session.update_split(self.lt, 0, 1.4).schema(self.lt).splits[0].value, 0.95)
        self.assertEqual(self.session.update_split(self.lt, 0, -1).schema(self.lt).splits[0].value, 0.05)

    def test_update_split_bad_index(self):
        self.assertIs(self.session.update_split(self.lt, 3, 0.5), self.session)

    def test_update_padding_clamped(self):
        updated = self.session.update_padding(self.lt, 'top', 0.9)
        self.assertEqual(updated.schema(self.lt).padding.top, 0.45)

    def test_update_padding_initialises_missing(self):
        schemas = dict(DEFAULT_LAYOUT_SCHEMAS)
        schemas[self.lt] = LayoutSchema(self.lt, (Part.CH, Part.JU), (Split(Axis.X, 0.6),))
        session = LayoutSession(schemas)
        padding = session.update_padding(self.lt, 'left', 0.1).schema(self.lt).padding
        self.assertEqual(padding, Padding(top=0.05, bottom=0.05, left=0.1, right=0.05))

    def test_update_padding_unknown_side(self):
        with self.assertRaises(ValueError):
            self.session.update_padding(self.lt, 'inside', 0.1)

    def test_reset(self):
        edited = self.session.update_split(self.lt, 0, 0.7).update_padding(self.lt, 'top', 0.2)
        self.assertEqual(edited.reset(self.lt).schema(self.lt), DEFAULT_LAYOUT_SCHEMAS[self.lt])
        self.assertEqual(edited.reset_all().schemas, DEFAULT_LAYOUT_SCHEMAS)

    def test_schemas_copied_read_only(self):
        schemas = dict(DEFAULT_LAYOUT_SCHEMAS)
        session = LayoutSession(schemas)
        schemas.pop(self.lt)
        self.assertIn(self.lt, session.schemas)
        with self.assertRaises(TypeError):
            session.schemas[self.lt] = DEFAULT_LAYOUT_SCHEMAS[self.lt]

    def test_hashable(self):
        edited = self.session.update_split(self.lt, 0, 0.7)
        self.assertEqual(hash(self.session), hash(LayoutSession()))
        self.assertEqual(self.session, LayoutSession())
        self.assertNotEqual(self.session, edited)
        self.assertEqual(len({self.session, LayoutSession(), edited}), 2)


def test_session_boxes_fixture(layout_session, vertical_boxes):
    """Session boxes match a direct resolve of the default schema."""
    assert layout_session.boxes(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL) == vertical_boxes


if __name__ == '__main__':
    unittest.main()
