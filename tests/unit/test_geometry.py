"""Unit tests for box math and geometry helpers.

Tests the value objects in hangul_lib.domain.geometry and the numeric
helpers in hangul_lib.utils.geometry:
    - Point: vector operations and normalization
    - Padding / box_from_padding: padded interior of the unit square
    - BoxConfig: edges, validity, overlap
    - union_boxes: smallest enclosing box
    - clamp / snap: range and grid helpers
    - sample_cubic / endpoint_distances: numpy helpers
"""

import math
import unittest

import numpy as np

from hangul_lib.domain.geometry import (
    UNIT_BOX,
    BoxConfig,
    Padding,
    Point,
    bounds_of,
    box_from_padding,
    union_boxes,
)
from hangul_lib.utils.geometry import clamp, endpoint_distances, sample_cubic, snap, snap_point


class TestPoint(unittest.TestCase):
    """Tests for Point vector operations."""

    def test_distance(self):
        """3-4-5 triangle."""
        self.assertEqual(Point(0, 0).distance_to(Point(3, 4)), 5.0)

    def test_arithmetic(self):
        p = Point(1, 2) + Point(3, 4)
        self.assertEqual(p, Point(4, 6))
        self.assertEqual(Point(4, 6) - Point(1, 2), Point(3, 4))
        self.assertEqual(Point(1, 2) * 2, Point(2, 4))
        self.assertEqual(Point(2, 4) / 2, Point(1, 2))

    def test_normalized_has_unit_length(self):
        n = Point(3, 4).normalized()
        self.assertAlmostEqual(n.length(), 1.0)
        self.assertAlmostEqual(n.x, 0.6)

    def test_normalized_zero_stays_zero(self):
        """A zero vector has no direction; normalizing keeps it zero."""
        n = Point(0, 0).normalized()
        self.assertEqual(n.length(), 0.0)
        self.assertFalse(math.isnan(n.x))

    def test_dict_roundtrip(self):
        p = Point(1.5, -2.0)
        self.assertEqual(Point.from_dict(p.to_dict()), p)


class TestBoxFromPadding(unittest.TestCase):
    """Tests for box_from_padding."""

    def test_asymmetric_padding(self):
        """Left/right 0.2 and top/bottom 0.1 leave a 0.6 x 0.8 interior."""
        box = box_from_padding(Padding(top=0.1, bottom=0.1, left=0.2, right=0.2))
        self.assertAlmostEqual(box.x, 0.2)
        self.assertAlmostEqual(box.y, 0.1)
        self.assertAlmostEqual(box.width, 0.6)
        self.assertAlmostEqual(box.height, 0.8)
        self.assertTrue(box.is_valid)

    def test_zero_padding_is_unit_box(self):
        self.assertEqual(box_from_padding(Padding.uniform(0.0)), UNIT_BOX)

    def test_excess_padding_is_invalid_not_error(self):
        """Padding summing to 1 or more yields a degenerate box, not an exception."""
        box = box_from_padding(Padding(top=0.6, bottom=0.6, left=0.1, right=0.1))
        self.assertLessEqual(box.height, 0)
        self.assertFalse(box.is_valid)

    def test_replace_side(self):
        padding = Padding.uniform(0.05).replace_side('left', 0.2)
        self.assertEqual(padding.left, 0.2)
        self.assertEqual(padding.right, 0.05)

    def test_replace_unknown_side_raises(self):
        with self.assertRaises(ValueError):
            Padding.uniform(0.05).replace_side('middle', 0.2)


class TestBoxConfig(unittest.TestCase):
    """Tests for BoxConfig edges and relations."""

    def test_edges(self):
        box = BoxConfig(0.1, 0.2, 0.3, 0.4)
        self.assertAlmostEqual(box.right, 0.4)
        self.assertAlmostEqual(box.bottom, 0.6)

    def test_overlap(self):
        a = BoxConfig(0.0, 0.0, 0.5, 0.5)
        self.assertTrue(a.overlaps(BoxConfig(0.4, 0.4, 0.5, 0.5)))
        self.assertFalse(a.overlaps(BoxConfig(0.5, 0.0, 0.5, 0.5)))

    def test_dict_roundtrip(self):
        box = BoxConfig(0.1, 0.2, 0.3, 0.4)
        self.assertEqual(BoxConfig.from_dict(box.to_dict()), box)


class TestUnionBoxes(unittest.TestCase):
    """Tests for union_boxes."""

    def test_union_of_two(self):
        union = union_boxes(BoxConfig(0.1, 0.5, 0.3, 0.3), BoxConfig(0.5, 0.1, 0.3, 0.8))
        self.assertAlmostEqual(union.x, 0.1)
        self.assertAlmostEqual(union.y, 0.1)
        self.assertAlmostEqual(union.right, 0.8)
        self.assertAlmostEqual(union.bottom, 0.9)

    def test_single_box(self):
        box = BoxConfig(0.1, 0.2, 0.3, 0.4)
        self.assertIs(union_boxes(box), box)

    def test_union_with_itself(self):
        box = BoxConfig(0.1, 0.2, 0.3, 0.4)
        union = union_boxes(box, box)
        self.assertAlmostEqual(union.width, 0.3)
        self.assertAlmostEqual(union.height, 0.4)

    def test_empty_raises(self):
        with self.assertRaises(ValueError):
            union_boxes()

    def test_bounds_of_points(self):
        self.assertEqual(bounds_of([Point(3, 1), Point(-1, 4)]), (-1, 1, 3, 4))


class TestNumericHelpers(unittest.TestCase):
    """Tests for clamp, snap and the numpy helpers."""

    def test_clamp(self):
        self.assertEqual(clamp(5, 0, 3), 3)
        self.assertEqual(clamp(-1, 0, 3), 0)
        self.assertEqual(clamp(2, 0, 3), 2)

    def test_snap_to_grid(self):
        self.assertEqual(snap(29), 20)
        self.assertEqual(snap(31), 40)
        self.assertEqual(snap_point(Point(9, 11)), Point(0, 20))

    def test_sample_cubic_endpoints(self):
        samples = sample_cubic(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0), n_samples=5)
        self.assertEqual(samples.shape, (5, 2))
        np.testing.assert_allclose(samples[0], [0, 0])
        np.testing.assert_allclose(samples[-1], [10, 0])
        # Midpoint of a symmetric arch
        np.testing.assert_allclose(samples[2], [5, 7.5])

    def test_endpoint_distances(self):
        d = endpoint_distances([Point(0, 0), Point(10, 0)], [Point(0, 3), Point(13, 4)])
        self.assertEqual(d.shape, (2, 2))
        self.assertAlmostEqual(d[0, 0], 3.0)
        self.assertAlmostEqual(d[1, 1], 5.0)


if __name__ == '__main__':
    unittest.main()
