import math
from unittest import TestCase

from shapely.geometry import LineString

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.point import Point


class TestBounds(TestCase):
    def setUp(self):
        self.a = Bounds(Point(14, 12), Point(30, 40))
        self.b = Bounds.from_points([Point(20, 33), Point(14, 12), Point(30, 40)])

    def test_constructor_normalizes_corners(self):
        bounds = Bounds(Point(30, 12), Point(14, 40))

        self.assertEqual(bounds.min, Point(14, 12))
        self.assertEqual(bounds.max, Point(30, 40))
        self.assertEqual(bounds, self.a)

    def test_from_points(self):
        self.assertEqual(self.b.min, Point(14, 12))
        self.assertEqual(self.b.max, Point(30, 40))

        with self.assertRaises(ValueError):
            Bounds.from_points([])

    def test_extend_point(self):
        extended = self.a.extend(Point(50, 20))

        self.assertEqual(extended.min, Point(14, 12))
        self.assertEqual(extended.max, Point(50, 40))
        # extend returns a new instance
        self.assertEqual(self.a.max, Point(30, 40))

        extended = self.a.extend(Point(25, 50))
        self.assertEqual(extended.max, Point(30, 50))

    def test_extend_contains_both_inputs(self):
        other = Bounds(Point(-5, 100), Point(0, 120))
        extended = self.a.extend(other)

        self.assertTrue(extended.contains(self.a))
        self.assertTrue(extended.contains(other))
        self.assertEqual(extended, Bounds(Point(-5, 12), Point(30, 120)))

    def test_corners_and_size(self):
        self.assertEqual(self.a.get_center(), Point(22, 26))
        self.assertEqual(Bounds(Point(0, 0), Point(1, 1)).get_center(round=True), Point(1, 1))
        self.assertEqual(self.a.get_size(), Point(16, 28))
        self.assertEqual(self.a.get_bottom_left(), Point(14, 40))
        self.assertEqual(self.a.get_top_right(), Point(30, 12))
        self.assertEqual(self.a.get_top_left(), Point(14, 12))
        self.assertEqual(self.a.get_bottom_right(), Point(30, 40))

    def test_contains(self):
        self.assertTrue(self.a.contains(Bounds(Point(20, 25), Point(25, 30))))
        self.assertFalse(self.a.contains(Bounds(Point(0, 25), Point(25, 30))))
        self.assertTrue(self.a.contains(Point(24, 25)))
        self.assertTrue(self.a.contains((14, 40)))
        self.assertFalse(self.a.contains(Point(40, 25)))

    def test_intersects_counts_touching_edges(self):
        self.assertTrue(self.a.intersects(Bounds(Point(16, 20), Point(50, 8))))
        self.assertTrue(self.a.intersects(Bounds(Point(30, 40), Point(50, 50))))
        self.assertFalse(self.a.intersects(Bounds(Point(18, 6), Point(50, 8))))

    def test_overlaps_ignores_touching_edges(self):
        self.assertTrue(self.a.overlaps(Bounds(Point(16, 20), Point(50, 8))))
        self.assertFalse(self.a.overlaps(Bounds(Point(30, 40), Point(50, 50))))
        self.assertFalse(self.a.overlaps(Bounds(Point(30, 12), Point(50, 40))))

    def test_pad(self):
        padded = Bounds(Point(0, 0), Point(10, 20)).pad(0.5)

        self.assertEqual(padded, Bounds(Point(-5, -10), Point(15, 30)))
        self.assertEqual(padded.get_center(), Point(5, 10))

    def test_equals_and_validity(self):
        self.assertTrue(self.a.equals(Bounds(Point(14 + 1e-12, 12), Point(30, 40))))
        self.assertFalse(self.a.equals(Bounds(Point(15, 12), Point(30, 40))))

        self.assertTrue(self.a.is_valid())
        self.assertFalse(Bounds(Point(math.nan, 0), Point(1, 1)).is_valid())

    def test_shapely_round_trip(self):
        polygon = self.a.to_polygon()

        self.assertEqual(polygon.area, 16 * 28)
        self.assertEqual(Bounds.from_shapely(polygon), self.a)

        line = LineString([(0, 5), (3, -1)])
        self.assertEqual(Bounds.from_shapely(line), Bounds(Point(0, -1), Point(3, 5)))
