import math
from unittest import TestCase

from shapely.geometry import Point as ShapelyPoint

from tilecrs.constructs.point import Point, to_point


class TestPoint(TestCase):
    def test_arithmetic_returns_new_points(self):
        a = Point(50, 30)
        b = Point(20, 10)

        self.assertEqual(a.add(b), Point(70, 40))
        self.assertEqual(a.subtract(b), Point(30, 20))
        self.assertEqual(a.multiply_by(2), Point(100, 60))
        self.assertEqual(a.divide_by(2), Point(25, 15))
        self.assertEqual(a.scale_by(Point(2, 3)), Point(100, 90))
        self.assertEqual(a.unscale_by(Point(2, 3)), Point(25, 10))

        # the originals are untouched
        self.assertEqual(a, Point(50, 30))
        self.assertEqual(b, Point(20, 10))

    def test_operators_behave_like_vectors(self):
        a = Point(1, 2)

        self.assertEqual(a + Point(3, 4), Point(4, 6))
        self.assertEqual(a - Point(3, 4), Point(-2, -2))
        self.assertEqual(a * 3, Point(3, 6))
        self.assertEqual(3 * a, Point(3, 6))
        self.assertEqual(a / 2, Point(0.5, 1))
        self.assertEqual(-a, Point(-1, -2))

    def test_rounding(self):
        p = Point(50.5, -30.5)

        self.assertEqual(p.round(), Point(51, -30))
        self.assertEqual(p.floor(), Point(50, -31))
        self.assertEqual(p.ceil(), Point(51, -30))
        self.assertEqual(Point(2.7, -2.7).trunc(), Point(2, -2))

    def test_rounding_passes_non_finite_values_through(self):
        p = Point(math.nan, math.inf).floor()

        self.assertTrue(math.isnan(p.x))
        self.assertEqual(p.y, math.inf)

    def test_divide_by_zero_propagates(self):
        p = Point(1, 0).divide_by(0)

        self.assertEqual(p.x, math.inf)
        self.assertTrue(math.isnan(p.y))

        q = Point(-1, 2).unscale_by(Point(0, 0))
        self.assertEqual(q, Point(-math.inf, math.inf))

    def test_distance_to(self):
        self.assertEqual(Point(0, 0).distance_to(Point(3, 4)), 5)
        self.assertEqual(Point(-1, -1).distance_to(Point(-1, -1)), 0)

    def test_equals_within_tolerance(self):
        self.assertTrue(Point(20.4, 50.12).equals(Point(20.4, 50.12)))
        self.assertTrue(Point(20037508.34, 1).equals(Point(20037508.34 + 1e-6, 1)))
        self.assertFalse(Point(20.4, 50.12).equals(Point(20.4, 50.13)))
        self.assertTrue(Point(1, 1).equals(Point(1.01, 1), epsilon=0.1))

    def test_contains(self):
        p = Point(50, 30)

        self.assertTrue(p.contains(Point(-50, 20)))
        self.assertFalse(p.contains(Point(-50, 40)))

    def test_to_string(self):
        self.assertEqual(Point(50.1234567, 30.1).to_string(), "Point(50.123457, 30.1)")
        self.assertEqual(Point(50.1234567, 30.1).to_string(2), "Point(50.12, 30.1)")

    def test_to_point(self):
        self.assertEqual(to_point(Point(1, 2)), Point(1, 2))
        self.assertEqual(to_point((1, 2)), Point(1, 2))
        self.assertEqual(to_point([1, 2]), Point(1, 2))
        self.assertEqual(to_point({"x": 1, "y": 2}), Point(1, 2))
        self.assertEqual(to_point(ShapelyPoint(1, 2)), Point(1, 2))

        with self.assertRaises(TypeError):
            to_point("12")
        with self.assertRaises(TypeError):
            to_point((1, 2, 3))

    def test_to_shapely(self):
        geom = Point(3, 4).to_shapely()

        self.assertEqual((geom.x, geom.y), (3, 4))
