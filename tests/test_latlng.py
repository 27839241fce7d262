import math
from unittest import TestCase

from tilecrs.constructs.latlng import LatLng, haversine, to_latlng


class TestLatLng(TestCase):
    def test_equals_within_margin(self):
        a = LatLng(50, 30.5, 100)

        self.assertTrue(a.equals(LatLng(50, 30.5)))
        self.assertTrue(a.equals(LatLng(50.0000000001, 30.5)))
        self.assertFalse(a.equals(LatLng(50.00001, 30.5)))
        self.assertTrue(a.equals(LatLng(50.00001, 30.5), max_margin=1e-4))

    def test_distance_to(self):
        a = LatLng(50.5, 30.5)
        b = LatLng(50, 1)

        self.assertAlmostEqual(a.distance_to(b), 2084000, delta=500)
        self.assertEqual(a.distance_to(LatLng(50.5, 30.5)), 0)

    def test_distance_to_is_symmetric(self):
        pairs = [
            (LatLng(40.7128, -74.0060), LatLng(51.5074, -0.1278)),
            (LatLng(-33.8688, 151.2093), LatLng(35.6762, 139.6503)),
            (LatLng(0, 179.9), LatLng(0, -179.9)),
        ]
        for a, b in pairs:
            self.assertAlmostEqual(a.distance_to(b), b.distance_to(a), places=6)
            self.assertGreater(a.distance_to(b), 0)

    def test_distance_across_antimeridian_is_short(self):
        d = LatLng(0, 179.9).distance_to(LatLng(0, -179.9))

        # 0.2 degrees along the equator
        self.assertAlmostEqual(d, 6371000 * math.radians(0.2), places=3)

    def test_haversine_quarter_circumference(self):
        d = haversine(LatLng(0, 0), LatLng(90, 0))

        self.assertAlmostEqual(d, math.pi / 2 * 6371000, places=3)

    def test_wrap(self):
        self.assertEqual(LatLng(0, 190).wrap().lng, -170)
        self.assertEqual(LatLng(0, 360).wrap().lng, 0)
        self.assertEqual(LatLng(0, 380).wrap().lng, 20)
        self.assertEqual(LatLng(0, -190).wrap().lng, 170)
        self.assertEqual(LatLng(0, 180).wrap().lng, 180)
        self.assertEqual(LatLng(0, -180).wrap().lng, 180)
        self.assertEqual(LatLng(0, 0).wrap().lng, 0)

    def test_wrap_keeps_lat_and_alt(self):
        wrapped = LatLng(95, 370, 10).wrap()

        self.assertEqual(wrapped, LatLng(95, 10, 10))

    def test_to_bounds(self):
        bounds = LatLng(52, 4).to_bounds(200)

        self.assertTrue(bounds.contains(LatLng(52, 4)))
        self.assertAlmostEqual(bounds.get_north() - bounds.get_south(), 0.0017966, places=6)
        self.assertTrue(bounds.get_center().equals(LatLng(52, 4)))

    def test_to_string(self):
        self.assertEqual(LatLng(50.012345678, 30.1).to_string(), "LatLng(50.012346, 30.1)")
        self.assertEqual(LatLng(50.012345678, 30.1).to_string(1), "LatLng(50.0, 30.1)")

    def test_to_latlng(self):
        self.assertEqual(to_latlng((50, 30)), LatLng(50, 30))
        self.assertEqual(to_latlng([50, 30, 100]), LatLng(50, 30, 100))
        self.assertEqual(to_latlng({"lat": 50, "lng": 30}), LatLng(50, 30))
        self.assertEqual(to_latlng({"lat": 50, "lon": 30}), LatLng(50, 30))

        with self.assertRaises(TypeError):
            to_latlng({"latitude": 50})
        with self.assertRaises(TypeError):
            to_latlng(50)

    def test_nan_propagates(self):
        a = LatLng(math.nan, 0)

        self.assertTrue(math.isnan(a.distance_to(LatLng(0, 0))))
        self.assertFalse(a.equals(LatLng(0, 0)))

    def test_to_shapely_uses_lng_as_x(self):
        geom = LatLng(50, 30).to_shapely()

        self.assertEqual((geom.x, geom.y), (30, 50))
