from unittest import TestCase

import geopandas as gpd
import pandas as pd
from shapely.geometry import Point as ShapelyPoint

from tilecrs.constructs.latlng import LatLng
from tilecrs.crs.named import EPSG3857, SIMPLE
from tilecrs.utils.frame import dataframe_to_pixels, frame_bounds, frame_to_pixels


class TestFrameToPixels(TestCase):
    def setUp(self):
        self.frame = gpd.GeoDataFrame(
            geometry=[ShapelyPoint(0, 0), ShapelyPoint(30, 50)],
            index=["origin", "kyiv"],
            crs="EPSG:4326",
        )

    def test_matches_lat_lng_to_point(self):
        pixels = frame_to_pixels(self.frame, EPSG3857, zoom=2)

        self.assertEqual(list(pixels.columns), ["x", "y"])
        self.assertEqual(list(pixels.index), ["origin", "kyiv"])
        self.assertAlmostEqual(pixels.loc["origin", "x"], 512)
        self.assertAlmostEqual(pixels.loc["origin", "y"], 512)

        expected = EPSG3857.lat_lng_to_point(LatLng(50, 30), 2)
        self.assertAlmostEqual(pixels.loc["kyiv", "x"], expected.x)
        self.assertAlmostEqual(pixels.loc["kyiv", "y"], expected.y)

    def test_column_names(self):
        pixels = frame_to_pixels(
            self.frame, SIMPLE, zoom=0, x_column="px", y_column="py"
        )

        self.assertEqual(list(pixels.columns), ["px", "py"])
        self.assertEqual(pixels.loc["kyiv", "px"], 30)
        self.assertEqual(pixels.loc["kyiv", "py"], -50)

    def test_reprojects_other_crs(self):
        projected = self.frame.to_crs("EPSG:3857")

        pixels = frame_to_pixels(projected, EPSG3857, zoom=4)
        expected = frame_to_pixels(self.frame, EPSG3857, zoom=4)

        for label in ("origin", "kyiv"):
            self.assertAlmostEqual(pixels.loc[label, "x"], expected.loc[label, "x"], places=6)
            self.assertAlmostEqual(pixels.loc[label, "y"], expected.loc[label, "y"], places=6)

    def test_empty_frame(self):
        empty = gpd.GeoDataFrame(geometry=gpd.GeoSeries([], crs="EPSG:4326"))

        pixels = frame_to_pixels(empty, EPSG3857, zoom=0)

        self.assertEqual(len(pixels), 0)
        self.assertEqual(list(pixels.columns), ["x", "y"])

    def test_frame_without_crs(self):
        frame = gpd.GeoDataFrame(geometry=[ShapelyPoint(0, 0)])

        with self.assertRaises(TypeError):
            frame_to_pixels(frame, EPSG3857, zoom=0)


class TestDataframeToPixels(TestCase):
    def test_lat_lon_columns(self):
        df = pd.DataFrame({"latitude": [0.0, 50.0], "longitude": [0.0, 30.0]})

        pixels = dataframe_to_pixels(df, EPSG3857, zoom=0)

        self.assertAlmostEqual(pixels.loc[0, "x"], 128)
        self.assertAlmostEqual(pixels.loc[0, "y"], 128)
        self.assertAlmostEqual(
            pixels.loc[1, "x"], EPSG3857.lat_lng_to_point(LatLng(50, 30), 0).x
        )

    def test_custom_columns(self):
        df = pd.DataFrame({"lat": [10.0], "lon": [20.0]})

        pixels = dataframe_to_pixels(
            df, SIMPLE, zoom=1, lat_column="lat", lon_column="lon"
        )

        self.assertEqual(pixels.loc[0, "x"], 40)
        self.assertEqual(pixels.loc[0, "y"], -20)

    def test_missing_column(self):
        df = pd.DataFrame({"lat": [10.0], "lng": [20.0]})

        with self.assertRaises(ValueError):
            dataframe_to_pixels(df, EPSG3857, zoom=0)


class TestFrameBounds(TestCase):
    def test_bounds(self):
        frame = gpd.GeoDataFrame(
            geometry=[ShapelyPoint(-10, 5), ShapelyPoint(20, -5), ShapelyPoint(0, 40)],
            crs="EPSG:4326",
        )

        bounds = frame_bounds(frame)

        self.assertEqual(bounds.get_west(), -10)
        self.assertEqual(bounds.get_east(), 20)
        self.assertEqual(bounds.get_south(), -5)
        self.assertEqual(bounds.get_north(), 40)

    def test_points_around_the_antimeridian(self):
        frame = gpd.GeoDataFrame(
            geometry=[ShapelyPoint(170, 0), ShapelyPoint(-170, 10), ShapelyPoint(179, 5)],
            crs="EPSG:4326",
        )

        bounds = frame_bounds(frame)

        self.assertTrue(bounds.crosses_antimeridian)
        self.assertEqual(bounds.get_west(), 170)
        self.assertEqual(bounds.get_east(), -170)
        self.assertEqual(bounds.lng_span, 20)

    def test_unwrapped_longitudes_around_the_antimeridian(self):
        frame = gpd.GeoDataFrame(
            geometry=[ShapelyPoint(175, 0), ShapelyPoint(-175, 5), ShapelyPoint(190, 2)],
            crs="EPSG:4326",
        )

        bounds = frame_bounds(frame)

        self.assertTrue(bounds.crosses_antimeridian)
        self.assertEqual(bounds.lng_span, 15)
        self.assertTrue(bounds.contains(LatLng(2, 190)))

    def test_empty_frame(self):
        empty = gpd.GeoDataFrame(geometry=gpd.GeoSeries([], crs="EPSG:4326"))

        with self.assertRaises(ValueError):
            frame_bounds(empty)
