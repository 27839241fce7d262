"""Helpers for converting tables of locations (pandas / geopandas frames) to pixel coordinates.

These are the bulk counterparts of CRS.lat_lng_to_point, for positioning many markers or
overlay vertices at once.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
from geopandas import GeoDataFrame, points_from_xy

from tilecrs.constructs.latlng import LatLng
from tilecrs.constructs.latlng_bounds import LatLngBounds
from tilecrs.crs.crs import CRS
from tilecrs.utils.constants import LATLON_CRS

log = logging.getLogger(__name__)


def _to_latlon(frame: GeoDataFrame) -> GeoDataFrame:
    if frame.crs is None:
        raise TypeError(
            "no crs information found on the frame; please set a crs on the frame"
        )
    if frame.crs != LATLON_CRS:
        log.info(f"reprojecting frame from {frame.crs.to_string()} to EPSG:4326")
        frame = frame.to_crs(LATLON_CRS)
    return frame


def frame_to_pixels(
    frame: GeoDataFrame,
    crs: CRS,
    zoom: float,
    x_column: str = "x",
    y_column: str = "y",
) -> pd.DataFrame:
    """
    Convert a GeoDataFrame of point geometries to pixel coordinates at a zoom level.

    Frames in a CRS other than EPSG:4326 are reprojected to latitude/longitude first, so the
    input can come straight from a file read with geopandas.

    Args:
        frame: A GeoDataFrame of Point geometries with a CRS set
        crs: The tilecrs CRS that defines the pixel space
        zoom: The zoom level
        x_column: The name of the output column for the pixel x coordinate. Default is "x".
        y_column: The name of the output column for the pixel y coordinate. Default is "y".

    Returns:
        A DataFrame with the pixel coordinates, indexed like the input frame

    Raises:
        TypeError: If the frame has no CRS

    Examples:
        >>> import geopandas as gpd
        >>> from shapely.geometry import Point
        >>> from tilecrs.crs.named import EPSG3857
        >>> gdf = gpd.GeoDataFrame(geometry=[Point(0, 0), Point(30, 50)], crs="EPSG:4326")
        >>> pixels = frame_to_pixels(gdf, EPSG3857, zoom=2)
        >>> pixels.loc[0].to_list()
        [512.0, 512.0]
    """
    frame = _to_latlon(frame)

    points = [
        crs.lat_lng_to_point(LatLng(lat, lng), zoom)
        for lng, lat in zip(frame.geometry.x, frame.geometry.y)
    ]
    pixels = np.array(points, dtype=float).reshape(-1, 2)

    return pd.DataFrame(pixels, columns=[x_column, y_column], index=frame.index)


def dataframe_to_pixels(
    dataframe: pd.DataFrame,
    crs: CRS,
    zoom: float,
    lat_column: str = "latitude",
    lon_column: str = "longitude",
) -> pd.DataFrame:
    """
    Convert a DataFrame with latitude/longitude columns to pixel coordinates at a zoom level.

    Args:
        dataframe: A DataFrame with EPSG:4326 coordinates
        crs: The tilecrs CRS that defines the pixel space
        zoom: The zoom level
        lat_column: The name of the latitude column. Default is "latitude".
        lon_column: The name of the longitude column. Default is "longitude".

    Returns:
        A DataFrame with "x" and "y" pixel columns, indexed like the input

    Raises:
        ValueError: If the latitude or longitude column is missing
    """
    if lat_column not in dataframe.columns or lon_column not in dataframe.columns:
        raise ValueError(
            f"could not find columns {lat_column!r} and {lon_column!r} in the dataframe"
        )

    frame = GeoDataFrame(
        geometry=points_from_xy(dataframe[lon_column], dataframe[lat_column]),
        index=dataframe.index,
        crs=LATLON_CRS,
    )

    return frame_to_pixels(frame, crs, zoom)


def frame_bounds(frame: GeoDataFrame) -> LatLngBounds:
    """
    Get the geographic box enclosing every point of a GeoDataFrame.

    Points are folded in with LatLngBounds.extend, so a cluster of points on both sides of the
    antimeridian gives a box crossing it rather than one spanning the whole globe.

    Args:
        frame: A GeoDataFrame of Point geometries with a CRS set

    Returns:
        The enclosing LatLngBounds

    Raises:
        TypeError: If the frame has no CRS
        ValueError: If the frame is empty
    """
    frame = _to_latlon(frame)

    return LatLngBounds.from_latlngs(
        LatLng(lat, lng) for lng, lat in zip(frame.geometry.x, frame.geometry.y)
    )
