from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Optional, Tuple

from pyproj import CRS as PyprojCRS
from pyproj.exceptions import CRSError

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.latlng import LatLng, haversine, to_latlng
from tilecrs.constructs.latlng_bounds import LatLngBounds
from tilecrs.constructs.point import Point
from tilecrs.constructs.transformation import Transformation
from tilecrs.projections.projection_interface import Projection
from tilecrs.utils.constants import DEFAULT_TILE_SIZE
from tilecrs.utils.exceptions import CRSConfigurationError
from tilecrs.utils.wrap import wrap_num

log = logging.getLogger(__name__)

ScaleFunction = Callable[[float], float]
WrapRange = Tuple[float, float]


class DistanceType(Enum):
    """
    Enumeration of the ways a CRS measures the distance between two locations.

    Attributes:
        GREAT_CIRCLE: Haversine distance in meters on a sphere of the mean Earth radius.
        EUCLIDEAN: Straight line distance on (lng, lat), in the CRS's native units.
    """

    GREAT_CIRCLE = "great_circle"
    EUCLIDEAN = "euclidean"


def default_scale(zoom: float) -> float:
    """Pixel size of the world at a zoom level: 256 * 2 ** zoom."""
    return DEFAULT_TILE_SIZE * 2**zoom


def default_zoom(scale: float) -> float:
    """Inverse of default_scale."""
    return math.log2(scale / DEFAULT_TILE_SIZE)


class CRS:
    """
    A coordinate reference system: the full pipeline between geographic and pixel coordinates.

    A CRS composes a Projection (LatLng to projected Point), a Transformation (projected
    Point to unit-scale pixel Point) and a scale function giving the pixel size of the world
    at each zoom level. Converting a location to pixels at a zoom level is:

        pixel = transformation.transform(projection.project(latlng), scale(zoom))

    and converting back runs the same steps in reverse.

    A CRS holds no mutable state; the projection and transformation may be shared by any
    number of CRS instances, and a CRS can be used from several threads at once. The
    parameters are checked once, on construction: a misconfigured CRS raises
    CRSConfigurationError immediately instead of producing garbage on every call.

    Args:
        code: An identifier such as "EPSG:3857"
        projection: The projection converting between LatLng and projected Points
        transformation: The affine map from projected space to pixels at scale 1
        scale: A function from zoom level to scale factor. Default is 256 * 2 ** zoom.
        zoom: The inverse of scale. Must be given together with scale.
        wrap_lng: A (min, max) range longitudes wrap into, or None to never wrap them
        wrap_lat: A (min, max) range latitudes wrap into, or None to never wrap them
        infinite: True if the CRS has no bounded projected extent (e.g. a flat plane)
        distance: How distances are measured. Default is great-circle distance.

    Raises:
        CRSConfigurationError: If the transformation is not invertible, if only one of scale
            and zoom is given, or if a wrap range is empty

    Examples:
        >>> from tilecrs.crs.named import EPSG3857
        >>> from tilecrs.constructs.latlng import LatLng
        >>> EPSG3857.lat_lng_to_point(LatLng(0, 0), zoom=0)
        Point(x=128.0, y=128.0)
        >>> pixel = EPSG3857.lat_lng_to_point(LatLng(50, 30), zoom=5)
        >>> latlng = EPSG3857.point_to_lat_lng(pixel, zoom=5)  # back to about (50, 30)
    """

    def __init__(
        self,
        code: str,
        projection: Projection,
        transformation: Transformation,
        scale: Optional[ScaleFunction] = None,
        zoom: Optional[ScaleFunction] = None,
        wrap_lng: Optional[WrapRange] = None,
        wrap_lat: Optional[WrapRange] = None,
        infinite: bool = False,
        distance: DistanceType = DistanceType.GREAT_CIRCLE,
    ):
        if transformation.a == 0 or transformation.c == 0:
            raise CRSConfigurationError(
                f"{code}: transformation {transformation} is not invertible; "
                "coefficients a and c must be non-zero"
            )
        if (scale is None) != (zoom is None):
            raise CRSConfigurationError(
                f"{code}: scale and zoom functions must be provided together"
            )
        for name, wrap_range in (("wrap_lng", wrap_lng), ("wrap_lat", wrap_lat)):
            if wrap_range is not None and not wrap_range[0] < wrap_range[1]:
                raise CRSConfigurationError(
                    f"{code}: {name} range {wrap_range} is empty"
                )

        self._code = code
        self._projection = projection
        self._transformation = transformation
        self._scale = scale if scale is not None else default_scale
        self._zoom = zoom if zoom is not None else default_zoom
        self._wrap_lng = tuple(wrap_lng) if wrap_lng is not None else None
        self._wrap_lat = tuple(wrap_lat) if wrap_lat is not None else None
        self._infinite = infinite
        self._distance = DistanceType(distance)

        log.debug(f"created {self!r}")

    def __repr__(self):
        return (
            f"CRS(code={self._code}, projection={self._projection!r}, "
            f"transformation={self._transformation})"
        )

    @property
    def code(self) -> str:
        return self._code

    @property
    def projection(self) -> Projection:
        return self._projection

    @property
    def transformation(self) -> Transformation:
        return self._transformation

    @property
    def wrap_lng(self) -> Optional[WrapRange]:
        return self._wrap_lng

    @property
    def wrap_lat(self) -> Optional[WrapRange]:
        return self._wrap_lat

    @property
    def infinite(self) -> bool:
        return self._infinite

    @property
    def distance_type(self) -> DistanceType:
        return self._distance

    def scale(self, zoom: float) -> float:
        """
        Get the scale factor applied after the transformation at a zoom level.

        Args:
            zoom: The zoom level; fractional zooms are allowed

        Returns:
            The scale factor, e.g. 256 * 2 ** zoom for the standard web map CRSs
        """
        return self._scale(zoom)

    def zoom(self, scale: float) -> float:
        """
        Get the zoom level that corresponds to a scale factor; the inverse of scale.
        """
        return self._zoom(scale)

    def project(self, latlng: LatLng) -> Point:
        """
        Project a location into the projected space, without any zoom scaling.

        Args:
            latlng: The location to project

        Returns:
            The projected Point, in the projection's units
        """
        return self._projection.project(latlng)

    def unproject(self, point: Point) -> LatLng:
        """Inverse of project."""
        return self._projection.unproject(point)

    def lat_lng_to_point(self, latlng: LatLng, zoom: float) -> Point:
        """
        Convert a location to pixel coordinates at a zoom level.

        Args:
            latlng: The location to convert
            zoom: The zoom level

        Returns:
            The pixel Point
        """
        projected_point = self._projection.project(latlng)
        scale = self.scale(zoom)

        return self._transformation.transform(projected_point, scale)

    def point_to_lat_lng(self, point: Point, zoom: float) -> LatLng:
        """
        Convert pixel coordinates at a zoom level back to a location.

        Args:
            point: The pixel Point
            zoom: The zoom level the point was computed at

        Returns:
            The geographic location
        """
        scale = self.scale(zoom)
        untransformed_point = self._transformation.untransform(point, scale)

        return self._projection.unproject(untransformed_point)

    def get_projected_bounds(self, zoom: float) -> Optional[Bounds]:
        """
        Get the pixel extent of the whole world at a zoom level.

        Args:
            zoom: The zoom level

        Returns:
            The projection's bounds transformed to pixels, or None for an infinite CRS
        """
        if self._infinite:
            return None

        bounds = self._projection.bounds
        scale = self.scale(zoom)
        corner1 = self._transformation.transform(bounds.min, scale)
        corner2 = self._transformation.transform(bounds.max, scale)

        return Bounds(corner1, corner2)

    def distance(self, latlng1: LatLng, latlng2: LatLng) -> float:
        """
        Measure the distance between two locations.

        Geographic CRSs use the great-circle distance in meters on the mean Earth radius;
        flat CRSs use the straight line distance in their own units.

        Args:
            latlng1: The first location
            latlng2: The second location

        Returns:
            The distance
        """
        latlng1, latlng2 = to_latlng(latlng1), to_latlng(latlng2)

        if self._distance is DistanceType.EUCLIDEAN:
            return math.hypot(latlng2.lng - latlng1.lng, latlng2.lat - latlng1.lat)
        return haversine(latlng1, latlng2)

    def wrap_lat_lng(self, latlng: LatLng) -> LatLng:
        """
        Wrap a location into the CRS's wrap ranges.

        Longitude (and latitude, if the CRS wraps it) are brought into (min, max] with modular
        arithmetic, so -180 becomes 180 and 190 becomes -170. Altitude is kept.

        Args:
            latlng: The location to wrap

        Returns:
            The wrapped location
        """
        latlng = to_latlng(latlng)
        lng = (
            wrap_num(latlng.lng, self._wrap_lng, include_max=True)
            if self._wrap_lng
            else latlng.lng
        )
        lat = (
            wrap_num(latlng.lat, self._wrap_lat, include_max=True)
            if self._wrap_lat
            else latlng.lat
        )

        return LatLng(lat, lng, latlng.alt)

    def wrap_lat_lng_bounds(self, bounds: LatLngBounds) -> LatLngBounds:
        """
        Shift a box so that its center lies within the CRS's wrap ranges.

        The box keeps its size; only its position changes. A box whose center already lies
        within range is returned unchanged.

        Args:
            bounds: The box to wrap

        Returns:
            The shifted box
        """
        center = bounds.get_center()
        new_center = self.wrap_lat_lng(center)
        lat_shift = center.lat - new_center.lat
        lng_shift = center.lng - new_center.lng

        if lat_shift == 0 and lng_shift == 0:
            return bounds

        sw, ne = bounds.get_south_west(), bounds.get_north_east()

        return LatLngBounds(
            LatLng(sw.lat - lat_shift, sw.lng - lng_shift),
            LatLng(ne.lat - lat_shift, ne.lng - lng_shift),
        )

    def to_pyproj(self) -> PyprojCRS:
        """
        Get the pyproj CRS with the same code, for reprojecting data with pyproj or geopandas.

        Returns:
            The matching pyproj.CRS

        Raises:
            ValueError: If the code is not one pyproj knows, e.g. a flat "Simple" CRS
        """
        try:
            return PyprojCRS(self._code)
        except CRSError as e:
            raise ValueError(f"{self._code} has no pyproj equivalent") from e
