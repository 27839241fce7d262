import math

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.latlng import LatLng, to_latlng
from tilecrs.constructs.point import Point, to_point
from tilecrs.projections.projection_interface import (
    Projection,
    clamp_latitude,
    safe_exp,
)

# WGS84 semi-major axis, used as the sphere radius
R = 6378137

# Latitude at which y reaches R * pi, making the projected world square
MAX_LATITUDE = 85.0511287798

_HALF_WORLD = R * math.pi
SPHERICAL_MERCATOR_BOUNDS = Bounds(
    Point(-_HALF_WORLD, -_HALF_WORLD), Point(_HALF_WORLD, _HALF_WORLD)
)


class SphericalMercator(Projection):
    """
    Spherical Mercator projection, the projection behind EPSG:3857 ("Web Mercator").

    The Earth is treated as a sphere with the WGS84 semi-major axis as radius. Latitudes are
    clamped to +/-MAX_LATITUDE, where the projected world becomes a square of side
    2 * R * pi (+/-20037508.34 meters). Longitudes are not wrapped.

    Examples:
        >>> from tilecrs.constructs.latlng import LatLng
        >>> SphericalMercator().project(LatLng(0, 0))
        Point(x=0.0, y=0.0)
    """

    R = R
    MAX_LATITUDE = MAX_LATITUDE

    @property
    def bounds(self) -> Bounds:
        return SPHERICAL_MERCATOR_BOUNDS

    def project(self, latlng: LatLng) -> Point:
        latlng = to_latlng(latlng)
        lat = clamp_latitude(latlng.lat, MAX_LATITUDE)
        sin = math.sin(math.radians(lat))

        # R * ln(tan(pi/4 + lat/2)), in a form that stays exact near the equator
        y = R * math.log((1 + sin) / (1 - sin)) / 2

        return Point(R * math.radians(latlng.lng), y)

    def unproject(self, point: Point) -> LatLng:
        point = to_point(point)
        lat = math.degrees(2 * math.atan(safe_exp(point.y / R)) - math.pi / 2)

        return LatLng(lat, math.degrees(point.x / R))
