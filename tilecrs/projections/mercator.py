import logging
import math

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.latlng import LatLng, to_latlng
from tilecrs.constructs.point import Point, to_point
from tilecrs.projections.projection_interface import (
    Projection,
    clamp_latitude,
    safe_exp,
)

log = logging.getLogger(__name__)

# WGS84 semi-major and semi-minor axes
R = 6378137
R_MINOR = 6356752.314245179

ECCENTRICITY = math.sqrt(1 - (R_MINOR / R) ** 2)

# Latitude at which y reaches R * pi on the ellipsoid
MAX_LATITUDE = 85.0840591556

# Inverse series stops once the latitude correction drops below this (radians)
UNPROJECT_TOLERANCE = 1e-12
UNPROJECT_MAX_ITERATIONS = 15

_HALF_WORLD = R * math.pi
MERCATOR_BOUNDS = Bounds(
    Point(-_HALF_WORLD, -_HALF_WORLD), Point(_HALF_WORLD, _HALF_WORLD)
)


class Mercator(Projection):
    """
    Ellipsoidal Mercator projection on the WGS84 ellipsoid, the projection behind EPSG:3395.

    Compared to SphericalMercator the y coordinate accounts for the flattening of the Earth,
    so the same latitude lands slightly closer to the equator. Latitudes are clamped to
    +/-MAX_LATITUDE (85.0840591556), where y reaches R * pi and the projected world is square.

    The inverse has no closed form: the latitude is found by fixed-point iteration, stopping
    once the correction is below UNPROJECT_TOLERANCE or after UNPROJECT_MAX_ITERATIONS steps.

    Examples:
        >>> from tilecrs.constructs.latlng import LatLng
        >>> point = Mercator().project(LatLng(50, 30))  # about (3339584, 6413524)
    """

    R = R
    R_MINOR = R_MINOR
    MAX_LATITUDE = MAX_LATITUDE

    @property
    def bounds(self) -> Bounds:
        return MERCATOR_BOUNDS

    def project(self, latlng: LatLng) -> Point:
        latlng = to_latlng(latlng)
        lat = clamp_latitude(latlng.lat, MAX_LATITUDE)
        phi = math.radians(lat)

        con = ECCENTRICITY * math.sin(phi)
        ts = math.tan(math.pi / 4 - phi / 2) / ((1 - con) / (1 + con)) ** (
            ECCENTRICITY / 2
        )
        y = -R * math.log(ts)

        return Point(R * math.radians(latlng.lng), y)

    def unproject(self, point: Point) -> LatLng:
        point = to_point(point)
        ts = safe_exp(-point.y / R)
        if math.isnan(ts):
            return LatLng(math.nan, math.degrees(point.x / R))

        phi = math.pi / 2 - 2 * math.atan(ts)

        for _ in range(UNPROJECT_MAX_ITERATIONS):
            con = ECCENTRICITY * math.sin(phi)
            con = ((1 - con) / (1 + con)) ** (ECCENTRICITY / 2)
            d_phi = math.pi / 2 - 2 * math.atan(ts * con) - phi
            phi += d_phi
            if abs(d_phi) <= UNPROJECT_TOLERANCE:
                break
        else:
            log.debug(
                f"latitude for y={point.y} did not converge after "
                f"{UNPROJECT_MAX_ITERATIONS} iterations"
            )

        return LatLng(math.degrees(phi), math.degrees(point.x / R))
