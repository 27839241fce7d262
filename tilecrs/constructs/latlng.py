from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Mapping, NamedTuple, Optional, Sequence, Tuple

from shapely.geometry import Point as ShapelyPoint

from tilecrs.utils.constants import (
    DEFAULT_EPSILON,
    EARTH_CIRCUMFERENCE,
    EARTH_RADIUS,
    LNG_WRAP_RANGE,
)
from tilecrs.utils.wrap import format_num, wrap_num

if TYPE_CHECKING:
    from tilecrs.constructs.latlng_bounds import LatLngBounds


class LatLng(NamedTuple):
    """
    Represents a geographic location with a latitude, a longitude and an optional altitude.

    A LatLng is an immutable value. Latitudes are not clamped to [-90, 90] and longitudes are
    not wrapped on construction: maps that repeat the world horizontally legitimately produce
    longitudes beyond +/-180. Use `wrap` to bring a longitude back into the canonical range.

    Attributes:
        lat: The latitude in decimal degrees
        lng: The longitude in decimal degrees
        alt: An optional altitude in meters

    Examples:
        >>> from tilecrs.constructs.latlng import LatLng
        >>> paris = LatLng(48.8566, 2.3522)
        >>> london = LatLng(51.5074, -0.1278)
        >>> meters = paris.distance_to(london)  # roughly 344 km
        >>> LatLng(10, 190).wrap()
        LatLng(lat=10, lng=-170.0, alt=None)
    """

    lat: float
    lng: float
    alt: Optional[float] = None

    def equals(self, other: LatLng, max_margin: float = DEFAULT_EPSILON) -> bool:
        """
        Check whether two locations are equal within a margin in degrees.

        Latitude and longitude are compared independently; altitude is ignored.

        Args:
            other: The location to compare against
            max_margin: The largest difference allowed on either axis. Default is 1e-9.

        Returns:
            True if neither axis differs by more than max_margin
        """
        return (
            abs(self.lat - other.lat) <= max_margin
            and abs(self.lng - other.lng) <= max_margin
        )

    def distance_to(self, other: LatLng) -> float:
        """
        Compute the great-circle distance to another location using the haversine formula.

        The Earth is treated as a sphere with the mean radius of 6,371,000 meters, which is the
        same radius every spherical CRS uses for its distance queries.

        Args:
            other: The location to measure to

        Returns:
            The distance in meters
        """
        return haversine(self, other)

    def wrap(self, lng_range: Tuple[float, float] = LNG_WRAP_RANGE) -> LatLng:
        """
        Return a copy whose longitude lies within (lng_range[0], lng_range[1]].

        The latitude and altitude are left untouched.
        """
        return self._replace(lng=wrap_num(self.lng, lng_range, include_max=True))

    def to_bounds(self, size_in_meters: float) -> LatLngBounds:
        """
        Build a box of roughly size_in_meters along each side centered on this location.

        Args:
            size_in_meters: The width and height of the box in meters

        Returns:
            A LatLngBounds centered on this location
        """
        from tilecrs.constructs.latlng_bounds import LatLngBounds

        lat_accuracy = 180 * size_in_meters / EARTH_CIRCUMFERENCE
        lng_accuracy = lat_accuracy / math.cos(math.radians(self.lat))

        return LatLngBounds(
            LatLng(self.lat - lat_accuracy, self.lng - lng_accuracy),
            LatLng(self.lat + lat_accuracy, self.lng + lng_accuracy),
        )

    def to_string(self, precision: int = 6) -> str:
        lat, lng = format_num(self.lat, precision), format_num(self.lng, precision)
        return f"LatLng({lat}, {lng})"

    def to_shapely(self) -> ShapelyPoint:
        """Convert to a shapely Point in (x=lng, y=lat) order."""
        return ShapelyPoint(self.lng, self.lat)


def to_latlng(value: Any) -> LatLng:
    """
    Coerce a value into a LatLng.

    Args:
        value: A LatLng, a (lat, lng) or (lat, lng, alt) sequence, or a mapping with "lat"
            and either "lng" or "lon" keys (and optionally "alt")

    Returns:
        The value as a LatLng

    Raises:
        TypeError: If the value cannot be interpreted as a location
    """
    if isinstance(value, LatLng):
        return value
    if isinstance(value, Mapping) and "lat" in value:
        if "lng" in value:
            return LatLng(value["lat"], value["lng"], value.get("alt"))
        if "lon" in value:
            return LatLng(value["lat"], value["lon"], value.get("alt"))
    if isinstance(value, Sequence) and not isinstance(value, str):
        if len(value) in (2, 3):
            return LatLng(*value)
    raise TypeError(f"cannot convert {value!r} to a LatLng")


def haversine(a: LatLng, b: LatLng, radius: float = EARTH_RADIUS) -> float:
    """
    Compute the great-circle distance between two locations on a sphere.

    Args:
        a: The first location
        b: The second location
        radius: The sphere radius in meters. Default is the mean Earth radius.

    Returns:
        The distance in the units of radius
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    sin_d_lat = math.sin(math.radians(b.lat - a.lat) / 2)
    sin_d_lng = math.sin(math.radians(b.lng - a.lng) / 2)

    h = sin_d_lat * sin_d_lat + math.cos(lat1) * math.cos(lat2) * sin_d_lng * sin_d_lng
    # rounding noise can push h slightly outside [0, 1]
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return radius * c
