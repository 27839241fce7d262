from __future__ import annotations

import math
from abc import ABCMeta, abstractmethod

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.latlng import LatLng
from tilecrs.constructs.point import Point


class Projection(metaclass=ABCMeta):
    """
    Abstract base class defining the interface for map projections.

    A projection is a pure mapping between geographic coordinates (LatLng, degrees) and a
    planar projected space (Point), independent of any display scale. Projections hold no
    mutable state, so a single instance is shared by every CRS that uses it.

    Subclasses must implement:
    - project: LatLng to projected Point
    - unproject: projected Point back to LatLng
    - bounds: the valid extent of the projected space

    Examples:
        >>> from tilecrs.projections.spherical_mercator import SphericalMercator
        >>> from tilecrs.constructs.latlng import LatLng
        >>> projection = SphericalMercator()
        >>> point = projection.project(LatLng(50, 30))
        >>> latlng = projection.unproject(point)
    """

    @property
    @abstractmethod
    def bounds(self) -> Bounds:
        """
        Get the extent of the projected space.

        A CRS transforms these bounds to find the pixel extent of the world at a zoom level,
        and world-wrapping logic uses them to tile copies of the world side by side.

        Returns:
            The Bounds of the projected space, in projected units
        """

    @abstractmethod
    def project(self, latlng: LatLng) -> Point:
        """
        Convert a geographic location to a point in projected space.

        Args:
            latlng: The location to project

        Returns:
            The projected Point
        """

    @abstractmethod
    def unproject(self, point: Point) -> LatLng:
        """
        Convert a point in projected space back to a geographic location.

        Args:
            point: The projected point

        Returns:
            The geographic location
        """

    def __repr__(self):
        return f"{type(self).__name__}()"

    def __eq__(self, other):
        # stateless: two instances of the same projection are interchangeable
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))


def clamp_latitude(lat: float, max_latitude: float) -> float:
    """Clamp a latitude to [-max_latitude, max_latitude], letting NaN through."""
    if math.isnan(lat):
        return lat
    return max(min(max_latitude, lat), -max_latitude)


def safe_exp(x: float) -> float:
    """math.exp that overflows to infinity instead of raising."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf
