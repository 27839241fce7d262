from __future__ import annotations

import math
from typing import Iterable, Union

from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry

from tilecrs.constructs.point import Point, to_point
from tilecrs.utils.constants import DEFAULT_EPSILON


class Bounds:
    """
    An axis-aligned rectangle in a planar (projected or pixel) coordinate space.

    Bounds are built from any two opposite corners; the corners are normalized on construction
    so that `min` always holds the smallest x and y and `max` the largest. A Bounds is never
    mutated: `extend` and `pad` return new instances.

    Args:
        corner1: One corner of the rectangle
        corner2: The opposite corner. Default is corner1, giving a zero-size rectangle.

    Attributes:
        min: The corner with the smallest coordinates
        max: The corner with the largest coordinates

    Examples:
        >>> from tilecrs.constructs.bounds import Bounds
        >>> from tilecrs.constructs.point import Point
        >>> b = Bounds(Point(10, 40), Point(30, 20))
        >>> b.min, b.max
        (Point(x=10, y=20), Point(x=30, y=40))
        >>> b.contains(Point(15, 25))
        True
        >>> b.extend(Point(50, 0)).get_size()
        Point(x=40, y=40)
    """

    __slots__ = ("_min", "_max")

    def __init__(self, corner1: Point, corner2: Point = None):
        corner1 = to_point(corner1)
        corner2 = corner1 if corner2 is None else to_point(corner2)

        self._min = Point(min(corner1.x, corner2.x), min(corner1.y, corner2.y))
        self._max = Point(max(corner1.x, corner2.x), max(corner1.y, corner2.y))

    def __repr__(self):
        return f"Bounds(min={self._min}, max={self._max})"

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __hash__(self):
        return hash((self._min, self._max))

    @property
    def min(self) -> Point:
        return self._min

    @property
    def max(self) -> Point:
        return self._max

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Bounds:
        """
        Build the smallest Bounds enclosing every point of an iterable.

        Args:
            points: The points to enclose. Anything accepted by to_point works.

        Returns:
            A new Bounds

        Raises:
            ValueError: If the iterable is empty
        """
        bounds = None
        for p in points:
            bounds = Bounds(p) if bounds is None else bounds.extend(p)

        if bounds is None:
            raise ValueError("cannot build bounds from an empty set of points")

        return bounds

    @classmethod
    def from_shapely(cls, geometry: BaseGeometry) -> Bounds:
        """Build the envelope of a shapely geometry."""
        min_x, min_y, max_x, max_y = geometry.bounds
        return cls(Point(min_x, min_y), Point(max_x, max_y))

    def extend(self, obj: Union[Point, Bounds]) -> Bounds:
        """
        Return the smallest Bounds enclosing both this rectangle and a point or another Bounds.

        Args:
            obj: A Point (or anything to_point accepts) or a Bounds

        Returns:
            A new Bounds
        """
        if isinstance(obj, Bounds):
            lo, hi = obj.min, obj.max
        else:
            lo = hi = to_point(obj)

        return Bounds(
            Point(min(lo.x, self._min.x), min(lo.y, self._min.y)),
            Point(max(hi.x, self._max.x), max(hi.y, self._max.y)),
        )

    def get_center(self, round: bool = False) -> Point:
        center = Point(
            (self._min.x + self._max.x) / 2, (self._min.y + self._max.y) / 2
        )
        return center.round() if round else center

    def get_bottom_left(self) -> Point:
        return Point(self._min.x, self._max.y)

    def get_top_right(self) -> Point:
        return Point(self._max.x, self._min.y)

    def get_top_left(self) -> Point:
        return self._min

    def get_bottom_right(self) -> Point:
        return self._max

    def get_size(self) -> Point:
        return self._max.subtract(self._min)

    def contains(self, obj: Union[Point, Bounds]) -> bool:
        """
        Check whether a point or another Bounds lies inside this rectangle, edges included.
        """
        if isinstance(obj, Bounds):
            lo, hi = obj.min, obj.max
        else:
            lo = hi = to_point(obj)

        return (
            lo.x >= self._min.x
            and hi.x <= self._max.x
            and lo.y >= self._min.y
            and hi.y <= self._max.y
        )

    def intersects(self, other: Bounds) -> bool:
        """
        Check whether two rectangles share at least one point; touching edges count.
        """
        x_intersects = other.max.x >= self._min.x and other.min.x <= self._max.x
        y_intersects = other.max.y >= self._min.y and other.min.y <= self._max.y

        return x_intersects and y_intersects

    def overlaps(self, other: Bounds) -> bool:
        """
        Check whether two rectangles share an area; touching edges do not count.
        """
        x_overlaps = other.max.x > self._min.x and other.min.x < self._max.x
        y_overlaps = other.max.y > self._min.y and other.min.y < self._max.y

        return x_overlaps and y_overlaps

    def pad(self, buffer_ratio: float) -> Bounds:
        """
        Grow (or shrink, with a negative ratio) the rectangle on every side.

        Args:
            buffer_ratio: The fraction of the width added to the left and right, and of the
                height added to the top and bottom. 0.5 doubles both dimensions.

        Returns:
            A new Bounds
        """
        size = self.get_size()
        buffer = Point(abs(size.x) * buffer_ratio, abs(size.y) * buffer_ratio)

        return Bounds(self._min.subtract(buffer), self._max.add(buffer))

    def equals(self, other: Bounds, epsilon: float = DEFAULT_EPSILON) -> bool:
        return self._min.equals(other.min, epsilon) and self._max.equals(
            other.max, epsilon
        )

    def is_valid(self) -> bool:
        return not any(math.isnan(v) for v in (*self._min, *self._max))

    def to_polygon(self) -> Polygon:
        return box(self._min.x, self._min.y, self._max.x, self._max.y)
