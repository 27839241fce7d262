from __future__ import annotations

import math
from typing import Any, Callable, Mapping, NamedTuple, Sequence

from shapely.geometry import Point as ShapelyPoint

from tilecrs.utils.constants import DEFAULT_EPSILON
from tilecrs.utils.wrap import format_num


class Point(NamedTuple):
    """
    Represents a point in a planar coordinate space with x and y coordinates.

    Points are used both for projected coordinates (the output of a projection, e.g. meters
    on a Mercator plane) and for pixel coordinates at a given zoom level. A Point is immutable:
    every operation returns a new Point. NaN and infinite values are not rejected; they
    propagate through the arithmetic the same way they do for plain floats.

    The arithmetic operators are overloaded so that points behave like 2D vectors rather than
    tuples: `a + b` adds coordinates, `a * 2` scales, `-a` negates.

    Attributes:
        x: The horizontal coordinate
        y: The vertical coordinate

    Examples:
        >>> from tilecrs.constructs.point import Point
        >>> a = Point(10, 20)
        >>> a.add(Point(1, 2))
        Point(x=11, y=22)
        >>> (a * 2).divide_by(4)
        Point(x=5.0, y=10.0)
        >>> Point(0, 0).distance_to(Point(3, 4))
        5.0
    """

    x: float
    y: float

    def __add__(self, other: Point) -> Point:  # type: ignore[override]
        return self.add(other)

    def __sub__(self, other: Point) -> Point:
        return self.subtract(other)

    def __mul__(self, num: float) -> Point:  # type: ignore[override]
        return self.multiply_by(num)

    def __rmul__(self, num: float) -> Point:  # type: ignore[override]
        return self.multiply_by(num)

    def __truediv__(self, num: float) -> Point:
        return self.divide_by(num)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def multiply_by(self, num: float) -> Point:
        return Point(self.x * num, self.y * num)

    def divide_by(self, num: float) -> Point:
        """
        Divide both coordinates by a number.

        Division by zero follows IEEE semantics and yields infinite or NaN coordinates
        instead of raising.
        """
        return Point(_ieee_div(self.x, num), _ieee_div(self.y, num))

    def scale_by(self, other: Point) -> Point:
        """Multiply each coordinate by the matching coordinate of another point."""
        return Point(self.x * other.x, self.y * other.y)

    def unscale_by(self, other: Point) -> Point:
        """Inverse of scale_by."""
        return Point(_ieee_div(self.x, other.x), _ieee_div(self.y, other.y))

    def round(self) -> Point:
        """Round half up, so 0.5 becomes 1 and -0.5 becomes 0."""
        return Point(
            _finite(_round_half_up, self.x), _finite(_round_half_up, self.y)
        )

    def floor(self) -> Point:
        return Point(_finite(math.floor, self.x), _finite(math.floor, self.y))

    def ceil(self) -> Point:
        return Point(_finite(math.ceil, self.x), _finite(math.ceil, self.y))

    def trunc(self) -> Point:
        return Point(_finite(math.trunc, self.x), _finite(math.trunc, self.y))

    def distance_to(self, other: Point) -> float:
        """
        Compute the Euclidean distance to another point.

        Args:
            other: The point to measure to

        Returns:
            The straight line distance in the units of this point's space
        """
        return math.hypot(other.x - self.x, other.y - self.y)

    def equals(self, other: Point, epsilon: float = DEFAULT_EPSILON) -> bool:
        """
        Check whether two points are equal within a tolerance.

        Each coordinate is compared with math.isclose using epsilon as both the relative and
        the absolute tolerance, so large projected values (millions of meters) and small pixel
        values are both compared sensibly.

        Args:
            other: The point to compare against
            epsilon: The tolerance. Default is 1e-9.

        Returns:
            True if both coordinates are close
        """
        return math.isclose(
            self.x, other.x, rel_tol=epsilon, abs_tol=epsilon
        ) and math.isclose(self.y, other.y, rel_tol=epsilon, abs_tol=epsilon)

    def contains(self, other: Point) -> bool:
        """True if the other point lies within the box spanned by +/- this point."""
        return abs(other.x) <= abs(self.x) and abs(other.y) <= abs(self.y)

    def to_string(self, precision: int = 6) -> str:
        x, y = format_num(self.x, precision), format_num(self.y, precision)
        return f"Point({x}, {y})"

    def to_shapely(self) -> ShapelyPoint:
        return ShapelyPoint(self.x, self.y)


def to_point(value: Any) -> Point:
    """
    Coerce a value into a Point.

    Args:
        value: A Point, an (x, y) sequence, a mapping with "x" and "y" keys, or a shapely Point

    Returns:
        The value as a Point

    Raises:
        TypeError: If the value cannot be interpreted as a point
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, ShapelyPoint):
        return Point(value.x, value.y)
    if isinstance(value, Mapping) and "x" in value and "y" in value:
        return Point(value["x"], value["y"])
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        return Point(value[0], value[1])
    raise TypeError(f"cannot convert {value!r} to a Point")


def _ieee_div(num: float, den: float) -> float:
    try:
        return num / den
    except ZeroDivisionError:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _round_half_up(v: float) -> int:
    return math.floor(v + 0.5)


def _finite(fn: Callable[[float], int], v: float) -> float:
    # NaN and infinities have no integral value; pass them through
    return fn(v) if math.isfinite(v) else v
