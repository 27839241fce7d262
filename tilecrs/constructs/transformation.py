from __future__ import annotations

from typing import NamedTuple

from tilecrs.constructs.point import Point, to_point


class Transformation(NamedTuple):
    """
    An affine transformation (scale and offset per axis, no rotation) between two planar spaces.

    A point (x, y) is mapped to (scale * (a * x + b), scale * (c * y + d)). The scale is passed
    in by the caller rather than stored, so one Transformation serves every zoom level of a CRS.

    Coefficients a and c must be non-zero for the transformation to be invertible; a CRS
    checks this once when it is built.

    Attributes:
        a: The x scale coefficient
        b: The x offset
        c: The y scale coefficient (negative to flip the y axis)
        d: The y offset

    Examples:
        >>> from tilecrs.constructs.point import Point
        >>> from tilecrs.constructs.transformation import Transformation
        >>> t = Transformation(2, 5, -1, 10)
        >>> t.transform(Point(1, 2))
        Point(x=7.0, y=8.0)
        >>> t.untransform(Point(7, 8))
        Point(x=1.0, y=2.0)
    """

    a: float
    b: float
    c: float
    d: float

    def transform(self, point: Point, scale: float = 1.0) -> Point:
        """
        Apply the transformation to a point.

        Args:
            point: The point to transform
            scale: A factor applied after the affine step. Default is 1.

        Returns:
            The transformed point
        """
        point = to_point(point)
        return Point(
            scale * (self.a * point.x + self.b), scale * (self.c * point.y + self.d)
        )

    def untransform(self, point: Point, scale: float = 1.0) -> Point:
        """
        Reverse the transformation, so that untransform(transform(p, s), s) gives back p.

        Args:
            point: The point to map back
            scale: The same factor that was passed to transform. Default is 1.

        Returns:
            The original point
        """
        point = to_point(point)
        return Point(
            (point.x / scale - self.b) / self.a, (point.y / scale - self.d) / self.c
        )
