from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.latlng import LatLng, to_latlng
from tilecrs.constructs.point import Point, to_point
from tilecrs.projections.projection_interface import Projection

LONLAT_BOUNDS = Bounds(Point(-180, -90), Point(180, 90))


class LonLat(Projection):
    """
    The identity projection: x is the longitude and y the latitude, without any scaling.

    Used by the EPSG:4326 CRS and by flat, non-geographic maps.
    """

    @property
    def bounds(self) -> Bounds:
        return LONLAT_BOUNDS

    def project(self, latlng: LatLng) -> Point:
        latlng = to_latlng(latlng)
        return Point(latlng.lng, latlng.lat)

    def unproject(self, point: Point) -> LatLng:
        point = to_point(point)
        return LatLng(point.y, point.x)
