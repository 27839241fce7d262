from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple, Union

from shapely.geometry import MultiPolygon, Polygon, box

from tilecrs.constructs.latlng import LatLng, to_latlng
from tilecrs.utils.constants import DEFAULT_EPSILON, LNG_WRAP_RANGE
from tilecrs.utils.wrap import wrap_num

WORLD_WEST, WORLD_EAST = LNG_WRAP_RANGE


class LatLngBounds:
    """
    A geographic rectangle defined by its south-west and north-east corners.

    Latitudes are normalized on construction so that the south-west corner is always the
    southern one. Longitudes are kept in the order given: when the west longitude is greater
    than the east longitude, the box crosses the antimeridian and covers the two ranges
    [west, 180] and [-180, east]. Every query (containment, intersection, extension) is aware
    of that case.

    An instance created without corners is empty; it is not valid and contains nothing until
    it is extended.

    Args:
        south_west: The south-west corner (anything to_latlng accepts)
        north_east: The north-east corner. Default is south_west, giving a zero-size box.

    Examples:
        >>> from tilecrs.constructs.latlng import LatLng
        >>> from tilecrs.constructs.latlng_bounds import LatLngBounds
        >>> pacific = LatLngBounds(LatLng(-10, 170), LatLng(10, -170))
        >>> pacific.crosses_antimeridian
        True
        >>> pacific.contains(LatLng(0, 179.9)), pacific.contains(LatLng(0, -179.9))
        (True, True)
        >>> pacific.contains(LatLng(0, 0))
        False
    """

    __slots__ = ("_south_west", "_north_east")

    def __init__(
        self,
        south_west: Optional[LatLng] = None,
        north_east: Optional[LatLng] = None,
    ):
        if south_west is None:
            self._south_west: Optional[LatLng] = None
            self._north_east: Optional[LatLng] = None
            return

        sw = to_latlng(south_west)
        ne = sw if north_east is None else to_latlng(north_east)

        self._south_west = LatLng(min(sw.lat, ne.lat), sw.lng)
        self._north_east = LatLng(max(sw.lat, ne.lat), ne.lng)

    def __repr__(self):
        return (
            f"LatLngBounds(south_west={self._south_west}, "
            f"north_east={self._north_east})"
        )

    def __eq__(self, other):
        if not isinstance(other, LatLngBounds):
            return NotImplemented
        return (
            self._south_west == other._south_west
            and self._north_east == other._north_east
        )

    def __hash__(self):
        return hash((self._south_west, self._north_east))

    @classmethod
    def from_latlngs(cls, latlngs: Iterable[LatLng]) -> LatLngBounds:
        """
        Build the smallest box enclosing every location of an iterable.

        Locations are folded in one at a time with `extend`, so a set of points clustered
        around the antimeridian produces a crossing box rather than one spanning the globe.

        Args:
            latlngs: The locations to enclose. Anything to_latlng accepts works.

        Returns:
            A new LatLngBounds

        Raises:
            ValueError: If the iterable is empty
        """
        bounds = cls()
        for latlng in latlngs:
            bounds = bounds.extend(latlng)

        if not bounds.is_valid():
            raise ValueError("cannot build bounds from an empty set of locations")

        return bounds

    @property
    def crosses_antimeridian(self) -> bool:
        west, _, east, _ = self._edges()
        return west > east

    @property
    def lng_span(self) -> float:
        """Width of the box in degrees of longitude, measured eastward from west to east."""
        west, _, east, _ = self._edges()
        return _span(west, east)

    def get_south_west(self) -> Optional[LatLng]:
        return self._south_west

    def get_north_east(self) -> Optional[LatLng]:
        return self._north_east

    def get_north_west(self) -> LatLng:
        return LatLng(self.get_north(), self.get_west())

    def get_south_east(self) -> LatLng:
        return LatLng(self.get_south(), self.get_east())

    def get_west(self) -> float:
        return self._edges()[0]

    def get_south(self) -> float:
        return self._edges()[1]

    def get_east(self) -> float:
        return self._edges()[2]

    def get_north(self) -> float:
        return self._edges()[3]

    def get_center(self) -> LatLng:
        """
        Get the midpoint of the box.

        For a box crossing the antimeridian the longitude is the midpoint of the arc that the
        box covers, wrapped back into (-180, 180].
        """
        west, south, east, north = self._edges()
        lat = (south + north) / 2

        if west > east:
            lng = wrap_num(west + _span(west, east) / 2, LNG_WRAP_RANGE)
        else:
            lng = (west + east) / 2

        return LatLng(lat, lng)

    def extend(self, obj: Union[LatLng, LatLngBounds]) -> LatLngBounds:
        """
        Return the smallest box enclosing both this box and a location or another box.

        Latitudes simply grow to the new minimum and maximum. For longitudes there are up to
        three ways to cover both inputs: the plain west-to-east range, and the two arcs that
        wrap across the antimeridian. The one with the smallest span wins, with the plain
        range preferred on ties. Wrapping arcs are only considered when every longitude lies
        within [-180, 180], or when one of the boxes crosses the antimeridian; in that case
        unwrapped longitudes are first wrapped into range. If no arc shorter than a full turn
        covers both inputs the result spans the whole world.

        Args:
            obj: A LatLng (or anything to_latlng accepts) or a LatLngBounds

        Returns:
            A new LatLngBounds
        """
        if isinstance(obj, LatLngBounds):
            if not obj.is_valid():
                return self
            other_sw, other_ne = obj.get_south_west(), obj.get_north_east()
        else:
            other_sw = other_ne = to_latlng(obj)

        if not self.is_valid():
            return LatLngBounds(other_sw, other_ne)

        west, east = _union_arc(
            self._south_west.lng, self._north_east.lng, other_sw.lng, other_ne.lng
        )

        return LatLngBounds(
            LatLng(min(self._south_west.lat, other_sw.lat), west),
            LatLng(max(self._north_east.lat, other_ne.lat), east),
        )

    def pad(self, buffer_ratio: float) -> LatLngBounds:
        """
        Grow (or shrink, with a negative ratio) the box on every side.

        Args:
            buffer_ratio: The fraction of the height added to the south and north edges, and of
                the longitude span added to the west and east edges.

        Returns:
            A new LatLngBounds
        """
        west, south, east, north = self._edges()
        span = _span(west, east)
        lat_buffer = abs(north - south) * buffer_ratio
        lng_buffer = span * buffer_ratio

        west, east = west - lng_buffer, east + lng_buffer
        if self.crosses_antimeridian:
            if span + 2 * lng_buffer >= 360:
                west, east = WORLD_WEST, WORLD_EAST
            else:
                west = wrap_num(west, LNG_WRAP_RANGE)
                east = wrap_num(east, LNG_WRAP_RANGE)

        return LatLngBounds(
            LatLng(south - lat_buffer, west), LatLng(north + lat_buffer, east)
        )

    def contains(self, obj: Union[LatLng, LatLngBounds]) -> bool:
        """
        Check whether a location or another box lies inside this box, edges included.

        Args:
            obj: A LatLng (or anything to_latlng accepts) or a LatLngBounds

        Returns:
            True if obj is entirely inside; always False for an empty box
        """
        if not self.is_valid():
            return False

        west, south, east, north = self._edges()

        if isinstance(obj, LatLngBounds):
            if not obj.is_valid():
                return False
            o_west, o_south, o_east, o_north = obj._edges()
            return (
                o_south >= south
                and o_north <= north
                and _arc_contains(west, east, o_west, o_east)
            )

        latlng = to_latlng(obj)
        if not south <= latlng.lat <= north:
            return False
        if _is_world(west, east):
            return True
        if west > east:
            # two disjoint ranges: [west, 180] and [-180, east]
            lng = wrap_num(latlng.lng, LNG_WRAP_RANGE)
            return lng >= west or lng <= east
        return west <= latlng.lng <= east

    def intersects(self, other: LatLngBounds) -> bool:
        """
        Check whether two boxes share at least one location; touching edges count.
        """
        return self._meets(other, strict=False)

    def overlaps(self, other: LatLngBounds) -> bool:
        """
        Check whether two boxes share an area; touching edges do not count.
        """
        return self._meets(other, strict=True)

    def equals(
        self, other: Optional[LatLngBounds], max_margin: float = DEFAULT_EPSILON
    ) -> bool:
        if other is None or not self.is_valid() or not other.is_valid():
            return False
        return self._south_west.equals(
            other.get_south_west(), max_margin
        ) and self._north_east.equals(other.get_north_east(), max_margin)

    def is_valid(self) -> bool:
        if self._south_west is None or self._north_east is None:
            return False
        return not any(
            math.isnan(v)
            for v in (
                self._south_west.lat,
                self._south_west.lng,
                self._north_east.lat,
                self._north_east.lng,
            )
        )

    def to_bbox_string(self) -> str:
        """Format as "west,south,east,north", the order used by WMS and most bbox APIs."""
        return ",".join(str(v) for v in self._edges())

    def to_polygon(self) -> Union[Polygon, MultiPolygon]:
        """
        Convert to a shapely geometry in (x=lng, y=lat) order.

        A box crossing the antimeridian is split into two rectangles, one on each side of it.
        """
        west, south, east, north = self._edges()
        if west > east:
            return MultiPolygon(
                [
                    box(west, south, WORLD_EAST, north),
                    box(WORLD_WEST, south, east, north),
                ]
            )
        return box(west, south, east, north)

    def _edges(self) -> Tuple[float, float, float, float]:
        if self._south_west is None or self._north_east is None:
            raise ValueError("empty LatLngBounds has no edges")
        return (
            self._south_west.lng,
            self._south_west.lat,
            self._north_east.lng,
            self._north_east.lat,
        )

    def _meets(self, other: LatLngBounds, strict: bool) -> bool:
        if not self.is_valid() or not other.is_valid():
            return False

        west, south, east, north = self._edges()
        o_west, o_south, o_east, o_north = other._edges()

        if strict:
            lat_meets = o_north > south and o_south < north
        else:
            lat_meets = o_north >= south and o_south <= north

        return lat_meets and _arcs_meet(west, east, o_west, o_east, strict)


def _span(west: float, east: float) -> float:
    return east - west if west <= east else east - west + 360


def _is_geographic(*lngs: float) -> bool:
    return all(WORLD_WEST <= lng <= WORLD_EAST for lng in lngs)


def _is_world(west: float, east: float) -> bool:
    return west == WORLD_WEST and east == WORLD_EAST


def _arc_contains(west: float, east: float, o_west: float, o_east: float) -> bool:
    if west <= east and o_west <= o_east and not _is_world(west, east):
        return west <= o_west and o_east <= east

    span = _span(west, east)
    if span >= 360:
        return True
    offset = (o_west - west) % 360
    return offset + _span(o_west, o_east) <= span


def _arcs_meet(
    west: float, east: float, o_west: float, o_east: float, strict: bool
) -> bool:
    if (
        west <= east
        and o_west <= o_east
        and not (_is_world(west, east) or _is_world(o_west, o_east))
    ):
        if strict:
            return o_west < east and o_east > west
        return o_west <= east and o_east >= west

    span, o_span = _span(west, east), _span(o_west, o_east)
    if span >= 360 or o_span >= 360:
        return True

    # each arc meets the other iff one of them starts inside the other
    offset, o_offset = (o_west - west) % 360, (west - o_west) % 360
    if strict:
        return offset < span or o_offset < o_span
    return offset <= span or o_offset <= o_span


def _union_arc(
    west: float, east: float, o_west: float, o_east: float
) -> Tuple[float, float]:
    if _arc_contains(west, east, o_west, o_east):
        return west, east
    if _arc_contains(o_west, o_east, west, east):
        return o_west, o_east

    if (west > east or o_west > o_east) and not _is_geographic(
        west, east, o_west, o_east
    ):
        # crossing boxes live on the globe: compare unwrapped longitudes modulo 360
        if _span(west, east) >= 360 or _span(o_west, o_east) >= 360:
            return WORLD_WEST, WORLD_EAST
        west, east, o_west, o_east = (
            wrap_num(lng, LNG_WRAP_RANGE) for lng in (west, east, o_west, o_east)
        )

    candidates = []
    if west <= east and o_west <= o_east:
        linear = (min(west, o_west), max(east, o_east))
        if not _is_geographic(west, east, o_west, o_east):
            return linear
        candidates.append(linear)

    if _is_geographic(west, east, o_west, o_east):
        needed = max(_span(west, east), _span(o_west, o_east))
        # an arc from the start of one input to the end of the other covers both
        # exactly when it is at least as long as each of them
        for arc in ((west, o_east), (o_west, east)):
            if needed <= _span(*arc) < 360:
                candidates.append(arc)

    if not candidates:
        return WORLD_WEST, WORLD_EAST

    # min() keeps the first of equal spans, so the linear range wins ties
    best = min(candidates, key=lambda arc: _span(*arc))
    if _span(*best) >= 360:
        return WORLD_WEST, WORLD_EAST
    return best
