from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.latlng import LatLng
from tilecrs.constructs.latlng_bounds import LatLngBounds
from tilecrs.constructs.point import Point
from tilecrs.constructs.transformation import Transformation
from tilecrs.crs.crs import CRS, DistanceType
from tilecrs.crs.named import (
    EPSG3395,
    EPSG3857,
    EPSG4326,
    EPSG900913,
    SIMPLE,
    crs_from_code,
)

__version__ = "0.1.0"
