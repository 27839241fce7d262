"""Named CRS instances for the coordinate systems web maps commonly use.

- EPSG3857: Spherical (Web) Mercator, the default for tiled web maps
- EPSG900913: the unofficial code EPSG:3857 was published under first
- EPSG3395: ellipsoidal World Mercator
- EPSG4326: plain longitude/latitude (equirectangular)
- SIMPLE: a flat, unbounded plane for non-geographic maps (floor plans, game maps, images)

Every instance is an immutable CRS value, safe to share between threads. Use crs_from_code to
resolve an identifier string to one of them.
"""

import logging
import math
from typing import Dict

from tilecrs.constructs.transformation import Transformation
from tilecrs.crs.crs import CRS, DistanceType
from tilecrs.projections.lonlat import LonLat
from tilecrs.projections.mercator import Mercator
from tilecrs.projections.spherical_mercator import SphericalMercator
from tilecrs.utils.constants import LNG_WRAP_RANGE

log = logging.getLogger(__name__)


def _mercator_transformation(radius: float) -> Transformation:
    # maps [-R * pi, R * pi] onto [0, 1] with y pointing down
    scale = 0.5 / (math.pi * radius)
    return Transformation(scale, 0.5, -scale, 0.5)


EPSG3857 = CRS(
    code="EPSG:3857",
    projection=SphericalMercator(),
    transformation=_mercator_transformation(SphericalMercator.R),
    wrap_lng=LNG_WRAP_RANGE,
)

EPSG900913 = CRS(
    code="EPSG:900913",
    projection=EPSG3857.projection,
    transformation=EPSG3857.transformation,
    wrap_lng=LNG_WRAP_RANGE,
)

EPSG3395 = CRS(
    code="EPSG:3395",
    projection=Mercator(),
    transformation=_mercator_transformation(Mercator.R),
    wrap_lng=LNG_WRAP_RANGE,
)

EPSG4326 = CRS(
    code="EPSG:4326",
    projection=LonLat(),
    transformation=Transformation(1 / 180, 1, -1 / 180, 0.5),
    wrap_lng=LNG_WRAP_RANGE,
)

SIMPLE = CRS(
    code="Simple",
    projection=LonLat(),
    transformation=Transformation(1, 0, -1, 0),
    scale=lambda zoom: 2**zoom,
    zoom=math.log2,
    infinite=True,
    distance=DistanceType.EUCLIDEAN,
)

_NAMED_CRS: Dict[str, CRS] = {
    crs.code.upper(): crs for crs in (EPSG3857, EPSG900913, EPSG3395, EPSG4326, SIMPLE)
}


def crs_from_code(code: str) -> CRS:
    """
    Resolve a CRS identifier to one of the named CRS instances.

    Args:
        code: The identifier, case-insensitive. Can be an "EPSG:<n>" string, a bare EPSG number
            (as a string or an int), or "simple".

    Returns:
        The matching CRS

    Raises:
        ValueError: If no named CRS matches the code

    Examples:
        >>> crs_from_code("epsg:3857") is EPSG3857
        True
        >>> crs_from_code(4326) is EPSG4326
        True
    """
    key = str(code).strip().upper()
    if key.isdigit():
        key = f"EPSG:{key}"

    try:
        crs = _NAMED_CRS[key]
    except KeyError as e:
        raise ValueError(
            f"unknown CRS code {code!r}; expected one of {sorted(_NAMED_CRS)}"
        ) from e

    log.debug(f"resolved {code!r} to {crs.code}")
    return crs
