"""Numeric constants shared by the tilecrs value types, projections and CRSs.

These values are fixed by the mapping conventions the package follows:
- EARTH_RADIUS: mean Earth radius used by every great-circle distance
- EARTH_CIRCUMFERENCE: equatorial circumference used to size LatLng boxes
- DEFAULT_TILE_SIZE: pixel size of a zoom 0 world for the standard scale function
"""

from pyproj import CRS

# Mean Earth radius in meters, shared by LatLng.distance_to and spherical CRSs
EARTH_RADIUS = 6371000

# Equatorial circumference in meters
EARTH_CIRCUMFERENCE = 40075017

# Size in pixels of a zoom 0 world: scale(zoom) = DEFAULT_TILE_SIZE * 2 ** zoom
DEFAULT_TILE_SIZE = 256

# Default tolerance for coordinate equality
DEFAULT_EPSILON = 1e-9

# Longitude range geographic CRSs wrap into
LNG_WRAP_RANGE = (-180.0, 180.0)

# WGS84 latitude/longitude coordinate system (EPSG:4326)
LATLON_CRS = CRS(4326)
