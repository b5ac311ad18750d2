"""
Constants declarations for geodistance
"""

__all__ = [
    'Ellipsoid', 'WGS84', 'EARTH_RADIUS_KM',
    'VINCENTY_MAX_ITERATIONS', 'VINCENTY_TOLERANCE',
]

from typing import NamedTuple


class Ellipsoid(NamedTuple):
    """Shape of a reference ellipsoid"""
    a: float  # Semi-major axis (meters)
    b: float  # Semi-minor axis (meters)
    f: float  # Flattening


# WGS84 Ellipsoid Constants
WGS84 = Ellipsoid(
    a=6378137.0,
    b=6356752.31424518,
    f=1 / 298.257223563,
)

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_KM = 6371.0

# Vincenty inverse solver limits
VINCENTY_MAX_ITERATIONS = 20
VINCENTY_TOLERANCE = 1e-12  # radians
