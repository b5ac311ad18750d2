
from geodistance._version import __version__  # noqa: F401
from geodistance.utils.logging import LOGGER
from geodistance.coordinates import GeoPoint
from geodistance.geodesic import vincenty
from geodistance.metrics import (
    chebyshev, cosine, euclidean, hamming, haversine, jaccard, manhattan, minkowski,
    sorensen_dice, three_dimensional
)
from geodistance.dispatch import (
    FORMULAS, compute, distance_matrix, get_formula, list_formulas, set_default_formula
)

__all__ = [
    'FORMULAS',
    'GeoPoint',
    'LOGGER',
    'chebyshev',
    'compute',
    'cosine',
    'distance_matrix',
    'euclidean',
    'get_formula',
    'hamming',
    'haversine',
    'jaccard',
    'list_formulas',
    'manhattan',
    'minkowski',
    'set_default_formula',
    'sorensen_dice',
    'three_dimensional',
    'vincenty',
]
