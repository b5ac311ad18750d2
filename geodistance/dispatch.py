"""
Formula dispatch: selects a distance function by name and forwards raw
arguments to it.
"""

__all__ = [
    'FORMULAS', 'FormulaArguments', 'coerce_arguments', 'compute', 'distance_matrix',
    'get_formula', 'list_formulas', 'set_default_formula',
]

from typing import TYPE_CHECKING, Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Union

import numpy as np

from geodistance.geodesic import vincenty
from geodistance.metrics import (
    chebyshev, cosine, euclidean, hamming, haversine, jaccard, manhattan, minkowski,
    sorensen_dice, three_dimensional
)
from geodistance.utils.functions import coerce_float
from geodistance.utils.logging import LOGGER

if TYPE_CHECKING:
    from geodistance.coordinates import GeoPoint


FORMULAS: Dict[str, Callable[..., Union[float, int]]] = {
    'euclidean': euclidean,
    'haversine': haversine,
    'vincenty': vincenty,
    'manhattan': manhattan,
    'chebyshev': chebyshev,
    'minkowski': minkowski,
    '3d': three_dimensional,
    'cosine': cosine,
    'hamming': hamming,
    'jaccard': jaccard,
    'sorensen-dice': sorensen_dice,
}

# The formula used when none is named
_default_formula = 'euclidean'


class FormulaArguments(NamedTuple):
    """
    Raw positional arguments after numeric coercion. The third pair is ordered
    longitude-first, matching the historical command-line layout.
    """
    lat1: float
    lng1: float
    lat2: float
    lng2: float
    lng3: float
    lat3: float
    p: float


_BINDINGS: Dict[str, Callable[[FormulaArguments], tuple]] = {
    'minkowski': lambda args: (args.lat1, args.lng1, args.lat2, args.lng2, args.p),
    '3d': lambda args: (args.lat1, args.lng1, args.lat2, args.lng2, args.lat3, args.lng3),
}


def _normalize(name: Any) -> str:
    return str(name).strip().lower()


def _bind_two_points(args: FormulaArguments) -> tuple:
    return args.lat1, args.lng1, args.lat2, args.lng2


def coerce_arguments(*values: Any) -> FormulaArguments:
    """
    Converts raw positional values (lat1, lng1, lat2, lng2, lng3, lat3, p) to
    floats. Missing or unparseable coordinates become 0; a missing or
    unparseable p becomes 2.

    Returns:
        FormulaArguments
    """
    padded = list(values[:7]) + [None] * (7 - len(values[:7]))
    coords = [coerce_float(x) for x in padded[:6]]
    return FormulaArguments(*coords, p=coerce_float(padded[6], 2.))


def get_formula(name: str) -> Optional[Callable[..., Union[float, int]]]:
    """
    Look up a distance function by name (case-insensitive).

    Args:
        name:
            The formula name, e.g. 'Haversine'

    Returns:
        The distance function, or None if no formula goes by that name
    """
    return FORMULAS.get(_normalize(name))


def list_formulas() -> List[str]:
    """The names of all available formulas"""
    return list(FORMULAS.keys())


def set_default_formula(name: str) -> None:
    """
    Set the formula used by compute() and distance_matrix() when none is named.

    Args:
        name: any key of FORMULAS (case-insensitive)
    """
    global _default_formula  # pylint: disable=global-statement

    key = _normalize(name)
    if key not in FORMULAS:
        raise ValueError(f"Unknown formula '{name}'. Options: {list_formulas()}")

    _default_formula = key


def compute(formula: Optional[str], *values: Any) -> Optional[Union[float, int]]:
    """
    Compute a distance with the named formula.

    Values are taken positionally as (lat1, lng1, lat2, lng2, lng3, lat3, p) and
    coerced to floats; see coerce_arguments(). Only the values a formula uses are
    forwarded to it.

    Args:
        formula:
            The formula name (case-insensitive). If None or empty, the default
            formula is used.

        *values:
            The raw coordinate values (and Minkowski order)

    Returns:
        The distance, or None if the formula name is unknown
    """
    key = _normalize(formula) if formula else _default_formula
    func = FORMULAS.get(key)
    if func is None:
        LOGGER.warning('Unknown distance formula: %s', formula)
        LOGGER.warning('Available options: %s', ', '.join(FORMULAS))
        return None

    args = coerce_arguments(*values)
    return func(*_BINDINGS.get(key, _bind_two_points)(args))


def distance_matrix(points: Sequence['GeoPoint'], formula: Optional[str] = None) -> np.ndarray:
    """
    Compute the pairwise distances between a sequence of GeoPoints.

    Args:
        points:
            The points to compare

        formula:
            The name of any two-point formula. If None, the default formula is used.

    Returns:
        A square numpy array where element [i, j] is the distance from points[i]
        to points[j]
    """
    key = _normalize(formula) if formula else _default_formula
    func = FORMULAS.get(key)
    if func is None:
        raise ValueError(f"Unknown formula '{formula}'. Options: {list_formulas()}")

    if key == '3d':
        raise ValueError("Formula '3d' takes three points and cannot build a distance matrix")

    size = len(points)
    matrix = np.zeros((size, size), dtype=float)
    for i in range(size):
        for j in range(i, size):
            matrix[i, j] = matrix[j, i] = func(
                points[i].latitude, points[i].longitude,
                points[j].latitude, points[j].longitude,
            )

    return matrix
