"""
Closed-form distance metrics over coordinate pairs.

Every function here is pure and returns a float. Mathematically undefined
inputs (a zero vector for cosine distance, p=0 for Minkowski) produce NaN
rather than raising.
"""

__all__ = [
    'chebyshev', 'cosine', 'euclidean', 'hamming', 'haversine', 'jaccard',
    'jaccard_sets', 'manhattan', 'minkowski', 'sorensen_dice', 'sorensen_dice_sets',
    'three_dimensional',
]

import math
from typing import Iterable

import numpy as np
from numpy.linalg import norm

from geodistance._const import EARTH_RADIUS_KM
from geodistance.utils.logging import warn_once


def euclidean(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Straight-line distance between two coordinate pairs, in degrees."""
    return math.hypot(lat2 - lat1, lng2 - lng1)


def manhattan(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Sum of the absolute latitude and longitude differences."""
    return abs(lat1 - lat2) + abs(lng1 - lng2)


def chebyshev(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Largest of the absolute latitude and longitude differences."""
    return max(abs(lat1 - lat2), abs(lng1 - lng2))


def minkowski(lat1: float, lng1: float, lat2: float, lng2: float, p: float = 2) -> float:
    """
    Minkowski distance of order p. p=1 is Manhattan distance and p=2 is
    Euclidean distance.

    Args:
        lat1:
            Latitude of the first point

        lng1:
            Longitude of the first point

        lat2:
            Latitude of the second point

        lng2:
            Longitude of the second point

        p: (float) (Default 2)
            The order of the norm. An order of 0 is undefined and yields NaN.

    Returns:
        float

    Note that p=0 is checked explicitly. Floating-point arithmetic alone would
    evaluate (|dlat|^0 + |dlng|^0)^(1/0) as 2^inf = inf rather than NaN.
    """
    if p == 0:
        warn_once('Minkowski distance is undefined for p=0; returning NaN.')
        return math.nan

    deltas = np.abs(np.array([lat1 - lat2, lng1 - lng2], dtype=float))
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.sum(deltas ** p) ** (1 / p))


def haversine(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Calculate distance in kilometers using the Haversine formula (spherical earth)."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2)
    # Rounding can push antipodal points just past 1
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def three_dimensional(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    lat3: float,
    lng3: float,
) -> float:
    """
    Euclidean norm over the differences of the first and third pairs from the
    second pair, i.e. sqrt((lat1-lat2)^2 + (lng1-lng2)^2 + (lat3-lat2)^2 + (lng3-lng2)^2).

    Note that this is not the distance between two 3-dimensional points.
    """
    return math.sqrt(
        (lat1 - lat2) ** 2 +
        (lng1 - lng2) ** 2 +
        (lat3 - lat2) ** 2 +
        (lng3 - lng2) ** 2
    )


def cosine(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Cosine distance (1 - cosine similarity) between the vectors (lat1, lng1)
    and (lat2, lng2). NaN if either vector is the zero vector.
    """
    u = np.array([lat1, lng1], dtype=float)
    v = np.array([lat2, lng2], dtype=float)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(1 - np.dot(u, v) / (norm(u) * norm(v)))


def hamming(n1: float, n2: float, n3: float, n4: float) -> int:
    """Number of positions at which (n1, n2) and (n3, n4) differ."""
    return sum(x != y for x, y in ((n1, n3), (n2, n4)))


def jaccard_sets(set_a: Iterable, set_b: Iterable) -> float:
    """
    Jaccard distance between two collections, treated as sets.

    Args:
        set_a:
            The first collection of values

        set_b:
            The second collection of values

    Returns:
        (float) 1 - |A & B| / |A | B|, or 0. if both sets are empty
    """
    set_a, set_b = set(set_a), set(set_b)
    if not set_a and not set_b:
        return 0.

    intersection = sum(1 for x in set_a if x in set_b)
    union = len(set_a) + len(set_b) - intersection
    return 1 - intersection / union


def sorensen_dice_sets(set_a: Iterable, set_b: Iterable) -> float:
    """
    Sørensen–Dice distance between two collections, treated as sets.

    Args:
        set_a:
            The first collection of values

        set_b:
            The second collection of values

    Returns:
        (float) 1 - 2|A & B| / (|A| + |B|), or 0. if both sets are empty
    """
    set_a, set_b = set(set_a), set(set_b)
    if not set_a and not set_b:
        return 0.

    intersection = sum(1 for x in set_a if x in set_b)
    return 1 - 2 * intersection / (len(set_a) + len(set_b))


def jaccard(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Jaccard distance between the sets {lat1, lng1} and {lat2, lng2}."""
    return jaccard_sets((lat1, lng1), (lat2, lng2))


def sorensen_dice(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Sørensen–Dice distance between the sets {lat1, lng1} and {lat2, lng2}."""
    return sorensen_dice_sets((lat1, lng1), (lat2, lng2))
