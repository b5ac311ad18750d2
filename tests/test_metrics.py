import math

import pytest
from pytest import approx

from geodistance.metrics import *


def test_euclidean():
    assert euclidean(0., 0., 3., 4.) == 5.
    assert euclidean(3., 4., 0., 0.) == 5.
    assert euclidean(12.5, -7.25, 12.5, -7.25) == 0.


def test_manhattan():
    assert manhattan(0., 0., 3., 4.) == 7.
    assert manhattan(-1., -1., 1., 1.) == 4.
    assert manhattan(2., 2., 2., 2.) == 0.


def test_chebyshev():
    assert chebyshev(0., 0., 3., 4.) == 4.
    assert chebyshev(0., 0., -5., 1.) == 5.


def test_minkowski():
    assert minkowski(0., 0., 3., 4., 1) == approx(7.)
    assert minkowski(0., 0., 3., 4., 3) == approx(91 ** (1 / 3))

    # Default order is Euclidean
    assert minkowski(0., 0., 3., 4.) == approx(5.)

    for coords in [(0., 0., 3., 4.), (12.1, -3.3, 7.7, 100.2), (-45., 10., 45., -10.)]:
        assert minkowski(*coords, 2) == approx(euclidean(*coords))

    assert isinstance(minkowski(0., 0., 3., 4.), float)


def test_minkowski_undefined_order():
    assert math.isnan(minkowski(0., 0., 3., 4., 0))


def test_haversine():
    # Sourced from haversine package
    expected = 0.157253373
    actual = haversine(0.0, 0.0, 0.001, 0.001)
    assert actual == approx(expected, abs=1e-6)

    expected = 157.249381271
    actual = haversine(0.0, 0.0, 1.0, 1.0)
    assert actual == approx(expected, abs=1e-6)

    # Antimeridian test
    expected = 222.389853289
    actual = haversine(0.0, 179.0, 0.0, -179.0)
    assert actual == approx(expected, abs=1e-6)

    # NYC -> London
    assert haversine(40.7128, -74.0060, 51.5074, -0.1278) == approx(5570, abs=10)

    assert haversine(40.7128, -74.0060, 40.7128, -74.0060) == 0.


def test_three_dimensional():
    assert three_dimensional(1., 2., 0., 0., 0., 0.) == approx(math.sqrt(5))

    # Third pair is measured against the second pair
    assert three_dimensional(0., 0., 1., 1., 3., 5.) == approx(math.sqrt(22))
    assert three_dimensional(1., 1., 1., 1., 1., 1.) == 0.


def test_cosine():
    assert cosine(1., 0., 0., 1.) == approx(1.)
    assert cosine(1., 0., -1., 0.) == approx(2.)
    assert cosine(1., 1., 2., 2.) == approx(0., abs=1e-12)

    # Zero vectors are undefined
    assert math.isnan(cosine(0., 0., 1., 1.))
    assert math.isnan(cosine(1., 1., 0., 0.))


def test_hamming():
    assert hamming(1, 0, 1, 0) == 0
    assert hamming(1, 0, 0, 1) == 2
    assert hamming(1, 0, 1, 1) == 1
    assert hamming(0., 0., 0., 0.) == 0


def test_jaccard():
    assert jaccard(1., 2., 1., 2.) == 0.
    assert jaccard(1., 2., 2., 1.) == 0.
    assert jaccard(1., 2., 3., 4.) == 1.
    assert jaccard(1., 2., 2., 3.) == approx(2 / 3)

    # Duplicates collapse
    assert jaccard(1., 1., 1., 2.) == approx(0.5)


def test_jaccard_sets():
    assert jaccard_sets([], []) == 0.
    assert jaccard_sets(set(), {1}) == 1.
    assert jaccard_sets({1, 2, 3}, {2, 3, 4}) == approx(0.5)


def test_sorensen_dice():
    assert sorensen_dice(1., 2., 1., 2.) == 0.
    assert sorensen_dice(1., 2., 3., 4.) == 1.
    assert sorensen_dice(1., 2., 2., 3.) == approx(0.5)
    assert sorensen_dice(1., 1., 1., 2.) == approx(1 / 3)


def test_sorensen_dice_sets():
    assert sorensen_dice_sets([], []) == 0.
    assert sorensen_dice_sets({1, 2}, {3}) == 1.
    assert sorensen_dice_sets({1, 2, 3}, {2, 3, 4}) == approx(1 / 3)


@pytest.mark.parametrize('func', [euclidean, manhattan, chebyshev, minkowski, haversine])
def test_identical_points(func):
    assert func(51.5074, -0.1278, 51.5074, -0.1278) == 0.


def test_haversine_antipodal():
    half_circumference = math.pi * 6371.
    assert haversine(0., 0., 0., 180.) == approx(half_circumference, abs=1e-3)
    assert haversine(90., 0., -90., 0.) == approx(half_circumference, abs=1e-3)

    # Rounding pushes the half-chord term past 1 for these
    actual = haversine(66.16849958870057, -92.19208432063249, -66.16849958870057, 87.80791567936751)
    assert actual == approx(half_circumference, abs=1e-3)

    for lat, lng in [(12.5, -45.), (-33.8688, 151.2093), (66.16849958870057, -92.19208432063249)]:
        assert haversine(lat, lng, -lat, lng + 180) == approx(half_circumference, abs=1e-3)
