"""
Geodesic distance on the WGS84 ellipsoid using Vincenty's inverse formula.
"""

__all__ = ['vincenty']

import math

from geodistance._const import VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE, WGS84
from geodistance.utils.logging import LOGGER


def vincenty(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Calculate distance using Vincenty's inverse formula (WGS84 ellipsoid).

    Abnormal geometry is reported through the return value rather than raised:
    coincident points give 0.0, and a solution that fails to converge within
    VINCENTY_MAX_ITERATIONS (usually near-antipodal points) gives NaN. Infinite
    or NaN inputs also give NaN.

    Args:
        lat1:
            Latitude of the first point, in degrees

        lng1:
            Longitude of the first point, in degrees

        lat2:
            Latitude of the second point, in degrees

        lng2:
            Longitude of the second point, in degrees

    Returns:
        (float) the distance in kilometers, or NaN if the formula did not converge
    """
    if not all(math.isfinite(x) for x in (lat1, lng1, lat2, lng2)):
        return math.nan

    a, b, f = WGS84

    phi1, lambda1 = math.radians(lat1), math.radians(lng1)
    phi2, lambda2 = math.radians(lat2), math.radians(lng2)

    L = lambda2 - lambda1
    U1 = math.atan((1 - f) * math.tan(phi1))
    U2 = math.atan((1 - f) * math.tan(phi2))

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    Lambda = L
    Lambda_prev = 2 * math.pi
    iteration = 0

    # Left as NaN if the loop body never runs (L == 2pi)
    sinSigma = cosSigma = sigma = cosSqAlpha = cos2SigmaM = math.nan

    while abs(Lambda - Lambda_prev) > VINCENTY_TOLERANCE and iteration < VINCENTY_MAX_ITERATIONS:
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.hypot(
            cosU2 * sinLambda,
            cosU1 * sinU2 - sinU1 * cosU2 * cosLambda
        )

        if sinSigma == 0:
            return 0.0  # Coincident points

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            cos2SigmaM = 0.0  # Equatorial line

        if math.isnan(cos2SigmaM):
            cos2SigmaM = 0.0

        # eq. 10
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))

        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        iteration += 1

    if iteration >= VINCENTY_MAX_ITERATIONS:
        LOGGER.debug(
            'Vincenty formula failed to converge after %d iterations for (%s, %s) -> (%s, %s)',
            iteration, lat1, lng1, lat2, lng2
        )
        return math.nan

    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)

    # eq. 3
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))

    # eq. 4
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))

    # eq. 6
    deltaSigma = B * sinSigma * (
        cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
        )
    )

    # eq. 19, meters to kilometers
    return b * A * (sigma - deltaSigma) / 1000
