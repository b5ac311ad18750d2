"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from typing import Optional, Tuple, Union

from geodistance.utils.functions import round_half_up


class GeoPoint:
    """
    Representation of a point on the globe (i.e., a lat/lon pair), in decimal degrees.

    Values outside of [-90, 90] / [-180, 180] are accepted as-is; no wrapping
    or validation is performed.
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        self.latitude = float(latitude)
        self.longitude = float(longitude)

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeoPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            GeoPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return GeoPoint(convert(lat), convert(lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude to tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), ...) in
            (latitude, longitude) order
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float]:
        """The point as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude

    def distance_to(self, other: 'GeoPoint', formula: str = 'haversine') -> Optional[float]:
        """
        Distance from this point to another using any two-point formula.

        Args:
            other:
                The destination point

            formula: (str) (Default 'haversine')
                The formula name, e.g. 'vincenty' or 'manhattan'

        Returns:
            The distance, or None if the formula name is unknown
        """
        from geodistance.dispatch import compute  # pylint: disable=import-outside-toplevel

        return compute(formula, self.latitude, self.longitude, other.latitude, other.longitude)
