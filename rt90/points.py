"""
Value types for points in the geographic and projected (grid) frames
"""

__all__ = ['GeodeticPoint', 'GridPoint']

import math
from typing import NamedTuple, Optional, Tuple

from rt90._const import ENVELOPE_LAT, ENVELOPE_LON
from rt90.parameters import ProjectionParameters
from rt90.utils.functions import dms_to_decimal, round_half_up


class GeodeticPoint(NamedTuple):
    """A latitude/longitude pair, in decimal degrees. Ranges are not validated."""

    latitude: float
    longitude: float

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeodeticPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            GeodeticPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * dms_to_decimal(*dms[:3])

        return cls(convert(lat), convert(lon))

    def distance_to(self, other: 'GeodeticPoint') -> int:
        """Great-circle distance to another point, in whole meters"""
        from rt90.distance import spherical_distance  # pylint: disable=import-outside-toplevel
        return spherical_distance(*self, *other)

    def in_envelope(self) -> bool:
        """Whether the point lies within the area the Swedish grid zones are designed for"""
        return (
            ENVELOPE_LAT[0] <= self.latitude <= ENVELOPE_LAT[1] and
            ENVELOPE_LON[0] <= self.longitude <= ENVELOPE_LON[1]
        )

    def is_finite(self) -> bool:
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Converts the point to a (latitude, longitude) pair of
        (degrees, minutes, seconds, hemisphere) tuples

        Returns:
            converted value as ((d, m, s, 'N'/'S'), (d, m, s, 'E'/'W'))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a GeoJSON-ordered (longitude, latitude) tuple.

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (latitude, longitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_grid(self, params: Optional[ProjectionParameters] = None) -> 'GridPoint':
        """Project this point onto the grid (default RT90 2.5 gon V)"""
        from rt90.projection import geodetic_to_grid  # pylint: disable=import-outside-toplevel
        if params is None:
            return geodetic_to_grid(*self)

        return geodetic_to_grid(*self, params=params)


class GridPoint(NamedTuple):
    """
    A point in the projected plane, in meters. Note that x is the north-south
    axis and y the east-west axis.
    """

    x: float
    y: float

    def distance_to(self, other: 'GridPoint') -> int:
        """Euclidean distance to another grid point, in whole meters"""
        from rt90.distance import planar_distance  # pylint: disable=import-outside-toplevel
        return planar_distance(*self, *other)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_geodetic(self, params: Optional[ProjectionParameters] = None) -> GeodeticPoint:
        """Unproject this point to latitude/longitude (default RT90 2.5 gon V)"""
        from rt90.projection import grid_to_geodetic  # pylint: disable=import-outside-toplevel
        if params is None:
            return grid_to_geodetic(*self)

        return grid_to_geodetic(*self, params=params)
