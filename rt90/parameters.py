"""
Reference ellipsoid and projection zone parameters
"""

__all__ = [
    'Ellipsoid', 'ProjectionParameters', 'GRS80', 'RT90_25_GON_V',
    'SWEREF_99_TM', 'ZONES', 'get_zone',
]

from dataclasses import dataclass, replace
from functools import cached_property

from rt90._const import GRS80_A, GRS80_F
from rt90.utils.functions import dms_to_decimal


@dataclass(frozen=True)
class Ellipsoid:
    """A reference ellipsoid, defined by its semi-major axis (meters) and flattening"""

    axis: float
    flattening: float

    @cached_property
    def e2(self) -> float:
        """First eccentricity squared"""
        return self.flattening * (2 - self.flattening)

    @cached_property
    def n(self) -> float:
        """Third flattening"""
        return self.flattening / (2 - self.flattening)

    @cached_property
    def a_roof(self) -> float:
        """Rectifying radius, to the fourth power of n"""
        n = self.n
        return self.axis / (1 + n) * (1 + n ** 2 / 4 + n ** 4 / 64)


GRS80 = Ellipsoid(GRS80_A, GRS80_F)


@dataclass(frozen=True)
class ProjectionParameters:
    """
    A Gauss-Krüger (transverse mercator) projection zone.

    Args:
        name:
            Identifier of the zone, ex. 'rt90_2.5_gon_v'
        central_meridian:
            Longitude of the central meridian, in decimal degrees
        scale:
            Scale factor along the central meridian
        false_northing:
            Offset added to the north-south (x) grid coordinate
        false_easting:
            Offset added to the east-west (y) grid coordinate
        ellipsoid:
            The reference ellipsoid (default GRS80)
        enabled:
            (Default True) If False, the inverse projection short-circuits
            and returns (0, 0) for any input
    """

    name: str
    central_meridian: float
    scale: float
    false_northing: float
    false_easting: float
    ellipsoid: Ellipsoid = GRS80
    enabled: bool = True

    def disable(self) -> 'ProjectionParameters':
        """Returns a disabled copy of these parameters"""
        return replace(self, enabled=False)


RT90_75_GON_V = ProjectionParameters(
    'rt90_7.5_gon_v', dms_to_decimal(11, 18.375), 1.000006, -667.282, 1500025.141
)
RT90_50_GON_V = ProjectionParameters(
    'rt90_5.0_gon_v', dms_to_decimal(13, 33.376), 1.0000058, -667.130, 1500044.695
)
RT90_25_GON_V = ProjectionParameters(
    'rt90_2.5_gon_v', dms_to_decimal(15, 48, 22.624306), 1.00000561024, -667.711, 1500064.274
)
RT90_00_GON_V = ProjectionParameters(
    'rt90_0.0_gon_v', dms_to_decimal(18, 3.378), 1.0000054, -668.844, 1500083.521
)
RT90_25_GON_O = ProjectionParameters(
    'rt90_2.5_gon_o', dms_to_decimal(20, 18.379), 1.0000052, -670.706, 1500102.765
)
RT90_50_GON_O = ProjectionParameters(
    'rt90_5.0_gon_o', dms_to_decimal(22, 33.380), 1.0000049, -672.557, 1500121.846
)
SWEREF_99_TM = ProjectionParameters(
    'sweref_99_tm', 15.0, 0.9996, 0.0, 500000.0
)

ZONES = {
    zone.name: zone
    for zone in (
        RT90_75_GON_V, RT90_50_GON_V, RT90_25_GON_V, RT90_00_GON_V,
        RT90_25_GON_O, RT90_50_GON_O, SWEREF_99_TM,
    )
}


def get_zone(name: str) -> ProjectionParameters:
    """
    Look up a projection zone by name.

    Args:
        name: a key of ZONES, ex. 'rt90_2.5_gon_v'

    Returns:
        ProjectionParameters
    """
    if name not in ZONES:
        raise ValueError(f"Unknown zone '{name}'. Options: {list(ZONES.keys())}")

    return ZONES[name]
