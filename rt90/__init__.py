
from rt90._version import __version__  # noqa: F401
from rt90.utils.logging import LOGGER
from rt90.parameters import (
    Ellipsoid, ProjectionParameters, GRS80, RT90_25_GON_V, SWEREF_99_TM,
    ZONES, get_zone
)
from rt90.points import GeodeticPoint, GridPoint
from rt90.projection import (
    geodetic_to_grid, geodetic_to_grid_array, grid_to_geodetic, grid_to_geodetic_array
)
from rt90.distance import (
    planar_distance, planar_distance_array, spherical_distance, spherical_distance_array
)

__all__ = [
    'Ellipsoid',
    'GeodeticPoint',
    'GRS80',
    'GridPoint',
    'ProjectionParameters',
    'RT90_25_GON_V',
    'SWEREF_99_TM',
    'ZONES',
    'geodetic_to_grid',
    'geodetic_to_grid_array',
    'get_zone',
    'grid_to_geodetic',
    'grid_to_geodetic_array',
    'planar_distance',
    'planar_distance_array',
    'spherical_distance',
    'spherical_distance_array',
    'LOGGER',
]
