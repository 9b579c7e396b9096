"""
Distance calculations in the projected (planar) and geographic (spherical) frames
"""

__all__ = [
    'planar_distance', 'spherical_distance',
    'planar_distance_array', 'spherical_distance_array',
]

import math

import numpy as np

from rt90._const import EARTH_RADIUS_METERS


def _to_meters(distance: float) -> int:
    if not math.isfinite(distance):
        raise ValueError(f'Distance is not finite ({distance}); check the input coordinates')

    return int(distance)


# -------------------------------------------------------------------------
# Planar (grid) distance
# -------------------------------------------------------------------------

def planar_distance_array(x1, y1, x2, y2) -> np.ndarray:
    """Vectorized Euclidean distance between grid points, in meters (not truncated)"""
    with np.errstate(all='ignore'):
        return np.hypot(
            np.asarray(x1, dtype=float) - np.asarray(x2, dtype=float),
            np.asarray(y1, dtype=float) - np.asarray(y2, dtype=float),
        )


def planar_distance(x1: float, y1: float, x2: float, y2: float) -> int:
    """
    Euclidean distance between two grid points (ex. RT90), truncated to whole meters.

    Args:
        x1, y1:
            The first point (northing, easting)
        x2, y2:
            The second point (northing, easting)

    Returns:
        int
    """
    return _to_meters(float(planar_distance_array(x1, y1, x2, y2)))


# -------------------------------------------------------------------------
# Spherical (geographic) distance
# -------------------------------------------------------------------------

def spherical_distance_array(lat1, lon1, lat2, lon2) -> np.ndarray:
    """
    Vectorized great-circle distance using the spherical law of cosines,
    in meters (not truncated).
    """
    with np.errstate(all='ignore'):
        # Colatitude and longitude, in radians
        phi1 = np.radians(90 - np.asarray(lat1, dtype=float))
        phi2 = np.radians(90 - np.asarray(lat2, dtype=float))
        theta1 = np.radians(np.asarray(lon1, dtype=float))
        theta2 = np.radians(np.asarray(lon2, dtype=float))

        cos_arc = (
            np.sin(phi1) * np.sin(phi2) * np.cos(theta1 - theta2) +
            np.cos(phi1) * np.cos(phi2)
        )
        # Rounding can push coincident or antipodal points just outside [-1, 1]
        arc = np.arccos(np.clip(cos_arc, -1., 1.))
        return arc * EARTH_RADIUS_METERS


def spherical_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> int:
    """
    Great-circle distance between two latitude/longitude points on a sphere of
    mean earth radius, truncated to whole meters.

    Args:
        lat1, lon1:
            The first point, in decimal degrees
        lat2, lon2:
            The second point, in decimal degrees

    Returns:
        int
    """
    return _to_meters(float(spherical_distance_array(lat1, lon1, lat2, lon2)))
