"""
Constants declarations for rt90
"""

# GRS80 Ellipsoid Constants
GRS80_A = 6378137.0  # Major axis (meters)
GRS80_F = 1 / 298.257222101  # Flattening

# Mean Earth Radius (law of cosines distance)
EARTH_RADIUS_METERS = 6_371_000.0

# Sentinel returned by a disabled inverse projection
DISABLED_LATLON = (0.0, 0.0)

# Approximate bounds of the Swedish mainland, where the RT90 zones are designed to operate
ENVELOPE_LAT = (55.0, 69.1)
ENVELOPE_LON = (10.5, 24.2)
