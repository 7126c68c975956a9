"""
Constants declarations for geomeasures
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Vincenty inverse iteration defaults
DEFAULT_ITERATION_LIMIT = 100
DEFAULT_TOLERANCE = 1e-12  # radians on lambda, roughly 0.06mm

# Universal Transverse Mercator
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500_000.0  # meters
UTM_FALSE_NORTHING_SOUTH = 10_000_000.0  # meters, southern hemisphere only
UTM_ZONE_WIDTH = 6  # degrees
UTM_ZONE_COUNT = 60
