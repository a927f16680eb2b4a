"""
Constants declarations for swegeodesy
"""

# GRS 80 Ellipsoid Constants (SWEREF 99, and RT 90 grids fitted to WGS84 input)
GRS80_A = 6378137.0  # Major axis (meters)
GRS80_F = 1 / 298.257222101  # Flattening

# Bessel 1841 Ellipsoid Constants (native RT 90 datum)
BESSEL_A = 6377397.155  # Major axis (meters)
BESSEL_F = 1 / 299.1528128  # Flattening

# Geographic extent over which the grids are accurate, as
# (min_lat, max_lat, min_lon, max_lon) in decimal degrees
SWEDISH_EXTENT = (54.0, 70.0, 10.0, 25.0)

# Grid results are rounded to millimeters unless told otherwise
DEFAULT_GRID_PRECISION = 3
