"""
Constants declarations for mollweide
"""
import math

PI = math.pi
HALF_PI = PI / 2
TWO_PI = 2 * PI

# Convergence tolerance for iterative solutions
EPSLN = 1.0e-10
MAX_ITER = 50

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)

# Mollweide Constants
EASTING_FACTOR = 0.900316316158  # 2 * sqrt(2) / pi
NORTHING_FACTOR = 1.4142135623731  # sqrt(2)
ARG_LIMIT = 0.999999999999
