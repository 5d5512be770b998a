"""
Constants declarations for geosvg
"""

# Spherical earth radius (meters), equatorial WGS84 axis
EARTH_RADIUS = 6378137.0

# Pipeline defaults
DEFAULT_SMOOTH = True
DEFAULT_SMOOTHING = 0.2
DEFAULT_ACCURACY = 0.001

# Extent (meters) past which the planar approximation is flagged
LARGE_EXTENT_METERS = 500_000.0

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'
