"""
Constants declarations for tmzones
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_B = 6356752.314245  # Semi-minor axis (meters)

# Transverse Mercator zone parameters: (scale factor k0, false easting in meters)
TWD97_CENTER_LONGITUDE = 121.0
TWD97_K0, TWD97_DX = 0.9999, 250_000.0
ZONE_2DEG_K0, ZONE_2DEG_DX = 0.9999, 250_000.0
ZONE_3DEG_K0, ZONE_3DEG_DX = 1.0, 350_000.0
ZONE_6DEG_K0, ZONE_6DEG_DX = 0.9996, 500_000.0

# Distance from the central meridian (degrees) beyond which the series
# expansions are no longer considered accurate
VALID_HALF_WIDTH_DEGREES = 4.0
