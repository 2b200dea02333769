"""
Selection of the zone (central meridian) a longitude falls into
"""

__all__ = ['utm_zone_number', 'zone_center_longitude']

import math


def _normalize_longitude(longitude: float) -> float:
    """Wraps a longitude into [-180, 180)"""
    lon = float(longitude)
    if not math.isfinite(lon):
        raise ValueError(f'Longitude must be a finite number, not {longitude!r}')

    lon = (lon + 180.0) % 360.0 - 180.0
    # Modulo of a tiny negative number can round up to 360
    if lon >= 180.0:
        lon -= 360.0

    return lon


def utm_zone_number(longitude: float) -> int:
    """
    The UTM (6-degree) zone number of a longitude.

    Args:
        longitude:
            The longitude, in degrees

    Returns:
        (int) the zone number, 1 through 60
    """
    return int(math.floor((_normalize_longitude(longitude) + 180) / 6)) + 1


def zone_center_longitude(longitude: float, width: int) -> float:
    """
    The central meridian of the zone of the given width containing a longitude.

        6-degree zones use the UTM central meridians (..., 117, 123, ...)
        3-degree zones use multiples of 3 (..., 117, 120, 123, ...)
        2-degree zones use odd meridians (..., 119, 121, ...)

    Args:
        longitude:
            The longitude, in degrees

        width:
            The zone width in degrees; one of 2, 3 or 6

    Returns:
        (float) the central meridian, in degrees
    """
    lon = _normalize_longitude(longitude)
    if width == 6:
        return -177.0 + 6.0 * (utm_zone_number(lon) - 1)

    if width == 3:
        return 3.0 * math.floor(lon / 3 + 0.5)

    if width == 2:
        return 2.0 * math.floor(lon / 2) + 1.0

    raise ValueError(f'Unsupported zone width {width!r}; must be one of 2, 3 or 6')
