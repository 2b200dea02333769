"""
Named transverse Mercator zone conventions: TWD97 and the generic 2, 3 and 6-degree zones

The ``*_to_wgs84`` functions historically projected their input forward
(treating x/y as longitude/latitude) instead of inverting it. They now invert
by default; pass ``legacy=True`` to reproduce the old output.
"""

__all__ = [
    'PRESETS', 'ZonePreset', 'get_preset',
    'to_twd97', 'to_zone_2deg', 'to_zone_3deg', 'to_zone_6deg',
    'twd97_to_wgs84', 'zone_2deg_to_wgs84', 'zone_3deg_to_wgs84', 'zone_6deg_to_wgs84',
]

from typing import Dict, NamedTuple, Optional, Tuple

from tmzones._const import (
    TWD97_CENTER_LONGITUDE, TWD97_DX, TWD97_K0,
    ZONE_2DEG_DX, ZONE_2DEG_K0,
    ZONE_3DEG_DX, ZONE_3DEG_K0,
    ZONE_6DEG_DX, ZONE_6DEG_K0,
)
from tmzones.projection import TransverseMercator, forward_transform
from tmzones.utils.logging import warn_once


class ZonePreset(NamedTuple):
    """Fixed parameters of a zone convention. A center_longitude of None is caller-supplied."""
    name: str
    k0: float
    dx: float
    center_longitude: Optional[float] = None


PRESETS: Dict[str, ZonePreset] = {
    preset.name: preset for preset in (
        ZonePreset('twd97', TWD97_K0, TWD97_DX, TWD97_CENTER_LONGITUDE),
        ZonePreset('zone_2deg', ZONE_2DEG_K0, ZONE_2DEG_DX),
        ZonePreset('zone_3deg', ZONE_3DEG_K0, ZONE_3DEG_DX),
        ZonePreset('zone_6deg', ZONE_6DEG_K0, ZONE_6DEG_DX),
    )
}


def get_preset(name: str, center_longitude: Optional[float] = None) -> TransverseMercator:
    """
    Build the projection for a named zone convention.

    Args:
        name:
            One of the keys of PRESETS, e.g. 'twd97' or 'zone_6deg'

        center_longitude: (Optional[float])
            The central meridian, in degrees. Required for zones without a
            fixed central meridian; must be omitted (or match) otherwise.

    Returns:
        TransverseMercator
    """
    try:
        preset = PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown zone preset {name!r}; must be one of: {', '.join(sorted(PRESETS))}"
        ) from None

    if preset.center_longitude is None:
        if center_longitude is None:
            raise ValueError(f"Zone preset {name!r} requires a center longitude")

        return TransverseMercator(center_longitude, preset.k0, preset.dx)

    if center_longitude is not None and center_longitude != preset.center_longitude:
        raise ValueError(
            f"Zone preset {name!r} has a fixed center longitude of {preset.center_longitude}"
        )

    return TransverseMercator(preset.center_longitude, preset.k0, preset.dx)


def _to_wgs84(
    name: str,
    x: float,
    y: float,
    center_longitude: Optional[float],
    legacy: bool,
) -> Tuple[float, float]:
    projection = get_preset(name, center_longitude)
    if legacy:
        warn_once(
            'legacy=True projects x/y forward as if they were longitude/latitude; '
            'the result is not a WGS84 coordinate. (this warning will not repeat)'
        )
        return forward_transform(x, y, projection.center_longitude, projection.k0, projection.dx)

    return projection.unproject(x, y)


def to_twd97(longitude: float, latitude: float) -> Tuple[float, float]:
    """Convert a WGS84 longitude/latitude to TWD97 (TM2, central meridian 121°E) x/y meters"""
    return get_preset('twd97').project(longitude, latitude)


def twd97_to_wgs84(x: float, y: float) -> Tuple[float, float]:
    """Convert TWD97 (TM2, central meridian 121°E) x/y meters to a WGS84 longitude/latitude"""
    return get_preset('twd97').unproject(x, y)


def to_zone_2deg(longitude: float, latitude: float, center_longitude: float) -> Tuple[float, float]:
    """
    Convert a WGS84 longitude/latitude to x/y meters in a 2-degree zone
    (k0 = 0.9999, false easting 250km).
    """
    return get_preset('zone_2deg', center_longitude).project(longitude, latitude)


def to_zone_3deg(longitude: float, latitude: float, center_longitude: float) -> Tuple[float, float]:
    """
    Convert a WGS84 longitude/latitude to x/y meters in a 3-degree zone
    (k0 = 1.0, false easting 350km).
    """
    return get_preset('zone_3deg', center_longitude).project(longitude, latitude)


def to_zone_6deg(longitude: float, latitude: float, center_longitude: float) -> Tuple[float, float]:
    """
    Convert a WGS84 longitude/latitude to x/y meters in a 6-degree zone
    (k0 = 0.9996, false easting 500km).
    """
    return get_preset('zone_6deg', center_longitude).project(longitude, latitude)


def zone_2deg_to_wgs84(
    x: float,
    y: float,
    center_longitude: float,
    legacy: bool = False,
) -> Tuple[float, float]:
    """
    Convert x/y meters in a 2-degree zone to a WGS84 longitude/latitude.

    Args:
        x:
            The easting, in meters

        y:
            The northing, in meters

        center_longitude:
            The zone's central meridian, in degrees

        legacy: (bool) (Default False)
            If True, reproduces the historical behavior of projecting x/y
            forward instead of inverting them.

    Returns:
        (longitude, latitude) in degrees
    """
    return _to_wgs84('zone_2deg', x, y, center_longitude, legacy)


def zone_3deg_to_wgs84(
    x: float,
    y: float,
    center_longitude: float,
    legacy: bool = False,
) -> Tuple[float, float]:
    """Convert x/y meters in a 3-degree zone to a WGS84 longitude/latitude. See zone_2deg_to_wgs84."""
    return _to_wgs84('zone_3deg', x, y, center_longitude, legacy)


def zone_6deg_to_wgs84(
    x: float,
    y: float,
    center_longitude: float,
    legacy: bool = False,
) -> Tuple[float, float]:
    """Convert x/y meters in a 6-degree zone to a WGS84 longitude/latitude. See zone_2deg_to_wgs84."""
    return _to_wgs84('zone_6deg', x, y, center_longitude, legacy)
