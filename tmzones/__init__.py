from tmzones._version import __version__  # noqa: F401
from tmzones.utils.logging import LOGGER
from tmzones.ellipsoid import Ellipsoid, WGS84
from tmzones.projection import TransverseMercator, forward_transform, inverse_transform
from tmzones.presets import (
    PRESETS, ZonePreset, get_preset,
    to_twd97, to_zone_2deg, to_zone_3deg, to_zone_6deg,
    twd97_to_wgs84, zone_2deg_to_wgs84, zone_3deg_to_wgs84, zone_6deg_to_wgs84,
)
from tmzones.zones import utm_zone_number, zone_center_longitude

__all__ = [
    'Ellipsoid',
    'PRESETS',
    'TransverseMercator',
    'WGS84',
    'ZonePreset',
    'forward_transform',
    'get_preset',
    'inverse_transform',
    'to_twd97',
    'to_zone_2deg',
    'to_zone_3deg',
    'to_zone_6deg',
    'twd97_to_wgs84',
    'utm_zone_number',
    'zone_2deg_to_wgs84',
    'zone_3deg_to_wgs84',
    'zone_6deg_to_wgs84',
    'zone_center_longitude',
    'LOGGER',
]
