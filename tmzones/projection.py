"""
Transverse Mercator projection between WGS84 longitude/latitude and a planar grid

Both directions use series expansions truncated after the third/fourth power of
the distance from the central meridian. Errors stay at the millimeter level
within 1 degree of the central meridian and grow to about a decimeter at 3 degrees.

No input validation is performed and nothing raises: arithmetic follows IEEE
semantics, so division by zero or overflow yields inf/nan, and points far
outside a zone produce meaningless results.
"""

__all__ = ['TransverseMercator', 'forward_transform', 'inverse_transform']

from typing import Tuple

import numpy as np

from tmzones._const import VALID_HALF_WIDTH_DEGREES
from tmzones.ellipsoid import WGS84
from tmzones.utils.mixins import LoggingMixin


def forward_transform(
    longitude: float,
    latitude: float,
    center_longitude: float,
    k0: float,
    dx: float,
) -> Tuple[float, float]:
    """
    Project a WGS84 longitude/latitude onto a transverse Mercator plane.

    Args:
        longitude:
            The longitude, in degrees

        latitude:
            The latitude, in degrees

        center_longitude:
            The central meridian of the projection, in degrees

        k0:
            The scale factor along the central meridian

        dx:
            The false easting, in meters

    Returns:
        (x, y) in meters
    """
    e2 = WGS84.ep_squared
    with np.errstate(all='ignore'):
        lat = np.radians(np.float64(latitude))
        p = np.radians(np.float64(longitude)) - np.radians(np.float64(center_longitude))

        nu = WGS84.prime_vertical_radius(lat)
        sin_lat, cos_lat, tan_lat = np.sin(lat), np.cos(lat), np.tan(lat)

        # Northing
        k1 = WGS84.meridional_arc(lat) * k0
        k2 = k0 * nu * np.sin(2.0 * lat) / 4.0
        k3 = (k0 * nu * sin_lat * cos_lat ** 3 / 24.0) * (
            5.0 - tan_lat ** 2 + 9.0 * e2 * cos_lat ** 2 + 4.0 * e2 ** 2 * cos_lat ** 4
        )
        y = k1 + k2 * p ** 2 + k3 * p ** 4

        # Easting
        k4 = k0 * nu * cos_lat
        k5 = (k0 * nu * cos_lat ** 3 / 6.0) * (1.0 - tan_lat ** 2 + e2 * cos_lat ** 2)
        x = k4 * p + k5 * p ** 3 + dx

    return float(x), float(y)


def inverse_transform(
    x: float,
    y: float,
    center_longitude: float,
    k0: float,
    dx: float,
) -> Tuple[float, float]:
    """
    Convert transverse Mercator planar coordinates back to WGS84 longitude/latitude.

    Args:
        x:
            The easting, in meters (including the false easting)

        y:
            The northing, in meters

        center_longitude:
            The central meridian of the projection, in degrees

        k0:
            The scale factor along the central meridian

        dx:
            The false easting, in meters

    Returns:
        (longitude, latitude) in degrees
    """
    e2 = WGS84.ep_squared
    with np.errstate(all='ignore'):
        x = np.float64(x) - dx

        # False northing is always zero
        fp = WGS84.footprint_latitude(np.float64(y) / k0)

        cos_fp, tan_fp = np.cos(fp), np.tan(fp)
        c1 = e2 * cos_fp ** 2
        t1 = tan_fp ** 2
        r1 = WGS84.meridional_radius(fp)
        n1 = WGS84.prime_vertical_radius(fp)

        d = x / (n1 * k0)

        q1 = n1 * tan_fp / r1
        q2 = d ** 2 / 2.0
        q3 = (5.0 + 3.0 * t1 + 10.0 * c1 - 4.0 * c1 ** 2 - 9.0 * e2) * d ** 4 / 24.0
        q4 = (
            61.0 + 90.0 * t1 + 298.0 * c1 + 45.0 * t1 ** 2 - 3.0 * c1 ** 2 - 252.0 * e2
        ) * d ** 6 / 720.0
        lat = fp - q1 * (q2 - q3 + q4)

        q5 = d
        q6 = (1.0 + 2.0 * t1 + c1) * d ** 3 / 6.0
        q7 = (
            5.0 - 2.0 * c1 + 28.0 * t1 - 3.0 * c1 ** 2 + 8.0 * e2 + 24.0 * t1 ** 2
        ) * d ** 5 / 120.0
        lng = np.radians(np.float64(center_longitude)) + (q5 - q6 + q7) / cos_fp

    return float(np.degrees(lng)), float(np.degrees(lat))


class TransverseMercator(LoggingMixin):
    """
    A transverse Mercator projection on the WGS84 ellipsoid, bound to a central
    meridian, scale factor and false easting. False northing is always zero.

    Args:
        center_longitude:
            The central meridian, in degrees

        k0: (float) (Default 1.0)
            The scale factor along the central meridian

        dx: (float) (Default 0.0)
            The false easting, in meters
    """

    def __init__(self, center_longitude: float, k0: float = 1.0, dx: float = 0.0):
        super().__init__()
        self._center_longitude = float(center_longitude)
        self._k0 = float(k0)
        self._dx = float(dx)

    @property
    def center_longitude(self) -> float:
        return self._center_longitude

    @property
    def k0(self) -> float:
        return self._k0

    @property
    def dx(self) -> float:
        return self._dx

    def __eq__(self, other):
        if not isinstance(other, TransverseMercator):
            return False

        return (
            self.center_longitude == other.center_longitude and
            self.k0 == other.k0 and
            self.dx == other.dx
        )

    def __hash__(self):
        return hash((self.center_longitude, self.k0, self.dx))

    def __repr__(self):
        return (
            f'<TransverseMercator(center_longitude={self.center_longitude}, '
            f'k0={self.k0}, dx={self.dx})>'
        )

    def project(self, longitude: float, latitude: float) -> Tuple[float, float]:
        """
        Convert a WGS84 longitude/latitude to planar (x, y) meters.

        Points more than a few degrees from the central meridian are still
        projected, but a warning is logged since the result is unreliable.
        """
        if abs(longitude - self.center_longitude) > VALID_HALF_WIDTH_DEGREES:
            self.warn_once(
                'Projecting a point more than %s degrees from the central meridian; '
                'projected coordinates will be inaccurate. (this warning will not repeat)',
                VALID_HALF_WIDTH_DEGREES
            )

        return forward_transform(longitude, latitude, self.center_longitude, self.k0, self.dx)

    def unproject(self, x: float, y: float) -> Tuple[float, float]:
        """Convert planar (x, y) meters to a WGS84 (longitude, latitude)"""
        return inverse_transform(x, y, self.center_longitude, self.k0, self.dx)
