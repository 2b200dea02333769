"""
Reference ellipsoid and the constants derived from it
"""

__all__ = ['Ellipsoid', 'WGS84']

from functools import cached_property
import math
from typing import Tuple

import numpy as np

from tmzones._const import WGS84_A, WGS84_B


class Ellipsoid:
    """
    An ellipsoid of revolution, defined by its semi-major and semi-minor axes
    (meters). Derived quantities are computed once and cached.
    """

    def __init__(self, a: float, b: float):
        self._a = float(a)
        self._b = float(b)

    @property
    def a(self) -> float:
        """Semi-major axis (meters)"""
        return self._a

    @property
    def b(self) -> float:
        """Semi-minor axis (meters)"""
        return self._b

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.b == other.b

    def __hash__(self):
        return hash((self.a, self.b))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, b={self.b})>'

    @cached_property
    def e_squared(self) -> float:
        """First eccentricity, squared"""
        return 1.0 - self.b ** 2 / self.a ** 2

    @cached_property
    def e(self) -> float:
        """First eccentricity"""
        return math.sqrt(self.e_squared)

    @cached_property
    def ep_squared(self) -> float:
        """Second eccentricity, squared. Equivalent to (e * a / b) ** 2"""
        return self.e_squared / (1.0 - self.e_squared)

    @cached_property
    def n(self) -> float:
        """Third flattening, (a - b) / (a + b)"""
        return (self.a - self.b) / (self.a + self.b)

    @cached_property
    def e1(self) -> float:
        """Eccentricity term used by the footprint latitude series"""
        root = math.sqrt(1.0 - self.e_squared)
        return (1.0 - root) / (1.0 + root)

    @cached_property
    def arc_coefficients(self) -> Tuple[float, float, float, float, float]:
        """
        Coefficients (A, B, C, D, E) of the meridional arc series

            S = A*lat - B*sin(2lat) + C*sin(4lat) - D*sin(6lat) + E*sin(8lat)

        Returns:
            5-tuple of floats, in meters
        """
        a, n = self.a, self.n
        n2, n3, n4, n5 = n ** 2, n ** 3, n ** 4, n ** 5
        return (
            a * (1.0 - n + (5.0 / 4.0) * (n2 - n3) + (81.0 / 64.0) * (n4 - n5)),
            (3.0 * a * n / 2.0) * (1.0 - n + (7.0 / 8.0) * (n2 - n3) + (55.0 / 64.0) * (n4 - n5)),
            (15.0 * a * n2 / 16.0) * (1.0 - n + (3.0 / 4.0) * (n2 - n3)),
            (35.0 * a * n3 / 48.0) * (1.0 - n + (11.0 / 16.0) * (n2 - n3)),
            (315.0 * a * n4 / 512.0) * (1.0 - n),
        )

    @cached_property
    def footprint_denominator(self) -> float:
        """a * (1 - e²/4 - 3e⁴/64 - 5e⁶/256), converts meridional arc to rectifying latitude"""
        e2 = self.e_squared
        return self.a * (1.0 - e2 / 4.0 - 3.0 * e2 ** 2 / 64.0 - 5.0 * e2 ** 3 / 256.0)

    @cached_property
    def footprint_coefficients(self) -> Tuple[float, float, float, float]:
        """Coefficients (j1, j2, j3, j4) of the footprint latitude series"""
        e1 = self.e1
        return (
            3.0 * e1 / 2.0 - 27.0 * e1 ** 3 / 32.0,
            21.0 * e1 ** 2 / 16.0 - 55.0 * e1 ** 4 / 32.0,
            151.0 * e1 ** 3 / 96.0,
            1097.0 * e1 ** 4 / 512.0,
        )

    def meridional_arc(self, latitude: float) -> float:
        """
        The distance along a meridian from the equator to a latitude.

        Args:
            latitude:
                The latitude, in radians

        Returns:
            (float) the arc length in meters
        """
        A, B, C, D, E = self.arc_coefficients  # pylint: disable=invalid-name
        return (
            A * latitude
            - B * np.sin(2.0 * latitude)
            + C * np.sin(4.0 * latitude)
            - D * np.sin(6.0 * latitude)
            + E * np.sin(8.0 * latitude)
        )

    def footprint_latitude(self, arc: float) -> float:
        """
        The latitude whose meridional arc equals the given length.

        Args:
            arc:
                The meridional arc, in meters

        Returns:
            (float) the latitude in radians
        """
        mu = arc / self.footprint_denominator
        j1, j2, j3, j4 = self.footprint_coefficients
        return (
            mu
            + j1 * np.sin(2.0 * mu)
            + j2 * np.sin(4.0 * mu)
            + j3 * np.sin(6.0 * mu)
            + j4 * np.sin(8.0 * mu)
        )

    def prime_vertical_radius(self, latitude: float) -> float:
        """Radius of curvature in the prime vertical at a latitude (radians)"""
        return self.a / np.sqrt(1.0 - self.e_squared * np.sin(latitude) ** 2)

    def meridional_radius(self, latitude: float) -> float:
        """Radius of curvature in the meridian at a latitude (radians)"""
        return (
            self.a * (1.0 - self.e_squared)
            / (1.0 - self.e_squared * np.sin(latitude) ** 2) ** 1.5
        )


WGS84 = Ellipsoid(WGS84_A, WGS84_B)
