import math

import numpy as np
import pytest

from tmzones.projection import TransverseMercator, forward_transform, inverse_transform
from tmzones.utils.mixins import LoggingMixin

from tests.functions import assert_lnglat_equal, assert_xy_equal


def test_forward_transform_central_meridian():
    assert forward_transform(121., 0., 121., 0.9999, 250_000.) == (250_000., 0.)
    assert forward_transform(-75., 0., -75., 0.9996, 500_000.) == (500_000., 0.)

    # On the central meridian, x is always the false easting
    x, _ = forward_transform(117., 45., 117., 1.0, 350_000.)
    assert x == pytest.approx(350_000.)


def test_forward_transform_known_point():
    # Documented TWD97 example
    x, y = forward_transform(120.982025, 23.973875, 121., 0.9999, 250_000.)
    assert x == pytest.approx(248170.8, abs=1.)
    assert y == pytest.approx(2652130.0, abs=1.)


def test_inverse_transform_known_point():
    assert_lnglat_equal(
        inverse_transform(248170.82572, 2652129.9773, 121., 0.9999, 250_000.),
        (120.982025, 23.973875),
        abs_tol=1e-6,
    )


def test_inverse_transform_central_meridian():
    assert_lnglat_equal(
        inverse_transform(500_000., 0., 123., 0.9996, 500_000.),
        (123., 0.)
    )


def test_round_trip():
    # (center, k0, dx, half of the zone width)
    params = [
        (121., 0.9999, 250_000., 1.),
        (120., 1.0, 350_000., 1.5),
        (123., 0.9996, 500_000., 3.),
        (-3., 0.9996, 500_000., 3.),
    ]
    for center, k0, dx, half_width in params:
        for lng in np.linspace(center - half_width, center + half_width, 7):
            for lat in np.linspace(-70., 70., 15):
                x, y = forward_transform(lng, lat, center, k0, dx)
                assert_lnglat_equal(
                    inverse_transform(x, y, center, k0, dx),
                    (lng, lat),
                    abs_tol=1e-6
                )


def test_monotonicity():
    # Easting increases moving east of the central meridian
    for lat in (0., 23.5, 45., 60.):
        xs = np.array([
            forward_transform(lng, lat, 121., 0.9999, 250_000.)[0]
            for lng in np.linspace(121., 124., 31)
        ])
        assert np.all(np.diff(xs) > 0)

    # Northing increases moving north
    for lng in (119., 121., 123.):
        ys = np.array([
            forward_transform(lng, lat, 121., 0.9999, 250_000.)[1]
            for lat in np.linspace(0., 80., 81)
        ])
        assert np.all(np.diff(ys) > 0)


def test_hemisphere_symmetry():
    for lng in (119.5, 121., 122.7):
        for lat in (0.5, 10., 23.973875, 45., 66.):
            north = forward_transform(lng, lat, 121., 0.9999, 250_000.)
            south = forward_transform(lng, -lat, 121., 0.9999, 250_000.)
            assert south[0] == pytest.approx(north[0])
            assert south[1] == pytest.approx(-north[1])


def test_false_easting_is_additive():
    x1, y1 = forward_transform(122., 24., 121., 0.9999, 0.)
    x2, y2 = forward_transform(122., 24., 121., 0.9999, 250_000.)
    assert x2 - x1 == pytest.approx(250_000.)
    assert y1 == y2


def test_transverse_mercator_init():
    tm = TransverseMercator(121, 0.9999, 250_000)
    assert tm.center_longitude == 121.
    assert tm.k0 == 0.9999
    assert tm.dx == 250_000.

    tm = TransverseMercator(121)
    assert tm.k0 == 1.
    assert tm.dx == 0.


def test_transverse_mercator_eq_hash():
    assert TransverseMercator(121, 0.9999, 250_000) == TransverseMercator(121., 0.9999, 250_000.)
    assert TransverseMercator(121, 0.9999, 250_000) != TransverseMercator(119, 0.9999, 250_000)
    assert TransverseMercator(121) != (121., 1., 0.)
    assert len({TransverseMercator(121), TransverseMercator(121.), TransverseMercator(123)}) == 2


def test_transverse_mercator_repr():
    assert repr(TransverseMercator(121, 0.9999, 250_000)) == (
        '<TransverseMercator(center_longitude=121.0, k0=0.9999, dx=250000.0)>'
    )


def test_transverse_mercator_project():
    tm = TransverseMercator(121., 0.9999, 250_000.)
    assert tm.project(120.982025, 23.973875) == forward_transform(
        120.982025, 23.973875, 121., 0.9999, 250_000.
    )
    assert tm.unproject(248170.82572, 2652129.9773) == inverse_transform(
        248170.82572, 2652129.9773, 121., 0.9999, 250_000.
    )
    assert_xy_equal(tm.project(*tm.unproject(300_000., 2_700_000.)), (300_000., 2_700_000.))


def test_transverse_mercator_out_of_range(caplog, monkeypatch):
    monkeypatch.setattr(LoggingMixin, 'WARNED_ONCE', set())
    tm = TransverseMercator(121., 0.9999, 250_000.)

    tm.project(122.5, 24.)
    assert 'inaccurate' not in caplog.text

    # Still projects, but warns
    result = tm.project(131.125, 24.)
    assert result == forward_transform(131.125, 24., 121., 0.9999, 250_000.)
    assert 'more than 4.0 degrees from the central meridian' in caplog.text

    # Other far-off points, from any projection, don't warn again
    tm.project(131.5, 25.)
    TransverseMercator(117.).project(100., 25.)
    assert caplog.text.count('more than 4.0 degrees') == 1
    assert len(LoggingMixin.WARNED_ONCE) == 1


def test_forward_transform_never_raises():
    # Overflowing powers of the meridian offset become inf rather than raising
    x, y = forward_transform(1e80, 23., 121., 0.9999, 250_000.)
    assert isinstance(x, float) and isinstance(y, float)
    assert not math.isfinite(y)

    # Pole
    x, y = forward_transform(121.5, 90., 121., 0.9999, 250_000.)
    assert isinstance(x, float) and isinstance(y, float)

    x, y = forward_transform(float('nan'), 23., 121., 0.9999, 250_000.)
    assert math.isnan(x) and math.isnan(y)


def test_inverse_transform_never_raises():
    # Zero scale factor divides by zero
    lng, lat = inverse_transform(250_000., 2_650_000., 121., 0., 250_000.)
    assert not math.isfinite(lng)
    assert not math.isfinite(lat)

    # Overflowing powers of the normalized easting
    lng, lat = inverse_transform(1e60, 2_650_000., 121., 0.9999, 250_000.)
    assert isinstance(lng, float)
    assert not math.isfinite(lat)

    lng, lat = inverse_transform(float('inf'), float('inf'), 121., 0.9999, 250_000.)
    assert math.isnan(lng) and math.isnan(lat)
