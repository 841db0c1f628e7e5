import math

import pytest

from mollweide.utils.functions import adjust_lon


def test_adjust_lon():
    assert adjust_lon(0.) == 0.
    assert adjust_lon(1.) == 1.
    assert adjust_lon(-math.pi) == -math.pi
    assert adjust_lon(math.pi) == math.pi

    assert adjust_lon(7.) == pytest.approx(7. - 2 * math.pi)
    assert adjust_lon(-4.) == pytest.approx(-4. + 2 * math.pi)
    assert adjust_lon(20.) == pytest.approx(20. - 6 * math.pi)
    assert abs(adjust_lon(3 * math.pi)) == pytest.approx(math.pi)

    for angle in (-100., -7.5, 4., 55.):
        assert -math.pi <= adjust_lon(angle) <= math.pi


def test_adjust_lon_non_finite():
    assert math.isnan(adjust_lon(math.nan))
    assert adjust_lon(math.inf) == math.inf


def test_adjust_lon_large_values():
    for angle in (1e20, -1e20, 1e300, -1e300, 2. ** 60):
        assert -math.pi <= adjust_lon(angle) <= math.pi
