import math

import pytest

from mollweide import ProjectionConfig
from mollweide._const import WGS84_A


def test_config_defaults():
    cfg = ProjectionConfig()
    assert cfg.a == WGS84_A
    assert cfg.long0 == 0.
    assert cfg.x0 == 0.
    assert cfg.y0 == 0.


def test_config_coercion():
    cfg = ProjectionConfig(a='1000', long0=1, x0='5.5', y0=-2)
    assert cfg.to_tuple() == (1000., 1., 5.5, -2.)
    assert isinstance(cfg.long0, float)


def test_config_validation():
    with pytest.raises(ValueError):
        ProjectionConfig(a=0.)

    with pytest.raises(ValueError):
        ProjectionConfig(a=-1.)

    with pytest.raises(ValueError):
        ProjectionConfig(x0=math.inf)

    with pytest.raises(ValueError):
        ProjectionConfig(long0=math.nan)

    with pytest.raises(ValueError):
        ProjectionConfig(a='not a number')


def test_config_read_only():
    cfg = ProjectionConfig(a=1.)
    with pytest.raises(AttributeError):
        cfg.a = 2.


def test_config_eq_hash():
    assert ProjectionConfig(a=1., x0=2.) == ProjectionConfig(a=1., x0=2.)
    assert ProjectionConfig(a=1., x0=2.) != ProjectionConfig(a=1., x0=3.)
    assert ProjectionConfig() != WGS84_A
    assert len({ProjectionConfig(a=1.), ProjectionConfig(a=1.), ProjectionConfig(a=2.)}) == 2


def test_config_repr():
    assert repr(ProjectionConfig(a=1.)) == '<ProjectionConfig(a=1.0, long0=0.0, x0=0.0, y0=0.0)>'
