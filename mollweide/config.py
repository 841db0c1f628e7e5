"""Projection parameters shared by the forward and inverse transforms"""

__all__ = ['ProjectionConfig']

import math

from pydantic import validate_call

from mollweide._const import WGS84_A


class ProjectionConfig:
    """
    The parameters of a projection session. Set once and read-only thereafter.

    Args:
        a:
            The ellipsoid semi-major axis (sphere radius), in linear units. Must be > 0.

        long0:
            The central meridian, in radians

        x0:
            The false easting, in the same units as `a`

        y0:
            The false northing, in the same units as `a`
    """

    @validate_call
    def __init__(
        self,
        a: float = WGS84_A,
        long0: float = 0.0,
        x0: float = 0.0,
        y0: float = 0.0,
    ):
        for name, value in (('a', a), ('long0', long0), ('x0', x0), ('y0', y0)):
            if not math.isfinite(value):
                raise ValueError(f'{name} must be finite, got {value}')

        if a <= 0:
            raise ValueError(f'semi-major axis must be greater than zero, got {a}')

        self._a = a
        self._long0 = long0
        self._x0 = x0
        self._y0 = y0

    def __eq__(self, other):
        if not isinstance(other, ProjectionConfig):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return (
            f'<ProjectionConfig(a={self._a}, long0={self._long0}, '
            f'x0={self._x0}, y0={self._y0})>'
        )

    @property
    def a(self) -> float:
        return self._a

    @property
    def long0(self) -> float:
        return self._long0

    @property
    def x0(self) -> float:
        return self._x0

    @property
    def y0(self) -> float:
        return self._y0

    def to_tuple(self):
        """Returns the parameters as (a, long0, x0, y0)"""
        return self._a, self._long0, self._x0, self._y0
