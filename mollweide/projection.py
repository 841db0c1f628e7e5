"""
The Mollweide pseudocylindrical equal-area projection.

References:
    Snyder, John P., "Map Projections--A Working Manual", U.S. Geological Survey
    Professional Paper 1395, 1987.
"""

__all__ = ['Mollweide']

import math
from typing import Optional, Tuple

import numpy as np

from mollweide._const import (
    ARG_LIMIT, EASTING_FACTOR, HALF_PI, MAX_ITER, NORTHING_FACTOR, PI
)
from mollweide.config import ProjectionConfig
from mollweide.coordinates import CoordinatePair
from mollweide.support import ITERATION_ERROR, NumericSupport
from mollweide.utils.mixins import LoggingMixin


class Mollweide(LoggingMixin):
    """
    Forward and inverse Mollweide transforms on a sphere of radius `config.a`.

    Args:
        config:
            The projection parameters. If omitted, one is built from `params`.

        support:
            The numeric collaborators (longitude normalization, tolerance, error sink).
            Defaults to a NumericSupport which logs errors.

    Keyword Args:
        a, long0, x0, y0:
            Passed to ProjectionConfig when no config is supplied
    """

    def __init__(
        self,
        config: Optional[ProjectionConfig] = None,
        support: Optional[NumericSupport] = None,
        **params,
    ):
        super().__init__()
        self.support = support or NumericSupport()
        self.config: ProjectionConfig
        self.init(config, **params)

    def __repr__(self):
        return f'<Mollweide({self.config!r})>'

    def init(self, config: Optional[ProjectionConfig] = None, **params) -> None:
        """
        Sets the projection parameters. No derived state is computed.

        Args:
            config:
                The projection parameters

        Keyword Args:
            a, long0, x0, y0:
                Passed to ProjectionConfig when no config is supplied
        """
        if config is None:
            config = ProjectionConfig(**params)
        elif params:
            raise ValueError('Supply either a ProjectionConfig or parameters, not both')

        self.config = config

    def solve_theta(self, lat: float) -> Tuple[float, bool]:
        """
        Solves `theta + sin(theta) = pi * sin(lat)` using Newton-Raphson, where theta is
        twice the parametric angle.

        If the iteration fails to converge, the error is reported through the numeric
        support and the last computed theta is returned anyway.

        Args:
            lat:
                The latitude, in radians

        Returns:
            Tuple of (theta, whether the iteration converged)
        """
        epsilon = self.support.epsilon
        theta = lat
        con = PI * math.sin(lat)

        converged = False
        for _ in range(MAX_ITER):
            denominator = 1 + math.cos(theta)
            if denominator == 0:
                # Step is undefined where the derivative vanishes
                break

            delta_theta = -(theta + math.sin(theta) - con) / denominator
            theta += delta_theta
            if abs(delta_theta) < epsilon:
                converged = True
                break

        if not converged:
            self.support.report_error(ITERATION_ERROR)

        return theta, converged

    def forward(self, pair: CoordinatePair) -> CoordinatePair:
        """
        Projects a geographic pair to easting/northing, in place.

        Args:
            pair:
                A CoordinatePair of (longitude, latitude), in radians

        Returns:
            The same CoordinatePair, now holding (easting, northing)
        """
        lon, lat = pair.x, pair.y
        if abs(lat) > HALF_PI:
            self.warn_once(
                'Latitude outside of [-pi/2, pi/2] supplied; projected values are undefined. '
                '(this warning will not repeat)'
            )

        a, x0, y0 = self.config.a, self.config.x0, self.config.y0
        delta_lon = self.support.adjust_lon(lon - self.config.long0)

        theta, _ = self.solve_theta(lat)
        theta /= 2

        # At the poles cos(theta) is not precisely zero; the meridian collapses to a point
        if HALF_PI - abs(lat) < self.support.epsilon:
            delta_lon = 0.

        pair.x = EASTING_FACTOR * a * delta_lon * math.cos(theta) + x0
        pair.y = NORTHING_FACTOR * a * math.sin(theta) + y0
        return pair

    def inverse(self, pair: CoordinatePair) -> CoordinatePair:
        """
        Unprojects an easting/northing pair to geographic coordinates, in place.

        Northings beyond the projection's extent are clamped rather than rejected.

        Args:
            pair:
                A CoordinatePair of (easting, northing), in the units of `config.a`

        Returns:
            The same CoordinatePair, now holding (longitude, latitude) in radians
        """
        a = self.config.a
        x = pair.x - self.config.x0
        y = pair.y - self.config.y0

        # Keeps cos(theta) > 0 below. Clamps to the positive bound regardless of sign.
        arg = y / (NORTHING_FACTOR * a)
        if abs(arg) > ARG_LIMIT:
            arg = ARG_LIMIT

        theta = math.asin(arg)
        lon = self.support.adjust_lon(
            self.config.long0 + x / (EASTING_FACTOR * a * math.cos(theta))
        )
        if lon < -PI:
            lon = -PI
        if lon > PI:
            lon = PI

        arg = (2 * theta + math.sin(2 * theta)) / PI
        if abs(arg) > 1:
            arg = math.copysign(1., arg)

        pair.x = lon
        pair.y = math.asin(arg)
        return pair

    def forward_degrees(self, longitude: float, latitude: float) -> CoordinatePair:
        """
        Projects a longitude/latitude given in decimal degrees.

        Returns:
            A new CoordinatePair of (easting, northing)
        """
        return self.forward(CoordinatePair.from_degrees(longitude, latitude))

    def inverse_degrees(self, easting: float, northing: float) -> Tuple[float, float]:
        """
        Unprojects an easting/northing to a longitude/latitude in decimal degrees.

        Returns:
            Tuple of (longitude, latitude), in degrees
        """
        return self.inverse(CoordinatePair(easting, northing)).to_degrees()

    def forward_many(self, points) -> np.ndarray:
        """
        Projects an array of (longitude, latitude) rows, in radians. The input is not
        modified.

        Args:
            points:
                An array-like of shape (N, 2)

        Returns:
            A numpy array of shape (N, 2) holding (easting, northing) rows
        """
        return self._apply_many(self.forward, points)

    def inverse_many(self, points) -> np.ndarray:
        """
        Unprojects an array of (easting, northing) rows. The input is not modified.

        Args:
            points:
                An array-like of shape (N, 2)

        Returns:
            A numpy array of shape (N, 2) holding (longitude, latitude) rows in radians
        """
        return self._apply_many(self.inverse, points)

    @staticmethod
    def _apply_many(transform, points) -> np.ndarray:
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            return np.empty((0, 2))

        arr = np.atleast_2d(arr)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f'Expected an array of shape (N, 2), got {arr.shape}')

        return np.array(
            [transform(CoordinatePair(x, y)).to_float() for x, y in arr],
            dtype=float
        )
