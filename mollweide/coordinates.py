"""
Representation of a coordinate pair consumed and produced by projection transforms
"""

__all__ = ['CoordinatePair']

import math
from typing import Tuple, Union


class CoordinatePair:
    """
    A mutable pair of floats. Depending on the direction of a transform, the slots hold
    either (longitude, latitude) in radians or (easting, northing) in linear units.

    Transforms write their output back into the slots they read from, so the same object
    can be passed forward and then inverse.
    """

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
    ):
        self.x = float(x)
        self.y = float(y)

    def __eq__(self, other):
        if not isinstance(other, CoordinatePair):
            return False

        return self.x == other.x and self.y == other.y

    # Mutable; must not be used as a dict key
    __hash__ = None  # type: ignore

    def __repr__(self):
        return f'<CoordinatePair({self.x}, {self.y})>'

    @classmethod
    def from_degrees(cls, longitude: float, latitude: float):
        """
        Creates a geographic CoordinatePair from a longitude/latitude in decimal degrees.

        Args:
            longitude:
                The longitude, in degrees

            latitude:
                The latitude, in degrees

        Returns:
            CoordinatePair, in radians
        """
        return CoordinatePair(math.radians(float(longitude)), math.radians(float(latitude)))

    def copy(self) -> 'CoordinatePair':
        """Returns an independent pair holding the same values"""
        return CoordinatePair(self.x, self.y)

    def to_degrees(self) -> Tuple[float, float]:
        """
        Interprets the pair as (longitude, latitude) in radians and converts to degrees.

        Returns:
            Tuple of (longitude, latitude) in decimal degrees
        """
        return math.degrees(self.x), math.degrees(self.y)

    def to_float(self) -> Tuple[float, float]:
        """Converts the pair to a tuple of floats (x, y)"""
        return self.x, self.y
