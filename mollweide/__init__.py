
from mollweide._version import __version__  # noqa: F401
from mollweide.utils.logging import LOGGER
from mollweide.config import ProjectionConfig
from mollweide.coordinates import CoordinatePair
from mollweide.support import ITERATION_ERROR, NumericSupport
from mollweide.projection import Mollweide


__all__ = [
    'CoordinatePair',
    'ITERATION_ERROR',
    'Mollweide',
    'NumericSupport',
    'ProjectionConfig',
    'LOGGER',
]
