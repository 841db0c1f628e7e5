"""
Numeric support consumed by projection transforms: longitude normalization, the
convergence tolerance and a non-fatal error sink.
"""

__all__ = ['ITERATION_ERROR', 'NumericSupport']

from typing import Callable, Optional

from mollweide._const import EPSLN
from mollweide.utils.functions import adjust_lon as _adjust_lon
from mollweide.utils.mixins import LoggingMixin

ITERATION_ERROR = 'moll:Fwd:IterationError'


class NumericSupport(LoggingMixin):
    """
    Bundles the numeric collaborators of a transform so they can be replaced per
    projection instance rather than read from module state.

    Args:
        epsilon:
            The tolerance below which an iterative solution is considered converged

        adjust_lon:
            A callable normalizing a longitude in radians into [-pi, pi]

        error_sink:
            A callable receiving error codes. Defaults to logging a warning. Reporting an
            error never interrupts the calling transform.
    """

    def __init__(
        self,
        epsilon: float = EPSLN,
        adjust_lon: Callable[[float], float] = _adjust_lon,
        error_sink: Optional[Callable[[str], None]] = None,
    ):
        super().__init__()
        if error_sink is not None and not callable(error_sink):
            raise TypeError(f'error_sink must be callable, not {type(error_sink)}')

        self.epsilon = epsilon
        self.adjust_lon = adjust_lon
        self._error_sink = error_sink

    def report_error(self, code: str) -> None:
        """Reports a non-fatal error code"""
        if self._error_sink is None:
            self.logger.warning('%s', code)
            return

        self._error_sink(code)
