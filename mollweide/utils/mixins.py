"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional, Set


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives instances a logger named `<module>.<class>[.<logstr>]`, which places the
    loggers of package classes under the `mollweide` logger, and advisory warnings that
    are only emitted once per process.
    """
    logger: logging.Logger

    WARNED_ONCE: Set[str] = set()

    def __init__(self, logstr: Optional[str] = None):
        _class = type(self)
        name = f'{_class.__module__}.{_class.__qualname__}'
        if logstr:
            name = f'{name}.{logstr}'

        self.logger = logging.getLogger(name)

    @classmethod
    def reset_warnings(cls) -> None:
        """Forgets which warnings have been emitted, so they may be logged again"""
        LoggingMixin.WARNED_ONCE.clear()

    def warn_once(self, msg: str, *args, **kwargs) -> None:
        """Logs a warning only once per message, across all classes"""
        if msg in LoggingMixin.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        LoggingMixin.WARNED_ONCE.add(msg)
