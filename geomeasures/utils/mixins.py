"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives a class a logger nested under the package logger, named after the
    class (and an optional suffix), plus a warn_once helper shared by every
    subclass.
    """
    logger: logging.Logger

    WARNED_ONCE: set = set()

    def __init__(self, logstr: Optional[str] = None):
        classname = self.__class__.__name__
        if logstr:
            classname += f'.{logstr}'

        self.logger = logging.getLogger(f'geomeasures.{classname}')

    @classmethod
    def _set_warned_once(cls, msg):
        """Appends message to classvar"""
        cls.WARNED_ONCE.add(msg)

    def warn_once(self, msg, *args, **kwargs):
        """Logs a warning only once per message"""
        if msg in self.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        self._set_warned_once(msg)
