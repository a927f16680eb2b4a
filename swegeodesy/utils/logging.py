"""Logging utility for swegeodesy"""

__all__ = ['LOGGER', 'clear_warnings', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('swegeodesy')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS: Set[str] = set()


def warn_once(warning: str):
    """Logs a warning the first time a given message is seen in this process"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def clear_warnings():
    """Forget previously emitted warnings so they will be logged again"""
    _WARNINGS.clear()
