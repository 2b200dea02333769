"""
Package-level logger for tmzones.

Warnings go to stderr as '[LEVEL] logger: message'. Raise or lower the level
with LOGGER.setLevel; class-level loggers (see utils.mixins) propagate here.
"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('tmzones')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    """
    Logs a warning on the package logger the first time it's seen, e.g. when a
    zone preset runs in its legacy mode. Repeats are dropped for the life of
    the process.
    """
    if warning in _WARNINGS:
        return

    LOGGER.warning(warning)
    _WARNINGS.add(warning)
