"""Logging utility for rt90"""

__all__ = ['LOGGER', 'clear_warnings', 'warn_once']

import logging

LOGGER = logging.getLogger('rt90')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNED = set()


def warn_once(msg: str, *args):
    """Logs a warning only once per (formatted) message"""
    text = msg % args if args else msg
    if text in _WARNED:
        return

    LOGGER.warning(text)
    _WARNED.add(text)


def clear_warnings():
    """Forgets previously issued warnings, so that they will be logged again"""
    _WARNED.clear()
