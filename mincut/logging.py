"""Logging setup shared by every mincut module.

All loggers live under the ``mincut`` namespace. The namespace logger gets one
stdout handler the first time this module is imported; module loggers carry no
handlers and follow its level, which the CLI switches with ``--verbose`` and
``--quiet``.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_NAMESPACE = "mincut"
_configured = False


def _configure_namespace() -> logging.Logger:
    global _configured

    namespace = logging.getLogger(_NAMESPACE)
    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        namespace.handlers.clear()
        namespace.addHandler(handler)
        namespace.setLevel(logging.INFO)
        # Records still reach the root logger, where pytest's caplog listens
        namespace.propagate = True
        _configured = True
    return namespace


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    _configure_namespace()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the mincut namespace logger and its handler.

    Args:
        level: Logging level, e.g. ``logging.DEBUG`` or ``logging.WARNING``.
    """
    namespace = _configure_namespace()
    namespace.setLevel(level)
    for handler in namespace.handlers:
        handler.setLevel(level)


_configure_namespace()
