"""
Logging setup for command-line entry points.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by whichever runner wants console output.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level):
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level="INFO"):
    """Route shapegen diagnostics to the console at *level*.

    A console handler is installed only when the root logger has none.  If
    the host application already configured logging, its handlers are kept
    and only the root level is changed, so ``--log-level DEBUG`` still
    surfaces per-shape messages.
    """
    lvl = _resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(lvl)
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
