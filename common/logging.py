"""
Console logging for the rendering scripts.

The figures, generation and plotting packages only emit records through
module loggers; `plot_shapes.py` and `plot_patterns.py` attach the handler.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """Send script output to stderr at the given level (a name like "debug" or a number).

    Leaves an already configured root logger untouched.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)


__all__ = ["setup_default_logging", "LOG_FORMAT"]
