"""Logging configuration for hexacli."""

from __future__ import annotations

import logging
import sys

_ROOT_LOGGER = "hexacli"
_HANDLER_NAME = "hexacli-stderr"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the ``hexacli`` logger to write to stderr.

    Safe to call more than once: each call replaces the handler it
    installed before with one bound to the current ``sys.stderr``.
    Unknown level names fall back to ``WARNING``.
    """
    root = logging.getLogger(_ROOT_LOGGER)
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    root.setLevel(numeric)

    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    root.propagate = False
    return root
