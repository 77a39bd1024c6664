"""Logging setup for the command-line entry point.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import sys

from pms.infrastructure.settings import Settings

_HANDLER_NAME = "pms-console"


def setup_logging(settings: Settings, level: str | None = None) -> None:
    """Attach a single stderr handler to the ``pms`` logger."""
    resolved = (level or settings.log_level).upper()
    numeric = logging.getLevelName(resolved)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {resolved}")

    root = logging.getLogger("pms")
    root.setLevel(numeric)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(numeric)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(numeric)
    handler.setFormatter(
        logging.Formatter(settings.log_format, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root.addHandler(handler)
