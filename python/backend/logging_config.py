"""Logging setup shared by the backend and the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGING_CONFIGURED = False


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr ``RichHandler`` to the ``backend`` logger once.

    Later calls only adjust the level.
    """
    global _LOGGING_CONFIGURED

    logger = logging.getLogger("backend")
    if not _LOGGING_CONFIGURED:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        _LOGGING_CONFIGURED = True

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
