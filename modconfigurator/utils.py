"""Shared helpers."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure package logging to stderr, honouring MODCONFIGURATOR_LOG_LEVEL."""
    level_name = (level or os.getenv("MODCONFIGURATOR_LOG_LEVEL") or "WARNING").upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    logger = logging.getLogger("modconfigurator")
    logger.setLevel(log_level)

    for handler in logger.handlers:
        if getattr(handler, "name", None) == "modconfigurator":
            # stderr may have been swapped since the handler was created
            handler.setStream(sys.stderr)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name("modconfigurator")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
