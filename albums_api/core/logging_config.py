"""Root logger setup shared by the app factory and the CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger, once.

    Repeated calls (tests, several ``create_app`` calls) only adjust the
    level so handlers are never duplicated.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
