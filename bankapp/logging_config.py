"""Logging setup for the bank app."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stream handler on the root logger.

    Modules log through logging.getLogger(__name__), so this is
    the only place handlers and formats are decided.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
