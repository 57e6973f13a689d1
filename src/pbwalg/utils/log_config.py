"""Logging setup shared by all :mod:`pbwalg` modules."""

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=logging.INFO, format_string=_FORMAT):
    """Attach a stdout handler to the ``pbwalg`` logger, once."""
    log = logging.getLogger("pbwalg")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(format_string))
        log.addHandler(handler)
    log.setLevel(level)
    return log


# Logger instance for other modules to import
logger = setup_logging()
