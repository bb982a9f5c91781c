"""Package logger for N2H, printed to stdout."""

import logging
import sys

LOG_FORMAT = "[ %(levelname)-8s ] %(message)s"

logger = logging.getLogger("n2h")
logger.setLevel(logging.INFO)
logger.propagate = False

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)


def set_verbose(verbose: bool) -> None:
    """DEBUG when verbose, INFO otherwise."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
