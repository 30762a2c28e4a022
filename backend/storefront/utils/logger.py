"""Logging setup for the storefront service."""

import logging
import sys
from typing import Optional, Union

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "storefront",
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Module loggers (``logging.getLogger(__name__)``) under ``storefront``
    propagate here. Calling it again only updates the level.
    """
    log = logging.getLogger(name)
    log.setLevel(level)
    if log.handlers:
        return log

    fmt = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log
