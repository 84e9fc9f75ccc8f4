"""Error reporting at the CLI boundary.

Verbosity is carried by each ``ErrorReporter`` instance; nothing here reads
process-wide flags. ``configure_logging`` only decides where log records go.
"""

from __future__ import annotations

import logging
import sys
from typing import NoReturn, TextIO

EXIT_FAILURE = 1

LOGGER_NAME = "oldest"
LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def configure_logging(stream: TextIO | None = None, level: int = logging.ERROR) -> logging.Logger:
    """Install one stream handler on the package logger and return the logger.

    Defaults to stderr. Calling again replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


class ErrorReporter:
    """Turn failures into a non-zero exit, logging the message when verbose."""

    def __init__(self, verbose: bool, logger: logging.Logger | None = None) -> None:
        self.verbose = verbose
        self._logger = logger if logger is not None else logging.getLogger(LOGGER_NAME)

    def fail(self, error: BaseException | str) -> NoReturn:
        if self.verbose:
            self._logger.error("%s", error)
        raise SystemExit(EXIT_FAILURE)


__all__ = [
    "EXIT_FAILURE",
    "LOGGER_NAME",
    "configure_logging",
    "ErrorReporter",
]
