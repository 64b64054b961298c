from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

PACKAGE_LOGGER = "onpdiff"
CONSOLE_FORMAT = "onpdiff: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s"


@contextmanager
def logging_to(
    level: str, log_file: Path | None = None
) -> Generator[logging.Logger]:
    """
    Sends the package's records to stderr, and to `log_file` when given,
    for the duration of one command. The handlers are removed and closed
    on exit and the logger level is restored, so repeated invocations in
    one process never stack handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [console]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        to_file = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        to_file.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(to_file)

    saved_level = logger.level
    logger.setLevel(level.upper())
    for handler in handlers:
        logger.addHandler(handler)

    try:
        yield logger
    finally:
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(saved_level)
