"""Logging configuration for tasktrack."""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "tasktrack"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> logging.Logger:
    """Attach handlers to the ``tasktrack`` logger.

    Nothing is attached when ``verbose`` is 0 and no log file is given, so
    library users keep control of logging. A log file without -v records
    INFO and above.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to append logs to
    """
    logger = logging.getLogger(LOGGER_NAME)
    if verbose == 0 and log_file is None:
        return logger

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # Re-running setup (tests, repeated CLI calls) must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging configured (level=%s)", logging.getLevelName(level))
    return logger
