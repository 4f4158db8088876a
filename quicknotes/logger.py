"""Application logging utilities."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", log_file: str = "") -> logging.Logger:
    """Configure the ``quicknotes`` logger once; later calls return it unchanged."""
    logger = logging.getLogger("quicknotes")
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        path = Path(log_file).expanduser()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                path,
                maxBytes=1_048_576,
                backupCount=5,
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning("Cannot write log file %s (%s); logging to the console only", path, e)
            return logger
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.info("Logger initialised; logs available at %s", handler.baseFilename)

    return logger
