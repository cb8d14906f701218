from __future__ import annotations

import logging


class CompactFormatter(logging.Formatter):
    """Plain INFO lines; other levels are prefixed with their level name."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno == logging.INFO:
            return message
        return f"{record.levelname}: {message}"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``linkaudit`` logger for command-line use."""
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger("linkaudit")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(CompactFormatter())
    logger.addHandler(console_handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


__all__ = ["CompactFormatter", "setup_logging"]
