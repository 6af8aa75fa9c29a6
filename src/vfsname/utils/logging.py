import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "vfsname"


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Route the package logger to a rich stderr handler. Safe to call repeatedly."""
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(getattr(handler, "_vfsname_handler", False) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler._vfsname_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
