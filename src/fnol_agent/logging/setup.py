"""loguru configuration: pretty console lines for development, JSON lines otherwise."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from omegaconf import DictConfig

# Libraries that log through the stdlib and are too chatty below WARNING.
QUIET_LOGGERS = ("PyPDF2", "multipart", "uvicorn.access", "httpx", "httpcore")

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> "
    "<level>{message}</level>"
)


class StdlibBridge(logging.Handler):
    """Forward stdlib ``logging`` records (uvicorn, PyPDF2) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(cfg: DictConfig) -> None:
    """Replace loguru's default sink according to the ``logging`` config section.

    Parameters
    ----------
    cfg:
        Section with ``level`` (e.g. ``"INFO"``), ``colored`` (bool) and
        ``format`` (``"pretty"`` or ``"structured"``).
    """
    level = str(cfg.get("level", "INFO")).upper()
    structured = cfg.get("format", "pretty") == "structured"

    logger.remove()
    if structured:
        logger.add(sys.stderr, level=level, serialize=True, colorize=False)
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=_CONSOLE_FORMAT,
            colorize=bool(cfg.get("colored", True)),
        )

    logging.basicConfig(handlers=[StdlibBridge()], level=0, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug(
        "Logging ready (level={level}, structured={structured})",
        level=level,
        structured=structured,
    )
