"""Logging setup and utilities."""

import logging
import os
import sys
from dataclasses import dataclass
from typing import TextIO

__all__ = [
    "LogObjects",
    "LogSettings",
    "get_logger",
    "init_logger",
    "should_colorize",
]

_ESC = "\x1b["
RESET = f"{_ESC}0m"


class LogStyles:
    """ANSI codes for log levels."""

    WARNING = "33;2"
    ERROR = "31;2"
    CRITICAL = "31;1"


@dataclass(frozen=True)
class LogSettings:
    """Logging options, decided once at startup.

    Attributes:
        debug: Use the DEBUG level and the detailed format
        filename: Also log to this file
    """

    debug: bool = False
    filename: str | None = None


class LogObjects:
    """Reusable objects for loggers."""

    handlers: list[logging.Handler] = []
    level: int = logging.INFO


def should_colorize(stream: TextIO | None = None) -> bool:
    """Determine if ANSI colors should be used for the given stream.

    Respects:
    - NO_COLOR environment variable (disables colors)
    - FORCE_COLOR environment variable (forces colors)
    - TTY detection (disables colors when piping)

    Args:
        stream: The output stream to check. Defaults to sys.stderr.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


class ScreenLogFormatter(logging.Formatter):
    """A custom formatter, adding colors based on log level."""

    SHORT_FORMAT = r"%(message)s"
    DEBUG_FORMAT = r"%(name)10s - %(message)s // %(filename)s:%(lineno)d"

    def __init__(self, debug: bool = False, colors: bool = False) -> None:
        super().__init__()
        fmt = self.DEBUG_FORMAT if debug else self.SHORT_FORMAT

        def _styled(codes: str) -> logging.Formatter:
            if not colors:
                return logging.Formatter(fmt)
            return logging.Formatter(f"{_ESC}{codes}m{fmt}{RESET}")

        self._formatters = {
            logging.DEBUG: logging.Formatter(fmt),
            logging.INFO: logging.Formatter(fmt),
            logging.WARNING: _styled(LogStyles.WARNING),
            logging.ERROR: _styled(LogStyles.ERROR),
            logging.CRITICAL: _styled(LogStyles.CRITICAL),
        }

    def format(self, record: logging.LogRecord) -> str:
        return self._formatters.get(record.levelno, self._formatters[logging.INFO]).format(record)


def init_logger(settings: LogSettings) -> None:
    """Initialize the logging system.

    Must run before `get_logger` so that every logger gets the handlers.

    Args:
        settings: Verbosity and optional log file
    """
    LogObjects.level = logging.DEBUG if settings.debug else logging.INFO
    LogObjects.handlers.clear()
    if settings.filename:
        file_handler = logging.FileHandler(settings.filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter(debug=settings.debug, colors=should_colorize()))
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "rdrop", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (auto if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(LogObjects.level if level is None else level)
    logger.propagate = False
    # handlers from an earlier init_logger() call are dropped
    for handler in list(logger.handlers):
        if handler not in LogObjects.handlers:
            logger.removeHandler(handler)
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.debug('Logger "%s" initialized', name)
    return logger
