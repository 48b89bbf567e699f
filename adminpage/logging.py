"""
Logging for the admin page adapter.

All loggers live under the ``adminpage`` namespace. Console output goes to
stderr because the CLI prints rendered HTML and JSON on stdout.
"""

import copy
import logging
import sys
from types import TracebackType
from typing import Optional, TextIO

_RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[2m\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1m\033[41m\033[37m",
}

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno) if self.use_colors else None
        if color is None:
            return super().format(record)
        # Other handlers format the same record; color a copy only.
        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{_RESET}"
        return super().format(colored)


def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the ``adminpage`` logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        stream: Console stream; defaults to stderr. Colors are used only
            when it is a terminal.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    stream = stream if stream is not None else sys.stderr

    package_logger = logging.getLogger("adminpage")
    package_logger.setLevel(numeric_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(numeric_level)
    if numeric_level <= logging.DEBUG:
        console_formatter = ColoredFormatter(
            DEBUG_CONSOLE_FORMAT, datefmt="%H:%M:%S", use_colors=_stream_is_tty(stream)
        )
    else:
        console_formatter = ColoredFormatter(CONSOLE_FORMAT, use_colors=_stream_is_tty(stream))
    console_handler.setFormatter(console_formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``adminpage`` namespace."""
    if not name.startswith("adminpage"):
        name = f"adminpage.{name}"
    return logging.getLogger(name)


def format_exception_summary(
    error: BaseException,
    *,
    max_length: int = 180,
) -> str:
    """
    Build a one-line summary of an exception for CLI error output.

    Parser errors span several lines (YAML marks the offending column on its
    own line); whitespace runs are collapsed so the summary stays on one.
    """
    exception_name = error.__class__.__name__
    detail = " ".join(str(error or "").split())
    summary = exception_name if not detail else f"{exception_name}: {detail}"
    if max_length > 3 and len(summary) > max_length:
        return summary[: max_length - 3].rstrip() + "..."
    return summary


def exception_exc_info(
    error: BaseException,
) -> tuple[type[BaseException], BaseException, TracebackType | None]:
    """Build an ``exc_info`` tuple for logging an exception caught earlier."""
    return (type(error), error, error.__traceback__)


def configure_logging_from_args(verbose: bool = False, log_level: Optional[str] = None,
                                log_file: Optional[str] = None) -> None:
    """
    Configure logging from the CLI flags.

    An explicit ``log_level`` wins over ``verbose`` (DEBUG); the default is
    WARNING so that normal runs print nothing besides their output.
    """
    if log_level:
        level = log_level.upper()
    elif verbose:
        level = "DEBUG"
    else:
        level = "WARNING"

    setup_logging(level=level, log_file=log_file)
