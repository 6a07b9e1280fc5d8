import atexit
import logging

from rich.console import Console
from rich.logging import RichHandler

from utils.config import settings

_file_console = None


class CenteredFormatter(logging.Formatter):
    longest_name_length = 14  # Initial default width

    def __init__(self, fmt=None, datefmt=None, style="%", initial_width=14):
        super().__init__(fmt, datefmt, style)
        CenteredFormatter.longest_name_length = initial_width

    def format(self, record):
        CenteredFormatter.longest_name_length = max(
            CenteredFormatter.longest_name_length, len(record.name)
        )
        width = CenteredFormatter.longest_name_length
        record.name = record.name.center(width)
        return super().format(record)


def _console():
    """
    Console used by every handler. None means rich's default (stderr);
    with SHOP_LOG_FILE set, all loggers share one file-backed console so
    log lines do not draw over the running TUI.
    """
    global _file_console
    if settings.log_file is None:
        return None
    if _file_console is None:
        _file_console = Console(
            file=open(settings.log_file, "a", encoding="utf-8"), width=120
        )
        atexit.register(close_log_file)
    return _file_console


def close_log_file() -> None:
    """Close the file behind the shared log console, if one was opened."""
    global _file_console
    if _file_console is not None:
        _file_console.file.close()
        _file_console = None


def get_logger(name=None) -> logging.Logger:
    """
    Creates and returns a logger configured with RichHandler for rich output.
    """
    if name is None:
        name = "shop"
    logger = logging.getLogger(name)
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logger.setLevel(log_level)

    if not logger.handlers:
        formatter = CenteredFormatter("[%(name)s]  %(message)s")

        handler = RichHandler(
            console=_console(),
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        logger.addHandler(handler)

        logger.propagate = False
        logger.debug(f"Logger for '{name}' ready.")

    return logger
