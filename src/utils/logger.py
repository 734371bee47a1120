import logging
import os

from rich.logging import RichHandler

from store.config import LOG_FILE


class CenteredFormatter(logging.Formatter):
    """Pads logger names to the widest one seen so far so messages line up."""

    longest_name_length = 12

    def __init__(self, fmt=None, datefmt=None, style="%", initial_width=12):
        super().__init__(fmt, datefmt, style)
        CenteredFormatter.longest_name_length = initial_width

    def format(self, record):
        CenteredFormatter.longest_name_length = max(
            CenteredFormatter.longest_name_length, len(record.name)
        )
        record.name = record.name.center(CenteredFormatter.longest_name_length)
        return super().format(record)


def _log_level() -> int:
    return logging.DEBUG if os.getenv("DEBUG") else logging.INFO


def get_logger(name=None) -> logging.Logger:
    """
    Returns a logger writing through RichHandler, and additionally to
    STOREFRONT_LOG_FILE when set (the TUI owns the terminal while running).
    """
    logger = logging.getLogger(name or "storefront")
    level = _log_level()
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        console_handler.setFormatter(CenteredFormatter("[%(name)s]  %(message)s"))
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

        if LOG_FILE:
            file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)-7s [%(name)s] %(message)s")
            )
            file_handler.setLevel(level)
            logger.addHandler(file_handler)

        logger.propagate = False
        logger.debug(f"Logger for '{logger.name}' initialized.")

    return logger
