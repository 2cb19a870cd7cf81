"""
Logging setup for the decimal clock.

Everything logs under the 'decimal_clock' logger; the app attaches a console
handler and, when DECIMAL_CLOCK_LOG_FILE is set, a file handler as well.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Attach handlers to the package logger.

    Safe to call more than once: existing handlers are dropped first, so a
    second call replaces the output instead of doubling it.
    """
    logger = logging.getLogger("decimal_clock")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as 'debug' to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default
