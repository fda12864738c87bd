"""Logging setup for the template renderers.

``configure_logging`` installs two handlers on the root logger: the console,
filtered at the requested level, and a size-rotated log file that records
everything down to DEBUG. Both share a formatter that can mask credit card
numbers before they reach either destination.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .formatters import CardNumberRedactingFormatter

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = Path("logs") / "template-renderers.log"
LOG_FILE_ENV_VAR = "TEMPLATE_RENDERERS_LOG_FILE"
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

_logging_configured = False


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    redact_card_numbers: bool = False,
) -> None:
    """Route log records to the console and a rotating log file.

    Calling it again replaces the handlers installed by the previous call,
    so the CLI can reconfigure after loading the configuration file.

    Args:
        level: Console threshold (DEBUG, INFO, WARNING, ERROR or CRITICAL).
            The log file always receives DEBUG and above.
        log_file: Log file location. Defaults to $TEMPLATE_RENDERERS_LOG_FILE,
            then to logs/template-renderers.log.
        redact_card_numbers: Mask Luhn-valid card numbers in every record

    Raises:
        ValueError: If ``level`` is not a standard level name
        RuntimeError: If the log directory cannot be created

    Example:
        >>> configure_logging(level="WARNING", redact_card_numbers=True)
    """
    global _logging_configured

    console_level = logging.getLevelName(level.upper())
    if not isinstance(console_level, int):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Use one of DEBUG, INFO, WARNING, ERROR or CRITICAL"
        )

    if log_file is None:
        log_file = Path(os.environ.get(LOG_FILE_ENV_VAR) or DEFAULT_LOG_FILE)

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(
            f"Cannot create log directory {log_file.parent}: {e}. "
            f"Pass --log-file with a writable location."
        ) from e

    formatter = CardNumberRedactingFormatter(
        fmt=DEFAULT_LOG_FORMAT, redact_card_numbers=redact_card_numbers
    )

    root_logger = logging.getLogger()
    if _logging_configured:
        root_logger.handlers.clear()
    # Handlers do the filtering; the root passes everything on
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(_console_handler(console_level, formatter))

    try:
        root_logger.addHandler(_file_handler(log_file, formatter))
    except OSError as e:
        root_logger.warning(
            f"Cannot open log file {log_file}: {e}. Logging to the console only."
        )

    _logging_configured = True


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_file: Path, formatter: logging.Formatter) -> logging.Handler:
    handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_LOG_FILE_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def get_logger(module_name: str) -> logging.Logger:
    """Return the logger for a module; pass ``__name__``."""
    return logging.getLogger(module_name)
