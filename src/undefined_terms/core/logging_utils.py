"""
Process-wide logging for undefined-terms.

Diagnostics always go to stderr: stdout is reserved for the extraction
result so it can be piped. Level and optional log file default to
UNDEFINED_TERMS_LOG_LEVEL / UNDEFINED_TERMS_LOG_FILE from core.config.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from undefined_terms.core import config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Client libraries that log every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure root logging for the CLI.

    Args:
        level: Logging level name (defaults to config.LOG_LEVEL)
        log_file: Extra file to log to (defaults to config.LOG_FILE)
    """
    level_name = (level or config.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    log_file = log_file if log_file is not None else config.LOG_FILE
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Request lines from the HTTP stack only show up when debugging
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING)

    if not isinstance(getattr(logging, level_name, None), int):
        root_logger.warning(f"Unknown log level {level_name!r}, using INFO")
    if log_file:
        root_logger.info(f"Logging to file: {log_file}")
