"""Logging configuration for the catalog store."""

import logging
import logging.handlers
import sys
from pathlib import Path

from .config import LOGS_DIR, LOG_LEVEL, LOG_TO_FILE, LOG_TO_CONSOLE


class _DetailsFilter(logging.Filter):
    """Give every record a ``details`` attribute so the error formatter never fails."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "details"):
            record.details = {}
        return True


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_to_console: bool = True,
    log_dir: str = LOGS_DIR,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> None:
    """Setup package logging with optional file rotation and console output."""

    package_logger = logging.getLogger("catalog_store")
    package_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear existing handlers
    package_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if log_to_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=path / "catalog_store.log",
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

        # Errors only, with the structured details attached by error_handler
        error_handler = logging.handlers.RotatingFileHandler(
            filename=path / "errors.log",
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.addFilter(_DetailsFilter())
        error_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s\n'
                'Details: %(details)s\n'
                '---\n',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        package_logger.addHandler(error_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(name)


# Initialize logging when module is imported
setup_logging(
    log_level=LOG_LEVEL,
    log_to_file=LOG_TO_FILE,
    log_to_console=LOG_TO_CONSOLE
)
