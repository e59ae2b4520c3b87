"""Logging configuration for the weekday calculator."""
import logging
import sys
from datetime import datetime
from pathlib import Path

from src.app.settings import LOG_LEVEL, LOGS_DIR


def setup_logging(level: str = LOG_LEVEL, logs_dir: str | None = LOGS_DIR, session_name: str = "dow"):
    """Setup console logging and, when logs_dir is set, a per-session log file."""

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers
    root_logger.handlers = []

    # Console handler on stderr, stdout is reserved for results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper(), logging.WARNING))
    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    log_file = None
    if logs_dir:
        Path(logs_dir).mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        # File handler - DEBUG level
        log_file = Path(logs_dir) / f"{session_name}_{timestamp}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    logging.debug(f"Logging initialized - level: {level}, file: {log_file}")

    return log_file
