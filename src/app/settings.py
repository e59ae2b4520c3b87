"""Application settings and configuration."""
import os


def int_from_env(name: str, default: int, minimum: int = 1) -> int:
    """Integer setting from the environment; default when unset, not a number or below minimum."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


# Logging
DEBUG_MODE = os.getenv("DEBUG", "0") == "1"
LOG_LEVEL = os.getenv("DOW_LOG_LEVEL", "DEBUG" if DEBUG_MODE else "WARNING").upper()
LOGS_DIR = os.getenv("DOW_LOG_DIR") or None  # None → no file logging

# Interactive input
INPUT_PROMPT = "Enter Birthday (yyyy-mm-dd)"
MAX_PROMPT_ATTEMPTS = int_from_env("DOW_MAX_PROMPT_ATTEMPTS", 3)

# Exit codes
EXIT_OK = 0
EXIT_SELF_CHECK_FAILED = 1
EXIT_INVALID_INPUT = 2
