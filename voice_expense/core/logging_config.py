"""
Logging configuration for the voice expense service.
"""
import logging
import sys

from voice_expense.core.config import get_settings


def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger with a single stdout handler.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL setting.
    """
    level = level or get_settings().log_level
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # httpx logs full request URLs at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
