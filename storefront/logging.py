"""
Centralized logging configuration for the storefront.

Usage:
    from storefront.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Operation completed")
    logger.error("Failed operation", exc_info=True)

Levels and format come from Settings (LOG_LEVEL, APP_ENV, including values
from .env). The import-time setup uses the process settings; create_app
calls configure_logging again with the settings the app was built with.
"""

import logging
import sys
from functools import cache

from storefront.config import Settings, get_settings

# Default format for logs
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

HANDLER_NAME = "storefront"


def _level(settings: Settings) -> int:
    level = getattr(logging, settings.log_level, None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings) -> None:
    """
    Apply level and format from settings to the root logger.

    Our stdout handler is added only when nobody else (a test runner, an
    ASGI server) has installed root handlers; when it exists it is
    updated in place.
    """
    root = logging.getLogger()
    level = _level(settings)
    root.setLevel(level)
    logging.getLogger("storefront").setLevel(level)

    handler = next((h for h in root.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        if root.handlers:
            return
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if settings.is_production else LOG_FORMAT))

    # Request logs from the test client are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


configure_logging(get_settings())


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Escape characters that could forge log lines (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Sanitize ID for safe logging (first 8 chars, injection characters escaped).

    Item ids and session ids arrive from HTTP clients, so they are never
    logged verbatim.
    """
    if not id_value:
        return "N/A"
    safe_value = _escape_log_injection(str(id_value))
    return safe_value[:8] if len(safe_value) > 8 else safe_value


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
]
