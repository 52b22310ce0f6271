"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.
"""

import sys
from pathlib import Path

from loguru import logger

_configured = False


def setup_logger(force: bool = False):
    """Configure logger handlers. Only configures once unless forced."""
    global _configured
    if _configured and not force:
        return

    from .config import get_settings

    settings = get_settings()
    log_level = settings.log_level
    if settings.debug and log_level == "INFO":
        log_level = "DEBUG"

    logger.remove()

    # Console handler with color. Diagnostics go to stderr like any error stream.
    logger.add(
        sys.stderr,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
    )

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # File logs always DEBUG to capture everything
        logger.add(
            log_path,
            rotation="10 MB",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
        )

    _configured = True


def format_exception_short(exc: BaseException) -> str:
    """Render an exception as 'ExcType: message' for single-line log records."""
    message = str(exc)
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"


# Configure logger on module import
setup_logger()

__all__ = ["logger", "setup_logger", "format_exception_short"]
