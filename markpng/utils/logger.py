"""Package logger built on loguru.

Usage:
    from markpng.utils import logger, set_level

    logger.info("Rendering document...")
    set_level("DEBUG")  # show parser and layout details

The logger is configured on first use from LogSettings (LOG_LEVEL,
LOG_TO_FILE, LOG_FILE). Console output goes to stderr so PNG bytes written
to stdout stay clean. DEBUG switches the console to a format that also
shows file:function:line.
"""

import sys
from typing import Optional

from loguru import logger as _logger

from ..config import LogSettings

SIMPLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

DETAILED_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger.remove()

_configured = False
_console_sink: Optional[int] = None


def _add_console_sink(level: str) -> None:
    global _console_sink
    if _console_sink is not None:
        _logger.remove(_console_sink)
    _console_sink = _logger.add(
        sys.stderr,
        format=DETAILED_FORMAT if level == "DEBUG" else SIMPLE_FORMAT,
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )


def _setup_logger() -> None:
    global _configured
    if _configured:
        return
    _configured = True

    settings = LogSettings.from_env()
    _add_console_sink(settings.level)

    if settings.to_file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            settings.file,
            format=DETAILED_FORMAT,
            level=settings.level,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            backtrace=True,
            diagnose=True,
            encoding="utf-8",
        )
        _logger.info(f"File logging enabled: {settings.file}")


class _LazyLogger:
    """Configures the loguru logger on first attribute access"""

    def __getattr__(self, name):
        _setup_logger()
        return getattr(_logger, name)


logger = _LazyLogger()


def set_level(level: str) -> None:
    """
    Change the console log level at runtime

    The file sink, when enabled, keeps its configured level.

    Args:
        level: DEBUG, INFO, WARNING or ERROR
    """
    _setup_logger()
    _add_console_sink(level.upper())


__all__ = ["logger", "set_level"]
