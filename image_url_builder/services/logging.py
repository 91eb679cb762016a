"""Structured logging on top of the standard logging module"""
import logging
from typing import Any, Optional

from image_url_builder.core.enums import LogLevel


class StructuredLogger:
    """
    Logger that appends keyword context as key=value pairs.

    Does not configure handlers: output goes wherever the host application
    routes the named logger.
    """

    def __init__(self, name: str = "image_url_builder", logger: Optional[logging.Logger] = None):
        """
        Initialize structured logger

        Args:
            name: Name of the underlying standard library logger
            logger: Existing logger to wrap instead of looking one up by name
        """
        self._logger = logger or logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    @staticmethod
    def _format(message: str, context: dict) -> str:
        if not context:
            return message
        details = " ".join(f"{key}={value!r}" for key, value in context.items())
        return f"{message} | {details}"

    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        self._logger.log(
            logging.getLevelName(level.value.upper()),
            self._format(message, context),
        )

    def debug(self, message: str, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(LogLevel.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(LogLevel.ERROR, message, **context)
