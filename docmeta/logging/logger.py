import logging
import sys
from typing import ClassVar, TextIO

_CONTEXT_ATTR = "docmeta_context"


class _ContextFormatter(logging.Formatter):
    """Appends key=value context passed through Log.* keyword arguments."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context: dict[str, object] = getattr(record, _CONTEXT_ATTR, {})
        if not context:
            return message
        rendered = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{rendered}]"


class Log:
    """Centralized logging with structured format.

    Keyword arguments given to the level methods become context fields,
    e.g. ``Log.info("Uploaded", document="a.pdf")`` renders as
    ``... Uploaded [document=a.pdf]``.
    """

    FORMAT: ClassVar[str] = "%(asctime)s [%(levelname)s] %(message)s"

    _logger: logging.Logger = logging.getLogger("docmeta")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Configure the logger with the specified level and a stream handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(_ContextFormatter(cls.FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra={_CONTEXT_ATTR: kwargs})

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra={_CONTEXT_ATTR: kwargs})

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error message with the active exception's traceback."""
        cls._logger.exception(message, extra={_CONTEXT_ATTR: kwargs})

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra={_CONTEXT_ATTR: kwargs})

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra={_CONTEXT_ATTR: kwargs})
