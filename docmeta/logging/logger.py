import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging with structured format.

    Keyword context passed to the log methods is appended to the message
    as ``key=value`` pairs, e.g. ``Analyzed document words=120 file=a.txt``.
    """

    _logger: logging.Logger = logging.getLogger("docmeta")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Configure the logger with the specified level and a stream handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(cls._with_context(message, kwargs))

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(cls._with_context(message, kwargs))

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(cls._with_context(message, kwargs))

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        if cls._logger.isEnabledFor(logging.DEBUG):
            cls._logger.debug(cls._with_context(message, kwargs))

    @staticmethod
    def _with_context(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} {pairs}"
