import logging
import sys


class _DiagnosticFormatter(logging.Formatter):
    """Timestamped format; separator records render as a bare blank line."""

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "separator", False):
            return ""
        return super().format(record)


class Log:
    """Diagnostic channel for symbolication progress and failures.

    Records go to stderr; stdout carries only the patched report.
    """

    _logger: logging.Logger = logging.getLogger("symbolicator")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stderr handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                _DiagnosticFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def separator(cls) -> None:
        """Emit a blank line between per-frame blocks in verbose mode."""
        cls._logger.info("", extra={"separator": True})

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
