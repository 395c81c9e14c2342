import json
import logging
import sys


class Log:
    """Centralized logging with structured format.

    Every record carries a ``component`` name and a ``context`` dict that is
    rendered as JSON after the message.
    """

    COMPONENT = "DocumentAnalysis"

    _logger: logging.Logger = logging.getLogger("docverify")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(component)s: %(message)s %(context_json)s",
                    defaults={"component": cls.COMPONENT, "context_json": "{}"},
                )
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        """Log an info message."""
        cls._emit(logging.INFO, message, context)

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        """Log an error message."""
        cls._emit(logging.ERROR, message, context)

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        """Log a warning message."""
        cls._emit(logging.WARNING, message, context)

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        """Log a debug message."""
        cls._emit(logging.DEBUG, message, context)

    @classmethod
    def _emit(cls, level: int, message: str, context: dict[str, object]) -> None:
        # Diagnostics must never interrupt the caller.
        try:
            cls._logger.log(
                level,
                message,
                extra={
                    "component": cls.COMPONENT,
                    "context": context,
                    "context_json": json.dumps(context, default=str, ensure_ascii=False),
                },
            )
        except Exception as exc:
            sys.stderr.write(f"docverify: failed to emit log record {message!r}: {exc}\n")
