"""LoggerPort adapter over the standard logging module."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

# Attributes set on every LogRecord; logging refuses them as extra keys.
_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class SimpleLogger(LoggerPort):
    """Writes launcher logs to a stream handler on a named logger.

    Keyword context is attached to the record as ``extra``. Keys that clash
    with LogRecord attributes are prefixed with ``ctx_``.
    """

    def __init__(self, name: str = "explorer_launcher", level: int = logging.INFO):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)

    @staticmethod
    def _extra(context: dict[str, Any]) -> dict[str, Any]:
        return {
            (f"ctx_{key}" if key in _RESERVED_RECORD_KEYS else key): value
            for key, value in context.items()
        }

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, extra=self._extra(context))

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, extra=self._extra(context))

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, extra=self._extra(context))

    def error(self, message: str, /, **context: Any) -> None:
        self._logger.error(message, extra=self._extra(context))

    def exception(
        self, message: str, /, exc_info: BaseException | None = None, **context: Any
    ) -> None:
        self._logger.exception(message, exc_info=exc_info or True, extra=self._extra(context))
