"""Logging port used by the launcher and its adapters."""

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Structured logging contract.

    Each call takes a message plus keyword context. The launcher passes
    values such as ``service_id``, ``ip_address``, ``port`` and
    ``public_url`` as context so that log lines for one launch can be
    correlated without formatting them into the message.
    """

    @abstractmethod
    def debug(self, message: str, /, **context: Any) -> None:
        """Log descriptor details and individual probe failures."""

    @abstractmethod
    def info(self, message: str, /, **context: Any) -> None:
        """Log launch progress."""

    @abstractmethod
    def warning(self, message: str, /, **context: Any) -> None:
        """Log a recoverable problem."""

    @abstractmethod
    def error(self, message: str, /, **context: Any) -> None:
        """Log a failed launch step."""

    @abstractmethod
    def exception(
        self, message: str, /, exc_info: BaseException | None = None, **context: Any
    ) -> None:
        """Log a failure together with its traceback."""
