"""TCP port availability checker.

Repeatedly opens a TCP connection to a service port until it succeeds or the
timeout elapses.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable

from ..domain.exceptions import ReadinessTimeoutError
from ..domain.value_objects import Duration
from ..ports.logger import LoggerPort
from ..ports.readiness import PortAvailabilityPort


class TcpPortAvailabilityChecker(PortAvailabilityPort):
    """Polls a port with sequential TCP connect attempts.

    Each attempt is bounded by the retry interval, so on timeout the total
    elapsed time lies between the timeout and the timeout plus one interval.
    """

    def __init__(
        self,
        logger: LoggerPort | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the checker.

        Args:
            logger: Logger for probe attempts
            clock: Monotonic clock in seconds
            sleep: Coroutine used to wait between probes
        """
        self._logger = logger or self._create_default_logger()
        self._clock = clock
        self._sleep = sleep

    def _create_default_logger(self) -> LoggerPort:
        """Create a default logger if none provided."""
        from .simple_logger import SimpleLogger

        return SimpleLogger()

    async def wait_for_port_availability(
        self,
        port: int,
        ip_address: str,
        retry_interval: Duration,
        timeout: Duration,
    ) -> None:
        interval = retry_interval.total_seconds()
        deadline = self._clock() + timeout.total_seconds()
        attempt = 0

        while True:
            attempt += 1
            if await self.probe(ip_address, port, interval):
                self._logger.debug(
                    "Port is available", ip_address=ip_address, port=port, attempt=attempt
                )
                return

            remaining = deadline - self._clock()
            if remaining <= 0:
                raise ReadinessTimeoutError(ip_address, port, timeout.to_milliseconds())

            self._logger.debug(
                "Port not yet available", ip_address=ip_address, port=port, attempt=attempt
            )
            await self._sleep(min(interval, remaining))

    async def probe(self, ip_address: str, port: int, attempt_timeout: float) -> bool:
        """Try one TCP connection.

        Returns:
            True if the connection was accepted
        """
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(ip_address, port), timeout=attempt_timeout
            )
        except (OSError, asyncio.TimeoutError):
            return False

        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
        return True
