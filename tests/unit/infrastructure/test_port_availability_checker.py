"""Tests for TcpPortAvailabilityChecker."""

from __future__ import annotations

import asyncio
import socket
import time
from unittest.mock import AsyncMock, Mock

import pytest

from explorer_launcher.domain.exceptions import ReadinessTimeoutError
from explorer_launcher.domain.value_objects import Duration
from explorer_launcher.infrastructure.port_availability_checker import TcpPortAvailabilityChecker
from explorer_launcher.ports.logger import LoggerPort
from explorer_launcher.ports.readiness import PortAvailabilityPort


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def _unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def checker(clock):
    return TcpPortAvailabilityChecker(logger=Mock(spec=LoggerPort), clock=clock, sleep=clock.sleep)


class TestProbeLoop:
    """Test cases for the retry loop with a fake clock."""

    def test_implements_port(self, checker):
        """Test that the checker implements PortAvailabilityPort."""
        assert isinstance(checker, PortAvailabilityPort)

    @pytest.mark.asyncio
    async def test_returns_on_first_success(self, checker, clock):
        """Test that an open port returns without sleeping."""
        checker.probe = AsyncMock(return_value=True)

        await checker.wait_for_port_availability(
            3000, "172.16.0.2", Duration.from_milliseconds(500), Duration.from_milliseconds(5000)
        )

        checker.probe.assert_awaited_once_with("172.16.0.2", 3000, 0.5)
        assert clock.sleeps == []

    @pytest.mark.asyncio
    async def test_retries_until_success(self, checker, clock):
        """Test that failed probes are retried after the interval."""
        checker.probe = AsyncMock(side_effect=[False, False, True])

        await checker.wait_for_port_availability(
            3000, "172.16.0.2", Duration.from_milliseconds(500), Duration.from_milliseconds(5000)
        )

        assert checker.probe.await_count == 3
        assert clock.sleeps == [0.5, 0.5]

    @pytest.mark.asyncio
    async def test_timeout_with_instant_probes(self, checker, clock):
        """Test that the timeout elapses fully before giving up."""
        checker.probe = AsyncMock(return_value=False)

        with pytest.raises(ReadinessTimeoutError) as exc_info:
            await checker.wait_for_port_availability(
                3000,
                "172.16.0.2",
                Duration.from_milliseconds(500),
                Duration.from_milliseconds(5000),
            )

        assert clock.now == pytest.approx(5.0)
        assert checker.probe.await_count == 11
        assert exc_info.value.port == 3000
        assert exc_info.value.ip_address == "172.16.0.2"

    @pytest.mark.asyncio
    async def test_timeout_with_slow_probes(self, checker, clock):
        """Test that slow probes overrun the timeout by at most one interval."""

        async def slow_probe(ip_address, port, attempt_timeout):
            clock.now += attempt_timeout
            return False

        checker.probe = slow_probe

        with pytest.raises(ReadinessTimeoutError):
            await checker.wait_for_port_availability(
                3000,
                "172.16.0.2",
                Duration.from_milliseconds(500),
                Duration.from_milliseconds(5000),
            )

        assert 5.0 <= clock.now <= 5.5

    @pytest.mark.asyncio
    async def test_sleep_is_capped_by_remaining_time(self, checker, clock):
        """Test that the last sleep does not overshoot the deadline."""
        checker.probe = AsyncMock(return_value=False)

        with pytest.raises(ReadinessTimeoutError):
            await checker.wait_for_port_availability(
                3000,
                "172.16.0.2",
                Duration.from_milliseconds(400),
                Duration.from_milliseconds(1000),
            )

        assert clock.sleeps == pytest.approx([0.4, 0.4, 0.2])


class TestRealSockets:
    """Test cases probing real local sockets."""

    @pytest.mark.asyncio
    async def test_open_port(self):
        """Test that a listening server is detected."""
        server = await asyncio.start_server(lambda r, w: w.close(), "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            checker = TcpPortAvailabilityChecker(logger=Mock(spec=LoggerPort))
            await checker.wait_for_port_availability(
                port, "127.0.0.1", Duration.from_milliseconds(50), Duration.from_milliseconds(1000)
            )
        finally:
            server.close()
            await server.wait_closed()

    @pytest.mark.asyncio
    async def test_probe_closed_port(self):
        """Test that a refused connection probes as unavailable."""
        checker = TcpPortAvailabilityChecker(logger=Mock(spec=LoggerPort))
        assert await checker.probe("127.0.0.1", _unused_port(), 0.5) is False

    @pytest.mark.asyncio
    async def test_closed_port_times_out(self):
        """Test that an unreachable port raises after at least the timeout."""
        checker = TcpPortAvailabilityChecker(logger=Mock(spec=LoggerPort))
        port = _unused_port()

        start = time.monotonic()
        with pytest.raises(ReadinessTimeoutError):
            await checker.wait_for_port_availability(
                port, "127.0.0.1", Duration.from_milliseconds(50), Duration.from_milliseconds(300)
            )
        elapsed = time.monotonic() - start

        assert elapsed >= 0.3
        assert elapsed < 2.0
