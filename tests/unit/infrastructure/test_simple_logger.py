"""Tests for SimpleLogger implementation."""

import logging
from unittest.mock import Mock, patch

from explorer_launcher.infrastructure.simple_logger import SimpleLogger
from explorer_launcher.ports.logger import LoggerPort


class TestSimpleLogger:
    """Test cases for SimpleLogger implementation."""

    def test_implements_logger_port(self):
        """Test that SimpleLogger properly implements LoggerPort."""
        assert isinstance(SimpleLogger(), LoggerPort)

    def test_initialization_default_values(self):
        """Test logger initialization with default values."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger

            SimpleLogger()

            mock_get_logger.assert_called_once_with("explorer_launcher")
            mock_logger.setLevel.assert_called_once_with(logging.INFO)

    def test_handler_not_added_twice(self):
        """Test that an existing handler is reused."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = [Mock()]
            mock_get_logger.return_value = mock_logger

            SimpleLogger()

            mock_logger.addHandler.assert_not_called()

    def test_context_passed_as_extra(self):
        """Test that keyword context becomes the record's extra."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger

            logger = SimpleLogger()
            logger.info("Explorer frontend launched", public_url="http://127.0.0.1:8331")
            logger.error(
                "Enclave rejected explorer frontend service", service_id="explorer-frontend"
            )

            mock_logger.info.assert_called_once_with(
                "Explorer frontend launched", extra={"public_url": "http://127.0.0.1:8331"}
            )
            mock_logger.error.assert_called_once_with(
                "Enclave rejected explorer frontend service",
                extra={"service_id": "explorer-frontend"},
            )

    def test_exception_defaults_exc_info(self):
        """Test that exception logs the current traceback by default."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger

            SimpleLogger().exception("failed")

            mock_logger.exception.assert_called_once_with("failed", exc_info=True, extra={})

    def test_reserved_context_keys_are_prefixed(self):
        """Test that context clashing with LogRecord attributes is renamed."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger

            SimpleLogger().warning("Probe failed", name="explorer-frontend", port=3000)

            mock_logger.warning.assert_called_once_with(
                "Probe failed", extra={"ctx_name": "explorer-frontend", "port": 3000}
            )

    def test_records_reach_real_handler(self, caplog):
        """Test that a real record carries the context attributes."""
        logger = SimpleLogger(name="explorer_launcher.test", level=logging.DEBUG)

        with caplog.at_level(logging.DEBUG, logger="explorer_launcher.test"):
            logger.debug("Descriptor built", service_id="explorer-frontend", message="x")

        record = caplog.records[-1]
        assert record.getMessage() == "Descriptor built"
        assert record.service_id == "explorer-frontend"
        assert record.ctx_message == "x"
