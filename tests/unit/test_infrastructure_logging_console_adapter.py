"""Unit tests for ConsoleAdapter (structured console logging).

structlog is patched; tests assert on what reaches the bound logger.
"""

from unittest.mock import MagicMock, patch

import pytest

from recovery.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "recovery.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_logger():
    """Underlying structlog logger returned by get_logger()."""
    with patch(STRUCTLOG) as mock_structlog:
        logger = MagicMock()
        mock_structlog.get_logger.return_value = logger
        yield logger


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """LoggerProtocol methods forward to structlog."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_context(self, mock_logger, level):
        adapter = ConsoleAdapter()

        getattr(adapter, level)("recovery_token_issued", token_prefix="ab12cd34...")

        getattr(mock_logger, level).assert_called_once_with(
            "recovery_token_issued", token_prefix="ab12cd34..."
        )

    def test_error_adds_exception_fields(self, mock_logger):
        adapter = ConsoleAdapter()

        adapter.error("recovery_email_send_failed", error=TimeoutError("timed out"))

        mock_logger.error.assert_called_once_with(
            "recovery_email_send_failed",
            error_type="TimeoutError",
            error_message="timed out",
        )

    def test_critical_without_exception(self, mock_logger):
        adapter = ConsoleAdapter()

        adapter.critical("recovery_token_store_inconsistent", matches=2)

        mock_logger.critical.assert_called_once_with(
            "recovery_token_store_inconsistent", matches=2
        )

    def test_bind_returns_new_adapter(self, mock_logger):
        bound_logger = MagicMock()
        mock_logger.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(trace_id="t-1")
        bound.info("request_started")

        assert bound is not adapter
        mock_logger.bind.assert_called_once_with(trace_id="t-1")
        bound_logger.info.assert_called_once_with("request_started")
        mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """structlog configuration by mode and level."""

    def test_json_mode_uses_json_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_mode_uses_console_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=False)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("DEBUG", 10), ("warning", 30), ("nonsense", 20)],
    )
    def test_level_filter(self, level, expected):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level=level)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(expected)
