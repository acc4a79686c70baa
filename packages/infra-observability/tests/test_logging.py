"""Unit tests for apogee.infra.observability.logging."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from apogee.infra.observability.logging import (
    LIBRARY_LOGGER_NAME,
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
)


@pytest.fixture(autouse=True)
def _restore_library_logger():
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    handlers = list(library_logger.handlers)
    level = library_logger.level
    yield
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)


class TestLoggingSettings:
    @pytest.mark.unit
    def test_default_values(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "INFO"
            assert settings.environment == "development"

    @pytest.mark.unit
    def test_use_json_logs_production(self) -> None:
        settings = LoggingSettings(environment="production")
        assert settings.use_json_logs is True

    @pytest.mark.unit
    def test_use_json_logs_development(self) -> None:
        settings = LoggingSettings(environment="development")
        assert settings.use_json_logs is False

    @pytest.mark.unit
    def test_log_level_int(self) -> None:
        settings = LoggingSettings(log_level="DEBUG")
        assert settings.log_level_int == logging.DEBUG

    @pytest.mark.unit
    def test_normalize_log_level_lowercase(self) -> None:
        settings = LoggingSettings(log_level="debug")
        assert settings.log_level == "DEBUG"

    @pytest.mark.unit
    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError):
            LoggingSettings(log_level="INVALID")

    @pytest.mark.unit
    def test_from_env_vars(self) -> None:
        env = {"LOG_LEVEL": "WARNING", "ENVIRONMENT": "production"}
        with patch.dict("os.environ", env, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "WARNING"
            assert settings.environment == "production"

    @pytest.mark.unit
    def test_cached_settings(self) -> None:
        get_logging_settings.cache_clear()
        assert get_logging_settings() is get_logging_settings()
        get_logging_settings.cache_clear()


class TestConfigureLogging:
    @pytest.mark.unit
    def test_configure_with_default_settings(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            get_logging_settings.cache_clear()
            configure_logging()
        get_logging_settings.cache_clear()
        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.INFO

    @pytest.mark.unit
    def test_configure_sets_library_level(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG", environment="production"))
        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.DEBUG

    @pytest.mark.unit
    def test_reconfigure_keeps_single_handler(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        configure_logging(LoggingSettings(log_level="DEBUG"))
        assert len(logging.getLogger(LIBRARY_LOGGER_NAME).handlers) == 1

    @pytest.mark.unit
    def test_library_records_render_as_json_in_production(self, capsys) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG", environment="production"))
        handler = logging.getLogger(LIBRARY_LOGGER_NAME).handlers[0]
        record = logging.LogRecord(
            name="apogee.foundation.domain.parameter_set",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="parameter_override_set",
            args=None,
            exc_info=None,
        )
        record.fcid = "00000001"
        rendered = handler.format(record)
        assert '"event": "parameter_override_set"' in rendered
        assert '"fcid": "00000001"' in rendered
        assert '"level": "debug"' in rendered


class TestGetLogger:
    @pytest.mark.unit
    def test_returns_bound_logger(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        logger = get_logger("test.module")
        assert logger is not None

    @pytest.mark.unit
    def test_returns_unbound_logger_when_no_name(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        logger = get_logger()
        assert logger is not None
