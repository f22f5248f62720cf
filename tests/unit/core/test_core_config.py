"""Unit tests for settings, logging helpers and result types."""

import logging

import pytest
from pydantic import ValidationError

from auto_rating.core.config import Settings, clear_settings_cache, get_settings
from auto_rating.core.exceptions import RatingError, RuleOrderError
from auto_rating.core.logging_utils import configure_logging, get_logger
from auto_rating.core.result_types import Err, Ok


class TestSettings:
    """Pydantic settings."""

    def test_defaults(self) -> None:
        """Defaults suit local development."""
        settings = Settings()

        assert settings.app_name == "Auto Rating Engine"
        assert settings.api_env == "development"
        assert settings.is_development
        assert not settings.is_production
        assert settings.currency == "USD"
        assert settings.log_level == "INFO"
        assert settings.log_level_value == logging.INFO

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """AUTO_RATING_* variables override defaults."""
        monkeypatch.setenv("AUTO_RATING_API_ENV", "production")
        monkeypatch.setenv("AUTO_RATING_LOG_LEVEL", "debug")
        monkeypatch.setenv("AUTO_RATING_API_PORT", "9000")

        settings = Settings()

        assert settings.is_production
        assert settings.log_level == "DEBUG"
        assert settings.api_port == 9000

    def test_invalid_env_rejected(self) -> None:
        """Only known environments are accepted."""
        with pytest.raises(ValidationError):
            Settings(api_env="qa")

    def test_invalid_log_level_rejected(self) -> None:
        """Unknown level names are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_invalid_currency_rejected(self) -> None:
        """Currency must be a three-letter code."""
        with pytest.raises(ValidationError):
            Settings(currency="dollars")

    def test_frozen(self) -> None:
        """Settings are immutable."""
        settings = Settings()

        with pytest.raises(ValidationError):
            settings.currency = "EUR"  # type: ignore[misc]

    def test_get_settings_caches(self) -> None:
        """get_settings returns one instance until cleared."""
        first = get_settings()

        assert get_settings() is first

        clear_settings_cache()

        assert get_settings() is not first


class TestLogging:
    """Logger helper."""

    def test_named_logger(self) -> None:
        """Loggers are named after the caller."""
        assert get_logger("auto_rating.test").name == "auto_rating.test"

    def test_default_logger_name(self) -> None:
        """The package logger is the default."""
        assert get_logger().name == "auto_rating"

    def test_level_override(self) -> None:
        """An explicit level is applied."""
        logger = get_logger("auto_rating.level_test", level=logging.WARNING)

        assert logger.level == logging.WARNING

    def test_configure_applies_level_when_already_configured(self) -> None:
        """A later explicit level replaces the one set on first use."""
        root = logging.getLogger()
        original = root.level
        get_logger("auto_rating.configured")

        try:
            configure_logging(level="DEBUG")
            assert root.level == logging.DEBUG

            configure_logging()
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(original)


class TestResultTypes:
    """Ok / Err wrappers."""

    def test_ok(self) -> None:
        """Ok exposes its value."""
        result = Ok(42)

        assert result.is_ok()
        assert not result.is_err()
        assert result.ok_value == 42
        assert result.err_value is None
        assert result.unwrap_or(0) == 42
        assert result.map(lambda v: v + 1).unwrap() == 43

        with pytest.raises(ValueError):
            result.unwrap_err()

    def test_err(self) -> None:
        """Err exposes its error."""
        result = Err("boom")

        assert result.is_err()
        assert not result.is_ok()
        assert result.err_value == "boom"
        assert result.ok_value is None
        assert result.unwrap_or(7) == 7
        assert result.map(lambda v: v) is result

        with pytest.raises(ValueError, match="boom"):
            result.unwrap()


class TestErrors:
    """Exception hierarchy."""

    def test_rule_order_error_is_rating_error(self) -> None:
        """Every rating failure shares the base class."""
        error = RuleOrderError("out of order")

        assert isinstance(error, RatingError)
        assert error.to_dict() == {"error": "RuleOrderError", "message": "out of order"}
