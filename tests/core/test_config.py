"""Unit tests for configuration models and validation."""

from src.core.config import (
    Config,
    DisplayStrings,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    validate_config,
)


class TestConfigDefaults:
    """Tests for default configuration values."""

    def test_default_timeouts(self):
        config = Config()

        assert config.connect_timeout == DEFAULT_CONNECT_TIMEOUT == 15
        assert config.read_timeout == DEFAULT_READ_TIMEOUT == 10

    def test_default_strings(self):
        strings = Config().strings

        assert strings.alert_no == "no"
        assert strings.alert_yes == "yes"
        assert strings.alert_not_available == "not available"


class TestValidateConfig:
    """Tests for validate_config() function."""

    def test_default_config_is_valid(self):
        result = validate_config(Config())

        assert result.valid is True
        assert result.errors == []

    def test_non_positive_timeout_is_error(self):
        """Zero or negative timeouts are critical errors."""
        result = validate_config(Config(connect_timeout=0, read_timeout=-1))

        assert result.valid is False
        assert {e.field for e in result.critical_errors} == {
            "connect_timeout",
            "read_timeout",
        }

    def test_empty_label_is_warning(self):
        """Empty labels warn but keep the config valid."""
        config = Config(strings=DisplayStrings(alert_yes="  "))
        result = validate_config(config)

        assert result.valid is True
        assert len(result.warnings) == 1
        assert result.warnings[0].field == "strings.alert_yes"
