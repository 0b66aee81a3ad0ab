import pytest
from pydantic import ValidationError

from fire_risk.config import Config


class TestConfig:
    """Test cases for application settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PREDICT_API_URL", raising=False)

        settings = Config(_env_file=None)

        assert settings.predict_api_url == ""
        assert settings.prediction_service_configured is False
        assert settings.api_port == 8080
        assert settings.predict_timeout_seconds == 30.0
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.log_to_file is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PREDICT_API_URL", "http://model:8000/predict")
        monkeypatch.setenv("PREDICT_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        settings = Config(_env_file=None)

        assert settings.predict_api_url == "http://model:8000/predict"
        assert settings.prediction_service_configured is True
        assert settings.predict_timeout_seconds == 12.5
        assert settings.log_level == "WARNING"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            Config(_env_file=None, log_level="verbose")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError, match="Invalid log format"):
            Config(_env_file=None, log_format="xml")

    @pytest.mark.parametrize("field", ["predict_timeout_seconds", "predict_connect_timeout_seconds"])
    def test_non_positive_timeout(self, field):
        with pytest.raises(ValidationError):
            Config(_env_file=None, **{field: 0})

    def test_settings_are_immutable(self):
        settings = Config(_env_file=None)

        with pytest.raises(ValidationError):
            settings.predict_api_url = "http://elsewhere"

    def test_log_file_path(self):
        settings = Config(_env_file=None, environment="staging")

        assert str(settings.get_log_file_path()).endswith("fire_risk_staging.log")
