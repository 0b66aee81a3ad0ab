from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Settings are read once at startup and are immutable afterwards. An empty
    prediction service URL is accepted; every proxied call then fails at the
    transport level.
    """

    # Prediction Service Configuration
    predict_api_url: str = Field(default="", description="Upstream prediction service URL")
    predict_timeout_seconds: float = Field(default=30.0, gt=0, description="Overall upstream request timeout")
    predict_connect_timeout_seconds: float = Field(default=10.0, gt=0, description="Upstream connect timeout")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="Uvicorn bind host")
    api_port: int = Field(default=8080, ge=1, le=65535, description="Uvicorn port")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_to_file: bool = Field(default=False, description="Also write logs under logs/")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        valid_formats = ["json", "text"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()

    @property
    def prediction_service_configured(self) -> bool:
        return bool(self.predict_api_url)

    def get_log_file_path(self) -> Path:
        """Get the log file path for the configured environment."""
        return Path("logs") / f"fire_risk_{self.environment}.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )


config = Config()
