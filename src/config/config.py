from pathlib import Path
from typing import Optional, Union

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.exceptions.config import ConfigError


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    This class handles all configuration for the weather bot including
    API keys, service endpoints, deadlines and logging.
    """

    # API Keys
    mistral_api_key: str = Field(..., description="Mistral API key for the chat completion service")
    weather_api_key: str = Field(..., description="OpenWeatherMap API key for weather data")

    # Language Model Configuration
    mistral_base_url: str = Field(
        default="https://api.mistral.ai/v1",
        description="OpenAI-compatible chat completion endpoint",
    )
    mistral_model: str = Field(default="open-mistral-7b", description="Chat model identifier")
    mistral_temperature: float = Field(default=0.7, ge=0, le=2, description="Sampling temperature")
    mistral_max_tokens: Optional[int] = Field(
        default=None, ge=1, description="Maximum tokens to generate per reply"
    )
    llm_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Deadline for a single chat completion call"
    )

    # OpenWeatherMap Configuration
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current weather endpoint",
    )
    weather_timeout_seconds: float = Field(
        default=30.0, gt=0, description="HTTP timeout for weather requests"
    )

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_dir: str = Field(default="logs", description="Directory for log files")

    @field_validator("mistral_api_key")
    def validate_mistral_api_key(cls, v):
        if not v.strip():
            raise ValueError("Mistral API key is required")
        return v

    @field_validator("weather_api_key")
    def validate_weather_api_key(cls, v):
        if not v.strip():
            raise ValueError("Weather API key is required")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    def get_log_dir_path(self) -> Path:
        """Get the absolute path to the log directory."""
        return Path(self.log_dir).resolve()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def load_config(env_file: Optional[Union[str, Path]] = ".env") -> Config:
    """
    Load application settings from the environment and an optional .env file.

    Args:
        env_file: Path to the .env file, or None to read only the environment

    Returns:
        Validated Config instance

    Raises:
        ConfigError: If a credential is missing or the config source cannot be read
    """
    try:
        return Config(_env_file=env_file)
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        raise ConfigError(f"Invalid or missing configuration: {fields}") from e
    except OSError as e:
        raise ConfigError(f"Could not read configuration source {env_file}: {e}") from e
