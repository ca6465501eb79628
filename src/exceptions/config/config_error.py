from src.exceptions.base import WeatherBotError


class ConfigError(WeatherBotError):
    """Exception for missing credentials or an unreadable configuration source."""

    pass
