from src.exceptions.base import WeatherBotError


class WeatherServiceError(WeatherBotError):
    """Base exception for weather service errors."""

    pass
