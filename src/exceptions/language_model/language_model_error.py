from src.exceptions.base import WeatherBotError


class LanguageModelError(WeatherBotError):
    """Base exception for language model service errors."""

    pass
