from src.exceptions.base import WeatherBotError


class OrchestrationServiceError(WeatherBotError):
    """Base exception for orchestration service errors."""

    pass
