from src.exceptions.weather.weather_service_error import WeatherServiceError


class MalformedResponseError(WeatherServiceError):
    """Exception for provider JSON that lacks required fields or has them mistyped."""

    pass
