from src.exceptions.weather.weather_service_error import WeatherServiceError


class APIRequestError(WeatherServiceError):
    """Exception for transport errors while talking to the weather provider."""

    pass
