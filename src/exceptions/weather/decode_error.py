from src.exceptions.weather.weather_service_error import WeatherServiceError


class ResponseDecodeError(WeatherServiceError):
    """Exception for provider responses whose body is not valid JSON."""

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body
