from src.exceptions.weather.weather_service_error import WeatherServiceError


class WeatherProviderError(WeatherServiceError):
    """Exception for non-success HTTP responses from the weather provider.

    Carries the status code and the raw response body for diagnostics.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"failed to fetch weather data: status code {status_code}, response: {body}"
        )
        self.status_code = status_code
        self.body = body
