from src.exceptions.weather.provider_error import WeatherProviderError


class RateLimitError(WeatherProviderError):
    """Exception for API rate limit errors."""

    pass
