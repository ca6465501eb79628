from src.exceptions.weather.provider_error import WeatherProviderError


class WeatherAPIKeyError(WeatherProviderError):
    """Exception for a weather API key rejected by the provider."""

    pass
