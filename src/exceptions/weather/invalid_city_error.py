from src.exceptions.weather.provider_error import WeatherProviderError


class InvalidCityError(WeatherProviderError):
    """Exception for invalid or not found city names."""

    pass
