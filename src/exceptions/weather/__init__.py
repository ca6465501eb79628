from src.exceptions.weather.api_key_error import WeatherAPIKeyError
from src.exceptions.weather.api_request_error import APIRequestError
from src.exceptions.weather.decode_error import ResponseDecodeError
from src.exceptions.weather.invalid_city_error import InvalidCityError
from src.exceptions.weather.malformed_response_error import MalformedResponseError
from src.exceptions.weather.provider_error import WeatherProviderError
from src.exceptions.weather.rate_limit_error import RateLimitError
from src.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "WeatherServiceError",
    "APIRequestError",
    "WeatherProviderError",
    "InvalidCityError",
    "WeatherAPIKeyError",
    "RateLimitError",
    "MalformedResponseError",
    "ResponseDecodeError",
]
