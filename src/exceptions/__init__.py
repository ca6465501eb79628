from src.exceptions.base import WeatherBotError
from src.exceptions.config import ConfigError
from src.exceptions.language_model import (
    EmptyResponseError,
    ExtractionFailedError,
    LanguageModelError,
    LanguageModelRequestError,
    RequestTimeoutError,
)
from src.exceptions.orchestration import CityNotExtractedError, OrchestrationServiceError
from src.exceptions.weather import (
    APIRequestError,
    InvalidCityError,
    MalformedResponseError,
    RateLimitError,
    ResponseDecodeError,
    WeatherAPIKeyError,
    WeatherProviderError,
    WeatherServiceError,
)

__all__ = [
    "WeatherBotError",
    "ConfigError",
    "LanguageModelError",
    "LanguageModelRequestError",
    "RequestTimeoutError",
    "EmptyResponseError",
    "ExtractionFailedError",
    "OrchestrationServiceError",
    "CityNotExtractedError",
    "WeatherServiceError",
    "APIRequestError",
    "WeatherProviderError",
    "InvalidCityError",
    "WeatherAPIKeyError",
    "RateLimitError",
    "MalformedResponseError",
    "ResponseDecodeError",
]
