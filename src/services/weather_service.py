from contextlib import nullcontext
from typing import Any, Dict, Optional

import httpx
import structlog

from src.config.config import Config
from src.exceptions.weather import (
    APIRequestError,
    InvalidCityError,
    MalformedResponseError,
    RateLimitError,
    ResponseDecodeError,
    WeatherAPIKeyError,
    WeatherProviderError,
)
from src.models.weather.weather import WeatherSnapshot

logger = structlog.get_logger(__name__)

# The snapshot and the composed sentence are in Celsius
UNITS = "metric"


class WeatherService:
    """
    Service for fetching current weather data from the OpenWeatherMap API.

    Each call issues exactly one request; failures are reported to the caller
    and never retried.
    """

    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the weather service.

        Args:
            config: Application settings providing the endpoint and API key
            client: Optional shared HTTP client; a short-lived one is opened per request otherwise
        """
        self.base_url = config.openweather_base_url
        self.api_key = config.weather_api_key
        self.units = UNITS
        self.timeout = httpx.Timeout(config.weather_timeout_seconds, connect=10.0)
        self._client = client

    async def _make_request(self, params: Dict[str, Any]) -> Any:
        """
        Make a single HTTP request to the OpenWeatherMap API.

        Query parameters are URL-encoded by httpx, so city names with spaces,
        punctuation or non-ASCII characters reach the provider intact.

        Args:
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            WeatherProviderError: For any non-200 status (InvalidCityError on 404,
                WeatherAPIKeyError on 401, RateLimitError on 429)
            ResponseDecodeError: If the body is not valid JSON
            APIRequestError: For transport errors
        """
        logger.info("Making API request", url=self.base_url, params=params, units=self.units)

        # Add API key only after logging so it never reaches the logs
        params = {**params, "appid": self.api_key, "units": self.units}

        client_context = (
            nullcontext(self._client) if self._client is not None
            else httpx.AsyncClient(timeout=self.timeout)
        )

        try:
            async with client_context as client:
                response = await client.get(self.base_url, params=params)
        except httpx.RequestError as e:
            logger.warning("Request error", error=str(e))
            raise APIRequestError(f"Request failed: {str(e)}") from e

        if response.status_code != 200:
            logger.warning(
                "API request failed",
                status_code=response.status_code,
                response_text=response.text,
            )
            if response.status_code == 404:
                raise InvalidCityError(response.status_code, response.text)
            elif response.status_code == 401:
                raise WeatherAPIKeyError(response.status_code, response.text)
            elif response.status_code == 429:
                raise RateLimitError(response.status_code, response.text)
            raise WeatherProviderError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            logger.error("Failed to decode weather response", error=str(e))
            raise ResponseDecodeError(
                f"failed to parse JSON: {str(e)}, response body: {response.text}",
                body=response.text,
            ) from e

    async def fetch_weather(self, city: str) -> WeatherSnapshot:
        """
        Get current weather data for a city.

        Args:
            city: Name of the city

        Returns:
            WeatherSnapshot with the validated current weather

        Raises:
            WeatherProviderError: If the provider answers with a non-200 status
            ResponseDecodeError: If the body is not JSON
            MalformedResponseError: If required fields are missing or mistyped
            APIRequestError: For transport errors
        """
        city = city.strip()
        logger.info("Fetching current weather", city=city)

        data = await self._make_request({"q": city})
        try:
            snapshot = WeatherSnapshot.from_openweather_payload(data)
        except MalformedResponseError as e:
            logger.error("Failed to parse weather data", city=city, error=str(e))
            raise

        logger.info(
            "Successfully fetched current weather",
            city=city,
            reported_city=snapshot.city_name,
            temperature=snapshot.temperature_celsius,
        )
        return snapshot
