from types import SimpleNamespace
from typing import Callable, List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from src.config.config import Config
from src.models.weather.weather import WeatherSnapshot


def chat_completion(*contents: Optional[str]) -> SimpleNamespace:
    """Build a chat completion response object with one choice per content."""
    return SimpleNamespace(
        choices=[
            SimpleNamespace(index=i, message=SimpleNamespace(role="assistant", content=content))
            for i, content in enumerate(contents)
        ]
    )


@pytest.fixture
def make_chat_completion():
    return chat_completion


@pytest.fixture
def test_config():
    """Config with fixed credentials that ignores the environment's .env file."""
    return Config(
        mistral_api_key="test-mistral-key",
        weather_api_key="test-weather-key",
        openweather_base_url="https://api.openweathermap.org/data/2.5/weather",
        llm_timeout_seconds=1.0,
        _env_file=None,
    )


@pytest.fixture
def mock_llm_client():
    """Mock AsyncOpenAI client; set ``chat.completions.create`` per test."""
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock()
    mock_client.close = AsyncMock()
    return mock_client


@pytest.fixture
def paris_payload():
    """Successful OpenWeatherMap response for Paris."""
    return {
        "coord": {"lon": 2.3488, "lat": 48.8534},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 18.5, "feels_like": 17.9, "pressure": 1016, "humidity": 55},
        "name": "Paris",
        "cod": 200,
    }


@pytest.fixture
def paris_snapshot():
    return WeatherSnapshot(city_name="Paris", description="clear sky", temperature_celsius=18.5)


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_http_client(recorded_requests):
    """Factory for an httpx client whose transport records requests and replies via a handler."""
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))

    return factory
