import httpx
import pytest

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
from src.services.weather_service import WeatherService


class TestWeatherService:
    """Test cases for the WeatherService class."""

    @pytest.mark.asyncio
    async def test_fetch_weather_success(self, test_config, make_http_client, recorded_requests, paris_payload):
        """Test successful current weather fetch."""
        client = make_http_client(lambda request: httpx.Response(200, json=paris_payload))
        service = WeatherService(test_config, client=client)

        result = await service.fetch_weather("Paris")

        assert isinstance(result, WeatherSnapshot)
        assert result.city_name == "Paris"
        assert result.description == "clear sky"
        assert result.temperature_celsius == 18.5

        assert len(recorded_requests) == 1
        request = recorded_requests[0]
        assert request.method == "GET"
        assert request.url.host == "api.openweathermap.org"
        assert request.url.path == "/data/2.5/weather"
        assert request.url.params["q"] == "Paris"
        assert request.url.params["appid"] == "test-weather-key"
        assert request.url.params["units"] == "metric"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("city", ["New York", "São Paulo", "Saint-Denis, Réunion", "Paris&appid=stolen"])
    async def test_fetch_weather_escapes_city(self, test_config, make_http_client, recorded_requests, paris_payload, city):
        """Test city names with spaces and special characters round-trip through the query string."""
        client = make_http_client(lambda request: httpx.Response(200, json=paris_payload))
        service = WeatherService(test_config, client=client)

        await service.fetch_weather(city)

        request = recorded_requests[0]
        raw_query = request.url.query.decode("ascii")
        assert " " not in raw_query
        assert request.url.params["q"] == city
        assert request.url.params.get_list("appid") == ["test-weather-key"]

    @pytest.mark.asyncio
    async def test_fetch_weather_trims_city(self, test_config, make_http_client, recorded_requests, paris_payload):
        client = make_http_client(lambda request: httpx.Response(200, json=paris_payload))
        service = WeatherService(test_config, client=client)

        await service.fetch_weather("  Paris \n")

        assert recorded_requests[0].url.params["q"] == "Paris"

    @pytest.mark.asyncio
    async def test_fetch_weather_integer_temperature(self, test_config, make_http_client, paris_payload):
        paris_payload["main"]["temp"] = 18
        client = make_http_client(lambda request: httpx.Response(200, json=paris_payload))
        service = WeatherService(test_config, client=client)

        result = await service.fetch_weather("Paris")

        assert result.temperature_celsius == 18.0
        assert isinstance(result.temperature_celsius, float)

    @pytest.mark.asyncio
    async def test_fetch_weather_city_not_found(self, test_config, make_http_client):
        """Test API request with 404 response."""
        body = '{"cod":"404","message":"city not found"}'
        client = make_http_client(lambda request: httpx.Response(404, text=body))
        service = WeatherService(test_config, client=client)

        with pytest.raises(InvalidCityError) as exc_info:
            await service.fetch_weather("Atlantis")

        assert isinstance(exc_info.value, WeatherProviderError)
        assert exc_info.value.status_code == 404
        assert exc_info.value.body == body
        assert "status code 404" in str(exc_info.value)
        assert "city not found" in str(exc_info.value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, expected",
        [
            (401, WeatherAPIKeyError),
            (429, RateLimitError),
            (500, WeatherProviderError),
            (503, WeatherProviderError),
        ],
    )
    async def test_fetch_weather_provider_errors(self, test_config, make_http_client, status_code, expected):
        """Test non-200 responses carry their status code and body."""
        client = make_http_client(lambda request: httpx.Response(status_code, text="upstream says no"))
        service = WeatherService(test_config, client=client)

        with pytest.raises(expected) as exc_info:
            await service.fetch_weather("London")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.body == "upstream says no"

    @pytest.mark.asyncio
    async def test_fetch_weather_invalid_json(self, test_config, make_http_client):
        client = make_http_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        service = WeatherService(test_config, client=client)

        with pytest.raises(ResponseDecodeError, match="failed to parse JSON") as exc_info:
            await service.fetch_weather("London")

        assert exc_info.value.body == "<html>oops</html>"

    @pytest.mark.asyncio
    async def test_fetch_weather_transport_error(self, test_config, make_http_client):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_http_client(handler)
        service = WeatherService(test_config, client=client)

        with pytest.raises(APIRequestError, match="Request failed"):
            await service.fetch_weather("London")

    @pytest.mark.asyncio
    async def test_fetch_weather_malformed_payload(self, test_config, make_http_client):
        """Test a decodable body without weather blocks is rejected."""
        client = make_http_client(lambda request: httpx.Response(200, json={"cod": "404", "message": "city not found"}))
        service = WeatherService(test_config, client=client)

        with pytest.raises(MalformedResponseError, match="'main'"):
            await service.fetch_weather("London")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_temp", ["1" * 400, "1e400"], ids=["huge-int", "overflowing-float"])
    async def test_fetch_weather_out_of_range_temperature(self, test_config, make_http_client, raw_temp):
        """Test temperatures that do not fit a finite float are reported as malformed."""
        body = '{"main":{"temp":' + raw_temp + '},"weather":[{"description":"clear sky"}],"name":"Paris"}'
        client = make_http_client(
            lambda request: httpx.Response(200, text=body, headers={"content-type": "application/json"})
        )
        service = WeatherService(test_config, client=client)

        with pytest.raises(MalformedResponseError, match=r"missing or invalid field\(s\)"):
            await service.fetch_weather("Paris")

    def test_units_are_metric(self, test_config):
        service = WeatherService(test_config)

        assert service.units == "metric"
        assert service.api_key == "test-weather-key"
