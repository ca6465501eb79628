import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.exceptions.weather import MalformedResponseError


def _as_temperature(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it is not a usable temperature."""
    # bool is an int subclass but never a valid temperature
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        temperature = float(value)
    except OverflowError:
        return None
    return temperature if math.isfinite(temperature) else None


class WeatherSnapshot(BaseModel):
    """Validated current weather for a single city."""

    model_config = ConfigDict(frozen=True, strict=True)

    city_name: str = Field(..., description="City name as reported by the provider")
    description: str = Field(..., description="Detailed weather description")
    temperature_celsius: float = Field(..., description="Current temperature in Celsius")

    def describe(self) -> str:
        """Render the snapshot as the sentence handed to the language model."""
        return (
            f"The current weather in {self.city_name} is {self.description} "
            f"with a temperature of {self.temperature_celsius:.2f}°C."
        )

    @classmethod
    def from_openweather_payload(cls, data: Any) -> "WeatherSnapshot":
        """
        Create a WeatherSnapshot from a decoded OpenWeatherMap response.

        The payload is checked level by level so that a missing ``main`` block,
        a missing ``weather`` list and missing leaf fields produce distinct
        errors. Nothing is defaulted.

        Args:
            data: Decoded JSON body of the current weather endpoint

        Returns:
            WeatherSnapshot: Validated snapshot

        Raises:
            MalformedResponseError: If a required block or field is missing or mistyped
        """
        main = data.get("main") if isinstance(data, dict) else None
        if not isinstance(main, dict):
            raise MalformedResponseError("unexpected response format: 'main' key missing or invalid")

        weather = data.get("weather")
        if not isinstance(weather, list) or not weather:
            raise MalformedResponseError("unexpected response format: 'weather' key missing or invalid")

        primary_weather = weather[0]
        if not isinstance(primary_weather, dict):
            raise MalformedResponseError("unexpected response format: 'weather[0]' item missing or invalid")

        temperature = _as_temperature(main.get("temp"))
        description = primary_weather.get("description")
        city_name = data.get("name")

        if temperature is None or not isinstance(description, str) or not isinstance(city_name, str):
            raise MalformedResponseError("unexpected response format: missing or invalid field(s)")

        return cls(
            city_name=city_name,
            description=description,
            temperature_celsius=temperature,
        )
