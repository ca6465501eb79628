from src.models.weather.weather import WeatherSnapshot

__all__ = ["WeatherSnapshot"]
