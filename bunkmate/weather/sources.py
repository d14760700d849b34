# ABOUTME: API client for current weather from OpenWeatherMap
# ABOUTME: Falls back to a fixed reading when the key is missing or the API call fails

import logging
import requests

from bunkmate.weather.models import WeatherData

log = logging.getLogger(__name__)

BUNK_WEATHER_MAIN = {"Rain", "Thunderstorm", "Snow"}
TOO_HOT_C = 35
TOO_COLD_C = 5


class OpenWeatherClient:
    """Client for fetching current weather from OpenWeatherMap"""

    BASE_URL = "https://api.openweathermap.org/data/2.5"

    def __init__(self, api_key: str):
        self.api_key = api_key
        if not self.api_key:
            log.warning("OpenWeatherMap API key not found. Weather features will be limited.")

    def fetch_weather(self, lat: float, lon: float) -> WeatherData:
        """
        Fetch current weather for given coordinates

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            WeatherData with parsed data, or the fallback reading on any error
        """
        if not self.api_key:
            return self.fallback_weather()

        params = {"lat": lat, "lon": lon, "appid": self.api_key, "units": "metric"}

        try:
            response = requests.get(f"{self.BASE_URL}/weather", params=params, timeout=10)

            if response.status_code != 200:
                log.error(f"OpenWeatherMap HTTP error: {response.status_code} - {response.text}")
                return self.fallback_weather()

            return self._parse_response(response.json())

        except requests.RequestException as e:
            log.error(f"OpenWeatherMap request failed: {e}")
            return self.fallback_weather()

    def _parse_response(self, data: dict) -> WeatherData:
        """Parse OpenWeatherMap response into WeatherData."""
        try:
            weather = data["weather"][0]
            temp = float(data["main"]["temp"])

            return WeatherData(
                condition=weather["description"],
                temperature=round(temp),
                location=f"{data['name']}, {data['sys']['country']}",
                is_bunk_weather=self._is_bunk_weather(weather["main"], weather["description"], temp),
            )

        except (KeyError, IndexError, TypeError, ValueError) as e:
            log.error(f"OpenWeatherMap response parsing failed: {e} - Response: {data}")
            return self.fallback_weather()

    def _is_bunk_weather(self, main: str, description: str, temp: float) -> bool:
        """Rain, storms, snow, fog or extreme temperatures"""
        description = description.lower()
        return (
            main in BUNK_WEATHER_MAIN
            or temp > TOO_HOT_C
            or temp < TOO_COLD_C
            or "fog" in description
            or "mist" in description
        )

    def fallback_weather(self) -> WeatherData:
        return WeatherData(
            condition="Partly Cloudy",
            temperature=28,
            location="Mumbai, India",
            is_bunk_weather=False,
        )
