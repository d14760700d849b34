# ABOUTME: Data model for current weather at the student's location
# ABOUTME: Provides structured representation of condition, temperature and bunk-weather flag

from dataclasses import dataclass


@dataclass
class WeatherData:
    """Current weather from OpenWeatherMap (or the fallback reading)"""
    condition: str        # e.g. "light rain", "clear sky"
    temperature: float    # Celsius
    location: str         # e.g. "Mumbai, IN"
    is_bunk_weather: bool

    def __str__(self) -> str:
        return f"{self.condition}, {self.temperature:.0f}°C @ {self.location}"

    def to_dict(self) -> dict:
        return {
            "condition": self.condition,
            "temperature": self.temperature,
            "location": self.location,
            "isBunkWeather": self.is_bunk_weather,
        }
