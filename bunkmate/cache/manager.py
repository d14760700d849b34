# ABOUTME: In-memory cache for weather readings and their bunk-favorability scores
# ABOUTME: Keyed by location so repeated decisions don't hammer the weather API

from datetime import datetime, timezone
from typing import Optional

from bunkmate.weather.models import WeatherData


class CacheManager:
    """
    Weather cache with a per-location TTL.

    Each entry stores the reading, its derived score and when it was fetched.
    """

    def __init__(self, weather_ttl_seconds: int = 600):
        self.weather_ttl_seconds = weather_ttl_seconds
        self._weather_cache: dict[str, dict] = {}

    @staticmethod
    def location_key(lat: float, lon: float) -> str:
        return f"{lat:.4f},{lon:.4f}"

    def set_weather(self, key: str, weather: WeatherData, score: int) -> dict:
        """
        Store a weather reading and its score, returning the stored entry.

        Args:
            key: Location key from location_key()
            weather: Fresh weather reading
            score: 0-100 weather score for that reading
        """
        entry = {
            "weather": weather,
            "score": score,
            "fetched_at": datetime.now(timezone.utc)
        }
        self._weather_cache[key] = entry
        return entry

    def get_weather(self, key: str) -> Optional[dict]:
        """
        Get cached weather if fresh.

        Returns:
            {"weather": WeatherData, "score": int, "fetched_at": datetime}
            or None if stale/empty
        """
        if self.is_weather_stale(key):
            return None
        return self._weather_cache[key]

    def is_weather_stale(self, key: str) -> bool:
        """Check if the entry for this location needs refresh."""
        entry = self._weather_cache.get(key)
        if entry is None:
            return True

        age = datetime.now(timezone.utc) - entry["fetched_at"]
        return age.total_seconds() > self.weather_ttl_seconds

    def clear(self) -> None:
        """Clear all cached weather."""
        self._weather_cache = {}
