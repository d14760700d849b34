# ABOUTME: Converts current weather into a 0-100 bunk-favorability score
# ABOUTME: Rain, storms, snow, fog and extreme temperatures raise it, clear mild days lower it

from bunkmate.weather.models import WeatherData

BASE_SCORE = 50


def calculate_weather_score(weather: WeatherData) -> int:
    """
    Score how good the weather is for bunking.

    Args:
        weather: Current weather reading

    Returns:
        Score from 0 to 100, higher means better bunking weather
    """
    score = BASE_SCORE
    condition = weather.condition.lower()

    # Condition scoring (first match only)
    if "rain" in condition:
        score += 30
    elif "storm" in condition:
        score += 35
    elif "snow" in condition:
        score += 40
    elif "fog" in condition or "mist" in condition:
        score += 25
    elif "clear" in condition or "sunny" in condition:
        score -= 10

    # Temperature scoring
    temp = weather.temperature
    if temp > 35:
        score += 20  # Too hot
    elif temp < 5:
        score += 25  # Too cold
    elif 20 <= temp <= 30:
        score -= 5  # Perfect weather

    return max(0, min(100, score))
