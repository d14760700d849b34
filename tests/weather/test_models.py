# ABOUTME: Tests for weather data models and structures
# ABOUTME: Validates WeatherData fields, string form and JSON shape

from bunkmate.weather.models import WeatherData


def test_weather_data_creates_with_all_fields():
    weather = WeatherData(
        condition="light rain",
        temperature=27,
        location="Mumbai, IN",
        is_bunk_weather=True
    )

    assert weather.condition == "light rain"
    assert weather.temperature == 27
    assert weather.location == "Mumbai, IN"
    assert weather.is_bunk_weather is True


def test_weather_data_has_string_representation():
    weather = WeatherData(condition="haze", temperature=31.4, location="Delhi, IN", is_bunk_weather=False)

    result = str(weather)
    assert "haze" in result
    assert "31°C" in result
    assert "Delhi, IN" in result


def test_weather_data_to_dict_uses_camel_case():
    weather = WeatherData(condition="mist", temperature=22, location="Pune, IN", is_bunk_weather=True)

    assert weather.to_dict() == {
        "condition": "mist",
        "temperature": 22,
        "location": "Pune, IN",
        "isBunkWeather": True,
    }
