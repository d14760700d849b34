# ABOUTME: Tests for application configuration and location settings
# ABOUTME: Validates default location, attendance policy, score weights and API key lookup

import math
import os
from importlib import reload
from unittest.mock import patch

from bunkmate.config import Config


def test_config_has_default_location():
    """Weather defaults to Mumbai when no location is given"""
    assert Config.LOCATION_NAME == "Mumbai, India"
    assert Config.LOCATION_LAT == 19.0760
    assert Config.LOCATION_LON == 72.8777


def test_score_weights_sum_to_one():
    total = (
        Config.WEIGHT_ATTENDANCE
        + Config.WEIGHT_EXAM_PROXIMITY
        + Config.WEIGHT_MOOD
        + Config.WEIGHT_WEATHER
        + Config.WEIGHT_PROFESSOR_STRICTNESS
    )

    assert math.isclose(total, 1.0)


def test_attendance_policy_defaults():
    assert Config.DEFAULT_THRESHOLD == 75
    assert Config.BORDERLINE_MARGIN == 1.0
    assert Config.COMFORTABLE_MARGIN == 5.0


def test_weather_cache_ttl_default():
    """Weather is refreshed every 10 minutes by default"""
    assert Config.WEATHER_CACHE_TTL_SECONDS == 600


class TestApiKeys:
    """Tests for API keys read from the environment"""

    def test_openweather_key_from_environment(self):
        import bunkmate.config

        try:
            with patch.dict(os.environ, {"OPENWEATHER_API_KEY": "ow-key-123"}):
                reload(bunkmate.config)
                assert bunkmate.config.Config.OPENWEATHER_API_KEY == "ow-key-123"
        finally:
            reload(bunkmate.config)

    def test_weather_api_key_is_accepted_as_alias(self):
        import bunkmate.config

        env = {k: v for k, v in os.environ.items() if k != "OPENWEATHER_API_KEY"}
        env["WEATHER_API_KEY"] = "legacy-key"
        try:
            with patch.dict(os.environ, env, clear=True):
                reload(bunkmate.config)
                assert bunkmate.config.Config.OPENWEATHER_API_KEY == "legacy-key"
        finally:
            reload(bunkmate.config)

    def test_gemini_key_from_environment(self):
        import bunkmate.config

        try:
            with patch.dict(os.environ, {"GEMINI_API_KEY": "gm-key-456"}):
                reload(bunkmate.config)
                assert bunkmate.config.Config.GEMINI_API_KEY == "gm-key-456"
        finally:
            reload(bunkmate.config)
