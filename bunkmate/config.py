# ABOUTME: Application configuration including default location, thresholds and API keys
# ABOUTME: Centralized config read from the environment (and .env via python-dotenv)

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Default weather location: Mumbai, India
    LOCATION_NAME = os.getenv("LOCATION_NAME", "Mumbai, India")
    LOCATION_LAT = float(os.getenv("LOCATION_LAT", "19.0760"))
    LOCATION_LON = float(os.getenv("LOCATION_LON", "72.8777"))

    # API Keys
    OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", os.getenv("WEATHER_API_KEY", ""))
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")

    # Attendance policy
    DEFAULT_THRESHOLD = float(os.getenv("DEFAULT_THRESHOLD", "75"))
    # Rows within this many points below the threshold show as borderline
    BORDERLINE_MARGIN = float(os.getenv("BORDERLINE_MARGIN", "1.0"))
    # Current attendance this far above the threshold counts as a comfortable margin
    COMFORTABLE_MARGIN = float(os.getenv("COMFORTABLE_MARGIN", "5.0"))
    # Upper bound on remaining classes, keeps the projection table small
    MAX_REMAINING_CLASSES = int(os.getenv("MAX_REMAINING_CLASSES", "1000"))

    # Decision form limits
    MAX_DAYS_UNTIL_EXAM = 365

    # Confession wall
    MAX_CONFESSION_LENGTH = 500
    CONFESSION_PAGE_SIZE = 10

    # Bunk score weights (must sum to 1.0)
    WEIGHT_ATTENDANCE = 0.40
    WEIGHT_EXAM_PROXIMITY = 0.20
    WEIGHT_MOOD = 0.15
    WEIGHT_WEATHER = 0.15
    WEIGHT_PROFESSOR_STRICTNESS = 0.10

    # Weather cache TTL: how often to fetch fresh weather
    WEATHER_CACHE_TTL_SECONDS = int(os.getenv("WEATHER_CACHE_TTL_SECONDS", "600"))  # 10 minutes

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
