# ABOUTME: Main application orchestrator coordinating all components
# ABOUTME: Handles weather fetch, scoring, LLM text generation, planning, history and confessions

import logging
from typing import Optional

from bunkmate.config import Config
from bunkmate.weather.sources import OpenWeatherClient
from bunkmate.weather.scoring import calculate_weather_score
from bunkmate.scoring.calculator import ScoreCalculator
from bunkmate.scoring.models import ScoringInput, ScoringWeights
from bunkmate.planner.calculator import AttendancePlanner
from bunkmate.planner.models import PlannerInput, PlannerResult, ScenarioResult
from bunkmate.ai.llm_client import LLMClient
from bunkmate.cache.manager import CacheManager
from bunkmate.history.models import Confession, DecisionRecord, FriendVote
from bunkmate.history.store import DecisionStore
from bunkmate.debug import debug_log

log = logging.getLogger(__name__)


class AppOrchestrator:
    """Orchestrates all app components to produce decisions and plans"""

    def __init__(
        self,
        api_key: str,
        weather_api_key: Optional[str] = None,
        weights: Optional[ScoringWeights] = None
    ):
        self.weather_client = OpenWeatherClient(
            api_key=Config.OPENWEATHER_API_KEY if weather_api_key is None else weather_api_key
        )
        self.score_calculator = ScoreCalculator(weights=weights)
        self.planner = AttendancePlanner()
        self.llm_client = LLMClient(api_key=api_key)
        self.cache = CacheManager(weather_ttl_seconds=Config.WEATHER_CACHE_TTL_SECONDS)
        self.store = DecisionStore()

    def get_weather(self, lat: Optional[float] = None, lon: Optional[float] = None) -> dict:
        """
        Get current weather and its bunk score, fetching if the cache is stale.

        Args:
            lat: Latitude (defaults to Config.LOCATION_LAT)
            lon: Longitude (defaults to Config.LOCATION_LON)

        Returns:
            {"weather": WeatherData, "score": int, "fetched_at": datetime}
        """
        lat = Config.LOCATION_LAT if lat is None else lat
        lon = Config.LOCATION_LON if lon is None else lon
        key = self.cache.location_key(lat, lon)

        cached = self.cache.get_weather(key)
        if cached is None:
            cached = self._refresh_weather(key, lat, lon)

        return cached

    def _refresh_weather(self, key: str, lat: float, lon: float) -> dict:
        """Fetch fresh weather, score it and return the new cache entry."""
        debug_log(f"Fetching weather for {key}", "WEATHER")

        weather = self.weather_client.fetch_weather(lat, lon)
        score = calculate_weather_score(weather)

        entry = self.cache.set_weather(key, weather, score)
        log.info(f"Weather cached for {key}: {weather} (score {score})")
        return entry

    def make_decision(
        self,
        user_id: str,
        attendance_percentage: float,
        mood: str,
        days_until_exam: int,
        professor_strictness: str,
        lat: Optional[float] = None,
        lon: Optional[float] = None,
        weather_data: Optional[dict] = None
    ) -> DecisionRecord:
        """
        Run the full decision flow and store the result.

        weather -> bunk score -> decision -> excuse + analysis -> history

        Args:
            weather_data: Reading from get_weather() to score against, fetched when omitted

        Raises:
            ValidationError: inputs outside their documented ranges
        """
        if weather_data is None:
            weather_data = self.get_weather(lat, lon)
        weather = weather_data["weather"]

        inputs = ScoringInput(
            attendance_percentage=attendance_percentage,
            days_until_exam=days_until_exam,
            mood=mood,
            professor_strictness=professor_strictness,
            weather_score=weather_data["score"],
        )
        result = self.score_calculator.evaluate(inputs)

        excuse = self.llm_client.generate_excuse(
            mood=mood,
            weather_condition=weather.condition,
            professor_strictness=professor_strictness,
            attendance_percentage=attendance_percentage,
        )
        analysis = self.llm_client.generate_analysis(
            attendance_percentage=attendance_percentage,
            days_until_exam=days_until_exam,
            mood=mood,
            bunk_score=result.bunk_score,
            decision=result.decision,
        )

        record = DecisionRecord(
            user_id=user_id,
            attendance_percentage=attendance_percentage,
            mood=mood,
            days_until_exam=days_until_exam,
            professor_strictness=professor_strictness,
            bunk_score=result.bunk_score,
            decision=result.decision,
            weather_condition=weather.condition,
            weather_temperature=weather.temperature,
            ai_excuse=excuse,
            ai_analysis=analysis,
        )
        return self.store.add_decision(record)

    def plan_attendance(
        self,
        total_conducted: int,
        attended: int,
        remaining: int,
        threshold: Optional[float] = None
    ) -> PlannerResult:
        """Project attendance for every attend/bunk split of the remaining classes."""
        plan = PlannerInput(
            total_conducted=total_conducted,
            attended=attended,
            remaining=remaining,
            threshold=threshold,
        )
        return self.planner.project(plan)

    def check_scenario(
        self,
        total_conducted: int,
        attended: int,
        remaining: int,
        attend: int,
        threshold: Optional[float] = None
    ) -> ScenarioResult:
        """Final attendance for one custom attend count."""
        plan = PlannerInput(
            total_conducted=total_conducted,
            attended=attended,
            remaining=remaining,
            threshold=threshold,
        )
        return self.planner.scenario(plan, attend)

    def cast_vote(self, decision_id: int, voter_name: str, vote: str) -> FriendVote:
        return self.store.add_vote(decision_id, voter_name, vote)

    def get_votes(self, decision_id: int) -> list[FriendVote]:
        return self.store.get_votes(decision_id)

    def get_history(self, user_id: str) -> list[DecisionRecord]:
        return self.store.get_history(user_id)

    def get_analytics(self, user_id: str) -> dict:
        return self.store.get_analytics(user_id)

    def post_confession(self, user_id: str, text: str) -> Confession:
        return self.store.add_confession(user_id, text)

    def get_confessions(self, limit: int = Config.CONFESSION_PAGE_SIZE, offset: int = 0) -> list[Confession]:
        return self.store.get_confessions(limit, offset)

    def like_confession(self, confession_id: int) -> Confession:
        return self.store.like_confession(confession_id)
