# ABOUTME: Pydantic request bodies for the JSON API
# ABOUTME: camelCase on the wire, snake_case attributes, range checks declared per field

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bunkmate.config import Config
from bunkmate.planner.models import PlannerInput
from bunkmate.scoring.models import ScoringInput


class ApiRequest(BaseModel):
    """Base for request bodies: accepts camelCase keys, strips string whitespace"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class BunkScoreRequest(ApiRequest):
    attendance_percentage: float = Field(..., ge=0, le=100, description="Current attendance (%)")
    days_until_exam: int = Field(..., ge=1, le=Config.MAX_DAYS_UNTIL_EXAM)
    mood: str = Field(..., description="tired, lazy or energetic; anything else scores neutral")
    professor_strictness: str = Field(..., description="chill, moderate or strict")
    weather_score: float = Field(..., ge=0, le=100)

    def to_input(self) -> ScoringInput:
        return ScoringInput(
            attendance_percentage=self.attendance_percentage,
            days_until_exam=self.days_until_exam,
            mood=self.mood,
            professor_strictness=self.professor_strictness,
            weather_score=self.weather_score,
        )


class PlannerRequest(ApiRequest):
    total_conducted: int = Field(..., ge=0)
    attended: int = Field(..., ge=0)
    remaining: int = Field(..., ge=0, le=Config.MAX_REMAINING_CLASSES)
    threshold: Optional[float] = Field(None, ge=0, le=100, description="Defaults to Config.DEFAULT_THRESHOLD")

    def to_input(self) -> PlannerInput:
        return PlannerInput(
            total_conducted=self.total_conducted,
            attended=self.attended,
            remaining=self.remaining,
            threshold=self.threshold,
        )


class ScenarioRequest(PlannerRequest):
    attend: int = Field(..., ge=0, description="Remaining classes to attend, at most remaining")


class DecisionRequest(ApiRequest):
    user_id: str = Field(..., min_length=1)
    attendance_percentage: float = Field(..., ge=0, le=100)
    days_until_exam: int = Field(..., ge=1, le=Config.MAX_DAYS_UNTIL_EXAM)
    mood: str
    professor_strictness: str
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lon: Optional[float] = Field(None, ge=-180, le=180)


class VoteRequest(ApiRequest):
    decision_id: int
    voter_name: str = Field(..., min_length=1)
    vote: Literal["bunk", "risky", "attend"]


class ConfessionRequest(ApiRequest):
    user_id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1, max_length=Config.MAX_CONFESSION_LENGTH)
