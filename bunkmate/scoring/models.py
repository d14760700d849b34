# ABOUTME: Data models for bunk score inputs, weights and results
# ABOUTME: Provides structured representation of the five scoring signals and the decision

import math
from dataclasses import dataclass, field

from bunkmate.config import Config
from bunkmate.errors import ValidationError

# Decisions
BUNK = "bunk"
RISKY = "risky"
ATTEND = "attend"
DECISIONS = (BUNK, RISKY, ATTEND)

# Known enum values (anything else scores neutral)
MOODS = ("tired", "lazy", "energetic")
STRICTNESS_LEVELS = ("chill", "moderate", "strict")


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if value is None or not low <= value <= high:
        raise ValidationError(f"{name} must be between {low} and {high}, got {value}", field=name)


@dataclass(frozen=True)
class ScoringWeights:
    """Relative weight of each signal in the bunk score"""
    attendance: float = Config.WEIGHT_ATTENDANCE
    exam_proximity: float = Config.WEIGHT_EXAM_PROXIMITY
    mood: float = Config.WEIGHT_MOOD
    weather: float = Config.WEIGHT_WEATHER
    professor_strictness: float = Config.WEIGHT_PROFESSOR_STRICTNESS

    def __post_init__(self):
        weights = (self.attendance, self.exam_proximity, self.mood, self.weather, self.professor_strictness)
        if any(w < 0 for w in weights):
            raise ValidationError(f"Weights must be non-negative, got {weights}", field="weights")
        if not math.isclose(sum(weights), 1.0, abs_tol=1e-9):
            raise ValidationError(f"Weights must sum to 1.0, got {sum(weights)}", field="weights")


@dataclass
class ScoringInput:
    """Self-reported inputs plus the weather score for one decision"""
    attendance_percentage: float  # 0-100
    days_until_exam: int          # 1-365
    mood: str                     # "tired", "lazy", "energetic"
    professor_strictness: str     # "chill", "moderate", "strict"
    weather_score: float          # 0-100, from the weather collaborator

    def __post_init__(self):
        _check_range("attendancePercentage", self.attendance_percentage, 0, 100)
        _check_range("weatherScore", self.weather_score, 0, 100)
        _check_range("daysUntilExam", self.days_until_exam, 1, Config.MAX_DAYS_UNTIL_EXAM)


@dataclass
class BunkResult:
    """Bunk score (0-100) and the decision it maps to"""
    bunk_score: int
    decision: str
    sub_scores: dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        if not 0 <= self.bunk_score <= 100:
            raise ValueError(f"Score must be 0-100, got {self.bunk_score}")
        if self.decision not in DECISIONS:
            raise ValueError(f"Unknown decision: {self.decision}")

    def to_dict(self) -> dict:
        return {"bunkScore": self.bunk_score, "decision": self.decision}
