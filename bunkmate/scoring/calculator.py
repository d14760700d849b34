# ABOUTME: Core bunk score calculation and decision mapping
# ABOUTME: Converts attendance, exam proximity, mood, weather and professor signals into a 0-100 score

import logging
import math
from typing import Optional

from bunkmate.scoring.models import (
    ATTEND,
    BUNK,
    RISKY,
    BunkResult,
    ScoringInput,
    ScoringWeights,
)

log = logging.getLogger(__name__)

NEUTRAL_SCORE = 50

MOOD_SCORES = {
    "tired": 70,      # Good reason to bunk
    "lazy": 80,       # Classic bunk mood
    "energetic": 20,  # Should probably attend
}

PROFESSOR_SCORES = {
    "chill": 80,     # More forgiving
    "moderate": 50,
    "strict": 20,    # Risky to bunk
}

# Decision thresholds
BUNK_ABOVE = 70
RISKY_FROM = 50

DECISION_COLORS = {BUNK: "secondary", RISKY: "warning", ATTEND: "danger"}
DECISION_ICONS = {BUNK: "fas fa-check", RISKY: "fas fa-question", ATTEND: "fas fa-times"}


class ScoreCalculator:
    """Calculates the 0-100 bunk score and the decision it implies"""

    def __init__(self, weights: Optional[ScoringWeights] = None):
        self.weights = weights or ScoringWeights()

    def attendance_score(self, percentage: float) -> int:
        """Higher attendance leaves more room to bunk. Below 70% the answer is always no."""
        if percentage >= 90:
            return 90
        if percentage >= 80:
            return 75
        if percentage >= 75:
            return 50  # Policy minimum
        if percentage >= 70:
            return 25
        return 0

    def exam_proximity_score(self, days_until_exam: int) -> int:
        """More days until the exam means more time to catch up"""
        if days_until_exam >= 30:
            return 90
        if days_until_exam >= 14:
            return 75
        if days_until_exam >= 7:
            return 60
        if days_until_exam >= 3:
            return 30
        return 10  # Exam is very close

    def mood_score(self, mood: str) -> int:
        return MOOD_SCORES.get(mood, NEUTRAL_SCORE)

    def professor_score(self, strictness: str) -> int:
        return PROFESSOR_SCORES.get(strictness, NEUTRAL_SCORE)

    def sub_scores(self, inputs: ScoringInput) -> dict[str, float]:
        """Each signal normalized to 0-100 before weighting"""
        return {
            "attendance": self.attendance_score(inputs.attendance_percentage),
            "exam_proximity": self.exam_proximity_score(inputs.days_until_exam),
            "mood": self.mood_score(inputs.mood),
            "weather": inputs.weather_score,
            "professor_strictness": self.professor_score(inputs.professor_strictness),
        }

    def calculate_bunk_score(self, inputs: ScoringInput) -> int:
        """
        Calculate the bunk score (0-100) for one set of inputs.

        Unknown mood or strictness values score neutral (50) instead of
        failing.

        Args:
            inputs: Validated scoring inputs including the weather score

        Returns:
            Integer score from 0 to 100, higher means safer to bunk
        """
        scores = self.sub_scores(inputs)
        w = self.weights

        total = (
            scores["attendance"] * w.attendance
            + scores["exam_proximity"] * w.exam_proximity
            + scores["mood"] * w.mood
            + scores["weather"] * w.weather
            + scores["professor_strictness"] * w.professor_strictness
        )

        # Halves round up
        return int(math.floor(max(0, min(100, total)) + 0.5))

    def get_decision_from_score(self, score: float) -> str:
        """Map a bunk score to bunk (>70), risky (50-70) or attend (<50)"""
        if score > BUNK_ABOVE:
            return BUNK
        if score >= RISKY_FROM:
            return RISKY
        return ATTEND

    def evaluate(self, inputs: ScoringInput) -> BunkResult:
        """Score and decide in one call"""
        score = self.calculate_bunk_score(inputs)
        decision = self.get_decision_from_score(score)
        log.info(f"Bunk score {score} -> {decision}")
        return BunkResult(bunk_score=score, decision=decision, sub_scores=self.sub_scores(inputs))

    def get_decision_color(self, decision: str) -> str:
        return DECISION_COLORS.get(decision, "secondary")

    def get_decision_icon(self, decision: str) -> str:
        return DECISION_ICONS.get(decision, "fas fa-question")
