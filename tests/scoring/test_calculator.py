# ABOUTME: Tests for bunk score calculation and decision mapping
# ABOUTME: Validates sub-score tiers, weighting, clamping and decision thresholds

import pytest

from bunkmate.scoring.calculator import ScoreCalculator
from bunkmate.scoring.models import ScoringInput, ScoringWeights


def make_input(
    attendance=80.0,
    days=14,
    mood="tired",
    strictness="moderate",
    weather=50.0
) -> ScoringInput:
    return ScoringInput(
        attendance_percentage=attendance,
        days_until_exam=days,
        mood=mood,
        professor_strictness=strictness,
        weather_score=weather,
    )


def test_best_case_inputs_get_maximum_score():
    """
    95% attendance, exam 60 days away, lazy, chill professor, terrible weather.
    Every sub-score is at its top tier: 90*.4 + 90*.2 + 80*.15 + 100*.15 + 80*.1 = 89
    """
    calculator = ScoreCalculator()
    score = calculator.calculate_bunk_score(make_input(95, 60, "lazy", "chill", 100))

    assert score == 89
    assert calculator.get_decision_from_score(score) == "bunk"


def test_worst_case_inputs_get_minimum_score():
    """Low attendance, exam tomorrow, energetic, strict professor, perfect weather"""
    calculator = ScoreCalculator()
    score = calculator.calculate_bunk_score(make_input(50, 1, "energetic", "strict", 0))

    # 0 + 10*.2 + 20*.15 + 0 + 20*.1 = 7
    assert score == 7
    assert calculator.get_decision_from_score(score) == "attend"


def test_score_is_always_an_integer_in_range():
    calculator = ScoreCalculator()

    for attendance in (0, 69.9, 70, 75, 80, 90, 100):
        for days in (1, 3, 7, 14, 30, 365):
            for weather in (0, 50, 100):
                score = calculator.calculate_bunk_score(make_input(attendance, days, weather=weather))
                assert isinstance(score, int)
                assert 0 <= score <= 100


@pytest.mark.parametrize("percentage,expected", [
    (100, 90), (90, 90), (89.9, 75), (80, 75), (79.9, 50),
    (75, 50), (74.9, 25), (70, 25), (69.9, 0), (0, 0),
])
def test_attendance_tiers_round_down_at_edges(percentage, expected):
    assert ScoreCalculator().attendance_score(percentage) == expected


@pytest.mark.parametrize("days,expected", [
    (60, 90), (30, 90), (29, 75), (14, 75), (13, 60),
    (7, 60), (6, 30), (3, 30), (2, 10), (0, 10),
])
def test_exam_proximity_tiers(days, expected):
    assert ScoreCalculator().exam_proximity_score(days) == expected


def test_mood_scores():
    calculator = ScoreCalculator()

    assert calculator.mood_score("tired") == 70
    assert calculator.mood_score("lazy") == 80
    assert calculator.mood_score("energetic") == 20


def test_professor_scores():
    calculator = ScoreCalculator()

    assert calculator.professor_score("chill") == 80
    assert calculator.professor_score("moderate") == 50
    assert calculator.professor_score("strict") == 20


def test_unknown_mood_and_strictness_score_neutral():
    """Unrecognized values fall back to 50 instead of failing"""
    calculator = ScoreCalculator()

    assert calculator.mood_score("hungover") == 50
    assert calculator.professor_score("") == 50

    neutral = calculator.calculate_bunk_score(make_input(mood="???", strictness="unknown"))
    explicit = calculator.calculate_bunk_score(make_input(mood="tired", strictness="moderate"))
    # tired (70) vs unknown (50) differs only in the mood term
    assert explicit - neutral == 3


def test_half_points_round_up():
    """75% attendance, 7 days, tired, moderate, weather 0 -> 20 + 12 + 10.5 + 0 + 5 = 47.5"""
    calculator = ScoreCalculator()
    score = calculator.calculate_bunk_score(make_input(75, 7, "tired", "moderate", 0))

    assert score == 48


class TestDecisionThresholds:
    """Tests for mapping scores to bunk / risky / attend"""

    def test_above_seventy_is_bunk(self):
        assert ScoreCalculator().get_decision_from_score(71) == "bunk"
        assert ScoreCalculator().get_decision_from_score(100) == "bunk"

    def test_exactly_seventy_is_risky(self):
        assert ScoreCalculator().get_decision_from_score(70) == "risky"

    def test_exactly_fifty_is_risky(self):
        assert ScoreCalculator().get_decision_from_score(50) == "risky"

    def test_below_fifty_is_attend(self):
        assert ScoreCalculator().get_decision_from_score(49) == "attend"
        assert ScoreCalculator().get_decision_from_score(0) == "attend"


class TestWeights:
    """Tests for injectable weights"""

    def test_default_weights(self):
        weights = ScoringWeights()

        assert weights.attendance == 0.40
        assert weights.exam_proximity == 0.20
        assert weights.mood == 0.15
        assert weights.weather == 0.15
        assert weights.professor_strictness == 0.10

    def test_custom_weights_change_the_score(self):
        weather_only = ScoringWeights(
            attendance=0.0,
            exam_proximity=0.0,
            mood=0.0,
            weather=1.0,
            professor_strictness=0.0,
        )
        calculator = ScoreCalculator(weights=weather_only)

        assert calculator.calculate_bunk_score(make_input(weather=63)) == 63


def test_evaluate_returns_score_and_decision():
    calculator = ScoreCalculator()
    result = calculator.evaluate(make_input(95, 60, "lazy", "chill", 100))

    assert result.bunk_score == 89
    assert result.decision == "bunk"
    assert result.sub_scores["attendance"] == 90
    assert result.to_dict() == {"bunkScore": 89, "decision": "bunk"}


def test_same_input_gives_same_output():
    calculator = ScoreCalculator()
    inputs = make_input(82, 10, "lazy", "strict", 75)

    assert calculator.calculate_bunk_score(inputs) == calculator.calculate_bunk_score(inputs)
    assert calculator.evaluate(inputs) == calculator.evaluate(inputs)


def test_decision_color_and_icon():
    calculator = ScoreCalculator()

    assert calculator.get_decision_color("bunk") == "secondary"
    assert calculator.get_decision_color("risky") == "warning"
    assert calculator.get_decision_color("attend") == "danger"
    assert calculator.get_decision_color("???") == "secondary"
    assert calculator.get_decision_icon("attend") == "fas fa-times"
    assert calculator.get_decision_icon("???") == "fas fa-question"
