# ABOUTME: Tests for the attendance projection engine
# ABOUTME: Validates table shape, monotonicity, must-attend search, recommendations and row status

import pytest

from bunkmate.errors import ValidationError
from bunkmate.planner.calculator import AttendancePlanner, attendance_percentage
from bunkmate.planner.models import PlannerInput


def project(total_conducted, attended, remaining, threshold=75, **planner_kwargs):
    planner = AttendancePlanner(**planner_kwargs)
    return planner.project(PlannerInput(
        total_conducted=total_conducted,
        attended=attended,
        remaining=remaining,
        threshold=threshold,
    ))


class TestProjectionTable:
    """Tests for the attend/bunk projection table"""

    def test_table_has_one_row_per_attend_count(self):
        """60 conducted, 45 attended, 20 remaining -> rows for 0..20 attended"""
        result = project(60, 45, 20)

        assert len(result.table) == 21
        assert [row.attend for row in result.table] == list(range(21))
        assert all(row.attend + row.bunk == 20 for row in result.table)

    def test_predicted_uses_full_term_denominator(self):
        result = project(60, 45, 20)

        # Every row divides by 60 + 20 = 80
        assert result.table[0].predicted == pytest.approx(45 / 80 * 100)
        assert result.table[10].predicted == pytest.approx(55 / 80 * 100)
        assert result.table[20].predicted == pytest.approx(65 / 80 * 100)

    def test_predictions_never_decrease(self):
        result = project(60, 45, 20)
        predictions = [row.predicted for row in result.table]

        assert predictions == sorted(predictions)

    def test_max_and_min_come_from_table_ends(self):
        result = project(60, 45, 20)

        assert result.max_possible == result.table[20].predicted
        assert result.min_possible == result.table[0].predicted
        assert result.max_possible == pytest.approx(81.25)
        assert result.min_possible == pytest.approx(56.25)

    def test_no_remaining_classes_gives_single_row(self):
        result = project(40, 32, 0)

        assert len(result.table) == 1
        assert result.table[0].bunk == 0
        assert result.max_possible == result.min_possible == pytest.approx(80.0)

    def test_nothing_conducted_yet_is_zero_percent(self):
        """No division by zero when no classes have happened"""
        result = project(0, 0, 0)

        assert result.current_attendance == 0
        assert result.table[0].predicted == 0

    def test_zero_conducted_with_remaining_classes(self):
        result = project(0, 0, 10)

        assert result.current_attendance == 0
        assert result.table[10].predicted == pytest.approx(100.0)
        assert result.must_attend == 8  # 8/10 = 80% is the first >= 75%

    def test_attended_above_conducted_is_accepted(self):
        result = project(10, 12, 5)

        assert result.current_attendance == pytest.approx(120.0)
        assert len(result.table) == 6


class TestMustAttend:
    """Tests for the smallest attend count reaching the threshold"""

    def test_must_attend_is_smallest_qualifying_row(self):
        """Need 60 of 80 for 75%: 45 + 15 = 60"""
        result = project(60, 45, 20)

        assert result.must_attend == 15
        assert result.table[15].predicted >= 75
        assert result.table[14].predicted < 75
        assert result.is_reachable

    def test_unreachable_threshold_reports_remaining_plus_one(self):
        result = project(60, 30, 10)

        # Best case 40/70 = 57%
        assert result.must_attend == 11
        assert not result.is_reachable
        assert all(row.predicted < 75 for row in result.table)

    def test_already_safe_needs_zero(self):
        result = project(60, 58, 10)

        assert result.must_attend == 0

    def test_threshold_defaults_to_75(self):
        plan = PlannerInput(total_conducted=60, attended=45, remaining=20)

        assert plan.threshold == 75
        assert AttendancePlanner().project(plan).must_attend == 15


class TestRecommendation:
    """Tests for recommendation selection (first match wins)"""

    def test_comfortable_margin(self):
        """90% now, well above 75 + 5"""
        result = project(50, 45, 10)

        assert result.icon == "✅"
        # Need 45 + x >= 45 (75% of 60), so all 11 rows qualify -> 10 safe bunks
        assert result.safe_bunks == 10
        assert "10" in result.recommendation

    def test_borderline_margin(self):
        """77.5% now, above 75 but within 5"""
        result = project(40, 31, 10)

        assert result.icon == "⚠️"
        # 31 + x >= 37.5 -> x >= 7, rows 7..10 qualify -> 3 safe bunks
        assert result.must_attend == 7
        assert result.safe_bunks == 3
        assert "3" in result.recommendation

    def test_exactly_at_threshold_is_borderline(self):
        result = project(40, 30, 0)

        assert result.current_attendance == 75
        assert result.icon == "⚠️"
        assert result.safe_bunks == 0

    def test_unreachable(self):
        result = project(60, 30, 10)

        assert result.icon == "🔄"
        assert "out of reach" in result.recommendation

    def test_must_attend_message(self):
        """70% now, need 60 of 80 -> attend 18 more"""
        result = project(60, 42, 20)

        assert result.icon == "❌"
        assert result.must_attend == 18
        assert "18" in result.recommendation
        assert "20" in result.recommendation

    def test_comfortable_margin_is_configurable(self):
        """77.5% counts as comfortable with a 2-point margin"""
        result = project(40, 31, 10, comfortable_margin=2)

        assert result.icon == "✅"


class TestRowClassification:
    """Tests for Safe / Borderline / Unsafe row status"""

    def test_status_bands_with_default_margin(self):
        """Rows step by 5%: 70, 75, 80 against a 75.5% threshold"""
        planner = AttendancePlanner(borderline_margin=1.0)
        result = planner.project(PlannerInput(total_conducted=0, attended=0, remaining=20, threshold=75.5))

        assert planner.classify_row(result.table[16], 75.5) == "Safe"
        assert planner.classify_row(result.table[15], 75.5) == "Borderline"
        assert planner.classify_row(result.table[14], 75.5) == "Unsafe"

    def test_wider_margin_widens_borderline_band(self):
        planner = AttendancePlanner(borderline_margin=6.0)
        result = planner.project(PlannerInput(total_conducted=0, attended=0, remaining=20, threshold=75.5))

        assert planner.classify_row(result.table[14], 75.5) == "Borderline"
        assert planner.classify_row(result.table[13], 75.5) == "Unsafe"

    def test_must_attend_ignores_borderline_band(self):
        """Borderline rows never count toward must-attend"""
        planner = AttendancePlanner(borderline_margin=5.0)
        result = planner.project(PlannerInput(total_conducted=0, attended=0, remaining=20, threshold=75))

        assert result.must_attend == 15


class TestScenario:
    """Tests for the custom attend/bunk check"""

    def test_scenario_matches_table_row(self):
        planner = AttendancePlanner()
        plan = PlannerInput(total_conducted=60, attended=45, remaining=20)
        scenario = planner.scenario(plan, 12)

        assert scenario.attend == 12
        assert scenario.bunk == 8
        assert scenario.predicted == planner.project(plan).table[12].predicted

    def test_scenario_rejects_attend_above_remaining(self):
        plan = PlannerInput(total_conducted=60, attended=45, remaining=20)

        with pytest.raises(ValidationError) as exc:
            AttendancePlanner().scenario(plan, 21)
        assert exc.value.field == "attend"

    def test_scenario_rejects_negative_attend(self):
        plan = PlannerInput(total_conducted=60, attended=45, remaining=20)

        with pytest.raises(ValidationError):
            AttendancePlanner().scenario(plan, -1)


def test_attendance_percentage_guards_zero_denominator():
    assert attendance_percentage(5, 0) == 0.0
    assert attendance_percentage(3, 4) == pytest.approx(75.0)


def test_projection_is_repeatable():
    planner = AttendancePlanner()
    plan = PlannerInput(total_conducted=60, attended=45, remaining=20)

    assert planner.project(plan) == planner.project(plan)
