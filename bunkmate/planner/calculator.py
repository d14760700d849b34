# ABOUTME: Attendance projection across every attend/bunk split of the remaining classes
# ABOUTME: Derives the must-attend count, a recommendation, and Safe/Borderline/Unsafe row status

from typing import Optional

from bunkmate.config import Config
from bunkmate.debug import debug_log
from bunkmate.errors import ValidationError
from bunkmate.planner.models import (
    BORDERLINE,
    SAFE,
    UNSAFE,
    PlannerInput,
    PlannerResult,
    PlannerRow,
    ScenarioResult,
)


def attendance_percentage(attended: int, conducted: int) -> float:
    """Attendance as a percentage, 0 when nothing has been conducted yet"""
    if conducted <= 0:
        return 0.0
    return attended / conducted * 100


class AttendancePlanner:
    """Projects final attendance and recommends a safe minimum to attend"""

    def __init__(
        self,
        borderline_margin: Optional[float] = None,
        comfortable_margin: Optional[float] = None
    ):
        self.borderline_margin = Config.BORDERLINE_MARGIN if borderline_margin is None else borderline_margin
        self.comfortable_margin = Config.COMFORTABLE_MARGIN if comfortable_margin is None else comfortable_margin

    def current_attendance(self, total_conducted: int, attended: int) -> float:
        return attendance_percentage(attended, total_conducted)

    def build_table(self, plan: PlannerInput) -> list[PlannerRow]:
        """
        One row per possible attend count, 0 through remaining.

        Every remaining class is assumed to be conducted whatever the split,
        so all rows share the same denominator and only the attended count
        varies.
        """
        conducted_final = plan.total_conducted + plan.remaining
        return [
            PlannerRow(
                attend=x,
                bunk=plan.remaining - x,
                predicted=attendance_percentage(plan.attended + x, conducted_final),
            )
            for x in range(plan.remaining + 1)
        ]

    def find_must_attend(self, table: list[PlannerRow], threshold: float) -> int:
        """Smallest attend count reaching the threshold, or len(table) if none does"""
        for row in table:
            if row.predicted >= threshold:
                return row.attend
        return len(table)

    def classify_row(self, row: PlannerRow, threshold: float) -> str:
        """Safe at or above threshold, Borderline within the margin below it, else Unsafe"""
        if row.predicted >= threshold:
            return SAFE
        if row.predicted >= threshold - self.borderline_margin:
            return BORDERLINE
        return UNSAFE

    def project(self, plan: PlannerInput) -> PlannerResult:
        """
        Project final attendance for every attend/bunk split of the remaining classes.

        Args:
            plan: Validated class counts and threshold

        Returns:
            PlannerResult with the full table, best/worst case, must-attend
            count (remaining + 1 when unreachable) and a recommendation
        """
        threshold = plan.threshold
        current = self.current_attendance(plan.total_conducted, plan.attended)
        table = self.build_table(plan)

        max_possible = table[plan.remaining].predicted
        min_possible = table[0].predicted
        must_attend = self.find_must_attend(table, threshold)

        safe_rows = sum(1 for row in table if row.predicted >= threshold)
        safe_bunks = max(0, safe_rows - 1)

        recommendation, icon = self._recommend(
            current=current,
            threshold=threshold,
            max_possible=max_possible,
            must_attend=must_attend,
            remaining=plan.remaining,
            safe_bunks=safe_bunks,
        )

        debug_log(
            f"Projected {len(table)} rows: current={current:.2f} max={max_possible:.2f} "
            f"min={min_possible:.2f} must_attend={must_attend}",
            "PLANNER"
        )

        return PlannerResult(
            table=table,
            current_attendance=current,
            max_possible=max_possible,
            min_possible=min_possible,
            must_attend=must_attend,
            recommendation=recommendation,
            icon=icon,
            threshold=threshold,
            safe_bunks=safe_bunks,
        )

    def scenario(self, plan: PlannerInput, attend: int) -> ScenarioResult:
        """Final attendance if exactly `attend` of the remaining classes are attended"""
        if attend is None or attend < 0:
            raise ValidationError(f"attend must be a non-negative integer, got {attend}", field="attend")
        if attend > plan.remaining:
            raise ValidationError(
                f"attend ({attend}) cannot exceed remaining classes ({plan.remaining})",
                field="attend",
            )

        conducted_final = plan.total_conducted + plan.remaining
        return ScenarioResult(
            attend=attend,
            bunk=plan.remaining - attend,
            predicted=attendance_percentage(plan.attended + attend, conducted_final),
        )

    def _recommend(
        self,
        current: float,
        threshold: float,
        max_possible: float,
        must_attend: int,
        remaining: int,
        safe_bunks: int
    ) -> tuple[str, str]:
        """Pick the recommendation message and icon, first match wins"""
        if current >= threshold + self.comfortable_margin:
            return (
                f"You're comfortably above {threshold:g}% at {current:.2f}%. "
                f"You can safely bunk {safe_bunks} of the next {remaining} classes.",
                "✅",
            )

        if current >= threshold:
            return (
                f"You're just above {threshold:g}% at {current:.2f}%. "
                f"You can bunk {safe_bunks} of the next {remaining} classes, but there's little margin.",
                "⚠️",
            )

        if max_possible < threshold:
            return (
                f"Even attending all {remaining} remaining classes only gets you to {max_possible:.2f}%. "
                f"{threshold:g}% is out of reach this term.",
                "🔄",
            )

        # Only reachable if the table and max_possible ever disagree
        if must_attend > remaining:
            return (
                "You can't afford any more absences. Attend every remaining class.",
                "🛑",
            )

        return (
            f"You must attend at least {must_attend} of the next {remaining} classes to reach {threshold:g}%.",
            "❌",
        )
