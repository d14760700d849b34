# ABOUTME: Data models for attendance planning inputs, projection rows and results
# ABOUTME: Validates class counts and threshold ranges when the input is built

from dataclasses import dataclass

from bunkmate.config import Config
from bunkmate.errors import ValidationError

# Row status labels for the projection table
SAFE = "Safe"
BORDERLINE = "Borderline"
UNSAFE = "Unsafe"

STATUS_ICONS = {SAFE: "✅", BORDERLINE: "⚠️", UNSAFE: "❌"}


@dataclass
class PlannerInput:
    """Class counts so far plus the attendance threshold to stay above"""
    total_conducted: int
    attended: int
    remaining: int
    threshold: float = Config.DEFAULT_THRESHOLD

    def __post_init__(self):
        # attended > total_conducted is tolerated, only negatives are rejected
        for name, value in (
            ("totalConducted", self.total_conducted),
            ("attended", self.attended),
            ("remaining", self.remaining),
        ):
            if value is None or value < 0:
                raise ValidationError(f"{name} must be a non-negative integer, got {value}", field=name)

        if self.remaining > Config.MAX_REMAINING_CLASSES:
            raise ValidationError(
                f"remaining must be at most {Config.MAX_REMAINING_CLASSES}, got {self.remaining}",
                field="remaining",
            )

        if self.threshold is None:
            self.threshold = Config.DEFAULT_THRESHOLD
        if not 0 <= self.threshold <= 100:
            raise ValidationError(f"threshold must be between 0 and 100, got {self.threshold}", field="threshold")


@dataclass
class PlannerRow:
    """Final attendance if `attend` of the remaining classes are attended"""
    attend: int
    bunk: int
    predicted: float

    def to_dict(self) -> dict:
        return {"attend": self.attend, "bunk": self.bunk, "predicted": self.predicted}


@dataclass
class PlannerResult:
    """Projection table plus the must-attend count and recommendation"""
    table: list[PlannerRow]
    current_attendance: float
    max_possible: float
    min_possible: float
    must_attend: int  # remaining + 1 when the threshold is out of reach
    recommendation: str
    icon: str
    threshold: float = Config.DEFAULT_THRESHOLD
    safe_bunks: int = 0

    @property
    def remaining(self) -> int:
        return len(self.table) - 1

    @property
    def is_reachable(self) -> bool:
        return self.must_attend <= self.remaining

    def to_dict(self) -> dict:
        return {
            "table": [row.to_dict() for row in self.table],
            "currentAttendance": self.current_attendance,
            "maxPossible": self.max_possible,
            "minPossible": self.min_possible,
            "mustAttend": self.must_attend,
            "recommendation": self.recommendation,
            "icon": self.icon,
            "threshold": self.threshold,
            "safeBunks": self.safe_bunks,
        }


@dataclass
class ScenarioResult:
    """Outcome of one custom attend/bunk split"""
    attend: int
    bunk: int
    predicted: float

    def to_dict(self) -> dict:
        return {"attend": self.attend, "bunk": self.bunk, "predicted": self.predicted}
