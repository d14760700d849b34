# ABOUTME: Data models for recorded bunk decisions, friend votes and confessions
# ABOUTME: Records are what the history store keeps; the scoring core never reads them back

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DecisionRecord:
    """One computed decision with its inputs, weather and generated text"""
    user_id: str
    attendance_percentage: float
    mood: str
    days_until_exam: int
    professor_strictness: str
    bunk_score: int
    decision: str
    weather_condition: Optional[str] = None
    weather_temperature: Optional[float] = None
    ai_excuse: Optional[str] = None
    ai_analysis: Optional[str] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "attendancePercentage": self.attendance_percentage,
            "mood": self.mood,
            "daysUntilExam": self.days_until_exam,
            "professorStrictness": self.professor_strictness,
            "weatherCondition": self.weather_condition,
            "weatherTemperature": self.weather_temperature,
            "bunkScore": self.bunk_score,
            "decision": self.decision,
            "aiExcuse": self.ai_excuse,
            "aiAnalysis": self.ai_analysis,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass
class FriendVote:
    """A friend's vote on somebody's decision"""
    decision_id: int
    voter_name: str
    vote: str  # "bunk", "risky" or "attend"
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "decisionId": self.decision_id,
            "voterName": self.voter_name,
            "vote": self.vote,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass
class Confession:
    """Anonymous bunk story on the confession wall"""
    user_id: str
    text: str
    likes: int = 0
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        # Posted anonymously, the author stays out of the payload
        return {
            "id": self.id,
            "text": self.text,
            "likes": self.likes,
            "createdAt": self.created_at.isoformat(),
        }
