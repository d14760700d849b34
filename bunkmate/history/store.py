# ABOUTME: In-memory store for decision history, friend votes, confessions and per-user analytics
# ABOUTME: Per-process only; data is lost on restart

import itertools
import logging
from collections import Counter
from typing import Optional

from bunkmate.config import Config
from bunkmate.errors import ValidationError
from bunkmate.history.models import Confession, DecisionRecord, FriendVote
from bunkmate.scoring.models import BUNK, DECISIONS

log = logging.getLogger(__name__)

WEATHER_REASON = "Weather"
LAZY_REASON = "Lazy mood"
HIGH_ATTENDANCE_REASON = "High attendance"
OTHER_REASON = "Other"


def decision_reason(record: DecisionRecord) -> str:
    """Bucket a decision by its most likely reason"""
    if record.weather_condition and "rain" in record.weather_condition.lower():
        return WEATHER_REASON
    if record.mood == "lazy":
        return LAZY_REASON
    if record.attendance_percentage > 80:
        return HIGH_ATTENDANCE_REASON
    return OTHER_REASON


class DecisionStore:
    """Decision history and friend votes, kept in memory"""

    def __init__(self):
        self._decisions: dict[int, DecisionRecord] = {}
        self._votes: dict[int, list[FriendVote]] = {}
        self._decision_ids = itertools.count(1)
        self._vote_ids = itertools.count(1)
        self._confessions: dict[int, Confession] = {}
        self._confession_ids = itertools.count(1)

    # ==================== Decisions ====================

    def add_decision(self, record: DecisionRecord) -> DecisionRecord:
        """Assign an id and store the record."""
        record.id = next(self._decision_ids)
        self._decisions[record.id] = record
        log.info(f"Stored decision {record.id} for user {record.user_id}: {record.decision}")
        return record

    def get_decision(self, decision_id: int) -> Optional[DecisionRecord]:
        return self._decisions.get(decision_id)

    def get_history(self, user_id: str) -> list[DecisionRecord]:
        """User's decisions, newest first."""
        records = [r for r in self._decisions.values() if r.user_id == user_id]
        return sorted(records, key=lambda r: (r.created_at, r.id), reverse=True)

    # ==================== Friend Votes ====================

    def add_vote(self, decision_id: int, voter_name: str, vote: str) -> FriendVote:
        """
        Record a friend's vote on a decision.

        Raises:
            ValidationError: unknown decision, blank voter name or unknown vote
        """
        if decision_id not in self._decisions:
            raise ValidationError(f"Unknown decision: {decision_id}", field="decisionId")
        if not voter_name or not voter_name.strip():
            raise ValidationError("voterName is required", field="voterName")
        if vote not in DECISIONS:
            raise ValidationError(f"vote must be one of {', '.join(DECISIONS)}, got {vote}", field="vote")

        friend_vote = FriendVote(
            decision_id=decision_id,
            voter_name=voter_name.strip(),
            vote=vote,
            id=next(self._vote_ids),
        )
        self._votes.setdefault(decision_id, []).append(friend_vote)
        return friend_vote

    def get_votes(self, decision_id: int) -> list[FriendVote]:
        return list(self._votes.get(decision_id, []))

    def get_vote_tally(self, decision_id: int) -> dict[str, int]:
        """Vote counts for every decision value, zero-filled."""
        counts = Counter(v.vote for v in self._votes.get(decision_id, []))
        return {decision: counts.get(decision, 0) for decision in DECISIONS}

    # ==================== Confessions ====================

    def add_confession(self, user_id: str, text: str) -> Confession:
        """
        Post a confession to the wall.

        Raises:
            ValidationError: blank text, or text longer than Config.MAX_CONFESSION_LENGTH
        """
        text = (text or "").strip()
        if not text:
            raise ValidationError("text is required", field="text")
        if len(text) > Config.MAX_CONFESSION_LENGTH:
            raise ValidationError(
                f"text must be at most {Config.MAX_CONFESSION_LENGTH} characters, got {len(text)}",
                field="text",
            )

        confession = Confession(user_id=user_id, text=text, id=next(self._confession_ids))
        self._confessions[confession.id] = confession
        log.info(f"Stored confession {confession.id}")
        return confession

    def get_confessions(self, limit: int = Config.CONFESSION_PAGE_SIZE, offset: int = 0) -> list[Confession]:
        """One page of confessions, newest first."""
        ordered = sorted(self._confessions.values(), key=lambda c: (c.created_at, c.id), reverse=True)
        return ordered[offset:offset + limit]

    def like_confession(self, confession_id: int) -> Confession:
        confession = self._confessions.get(confession_id)
        if confession is None:
            raise ValidationError(f"Unknown confession: {confession_id}", field="confessionId")
        confession.likes += 1
        return confession

    # ==================== Analytics ====================

    def get_analytics(self, user_id: str) -> dict:
        """
        Summarize a user's decisions.

        Returns:
            {
                "totalBunks": int,
                "attendanceRate": int (percent of non-bunk decisions, 100 if none),
                "reasonBreakdown": [{"reason": str, "percentage": int}, ...],
                "weeklyPattern": [int] * 7 (bunks per weekday, Sunday first)
            }
        """
        decisions = [r for r in self._decisions.values() if r.user_id == user_id]
        total = len(decisions)
        bunks = [r for r in decisions if r.decision == BUNK]

        attendance_rate = round((total - len(bunks)) / total * 100) if total else 100

        reason_counts = Counter(decision_reason(r) for r in decisions)
        reason_breakdown = [
            {"reason": reason, "percentage": round(count / total * 100)}
            for reason, count in reason_counts.items()
        ]

        weekly_pattern = [0] * 7
        for record in bunks:
            # isoweekday: Monday=1 .. Sunday=7, so Sunday lands on index 0
            weekly_pattern[record.created_at.isoweekday() % 7] += 1

        return {
            "totalBunks": len(bunks),
            "attendanceRate": attendance_rate,
            "reasonBreakdown": reason_breakdown,
            "weeklyPattern": weekly_pattern,
        }
