# ABOUTME: JSON API handlers for bunk scoring, attendance planning, decisions, votes and confessions
# ABOUTME: Handlers take validated request models, register_routes mounts them on NiceGUI's FastAPI app

import asyncio
import logging
from typing import Callable, Optional

from fastapi import Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bunkmate.config import Config
from bunkmate.errors import ValidationError
from bunkmate.orchestrator import AppOrchestrator
from bunkmate.schemas import (
    BunkScoreRequest,
    ConfessionRequest,
    DecisionRequest,
    PlannerRequest,
    ScenarioRequest,
    VoteRequest,
)

log = logging.getLogger(__name__)

# Location prefixes FastAPI adds to validation errors
_LOCATION_PARTS = {"body", "query", "path"}


def error_details(errors: list[dict]) -> list[dict]:
    """Flatten pydantic error dicts into {field, message} pairs"""
    details = []
    for error in errors:
        field = ".".join(str(part) for part in error.get("loc", ()) if part not in _LOCATION_PARTS)
        details.append({"field": field or None, "message": error.get("msg", "Invalid value")})
    return details


def invalid_input(errors: list[dict]) -> JSONResponse:
    return JSONResponse({"message": "Invalid input data", "errors": errors}, status_code=400)


# ==================== Handlers ====================

def compute_bunk_score(orchestrator: AppOrchestrator, body: BunkScoreRequest) -> dict:
    """ComputeBunkScore: {bunkScore, decision} for caller-supplied inputs."""
    return orchestrator.score_calculator.evaluate(body.to_input()).to_dict()


def compute_attendance_plan(orchestrator: AppOrchestrator, body: PlannerRequest) -> dict:
    """ComputeAttendancePlan: full PlannerResult as JSON."""
    return orchestrator.planner.project(body.to_input()).to_dict()


def compute_scenario(orchestrator: AppOrchestrator, body: ScenarioRequest) -> dict:
    return orchestrator.planner.scenario(body.to_input(), body.attend).to_dict()


def create_decision(orchestrator: AppOrchestrator, body: DecisionRequest) -> dict:
    # One weather snapshot feeds both the score and the response
    weather_data = orchestrator.get_weather(body.lat, body.lon)
    record = orchestrator.make_decision(
        user_id=body.user_id,
        attendance_percentage=body.attendance_percentage,
        mood=body.mood,
        days_until_exam=body.days_until_exam,
        professor_strictness=body.professor_strictness,
        weather_data=weather_data,
    )
    return {**record.to_dict(), "weather": weather_data["weather"].to_dict()}


def get_weather(orchestrator: AppOrchestrator, lat: Optional[float] = None, lon: Optional[float] = None) -> dict:
    data = orchestrator.get_weather(lat, lon)
    return {**data["weather"].to_dict(), "weatherScore": data["score"]}


def create_vote(orchestrator: AppOrchestrator, body: VoteRequest) -> dict:
    vote = orchestrator.cast_vote(
        decision_id=body.decision_id,
        voter_name=body.voter_name,
        vote=body.vote,
    )
    return vote.to_dict()


def list_votes(orchestrator: AppOrchestrator, decision_id: int) -> dict:
    return {
        "votes": [v.to_dict() for v in orchestrator.get_votes(decision_id)],
        "tally": orchestrator.store.get_vote_tally(decision_id),
    }


def list_history(orchestrator: AppOrchestrator, user_id: str) -> list[dict]:
    return [r.to_dict() for r in orchestrator.get_history(user_id)]


def create_confession(orchestrator: AppOrchestrator, body: ConfessionRequest) -> dict:
    return orchestrator.post_confession(body.user_id, body.text).to_dict()


def list_confessions(orchestrator: AppOrchestrator, limit: int, offset: int) -> list[dict]:
    return [c.to_dict() for c in orchestrator.get_confessions(limit, offset)]


def like_confession(orchestrator: AppOrchestrator, confession_id: int) -> dict:
    confession = orchestrator.like_confession(confession_id)
    return {"message": "Confession liked successfully", "likes": confession.likes}


# ==================== Routing ====================

def respond(handler: Callable, *args) -> JSONResponse:
    """Run a handler, mapping ValidationError to 400 and anything else to 500."""
    try:
        return JSONResponse(handler(*args))
    except ValidationError as e:
        log.info(f"Rejected request to {handler.__name__}: {e}")
        return invalid_input([e.to_dict()])
    except Exception:
        log.exception(f"Error in {handler.__name__}")
        return JSONResponse({"message": f"Failed to {handler.__name__.replace('_', ' ')}"}, status_code=500)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or out-of-range request bodies get the same 400 shape as ValidationError."""
    errors = error_details(exc.errors())
    log.info(f"Rejected request: {errors}")
    return invalid_input(errors)


def register_routes(app, orchestrator: AppOrchestrator) -> None:
    """Mount the JSON API on a FastAPI app (NiceGUI's `app`)."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.post('/api/bunk-score')
    async def bunk_score(body: BunkScoreRequest):
        return respond(compute_bunk_score, orchestrator, body)

    @app.post('/api/attendance-planner')
    async def attendance_planner(body: PlannerRequest):
        return respond(compute_attendance_plan, orchestrator, body)

    @app.post('/api/attendance-planner/scenario')
    async def attendance_scenario(body: ScenarioRequest):
        return respond(compute_scenario, orchestrator, body)

    @app.get('/api/weather')
    async def weather(
        lat: Optional[float] = Query(None, ge=-90, le=90),
        lon: Optional[float] = Query(None, ge=-180, le=180)
    ):
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, respond, get_weather, orchestrator, lat, lon)

    @app.post('/api/bunk-decision')
    async def bunk_decision(body: DecisionRequest):
        # Weather and LLM calls block, keep them off the event loop
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, respond, create_decision, orchestrator, body)

    @app.get('/api/bunk-history/{user_id}')
    async def bunk_history(user_id: str):
        return respond(list_history, orchestrator, user_id)

    @app.post('/api/friend-vote')
    async def friend_vote(body: VoteRequest):
        return respond(create_vote, orchestrator, body)

    @app.get('/api/friend-votes/{decision_id}')
    async def friend_votes(decision_id: int):
        return respond(list_votes, orchestrator, decision_id)

    @app.get('/api/analytics/{user_id}')
    async def analytics(user_id: str):
        return respond(orchestrator.get_analytics, user_id)

    @app.post('/api/confessions')
    async def confessions_create(body: ConfessionRequest):
        return respond(create_confession, orchestrator, body)

    @app.get('/api/confessions')
    async def confessions_list(
        limit: int = Query(Config.CONFESSION_PAGE_SIZE, ge=1, le=50),
        offset: int = Query(0, ge=0)
    ):
        return respond(list_confessions, orchestrator, limit, offset)

    @app.post('/api/confessions/{confession_id}/like')
    async def confessions_like(confession_id: int):
        return respond(like_confession, orchestrator, confession_id)
