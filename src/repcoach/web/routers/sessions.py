"""Workout session routes."""

from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, field_validator

from ...config import get_settings
from ...data import BUILTIN_TEMPLATES, get_template
from ...metrics.training import session_totals
from ...models.workout import SessionStatus, WorkoutSession
from ...services.persistence import SessionPersistenceAdapter, build_logs
from ...utils.timestamps import to_local_naive
from ..deps import get_current_user_id

router = APIRouter(tags=["sessions"])


class CompletedWorkout(BaseModel):
    """A finished workout as reported by a client."""

    template_id: str
    completed_sets: list[int]
    started_at: datetime
    completed_at: datetime
    notes: str | None = None

    @field_validator("started_at", "completed_at")
    @classmethod
    def to_local_time(cls, value: datetime) -> datetime:
        return to_local_naive(value)


@router.get("/templates")
async def list_templates():
    """Built-in workout plans."""
    return {"templates": [t.to_dict() for t in BUILTIN_TEMPLATES]}


@router.post("/sessions", status_code=201)
async def save_session(
    body: CompletedWorkout,
    user_id: str = Depends(get_current_user_id),
):
    """Save a completed workout for the signed-in user.

    The user is identified by the ``X-User-Id`` header.
    """
    template = get_template(body.template_id)
    if template is None:
        return JSONResponse(
            status_code=404, content={"error": f"Unknown template: {body.template_id}"}
        )

    logs = build_logs(template, body.completed_sets)
    totals = session_totals(logs)
    session = WorkoutSession(
        user_id=user_id,
        workout_name=template.name,
        workout_template_id=template.id,
        started_at=body.started_at,
        completed_at=body.completed_at,
        duration_minutes=int(
            max(0, (body.completed_at - body.started_at).total_seconds()) // 60
        ),
        total_sets=totals.total_sets,
        total_reps=totals.total_reps,
        total_volume=totals.total_volume,
        notes=body.notes,
        status=SessionStatus.COMPLETED,
        exercises=logs,
    )

    adapter = SessionPersistenceAdapter()
    saved = await adapter.save(session)
    if not saved.success:
        return JSONResponse(status_code=503, content={"error": saved.error})

    records = await adapter.record_personal_records(saved.data)
    return {
        "session": saved.data.to_dict(),
        "personal_records": [r.to_dict() for r in records.data] if records.success else [],
    }


@router.get("/sessions")
async def list_sessions(
    limit: int | None = None,
    user_id: str = Depends(get_current_user_id),
):
    """Completed sessions of the signed-in user, most recent first."""
    adapter = SessionPersistenceAdapter()
    result = await adapter.list_by_user(user_id, limit or get_settings().history_limit)
    if not result.success:
        return JSONResponse(status_code=503, content={"error": result.error})
    return {"sessions": [s.to_dict() for s in result.data]}
