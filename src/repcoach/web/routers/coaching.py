"""Coach message routes."""

from fastapi import APIRouter, Query

from ...services.coaching import CoachingTrigger, select_message

router = APIRouter(prefix="/coach", tags=["coach"])


@router.get("/{trigger}")
async def coach_message(
    trigger: CoachingTrigger,
    user_id: str = "guest",
    enthusiasm: int = Query(default=5, ge=1, le=10),
    recent_workouts: int = Query(default=0, ge=0),
):
    """The coach's message for a situation."""
    message = select_message(
        trigger, user_id, enthusiasm=enthusiasm, recent_workouts=recent_workouts
    )
    return message.to_dict()
