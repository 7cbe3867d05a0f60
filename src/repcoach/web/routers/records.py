"""Personal record routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...services.persistence import SessionPersistenceAdapter
from ...utils.exercise_utils import find_exercise
from ..deps import get_current_user_id

router = APIRouter(prefix="/records", tags=["records"])


@router.get("")
async def list_records(
    exercise: str | None = None,
    user_id: str = Depends(get_current_user_id),
):
    """Personal records of the signed-in user, optionally for one exercise."""
    exercise_id = None
    if exercise:
        match = find_exercise(exercise)
        if match is None:
            return JSONResponse(
                status_code=404, content={"error": f"Unknown exercise: {exercise}"}
            )
        exercise_id = match.id

    result = await SessionPersistenceAdapter().list_personal_records(user_id, exercise_id)
    if not result.success:
        return JSONResponse(status_code=503, content={"error": result.error})
    return {"records": [r.to_dict() for r in result.data]}
