"""Personal record detection."""

from ..metrics.training import log_volume
from ..models.workout import PersonalRecord, RecordType, WorkoutSession

BestValues = dict[tuple[str, RecordType], float]


def _candidates(session: WorkoutSession) -> list[tuple[str, str, RecordType, float, str]]:
    candidates = []
    for log in session.exercises:
        if not log.actual_reps:
            continue
        if log.weight:
            candidates.append(
                (log.exercise_id, log.exercise_name, RecordType.WEIGHT, log.weight, "kg")
            )
        candidates.append(
            (log.exercise_id, log.exercise_name, RecordType.REPS, max(log.actual_reps), "reps")
        )
        candidates.append(
            (
                log.exercise_id,
                log.exercise_name,
                RecordType.VOLUME,
                log_volume(log),
                "kg" if log.weight else "reps",
            )
        )
    return candidates


def detect_personal_records(
    session: WorkoutSession, previous_best: BestValues
) -> list[PersonalRecord]:
    """Find results in ``session`` that beat the user's previous bests.

    The first result ever logged for an exercise counts as a record. When
    an exercise appears twice in one session only its best result is kept.
    """
    best: dict[tuple[str, RecordType], tuple[str, float, str]] = {}
    for exercise_id, name, record_type, value, unit in _candidates(session):
        key = (exercise_id, record_type)
        if value <= 0:
            continue
        if key in best and best[key][1] >= value:
            continue
        best[key] = (name, value, unit)

    achieved_at = session.completed_at or session.started_at
    records = []
    for (exercise_id, record_type), (name, value, unit) in best.items():
        if value <= previous_best.get((exercise_id, record_type), 0):
            continue
        records.append(
            PersonalRecord(
                user_id=session.user_id,
                exercise_id=exercise_id,
                exercise_name=name,
                record_type=record_type,
                value=value,
                unit=unit,
                achieved_at=achieved_at,
            )
        )
    return records
