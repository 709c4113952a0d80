"""Rep-range policy: the rep band that gates load progression per exercise."""

from .config import DEFAULT_REP_RANGE, LOW_FATIGUE_GROUP, LOW_FATIGUE_REP_RANGE
from .models import RepRange


def get_rep_range(exercise: str) -> RepRange:
    """
    Return the target rep band for an exercise.

    Deadlifts and Squats (exact name match) use 5-8; everything else 6-10.
    """
    if exercise in LOW_FATIGUE_GROUP:
        return RepRange(*LOW_FATIGUE_REP_RANGE)
    return RepRange(*DEFAULT_REP_RANGE)
