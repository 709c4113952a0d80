"""Shared builders for log entries."""

from datetime import date

from lift_tracker.core.models import LogEntry


DAY1 = "2026-03-02"
DAY2 = "2026-03-03"
DAY3 = "2026-03-05"


def d(day: str) -> date:
    return date.fromisoformat(day)


def entry(
    exercise: str,
    set_number: int,
    weight: float,
    reps: int,
    day: str,
    *,
    hour: int = 10,
    bodyweight: float | None = None,
    entry_type: str = "workout",
) -> LogEntry:
    """Naive (local) timestamp on the given YYYY-MM-DD day."""
    return LogEntry(
        exercise=exercise,
        set_number=set_number,
        weight=weight,
        reps=reps,
        timestamp=f"{day}T{hour:02d}:{set_number:02d}:00",
        type=entry_type,  # type: ignore[arg-type]
        bodyweight_kg=bodyweight,
    )


def session(
    exercise: str,
    day: str,
    sets: list[tuple[float, int]],
    bodyweight: float | None = None,
) -> list[LogEntry]:
    """One day's sets, numbered from 1."""
    return [
        entry(exercise, i, w, r, day, bodyweight=bodyweight)
        for i, (w, r) in enumerate(sets, 1)
    ]
