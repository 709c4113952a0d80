"""
Session builder: assemble the workout plan for a day.

Each template exercise gets SETS_PER_EXERCISE slots.  A slot whose
(exercise, set_number) was already logged on the day mirrors that entry;
the rest are prefilled from the progression defaults.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from .config import BODYWEIGHT_KEYWORDS, SETS_PER_EXERCISE
from .models import ExerciseTemplate, LogEntry, SessionExercise, SetEntry
from .progression import compute_progression
from .sessions import workout_entries


def is_bodyweight_exercise(name: str) -> bool:
    """True for lifts logged as added load on top of bodyweight (chin/pull ups)."""
    lowered = name.lower()
    return any(keyword in lowered for keyword in BODYWEIGHT_KEYWORDS)


def latest_bodyweight(history: Sequence[LogEntry]) -> float | None:
    """Most recent bodyweight recorded on any workout entry, or None."""
    dated = [
        (e.logged_at, e.bodyweight_kg)
        for e in history
        if e.is_workout and e.bodyweight_kg is not None
    ]
    dated = [(t, bw) for t, bw in dated if t is not None]
    if not dated:
        return None
    return max(dated, key=lambda pair: pair[0])[1]


def _todays_log(
    history: Sequence[LogEntry], exercise: str, set_number: int, today: date
) -> LogEntry | None:
    return next(
        (
            e
            for e in history
            if e.exercise == exercise and e.set_number == set_number and e.day == today
        ),
        None,
    )


def build_exercise(
    template: ExerciseTemplate,
    history: Sequence[LogEntry],
    today: date,
    bodyweight_kg: float | None = None,
) -> SessionExercise:
    """Build the plan entry for one template exercise."""
    result = compute_progression(template, history, today)
    bodyweight_relative = is_bodyweight_exercise(template.name)

    sets: list[SetEntry] = []
    for set_number in range(1, SETS_PER_EXERCISE + 1):
        logged = _todays_log(history, template.name, set_number, today)
        if logged is not None:
            sets.append(
                SetEntry(
                    set_number=set_number,
                    weight=logged.weight,
                    reps=logged.reps,
                    completed=True,
                    timestamp=logged.timestamp,
                    bodyweight_kg=logged.bodyweight_kg,
                )
            )
        else:
            sets.append(
                SetEntry(
                    set_number=set_number,
                    weight=result.base_weight,
                    reps=result.default_reps,
                    bodyweight_kg=bodyweight_kg if bodyweight_relative else None,
                )
            )

    return SessionExercise(
        name=template.name,
        sets=sets,
        default_weight=result.base_weight,
        default_reps=result.default_reps,
        progression=result.advice,
    )


def create_session(
    history: Sequence[LogEntry],
    template: list[ExerciseTemplate],
    today: date | None = None,
) -> list[SessionExercise]:
    """
    Build the workout plan for today, one entry per template exercise.

    Args:
        history: Full log snapshot; sick/vacation markers are ignored
        template: Ordered exercises (already renamed for display)
        today: Day being planned (default: today)

    Returns:
        SessionExercise list in template order
    """
    if today is None:
        today = date.today()
    workouts = workout_entries(history)
    bodyweight = latest_bodyweight(workouts)
    return [build_exercise(t, workouts, today, bodyweight) for t in template]
