"""
Progression calculator.

Decides the load for an exercise's next session from its logged history:

  same-day     An entry already exists on the reference day, so the session
               is in progress: keep its weight unchanged.
  increase     Every set of the last complete session reached the top of
               the rep band: +2.5%, rounded down to 0.5 kg.
  decrease     No set of the last complete session got past the bottom of
               the rep band: -5%, rounded down to 0.5 kg.
  maintain     Anything else, including "no complete session yet".

Only the single most recent complete session is consulted, and an exact
boundary rep count triggers the change immediately.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Sequence

from .config import DECREASE_FACTOR, INCREASE_FACTOR, WEIGHT_INCREMENT
from .models import (
    ExerciseTemplate,
    LogEntry,
    ProgressionAdvice,
    ProgressionResult,
)
from .rep_range import get_rep_range
from .sessions import exercise_entries, latest_complete_session, summarize_exercise_sessions


def round_down_to_increment(value: float, increment: float = WEIGHT_INCREMENT) -> float:
    """
    Quantize a load down to the nearest multiple of increment.

    Never rounds up.  Result is rounded to 1 decimal to drop float noise.

    Examples:
        82.0 → 82.0, 81.9 → 81.5, 76.0 → 76.0, 75.99 → 75.5
    """
    return round(math.floor(value / increment) * increment, 1)


def _finite(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def compute_progression(
    template: ExerciseTemplate,
    workout_history: Sequence[LogEntry],
    reference_day: date | None = None,
) -> ProgressionResult:
    """
    Compute plan defaults and progression advice for one exercise.

    Args:
        template: Exercise name and its static default weight/reps
        workout_history: Log entries in any order; non-workout entries and
            other exercises are ignored
        reference_day: The day being planned (default: today)

    Returns:
        ProgressionResult whose base_weight is the weight to prefill, i.e.
        the advice's suggested weight.  Never raises; missing or unusable
        history falls back to the template defaults.
    """
    if reference_day is None:
        reference_day = date.today()

    rep_range = get_rep_range(template.name)
    history = exercise_entries(workout_history, template.name)

    latest = history[0] if history else None
    last_reps = latest.reps if latest is not None else template.default_reps

    todays_entry = next((e for e in history if e.day == reference_day), None)
    if todays_entry is not None and _finite(todays_entry.weight):
        weight = todays_entry.weight
        return ProgressionResult(
            base_weight=weight,
            default_reps=rep_range.clamp(last_reps),
            advice=ProgressionAdvice(
                action="maintain",
                message="Continuing today's session with the same load.",
                previous_weight=weight,
                suggested_weight=weight,
            ),
        )

    sessions = summarize_exercise_sessions(history)
    last_complete = latest_complete_session(sessions)

    # A complete session's average outranks a single entry, which outranks
    # the static default.
    if last_complete is not None:
        base_weight = last_complete.average_weight
    elif latest is not None and _finite(latest.weight):
        base_weight = latest.weight
    else:
        base_weight = template.default_weight

    if last_complete is not None and last_complete.min_reps >= rep_range.upper:
        advice = ProgressionAdvice(
            action="increase",
            message=(
                f"All sets reached {rep_range.upper}+ reps last session; "
                "nudged weight up by ~2.5%."
            ),
            previous_weight=base_weight,
            suggested_weight=round_down_to_increment(base_weight * INCREASE_FACTOR),
        )
        default_reps = rep_range.lower
    elif last_complete is not None and last_complete.max_reps <= rep_range.lower:
        advice = ProgressionAdvice(
            action="decrease",
            message=(
                f"No set got past {rep_range.lower} reps last session; "
                "reducing weight by ~5% to get back into the rep range."
            ),
            previous_weight=base_weight,
            suggested_weight=round_down_to_increment(base_weight * DECREASE_FACTOR),
        )
        default_reps = rep_range.upper
    else:
        if last_complete is not None:
            message = (
                f"Keep this load until every set reaches {rep_range.upper} reps."
            )
            default_reps = (
                last_complete.max_reps
                or last_complete.min_reps
                or last_reps
                or template.default_reps
            )
        else:
            message = "No full sessions logged yet; start with the base weight."
            default_reps = last_reps or template.default_reps
        advice = ProgressionAdvice(
            action="maintain",
            message=message,
            previous_weight=base_weight,
            suggested_weight=base_weight,
        )

    return ProgressionResult(
        base_weight=advice.suggested_weight,
        default_reps=rep_range.clamp(default_reps),
        advice=advice,
    )


def get_next_session_progression(
    template: ExerciseTemplate,
    workout_history: Sequence[LogEntry],
    today: date | None = None,
) -> ProgressionAdvice:
    """
    Preview the advice for the next session, evaluated against tomorrow.

    Planning for tomorrow means today's sets count as a finished session
    instead of triggering the same-day short-circuit.
    """
    if today is None:
        today = date.today()
    return compute_progression(template, workout_history, today + timedelta(days=1)).advice
