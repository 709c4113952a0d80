"""
Session summaries: group raw log entries into per-day sessions.

A session is one local calendar day of one exercise.  Only the first
SETS_PER_EXERCISE sets by set number count toward its statistics; later
sets stay in the raw history but are ignored here.
"""

from __future__ import annotations

import math
from typing import Iterable

from .config import SETS_PER_EXERCISE
from .models import ExerciseSession, LogEntry


def workout_entries(history: Iterable[LogEntry]) -> list[LogEntry]:
    """Drop sick/vacation markers; they never feed any statistic."""
    return [e for e in history if e.is_workout]


def exercise_entries(history: Iterable[LogEntry], exercise: str) -> list[LogEntry]:
    """
    Workout entries for one exercise, most recent first.

    Names are compared exactly.  Entries with an unparseable timestamp are
    dropped since they can't be placed on the calendar.
    """
    dated = [
        (e.logged_at, e)
        for e in history
        if e.is_workout and e.exercise == exercise
    ]
    dated = [(t, e) for t, e in dated if t is not None]
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [e for _, e in dated]


def _finite_or_zero(value: float, digits: int = 1) -> float:
    return round(value, digits) if math.isfinite(value) else 0.0


def summarize_exercise_sessions(entries: Iterable[LogEntry]) -> list[ExerciseSession]:
    """
    Summarize one exercise's workout entries into daily sessions.

    Args:
        entries: Workout entries for a single exercise, in any order

    Returns:
        Sessions sorted most recent day first.  Empty input gives an empty list.
    """
    by_day: dict[str, list[LogEntry]] = {}
    for entry in entries:
        day = entry.day
        if day is None:
            continue
        by_day.setdefault(day.isoformat(), []).append(entry)

    sessions: list[ExerciseSession] = []
    for date_key, day_entries in by_day.items():
        kept = sorted(day_entries, key=lambda e: e.set_number)[:SETS_PER_EXERCISE]
        reps = [e.reps for e in kept]

        if kept:
            average_weight = _finite_or_zero(sum(e.weight for e in kept) / len(kept))
            average_reps = _finite_or_zero(sum(reps) / len(kept))
        else:
            average_weight = average_reps = 0.0

        sessions.append(
            ExerciseSession(
                date_key=date_key,
                sets=kept,
                complete=len(kept) >= SETS_PER_EXERCISE,
                average_weight=average_weight,
                average_reps=average_reps,
                min_reps=min(reps) if reps else 0,
                max_reps=max(reps) if reps else 0,
            )
        )

    # ISO date keys sort chronologically as strings
    sessions.sort(key=lambda s: s.date_key, reverse=True)
    return sessions


def latest_complete_session(sessions: list[ExerciseSession]) -> ExerciseSession | None:
    """Most recent complete session, or None if every session is partial."""
    return next((s for s in sessions if s.complete), None)
