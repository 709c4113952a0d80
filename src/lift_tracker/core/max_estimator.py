"""
One-rep-max estimator.

Samples the last ONE_RM_SESSION_WINDOW sessions of an exercise (complete or
not), takes the median load and median average-reps across them, and feeds
them to the lift class's regression:

  Epley     1RM = load × (1 + reps / 30) × correction
  Lombardi  1RM = load × reps^0.1 × correction

For bodyweight-relative lifts (chin ups, pull ups) the load is added weight
plus that session's median bodyweight; the median bodyweight is subtracted
again from the result so the estimate is reported as added load.

Confidence half-width: ci_half = 1.96 × SE(median reps), with SE read from
the lift class's per-rep table (see lifts/registry.py).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from statistics import median
from typing import Sequence

from .config import CI_Z, ONE_RM_SESSION_WINDOW, SE_MIN_REPS
from .lifts import LiftClass, classify_lift
from .models import ExerciseSession, LogEntry, OneRmEstimate
from .sessions import exercise_entries, summarize_exercise_sessions


@dataclass
class _SessionSample:
    added_load: float
    bodyweight: float
    reps: float

    @property
    def total_load(self) -> float:
        return self.added_load + self.bodyweight


def _session_bodyweight(session: ExerciseSession) -> float | None:
    recorded = [s.bodyweight_kg for s in session.sets if s.bodyweight_kg is not None]
    return median(recorded) if recorded else None


def _sample_sessions(
    sessions: list[ExerciseSession], lift: LiftClass
) -> list[_SessionSample]:
    samples: list[_SessionSample] = []
    for session in sessions[:ONE_RM_SESSION_WINDOW]:
        if not session.sets:
            continue
        if lift.bodyweight_relative:
            bodyweight = _session_bodyweight(session)
            if bodyweight is None:
                continue
        else:
            bodyweight = 0.0
        samples.append(
            _SessionSample(
                added_load=session.average_weight,
                bodyweight=bodyweight,
                reps=session.average_reps,
            )
        )
    return samples


def _usable(value: float) -> bool:
    return math.isfinite(value) and value > 0


def estimate_from_sessions(
    sessions: list[ExerciseSession], lift: LiftClass
) -> OneRmEstimate | None:
    """
    Estimate 1RM from summarized sessions (most recent first).

    Returns None when no sampled session is usable or the medians are
    non-finite or non-positive.
    """
    samples = _sample_sessions(sessions, lift)
    if not samples:
        return None

    median_reps = median(s.reps for s in samples)
    median_weight = median(s.added_load for s in samples)
    if lift.bodyweight_relative:
        median_bodyweight = median(s.bodyweight for s in samples)
        load_basis = median(s.total_load for s in samples)
    else:
        median_bodyweight = 0.0
        load_basis = median_weight

    if not (_usable(median_reps) and _usable(load_basis)):
        return None

    estimate = lift.estimate_total(load_basis, median_reps) - median_bodyweight
    if not math.isfinite(estimate):
        return None
    ci_half = CI_Z * lift.standard_error(median_reps, SE_MIN_REPS)

    return OneRmEstimate(
        estimate=round(estimate, 1),
        ci_half=round(ci_half, 1),
        median_weight=round(median_weight, 1),
        median_reps=round(median_reps, 1),
        session_count=len(samples),
    )


def get_one_rep_max_estimate(
    exercise_name: str, history: Sequence[LogEntry]
) -> OneRmEstimate | None:
    """
    Estimate the one-rep max for an exercise from raw history.

    Args:
        exercise_name: Exercise name as it appears in history
        history: Log entries in any order; sick/vacation markers are ignored

    Returns:
        OneRmEstimate, or None when no formula is registered for the name
        or there isn't enough usable data.  None means "no estimate", which
        is distinct from an estimate of zero.
    """
    lift = classify_lift(exercise_name)
    if lift is None:
        return None
    sessions = summarize_exercise_sessions(exercise_entries(history, exercise_name))
    return estimate_from_sessions(sessions, lift)
