"""
Lift-class registry.

Pressing movements use Lombardi, lower-body and pulling lifts use Epley.
Corrections offset the systematic under-estimate for deadlift and overhead
press and the over-estimate for rows.

Standard errors are in kg, read from the published regressions at the
listed rep counts.  Beyond reliable_rep_ceiling the regressions lose
accuracy quickly, so a flat plateau value is used instead.
"""

from __future__ import annotations

from .base import LiftClass

DEADLIFT = LiftClass(
    lift_id="deadlift",
    keywords=("deadlift",),
    formula="epley",
    correction=1.04,
    bodyweight_relative=False,
    se_table=((3, 3.5), (5, 4.5), (8, 6.0)),
    reliable_rep_ceiling=8,
    se_plateau=7.5,
)

SQUAT = LiftClass(
    lift_id="squat",
    keywords=("squat",),
    formula="epley",
    correction=1.0,
    bodyweight_relative=False,
    se_table=((3, 3.0), (5, 3.8), (8, 5.0), (10, 6.0)),
    reliable_rep_ceiling=10,
    se_plateau=7.5,
)

BENCH_PRESS = LiftClass(
    lift_id="bench_press",
    keywords=("bench press",),
    formula="lombardi",
    correction=1.0,
    bodyweight_relative=False,
    se_table=((3, 2.0), (5, 2.6), (8, 3.5), (10, 4.2)),
    reliable_rep_ceiling=10,
    se_plateau=5.5,
)

OVERHEAD_PRESS = LiftClass(
    lift_id="overhead_press",
    keywords=("shoulder press", "overhead press"),
    formula="lombardi",
    correction=1.04,
    bodyweight_relative=False,
    se_table=((3, 1.8), (5, 2.4), (8, 3.2)),
    reliable_rep_ceiling=8,
    se_plateau=4.5,
)

ROW = LiftClass(
    lift_id="row",
    keywords=("row",),
    formula="epley",
    correction=0.93,
    bodyweight_relative=False,
    se_table=((3, 2.5), (5, 3.2), (8, 4.2), (10, 5.0)),
    reliable_rep_ceiling=10,
    se_plateau=6.5,
)

CHIN_UP = LiftClass(
    lift_id="chin_up",
    keywords=("chin up", "pull up"),
    formula="epley",
    correction=1.0,
    bodyweight_relative=True,
    se_table=((3, 1.5), (5, 2.0), (8, 2.8)),
    reliable_rep_ceiling=8,
    se_plateau=4.0,
)

# Classification order matters: first match wins.
LIFT_REGISTRY: tuple[LiftClass, ...] = (
    DEADLIFT,
    SQUAT,
    BENCH_PRESS,
    OVERHEAD_PRESS,
    ROW,
    CHIN_UP,
)


def classify_lift(exercise_name: str) -> LiftClass | None:
    """
    Return the lift class for an exercise name, or None if unregistered.

    Matching is a case-insensitive substring test in registry order, e.g.
    "Bent Over Rows" → ROW, "Weighted Pull Up" → CHIN_UP, "Farmers Carry" → None.
    """
    return next((lc for lc in LIFT_REGISTRY if lc.matches(exercise_name)), None)
