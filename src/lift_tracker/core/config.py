"""
Configuration constants for the progression and estimation engine.

All adjustable parameters are centralized here.  The workout template can be
overridden from ~/.lift-tracker/config.yaml (see config_loader.py); the
rep bands and lift classes are fixed.
"""

from typing import Final

# =============================================================================
# SESSION SHAPE
# =============================================================================

SETS_PER_EXERCISE: Final[int] = 3  # Sets that make a session "complete"
REST_SECONDS: Final[int] = 90  # Rest between sets shown in the plan

# =============================================================================
# REP BANDS (progression triggers)
# =============================================================================

# Compound lower-body lifts fatigue faster, so their band sits lower.
LOW_FATIGUE_GROUP: Final[frozenset[str]] = frozenset({"Deadlifts", "Squats"})
LOW_FATIGUE_REP_RANGE: Final[tuple[int, int]] = (5, 8)
DEFAULT_REP_RANGE: Final[tuple[int, int]] = (6, 10)

# =============================================================================
# LOAD PROGRESSION
# =============================================================================

INCREASE_FACTOR: Final[float] = 1.025  # +2.5% after topping the rep band
DECREASE_FACTOR: Final[float] = 0.95  # -5% after falling under the rep band
WEIGHT_INCREMENT: Final[float] = 0.5  # Smallest load step (kg)

# =============================================================================
# ONE-REP-MAX ESTIMATION
# =============================================================================

ONE_RM_SESSION_WINDOW: Final[int] = 3  # Most recent sessions sampled
CI_Z: Final[float] = 1.96  # 95% two-sided normal quantile
SE_MIN_REPS: Final[int] = 3  # Reps are clamped up to this before SE lookup

# Case-insensitive name fragments marking lifts logged as added load on top
# of bodyweight.
BODYWEIGHT_KEYWORDS: Final[tuple[str, ...]] = ("chin up", "pull up")

# =============================================================================
# CALENDAR ANNOTATIONS
# =============================================================================

ENTRY_TYPES: Final[tuple[str, ...]] = ("workout", "sick", "vacation")
ANNOTATION_EXERCISE: Final[str] = "-"  # Exercise name used for sick/vacation rows

# =============================================================================
# DEFAULT WORKOUT TEMPLATE
# =============================================================================

# (name, default_weight_kg, default_reps), in training order.
DEFAULT_WORKOUT_TEMPLATE: Final[tuple[tuple[str, float, int], ...]] = (
    ("Deadlifts", 90.0, 5),
    ("Squats", 80.0, 5),
    ("Shoulder Press", 50.0, 5),
    ("Chin Up", 0.0, 5),
    ("Bench Press", 63.0, 5),
    ("Bent Over Rows", 64.0, 5),
)
