"""
Data models for lift-tracker.

LogEntry is the only persisted record; everything else is derived fresh
from a history snapshot on every call and never written back.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

EntryType = Literal["workout", "sick", "vacation"]
ProgressionAction = Literal["increase", "maintain", "decrease"]


def parse_local_timestamp(timestamp: str) -> datetime | None:
    """
    Parse an ISO-8601 timestamp into a naive local datetime.

    Aware timestamps are converted to the local timezone first; naive ones
    are taken as already local.  Returns None if the string can't be parsed.
    """
    try:
        parsed = datetime.fromisoformat(timestamp)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


@dataclass(frozen=True)
class LogEntry:
    """
    A single logged set (or a sick/vacation calendar marker).

    Uniquely identified by (exercise, set_number, timestamp).  bodyweight_kg
    is None when no bodyweight was recorded with the set.
    """

    exercise: str
    set_number: int
    weight: float
    reps: int
    timestamp: str  # ISO-8601
    type: EntryType = "workout"
    bodyweight_kg: float | None = None

    @property
    def key(self) -> tuple[str, int, str]:
        return (self.exercise, self.set_number, self.timestamp)

    @property
    def is_workout(self) -> bool:
        return self.type == "workout"

    @property
    def logged_at(self) -> datetime | None:
        """Local datetime of the entry, or None for an unparseable timestamp."""
        return parse_local_timestamp(self.timestamp)

    @property
    def day(self) -> date | None:
        """Local calendar day of the entry."""
        logged_at = self.logged_at
        return logged_at.date() if logged_at is not None else None


@dataclass(frozen=True)
class RepRange:
    """Target rep band; hitting its edges triggers a load change."""

    lower: int
    upper: int

    def clamp(self, reps: int) -> int:
        return max(self.lower, min(self.upper, reps))


@dataclass
class ExerciseSession:
    """
    One calendar day of one exercise.

    sets holds at most SETS_PER_EXERCISE entries ordered by set number;
    complete is True only when all of them were logged.
    """

    date_key: str  # ISO format: YYYY-MM-DD
    sets: list[LogEntry] = field(default_factory=list)
    complete: bool = False
    average_weight: float = 0.0
    average_reps: float = 0.0
    min_reps: int = 0
    max_reps: int = 0


@dataclass
class ProgressionAdvice:
    """Load recommendation for the next session, with the reason behind it."""

    action: ProgressionAction
    message: str
    previous_weight: float
    suggested_weight: float


@dataclass
class ProgressionResult:
    """Output of compute_progression: plan defaults plus the advice."""

    base_weight: float
    default_reps: int
    advice: ProgressionAdvice


@dataclass(frozen=True)
class ExerciseTemplate:
    """One exercise of the workout template."""

    name: str
    default_weight: float
    default_reps: int


@dataclass
class SetEntry:
    """
    One slot of the workout plan.

    completed=True means the slot mirrors a set already logged today and
    timestamp holds that entry's timestamp; otherwise timestamp is None and
    weight/reps are the prefilled targets.
    """

    set_number: int
    weight: float
    reps: int
    completed: bool = False
    timestamp: str | None = None
    bodyweight_kg: float | None = None


@dataclass
class SessionExercise:
    """One exercise of the generated workout plan."""

    name: str
    sets: list[SetEntry]
    default_weight: float
    default_reps: int
    progression: ProgressionAdvice | None = None


@dataclass
class OneRmEstimate:
    """
    Estimated one-repetition maximum with a 95% confidence half-width.

    For bodyweight-relative lifts estimate and median_weight are added load
    (bodyweight excluded).
    """

    estimate: float
    ci_half: float
    median_weight: float
    median_reps: float
    session_count: int

    @property
    def low(self) -> float:
        return round(self.estimate - self.ci_half, 1)

    @property
    def high(self) -> float:
        return round(self.estimate + self.ci_half, 1)
