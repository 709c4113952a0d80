"""
Base types for lift classes.

A LiftClass parameterises the one-rep-max estimator for one movement
pattern.  The estimator itself never looks at exercise names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

OneRmFormula = Literal["epley", "lombardi"]


@dataclass(frozen=True)
class LiftClass:
    """Full 1RM configuration for one movement pattern."""

    # Identity
    lift_id: str              # e.g. "bench_press"
    keywords: tuple[str, ...] # Lower-case name fragments that select this class

    # Regression
    formula: OneRmFormula
    correction: float         # Multiplier absorbing known formula bias

    # Load model
    bodyweight_relative: bool # Logged as added load on top of bodyweight

    # Standard error of the estimate (kg) by rep count, ascending reps.
    # Linear between rows; reps above reliable_rep_ceiling use se_plateau.
    se_table: tuple[tuple[int, float], ...]
    reliable_rep_ceiling: int
    se_plateau: float

    def matches(self, exercise_name: str) -> bool:
        lowered = exercise_name.lower()
        return any(k in lowered for k in self.keywords)

    def estimate_total(self, load: float, reps: float) -> float:
        """1RM of the total load moved (bodyweight included where relevant)."""
        if self.formula == "epley":
            return load * (1.0 + reps / 30.0) * self.correction
        return load * reps ** 0.1 * self.correction

    def standard_error(self, reps: float, min_reps: int = 3) -> float:
        """Linear interpolation of the SE table, clamped to reps ≥ min_reps."""
        r = max(float(min_reps), reps)
        if r > self.reliable_rep_ceiling:
            return self.se_plateau
        table = self.se_table
        if r <= table[0][0]:
            return table[0][1]
        for i in range(len(table) - 1):
            r0, se0 = table[i]
            r1, se1 = table[i + 1]
            if r0 <= r <= r1:
                alpha = (r - r0) / (r1 - r0)
                return se0 + alpha * (se1 - se0)
        return table[-1][1]
