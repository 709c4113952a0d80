"""
Lift classes for one-rep-max estimation.

Each class (deadlift, squat, bench, ...) fixes the regression formula,
its bias correction and its standard-error table.
"""

from .base import LiftClass, OneRmFormula
from .registry import LIFT_REGISTRY, classify_lift

__all__ = [
    "LiftClass",
    "OneRmFormula",
    "LIFT_REGISTRY",
    "classify_lift",
]
