"""Shared fixtures."""

import pytest

from lift_tracker.core.models import ExerciseTemplate


@pytest.fixture
def squats() -> ExerciseTemplate:
    return ExerciseTemplate(name="Squats", default_weight=80.0, default_reps=5)


@pytest.fixture
def bench() -> ExerciseTemplate:
    return ExerciseTemplate(name="Bench Press", default_weight=63.0, default_reps=5)
