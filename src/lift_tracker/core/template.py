"""
Workout template: the ordered exercise list a session is built from.

Defaults come from config.DEFAULT_WORKOUT_TEMPLATE.  A ``template:`` list in
~/.lift-tracker/config.yaml replaces them, e.g.

    template:
      - name: Front Squats
        default_weight: 60
        default_reps: 6

Invalid override entries produce a warning and the defaults are kept.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any, Mapping

from .config import DEFAULT_WORKOUT_TEMPLATE
from .config_loader import load_user_config
from .models import ExerciseTemplate


def default_workout_template() -> list[ExerciseTemplate]:
    return [
        ExerciseTemplate(name=name, default_weight=weight, default_reps=reps)
        for name, weight, reps in DEFAULT_WORKOUT_TEMPLATE
    ]


def template_from_config(raw: list[Any]) -> list[ExerciseTemplate]:
    """
    Convert the ``template:`` config list to ExerciseTemplate objects.

    Raises:
        ValueError: If an item is not a mapping or has a missing/invalid field
    """
    result: list[ExerciseTemplate] = []
    for i, item in enumerate(raw, 1):
        if not isinstance(item, dict):
            raise ValueError(f"template item {i} must be a mapping")
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"template item {i} needs a non-empty 'name'")
        try:
            weight = float(item.get("default_weight", 0.0))
            reps = int(item.get("default_reps", 5))
        except (TypeError, ValueError) as e:
            raise ValueError(f"template item {i} ({name}): {e}") from e
        if weight < 0 or reps < 0:
            raise ValueError(f"template item {i} ({name}): values must be non-negative")
        result.append(ExerciseTemplate(name=name.strip(), default_weight=weight, default_reps=reps))

    names = [t.name for t in result]
    if len(set(names)) != len(names):
        raise ValueError("template exercise names must be unique")
    return result


def load_workout_template(config_path: Path | None = None) -> list[ExerciseTemplate]:
    """Return the user's template override if valid, else the defaults."""
    raw = load_user_config(config_path).get("template")
    if raw is None:
        return default_workout_template()
    if not isinstance(raw, list) or not raw:
        warnings.warn(
            "lift-tracker: 'template' must be a non-empty list; using defaults.",
            stacklevel=2,
        )
        return default_workout_template()
    try:
        return template_from_config(raw)
    except ValueError as exc:
        warnings.warn(f"lift-tracker: invalid template ({exc}); using defaults.", stacklevel=2)
        return default_workout_template()


def resolve_workout_template(
    names: Mapping[str, str],
    template: list[ExerciseTemplate] | None = None,
) -> list[ExerciseTemplate]:
    """
    Apply the canonical → current rename map to a template.

    Order and defaults are preserved; unmapped exercises keep their name.
    """
    if template is None:
        template = default_workout_template()
    return [
        ExerciseTemplate(
            name=names.get(t.name, t.name),
            default_weight=t.default_weight,
            default_reps=t.default_reps,
        )
        for t in template
    ]
