"""
Integration tests for workout plan assembly and the workout template.
"""

import pytest

from helpers import DAY1, DAY2, d, entry, session

from lift_tracker.core.models import ExerciseTemplate
from lift_tracker.core.session_builder import (
    create_session,
    is_bodyweight_exercise,
    latest_bodyweight,
)
from lift_tracker.core.template import (
    default_workout_template,
    load_workout_template,
    resolve_workout_template,
)


TEMPLATE = [
    ExerciseTemplate("Squats", 80.0, 5),
    ExerciseTemplate("Chin Up", 0.0, 5),
    ExerciseTemplate("Bench Press", 63.0, 5),
]


class TestCreateSession:

    def test_order_and_shape(self):
        plan = create_session([], TEMPLATE, d(DAY1))

        assert [e.name for e in plan] == ["Squats", "Chin Up", "Bench Press"]
        for exercise in plan:
            assert [s.set_number for s in exercise.sets] == [1, 2, 3]
            assert not any(s.completed for s in exercise.sets)
            assert all(s.timestamp is None for s in exercise.sets)

    def test_empty_history_prefills_defaults(self):
        plan = create_session([], TEMPLATE, d(DAY1))
        squats = plan[0]
        assert squats.default_weight == 80.0
        assert squats.default_reps == 5
        assert all(s.weight == 80.0 and s.reps == 5 for s in squats.sets)
        assert squats.progression.action == "maintain"

    def test_progression_flows_into_prefilled_sets(self):
        history = session("Squats", DAY1, [(80, 8)] * 3)
        squats = create_session(history, TEMPLATE, d(DAY2))[0]

        assert squats.progression.action == "increase"
        assert all(s.weight == 82.0 and s.reps == 5 for s in squats.sets)

    def test_todays_sets_surface_as_completed(self):
        history = session("Squats", DAY1, [(80, 8)] * 3) + [
            entry("Squats", 1, 82.0, 6, DAY2),
            entry("Squats", 2, 82.0, 5, DAY2),
        ]
        squats = create_session(history, TEMPLATE, d(DAY2))[0]
        done, pending = squats.sets[:2], squats.sets[2]

        assert all(s.completed for s in done)
        assert [s.reps for s in done] == [6, 5]
        assert done[0].timestamp == f"{DAY2}T10:01:00"
        assert not pending.completed
        # same-day short-circuit keeps today's load
        assert pending.weight == 82.0
        assert squats.progression.action == "maintain"

    def test_sets_beyond_three_invisible(self):
        history = session("Squats", DAY2, [(80, 8)] * 3) + [entry("Squats", 4, 200, 1, DAY2)]
        squats = create_session(history, TEMPLATE, d(DAY2))[0]
        assert len(squats.sets) == 3
        assert all(s.weight == 80 for s in squats.sets)

    def test_bodyweight_prefilled_for_chin_ups_only(self):
        history = session("Chin Up", DAY1, [(5, 8)] * 3, bodyweight=81.5)
        plan = create_session(history, TEMPLATE, d(DAY2))
        chin_up = plan[1]

        assert all(s.bodyweight_kg == 81.5 for s in chin_up.sets)
        assert all(s.bodyweight_kg is None for s in plan[0].sets)

    def test_completed_set_keeps_its_bodyweight(self):
        history = [entry("Chin Up", 1, 5, 8, DAY2, bodyweight=80.0)]
        chin_up = create_session(history, TEMPLATE, d(DAY2))[1]
        assert chin_up.sets[0].completed
        assert chin_up.sets[0].bodyweight_kg == 80.0

    def test_annotations_do_not_complete_sets(self):
        history = [entry("Squats", 1, 0, 0, DAY2, entry_type="vacation")]
        squats = create_session(history, TEMPLATE, d(DAY2))[0]
        assert not squats.sets[0].completed

    def test_repeatable(self):
        history = session("Squats", DAY1, [(80, 8)] * 3) + [entry("Squats", 1, 82, 6, DAY2)]
        assert create_session(history, TEMPLATE, d(DAY2)) == create_session(history, TEMPLATE, d(DAY2))


class TestBodyweightHelpers:

    @pytest.mark.parametrize(
        "name, expected",
        [("Chin Up", True), ("Weighted PULL UP", True), ("Pull-Up", False), ("Squats", False)],
    )
    def test_is_bodyweight_exercise(self, name, expected):
        assert is_bodyweight_exercise(name) is expected

    def test_latest_bodyweight(self):
        history = [
            entry("Chin Up", 1, 5, 8, DAY1, bodyweight=80.0),
            entry("Squats", 1, 80, 8, DAY2, bodyweight=81.0),
            entry("Squats", 2, 80, 8, DAY2),
        ]
        assert latest_bodyweight(history) == 81.0
        assert latest_bodyweight([]) is None


class TestWorkoutTemplate:

    def test_default_template(self):
        names = [t.name for t in default_workout_template()]
        assert names == [
            "Deadlifts", "Squats", "Shoulder Press", "Chin Up", "Bench Press", "Bent Over Rows",
        ]

    def test_missing_config_uses_defaults(self, tmp_path):
        assert load_workout_template(tmp_path / "config.yaml") == default_workout_template()

    def test_yaml_override(self, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text(
            "template:\n"
            "  - name: Front Squats\n"
            "    default_weight: 60\n"
            "    default_reps: 6\n"
            "  - name: Dips\n"
        )
        template = load_workout_template(cfg)
        assert template == [
            ExerciseTemplate("Front Squats", 60.0, 6),
            ExerciseTemplate("Dips", 0.0, 5),
        ]

    def test_invalid_override_warns_and_falls_back(self, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("template:\n  - default_weight: 60\n")
        with pytest.warns(UserWarning, match="invalid template"):
            template = load_workout_template(cfg)
        assert template == default_workout_template()

    def test_unparseable_yaml_warns(self, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("template: [unclosed\n")
        with pytest.warns(UserWarning):
            template = load_workout_template(cfg)
        assert template == default_workout_template()

    def test_resolve_applies_rename_map(self):
        resolved = resolve_workout_template({"Squats": "Back Squat"}, TEMPLATE)
        assert [t.name for t in resolved] == ["Back Squat", "Chin Up", "Bench Press"]
        assert resolved[0].default_weight == 80.0
