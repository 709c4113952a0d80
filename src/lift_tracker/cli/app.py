"""Shared Typer app object, shared option types, and store utility."""

from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from ..core.models import ExerciseTemplate
from ..core.template import load_workout_template, resolve_workout_template
from ..io.history_store import HistoryStore, get_default_history_path

# Shared --history-path option type used across all commands
HistoryPathOption = Annotated[
    Optional[Path],
    typer.Option("--history-path", "-p", help="Path to history JSONL file"),
]

# Shared --date option type for commands that plan or annotate a day
DateOption = Annotated[
    Optional[str],
    typer.Option("--date", "-d", help="Day to use (YYYY-MM-DD, default: today)"),
]

app = typer.Typer(
    name="lift-tracker",
    help="Strength-training log with automatic load progression and 1RM estimates.",
    no_args_is_help=True,
)


def get_store(history_path: Path | None) -> HistoryStore:
    """Get history store from path or default location."""
    if history_path is None:
        history_path = get_default_history_path()
    return HistoryStore(history_path)


def parse_day(value: str | None) -> date:
    """Parse a --date value; None means today."""
    if value is None:
        return date.today()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date: {value}. Expected YYYY-MM-DD") from e


def get_template(store: HistoryStore) -> list[ExerciseTemplate]:
    """Workout template with the store's rename map applied."""
    return resolve_workout_template(store.load_exercise_names(), load_workout_template())
