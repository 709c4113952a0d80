"""History commands: init, log, mark-day, show-history, delete-entry, rename, export-csv."""

import json
import math
from datetime import datetime, time
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.config import ANNOTATION_EXERCISE
from ...core.models import LogEntry, parse_local_timestamp
from ...io.serializers import (
    ValidationError,
    history_to_csv,
    log_entry_to_dict,
    parse_sets_string,
    validate_exercise_name,
    validate_timestamp,
)
from .. import views
from ..app import DateOption, HistoryPathOption, app, get_store, parse_day


def _load_or_exit(store) -> list[LogEntry]:
    try:
        return store.load_history()
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def _now_timestamp() -> str:
    return datetime.now().astimezone().isoformat(timespec="seconds")


@app.command("init")
def init(history_path: HistoryPathOption = None) -> None:
    """
    Create an empty history file.
    """
    store = get_store(history_path)
    if store.exists():
        views.print_info(f"History already exists: {store.history_path}")
        return
    store.init()
    views.print_success(f"Created {store.history_path}")


@app.command("log")
def log_sets(
    exercise: Annotated[str, typer.Argument(help="Exercise name, e.g. 'Squats'")],
    sets: Annotated[
        str,
        typer.Option("--sets", "-s", help="Sets as WEIGHTxREPS, e.g. 80x8,80x8,80x7"),
    ],
    bodyweight_kg: Annotated[
        Optional[float],
        typer.Option("--bodyweight-kg", "-w", help="Bodyweight recorded with the sets"),
    ] = None,
    timestamp: Annotated[
        Optional[str],
        typer.Option("--timestamp", "-t", help="ISO-8601 timestamp (default: now)"),
    ] = None,
    start_set: Annotated[
        Optional[int],
        typer.Option("--start-set", help="Set number of the first set (default: next free)"),
    ] = None,
    history_path: HistoryPathOption = None,
) -> None:
    """
    Log one or more sets of an exercise.
    """
    store = get_store(history_path)
    history = _load_or_exit(store)

    try:
        exercise = validate_exercise_name(exercise).strip()
        parsed = parse_sets_string(sets)
        ts = validate_timestamp(timestamp) if timestamp is not None else _now_timestamp()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if bodyweight_kg is not None and not (math.isfinite(bodyweight_kg) and bodyweight_kg > 0):
        views.print_error(f"bodyweight must be a positive number, got {bodyweight_kg}")
        raise typer.Exit(1)

    if start_set is None:
        day = parse_local_timestamp(ts).date()
        done = [e.set_number for e in history if e.exercise == exercise and e.day == day]
        start_set = max(done, default=0) + 1
    elif start_set < 1:
        views.print_error("--start-set must be positive")
        raise typer.Exit(1)

    entries = [
        LogEntry(
            exercise=exercise,
            set_number=start_set + i,
            weight=weight,
            reps=reps,
            timestamp=ts,
            bodyweight_kg=bodyweight_kg,
        )
        for i, (weight, reps) in enumerate(parsed)
    ]

    try:
        store.append_entries(entries)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    last = start_set + len(entries) - 1
    views.print_success(
        f"Logged {exercise}: {len(entries)} set(s) (#{start_set}–#{last}) at {ts}"
    )


@app.command("mark-day")
def mark_day(
    kind: Annotated[str, typer.Argument(help="sick | vacation")],
    date: DateOption = None,
    history_path: HistoryPathOption = None,
) -> None:
    """
    Mark a day as sick or vacation (shown in history, ignored by progression).
    """
    if kind not in ("sick", "vacation"):
        views.print_error(f"Unknown day type: {kind}. Use 'sick' or 'vacation'.")
        raise typer.Exit(1)

    store = get_store(history_path)
    _load_or_exit(store)

    day = parse_day(date)
    ts = datetime.combine(day, time(12, 0)).astimezone().isoformat(timespec="seconds")
    entry = LogEntry(
        exercise=ANNOTATION_EXERCISE,
        set_number=1,
        weight=0.0,
        reps=0,
        timestamp=ts,
        type=kind,  # type: ignore[arg-type]
    )

    try:
        store.append_entries([entry])
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_success(f"Marked {day.isoformat()} as {kind}")


@app.command("show-history")
def show_history(
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", help="Limit number of entries to show"),
    ] = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
    history_path: HistoryPathOption = None,
) -> None:
    """
    Display logged entries, most recent first.
    """
    store = get_store(history_path)

    if not store.exists():
        views.print_error(f"History file not found: {store.history_path}")
        views.print_info("Run 'init' first to create the history file.")
        raise typer.Exit(1)

    entries = _load_or_exit(store)

    if limit is not None:
        entries = entries[:limit]

    if json_out:
        print(json.dumps([log_entry_to_dict(e) for e in entries], indent=2))
        return

    views.print_history(entries)


@app.command("delete-entry")
def delete_entry(
    exercise: Annotated[str, typer.Argument(help="Exercise name")],
    set_number: Annotated[int, typer.Argument(help="Set number")],
    timestamp: Annotated[str, typer.Argument(help="Exact timestamp as shown in show-history")],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
    history_path: HistoryPathOption = None,
) -> None:
    """
    Remove one logged set.
    """
    store = get_store(history_path)
    _load_or_exit(store)

    label = f"{exercise} set {set_number} at {timestamp}"
    if not force and not views.confirm_action(f"Delete {label}?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)

    removed = store.delete_entry(exercise, set_number, timestamp)
    if removed == 0:
        views.print_error(f"No entry found: {label}")
        raise typer.Exit(1)

    views.print_success(f"Deleted {label}")


@app.command("rename")
def rename(
    current: Annotated[str, typer.Argument(help="Current exercise name")],
    new: Annotated[str, typer.Argument(help="New exercise name")],
    history_path: HistoryPathOption = None,
) -> None:
    """
    Rename an exercise everywhere in history and in the workout template.
    """
    store = get_store(history_path)
    _load_or_exit(store)

    try:
        store.rename_exercise(current, new)
    except ValidationError as e:
        views.print_error(f"Failed to rename exercise: {e}")
        raise typer.Exit(1)

    views.print_success(f"Renamed {current.strip()} → {new.strip()}")


@app.command("export-csv")
def export_csv(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    history_path: HistoryPathOption = None,
) -> None:
    """
    Export the full history as CSV.
    """
    store = get_store(history_path)
    text = history_to_csv(_load_or_exit(store))

    if output is None:
        print(text, end="")
        return

    output.write_text(text, encoding="utf-8")
    views.print_success(f"Wrote {output}")
