"""
JSONL-based history storage for log entries.

Handles reading, writing, and managing the history file and the exercise
rename map.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from ..core.config_loader import get_config_dir
from ..core.models import LogEntry
from .serializers import (
    ValidationError,
    dict_to_log_entry,
    entry_to_json_line,
    log_entry_to_dict,
    validate_exercise_name,
)


def _sort_key(entry: LogEntry) -> datetime:
    return entry.logged_at or datetime.min


class HistoryStore:
    """
    Manages log entries stored in JSONL format.

    The history file contains one JSON object per line, one per logged set
    or calendar marker.  Entries are unique by (exercise, set_number,
    timestamp).

    A separate exercise_names.json file next to it maps each renamed
    exercise's canonical (original) name to its current name.
    """

    def __init__(self, history_path: str | Path):
        """
        Initialize the history store.

        Args:
            history_path: Path to the JSONL history file
        """
        self.history_path = Path(history_path)
        self.names_path = self.history_path.parent / "exercise_names.json"

    def exists(self) -> bool:
        """Check if the history file exists."""
        return self.history_path.exists()

    def init(self) -> None:
        """
        Initialize empty history file if it doesn't exist.

        Creates parent directories if needed.
        """
        self.history_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.history_path.exists():
            self.history_path.touch()

    def _require_history(self) -> None:
        if not self.history_path.exists():
            raise FileNotFoundError(
                f"History file not found: {self.history_path}. Run 'init' first."
            )

    def load_history(self) -> list[LogEntry]:
        """
        Load all entries from the history file.

        Returns:
            List of LogEntry, most recent first

        Raises:
            FileNotFoundError: If history file doesn't exist
            ValidationError: If a line is not a valid entry
        """
        self._require_history()

        entries: list[LogEntry] = []

        with open(self.history_path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue

                try:
                    entries.append(dict_to_log_entry(json.loads(line)))
                except (json.JSONDecodeError, ValidationError) as e:
                    raise ValidationError(
                        f"Error parsing line {line_num} in {self.history_path}: {e}"
                    ) from e

        entries.sort(key=_sort_key, reverse=True)
        return entries

    def _write_entries(self, entries: list[LogEntry]) -> None:
        """Rewrite the history file, oldest entry first."""
        ordered = sorted(entries, key=_sort_key)
        tmp_path = self.history_path.with_suffix(self.history_path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            for entry in ordered:
                f.write(entry_to_json_line(entry) + "\n")
        tmp_path.replace(self.history_path)

    def append_entries(self, entries: Iterable[LogEntry]) -> int:
        """
        Append a batch of entries.

        The batch is all-or-nothing: if any entry would not load back, or
        duplicates an existing key or another entry of the batch, nothing is
        written.

        Args:
            entries: Entries to append

        Returns:
            Number of entries written

        Raises:
            FileNotFoundError: If history file doesn't exist
            ValidationError: On an invalid entry or a duplicate
                (exercise, set_number, timestamp)
        """
        new_entries = [dict_to_log_entry(log_entry_to_dict(e)) for e in entries]
        existing = self.load_history()

        seen = {e.key for e in existing}
        for entry in new_entries:
            if entry.key in seen:
                exercise, set_number, timestamp = entry.key
                raise ValidationError(
                    f"Duplicate entry: {exercise} set {set_number} at {timestamp}"
                )
            seen.add(entry.key)

        if new_entries:
            self._write_entries(existing + new_entries)
        return len(new_entries)

    def delete_entry(self, exercise: str, set_number: int, timestamp: str) -> int:
        """
        Delete the entry with the given key.

        Returns:
            Number of entries removed (0 or 1)
        """
        entries = self.load_history()
        key = (exercise, set_number, timestamp)
        kept = [e for e in entries if e.key != key]
        removed = len(entries) - len(kept)
        if removed:
            self._write_entries(kept)
        return removed

    def load_exercise_names(self) -> dict[str, str]:
        """
        Load the canonical → current exercise name map.

        Returns:
            Mapping, empty if nothing was ever renamed
        """
        if not self.names_path.exists():
            return {}
        try:
            with open(self.names_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid name map {self.names_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError(f"Invalid name map {self.names_path}: expected an object")
        return {str(k): str(v) for k, v in data.items()}

    def _save_exercise_names(self, names: dict[str, str]) -> None:
        tmp_path = self.names_path.with_suffix(self.names_path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(names, f, indent=2)
        tmp_path.replace(self.names_path)

    def rename_exercise(self, current: str, new: str) -> None:
        """
        Rename an exercise across the whole history.

        The first rename of an exercise records its current name as the
        canonical one, so the workout template keeps resolving to it.
        If the name map cannot be written, the history is restored.

        Args:
            current: Name the exercise has now
            new: Name to switch to

        Raises:
            ValidationError: If a name is empty or new already belongs to a
                different exercise
        """
        current = validate_exercise_name(current).strip()
        new = validate_exercise_name(new).strip()
        if current == new:
            return

        names = self.load_exercise_names()
        for canonical, shown in names.items():
            if new in (canonical, shown) and canonical != current and shown != current:
                raise ValidationError("Target name already exists")

        entries = self.load_history()
        if any(e.exercise == new for e in entries):
            raise ValidationError("Target name already exists")
        renamed = [
            LogEntry(
                exercise=new,
                set_number=e.set_number,
                weight=e.weight,
                reps=e.reps,
                timestamp=e.timestamp,
                type=e.type,
                bodyweight_kg=e.bodyweight_kg,
            )
            if e.exercise == current
            else e
            for e in entries
        ]
        self._write_entries(renamed)

        existing = next(
            (canonical for canonical, shown in names.items() if current in (canonical, shown)),
            None,
        )
        if existing is not None:
            names[existing] = new
        else:
            names[current] = new
        try:
            self._save_exercise_names(names)
        except OSError:
            self._write_entries(entries)
            raise


def get_default_history_path() -> Path:
    """
    Get the default history file path.

    Returns:
        ~/.lift-tracker/history.jsonl
    """
    return get_config_dir() / "history.jsonl"

