"""
Serialization for log entries.

Handles conversion between LogEntry and JSON-compatible dicts, the CLI's
compact set notation, and CSV export.  This is the validation boundary:
the engine assumes entries built here are well-formed.
"""

import csv
import io
import json
import math
import re
from typing import Any, Iterable

from ..core.config import ENTRY_TYPES
from ..core.models import EntryType, LogEntry, parse_local_timestamp


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


CSV_HEADER = ["exercise", "setNumber", "weight", "bodyweight", "reps", "timestamp"]


def validate_timestamp(timestamp: Any) -> str:
    """
    Validate an ISO-8601 timestamp string.

    Raises:
        ValidationError: If it isn't a string or can't be parsed
    """
    if not isinstance(timestamp, str) or parse_local_timestamp(timestamp) is None:
        raise ValidationError(f"Invalid timestamp: {timestamp!r}. Expected ISO-8601")
    return timestamp


def validate_entry_type(entry_type: Any) -> EntryType:
    if entry_type not in ENTRY_TYPES:
        raise ValidationError(
            f"Invalid type: {entry_type!r}. Must be one of {ENTRY_TYPES}"
        )
    return entry_type  # type: ignore


def validate_exercise_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"Invalid exercise: {name!r}. Must be a non-empty string.")
    return name


def _number(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{key} must be finite, got {value!r}")
    return value


def _integer(data: dict[str, Any], key: str) -> int:
    value = _number(data, key)
    if value != int(value):
        raise ValidationError(f"{key} must be a whole number, got {value!r}")
    return int(value)


def log_entry_to_dict(entry: LogEntry) -> dict[str, Any]:
    """
    Convert LogEntry to a JSON-compatible dict.

    bodyweight_kg is omitted when no bodyweight was recorded.
    """
    data: dict[str, Any] = {
        "type": entry.type,
        "exercise": entry.exercise,
        "set_number": entry.set_number,
        "weight": entry.weight,
        "reps": entry.reps,
        "timestamp": entry.timestamp,
    }
    if entry.bodyweight_kg is not None:
        data["bodyweight_kg"] = entry.bodyweight_kg
    return data


def dict_to_log_entry(data: Any) -> LogEntry:
    """
    Convert dict to LogEntry.

    Accepts ``set_number`` or the legacy camelCase ``setNumber`` and
    ``bodyweight``.  A missing ``type`` means "workout".

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Entry must be an object, got {type(data).__name__}")

    data = dict(data)
    if "set_number" not in data and "setNumber" in data:
        data["set_number"] = data["setNumber"]
    if "bodyweight_kg" not in data and "bodyweight" in data:
        data["bodyweight_kg"] = data["bodyweight"]

    entry_type = validate_entry_type(data.get("type") or "workout")
    exercise = validate_exercise_name(data.get("exercise"))
    timestamp = validate_timestamp(data.get("timestamp"))

    set_number = _integer(data, "set_number")
    if set_number <= 0:
        raise ValidationError(f"set_number must be positive, got {set_number}")
    reps = _integer(data, "reps")
    if reps < 0:
        raise ValidationError(f"reps must be non-negative, got {reps}")
    weight = float(_number(data, "weight"))

    bodyweight: float | None = None
    if data.get("bodyweight_kg") is not None:
        bodyweight = float(_number(data, "bodyweight_kg"))
        if bodyweight <= 0:
            raise ValidationError(f"bodyweight_kg must be positive, got {bodyweight}")

    return LogEntry(
        exercise=exercise,
        set_number=set_number,
        weight=weight,
        reps=reps,
        timestamp=timestamp,
        type=entry_type,
        bodyweight_kg=bodyweight,
    )


def entry_to_json_line(entry: LogEntry) -> str:
    """Serialize an entry to a single JSONL line (no trailing newline)."""
    return json.dumps(log_entry_to_dict(entry), separators=(",", ":"))


def parse_sets_string(sets_str: str) -> list[tuple[float, int]]:
    """
    Parse the compact sets notation used by the CLI.

    Format: ``WEIGHTxREPS`` separated by commas, e.g. ``80x8, 80x8, 82.5x6``.
    ``x`` may also be written ``X``, ``*`` or ``×``.

    Returns:
        List of (weight, reps) tuples in set order

    Raises:
        ValidationError: If any part can't be parsed
    """
    pattern = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*[xX*×]\s*(\d+)\s*$")
    result: list[tuple[float, int]] = []
    for part in sets_str.split(","):
        if not part.strip():
            continue
        match = pattern.match(part)
        if match is None:
            raise ValidationError(
                f"Invalid set: {part.strip()!r}. Expected WEIGHTxREPS, e.g. 80x8"
            )
        result.append((float(match.group(1)), int(match.group(2))))
    if not result:
        raise ValidationError("No sets given")
    return result


def history_to_csv(entries: Iterable[LogEntry]) -> str:
    """
    Render entries as CSV with the export header.

    The bodyweight cell is empty when none was recorded.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for e in entries:
        writer.writerow([
            e.exercise,
            e.set_number,
            e.weight,
            e.bodyweight_kg if e.bodyweight_kg is not None else "",
            e.reps,
            e.timestamp,
        ])
    return buf.getvalue()
