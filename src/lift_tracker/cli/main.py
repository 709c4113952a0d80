"""
CLI entry point using Typer.

Provides commands for logging and planning:
- init: Create the history file
- log: Log sets of an exercise
- mark-day: Mark a sick or vacation day
- plan: Show the day's workout with progression targets
- next: Preview load advice for the next session
- show-history: Display logged entries
- delete-entry: Remove a logged set
- rename: Rename an exercise
- export-csv: Export history as CSV
- estimate-1rm: Estimate one-rep max
"""

from .app import app
from .commands import analysis, planning, sessions  # noqa: F401  (register commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
