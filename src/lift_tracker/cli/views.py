"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of plans, history and estimates.
"""

from rich.console import Console
from rich.table import Table

from ..core.config import REST_SECONDS
from ..core.models import LogEntry, OneRmEstimate, ProgressionAdvice, SessionExercise

console = Console()

_ACTION_STYLE = {
    "increase": "green",
    "maintain": "yellow",
    "decrease": "red",
}


def _fmt_weight(weight: float, bodyweight_kg: float | None = None) -> str:
    if bodyweight_kg is not None:
        return f"BW {bodyweight_kg:.1f} + {weight:.1f} kg"
    return f"{weight:.1f} kg"


def _fmt_action(advice: ProgressionAdvice) -> str:
    style = _ACTION_STYLE.get(advice.action, "white")
    return f"[{style}]{advice.action}[/{style}]"


def format_plan_table(plan: list[SessionExercise], title: str) -> Table:
    """
    Create a Rich table for a workout plan.

    Done sets are shown in bold with a check mark; pending ones dimmed.
    """
    table = Table(title=title, caption=f"Rest {REST_SECONDS}s between sets")

    table.add_column("Exercise", style="cyan")
    table.add_column("Set", justify="right", width=3)
    table.add_column("Load", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("Done", justify="center")

    for exercise in plan:
        for i, s in enumerate(exercise.sets):
            style = "bold" if s.completed else "dim"
            table.add_row(
                exercise.name if i == 0 else "",
                str(s.set_number),
                f"[{style}]{_fmt_weight(s.weight, s.bodyweight_kg)}[/{style}]",
                f"[{style}]{s.reps}[/{style}]",
                "✓" if s.completed else "",
            )
        table.add_section()

    return table


def print_plan(plan: list[SessionExercise], title: str) -> None:
    """Print the plan table followed by each exercise's progression note."""
    console.print(format_plan_table(plan, title))
    for exercise in plan:
        if exercise.progression is None:
            continue
        console.print(
            f"  [cyan]{exercise.name}[/cyan] {_fmt_action(exercise.progression)}: "
            f"{exercise.progression.message}"
        )


def format_advice_table(advices: list[tuple[str, ProgressionAdvice]]) -> Table:
    """Create a Rich table of next-session advice per exercise."""
    table = Table(title="Next session")

    table.add_column("Exercise", style="cyan")
    table.add_column("Action")
    table.add_column("Previous", justify="right")
    table.add_column("Suggested", justify="right", style="bold")
    table.add_column("Why")

    for name, advice in advices:
        table.add_row(
            name,
            _fmt_action(advice),
            _fmt_weight(advice.previous_weight),
            _fmt_weight(advice.suggested_weight),
            advice.message,
        )

    return table


def format_history_table(entries: list[LogEntry]) -> Table:
    """
    Create a Rich table displaying logged entries.

    Args:
        entries: Entries to display, already ordered

    Returns:
        Rich Table object
    """
    table = Table(title="Training History")

    table.add_column("Timestamp", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Exercise", style="green")
    table.add_column("Set", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("BW(kg)", justify="right")
    table.add_column("Reps", justify="right", style="bold")

    for e in entries:
        if not e.is_workout:
            table.add_row(e.timestamp, e.type, "-", "", "", "", "")
            continue
        table.add_row(
            e.timestamp,
            e.type,
            e.exercise,
            str(e.set_number),
            f"{e.weight:.1f}",
            f"{e.bodyweight_kg:.1f}" if e.bodyweight_kg is not None else "-",
            str(e.reps),
        )

    return table


def print_history(entries: list[LogEntry]) -> None:
    """
    Print history to console.

    Args:
        entries: Entries to display
    """
    if not entries:
        console.print("[yellow]No entries recorded yet.[/yellow]")
        return

    console.print(format_history_table(entries))


def format_estimate_table(estimates: list[tuple[str, OneRmEstimate | None]]) -> Table:
    """Create a Rich table of 1RM estimates; missing estimates show as n/a."""
    table = Table(title="Estimated 1RM")

    table.add_column("Exercise", style="cyan")
    table.add_column("1RM", justify="right", style="bold")
    table.add_column("95% CI", justify="right")
    table.add_column("Load", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("N", justify="right", style="dim")

    for name, est in estimates:
        if est is None:
            table.add_row(name, "n/a", "", "", "", "")
            continue
        table.add_row(
            name,
            f"{est.estimate:.1f} kg",
            f"±{est.ci_half:.1f} ({est.low:.1f}–{est.high:.1f})",
            f"{est.median_weight:.1f} kg",
            f"{est.median_reps:.1f}",
            str(est.session_count),
        )

    return table


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} [y/N]: ")
    return response.lower() in ("y", "yes")
