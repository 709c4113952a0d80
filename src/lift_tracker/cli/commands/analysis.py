"""Analysis commands: estimate-1rm."""

from typing import Annotated, Optional

import typer

from ...core.max_estimator import get_one_rep_max_estimate
from ...io.serializers import ValidationError
from .. import views
from ..app import HistoryPathOption, app, get_store, get_template


@app.command("estimate-1rm")
def estimate_1rm(
    exercise: Annotated[
        Optional[str],
        typer.Argument(help="Exercise name (default: every template exercise)"),
    ] = None,
    history_path: HistoryPathOption = None,
) -> None:
    """
    Estimate one-rep max from the last three sessions.
    """
    store = get_store(history_path)

    try:
        history = store.load_history()
        names = [exercise] if exercise else [t.name for t in get_template(store)]
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    estimates = [(name, get_one_rep_max_estimate(name, history)) for name in names]
    views.console.print(views.format_estimate_table(estimates))

    if exercise and estimates[0][1] is None:
        views.print_info(f"No estimate available for {exercise}.")
