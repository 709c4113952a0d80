"""Planning commands: plan and next."""

from datetime import date as date_cls

import typer

from ...core.progression import get_next_session_progression
from ...core.session_builder import create_session
from ...io.serializers import ValidationError
from .. import views
from ..app import DateOption, HistoryPathOption, app, get_store, get_template, parse_day


@app.command("plan")
def plan(
    date: DateOption = None,
    history_path: HistoryPathOption = None,
) -> None:
    """
    Show the workout for a day: logged sets plus prefilled targets.
    """
    store = get_store(history_path)
    day = parse_day(date)

    try:
        history = store.load_history()
        template = get_template(store)
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    session = create_session(history, template, day)
    title = "Today's workout" if day == date_cls.today() else f"Workout for {day.isoformat()}"
    views.print_plan(session, title)


@app.command("next")
def next_session(
    date: DateOption = None,
    history_path: HistoryPathOption = None,
) -> None:
    """
    Preview load advice for the session after the given day (default: tomorrow).
    """
    store = get_store(history_path)
    day = parse_day(date)

    try:
        history = store.load_history()
        template = get_template(store)
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    advices = [(t.name, get_next_session_progression(t, history, day)) for t in template]
    views.console.print(views.format_advice_table(advices))
