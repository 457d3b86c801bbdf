"""kalendaryo menu — interactive numbered menu over one session."""

from __future__ import annotations

import click

from kalendaryo.core.cli.common import cli_errors, describe, echo_events, open_session
from kalendaryo.events import CalendarSession, Record

MENU = """
School Event Calendar Organizer
1. Add Event
2. View Events
3. Search Event by Date
4. Search Event by Keyword
5. Exit
6. Sort Events by Priority"""


def _add_event(session: CalendarSession) -> None:
    name = click.prompt("Enter event name")
    description = click.prompt("Enter event description", default="", show_default=False)
    date = click.prompt("Enter event date (YYYYMMDD)", type=int)
    priority = click.prompt("Enter event priority (1-10)", type=int)
    with cli_errors():
        session.append(Record(name=name, description=description, date=date, priority=priority))
    session.rebuild()
    click.echo("Event added successfully!")


def _view_events(session: CalendarSession) -> None:
    click.echo("\nEvents List:")
    echo_events(session.records)


def _find_by_date(session: CalendarSession) -> None:
    date = click.prompt("Enter date (YYYYMMDD)", type=int)
    record = session.find_by_date(date)
    if record is None:
        click.echo("No event found on this date.")
    else:
        click.echo(describe(record, with_description=True))


def _search_keyword(session: CalendarSession) -> None:
    keyword = click.prompt("Enter keyword", default="", show_default=False)
    results = session.search(keyword)
    if not results:
        click.echo("No matching events found.")
    else:
        echo_events(results)


def _sort_priority(session: CalendarSession) -> None:
    if not session.records:
        click.echo("No events to sort.")
        return
    session.sort_by_priority()
    with cli_errors():
        session.save()
    click.echo("Events sorted by priority!")


_ACTIONS = {
    1: _add_event,
    2: _view_events,
    3: _find_by_date,
    4: _search_keyword,
    6: _sort_priority,
}


@click.command()
@click.pass_obj
def menu(config) -> None:
    """Run the interactive event menu."""
    session = open_session(config)
    while True:
        click.echo(MENU)
        choice = click.prompt("Enter your choice", type=int)
        if choice == 5:
            click.echo("Goodbye!")
            break
        action = _ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice. Try again.")
            continue
        action(session)
