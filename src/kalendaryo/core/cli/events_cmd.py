"""One-shot event commands: add, list, find, search, sort, range."""

from __future__ import annotations

import click

from kalendaryo.core.cli.common import cli_errors, describe, echo_events, open_session, print_table
from kalendaryo.events import Record


@click.command()
@click.argument("name")
@click.argument("description")
@click.argument("date", type=int)
@click.argument("priority", type=int)
@click.pass_obj
def add(config, name: str, description: str, date: int, priority: int) -> None:
    """Add an event. DATE is YYYYMMDD, PRIORITY is typically 1-10."""
    session = open_session(config)
    with cli_errors():
        session.append(Record(name=name, description=description, date=date, priority=priority))
    click.echo("Event added successfully!")


@click.command("list")
@click.pass_obj
def list_events(config) -> None:
    """Show all events in stored order."""
    session = open_session(config)
    if not session.records:
        click.echo("No events yet.")
        return
    print_table(session.records)


@click.command()
@click.argument("date", type=int)
@click.pass_obj
def find(config, date: int) -> None:
    """Find an event on DATE (YYYYMMDD)."""
    session = open_session(config)
    record = session.find_by_date(date)
    if record is None:
        click.echo("No event found on this date.")
        return
    click.echo(describe(record, with_description=True))


@click.command()
@click.argument("keyword")
@click.pass_obj
def search(config, keyword: str) -> None:
    """Find events whose name or description contains KEYWORD (case-sensitive)."""
    session = open_session(config)
    results = session.search(keyword)
    if not results:
        click.echo("No matching events found.")
        return
    echo_events(results)


@click.command()
@click.pass_obj
def sort(config) -> None:
    """Sort stored events by ascending priority."""
    session = open_session(config)
    if not session.records:
        click.echo("No events to sort.")
        return
    session.sort_by_priority()
    with cli_errors():
        session.save()
    click.echo("Events sorted by priority!")


@click.command("range")
@click.argument("start", type=int)
@click.argument("end", type=int)
@click.pass_obj
def range_query(config, start: int, end: int) -> None:
    """Show events at positions START..END (inclusive), ordered by date."""
    session = open_session(config)
    results = session.range_query(start, end)
    if not results:
        click.echo("No events in this range.")
        return
    echo_events(results)
