"""Shared setup and output helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

import click

from kalendaryo.core.config import Config
from kalendaryo.core.exceptions import KalendaryoError
from kalendaryo.events import CalendarSession, EventFileStore, Record, StoreConfig


def load_config(config_file: str | None = None) -> Config:
    """Load config, raising a usage error for a broken config file."""
    try:
        return Config(config_file=config_file)
    except KalendaryoError as e:
        raise click.ClickException(str(e)) from e


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn library errors into clean CLI failures (exit code 1)."""
    try:
        yield
    except KalendaryoError as e:
        raise click.ClickException(str(e)) from e


def open_session(config: Config) -> CalendarSession:
    """Load the configured events file into a new session."""
    store = EventFileStore.from_config(StoreConfig.from_config(config))
    with cli_errors():
        return CalendarSession.from_store(store)


def describe(record: Record, *, with_description: bool = False) -> str:
    parts = [f"Name: {record.name}"]
    if with_description:
        parts.append(f"Description: {record.description}")
    parts.append(f"Date: {record.display_date}")
    parts.append(f"Priority: {record.priority}")
    return ", ".join(parts)


def echo_events(records: Sequence[Record]) -> None:
    for record in records:
        click.echo(describe(record))


def print_table(records: Sequence[Record], title: str = "Events") -> None:
    """Render events as a rich table."""
    from rich.console import Console
    from rich.table import Table

    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Date")
    table.add_column("Priority", justify="right")
    table.add_column("Description")
    for position, record in enumerate(records):
        table.add_row(str(position), record.name, record.display_date, str(record.priority), record.description)
    Console().print(table)
