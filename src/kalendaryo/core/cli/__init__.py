"""Kalendaryo CLI — entry point for the event commands and the interactive menu."""

from __future__ import annotations

import click

from kalendaryo import __version__
from kalendaryo.core.utils.logging import LOG_LEVELS, setup_logging


@click.group()
@click.version_option(version=__version__, package_name="kalendaryo")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("--events-file", type=click.Path(dir_okay=False), default=None, help="Events file to read and write.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Overrides logging.level.",
)
@click.pass_context
def main(ctx: click.Context, config_file: str | None, events_file: str | None, log_level: str | None) -> None:
    """Kalendaryo — school event calendar organizer."""
    from kalendaryo.core.cli.common import cli_errors, load_config

    config = load_config(config_file)
    if events_file:
        config.set("storage.events_file", events_file)
    if log_level:
        config.set("logging.level", log_level)
    with cli_errors():
        setup_logging(level=str(config.get("logging.level", "WARNING")), log_file=config.get_log_file())
    ctx.obj = config


# Register subcommands
from .events_cmd import add, find, list_events, range_query, search, sort
from .menu_cmd import menu

main.add_command(add)
main.add_command(list_events)
main.add_command(find)
main.add_command(search)
main.add_command(sort)
main.add_command(range_query)
main.add_command(menu)
