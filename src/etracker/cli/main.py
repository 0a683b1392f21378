#!/usr/bin/env python3
"""
Main CLI Entry Point for the Expense Tracker

The first argument is the command word; everything after it is joined into a
free-form payload and handed to the flag tokenizer, so multi-word values need
no quoting:

    etracker add --description Pay a fee --amount 5 --category Admin

Every outcome, including user errors and write failures, exits with status 0.
"""

import logging
from collections.abc import Callable

import click

from .. import __author__, __version__
from ..core.config import Config, get_config
from ..core.exceptions import ExpenseTrackerError, StorageError
from ..flags import ParsedFlags, join_payload
from ..operations import (
    add_expense,
    breakdown,
    delete_expense,
    export_expenses,
    summarize,
    update_expense,
)
from ..presenter import HELP_TEXT, format_breakdown, format_expense_table, format_summary
from ..store import ExpenseStore

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = "Unknown command. See help for more information."

Handler = Callable[[ExpenseStore, ParsedFlags, Config], None]


def _add(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    expense = add_expense(store, flags)
    click.echo(f"Expense added successfully (ID: {expense.id})")


def _update(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    expense = update_expense(store, flags)
    click.echo(f"You updated the expense with ID {expense.id}")


def _delete(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    expense = delete_expense(store, flags)
    click.echo(f"Expense deleted successfully (ID: {expense.id})")


def _list(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    for line in format_expense_table(store.expenses):
        click.echo(line)


def _summary(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    click.echo(format_summary(summarize(store, flags)))


def _breakdown(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    rows = breakdown(store, flags)
    for line in format_breakdown(rows, flags.text("by").lower() or "category"):
        click.echo(line)


def _export(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    export_file = export_expenses(store, config.export_file)
    click.echo(f"Export to {export_file.name} was done successfully!")


def _help(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    click.echo(HELP_TEXT)


def _version(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    click.echo(f"Expense Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


def _config(store: ExpenseStore, flags: ParsedFlags, config: Config) -> None:
    click.echo("Current Configuration:")
    for key, value in config.to_dict().items():
        click.echo(f"  {key.replace('_', ' ').title()}: {value}")
    click.echo(f"  Store: {store.summary_text()}")


COMMANDS: dict[str, Handler] = {
    "add": _add,
    "update": _update,
    "delete": _delete,
    "list": _list,
    "summary": _summary,
    "breakdown": _breakdown,
    "export": _export,
    "help": _help,
    "version": _version,
    "config": _config,
}


def dispatch(command: str | None, payload: str, store: ExpenseStore, config: Config) -> None:
    """
    Run one command against the store and print its outcome.

    User errors are printed to stdout and write failures to stderr; neither
    is re-raised.
    """
    handler = COMMANDS.get(command or "")
    if handler is None:
        click.echo(UNKNOWN_COMMAND_MESSAGE)
        return

    logger.debug("Dispatching %r with payload %r", command, payload)
    try:
        handler(store, ParsedFlags.parse(payload), config)
    except StorageError as e:
        click.echo(str(e), err=True)
    except ExpenseTrackerError as e:
        click.echo(str(e))


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    }
)
@click.argument("command", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(command: str | None, args: tuple[str, ...]) -> None:
    """Expense tracker - record, list and summarize expenses from the command line."""
    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    store = ExpenseStore.open(config.storage_file)
    dispatch(command, join_payload(args), store, config)


if __name__ == "__main__":
    main()
