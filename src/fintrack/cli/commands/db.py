"""Relational export and import commands."""

from pathlib import Path

import click

from fintrack.cli.error_handling import handle_domain_error
from fintrack.database.errors import StorageError
from fintrack.database.factories import create_sqlite_database
from fintrack.domain.defaults import ensure_default_categories


@click.group()
def db_group():
    """Export to or import from a SQLite database."""
    pass


@db_group.command("export")
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_context
def export_db(ctx, path: str):
    """Write all transactions, categories and settings to a SQLite file.

    Existing rows in the file are replaced.
    """
    store = ctx.obj["store"]
    try:
        database = create_sqlite_database(path)
        try:
            database.export_state(store.state)
        finally:
            database.disconnect()
    except StorageError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Exported {len(store.transactions)} transactions and "
        f"{len(store.categories)} categories to {path}"
    )


@db_group.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def import_db(ctx, path: str, yes: bool):
    """Replace current data with the contents of a SQLite file."""
    store = ctx.obj["store"]

    if not yes and not click.confirm(
        f"This replaces all current data with {Path(path).name}. Continue?"
    ):
        click.echo("Import cancelled.")
        return

    try:
        database = create_sqlite_database(path)
        try:
            state = database.load_state()
        finally:
            database.disconnect()
    except StorageError as e:
        handle_domain_error(ctx, e)

    state = ensure_default_categories(state)
    store.replace_state(state)
    click.echo(
        f"Imported {len(state.transactions)} transactions and "
        f"{len(state.categories)} categories from {path}"
    )


def register_commands(cli):
    """Register db commands with main CLI."""
    cli.add_command(db_group, name="db")
