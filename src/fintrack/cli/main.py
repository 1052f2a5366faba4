"""Main CLI entry point."""

import click

from fintrack.app import initialize_app
from fintrack.logging_config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, configure_logging
from fintrack.storage.factories import DATA_DIR_ENV

# Import and register all commands at module level
from fintrack.cli.commands import (
    analytics,
    category,
    dashboard,
    db,
    settings,
    transaction,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Directory for saved data (overrides FINTRACK_DATA_DIR environment variable)",
    envvar=DATA_DIR_ENV,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar=LOG_LEVEL_ENV,
    help="Logging verbosity (default: WARNING)",
)
@click.pass_context
def cli(ctx, data_dir: str | None, log_level: str):
    """Fintrack - Personal finance tracking.

    Record income and expenses, organize them in categories and review
    monthly analytics. Data is saved automatically after every change.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Load saved data only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        app = initialize_app(data_dir=data_dir)
        ctx.obj["app"] = app
        ctx.obj["store"] = app.store
        ctx.call_on_close(app.close)


# Register all commands
dashboard.register_commands(cli)
transaction.register_commands(cli)
category.register_commands(cli)
settings.register_commands(cli)
analytics.register_commands(cli)
db.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
