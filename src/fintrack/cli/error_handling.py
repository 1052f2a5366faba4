"""CLI error handling helpers."""

import click

from fintrack.database.errors import StorageError
from fintrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | StorageError | ValueError) -> None:
    """Render a domain or storage error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
