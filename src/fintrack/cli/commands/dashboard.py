"""Dashboard command."""

import click

from fintrack.cli.formatting import money, transaction_line
from fintrack.domain.summary import SummaryService


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show this month's income, expenses and balance with recent transactions."""
    store = ctx.obj["store"]
    settings = store.settings
    summary = SummaryService(store).build_dashboard()

    click.echo("\nThis month")
    click.echo("-" * 40)
    click.echo(f"{'Balance':<20} {money(summary.balance, settings):>19}")
    click.echo(f"{'Income':<20} {money(summary.income, settings):>19}")
    click.echo(f"{'Expenses':<20} {money(summary.expenses, settings):>19}")

    click.echo("\nRecent transactions")
    click.echo("-" * 100)
    if not summary.recent_transactions:
        click.echo("No transactions yet. Add one with 'fintrack transaction add'.")
        return
    for txn in summary.recent_transactions:
        click.echo(transaction_line(txn, store))


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
