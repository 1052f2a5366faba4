"""Analytics command."""

import click

from fintrack.cli.formatting import money
from fintrack.cli.period_filters import period_options, resolve_cli_period
from fintrack.domain.entities import Period
from fintrack.domain.summary import SummaryService

PERIOD_TITLES = {
    Period.THIS_MONTH: "This Month",
    Period.LAST_MONTH: "Last Month",
    Period.THIS_YEAR: "This Year",
}


@click.command("analytics")
@period_options
@click.pass_context
def analytics(ctx, this_month: bool, last_month: bool, this_year: bool):
    """Show totals, top expense categories and the six-month trend."""
    store = ctx.obj["store"]
    settings = store.settings
    period = resolve_cli_period(
        ctx,
        period_flags={"this_month": this_month, "last_month": last_month, "this_year": this_year},
        default=Period.THIS_MONTH,
    )

    report = SummaryService(store).build_analytics_report(period)

    click.echo(f"\n{PERIOD_TITLES[report.period]} ({report.start_date} to {report.end_date})")
    click.echo("-" * 60)
    click.echo(f"{'Income':<30} {money(report.totals.income, settings):>29}")
    click.echo(f"{'Expenses':<30} {money(report.totals.expenses, settings):>29}")
    click.echo(f"{'Net':<30} {money(report.totals.balance, settings):>29}")

    click.echo("\nExpenses by category")
    click.echo("-" * 60)
    if not report.breakdown:
        click.echo("No expenses in this period.")
    else:
        total_expenses = report.totals.expenses
        for entry in report.breakdown:
            share = (entry.total / total_expenses * 100) if total_expenses else 0
            click.echo(
                f"{entry.name:<30} {money(entry.total, settings):>20} {share:>7.1f}%"
            )

    click.echo("\nMonthly trend")
    click.echo("-" * 60)
    click.echo(f"{'Month':<10} {'Income':>24} {'Expenses':>24}")
    for month in report.trend.months:
        click.echo(
            f"{month.label} {month.year:<5} {money(month.income, settings):>20} "
            f"{money(month.expenses, settings):>24}"
        )


def register_commands(cli):
    """Register analytics command with main CLI."""
    cli.add_command(analytics)
