"""CLI helpers for reporting period resolution."""

from typing import Optional

import click

from fintrack.domain.entities import Period

PERIOD_FLAGS = {
    "this_month": Period.THIS_MONTH,
    "last_month": Period.LAST_MONTH,
    "this_year": Period.THIS_YEAR,
}


def period_options(func):
    """Add --this-month, --last-month and --this-year flags to a command."""
    func = click.option("--this-year", is_flag=True, help="Filter to current year")(func)
    func = click.option("--last-month", is_flag=True, help="Filter to previous month")(func)
    func = click.option("--this-month", is_flag=True, help="Filter to current month")(func)
    return func


def resolve_cli_period(
    ctx: click.Context,
    *,
    period_flags: dict[str, bool],
    default: Optional[Period] = None,
) -> Optional[Period]:
    """Resolve the selected period from CLI flags.

    Exits with status 1 if more than one flag is set.
    """
    selected = [PERIOD_FLAGS[name] for name, is_set in period_flags.items() if is_set]

    if len(selected) > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-month, --this-year) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if selected:
        return selected[0]
    return default
