"""Transaction management commands."""

import click

from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.formatting import money, transaction_line
from fintrack.cli.period_filters import period_options, resolve_cli_period
from fintrack.domain.errors import DomainError
from fintrack.domain.summary import SummaryService
from fintrack.domain.transaction import TransactionService

TYPE_CHOICE = click.Choice(["income", "expense"], case_sensitive=False)


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("add")
@click.argument("amount")
@click.option("--category", "category_id", required=True, help="Category ID (see 'category list')")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, help="income or expense (default: the category's type)")
@click.option("--date", "date_str", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--description", help="Transaction description")
@click.pass_context
def add_transaction(ctx, amount: str, category_id: str, transaction_type: str | None, date_str: str | None, description: str | None):
    """Add a transaction of AMOUNT."""
    store = ctx.obj["store"]
    service = TransactionService(store)

    if transaction_type is None:
        category = store.get_category(category_id)
        transaction_type = category.type.value if category is not None else "expense"

    try:
        transaction_id = service.create_transaction(
            amount=amount,
            category_id=category_id,
            type=transaction_type,
            date=date_str,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added {transaction_type} transaction (ID: {transaction_id})")


@transaction_group.command("list")
@period_options
@click.pass_context
def list_transactions(ctx, this_month: bool, last_month: bool, this_year: bool):
    """List transactions grouped by day with daily totals."""
    store = ctx.obj["store"]
    period = resolve_cli_period(
        ctx,
        period_flags={"this_month": this_month, "last_month": last_month, "this_year": this_year},
    )

    sections = SummaryService(store).build_sections(period)
    if not sections:
        click.echo("No transactions found.")
        return

    for section in sections:
        total = section.total
        sign = "+" if total >= 0 else "-"
        click.echo(f"\n{section.title:<40} {sign}{money(abs(total), store.settings):>14}")
        click.echo("-" * 100)
        for txn in section.transactions:
            click.echo(transaction_line(txn, store))


@transaction_group.command("edit")
@click.argument("transaction_id")
@click.option("--amount", help="New amount")
@click.option("--category", "category_id", help="New category ID")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, help="New type")
@click.option("--date", "date_str", help="New date (YYYY-MM-DD or relative)")
@click.option("--description", help="New description")
@click.option("--clear-description", is_flag=True, help="Remove the description")
@click.pass_context
def edit_transaction(
    ctx,
    transaction_id: str,
    amount: str | None,
    category_id: str | None,
    transaction_type: str | None,
    date_str: str | None,
    description: str | None,
    clear_description: bool,
):
    """Edit fields of a transaction."""
    service = TransactionService(ctx.obj["store"])

    try:
        service.update_transaction(
            transaction_id,
            amount=amount,
            category_id=category_id,
            type=transaction_type,
            date=date_str,
            description=description,
            clear_description=clear_description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool):
    """Delete a transaction."""
    store = ctx.obj["store"]
    service = TransactionService(store)

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    click.echo(transaction_line(txn, store))
    if not yes and not click.confirm("Are you sure you want to delete this transaction?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
