"""Category management commands."""

import click

from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.category import CategoryService
from fintrack.domain.defaults import CATEGORY_COLORS
from fintrack.domain.entities import Category, TransactionType
from fintrack.domain.errors import DomainError

TYPE_CHOICE = click.Choice(["income", "expense"], case_sensitive=False)


def print_categories(categories: list[Category], language) -> None:
    """Print one line per category."""
    for cat in categories:
        marker = " (default)" if cat.is_default else ""
        click.echo(f"  {cat.display_name(language):<25} {cat.color}  ID: {cat.id}{marker}")


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List income and expense categories."""
    store = ctx.obj["store"]
    service = CategoryService(store)
    language = store.settings.language

    click.echo("\nIncome categories:")
    print_categories(service.list_categories(TransactionType.INCOME), language)
    click.echo("\nExpense categories:")
    print_categories(service.list_categories(TransactionType.EXPENSE), language)


@category_group.command("create")
@click.argument("name")
@click.option("--type", "category_type", type=TYPE_CHOICE, default="expense", help="Category type (default: expense)")
@click.option("--color", help=f"Hex color (default: {CATEGORY_COLORS[0]})")
@click.option("--localized-name", help="Turkish display name")
@click.pass_context
def create_category(ctx, name: str, category_type: str, color: str | None, localized_name: str | None):
    """Create a new category."""
    service = CategoryService(ctx.obj["store"])

    try:
        category_id = service.create_category(
            name=name, type=category_type, color=color, name_localized=localized_name
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created {category_type.lower()} category '{name.strip()}' (ID: {category_id})")


@category_group.command("edit")
@click.argument("category_id")
@click.option("--name", help="New name")
@click.option("--type", "category_type", type=TYPE_CHOICE, help="New type")
@click.option("--color", help="New hex color")
@click.option("--localized-name", help="New Turkish display name")
@click.pass_context
def edit_category(ctx, category_id: str, name: str | None, category_type: str | None, color: str | None, localized_name: str | None):
    """Edit a user category. Default categories cannot be edited."""
    service = CategoryService(ctx.obj["store"])

    try:
        service.update_category(
            category_id,
            name=name,
            type=category_type,
            color=color,
            name_localized=localized_name,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated category {category_id}")


@category_group.command("delete")
@click.argument("category_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_category(ctx, category_id: str, yes: bool):
    """Delete a user category. Default categories cannot be deleted."""
    service = CategoryService(ctx.obj["store"])

    in_use = service.count_transactions(category_id)
    if in_use and not yes:
        prompt = (
            f"{in_use} transaction{'s' if in_use != 1 else ''} use this category "
            "and will show as Unknown. Delete anyway?"
        )
        if not click.confirm(prompt):
            click.echo("Deletion cancelled.")
            return

    try:
        service.delete_category(category_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted category {category_id}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
