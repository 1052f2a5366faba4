"""Settings commands."""

import click

from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import Currency, Language, Theme
from fintrack.domain.errors import DomainError
from fintrack.domain.settings import SettingsService
from fintrack.utils.currency import CURRENCY_NAMES

LANGUAGE_NAMES = {Language.EN: "English", Language.TR: "Türkçe"}


@click.group()
def settings_group():
    """Show and change preferences."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show current preferences."""
    settings = SettingsService(ctx.obj["store"]).get_settings()
    click.echo(f"Language:      {LANGUAGE_NAMES[settings.language]} ({settings.language.value})")
    click.echo(f"Currency:      {CURRENCY_NAMES[settings.currency]} ({settings.currency.value})")
    click.echo(f"Theme:         {settings.theme.value}")
    click.echo(f"Notifications: {'on' if settings.notifications else 'off'}")


@settings_group.command("language")
@click.argument("value", type=click.Choice([m.value for m in Language], case_sensitive=False))
@click.pass_context
def set_language(ctx, value: str):
    """Set the display language."""
    try:
        language = SettingsService(ctx.obj["store"]).set_language(value)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Language set to {LANGUAGE_NAMES[language]}")


@settings_group.command("currency")
@click.argument("value", type=click.Choice([m.value for m in Currency], case_sensitive=False))
@click.pass_context
def set_currency(ctx, value: str):
    """Set the display currency."""
    try:
        currency = SettingsService(ctx.obj["store"]).set_currency(value)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Currency set to {CURRENCY_NAMES[currency]} ({currency.value})")


@settings_group.command("theme")
@click.argument("value", type=click.Choice([m.value for m in Theme], case_sensitive=False))
@click.pass_context
def set_theme(ctx, value: str):
    """Set the color theme."""
    try:
        theme = SettingsService(ctx.obj["store"]).set_theme(value)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Theme set to {theme.value}")


@settings_group.command("notifications")
@click.argument("state", type=click.Choice(["on", "off"], case_sensitive=False))
@click.pass_context
def set_notifications(ctx, state: str):
    """Turn notifications on or off."""
    enabled = state.lower() == "on"
    SettingsService(ctx.obj["store"]).set_notifications(enabled)
    click.echo(f"Notifications turned {'on' if enabled else 'off'}")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
