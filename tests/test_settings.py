"""Tests for settings service and commands."""

import pytest

from fintrack.cli.main import cli
from fintrack.domain.entities import Currency, Language, Theme
from fintrack.domain.errors import ValidationError


def test_set_language(settings_service, store):
    assert settings_service.set_language("TR") == Language.TR
    assert store.settings.language == Language.TR


def test_set_currency_case_insensitive(settings_service, store):
    assert settings_service.set_currency("eur") == Currency.EUR
    assert store.settings.currency == Currency.EUR


def test_set_theme(settings_service, store):
    settings_service.set_theme(Theme.DARK)
    assert settings_service.get_settings().theme == Theme.DARK


def test_set_notifications(settings_service, store):
    settings_service.set_notifications(False)
    assert store.settings.notifications is False


@pytest.mark.parametrize(
    "setter,value",
    [("set_language", "de"), ("set_currency", "GBP"), ("set_theme", "blue")],
)
def test_invalid_values_rejected(settings_service, store, setter, value):
    """Test that values outside the allowed set raise and leave settings unchanged."""
    before = store.settings
    with pytest.raises(ValidationError, match="Choose one of"):
        getattr(settings_service, setter)(value)
    assert store.settings == before


def test_settings_show_defaults(cli_runner, data_dir):
    result = cli_runner.invoke(cli, ["--data-dir", str(data_dir), "settings", "show"])

    assert result.exit_code == 0
    assert "English (en)" in result.output
    assert "US Dollar (USD)" in result.output
    assert "light" in result.output
    assert "Notifications: on" in result.output


def test_settings_are_persisted(cli_runner, data_dir):
    """Test that changed settings survive into the next invocation."""
    for args in (["language", "tr"], ["currency", "TRY"], ["theme", "dark"], ["notifications", "off"]):
        result = cli_runner.invoke(cli, ["--data-dir", str(data_dir), "settings", *args])
        assert result.exit_code == 0

    result = cli_runner.invoke(cli, ["--data-dir", str(data_dir), "settings", "show"])
    assert "Türkçe (tr)" in result.output
    assert "Turkish Lira (TRY)" in result.output
    assert "dark" in result.output
    assert "Notifications: off" in result.output


def test_settings_currency_invalid(cli_runner, data_dir):
    result = cli_runner.invoke(cli, ["--data-dir", str(data_dir), "settings", "currency", "GBP"])
    assert result.exit_code != 0
