"""Tests for application lifecycle and logging setup."""

import json
import logging
from datetime import date
from decimal import Decimal

import pytest
import structlog

from fintrack.app import initialize_app
from fintrack.domain.defaults import DEFAULT_CATEGORIES
from fintrack.domain.entities import Theme, TransactionType
from fintrack.logging_config import configure_default_logging, configure_logging
from fintrack.storage.persistor import ROOT_KEY


def test_first_launch_uses_defaults(data_dir):
    app = initialize_app(data_dir=str(data_dir))

    assert app.restored is False
    assert app.store.categories == DEFAULT_CATEGORIES
    assert app.store.transactions == ()
    assert app.persistor.is_running
    app.close()


def test_state_survives_restart(data_dir):
    """Test that a second launch sees the first launch's changes."""
    with initialize_app(data_dir=str(data_dir)) as app:
        app.store.add_transaction(Decimal("42"), TransactionType.EXPENSE, "rent", date(2024, 1, 1))
        app.store.set_theme(Theme.DARK)
        saved_state = app.store.state

    with initialize_app(data_dir=str(data_dir)) as app:
        assert app.restored is True
        assert app.store.state == saved_state


def test_close_flushes_and_stops(data_dir, file_storage):
    app = initialize_app(storage=file_storage)
    app.close()
    app.close()

    assert not app.persistor.is_running
    payload = json.loads(file_storage.get_item(ROOT_KEY))
    assert payload["version"] == 1


def test_configure_logging_sets_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG

    configure_logging()
    assert logging.getLogger().level == logging.WARNING


def test_default_logging_is_quiet(capsys):
    """Test that debug events are dropped when the CLI never configured logging."""
    structlog.reset_defaults()
    try:
        configure_default_logging()
        logger = structlog.get_logger("fintrack.test")
        logger.debug("store_commit", action="add_transaction")
        logger.info("app_initialized")
        assert capsys.readouterr().out == ""

        logger.warning("rehydrate_corrupt_snapshot")
        assert "rehydrate_corrupt_snapshot" in capsys.readouterr().out
    finally:
        configure_logging()


def test_default_logging_keeps_existing_configuration():
    configure_logging("DEBUG")
    configure_default_logging()

    assert isinstance(structlog.get_config()["logger_factory"], structlog.stdlib.LoggerFactory)
    configure_logging()


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("LOUD")
