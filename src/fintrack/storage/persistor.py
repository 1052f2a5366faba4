"""Snapshot persistence for the domain store.

The persistor mirrors the store into a single JSON blob under a fixed root
key. It never owns state: ``rehydrate`` writes the stored snapshot into the
store, ``start`` subscribes to the store and writes a new snapshot after each
mutation. Storage problems are logged and never raised to the caller.
"""

import json
from typing import Any, Callable, Iterable, Optional

import structlog

from fintrack.domain.defaults import DEFAULT_CATEGORIES, default_state
from fintrack.domain.entities import Settings, StoreState
from fintrack.domain.store import Store
from fintrack.storage.base import StateStorage
from fintrack.storage.serializers import (
    category_from_dict,
    category_to_dict,
    settings_from_dict,
    settings_to_dict,
    transaction_from_dict,
    transaction_to_dict,
)

logger = structlog.get_logger(__name__)

ROOT_KEY = "persist:root"
SNAPSHOT_VERSION = 1
DEFAULT_WHITELIST = ("transactions", "categories", "settings")


class CorruptSnapshotError(ValueError):
    """Stored snapshot cannot be decoded."""


def _load_records(records: Any, loader: Callable[[dict], Any], slice_name: str) -> list:
    if not isinstance(records, list):
        raise CorruptSnapshotError(f"Slice '{slice_name}' is not a list")

    loaded = []
    for position, record in enumerate(records):
        try:
            loaded.append(loader(record))
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.warning(
                "snapshot_record_skipped",
                slice=slice_name,
                position=position,
                error=str(e),
            )
    return loaded


class Persistor:
    """Persists whitelisted store slices to a StateStorage."""

    def __init__(
        self,
        store: Store,
        storage: StateStorage,
        key: str = ROOT_KEY,
        whitelist: Iterable[str] = DEFAULT_WHITELIST,
    ):
        """Initialize persistor.

        Args:
            store: Store to mirror
            storage: Durable key-value storage
            key: Storage key of the snapshot blob
            whitelist: Slices to persist; others keep their defaults on rehydrate
        """
        self.store = store
        self.storage = storage
        self.key = key
        self.whitelist = tuple(whitelist)
        unknown = set(self.whitelist) - set(DEFAULT_WHITELIST)
        if unknown:
            raise ValueError(f"Unknown store slices: {', '.join(sorted(unknown))}")
        self._unsubscribe: Optional[Callable[[], None]] = None

    def serialize(self, state: StoreState) -> str:
        """Encode the whitelisted slices of a state as JSON."""
        payload: dict[str, Any] = {"version": SNAPSHOT_VERSION}
        if "transactions" in self.whitelist:
            payload["transactions"] = [transaction_to_dict(t) for t in state.transactions]
        if "categories" in self.whitelist:
            payload["categories"] = [category_to_dict(c) for c in state.categories]
        if "settings" in self.whitelist:
            payload["settings"] = settings_to_dict(state.settings)
        return json.dumps(payload, ensure_ascii=False)

    def deserialize(self, blob: str) -> StoreState:
        """Decode a JSON snapshot into a state.

        Slices missing from the blob (or not whitelisted) fall back to the
        defaults of a fresh store. Individual malformed records are skipped.

        Raises:
            CorruptSnapshotError: If the blob is not a JSON object of slices
        """
        try:
            payload = json.loads(blob)
        except json.JSONDecodeError as e:
            raise CorruptSnapshotError(f"Snapshot is not valid JSON: {e}")
        except RecursionError:
            raise CorruptSnapshotError("Snapshot is nested too deeply")
        if not isinstance(payload, dict):
            raise CorruptSnapshotError("Snapshot is not a JSON object")

        fresh = default_state()
        transactions = fresh.transactions
        categories = fresh.categories
        settings = fresh.settings

        if "transactions" in self.whitelist and "transactions" in payload:
            transactions = tuple(
                _load_records(payload["transactions"], transaction_from_dict, "transactions")
            )
        if "categories" in self.whitelist and "categories" in payload:
            categories = tuple(
                _load_records(payload["categories"], category_from_dict, "categories")
            )
        if "settings" in self.whitelist and "settings" in payload:
            raw_settings = payload["settings"]
            settings = settings_from_dict(raw_settings) if isinstance(raw_settings, dict) else Settings()

        if not categories:
            categories = DEFAULT_CATEGORIES

        return StoreState(transactions=transactions, categories=categories, settings=settings)

    def persist(self, state: Optional[StoreState] = None) -> bool:
        """Write a snapshot of ``state`` (or the current store state).

        Returns:
            True if the snapshot was written
        """
        if state is None:
            state = self.store.state
        try:
            self.storage.set_item(self.key, self.serialize(state))
        except OSError as e:
            logger.error("persist_failed", key=self.key, error=str(e))
            return False
        return True

    def rehydrate(self) -> bool:
        """Load the stored snapshot into the store.

        On a missing, unreadable or corrupt snapshot the store is reset to
        empty transactions plus the default categories and settings.

        Returns:
            True if a previous snapshot was restored
        """
        try:
            blob = self.storage.get_item(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("rehydrate_read_failed", key=self.key, error=str(e))
            blob = None

        if blob is None:
            logger.info("rehydrate_no_snapshot", key=self.key)
            self.store.replace_state(default_state())
            return False

        try:
            state = self.deserialize(blob)
        except CorruptSnapshotError as e:
            logger.warning("rehydrate_corrupt_snapshot", key=self.key, error=str(e))
            self.store.replace_state(default_state())
            return False

        self.store.replace_state(state)
        logger.info(
            "rehydrate_complete",
            transactions=len(state.transactions),
            categories=len(state.categories),
        )
        return True

    def _on_change(self, state: StoreState) -> None:
        self.persist(state)

    def start(self) -> None:
        """Write a snapshot after every store mutation."""
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self._on_change)

    def stop(self) -> None:
        """Stop writing snapshots."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def is_running(self) -> bool:
        return self._unsubscribe is not None

    def flush(self) -> bool:
        """Write the current state immediately."""
        return self.persist(self.store.state)

    def purge(self) -> None:
        """Remove the stored snapshot."""
        try:
            self.storage.remove_item(self.key)
        except OSError as e:
            logger.error("purge_failed", key=self.key, error=str(e))
