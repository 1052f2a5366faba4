"""Application lifecycle: build the store, restore it, keep it persisted."""

from typing import Optional

import structlog

from fintrack.domain.store import Store
from fintrack.storage.base import StateStorage
from fintrack.storage.factories import create_file_storage
from fintrack.storage.persistor import Persistor

logger = structlog.get_logger(__name__)


class Application:
    """Owns the store and its persistor for the lifetime of one session."""

    def __init__(self, store: Store, persistor: Persistor, restored: bool):
        self.store = store
        self.persistor = persistor
        self.restored = restored
        self._closed = False

    def close(self) -> None:
        """Flush the final state and stop write-back."""
        if self._closed:
            return
        self.persistor.flush()
        self.persistor.stop()
        self._closed = True

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def initialize_app(
    data_dir: Optional[str] = None, storage: Optional[StateStorage] = None
) -> Application:
    """Create a store, rehydrate it from storage and start write-back.

    Args:
        data_dir: Data directory for the default file storage
        storage: Storage to use instead of a FileStorage in ``data_dir``

    Returns:
        Ready Application; the store holds restored or default state
    """
    if storage is None:
        storage = create_file_storage(data_dir)

    store = Store()
    persistor = Persistor(store, storage)
    restored = persistor.rehydrate()
    persistor.start()
    logger.info("app_initialized", restored=restored)
    return Application(store=store, persistor=persistor, restored=restored)
