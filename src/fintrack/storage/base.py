"""Abstract key-value storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class StateStorage(ABC):
    """Durable string key-value storage used for state snapshots."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value. The write is all-or-nothing."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        pass
