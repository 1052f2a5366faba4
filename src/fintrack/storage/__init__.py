"""Snapshot persistence for the domain store."""

from fintrack.storage.base import StateStorage
from fintrack.storage.file_storage import FileStorage
from fintrack.storage.factories import create_file_storage
from fintrack.storage.persistor import Persistor

__all__ = ["StateStorage", "FileStorage", "create_file_storage", "Persistor"]
