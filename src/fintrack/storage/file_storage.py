"""File-backed key-value storage."""

import os
import re
import tempfile
import threading
from pathlib import Path
from typing import Optional

import structlog

from fintrack.storage.base import StateStorage

logger = structlog.get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class FileStorage(StateStorage):
    """Stores each key as a file inside a directory.

    Values are written to a temporary file in the same directory and moved
    into place with ``os.replace``, so a crash mid-write leaves the previous
    value intact.
    """

    def __init__(self, directory: str | Path):
        """Initialize file storage.

        Args:
            directory: Directory holding one file per key (created if missing)
        """
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def path_for(self, key: str) -> Path:
        """Return the file path used for a key."""
        return self.directory / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        with self._lock:
            fd, tmp_path = tempfile.mkstemp(
                dir=self.directory, prefix=f".{path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        logger.debug("storage_write", key=key, path=str(path), size=len(value))

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        with self._lock:
            if path.exists():
                path.unlink()
