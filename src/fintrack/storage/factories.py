"""Storage factory functions."""

import os
from pathlib import Path
from typing import Optional

from fintrack.storage.file_storage import FileStorage

DATA_DIR_ENV = "FINTRACK_DATA_DIR"


def resolve_data_dir(data_dir: Optional[str] = None) -> Path:
    """Resolve the data directory.

    Args:
        data_dir: Explicit directory. If None, checks FINTRACK_DATA_DIR
            environment variable, then defaults to ~/.fintrack

    Returns:
        Path to the data directory
    """
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV)

    if data_dir is None:
        return Path.home() / ".fintrack"

    return Path(data_dir)


def create_file_storage(data_dir: Optional[str] = None) -> FileStorage:
    """Create a FileStorage instance in the resolved data directory."""
    return FileStorage(resolve_data_dir(data_dir))
