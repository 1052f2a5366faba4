"""Errors raised by the relational storage layer.

Unlike the domain store, every database operation propagates failures to its
caller, using these types to tell constraint problems from connection ones.
"""


class StorageError(Exception):
    """Base class for relational storage failures."""


class ConstraintViolationError(StorageError):
    """A write violated a schema constraint (primary key, unique, check)."""


class StorageConnectionError(StorageError):
    """The database could not be opened, read or written."""
