"""Exceptions raised by the CSV record store.

Hierarchy:
- `DataStoreError`: base class for everything below.
- `ParseError`: one CSV line could not be turned into a `StatRecord`. The
  loader catches it, logs the line and keeps going.
- `LoadError`: a configured file could not be opened or read. Fatal to store
  construction; the API refuses to start.
- `StoreNotInitializedError`: a query ran against a store holding zero years.
  This is different from a query that simply matches nothing.
"""


class DataStoreError(Exception):
    """Base class for record store failures."""


class ParseError(DataStoreError, ValueError):
    """A single CSV line was rejected."""


class LoadError(DataStoreError):
    """A configured CSV file could not be read."""

    def __init__(self, path, reason):
        super().__init__(f"unable to read '{path}': {reason}")
        self.path = path
        self.reason = reason


class StoreNotInitializedError(DataStoreError):
    """The store holds no years; it was never built or was built empty."""
