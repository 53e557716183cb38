"""CSV-backed record store.

Most code should import from here:

    from app.datastore import RecordStore, build_store
"""

from .errors import DataStoreError, LoadError, ParseError, StoreNotInitializedError
from .records import COLUMNS, FEATURE_COLUMNS, LABEL_COLUMN, StatRecord, parse_record
from .store import Dataset, RecordStore, build_store, read_csv

__all__ = [
    "COLUMNS",
    "FEATURE_COLUMNS",
    "LABEL_COLUMN",
    "DataStoreError",
    "Dataset",
    "LoadError",
    "ParseError",
    "RecordStore",
    "StatRecord",
    "StoreNotInitializedError",
    "build_store",
    "parse_record",
    "read_csv",
]
