"""In-memory, year-keyed store of team statistic records.

The store is built once from the configured per-season CSV files and is
read-only afterwards: the year mapping is exposed through a
`MappingProxyType` over tuples, so request handlers can share one instance
without locking.

Loading policy:
- a file that cannot be opened or read aborts the whole build (`LoadError`);
- a line that cannot be parsed is logged and skipped.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import pandas as pd

from .errors import LoadError, ParseError, StoreNotInitializedError
from .records import FEATURE_COLUMNS, LABEL_COLUMN, StatRecord, parse_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dataset:
    """Flattened model inputs: one feature vector and one label per record."""

    features: list[list[float]] = field(default_factory=list)
    results: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)

    def to_dict(self) -> dict:
        return {"features": self.features, "results": self.results}

    def to_frame(self) -> pd.DataFrame:
        """Return the dataset as a DataFrame with named feature columns and the label column."""
        df = pd.DataFrame(self.features, columns=[c.json_name for c in FEATURE_COLUMNS])
        df[LABEL_COLUMN.json_name] = pd.Series(self.results, dtype=float)
        return df


class RecordStore:
    """Read-only mapping of season year -> records loaded for that season."""

    def __init__(self, records_by_year: Mapping[str, Iterable[StatRecord]]):
        self._records = MappingProxyType(
            {year: tuple(rows) for year, rows in records_by_year.items()}
        )

    @property
    def records(self) -> Mapping[str, tuple[StatRecord, ...]]:
        return self._records

    def years(self) -> list[str]:
        return list(self._records)

    def _require_initialized(self, operation: str) -> None:
        if not self._records:
            raise StoreNotInitializedError(f"{operation}: record store not initialized")

    def get_all(self) -> list[StatRecord]:
        """Return every record across all loaded years.

        Raises:
            StoreNotInitializedError: If the store holds zero years.
        """
        self._require_initialized("get_all")
        return [r for rows in self._records.values() for r in rows]

    def get_by_years(self, years: Iterable[str]) -> list[StatRecord]:
        """Return the records for each requested year, in request order.

        Years that were never loaded contribute nothing; they are not an error.

        Raises:
            StoreNotInitializedError: If the store holds zero years.
        """
        self._require_initialized("get_by_years")
        out = []
        for year in years:
            out.extend(self._records.get(year, ()))
        return out

    def get_dataset(self) -> Dataset:
        """Build the (features, label) view over every record.

        Row order follows year order then file order; callers should not rely on it.

        Raises:
            StoreNotInitializedError: If the store holds zero years.
        """
        self._require_initialized("get_dataset")
        features, results = [], []
        for rows in self._records.values():
            for r in rows:
                features.append(r.features())
                results.append(r.label)
        return Dataset(features=features, results=results)


def read_csv(path) -> list[StatRecord]:
    """Read one season file, skipping lines that fail to parse.

    Args:
        path: Path to the CSV file.

    Returns:
        list[StatRecord]: Parsed records in file order.

    Raises:
        LoadError: If the file cannot be opened or read.
    """
    records = []
    skipped = 0
    try:
        with open(path, encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    records.append(parse_record(line))
                except ParseError as e:
                    skipped += 1
                    logger.warning("Skipping %s:%d: %s", path, lineno, e)
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, e) from e

    if skipped:
        logger.info("Loaded %d records from %s (%d lines skipped)", len(records), path, skipped)
    return records


def build_store(files: Mapping[str, str], directory=None) -> RecordStore:
    """Load every configured season file into a new `RecordStore`.

    Args:
        files: Mapping of season year (e.g. "1997") to CSV filename or path.
        directory: Optional directory the filenames are relative to.

    Returns:
        RecordStore: The populated, read-only store.

    Raises:
        LoadError: If any configured file cannot be read. No partial store is returned.
    """
    records_by_year = {}
    for year, filename in files.items():
        path = os.path.join(directory, filename) if directory else filename
        records_by_year[year] = read_csv(path)
        logger.debug("Season %s: %d records", year, len(records_by_year[year]))

    store = RecordStore(records_by_year)
    logger.info(
        "Record store ready: %d seasons, %d records",
        len(records_by_year),
        sum(len(rows) for rows in records_by_year.values()),
    )
    return store
