"""Record query routes.

Endpoints:
- `GET /records`: every loaded record
- `GET /records/{year}`: records for one season, year in [1996, 2018]
- `GET /data`: flattened feature/label dataset for model training

All responses use the envelope `{"data": ..., "statusCode": 200}`.
"""

from fastapi import APIRouter, Depends

from ..datastore import RecordStore
from ..datastore.records import INT_PATTERN
from ..dependencies import get_store
from ..errors import ApiError
from ..schemas import DatasetResponse, ErrorResponse, RecordsResponse

MIN_YEAR = 1996
MAX_YEAR = 2018

router = APIRouter(tags=["records"])


def _ok(data):
    return {"data": data, "statusCode": 200}


@router.get("/records", response_model=RecordsResponse, responses={500: {"model": ErrorResponse}})
def get_all_records(store: RecordStore = Depends(get_store)):
    """Return every record across all loaded seasons.

    Raises:
        StoreNotInitializedError: Rendered as 500 if no seasons were loaded.
    """
    return _ok([r.to_dict() for r in store.get_all()])


@router.get(
    "/records/{year}",
    response_model=RecordsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_records_by_year(year: str, store: RecordStore = Depends(get_store)):
    """Return the records for a single season.

    The year is validated before the store is queried. A valid year with no
    loaded file returns an empty list.

    Args:
        year: Season year, e.g. "1997" for the 1996-97 season.
        store: Record store (injected).

    Raises:
        ApiError: 400 if `year` is not an integer or is outside [1996, 2018].
    """
    if not INT_PATTERN.fullmatch(year):
        raise ApiError(400, "unable to parse year")
    season = int(year)
    if season < MIN_YEAR or season > MAX_YEAR:
        raise ApiError(400, "invalid year")

    return _ok([r.to_dict() for r in store.get_by_years([str(season)])])


@router.get("/data", response_model=DatasetResponse, responses={500: {"model": ErrorResponse}})
def get_dataset(store: RecordStore = Depends(get_store)):
    """Return `{"features": [...], "results": [...]}` over every record."""
    return _ok(store.get_dataset().to_dict())
