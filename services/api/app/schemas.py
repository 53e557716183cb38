"""API response schemas.

Handlers return plain dictionaries; these Pydantic models are attached as
`response_model=...` so responses are validated and documented in OpenAPI.

`RecordOut` is generated from the CSV column schema so the JSON field list
and the parser never drift apart.
"""

from pydantic import BaseModel, create_model

from .datastore import COLUMNS

RecordOut = create_model(
    "RecordOut",
    **{c.json_name: (c.type, ...) for c in COLUMNS},
)


class DatasetOut(BaseModel):
    features: list[list[float]]
    results: list[float]


class RecordsResponse(BaseModel):
    data: list[RecordOut]
    statusCode: int


class DatasetResponse(BaseModel):
    data: DatasetOut
    statusCode: int


class ErrorResponse(BaseModel):
    message: str
    statusCode: int
