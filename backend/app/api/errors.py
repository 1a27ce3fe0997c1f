from fastapi import HTTPException
from ..services.errors import (
    ChartConfigError, DatabaseError, ExplanationError, GenerationError, GuardError,
    NoMatchingRows, PipelineError, TableEmpty, TableMissing,
)

STATUS = {
    GuardError: 400,
    TableMissing: 404,
    NoMatchingRows: 404,
    TableEmpty: 409,
    DatabaseError: 500,
    GenerationError: 502,
    ExplanationError: 502,
    ChartConfigError: 502,
}

def to_http(e: PipelineError) -> HTTPException:
    return HTTPException(
        status_code=STATUS.get(type(e), 500),
        detail={"error": e.kind, "message": e.message},
    )
