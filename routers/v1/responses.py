"""Translation of service outcomes into HTTP responses."""

from fastapi.responses import JSONResponse

from schemas.common import ErrorResponse, RejectionResponse, ViolationSchema
from services.record_service import Outcome
from validation.violations import ViolationKind

REJECTION_RESPONSES = {
    400: {"model": RejectionResponse, "description": "Path id and body id differ"},
    404: {"model": RejectionResponse, "description": "Record not found"},
    422: {"model": RejectionResponse, "description": "Candidate record failed validation"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}

DELETE_RESPONSES = {
    404: {"model": RejectionResponse, "description": "Record not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def rejection_status(outcome: Outcome) -> int:
    """Pick the status code for a rejected outcome."""
    if outcome.has(ViolationKind.IDENTIFIER_MISMATCH):
        return 400
    if outcome.has(ViolationKind.NOT_FOUND):
        return 404
    return 422


def rejection_response(outcome: Outcome) -> JSONResponse:
    """Build the error body listing every violation of a rejected outcome."""
    status_code = rejection_status(outcome)
    if status_code == 422:
        detail = "Validation failed"
    else:
        detail = outcome.violations[0].message
    body = RejectionResponse(
        detail=detail,
        violations=[ViolationSchema.from_violation(v) for v in outcome.violations],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
