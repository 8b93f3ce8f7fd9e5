"""Staff API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.orm import Session

from config.database import get_db
from repositories.record_repository import StaffRepository
from routers.v1.responses import DELETE_RESPONSES, REJECTION_RESPONSES, rejection_response
from schemas.common import ErrorResponse
from schemas.staff import StaffCandidate, StaffRead
from services.staff_service import StaffService

logger = logging.getLogger(__name__)

router = APIRouter()

StaffId = Annotated[int, Path(description="Staff ID")]


def get_staff_service(db: Annotated[Session, Depends(get_db)]) -> StaffService:
    """Build the staff service on the request's database session."""
    return StaffService(StaffRepository(db))


@router.get(
    "",
    response_model=list[StaffRead],
    summary="List Staff",
    description="""
    Return every stored staff member.

    No pagination is applied and no ordering is guaranteed beyond the
    database's natural order.
    """,
)
def list_staff(
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[StaffService, Depends(get_staff_service)],
) -> list[StaffRead]:
    try:
        members = service.list_all()
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error listing staff")
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    return [StaffRead.model_validate(member) for member in members]


@router.get(
    "/{staff_id}",
    response_model=StaffRead,
    summary="Get Staff",
    responses={
        404: {"model": ErrorResponse, "description": "Staff member not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def get_staff(
    staff_id: StaffId,
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[StaffService, Depends(get_staff_service)],
) -> StaffRead:
    try:
        staff = service.get(staff_id)
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error fetching staff id=%s", staff_id)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    if staff is None:
        raise HTTPException(status_code=404, detail=f"Staff {staff_id} not found.")
    return StaffRead.model_validate(staff)


@router.post(
    "",
    status_code=201,
    response_model=StaffRead,
    summary="Create Staff",
    description="""
    Validate and store a new staff member.

    Every violation is reported in a single 422 response.
    """,
    responses=REJECTION_RESPONSES,
)
def create_staff(
    candidate: StaffCandidate,
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[StaffService, Depends(get_staff_service)],
):
    try:
        outcome = service.create(candidate)
        if not outcome.accepted:
            return rejection_response(outcome)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error creating staff")
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    return StaffRead.model_validate(outcome.record)


@router.put(
    "/{staff_id}",
    response_model=StaffRead,
    summary="Update Staff",
    description="""
    Overwrite every editable field of a stored staff member.

    The body id must equal the path id. The new values go through the same
    validation as on create.
    """,
    responses=REJECTION_RESPONSES,
)
def update_staff(
    staff_id: StaffId,
    candidate: StaffCandidate,
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[StaffService, Depends(get_staff_service)],
):
    try:
        outcome = service.update(staff_id, candidate)
        if not outcome.accepted:
            return rejection_response(outcome)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error updating staff id=%s", staff_id)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    return StaffRead.model_validate(outcome.record)


@router.delete(
    "/{staff_id}",
    status_code=204,
    summary="Delete Staff",
    responses=DELETE_RESPONSES,
)
def delete_staff(
    staff_id: StaffId,
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[StaffService, Depends(get_staff_service)],
) -> Response:
    try:
        outcome = service.delete(staff_id)
        if not outcome.accepted:
            return rejection_response(outcome)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error deleting staff id=%s", staff_id)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    return Response(status_code=204)
