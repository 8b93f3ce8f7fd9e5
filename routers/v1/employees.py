"""Employee API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.orm import Session

from config.database import get_db
from repositories.record_repository import EmployeeRepository
from routers.v1.responses import DELETE_RESPONSES, REJECTION_RESPONSES, rejection_response
from schemas.common import ErrorResponse
from schemas.employee import EmployeeCandidate, EmployeeRead
from services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter()

EmployeeId = Annotated[int, Path(description="Employee ID")]


def get_employee_service(db: Annotated[Session, Depends(get_db)]) -> EmployeeService:
    """Build the employee service on the request's database session."""
    return EmployeeService(EmployeeRepository(db))


@router.get(
    "",
    response_model=list[EmployeeRead],
    summary="List Employees",
    description="""
    Return every stored employee.

    No pagination is applied and no ordering is guaranteed beyond the
    database's natural order.
    """,
)
def list_employees(
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> list[EmployeeRead]:
    try:
        employees = service.list_all()
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error listing employees")
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    return [EmployeeRead.model_validate(employee) for employee in employees]


@router.get(
    "/{employee_id}",
    response_model=EmployeeRead,
    summary="Get Employee",
    responses={
        404: {"model": ErrorResponse, "description": "Employee not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def get_employee(
    employee_id: EmployeeId,
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeRead:
    try:
        employee = service.get(employee_id)
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error fetching employee id=%s", employee_id)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    if employee is None:
        raise HTTPException(status_code=404, detail=f"Employee {employee_id} not found.")
    return EmployeeRead.model_validate(employee)


@router.post(
    "",
    status_code=201,
    response_model=EmployeeRead,
    summary="Create Employee",
    description="""
    Validate and store a new employee.

    Besides the per-field checks, the employee must be at most 65 years old
    and employees aged 30 or more must earn at least 200 per hour. Every
    violation is reported in a single 422 response.
    """,
    responses=REJECTION_RESPONSES,
)
def create_employee(
    candidate: EmployeeCandidate,
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
):
    try:
        outcome = service.create(candidate)
        if not outcome.accepted:
            return rejection_response(outcome)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error creating employee")
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    return EmployeeRead.model_validate(outcome.record)


@router.put(
    "/{employee_id}",
    response_model=EmployeeRead,
    summary="Update Employee",
    description="""
    Overwrite every editable field of a stored employee.

    The body id must equal the path id. The new values go through the same
    validation as on create.
    """,
    responses=REJECTION_RESPONSES,
)
def update_employee(
    employee_id: EmployeeId,
    candidate: EmployeeCandidate,
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
):
    try:
        outcome = service.update(employee_id, candidate)
        if not outcome.accepted:
            return rejection_response(outcome)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error updating employee id=%s", employee_id)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    return EmployeeRead.model_validate(outcome.record)


@router.delete(
    "/{employee_id}",
    status_code=204,
    summary="Delete Employee",
    responses=DELETE_RESPONSES,
)
def delete_employee(
    employee_id: EmployeeId,
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> Response:
    try:
        outcome = service.delete(employee_id)
        if not outcome.accepted:
            return rejection_response(outcome)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Unexpected error deleting employee id=%s", employee_id)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}",
        ) from e

    return Response(status_code=204)
