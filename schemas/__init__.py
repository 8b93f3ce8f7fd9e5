"""Schemas package."""

from schemas.common import CamelModel, ErrorResponse, RejectionResponse, ViolationSchema
from schemas.employee import EmployeeCandidate, EmployeeRead
from schemas.staff import StaffCandidate, StaffRead

__all__ = [
    "CamelModel",
    "EmployeeCandidate",
    "EmployeeRead",
    "ErrorResponse",
    "RejectionResponse",
    "StaffCandidate",
    "StaffRead",
    "ViolationSchema",
]
