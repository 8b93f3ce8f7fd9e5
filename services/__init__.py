"""Services package."""

from services.employee_service import EmployeeService
from services.record_service import Outcome, RecordService
from services.staff_service import StaffService

__all__ = ["EmployeeService", "Outcome", "RecordService", "StaffService"]
