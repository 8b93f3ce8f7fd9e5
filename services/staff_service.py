"""Staff service."""

from models.staff import Staff
from services.record_service import RecordService
from validation.validator import RecordValidator, staff_validator


class StaffService(RecordService[Staff]):
    resource_name = "staff"
    model = Staff

    def validator(self) -> RecordValidator:
        return staff_validator()
