"""Employee service: field rules plus the age and salary policies."""

from collections.abc import Callable
from datetime import date

from config.settings import settings
from models.employee import Employee
from repositories.record_repository import EmployeeRepository
from services.record_service import RecordService
from validation.policies import DEFAULT_POLICY, SalaryPolicy
from validation.validator import RecordValidator, employee_validator


class EmployeeService(RecordService[Employee]):
    resource_name = "employee"
    model = Employee

    def __init__(
        self,
        repository: EmployeeRepository,
        today: Callable[[], date] = settings.today,
        policy: SalaryPolicy = DEFAULT_POLICY,
    ):
        super().__init__(repository, today)
        self.policy = policy

    def validator(self) -> RecordValidator:
        # Rebuilt per call so the age thresholds follow the current date
        return employee_validator(self.today(), self.policy)
