"""Repositories package."""

from repositories.record_repository import EmployeeRepository, RecordRepository, StaffRepository

__all__ = ["EmployeeRepository", "RecordRepository", "StaffRepository"]
