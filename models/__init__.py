"""Models package."""

from models.base import Base, EditableRecord, TimestampMixin
from models.employee import Employee
from models.staff import Staff

__all__ = [
    "Base",
    "EditableRecord",
    "TimestampMixin",
    "Employee",
    "Staff",
]
