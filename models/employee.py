"""Employee model."""

from datetime import date

from sqlalchemy import Date, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, EditableRecord, TimestampMixin


class Employee(TimestampMixin, EditableRecord, Base):
    """Employee paid by the hour, subject to the age-tiered salary minimum."""

    __tablename__ = "employee"

    editable_fields = ("name", "date_of_birth", "email", "phone", "hourly_salary")

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(250), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    hourly_salary: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Employee id={self.id} {self.name!r}>"
