"""Staff model."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, EditableRecord, TimestampMixin


class Staff(TimestampMixin, EditableRecord, Base):
    __tablename__ = "staff"

    editable_fields = ("name", "email", "phone", "hourly_salary")

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(250), nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    hourly_salary: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    def __repr__(self) -> str:
        return f"<Staff id={self.id} {self.name!r}>"
