"""SQLAlchemy base class and mixins."""

from datetime import datetime
from typing import ClassVar

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class."""

    pass


class TimestampMixin:
    """Mixin for audit trail columns (created/updated timestamps).

    These columns are maintained by the database and are not part of the
    records exposed through the API.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class EditableRecord:
    """Mixin for models whose API-editable columns are overwritten on update."""

    #: Attribute names copied from an incoming candidate on every update.
    editable_fields: ClassVar[tuple[str, ...]] = ()

    def overwrite_from(self, candidate) -> None:
        """Copy every editable field from ``candidate`` onto this instance."""
        for field_name in self.editable_fields:
            setattr(self, field_name, getattr(candidate, field_name))
