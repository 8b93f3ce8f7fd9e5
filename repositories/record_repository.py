"""Repositories for employee and staff database operations."""

import logging
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.base import Base
from models.employee import Employee
from models.staff import Staff

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Primary keys are 32-bit INTEGER columns
MAX_RECORD_ID = 2**31 - 1


class RecordRepository(Generic[ModelT]):
    """Data access layer for a single mapped record type.

    Methods flush but never commit; the request boundary owns the transaction.
    """

    model: type[ModelT]

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session.
        """
        self.db = db

    def list_all(self) -> list[ModelT]:
        """Get every stored record.

        No ordering is guaranteed beyond the database's natural order.
        """
        return list(self.db.scalars(select(self.model)).all())

    def get_by_id(self, record_id: int) -> ModelT | None:
        """Get a record by its primary key.

        Args:
            record_id: The record's ID.

        Returns:
            The record if it exists, None otherwise. An ID outside the
            column range cannot exist and is reported as absent.
        """
        if not 1 <= record_id <= MAX_RECORD_ID:
            return None
        return self.db.get(self.model, record_id)

    def insert(self, record: ModelT) -> ModelT:
        """Add a new record and let the database assign its ID.

        Args:
            record: Transient instance to persist.

        Returns:
            The same instance, now carrying its ID.
        """
        self.db.add(record)
        self.db.flush()
        self.db.refresh(record)
        logger.info("Created %s record: id=%s", self.model.__name__, record.id)
        return record

    def save(self, record: ModelT) -> ModelT:
        """Persist changes made to an already stored record."""
        self.db.flush()
        self.db.refresh(record)
        logger.info("Updated %s record: id=%s", self.model.__name__, record.id)
        return record

    def delete(self, record: ModelT) -> None:
        """Permanently remove a stored record."""
        self.db.delete(record)
        self.db.flush()
        logger.info("Deleted %s record: id=%s", self.model.__name__, record.id)


class EmployeeRepository(RecordRepository[Employee]):
    model = Employee


class StaffRepository(RecordRepository[Staff]):
    model = Staff
