"""Create/read/update/delete orchestration shared by employees and staff."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Generic, TypeVar

from config.settings import settings
from repositories.record_repository import RecordRepository
from validation.validator import RecordValidator
from validation.violations import Violation, ViolationKind

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


@dataclass
class Outcome(Generic[ModelT]):
    """Result of a write operation.

    Rejections are ordinary results: ``record`` is None and ``violations``
    lists every reason.
    """

    record: ModelT | None = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return not self.violations

    def has(self, kind: ViolationKind) -> bool:
        return any(v.kind is kind for v in self.violations)


class RecordService(ABC, Generic[ModelT]):
    """Validates candidates and hands accepted ones to the repository.

    Subclasses provide the mapped model, the validator and the resource name.
    """

    resource_name = "record"
    model: type

    def __init__(
        self,
        repository: RecordRepository,
        today: Callable[[], date] = settings.today,
    ):
        self.repository = repository
        self.today = today

    @abstractmethod
    def validator(self) -> RecordValidator:
        """Rules a candidate must pass on create and update."""

    def list_all(self) -> list[ModelT]:
        return self.repository.list_all()

    def get(self, record_id: int) -> ModelT | None:
        return self.repository.get_by_id(record_id)

    def create(self, candidate: Any) -> Outcome[ModelT]:
        """Validate and insert a new record; the candidate's id is ignored."""
        violations = self.validator().validate(candidate)
        if violations:
            self._log_rejection("create", None, violations)
            return Outcome(violations=violations)

        record = self.model()
        record.overwrite_from(candidate)
        return Outcome(record=self.repository.insert(record))

    def update(self, record_id: int, candidate: Any) -> Outcome[ModelT]:
        """Overwrite every editable field of a stored record.

        The id check and the existence check run before any field is
        inspected; the candidate is then validated in full.
        """
        if candidate.id != record_id:
            violation = Violation(
                "id",
                ViolationKind.IDENTIFIER_MISMATCH,
                f"Path id {record_id} does not match body id {candidate.id}.",
            )
            self._log_rejection("update", record_id, [violation])
            return Outcome(violations=[violation])

        stored = self.repository.get_by_id(record_id)
        if stored is None:
            return Outcome(violations=[self._not_found(record_id)])

        violations = self.validator().validate(candidate)
        if violations:
            self._log_rejection("update", record_id, violations)
            return Outcome(violations=violations)

        stored.overwrite_from(candidate)
        return Outcome(record=self.repository.save(stored))

    def delete(self, record_id: int) -> Outcome[ModelT]:
        stored = self.repository.get_by_id(record_id)
        if stored is None:
            return Outcome(violations=[self._not_found(record_id)])

        self.repository.delete(stored)
        return Outcome(record=stored)

    def _not_found(self, record_id: int) -> Violation:
        return Violation(
            "id",
            ViolationKind.NOT_FOUND,
            f"{self.resource_name.capitalize()} {record_id} not found.",
        )

    def _log_rejection(
        self,
        operation: str,
        record_id: int | None,
        violations: list[Violation],
    ) -> None:
        logger.warning(
            "Rejected %s %s: id=%s, violations=%s",
            self.resource_name,
            operation,
            record_id,
            ",".join(v.kind.value for v in violations),
        )
