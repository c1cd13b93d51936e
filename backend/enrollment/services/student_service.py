# enrollment/services/student_service.py
from typing import Any, List, Mapping, Optional
import logging
from ..errors import NotFoundError, ValidationError
from ..schemas.student import StudentRecord
from .query_builder import build_filter
from .student_store import StudentStore
from .validation.student_validator import validate_for_create, validate_for_update

logger = logging.getLogger(__name__)


class StudentService:
    """
    Create, read, update, delete and search student records.

    Writes are validated before the store is touched; a rejected candidate never
    reaches persistence. PersistenceError raised by the store is propagated as is.
    """

    def __init__(self, store: StudentStore):
        self.store = store

    def create(self, candidate: Any) -> StudentRecord:
        result = validate_for_create(candidate)
        if not result.ok:
            logger.warning(f"Rejected new student: {[defect.field for defect in result.defects]}")
            raise ValidationError(result.defects)

        student = self.store.insert(result.record)
        logger.info(f"Created student {student.id} ({student.enrollment_number})")
        return student

    def get_by_id(self, student_id: str) -> StudentRecord:
        student = self.store.find_by_id(student_id)
        if student is None:
            raise NotFoundError(student_id)
        return student

    def update(self, student_id: str, candidate: Any) -> StudentRecord:
        """
        Apply a sparse patch: fields present in `candidate` replace the stored values,
        absent fields keep theirs. `courses`, when present, replaces the whole list.
        Concurrent updates of the same record are last-write-wins.
        """
        result = validate_for_update(candidate)
        if not result.ok:
            logger.warning(f"Rejected update of student {student_id}: {[defect.field for defect in result.defects]}")
            raise ValidationError(result.defects)

        existing = self.get_by_id(student_id)
        merged = existing.model_copy(update=result.record.changes())

        student = self.store.replace(student_id, merged)
        if student is None:
            # deleted between the read and the write
            raise NotFoundError(student_id)

        logger.info(f"Updated student {student_id}: {sorted(result.record.model_fields_set)}")
        return student

    def delete(self, student_id: str) -> None:
        if not self.store.remove(student_id):
            raise NotFoundError(student_id)
        logger.info(f"Deleted student {student_id}")

    def search(self, params: Optional[Mapping[str, Any]] = None) -> List[StudentRecord]:
        student_filter = build_filter(params)
        return self.store.find_matching(student_filter)
