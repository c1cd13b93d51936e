# enrollment/errors.py
from typing import Iterable, List


class StudentRecordError(Exception):
    """Base class for failures raised by the student record service"""


class ValidationError(StudentRecordError):
    """A submitted record has one or more field defects; nothing was persisted"""

    def __init__(self, defects: Iterable):
        self.defects: List = list(defects)
        fields = ", ".join(defect.field for defect in self.defects)
        super().__init__(f"Invalid student record: {fields}")


class NotFoundError(StudentRecordError):
    """No stored record exists with the requested id"""

    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"Student not found: {student_id}")


class PersistenceError(StudentRecordError):
    """The persistence layer failed; the original exception is chained as __cause__"""
