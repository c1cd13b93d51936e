# enrollment/database/student_repository.py
from contextlib import contextmanager
from typing import List, Optional
import logging
from sqlalchemy import false, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from .functions import unicode_lower
from .models.student import Stream, Student, StudentCourse
from ..errors import PersistenceError
from ..schemas.student import CourseEntry, StudentDraft, StudentRecord
from ..services.query_builder import StudentFilter
from ..services.student_store import StudentStore

logger = logging.getLogger(__name__)


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches literally"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class StudentRepository(StudentStore):
    """StudentStore backed by a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str):
        """Roll back and raise PersistenceError on any database failure"""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Database error while trying to {action}")
            raise PersistenceError(f"Could not {action}") from e

    @staticmethod
    def _to_record(student: Student) -> StudentRecord:
        return StudentRecord(
            id=student.id,
            full_name=student.full_name,
            class_name=student.class_name,
            mobile_number=student.mobile_number,
            enrollment_number=student.enrollment_number,
            reference_number=student.reference_number,
            email_id=student.email_id,
            balance=student.balance,
            address=student.address,
            stream=student.stream,
            courses=[
                CourseEntry(course_code=course.course_code, subject=course.subject)
                for course in student.courses
            ],
        )

    @staticmethod
    def _apply(student: Student, record: StudentDraft) -> None:
        """Copy every field of a validated record onto the ORM row; courses are replaced wholesale"""
        student.full_name = record.full_name
        student.class_name = record.class_name
        student.mobile_number = record.mobile_number
        student.enrollment_number = record.enrollment_number
        student.reference_number = record.reference_number
        student.email_id = record.email_id
        student.balance = record.balance
        student.address = record.address
        student.stream = record.stream
        # ordering_list renumbers `position` on assignment; delete-orphan drops the old rows
        student.courses = [
            StudentCourse(course_code=course.course_code, subject=course.subject)
            for course in record.courses
        ]

    @staticmethod
    def _where(student_filter: StudentFilter) -> list:
        clauses = []
        if student_filter.fullname is not None:
            # folded like StudentFilter.matches, accented letters included
            pattern = f"%{_escape_like(student_filter.fullname.lower())}%"
            clauses.append(unicode_lower(Student.full_name).like(pattern, escape="\\"))
        if student_filter.enrollment_number is not None:
            clauses.append(Student.enrollment_number == student_filter.enrollment_number)
        if student_filter.stream is not None:
            try:
                clauses.append(Student.stream == Stream(student_filter.stream))
            except ValueError:
                # The Enum column cannot bind an unknown value; nothing stored can match it
                clauses.append(false())
        return clauses

    def insert(self, draft: StudentDraft) -> StudentRecord:
        with self._guard("insert student"):
            student = Student()
            self._apply(student, draft)
            self.db.add(student)
            self.db.commit()
            self.db.refresh(student)
            return self._to_record(student)

    def find_by_id(self, student_id: str) -> Optional[StudentRecord]:
        with self._guard(f"load student {student_id}"):
            student = self.db.get(Student, student_id)
            return self._to_record(student) if student else None

    def find_matching(self, student_filter: StudentFilter) -> List[StudentRecord]:
        with self._guard("search students"):
            query = (
                select(Student)
                .options(selectinload(Student.courses))
                .where(*self._where(student_filter))
            )
            return [self._to_record(student) for student in self.db.scalars(query)]

    def replace(self, student_id: str, record: StudentDraft) -> Optional[StudentRecord]:
        with self._guard(f"update student {student_id}"):
            student = self.db.get(Student, student_id)
            if not student:
                return None
            self._apply(student, record)
            self.db.commit()
            self.db.refresh(student)
            return self._to_record(student)

    def remove(self, student_id: str) -> bool:
        with self._guard(f"delete student {student_id}"):
            student = self.db.get(Student, student_id)
            if not student:
                return False
            self.db.delete(student)
            self.db.commit()
            return True
