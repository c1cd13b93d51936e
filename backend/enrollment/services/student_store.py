# enrollment/services/student_store.py
"""
Persistence port used by StudentService.

The service never touches the database directly; it only calls these five
operations. The store assigns record ids and owns any lower-level atomicity.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from ..schemas.student import StudentDraft, StudentRecord
from .query_builder import StudentFilter


class StudentStore(ABC):

    @abstractmethod
    def insert(self, draft: StudentDraft) -> StudentRecord:
        """Store a new record and return it with its assigned id"""

    @abstractmethod
    def find_by_id(self, student_id: str) -> Optional[StudentRecord]:
        """The record with this id, or None"""

    @abstractmethod
    def find_matching(self, student_filter: StudentFilter) -> List[StudentRecord]:
        """Records matching the filter, in the store's natural order"""

    @abstractmethod
    def replace(self, student_id: str, record: StudentDraft) -> Optional[StudentRecord]:
        """Overwrite every field (courses included) of an existing record; None if it does not exist"""

    @abstractmethod
    def remove(self, student_id: str) -> bool:
        """True if a record was deleted"""
