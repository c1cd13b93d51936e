# enrollment/routers/students.py
from typing import Any, List, Optional
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from ..database.session import get_db
from ..database.student_repository import StudentRepository
from ..schemas.student import StudentRecord
from ..services.student_service import StudentService

router = APIRouter(prefix="/api/students", tags=["students"])


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(StudentRepository(db))


@router.get("", response_model=List[StudentRecord])
def search_students(
    fullname: Optional[str] = None,
    enrollmentNumber: Optional[str] = None,
    stream: Optional[str] = None,
    service: StudentService = Depends(get_student_service)
):
    """All students, or those matching every given filter (name substring, enrollment number, stream)"""
    return service.search({
        "fullname": fullname,
        "enrollmentNumber": enrollmentNumber,
        "stream": stream
    })


# Bodies are taken as raw JSON so the student validator, not FastAPI, reports defects
@router.post("", response_model=StudentRecord, status_code=201)
def create_student(
    payload: Any = Body(None),
    service: StudentService = Depends(get_student_service)
):
    return service.create(payload)


@router.get("/{student_id}", response_model=StudentRecord)
def get_student(student_id: str, service: StudentService = Depends(get_student_service)):
    return service.get_by_id(student_id)


@router.put("/{student_id}", response_model=StudentRecord)
def update_student(
    student_id: str,
    payload: Any = Body(None),
    service: StudentService = Depends(get_student_service)
):
    """Sparse update: only the keys present in the body are changed"""
    return service.update(student_id, payload)


@router.delete("/{student_id}")
def delete_student(student_id: str, service: StudentService = Depends(get_student_service)):
    service.delete(student_id)
    return {"message": "Student deleted successfully"}
