# enrollment/database/models/student.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.ext.orderinglist import ordering_list
import uuid
import enum
from ..base import Base

class Stream(str, enum.Enum):
    """Enrollment cohort: Stream-1 is the April intake, Stream-2 the October intake"""
    STREAM_1 = "Stream-1"
    STREAM_2 = "Stream-2"

class Student(Base):
    __tablename__ = "students"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String, nullable=False, index=True)
    class_name = Column(String, nullable=False)
    mobile_number = Column(String, nullable=False)
    enrollment_number = Column(String, nullable=False, index=True)
    reference_number = Column(String, nullable=True)
    email_id = Column(String, nullable=False)
    balance = Column(Float, nullable=False, default=0.0)
    address = Column(String, nullable=False)
    stream = Column(
        Enum(Stream, name="stream", values_callable=lambda e: [member.value for member in e]),
        nullable=False,
        index=True,
    )

    # Relationships
    courses = relationship(
        "StudentCourse",
        back_populates="student",
        order_by="StudentCourse.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

class StudentCourse(Base):
    __tablename__ = "student_courses"

    course_entry_id = Column(Integer, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)  # display order within the student's list
    course_code = Column(String, nullable=False)
    subject = Column(String, nullable=False)

    # Relationships
    student = relationship("Student", back_populates="courses")
