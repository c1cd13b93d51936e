# enrollment/schemas/student.py
from typing import Annotated, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints, field_validator
from ..database.models.student import Stream

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def wire_field(*names: str, **kwargs):
    """
    Field read from any of `names` in a JSON payload and written back under the first one.
    The first name is the key the admin frontend sends (e.g. "fullname", "class").
    """
    return Field(
        validation_alias=AliasChoices(*names),
        serialization_alias=names[0],
        **kwargs
    )


class _Schema(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,  # mobile numbers often arrive as JSON numbers
        extra="ignore",
    )


class CourseEntry(_Schema):
    course_code: NonEmptyStr = wire_field("courseCode")
    subject: NonEmptyStr = wire_field("subject")


class StudentDraft(_Schema):
    """A complete, validated student record that has not been stored yet"""

    full_name: NonEmptyStr = wire_field("fullname", "fullName")
    class_name: NonEmptyStr = wire_field("class", "className")
    mobile_number: NonEmptyStr = wire_field("mobileNumber")
    enrollment_number: NonEmptyStr = wire_field("enrollmentNumber")
    reference_number: Optional[str] = wire_field("referenceNumber", default=None)
    email_id: NonEmptyStr = wire_field("emailId")
    balance: float = wire_field("balance", allow_inf_nan=False)
    address: NonEmptyStr = wire_field("address")
    stream: Stream = wire_field("stream")
    courses: List[CourseEntry] = wire_field("courses", min_length=1)

    @field_validator("reference_number")
    @classmethod
    def blank_reference_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class StudentRecord(StudentDraft):
    """A stored student record, as returned by the persistence layer"""

    id: str


class StudentPatch(_Schema):
    """
    Sparse update payload.

    Every field defaults to None, but defaults are never validated: a key the client
    did not send stays out of `model_fields_set`, while an explicit null for a required
    field fails validation like any other bad value.
    """

    full_name: NonEmptyStr = wire_field("fullname", "fullName", default=None)
    class_name: NonEmptyStr = wire_field("class", "className", default=None)
    mobile_number: NonEmptyStr = wire_field("mobileNumber", default=None)
    enrollment_number: NonEmptyStr = wire_field("enrollmentNumber", default=None)
    reference_number: Optional[str] = wire_field("referenceNumber", default=None)
    email_id: NonEmptyStr = wire_field("emailId", default=None)
    balance: float = wire_field("balance", default=None, allow_inf_nan=False)
    address: NonEmptyStr = wire_field("address", default=None)
    stream: Stream = wire_field("stream", default=None)
    courses: List[CourseEntry] = wire_field("courses", default=None, min_length=1)

    @field_validator("reference_number")
    @classmethod
    def blank_reference_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by attribute name"""
        return {name: getattr(self, name) for name in self.model_fields_set}
