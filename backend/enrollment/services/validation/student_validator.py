# enrollment/services/validation/student_validator.py
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from ...database.models.student import Stream
from ...schemas.student import CourseEntry, StudentDraft, StudentPatch

SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass(frozen=True)
class FieldDefect:
    field: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "reason": self.reason}


@dataclass
class ValidationResult(Generic[SchemaT]):
    """Either an accepted, normalized record or every defect found in the candidate"""

    record: Optional[SchemaT] = None
    defects: List[FieldDefect] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.defects


# pydantic error type -> reason shown to the client
REASONS = {
    "missing": "is required",
    "string_type": "must be text",
    "string_too_short": "must not be empty",
    "float_type": "must be a number",
    "float_parsing": "must be a number",
    "finite_number": "must be a finite number",
    "enum": "must be one of " + ", ".join(stream.value for stream in Stream),
    "list_type": "must be a list of courses",
    "too_short": "must contain at least one course",
    "model_type": "must be an object",
    "dict_type": "must be an object",
}


def _wire_names(*schemas: Type[BaseModel]) -> Dict[str, str]:
    """Map every accepted key (attribute name or alias) to the key the frontend sends"""
    names = {}
    for schema in schemas:
        for name, info in schema.model_fields.items():
            wire = info.serialization_alias or name
            names[name] = wire
            for choice in info.validation_alias.choices:
                names[choice] = wire
    return names


WIRE_NAMES = _wire_names(StudentDraft, CourseEntry)


def field_path(loc: Tuple) -> str:
    """("courses", 0, "courseCode") -> "courses[0].courseCode" """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += ("." if path else "") + WIRE_NAMES.get(part, str(part))
    return path or "record"


def _defects(exc: PydanticValidationError) -> List[FieldDefect]:
    return [
        FieldDefect(field=field_path(error["loc"]), reason=REASONS.get(error["type"], error["msg"]))
        for error in exc.errors()
    ]


def _validate(schema: Type[SchemaT], candidate: Any) -> ValidationResult[SchemaT]:
    try:
        record = schema.model_validate(candidate)
    except PydanticValidationError as exc:
        return ValidationResult(defects=_defects(exc))
    return ValidationResult(record=record)


def validate_for_create(candidate: Any) -> ValidationResult[StudentDraft]:
    """
    Validate a full student record submitted for creation.

    Every required text field must be present and non-empty after stripping,
    balance must be a finite number, stream one of Stream-1 / Stream-2, and courses
    a non-empty list whose entries each carry a courseCode and a subject.
    All defects are reported together.
    """
    return _validate(StudentDraft, candidate)


def validate_for_update(candidate: Any) -> ValidationResult[StudentPatch]:
    """
    Validate a sparse update. Absent keys are accepted and left untouched;
    keys that are present are held to the same rules as on creation.
    """
    return _validate(StudentPatch, candidate)
