# enrollment/services/query_builder.py
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class StudentFilter:
    """
    Search criteria for student records, combined with AND.

    - fullname: case-insensitive literal substring of the stored full name
    - enrollment_number: exact match
    - stream: exact match against the stored stream value, not checked against
      the known streams (an unknown value simply matches nothing)

    A criterion left as None does not narrow the result.
    """

    fullname: Optional[str] = None
    enrollment_number: Optional[str] = None
    stream: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.fullname is None and self.enrollment_number is None and self.stream is None

    def matches(self, record) -> bool:
        """Evaluate the filter against a StudentRecord held in memory"""
        if self.fullname is not None and self.fullname.lower() not in record.full_name.lower():
            return False
        if self.enrollment_number is not None and record.enrollment_number != self.enrollment_number:
            return False
        if self.stream is not None and record.stream != self.stream:
            return False
        return True


def _param(params: Mapping[str, Any], key: str) -> Optional[str]:
    value = params.get(key)
    # ?fullname= from an empty search box means "no filter"
    if value is None or value == "":
        return None
    return str(value)


def build_filter(params: Optional[Mapping[str, Any]] = None) -> StudentFilter:
    """Turn search parameters (fullname, enrollmentNumber, stream) into a StudentFilter"""
    params = params or {}
    return StudentFilter(
        fullname=_param(params, "fullname"),
        enrollment_number=_param(params, "enrollmentNumber"),
        stream=_param(params, "stream"),
    )
