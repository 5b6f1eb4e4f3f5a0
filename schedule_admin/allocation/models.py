"""
Allocation data model

Two shapes of the same allocation, never mixed in one structure:
- PersistedAllocation: wire shape (nested professor/course, canonical hours)
- AllocationRecord:    editor draft (flat ids, display hours)

to_record() maps persisted -> record at hydration,
to_payload() maps record -> request body at save.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from . import time_codec


@dataclass(frozen=True)
class Professor:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Professor':
        return cls(id=int(data.get('id') or 0), name=str(data.get('name') or ''))


@dataclass(frozen=True)
class Course:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Course':
        return cls(id=int(data.get('id') or 0), name=str(data.get('name') or ''))


@dataclass(frozen=True)
class PersistedAllocation:
    """Allocation row as returned by GET /allocations"""
    id: int
    professor: Optional[Professor]
    course: Optional[Course]
    day_of_week: str
    start_hour: str
    end_hour: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PersistedAllocation':
        professor = data.get('professor')
        course = data.get('course')
        return cls(
            id=int(data.get('id') or 0),
            professor=Professor.from_dict(professor) if professor else None,
            course=Course.from_dict(course) if course else None,
            day_of_week=data.get('dayOfWeek') or '',
            start_hour=data.get('startHour') or '',
            end_hour=data.get('endHour') or '',
        )

    @property
    def professor_name(self) -> str:
        return self.professor.name if self.professor else ''

    @property
    def course_name(self) -> str:
        return self.course.name if self.course else ''


@dataclass(frozen=True)
class AllocationRecord:
    """Editor draft. id == 0 means the record has not been persisted yet."""
    id: int = 0
    professor_id: int = 0
    course_id: int = 0
    day_of_week: str = ''
    start_hour: str = ''
    end_hour: str = ''

    @property
    def is_new(self) -> bool:
        return not self.id


EMPTY_RECORD = AllocationRecord()

RECORD_FIELDS = frozenset(f.name for f in fields(AllocationRecord))


def to_record(row: PersistedAllocation) -> AllocationRecord:
    """Flatten a persisted allocation into an editable draft"""
    return AllocationRecord(
        id=row.id,
        professor_id=row.professor.id if row.professor else 0,
        course_id=row.course.id if row.course else 0,
        day_of_week=row.day_of_week,
        start_hour=time_codec.decode(row.start_hour),
        end_hour=time_codec.decode(row.end_hour),
    )


def to_payload(record: AllocationRecord) -> Dict[str, Any]:
    """Build the POST/PUT body for a draft"""
    return {
        'professorId': record.professor_id,
        'courseId': record.course_id,
        'dayOfWeek': record.day_of_week,
        'startHour': time_codec.encode(record.start_hour),
        'endHour': time_codec.encode(record.end_hour),
    }
