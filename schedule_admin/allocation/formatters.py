"""
Formatting utilities for the Allocation page
"""
from typing import List, Optional, Tuple

from . import time_codec
from .models import PersistedAllocation

# Codes accepted by the backend for dayOfWeek
DAYS_OF_WEEK: List[Tuple[str, str]] = [
    ('MONDAY', 'Monday'),
    ('TUESDAY', 'Tuesday'),
    ('WEDNESDAY', 'Wednesday'),
    ('THURSDAY', 'Thursday'),
    ('FRIDAY', 'Friday'),
    ('SATURDAY', 'Saturday'),
    ('SUNDAY', 'Sunday'),
]

_DAY_LABELS = dict(DAYS_OF_WEEK)


def format_day_of_week(code: Optional[str]) -> str:
    """Human label for a day code; unknown codes are shown as-is"""
    if not code:
        return '-'
    return _DAY_LABELS.get(code, code)


def format_hour(value: Optional[str]) -> str:
    """Display form of a canonical hour"""
    return time_codec.decode(value) or '-'


def format_entity_name(entity) -> str:
    """Name of a nested professor/course, never its id"""
    if entity is None:
        return '-'
    return entity.name


def format_allocation_label(row: PersistedAllocation) -> str:
    """Short description used in confirmations and notifications"""
    professor = row.professor_name or '?'
    course = row.course_name or '?'
    return f"Allocation #{row.id} ({professor} / {course})"
