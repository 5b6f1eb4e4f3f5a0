"""
Reference Data Loader
Professors and courses feed the editor's select boxes. Each list is fetched
once, concurrently with the other, and fails on its own.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List

from ..api import ApiClient, ApiError, parse_object_list
from .models import Course, Professor
from .notifications import Notifier

logger = logging.getLogger(__name__)

PROFESSORS_ENDPOINT = '/professors'
COURSES_ENDPOINT = '/courses'


@dataclass
class ReferenceData:
    """Read-only reference slots"""
    professors: List[Professor] = field(default_factory=list)
    courses: List[Course] = field(default_factory=list)

    def professor_name(self, professor_id: int) -> str:
        return next((p.name for p in self.professors if p.id == professor_id), '')

    def course_name(self, course_id: int) -> str:
        return next((c.name for c in self.courses if c.id == course_id), '')


class ReferenceDataLoader:
    """Fetches professors and courses into a ReferenceData"""

    def __init__(self, client: ApiClient, notifier: Notifier):
        self.client = client
        self.notifier = notifier

    def load_professors(self) -> List[Professor]:
        return parse_object_list(self.client.get(PROFESSORS_ENDPOINT), PROFESSORS_ENDPOINT,
                                 Professor.from_dict)

    def load_courses(self) -> List[Course]:
        return parse_object_list(self.client.get(COURSES_ENDPOINT), COURSES_ENDPOINT,
                                 Course.from_dict)

    def load_all(self, reference: ReferenceData) -> ReferenceData:
        """
        Run both fetches concurrently and fill the slots that succeed.

        Worker threads only do I/O; slots and notifications are updated on
        the calling thread.
        """
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix='reference-data') as pool:
            professors_future = pool.submit(self.load_professors)
            courses_future = pool.submit(self.load_courses)

            try:
                reference.professors = professors_future.result()
                logger.info(f"Loaded {len(reference.professors)} professors")
            except ApiError as e:
                logger.error(f"Error loading professors: {e.message}")
                self.notifier.error(e.message)

            try:
                reference.courses = courses_future.result()
                logger.info(f"Loaded {len(reference.courses)} courses")
            except ApiError as e:
                logger.error(f"Error loading courses: {e.message}")
                self.notifier.error(e.message)

        return reference
