"""In-memory course catalog"""
from typing import Dict, Iterable, List, Optional, Sequence
import logging

from neuromatch.models.domain import Course

logger = logging.getLogger(__name__)


class CourseCatalog:
    """
    Read-only collection of courses, insertion order preserved.

    Built once at startup and shared between requests; nothing mutates it
    after construction.
    """

    def __init__(self, courses: Iterable[Course]):
        self._courses: Dict[str, Course] = {}
        for course in courses:
            if course.id in self._courses:
                raise ValueError(f"Duplicate course id: {course.id}")
            self._courses[course.id] = course

    def __len__(self) -> int:
        return len(self._courses)

    def get_all(self) -> List[Course]:
        return list(self._courses.values())

    def get_by_id(self, course_id: str) -> Optional[Course]:
        """Exact-match lookup; returns None for unknown ids."""
        return self._courses.get(course_id)

    def search(self, topics: Sequence[str]) -> List[Course]:
        """
        Keep courses whose title, description, category or tags contain any
        of the topics (case-insensitive substring match).

        An empty topic list returns the whole catalog. Results keep catalog
        order; ranking happens later in scoring.
        """
        if not topics:
            return self.get_all()

        lowered = [topic.lower() for topic in topics]
        results: List[Course] = []
        for course in self._courses.values():
            text = course.search_text()
            if any(topic in text for topic in lowered):
                results.append(course)
        logger.debug(f"Topic search {lowered} matched {len(results)}/{len(self)} courses")
        return results

    def platforms(self) -> List[str]:
        return sorted({course.platform for course in self._courses.values()})
