"""
In-memory course repository for one interactive session.

The repository owns the ordered list of courses. Each course owns its
ordered list of assessments. All selections coming from the UI are 1-based
display indices and are validated before anything is touched.

Nothing is persisted: a repository lives exactly as long as the session
that created it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from gradeplanner.errors import EmptyNameError, IndexOutOfRangeError
from gradeplanner.grades import (
    GradeReport,
    RequirementOutcome,
    compute_current_grade,
    compute_required_average,
    summarize,
)
from gradeplanner.model import Assessment, Course

logger = logging.getLogger(__name__)


def _check_index(index: int, size: int, what: str) -> int:
    """
    Validate a 1-based display index and return the 0-based position.
    """
    if not (1 <= index <= size):
        raise IndexOutOfRangeError(index, size, what)
    return index - 1


def _clean_name(name: Optional[str], what: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise EmptyNameError(what)
    return cleaned


class CourseRepository:
    def __init__(self) -> None:
        self._courses: List[Course] = []

    def __len__(self) -> int:
        return len(self._courses)

    @property
    def courses(self) -> Tuple[Course, ...]:
        return tuple(self._courses)

    # --- courses ---

    def add_course(self, name: str) -> Course:
        course = Course(name=_clean_name(name, "Course"))
        self._courses.append(course)
        logger.debug("added course %r (courses: %d)", course.name, len(self._courses))
        return course

    def get_course(self, index: int) -> Course:
        return self._courses[_check_index(index, len(self._courses), "course")]

    # --- assessments ---

    def add_assessment(
        self,
        course: Course,
        name: str,
        max_marks: float,
        weight_percent: float,
        scored_marks: Optional[float] = None,
    ) -> Assessment:
        """
        Append a new assessment to the course.

        max_marks is not validated here; a non-positive value only becomes an
        error once the assessment is scored and a grade is computed.
        """
        assessment = Assessment(
            name=_clean_name(name, "Assessment"),
            max_marks=max_marks,
            weight_percent=weight_percent,
            scored_marks=scored_marks,
        )
        course.add_assessment(assessment)
        logger.debug("added assessment %r to %r", assessment.name, course.name)
        return assessment

    def get_assessment(self, course: Course, index: int) -> Assessment:
        return course.assessments[_check_index(index, len(course.assessments), "assessment")]

    def update_score(self, course: Course, index: int, new_score: Optional[float] = None) -> Assessment:
        """
        Set, replace or clear (new_score=None) the recorded score.
        """
        assessment = self.get_assessment(course, index)
        assessment.scored_marks = new_score
        logger.debug("score of %r in %r set to %s", assessment.name, course.name, new_score)
        return assessment

    def delete_assessment(self, course: Course, index: int) -> Assessment:
        position = _check_index(index, len(course.assessments), "assessment")
        removed = course.remove_assessment(position)
        logger.debug("deleted assessment %r from %r", removed.name, course.name)
        return removed

    # --- grades ---

    def current_grade(self, course: Course) -> GradeReport:
        return compute_current_grade(course)

    def required_average(self, course: Course, target_grade: float) -> RequirementOutcome:
        return compute_required_average(course, target_grade)

    def summary(self) -> List[GradeReport]:
        return summarize(self._courses)
