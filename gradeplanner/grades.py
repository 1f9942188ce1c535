"""
Grade computation (weighted averages and target projection).

Two views of the same assessments exist and are kept separate on purpose:

- current grade: the weighted score renormalised to the weight completed so far
  (30% of the course done with full marks shows 100%)
- required average: the weighted score read directly on the 0-100 final scale,
  used to solve for the average needed on the remaining weight

None of the functions here mutate the course.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from gradeplanner.model import Course

logger = logging.getLogger(__name__)


class GradeStatus(str, Enum):
    NO_ASSESSMENTS = "no_assessments"
    NO_COMPLETED = "no_completed"
    GRADED = "graded"


class Outcome(str, Enum):
    DETERMINED = "determined"
    UNREACHABLE = "unreachable"
    ALREADY_ACHIEVED = "already_achieved"
    REACHABLE = "reachable"


@dataclass(frozen=True)
class GradeReport:
    """
    Result of compute_current_grade for one course.

    current_grade is None unless status is GRADED.
    """

    course_name: str
    status: GradeStatus
    assessment_count: int
    completed_weight: float
    weighted_score: float
    current_grade: Optional[float] = None


@dataclass(frozen=True)
class RequirementOutcome:
    """
    Result of compute_required_average.

    value holds the fixed final grade for DETERMINED and the required
    average for REACHABLE and UNREACHABLE (above 100 for the latter).
    It is None for ALREADY_ACHIEVED.
    """

    kind: Outcome
    target_grade: float
    weighted_score: float
    completed_weight: float
    remaining_weight: float
    value: Optional[float] = None


def _tally(course: Course) -> Tuple[float, float, float]:
    """
    Return (weighted_score, completed_weight, remaining_weight) for a course.
    """
    weighted_score = 0.0
    completed_weight = 0.0
    remaining_weight = 0.0

    for a in course.assessments:
        if a.is_scored:
            # raises InvalidMaxMarksError for max_marks <= 0
            weighted_score += a.contribution()
            completed_weight += a.weight_percent
        else:
            remaining_weight += a.weight_percent

    return weighted_score, completed_weight, remaining_weight


def compute_current_grade(course: Course) -> GradeReport:
    """
    Compute the current grade of a course based on completed assessments only.
    """
    weighted_score, completed_weight, _ = _tally(course)
    count = len(course.assessments)

    if count == 0:
        status = GradeStatus.NO_ASSESSMENTS
        current: Optional[float] = None
    elif completed_weight == 0:
        status = GradeStatus.NO_COMPLETED
        current = None
    else:
        status = GradeStatus.GRADED
        current = weighted_score / completed_weight * 100.0

    logger.debug(
        "current grade %s: status=%s completed=%.4f weighted=%.4f grade=%s",
        course.name,
        status.value,
        completed_weight,
        weighted_score,
        current,
    )
    return GradeReport(
        course_name=course.name,
        status=status,
        assessment_count=count,
        completed_weight=completed_weight,
        weighted_score=weighted_score,
        current_grade=current,
    )


def compute_required_average(course: Course, target_grade: float) -> RequirementOutcome:
    """
    Solve weighted_score + avg * remaining_weight / 100 = target_grade for avg.

    With no remaining weight the final grade is already fixed at
    weighted_score and the target does not matter.
    """
    weighted_score, completed_weight, remaining_weight = _tally(course)

    def outcome(kind: Outcome, value: Optional[float]) -> RequirementOutcome:
        return RequirementOutcome(
            kind=kind,
            target_grade=target_grade,
            weighted_score=weighted_score,
            completed_weight=completed_weight,
            remaining_weight=remaining_weight,
            value=value,
        )

    if remaining_weight <= 0:
        result = outcome(Outcome.DETERMINED, weighted_score)
    else:
        required = (target_grade - weighted_score) * 100.0 / remaining_weight
        if required > 100:
            result = outcome(Outcome.UNREACHABLE, required)
        elif required < 0:
            result = outcome(Outcome.ALREADY_ACHIEVED, None)
        else:
            result = outcome(Outcome.REACHABLE, required)

    logger.debug("required average %s target=%s: %s %s", course.name, target_grade, result.kind.value, result.value)
    return result


def summarize(courses: Iterable[Course]) -> List[GradeReport]:
    return [compute_current_grade(c) for c in courses]
