"""
Plain-text rendering of grade results.

Every function returns a list of lines so the interactive menu (rich) and
the one-shot CLI (print) can share the same wording.
"""

from __future__ import annotations

from typing import List

from gradeplanner.config import DEFAULT_DECIMALS
from gradeplanner.grades import GradeReport, GradeStatus, Outcome, RequirementOutcome
from gradeplanner.model import Assessment


def _num(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def format_assessment_line(index: int, assessment: Assessment, decimals: int = DEFAULT_DECIMALS) -> str:
    return f"{index}. {assessment.describe(decimals)}"


def format_grade_report(report: GradeReport, decimals: int = DEFAULT_DECIMALS) -> List[str]:
    """
    Current Grade Report for a single course.
    """
    lines = ["Current Grade Report", f"Course: {report.course_name}"]

    if report.status is GradeStatus.NO_ASSESSMENTS:
        lines.append("No assessments for this course.")
    elif report.status is GradeStatus.NO_COMPLETED:
        lines.append("No completed assessments yet.")
    else:
        assert report.current_grade is not None
        lines.append(f"Completed Weight: {_num(report.completed_weight, decimals)} %")
        lines.append(f"Weighted Score so far: {_num(report.weighted_score, decimals)} / {_num(100, decimals)}")
        lines.append(
            f"Current Grade (based on completed assessments): {_num(report.current_grade, decimals)} %"
        )
    return lines


def format_requirement(course_name: str, outcome: RequirementOutcome, decimals: int = DEFAULT_DECIMALS) -> List[str]:
    """
    Required Marks Analysis for a target final grade.
    """
    lines = [
        "Required Marks Analysis",
        f"Course: {course_name}",
        f"Target Final Grade: {_num(outcome.target_grade, decimals)} %",
        f"Completed Weight: {_num(outcome.completed_weight, decimals)} %",
        f"Remaining Weight: {_num(outcome.remaining_weight, decimals)} %",
    ]

    if outcome.kind is Outcome.DETERMINED:
        lines.append("No remaining assessments. Final grade is already determined.")
        lines.append(f"Current weighted score: {_num(outcome.weighted_score, decimals)} / {_num(100, decimals)}")
    elif outcome.kind is Outcome.UNREACHABLE:
        assert outcome.value is not None
        lines.append("It is NOT possible to reach the target grade.")
        lines.append(
            f"You would need an average of {_num(outcome.value, decimals)} % in remaining assessments (> 100%)."
        )
    elif outcome.kind is Outcome.ALREADY_ACHIEVED:
        lines.append("Target already achieved.")
        lines.append("Even scoring 0 in remaining assessments, you will stay above the target.")
    else:
        assert outcome.value is not None
        lines.append(
            f"You need an average of {_num(outcome.value, decimals)} % in the remaining assessments to reach the target."
        )
    return lines


def format_summary_entry(report: GradeReport, decimals: int = DEFAULT_DECIMALS) -> List[str]:
    lines = [f"Course: {report.course_name}"]
    if report.status is GradeStatus.NO_ASSESSMENTS:
        lines.append("  No assessments defined.")
    elif report.status is GradeStatus.NO_COMPLETED:
        lines.append("  No completed assessments yet.")
    else:
        assert report.current_grade is not None
        lines.append(f"  Completed Weight: {_num(report.completed_weight, decimals)} %")
        lines.append(f"  Current Grade (completed only): {_num(report.current_grade, decimals)} %")
    return lines
