"""
Interactive menu (rich console).

Main menu for courses and grade reports, plus a manage-course sub-menu for
assessments. Domain errors are printed and the previous menu is shown again;
numeric prompts keep asking until the answer parses.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gradeplanner.config import Settings
from gradeplanner.errors import EmptyNameError, GradePlannerError, NotANumberError
from gradeplanner.grades import GradeStatus
from gradeplanner.model import Course
from gradeplanner.parse import parse_index, parse_number, parse_optional_number
from gradeplanner.report import (
    format_assessment_line,
    format_grade_report,
    format_requirement,
    format_summary_entry,
)
from gradeplanner.repository import CourseRepository

logger = logging.getLogger(__name__)

console = Console()

SEP_SUB = "-" * 60


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg)


def _print_lines(lines: list[str]) -> None:
    _println()
    _println(SEP_SUB)
    for line in lines:
        _println(escape(line))
    _println(SEP_SUB)


def _read_number(msg: str) -> float:
    """
    Ask until the answer parses as a number.
    """
    while True:
        try:
            return parse_number(_prompt(msg))
        except NotANumberError:
            _println("Invalid number. Try again.")


def _read_index(msg: str) -> int:
    """
    Ask until the answer parses as a selection number. Range is checked by the repository.
    """
    while True:
        try:
            return parse_index(_prompt(msg))
        except NotANumberError:
            _println("Invalid integer. Try again.")


def run_interactive(repo: CourseRepository, settings: Optional[Settings] = None) -> None:
    """
    Main menu loop. Returns when the user picks [0] or input ends.

    Every GradePlannerError raised by a flow is reported and the menu is shown again.
    """
    settings = settings or Settings()
    flows: dict[str, Callable[[CourseRepository, Settings], object]] = {
        "1": _flow_add_course,
        "2": _flow_list_courses,
        "3": _flow_manage_course,
        "4": _flow_current_grade,
        "5": _flow_required_average,
        "6": _flow_summary,
    }

    while True:
        _print_header(repo)

        try:
            choice = _prompt(
                "\n[1] Add course\n"
                "[2] List courses\n"
                "[3] Manage course (assessments)\n"
                "[4] Calculate current grade for a course\n"
                "[5] Calculate required marks (target grade)\n"
                "[6] Show summary for all courses\n"
                "[0] Exit\n"
                "Select: "
            ).strip()
        except (EOFError, KeyboardInterrupt):
            _println("\nBye.")
            return

        if choice == "0":
            _println("Bye.")
            return

        flow = flows.get(choice)
        if flow is None:
            _println("Invalid choice.")
            continue

        try:
            flow(repo, settings)
        except GradePlannerError as e:
            logger.info("flow %s aborted: %s", choice, e.error_code)
            _println(f"[red]Error:[/] {escape(e.message)}")
        except (EOFError, KeyboardInterrupt):
            _println("\nBye.")
            return


def _print_header(repo: CourseRepository) -> None:
    n_assessments = sum(len(c.assessments) for c in repo.courses)
    _println("\n=== Grade Planner (interactive) ===")
    _println(f"Courses: {len(repo)} | Assessments: {n_assessments}")


# ---------------------------------------------------------------------------
# Courses
# ---------------------------------------------------------------------------


def _flow_add_course(repo: CourseRepository, settings: Settings) -> None:
    name = _prompt("Enter course name: ")
    course = repo.add_course(name)
    _println(f"Course added: {escape(course.name)}")


def _flow_list_courses(repo: CourseRepository, settings: Settings) -> bool:
    if not len(repo):
        _println("No courses added yet.")
        return False

    table = Table(title="Courses", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Course")
    table.add_column("Assessments", justify="right")
    for i, c in enumerate(repo.courses, start=1):
        table.add_row(str(i), escape(c.name), f"[yellow]{len(c.assessments)}[/]")
    console.print(table)
    return True


def _select_course(repo: CourseRepository, settings: Settings) -> Optional[Course]:
    if not len(repo):
        _println("No courses available. Add a course first.")
        return None
    _flow_list_courses(repo, settings)
    idx = _read_index("Select course number: ")
    return repo.get_course(idx)


# ---------------------------------------------------------------------------
# Assessments
# ---------------------------------------------------------------------------


def _flow_manage_course(repo: CourseRepository, settings: Settings) -> None:
    course = _select_course(repo, settings)
    if course is None:
        return

    actions: dict[str, Callable[[CourseRepository, Course, Settings], object]] = {
        "1": _flow_add_assessment,
        "2": _flow_list_assessments,
        "3": _flow_update_score,
        "4": _flow_delete_assessment,
    }

    while True:
        _println(f"\n--- Manage course: {escape(course.name)} ---")
        choice = _prompt(
            "[1] Add assessment\n"
            "[2] List assessments\n"
            "[3] Update scored marks\n"
            "[4] Delete assessment\n"
            "[0] Back\n"
            "Select: "
        ).strip()

        if choice == "0":
            return

        action = actions.get(choice)
        if action is None:
            _println("Invalid choice.")
            continue

        # errors stay inside the sub-menu
        try:
            action(repo, course, settings)
        except GradePlannerError as e:
            _println(f"[red]Error:[/] {escape(e.message)}")


def _flow_add_assessment(repo: CourseRepository, course: Course, settings: Settings) -> None:
    name = _prompt("Enter assessment name (e.g. Midsem, Quiz 1): ")
    if not name.strip():
        raise EmptyNameError("Assessment")

    max_marks = _read_number("Enter max marks (e.g. 50): ")
    weight = _read_number("Enter weight percentage (e.g. 30 for 30%): ")

    scored_raw = _prompt("Enter scored marks (blank if not yet conducted): ")
    try:
        scored = parse_optional_number(scored_raw)
    except NotANumberError:
        _println("Invalid scored marks input. It will be treated as not yet scored.")
        scored = None

    repo.add_assessment(course, name, max_marks, weight, scored)
    _println(f"Assessment added to course {escape(course.name)}")


def _flow_list_assessments(repo: CourseRepository, course: Course, settings: Settings) -> bool:
    if not course.assessments:
        _println("No assessments for this course yet.")
        return False

    lines = [f"Assessments for course: {course.name}"]
    for i, a in enumerate(course.assessments, start=1):
        lines.append(format_assessment_line(i, a, settings.decimals))
    _print_lines(lines)
    return True


def _flow_update_score(repo: CourseRepository, course: Course, settings: Settings) -> None:
    if not _flow_list_assessments(repo, course, settings):
        return

    idx = _read_index("Select assessment number to update: ")
    # validate before asking for the new score
    repo.get_assessment(course, idx)

    scored_raw = _prompt("Enter new scored marks (blank to clear): ")
    try:
        new_score = parse_optional_number(scored_raw)
    except NotANumberError:
        _println("Invalid number. No changes made.")
        return

    repo.update_score(course, idx, new_score)
    _println("Scored marks cleared." if new_score is None else "Scored marks updated.")


def _flow_delete_assessment(repo: CourseRepository, course: Course, settings: Settings) -> None:
    if not _flow_list_assessments(repo, course, settings):
        return

    idx = _read_index("Select assessment number to delete: ")
    removed = repo.delete_assessment(course, idx)
    _println(f"Deleted assessment: {escape(removed.name)}")


# ---------------------------------------------------------------------------
# Grades
# ---------------------------------------------------------------------------


def _flow_current_grade(repo: CourseRepository, settings: Settings) -> None:
    course = _select_course(repo, settings)
    if course is None:
        return
    _print_lines(format_grade_report(repo.current_grade(course), settings.decimals))


def _flow_required_average(repo: CourseRepository, settings: Settings) -> None:
    course = _select_course(repo, settings)
    if course is None:
        return

    if not course.assessments:
        _println("No assessments for this course.")
        return

    target = _read_number("Enter target final percentage (e.g. 85): ")
    outcome = repo.required_average(course, target)
    _print_lines(format_requirement(course.name, outcome, settings.decimals))


def _flow_summary(repo: CourseRepository, settings: Settings) -> None:
    if not len(repo):
        _println("No courses available.")
        return

    reports = repo.summary()
    graded = sum(1 for r in reports if r.status is GradeStatus.GRADED)

    lines = ["SEMESTER SUMMARY (per-course current status)", f"Courses with grades: {graded}/{len(reports)}"]
    for r in reports:
        lines.append("")
        lines.extend(format_summary_entry(r, settings.decimals))
    _print_lines(lines)
