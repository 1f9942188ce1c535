"""
CLI (Command Line Interface).

This module provides the entry point and a few one-shot commands for quick
calculations without going through the menu, e.g.:

    gradeplanner                       (same as: gradeplanner interactive)
    gradeplanner grade -a Quiz:50:20:40 -a Midterm:100:30:90
    gradeplanner required --target 85 -a Quiz:50:20:40 -a Final:100:50

Assessments are given as NAME:MAX:WEIGHT[:SCORED]; leave SCORED out
for an assessment that has not been graded yet.

Note:
- The interactive UI lives in gradeplanner/interactive.py
- One-shot commands print plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from gradeplanner.config import LOG_LEVELS, Settings, configure_logging, load_settings
from gradeplanner.errors import GradePlannerError, NotANumberError
from gradeplanner.model import Course
from gradeplanner.parse import parse_assessment_spec, parse_number
from gradeplanner.report import format_grade_report, format_requirement
from gradeplanner.repository import CourseRepository

logger = logging.getLogger(__name__)


def _build_course(repo: CourseRepository, name: str, specs: list[str]) -> Course:
    """
    Create one ad-hoc course in the repository from NAME:MAX:WEIGHT[:SCORED] specs.
    """
    course = repo.add_course(name)
    for spec in specs:
        repo.add_assessment(course, **parse_assessment_spec(spec))
    return course


def _cmd_grade(args: argparse.Namespace, settings: Settings) -> int:
    """
    Print the current grade of an ad-hoc course.
    """
    repo = CourseRepository()
    try:
        course = _build_course(repo, args.course, args.assessment or [])
        report = repo.current_grade(course)
    except GradePlannerError as e:
        print(e.message)
        return 1

    for line in format_grade_report(report, settings.decimals):
        print(line)
    return 0


def _cmd_required(args: argparse.Namespace, settings: Settings) -> int:
    """
    Print the average needed on unscored assessments to reach --target.
    """
    repo = CourseRepository()
    try:
        course = _build_course(repo, args.course, args.assessment or [])
        outcome = repo.required_average(course, args.target)
    except GradePlannerError as e:
        print(e.message)
        return 1

    for line in format_requirement(course.name, outcome, settings.decimals):
        print(line)
    return 0


def _number_arg(text: str) -> float:
    """
    argparse type for finite numbers (rejects nan and inf).
    """
    try:
        return parse_number(text)
    except NotANumberError as e:
        raise argparse.ArgumentTypeError(e.message) from None


def _add_course_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--course", type=str, default="Course", help="Course name shown in the report")
    p.add_argument(
        "-a",
        "--assessment",
        action="append",
        metavar="NAME:MAX:WEIGHT[:SCORED]",
        help="Assessment (repeatable), e.g. Quiz:50:20:40",
    )


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="gradeplanner", description="Grade Planner CLI")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: GRADEPLANNER_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("interactive", help="Interactive menu mode (default)")

    p_grade = sub.add_parser("grade", help="Current grade of an ad-hoc course")
    _add_course_args(p_grade)

    p_required = sub.add_parser("required", help="Required average for a target final grade")
    p_required.add_argument("--target", type=_number_arg, required=True, help="Target final percentage (e.g. 85)")
    _add_course_args(p_required)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)
    logger.debug("command=%s settings=%s", args.command, settings)

    if args.command == "grade":
        raise SystemExit(_cmd_grade(args, settings))
    if args.command == "required":
        raise SystemExit(_cmd_required(args, settings))

    if args.command in (None, "interactive"):
        from gradeplanner.interactive import run_interactive

        # one repository per session; dropped when the loop returns
        run_interactive(CourseRepository(), settings)
        raise SystemExit(0)

    raise SystemExit(2)
