"""
Scripted sessions of the interactive menu.

Prompts are replaced by a fixed list of answers and the rich console writes
into a buffer, so each test reads like the keystrokes a user would type.
"""

import io
import unittest
from unittest import mock

from rich.console import Console

from gradeplanner.config import Settings
from gradeplanner.interactive import run_interactive
from gradeplanner.repository import CourseRepository


class TestInteractive(unittest.TestCase):
    def _session(self, answers: list, repo: CourseRepository = None) -> tuple:
        repo = repo if repo is not None else CourseRepository()
        buf = io.StringIO()
        test_console = Console(file=buf, width=200, color_system=None)
        with mock.patch("gradeplanner.interactive.console", test_console), mock.patch(
            "gradeplanner.interactive._prompt", side_effect=answers
        ):
            run_interactive(repo)
        return repo, buf.getvalue()

    def test_full_session(self) -> None:
        answers = [
            "1", "Math",
            "3", "1",
            "1", "Quiz", "50", "20", "40",
            "1", "Midterm", "100", "30", "90",
            "1", "Final", "100", "50", "",
            "0",
            "4", "1",
            "5", "1", "85",
            "6",
            "0",
        ]
        repo, out = self._session(answers)

        course = repo.get_course(1)
        self.assertEqual([a.name for a in course.assessments], ["Quiz", "Midterm", "Final"])
        self.assertIsNone(course.assessments[2].scored_marks)

        self.assertIn("Course added: Math", out)
        self.assertIn("Current Grade (based on completed assessments): 86.00 %", out)
        self.assertIn("You need an average of 84.00 % in the remaining assessments", out)
        self.assertIn("SEMESTER SUMMARY", out)
        self.assertIn("Bye.", out)

    def test_errors_return_to_menu(self) -> None:
        answers = [
            "1", "   ",        # blank course name
            "3",               # no courses yet
            "1", "Math",
            "4", "7",          # out of range
            "4", "x", "1",     # not a number, asked again
            "9",               # unknown menu entry
            "0",
        ]
        repo, out = self._session(answers)

        self.assertEqual(len(repo), 1)
        self.assertIn("Course name cannot be empty.", out)
        self.assertIn("No courses available. Add a course first.", out)
        self.assertIn("Invalid course number: 7", out)
        self.assertIn("Invalid integer. Try again.", out)
        self.assertIn("No assessments for this course.", out)
        self.assertNotIn("Not a number", out)
        self.assertIn("Invalid choice.", out)

    def test_number_prompts_retry(self) -> None:
        answers = ["1", "Math", "3", "1", "1", "Quiz", "abc", "50", "20", "oops", "0", "0"]
        repo, out = self._session(answers)

        quiz = repo.get_course(1).assessments[0]
        self.assertEqual(quiz.max_marks, 50)
        self.assertIsNone(quiz.scored_marks)
        self.assertIn("Invalid number. Try again.", out)
        self.assertIn("It will be treated as not yet scored.", out)

    def test_update_and_delete(self) -> None:
        repo = CourseRepository()
        course = repo.add_course("Math")
        repo.add_assessment(course, "Quiz", 50, 20, 40)
        repo.add_assessment(course, "Final", 100, 80)

        answers = [
            "3", "1",
            "3", "2", "70",   # score the final
            "3", "1", "",     # clear the quiz
            "3", "5",         # out of range, stays in sub-menu
            "4", "1",         # delete the quiz
            "0",
            "0",
        ]
        _, out = self._session(answers, repo)

        self.assertEqual([a.name for a in course.assessments], ["Final"])
        self.assertEqual(course.assessments[0].scored_marks, 70)
        self.assertIn("Scored marks updated.", out)
        self.assertIn("Scored marks cleared.", out)
        self.assertIn("Invalid assessment number: 5", out)
        self.assertIn("Deleted assessment: Quiz", out)

    def test_selection_prompt_asks_again(self) -> None:
        repo = CourseRepository()
        course = repo.add_course("Math")
        repo.add_assessment(course, "Quiz", 50, 20, 40)
        repo.add_assessment(course, "Midterm", 100, 30, 90)

        # a bad selection must not leak into the main menu as a choice
        _, out = self._session(["4", "x", "1", "0"], repo)

        self.assertEqual(len(repo), 1)
        self.assertIn("Invalid integer. Try again.", out)
        self.assertIn("Current Grade (based on completed assessments): 86.00 %", out)

        _, out = self._session(["3", "1", "4", "two", "2", "0", "0"], repo)
        self.assertEqual([a.name for a in course.assessments], ["Quiz"])
        self.assertIn("Deleted assessment: Midterm", out)

    def test_assessment_list_uses_display_decimals(self) -> None:
        repo = CourseRepository()
        course = repo.add_course("Math")
        repo.add_assessment(course, "Quiz", 50, 20, 40)
        repo.add_assessment(course, "Final", 100, 80)

        buf = io.StringIO()
        test_console = Console(file=buf, width=200, color_system=None)
        with mock.patch("gradeplanner.interactive.console", test_console), mock.patch(
            "gradeplanner.interactive._prompt", side_effect=["3", "1", "2", "0", "0"]
        ):
            run_interactive(repo, Settings(decimals=1))
        out = buf.getvalue()

        self.assertIn("Assessments for course: Math", out)
        self.assertIn("1. Name: Quiz", out)
        self.assertIn("Max: 50.0", out)
        self.assertIn("Weight: 20.0", out)
        self.assertIn("Scored: 40.0", out)
        self.assertIn("2. Name: Final", out)
        self.assertIn("Scored: N/A", out)

    def test_invalid_max_marks_is_reported(self) -> None:
        repo = CourseRepository()
        course = repo.add_course("Bio")
        repo.add_assessment(course, "Quiz", 0, 20, 5)

        _, out = self._session(["4", "1", "6", "0"], repo)
        self.assertEqual(out.count("invalid max marks"), 2)

    def test_end_of_input_exits(self) -> None:
        _, out = self._session([EOFError()])
        self.assertIn("Bye.", out)


if __name__ == "__main__":
    unittest.main()
