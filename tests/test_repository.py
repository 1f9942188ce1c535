"""
Unit tests for the in-memory course repository.

Repository contract:
- all selections are 1-based display indices
- out-of-range selections raise IndexOutOfRangeError and change nothing
- blank names raise EmptyNameError
"""

import unittest

from gradeplanner.errors import EmptyNameError, IndexOutOfRangeError
from gradeplanner.grades import GradeStatus, Outcome
from gradeplanner.repository import CourseRepository


class TestCourses(unittest.TestCase):
    def test_add_course_strips_name(self) -> None:
        repo = CourseRepository()
        course = repo.add_course("  Linear Algebra ")

        self.assertEqual(course.name, "Linear Algebra")
        self.assertEqual(course.assessments, [])
        self.assertEqual(len(repo), 1)

    def test_blank_course_name_rejected(self) -> None:
        repo = CourseRepository()
        with self.assertRaises(EmptyNameError):
            repo.add_course("   ")
        self.assertEqual(len(repo), 0)

    def test_duplicate_names_allowed(self) -> None:
        repo = CourseRepository()
        repo.add_course("Math")
        repo.add_course("Math")
        self.assertEqual(len(repo), 2)

    def test_get_course_by_display_index(self) -> None:
        repo = CourseRepository()
        repo.add_course("A")
        b = repo.add_course("B")

        self.assertIs(repo.get_course(2), b)
        for bad in (0, 3, -1):
            with self.assertRaises(IndexOutOfRangeError):
                repo.get_course(bad)

    def test_courses_view_is_read_only(self) -> None:
        repo = CourseRepository()
        repo.add_course("A")
        self.assertIsInstance(repo.courses, tuple)


class TestAssessments(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = CourseRepository()
        self.course = self.repo.add_course("Math")
        for name in ("Quiz", "Midterm", "Final"):
            self.repo.add_assessment(self.course, name, 100, 20)

    def _names(self) -> list:
        return [a.name for a in self.course.assessments]

    def test_add_assessment_appends_unscored(self) -> None:
        a = self.repo.add_assessment(self.course, " Lab ", 10, 10)

        self.assertEqual(a.name, "Lab")
        self.assertIsNone(a.scored_marks)
        self.assertEqual(self._names(), ["Quiz", "Midterm", "Final", "Lab"])

    def test_blank_assessment_name_rejected(self) -> None:
        with self.assertRaises(EmptyNameError):
            self.repo.add_assessment(self.course, "", 10, 10)
        self.assertEqual(len(self.course.assessments), 3)

    def test_delete_shifts_following_items(self) -> None:
        removed = self.repo.delete_assessment(self.course, 1)

        self.assertEqual(removed.name, "Quiz")
        self.assertEqual(self._names(), ["Midterm", "Final"])
        self.assertEqual(self.repo.get_assessment(self.course, 1).name, "Midterm")

    def test_delete_invalid_index_leaves_course_unchanged(self) -> None:
        for bad in (0, 4):
            with self.assertRaises(IndexOutOfRangeError) as ctx:
                self.repo.delete_assessment(self.course, bad)
            self.assertEqual(ctx.exception.size, 3)
        self.assertEqual(self._names(), ["Quiz", "Midterm", "Final"])

    def test_update_set_and_clear_score(self) -> None:
        self.repo.update_score(self.course, 2, 75)
        self.assertEqual(self.course.assessments[1].scored_marks, 75)

        self.repo.update_score(self.course, 2, None)
        self.assertIsNone(self.course.assessments[1].scored_marks)

    def test_update_invalid_index(self) -> None:
        with self.assertRaises(IndexOutOfRangeError):
            self.repo.update_score(self.course, 5, 10)
        self.assertTrue(all(a.scored_marks is None for a in self.course.assessments))


class TestGradeEntryPoints(unittest.TestCase):
    def test_current_grade_and_required_average(self) -> None:
        repo = CourseRepository()
        course = repo.add_course("Math")
        repo.add_assessment(course, "Quiz", 50, 20, 40)
        repo.add_assessment(course, "Midterm", 100, 30, 90)
        repo.add_assessment(course, "Final", 100, 50)

        self.assertAlmostEqual(repo.current_grade(course).current_grade, 86)

        outcome = repo.required_average(course, 85)
        self.assertEqual(outcome.kind, Outcome.REACHABLE)
        self.assertAlmostEqual(outcome.value, 84)

    def test_summary_covers_all_courses(self) -> None:
        repo = CourseRepository()
        repo.add_course("Empty")
        graded = repo.add_course("Graded")
        repo.add_assessment(graded, "Quiz", 10, 50, 5)

        reports = repo.summary()
        self.assertEqual([r.status for r in reports], [GradeStatus.NO_ASSESSMENTS, GradeStatus.GRADED])
        self.assertAlmostEqual(reports[1].current_grade, 50)


if __name__ == "__main__":
    unittest.main()
