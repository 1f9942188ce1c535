"""
Grade Planner: track course assessments, current grades and target projections.
"""

from gradeplanner.model import Assessment, Course
from gradeplanner.repository import CourseRepository

__all__ = ["Assessment", "Course", "CourseRepository"]
