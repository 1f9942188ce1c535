"""
Exceptions raised by the grade planner core and its input boundary.

Every error here is recoverable: the interactive menu catches
GradePlannerError, prints the message and returns to the previous menu.
"""

from __future__ import annotations

from typing import Optional


class GradePlannerError(Exception):
    """Base exception for all grade planner errors."""

    error_code = "GRADE_PLANNER_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code


class EmptyNameError(GradePlannerError):
    """Raised when a course or assessment name is blank."""

    error_code = "EMPTY_NAME"

    def __init__(self, what: str = "Name"):
        super().__init__(f"{what} name cannot be empty.")
        self.what = what


class IndexOutOfRangeError(GradePlannerError):
    """Raised when a 1-based selection is outside 1..size."""

    error_code = "INDEX_OUT_OF_RANGE"

    def __init__(self, index: int, size: int, what: str = "item"):
        super().__init__(f"Invalid {what} number: {index} (valid: 1-{size}).")
        self.index = index
        self.size = size
        self.what = what


class NotANumberError(GradePlannerError):
    """Raised by the input parsers when text is not a number."""

    error_code = "NOT_A_NUMBER"

    def __init__(self, text: str):
        super().__init__(f"Not a number: {text!r}")
        self.text = text


class InvalidMaxMarksError(GradePlannerError):
    """Raised when a scored assessment has max marks <= 0."""

    error_code = "INVALID_MAX_MARKS"

    def __init__(self, assessment_name: str, max_marks: float):
        super().__init__(
            f"Assessment '{assessment_name}' has invalid max marks ({max_marks}); must be greater than 0."
        )
        self.assessment_name = assessment_name
        self.max_marks = max_marks
