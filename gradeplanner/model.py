"""
Central data model definitions used across the project.

This module defines the structure of Course and Assessment objects so that:
- the grade math, the repository and the menu share the same field names
- "not yet graded" is always None, never an accidental 0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gradeplanner.errors import InvalidMaxMarksError


@dataclass
class Assessment:
    """
    One gradable item of a course (quiz, midterm, final, ...).

    weight_percent is taken at face value: 20 means 20% of the final grade.
    Weights of a course are not required to add up to 100.
    """

    name: str
    max_marks: float
    weight_percent: float
    scored_marks: Optional[float] = None

    @property
    def is_scored(self) -> bool:
        return self.scored_marks is not None

    def score_percent(self) -> float:
        """
        Return the recorded score as a percentage of max marks.

        Raises InvalidMaxMarksError if max marks is zero or negative.
        """
        if self.scored_marks is None:
            raise ValueError(f"Assessment '{self.name}' has no recorded score.")
        # also catches nan
        if not self.max_marks > 0:
            raise InvalidMaxMarksError(self.name, self.max_marks)
        return self.scored_marks / self.max_marks * 100.0

    def contribution(self) -> float:
        """
        Points this assessment adds to the final grade (0-100 scale).
        """
        return self.score_percent() * self.weight_percent / 100.0

    def describe(self, decimals: int = 2) -> str:
        scored_text = "N/A" if self.scored_marks is None else f"{self.scored_marks:.{decimals}f}"
        return (
            f"Name: {self.name:<15} | Max: {self.max_marks:<6.{decimals}f} | "
            f"Weight: {self.weight_percent:<5.{decimals}f}% | Scored: {scored_text}"
        )


@dataclass
class Course:
    """
    A named, ordered collection of assessments.
    """

    name: str
    assessments: List[Assessment] = field(default_factory=list)

    def add_assessment(self, assessment: Assessment) -> None:
        self.assessments.append(assessment)

    def remove_assessment(self, position: int) -> Assessment:
        # position is 0-based; callers validate display indices first
        return self.assessments.pop(position)

    def __str__(self) -> str:
        return self.name
