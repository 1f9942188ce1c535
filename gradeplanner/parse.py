"""
Parsing of raw user input (text -> numbers / assessments).

Used by the interactive menu and the one-shot CLI commands.
Only basic type parsing happens here: whether a number makes sense
(negative weight, score above max, ...) is left to the user.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from gradeplanner.errors import EmptyNameError, GradePlannerError, NotANumberError


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def parse_number(text: Optional[str]) -> float:
    """
    Parse a real number. Blank text, nan and inf are rejected.
    """
    raw = (text or "").strip()
    try:
        value = float(raw)
    except ValueError:
        raise NotANumberError(raw) from None

    if not math.isfinite(value):
        raise NotANumberError(raw)
    return value


def parse_optional_number(text: Optional[str]) -> Optional[float]:
    """
    Like parse_number, but blank input means "no value" (None).
    """
    raw = (text or "").strip()
    if not raw:
        return None
    return parse_number(raw)


def parse_index(text: Optional[str]) -> int:
    """
    Parse a menu / list selection number. Range checks happen in the repository.
    """
    raw = (text or "").strip()
    try:
        return int(raw)
    except ValueError:
        raise NotANumberError(raw) from None


# ---------------------------------------------------------------------------
# Assessment specs (CLI)
# ---------------------------------------------------------------------------


def parse_assessment_spec(spec: str) -> Dict[str, Any]:
    """
    Parse "Name:max:weight[:scored]" into keyword arguments for
    CourseRepository.add_assessment.

    Examples:
        "Quiz:50:20:40"  -> scored 40 out of 50, weight 20
        "Final:100:50"   -> not yet scored
        "Final:100:50:-" -> not yet scored
    """
    parts = [p.strip() for p in spec.split(":")]

    # name, max, weight and an optional score
    if len(parts) not in (3, 4):
        raise GradePlannerError(
            f"Invalid assessment '{spec}'. Expected NAME:MAX:WEIGHT[:SCORED].",
            error_code="INVALID_ASSESSMENT_SPEC",
        )

    name = parts[0]
    if not name:
        raise EmptyNameError("Assessment")

    scored_raw = parts[3] if len(parts) == 4 else ""
    if scored_raw == "-":
        scored_raw = ""

    return {
        "name": name,
        "max_marks": parse_number(parts[1]),
        "weight_percent": parse_number(parts[2]),
        "scored_marks": parse_optional_number(scored_raw),
    }
