from typing import Dict, Optional

COURSE_COUNT = 5

GRADE_POINTS: Dict[str, float] = {
    "A": 4.0,
    "B": 3.0,
    "C": 2.0,
    "D": 1.0,
    "F": 0.0,
}

ALLOWED_GRADES = frozenset(GRADE_POINTS)

# Upper bound for a single slot; larger values are invalid
MAX_CREDIT_HOURS = 999


def grade_to_points(symbol: Optional[str]) -> Optional[float]:
    """
    Map a letter grade to its point value.
    Returns None for a missing, empty or unknown symbol.
    """
    if not symbol:
        return None
    return GRADE_POINTS.get(str(symbol).strip().upper())


def parse_credits(text: Optional[str]) -> Optional[int]:
    """
    Parse digit-only credit hours text ("03" -> 3).
    Signs, decimal points and inner whitespace make the text invalid (None),
    as does a value above MAX_CREDIT_HOURS.
    """
    if text is None:
        return None
    value = str(text).strip()
    # str.isdigit() also accepts superscripts and other unicode digits
    if not value or not (value.isascii() and value.isdigit()):
        return None
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(MAX_CREDIT_HOURS)):
        return None
    hours = int(digits)
    return hours if hours <= MAX_CREDIT_HOURS else None
