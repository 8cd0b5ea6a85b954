import re
from typing import Optional

from gpacalc.core.grades import ALLOWED_GRADES

_NON_DIGITS = re.compile(r"[^0-9]")


def sanitize_credit_text(text: Optional[str]) -> str:
    return _NON_DIGITS.sub("", text or "")


def sanitize_grade_text(text: Optional[str]) -> str:
    symbol = (text or "").upper()[:1]
    return symbol if symbol in ALLOWED_GRADES else ""


def normalize_grade_read(text: Optional[str]) -> str:
    """Trim, upper-case and keep the first character; validity is checked later."""
    return (text or "").strip().upper()[:1]
