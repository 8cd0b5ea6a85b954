from dataclasses import dataclass, field
from typing import Callable, List, Optional

from gpacalc.core.grades import COURSE_COUNT

SanitizeRule = Callable[[str], str]


def _blank_slots() -> List[str]:
    return [""] * COURSE_COUNT


@dataclass
class FormState:
    """In-memory field adapter. Positions are 1-based like the form labels."""

    credits: List[str] = field(default_factory=_blank_slots)
    grades: List[str] = field(default_factory=_blank_slots)
    output: str = ""
    focused: Optional[int] = None
    credit_rule: Optional[SanitizeRule] = None
    grade_rule: Optional[SanitizeRule] = None

    def read_credit(self, position: int) -> str:
        return self.credits[position - 1]

    def read_grade(self, position: int) -> str:
        return self.grades[position - 1]

    def write_credit(self, position: int, value: str) -> None:
        self.credits[position - 1] = value

    def write_grade(self, position: int, value: str) -> None:
        self.grades[position - 1] = value

    def write_output(self, value: str) -> None:
        self.output = value

    def clear_output(self) -> None:
        self.output = ""

    def focus_credit(self, position: int) -> None:
        self.focused = position

    def bind_sanitizers(self, credit_rule: SanitizeRule, grade_rule: SanitizeRule) -> None:
        self.credit_rule = credit_rule
        self.grade_rule = grade_rule

    def type_credit(self, position: int, value: str) -> None:
        """Simulate a keystroke change, echoing through the bound rule."""
        self.write_credit(position, self.credit_rule(value) if self.credit_rule else value)

    def type_grade(self, position: int, value: str) -> None:
        self.write_grade(position, self.grade_rule(value) if self.grade_rule else value)

    @property
    def is_cleared(self) -> bool:
        return not any(self.credits) and not any(self.grades) and not self.output
