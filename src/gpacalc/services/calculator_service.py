import logging
from typing import Callable, List, Protocol, Tuple

from gpacalc.core.gpa import GPAResult, InsufficientDataError, calculate_gpa, reset_state, slot_positions
from gpacalc.core.grades import COURSE_COUNT
from gpacalc.core.sanitize import normalize_grade_read, sanitize_credit_text, sanitize_grade_text

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


class FieldAdapter(Protocol):
    def read_credit(self, position: int) -> str: ...

    def read_grade(self, position: int) -> str: ...

    def write_credit(self, position: int, value: str) -> None: ...

    def write_grade(self, position: int, value: str) -> None: ...

    def write_output(self, value: str) -> None: ...

    def clear_output(self) -> None: ...

    def focus_credit(self, position: int) -> None: ...

    def bind_sanitizers(self, credit_rule: Callable[[str], str], grade_rule: Callable[[str], str]) -> None: ...


class GPACalculatorService:
    def __init__(self, fields: FieldAdapter, notify: Notifier, course_count: int = COURSE_COUNT) -> None:
        self.fields = fields
        self.notify = notify
        self.course_count = course_count

    def read_course_inputs(self) -> Tuple[List[str], List[str]]:
        credits: List[str] = []
        grades: List[str] = []
        for position in slot_positions(self.course_count):
            credits.append((self.fields.read_credit(position) or "").strip())
            grades.append(normalize_grade_read(self.fields.read_grade(position)))
        return credits, grades

    def calculate_gpa(self) -> GPAResult | None:
        credits, grades = self.read_course_inputs()
        try:
            result = calculate_gpa(credits, grades)
        except InsufficientDataError as exc:
            logger.warning(
                "Insufficient data: %d contributing course(s), %d credit(s)",
                exc.aggregate.contributing_count,
                exc.aggregate.total_credits,
            )
            self.fields.clear_output()
            self.notify(str(exc))
            return None

        logger.info(
            "GPA %s over %d course(s), %d credit(s)",
            result.formatted,
            result.aggregate.contributing_count,
            result.aggregate.total_credits,
        )
        self.fields.write_output(result.formatted)
        return result

    def reset_gpa(self) -> None:
        spec = reset_state(self.course_count)
        for position in spec.credit_slots:
            self.fields.write_credit(position, "")
        for position in spec.grade_slots:
            self.fields.write_grade(position, "")
        if spec.clear_output:
            self.fields.clear_output()
        self.focus_first_credit_field()

    def install_input_sanitizers(self) -> None:
        self.fields.bind_sanitizers(sanitize_credit_text, sanitize_grade_text)

    def focus_first_credit_field(self) -> None:
        self.fields.focus_credit(1)
