from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
import logging
from typing import Sequence, Tuple

from gpacalc.core.grades import COURSE_COUNT, grade_to_points, parse_credits

logger = logging.getLogger(__name__)

MIN_CONTRIBUTING_COURSES = 2
INSUFFICIENT_DATA_MESSAGE = "Please enter at least 2 valid course entries (credit hours and letter grade)."


@dataclass(frozen=True)
class AggregateResult:
    total_credits: int = 0
    weighted_points: float = 0.0
    contributing_count: int = 0


@dataclass(frozen=True)
class GPAResult:
    value: float
    formatted: str
    aggregate: AggregateResult


@dataclass(frozen=True)
class ClearedFieldSpec:
    credit_slots: Tuple[int, ...]
    grade_slots: Tuple[int, ...]
    clear_output: bool = True


class InsufficientDataError(Exception):
    def __init__(self, aggregate: AggregateResult, message: str = INSUFFICIENT_DATA_MESSAGE) -> None:
        super().__init__(message)
        self.aggregate = aggregate


def slot_positions(n: int = COURSE_COUNT) -> Tuple[int, ...]:
    return tuple(range(1, n + 1))


def compute_aggregate(
    credits: Sequence[str],
    grades: Sequence[str],
    n: int = COURSE_COUNT,
) -> AggregateResult:
    """
    credits, grades: parallel sequences of raw slot text, exactly n long.
    A slot counts only when its hours parse to a value > 0 and its grade maps.
    """
    if len(credits) != n or len(grades) != n:
        raise ValueError(f"Expected {n} credit and grade entries, got {len(credits)} and {len(grades)}")

    total_credits = 0
    weighted_points = 0.0
    contributing = 0

    for position, (credit_text, grade_text) in enumerate(zip(credits, grades), start=1):
        hours = parse_credits(credit_text)
        points = grade_to_points(grade_text)
        if hours is None or hours <= 0 or points is None:
            logger.debug("Slot %d excluded (credits=%r, grade=%r)", position, credit_text, grade_text)
            continue
        total_credits += hours
        weighted_points += points * hours
        contributing += 1

    return AggregateResult(
        total_credits=total_credits,
        weighted_points=weighted_points,
        contributing_count=contributing,
    )


def format_gpa(value: float, *, places: int = 2) -> str:
    # Half-up on the shortest decimal repr, so 2.675 renders as 2.68
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_gpa(credits: Sequence[str], grades: Sequence[str]) -> GPAResult:
    """
    GPA = Σ(points * hours) / Σ(hours) over contributing slots.
    Raises InsufficientDataError when fewer than two slots contribute.
    """
    aggregate = compute_aggregate(credits, grades)

    if aggregate.contributing_count < MIN_CONTRIBUTING_COURSES or aggregate.total_credits == 0:
        raise InsufficientDataError(aggregate)

    value = aggregate.weighted_points / aggregate.total_credits
    return GPAResult(value=value, formatted=format_gpa(value), aggregate=aggregate)


def reset_state(n: int = COURSE_COUNT) -> ClearedFieldSpec:
    positions = slot_positions(n)
    return ClearedFieldSpec(credit_slots=positions, grade_slots=positions, clear_output=True)
