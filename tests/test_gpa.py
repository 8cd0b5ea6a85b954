import unittest

from gpacalc.core.gpa import (
    AggregateResult,
    InsufficientDataError,
    calculate_gpa,
    compute_aggregate,
    format_gpa,
    reset_state,
)


class AggregateTests(unittest.TestCase):
    def test_two_valid_courses(self):
        result = compute_aggregate(["3", "4", "", "", ""], ["A", "B", "", "", ""])
        self.assertEqual(result, AggregateResult(total_credits=7, weighted_points=24.0, contributing_count=2))

    def test_zero_hours_excluded(self):
        result = compute_aggregate(["0", "5", "", "", ""], ["A", "C", "", "", ""])
        self.assertEqual(result.contributing_count, 1)
        self.assertEqual(result.total_credits, 5)
        self.assertAlmostEqual(result.weighted_points, 10.0)

    def test_pair_needs_both_parts(self):
        result = compute_aggregate(["3", "", "2", "x", "4"], ["", "B", "Q", "A", "d"])
        self.assertEqual(result, AggregateResult(total_credits=4, weighted_points=4.0, contributing_count=1))

    def test_oversized_hours_excluded(self):
        result = compute_aggregate(["9" * 400, "3", "", "", ""], ["A", "B", "", "", ""])
        self.assertEqual(result, AggregateResult(total_credits=3, weighted_points=9.0, contributing_count=1))

    def test_idempotent(self):
        credits = ["3", "4", "2", "", "1"]
        grades = ["A", "B", "C", "", "F"]
        self.assertEqual(compute_aggregate(credits, grades), compute_aggregate(credits, grades))

    def test_length_mismatch(self):
        with self.assertRaises(ValueError):
            compute_aggregate(["3", "4"], ["A", "B"])

    def test_empty_form(self):
        result = compute_aggregate([""] * 5, [""] * 5)
        self.assertEqual(result, AggregateResult())


class CalculateGPATests(unittest.TestCase):
    def test_weighted_average(self):
        credits = ["3", "4", "", "", ""]
        grades = ["A", "B", "", "", ""]
        result = calculate_gpa(credits, grades)
        self.assertEqual(result.formatted, "3.43")
        self.assertAlmostEqual(result.value, 24 / 7)
        self.assertEqual(credits, ["3", "4", "", "", ""])
        self.assertEqual(grades, ["A", "B", "", "", ""])

    def test_all_grades(self):
        result = calculate_gpa(["2"] * 5, ["A", "B", "C", "D", "F"])
        self.assertEqual(result.aggregate.total_credits, 10)
        self.assertAlmostEqual(result.aggregate.weighted_points, 20.0)
        self.assertEqual(result.formatted, "2.00")

    def test_single_course_is_insufficient(self):
        with self.assertRaises(InsufficientDataError) as ctx:
            calculate_gpa(["3", "", "", "", ""], ["A", "", "", "", ""])
        self.assertEqual(ctx.exception.aggregate.contributing_count, 1)
        self.assertIn("at least 2", str(ctx.exception))

    def test_zero_hour_course_is_insufficient(self):
        with self.assertRaises(InsufficientDataError):
            calculate_gpa(["0", "5", "", "", ""], ["A", "C", "", "", ""])

    def test_all_f_grades(self):
        self.assertEqual(calculate_gpa(["3", "3", "", "", ""], ["F", "F", "", "", ""]).formatted, "0.00")


class FormatTests(unittest.TestCase):
    def test_two_places(self):
        self.assertEqual(format_gpa(4.0), "4.00")
        self.assertEqual(format_gpa(3.5), "3.50")
        self.assertEqual(format_gpa(2.0 / 3.0), "0.67")

    def test_half_up(self):
        self.assertEqual(format_gpa(2.675), "2.68")
        self.assertEqual(format_gpa(3.125), "3.13")


class ResetStateTests(unittest.TestCase):
    def test_covers_every_slot(self):
        spec = reset_state()
        self.assertEqual(spec.credit_slots, (1, 2, 3, 4, 5))
        self.assertEqual(spec.grade_slots, (1, 2, 3, 4, 5))
        self.assertTrue(spec.clear_output)


if __name__ == "__main__":
    unittest.main()
