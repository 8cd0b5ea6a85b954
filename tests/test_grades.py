import unittest

from gpacalc.core.grades import grade_to_points, parse_credits


class GradeMappingTests(unittest.TestCase):
    def test_letters_case_insensitive(self):
        self.assertEqual(grade_to_points("a"), 4.0)
        self.assertEqual(grade_to_points("A"), 4.0)
        self.assertEqual(grade_to_points(" c "), 2.0)
        self.assertEqual(grade_to_points("F"), 0.0)

    def test_invalid_symbols(self):
        self.assertIsNone(grade_to_points(""))
        self.assertIsNone(grade_to_points(None))
        self.assertIsNone(grade_to_points("Z"))
        self.assertIsNone(grade_to_points("E"))
        self.assertIsNone(grade_to_points("AB"))


class CreditParsingTests(unittest.TestCase):
    def test_digit_text(self):
        self.assertEqual(parse_credits("03"), 3)
        self.assertEqual(parse_credits(" 4 "), 4)
        self.assertEqual(parse_credits("0"), 0)

    def test_invalid_text(self):
        for text in ("3.0", "-3", "+3", "", "   ", "3 4", "three", "²", None):
            with self.subTest(text=text):
                self.assertIsNone(parse_credits(text))

    def test_oversized_text_is_invalid(self):
        self.assertIsNone(parse_credits("1" * 5000))
        self.assertIsNone(parse_credits("9" * 400))
        self.assertIsNone(parse_credits("1000"))

    def test_leading_zeros_within_bound(self):
        self.assertEqual(parse_credits("999"), 999)
        self.assertEqual(parse_credits("0" * 5000 + "12"), 12)


if __name__ == "__main__":
    unittest.main()
