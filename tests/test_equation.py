import unittest

from sciverse.equation import format_equation, parse_equation
from sciverse.errors import EquationFormatError


class TestParseEquation(unittest.TestCase):
    def test_coefficients(self):
        parsed = parse_equation("2H2 + O2 -> 2H2O")
        self.assertEqual(dict(parsed.reactants), {"H2": 2, "O2": 1})
        self.assertEqual(dict(parsed.products), {"H2O": 2})

    def test_spacing_and_groups(self):
        parsed = parse_equation("Ca(OH)2+2 HCl->CaCl2 + 2H2O")
        self.assertEqual(dict(parsed.reactants), {"Ca(OH)2": 1, "HCl": 2})
        self.assertEqual(dict(parsed.products), {"CaCl2": 1, "H2O": 2})

    def test_combined_coefficients_and_substances(self):
        parsed = parse_equation("N2 + 3H2 -> 2NH3")
        self.assertEqual(parsed.coefficients(), {"N2": 1, "H2": 3, "NH3": 2})
        self.assertEqual(parsed.substances(), ["N2", "H2", "NH3"])

    def test_format_round_trip(self):
        self.assertEqual(format_equation(parse_equation("2H2+O2->2H2O")), "2H2 + O2 -> 2H2O")

    def test_arrow_count(self):
        for equation in ["H2 + O2 = H2O", "H2 -> O2 -> H2O"]:
            with self.subTest(equation=equation):
                with self.assertRaises(EquationFormatError):
                    parse_equation(equation)

    def test_bad_terms(self):
        for equation in ["", "-> H2O", "H2 + O2 ->", "H2 + + O2 -> H2O", "0H2 -> H2", "2 -> H2", "h2 -> H2", "H2 + H2 -> H4"]:
            with self.subTest(equation=equation):
                with self.assertRaises(EquationFormatError):
                    parse_equation(equation)

    def test_duplicate_message(self):
        with self.assertRaises(EquationFormatError) as ctx:
            parse_equation("H2 + 2H2 -> H4")
        self.assertIn("H2 appears multiple times", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
