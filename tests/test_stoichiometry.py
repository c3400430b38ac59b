import math
import unittest

from sciverse.equation import parse_equation
from sciverse.errors import InvalidQuantityError, SubstanceNotFoundError, UnsupportedElementError
from sciverse.models import Quantity, Unit
from sciverse.stoichiometry import calculate_stoichiometry, resolve_quantity
from sciverse.validation import format_amount


class TestResolveQuantity(unittest.TestCase):
    def setUp(self):
        self.water = parse_equation("2H2 + O2 -> 2H2O")

    def test_grams_to_grams(self):
        result = resolve_quantity(self.water, "H2", 4, "grams", "H2O", "grams")
        self.assertEqual(result.unit, Unit.GRAMS)
        self.assertAlmostEqual(result.value, 4 / 2.016 * 18.015, places=9)
        self.assertAlmostEqual(result.value, 35.75, delta=0.01)

    def test_moles_to_moles(self):
        result = resolve_quantity(self.water, "O2", 1.5, Unit.MOLES, "H2O", Unit.MOLES)
        self.assertEqual(result, Quantity(3.0, Unit.MOLES))

    def test_grams_to_moles(self):
        result = resolve_quantity(self.water, "O2", 32.0, "g", "H2", "mol")
        self.assertAlmostEqual(result.value, 2 * 32.0 / 31.998)
        self.assertEqual(result.symbol, "mol")

    def test_substance_not_found(self):
        with self.assertRaises(SubstanceNotFoundError) as ctx:
            resolve_quantity(self.water, "H2", 4, "grams", "CO2", "grams")
        self.assertEqual(ctx.exception.substance, "CO2")
        with self.assertRaises(SubstanceNotFoundError):
            resolve_quantity(self.water, "N2", 4, "grams", "H2O", "grams")

    def test_non_positive_quantity(self):
        for amount in [0, -2.5, "abc", float("nan"), math.inf]:
            with self.subTest(amount=amount):
                with self.assertRaises(InvalidQuantityError):
                    resolve_quantity(self.water, "H2", amount, "grams", "H2O", "grams")

    def test_quantity_checked_before_lookup(self):
        with self.assertRaises(InvalidQuantityError):
            resolve_quantity(self.water, "N2", 0, "grams", "CO2", "grams")

    def test_unknown_unit(self):
        with self.assertRaises(InvalidQuantityError):
            resolve_quantity(self.water, "H2", 4, "pounds", "H2O", "grams")

    def test_unsupported_element_needs_mass(self):
        equation = parse_equation("Xx + O2 -> XxO2")
        with self.assertRaises(UnsupportedElementError):
            resolve_quantity(equation, "Xx", 1, "grams", "XxO2", "moles")
        # Pure mole ratios never need a molar mass.
        result = resolve_quantity(equation, "Xx", 1, "moles", "XxO2", "moles")
        self.assertAlmostEqual(result.value, 1.0)


class TestCalculateStoichiometry(unittest.TestCase):
    def test_balances_first(self):
        result = calculate_stoichiometry("H2 + O2 -> H2O", "O2", 1, "moles", "H2O", "moles")
        self.assertEqual(result.equation, "2H2 + O2 -> 2H2O")
        self.assertAlmostEqual(result.quantity.value, 2.0)
        self.assertEqual(result.describe(), "2 mol of H2O")

    def test_unbalanced_without_balancing(self):
        result = calculate_stoichiometry("H2 + O2 -> H2O", "O2", 1, "moles", "H2O", "moles", balance=False)
        self.assertAlmostEqual(result.quantity.value, 1.0)

    def test_describe_grams(self):
        result = calculate_stoichiometry("2H2 + O2 -> 2H2O", " H2 ", "4", "grams", "H2O ", "grams")
        self.assertEqual(result.target, "H2O")
        self.assertEqual(result.describe(), "35.74405 g of H2O")


class TestFormatAmount(unittest.TestCase):
    def test_strips_trailing_zeros(self):
        self.assertEqual(format_amount(2.0), "2")
        self.assertEqual(format_amount(0.5), "0.5")
        self.assertEqual(format_amount(35.744047619), "35.74405")
        self.assertEqual(format_amount(18.015, 4), "18.015")


if __name__ == '__main__':
    unittest.main()
