import math
import unittest

from sciverse.calculators import (
    acidity_profile,
    combined_gas,
    dilution,
    empirical_formula,
    first_order,
    half_life,
    ideal_gas,
    molality,
    molarity,
    mole_conversions,
)
from sciverse.constants import PhysicalConstants
from sciverse.errors import InvalidQuantityError, UnsupportedElementError


class TestMoleConversions(unittest.TestCase):
    def test_from_mass(self):
        result = mole_conversions("H2O", mass=18.015)
        self.assertAlmostEqual(result.moles, 1.0)
        self.assertAlmostEqual(result.particles / 6.02214076e23, 1.0)
        self.assertAlmostEqual(result.volume, 22.4)

    def test_from_moles(self):
        result = mole_conversions("H2O", moles=2)
        self.assertAlmostEqual(result.mass, 36.03)
        self.assertAlmostEqual(result.molar_mass, 18.015)

    def test_from_particles_and_volume(self):
        self.assertAlmostEqual(mole_conversions("O2", particles=6.02214076e23).moles, 1.0)
        self.assertAlmostEqual(mole_conversions("O2", volume=11.2).moles, 0.5)

    def test_zero_is_allowed(self):
        self.assertEqual(mole_conversions("O2", mass=0).moles, 0.0)

    def test_injected_constants(self):
        constants = PhysicalConstants(molar_volume_stp=22.711)
        self.assertAlmostEqual(mole_conversions("N2", moles=1, constants=constants).volume, 22.711)

    def test_exactly_one_quantity(self):
        with self.assertRaises(InvalidQuantityError):
            mole_conversions("H2O")
        with self.assertRaises(InvalidQuantityError):
            mole_conversions("H2O", mass=1, moles=1)

    def test_negative(self):
        with self.assertRaises(InvalidQuantityError):
            mole_conversions("H2O", mass=-1)


class TestConcentration(unittest.TestCase):
    def test_molarity_from_moles(self):
        result = molarity(2.0, moles=1.0)
        self.assertAlmostEqual(result.value, 0.5)
        self.assertEqual(result.unit, "mol/L")

    def test_molarity_from_mass(self):
        self.assertAlmostEqual(molarity(0.5, mass=58.44, formula="NaCl").value, 2.0)

    def test_molality(self):
        result = molality(0.5, moles=0.25)
        self.assertAlmostEqual(result.value, 0.5)
        self.assertEqual(result.unit, "mol/kg")

    def test_solute_inputs(self):
        with self.assertRaises(InvalidQuantityError):
            molarity(1.0, mass=10.0)
        with self.assertRaises(InvalidQuantityError):
            molarity(1.0, moles=1.0, mass=10.0, formula="NaCl")
        with self.assertRaises(InvalidQuantityError):
            molarity(0.0, moles=1.0)

    def test_dilution(self):
        result = dilution(m1=2.0, v1=0.5, m2=1.0)
        self.assertEqual(result.name, "V2")
        self.assertAlmostEqual(result.value, 1.0)
        self.assertAlmostEqual(dilution(v1=0.1, m2=0.5, v2=0.2).value, 1.0)

    def test_dilution_needs_three_values(self):
        with self.assertRaises(InvalidQuantityError):
            dilution(m1=1.0, v1=1.0)
        with self.assertRaises(InvalidQuantityError):
            dilution(m1=-1.0, v1=1.0, m2=1.0)


class TestGasLaws(unittest.TestCase):
    def test_ideal_gas_pressure(self):
        result = ideal_gas(volume=22.4, moles=1, temperature=273.15)
        self.assertEqual((result.name, result.unit), ("P", "atm"))
        self.assertAlmostEqual(result.value, 1.0, delta=0.01)

    def test_ideal_gas_temperature(self):
        self.assertAlmostEqual(ideal_gas(pressure=1, volume=0.0821, moles=1).value, 1.0)

    def test_combined_gas(self):
        result = combined_gas(p1=1, v1=2, t1=300, p2=2, t2=300)
        self.assertEqual(result.name, "V2")
        self.assertAlmostEqual(result.value, 1.0)
        self.assertAlmostEqual(combined_gas(p1=1, v1=1, t1=300, p2=2, v2=1).value, 600.0)

    def test_invalid(self):
        with self.assertRaises(InvalidQuantityError):
            ideal_gas(pressure=1, volume=1)
        with self.assertRaises(InvalidQuantityError):
            ideal_gas(pressure=1, volume=1, moles=1, temperature=-5)


class TestAcidity(unittest.TestCase):
    def test_neutral(self):
        profile = acidity_profile(7)
        self.assertAlmostEqual(profile.poh, 7.0)
        self.assertAlmostEqual(profile.hydronium, 1e-7)
        self.assertAlmostEqual(profile.hydroxide, 1e-7)

    def test_from_concentrations(self):
        self.assertAlmostEqual(acidity_profile(1e-3, "H+").ph, 3.0)
        profile = acidity_profile(1e-2, "OH-")
        self.assertAlmostEqual(profile.poh, 2.0)
        self.assertAlmostEqual(profile.ph, 12.0)

    def test_from_poh(self):
        self.assertAlmostEqual(acidity_profile("4", "pOH").ph, 10.0)

    def test_out_of_range(self):
        for value, kind in [(15, "pH"), (-1, "pOH"), (10, "H+"), (0, "OH-"), ("abc", "pH"), (7, "pKa")]:
            with self.subTest(value=value, kind=kind):
                with self.assertRaises(InvalidQuantityError):
                    acidity_profile(value, kind)


class TestEmpiricalFormula(unittest.TestCase):
    def test_glucose(self):
        result = empirical_formula({"C": 40.0, "H": 6.71, "O": 53.29}, molecular_mass=180.156)
        self.assertEqual(result.empirical, "CH2O")
        self.assertAlmostEqual(result.empirical_mass, 30.026)
        self.assertEqual(result.molecular, "C6H12O6")
        self.assertEqual(result.multiplier, 6)

    def test_fractional_ratio(self):
        result = empirical_formula({"Fe": 69.94, "O": 30.06})
        self.assertEqual(result.empirical, "Fe2O3")
        self.assertIsNone(result.molecular)

    def test_molecular_mass_not_a_multiple(self):
        with self.assertLogs("sciverse.calculators.empirical", level="WARNING"):
            result = empirical_formula({"C": 40.0, "H": 6.71, "O": 53.29}, molecular_mass=45.0)
        self.assertEqual(result.empirical, "CH2O")
        self.assertIsNone(result.molecular)

    def test_invalid(self):
        with self.assertRaises(InvalidQuantityError):
            empirical_formula({"C": 40.0, "H": 6.71})
        with self.assertRaises(InvalidQuantityError):
            empirical_formula({})
        with self.assertRaises(UnsupportedElementError):
            empirical_formula({"Xx": 100.0})

    def test_duplicate_symbol_after_strip(self):
        with self.assertRaises(InvalidQuantityError):
            empirical_formula({"C": 50.0, " C": 50.0})


class TestFirstOrder(unittest.TestCase):
    def test_remaining(self):
        result = first_order(initial=1.0, rate_constant=0.1, time=10)
        self.assertAlmostEqual(result.value, math.exp(-1.0))

    def test_initial(self):
        self.assertAlmostEqual(first_order(remaining=math.exp(-1.0), rate_constant=0.1, time=10).value, 1.0)

    def test_rate_constant(self):
        result = first_order(initial=1.0, remaining=0.5, time=math.log(2) / 0.1)
        self.assertEqual(result.unit, "1/s")
        self.assertAlmostEqual(result.value, 0.1)

    def test_time(self):
        self.assertAlmostEqual(first_order(initial=1.0, remaining=0.5, rate_constant=0.1).value, math.log(2) / 0.1)

    def test_half_life(self):
        self.assertAlmostEqual(half_life(0.1).value, 6.931471805599453)

    def test_inconsistent(self):
        with self.assertRaises(InvalidQuantityError):
            first_order(initial=0.5, remaining=1.0, rate_constant=0.1)
        with self.assertRaises(InvalidQuantityError):
            first_order(initial=1.0, remaining=1.0, time=0)
        with self.assertRaises(InvalidQuantityError):
            first_order(initial=1.0, remaining=2.0, time=5)


if __name__ == '__main__':
    unittest.main()
