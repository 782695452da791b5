import unittest
from postpartum.logic.program.phase import classify
from postpartum.utilities.constants import PHASES


class TestPhaseClassifier(unittest.TestCase):

    def test_bands_and_inclusive_boundaries(self):
        self.assertEqual(classify(1).number, 1)
        self.assertEqual(classify(7).number, 1)
        self.assertEqual(classify(8).number, 2)
        self.assertEqual(classify(14).number, 2)
        self.assertEqual(classify(15).number, 3)
        self.assertEqual(classify(30).number, 3)

    def test_total_over_out_of_range_days(self):
        self.assertEqual(classify(-5).number, 1)
        self.assertEqual(classify(0).number, 1)
        self.assertEqual(classify(99).number, 3)

    def test_names_come_from_the_fixed_set(self):
        names = {p["name"] for p in PHASES.values()}
        for day in range(-3, 40):
            phase = classify(day)
            self.assertIn(phase.name, names)
            self.assertEqual(phase.focus, PHASES[phase.number]["focus"])

    def test_monotone_non_decreasing(self):
        numbers = [classify(day).number for day in range(-10, 45)]
        self.assertEqual(numbers, sorted(numbers))
