import unittest

from nutriplan.utils.nutrition import bmi_status, calculate_bmi, goal_from_status, suggestions_for_status


class TestBmi(unittest.TestCase):

    def test_calculate(self):
        self.assertEqual(calculate_bmi(170, 65), 22.49)
        with self.assertRaises(ValueError):
            calculate_bmi(-1, 60)

    def test_calculate_rejects_non_finite(self):
        for height, weight in ((float("nan"), 70), (float("inf"), 70), (170, float("nan")), (1e-300, 1e300)):
            with self.assertRaises(ValueError):
                calculate_bmi(height, weight)

    def test_status_bands(self):
        self.assertEqual(bmi_status(18.4), "Underweight")
        self.assertEqual(bmi_status(18.5), "Normal")
        self.assertEqual(bmi_status(24.99), "Normal")
        self.assertEqual(bmi_status(25), "Overweight")
        self.assertEqual(bmi_status(30), "Obese")

    def test_goal_from_status(self):
        self.assertEqual(goal_from_status("Underweight"), "gain")
        self.assertEqual(goal_from_status("Normal"), "maintain")
        self.assertEqual(goal_from_status("Overweight"), "lose")
        self.assertEqual(goal_from_status("Obese"), "lose")
        self.assertEqual(goal_from_status(""), "")

    def test_suggestions(self):
        meals, exercise = suggestions_for_status("Normal")
        self.assertIn("Stay hydrated", meals)
        self.assertIn("Brisk walking", exercise)
        self.assertEqual(suggestions_for_status("Unknown"), ([], []))
