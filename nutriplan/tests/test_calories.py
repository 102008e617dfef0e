import math
import unittest
import pytest

from nutriplan.meal_plans.calories import coerce_calories, default_calories, goal_default, hydrate_calories


@pytest.mark.parametrize("value,expected", [
    (1850, 1850),
    (1849.6, 1850),
    ("2100", 2100),
    ("1,800", 1800),
    ("1800 kcal", 1800),
    ("approx. 2,050.4 kcal/day", 2050),
])
def test_coerce_calories_reads_numbers(value, expected):
    assert coerce_calories(value, 1900) == expected


@pytest.mark.parametrize("value", [
    None, "", "lots", 0, -500, float("nan"), float("inf"), "0", "0.3 kcal", True, [], {},
    10 ** 400, -(10 ** 400), "9" * 400,
])
def test_coerce_calories_falls_back(value):
    assert coerce_calories(value, 1700) == 1700


def test_coerce_calories_without_fallback_returns_none():
    assert coerce_calories("n/a") is None


class TestGoalDefaults(unittest.TestCase):

    def test_goal_constants(self):
        self.assertEqual(goal_default("gain"), 2200)
        self.assertEqual(goal_default("lose"), 1700)
        self.assertEqual(goal_default("maintain"), 1900)
        self.assertEqual(goal_default(" LOSE "), 1700)
        self.assertEqual(goal_default("bulk"), 1900)
        self.assertEqual(goal_default(None), 1900)

    def test_target_beats_goal(self):
        self.assertEqual(default_calories("gain", "1,600"), 1600)
        self.assertEqual(default_calories("gain", "whatever"), 2200)


class TestHydrateCalories(unittest.TestCase):

    def test_lose_with_formatted_target(self):
        days = [{"day": "Day 1"}, {"day": "Day 2", "calories": None}, {"day": "Day 3", "calories": "?"}]
        hydrated = hydrate_calories(days, "lose", "1,800 kcal")
        self.assertEqual([d["calories"] for d in hydrated], [1800, 1800, 1800])

    def test_gain_without_target(self):
        hydrated = hydrate_calories([{"day": "Day 1", "calories": None}], "gain", None)
        self.assertEqual(hydrated[0]["calories"], 2200)

    def test_day_value_wins(self):
        hydrated = hydrate_calories([{"day": "Day 1", "calories": "2,400"}], "lose", "1500")
        self.assertEqual(hydrated[0]["calories"], 2400)

    def test_valid_values_unchanged(self):
        days = [{"day": f"Day {i}", "calories": 1500 + i * 100} for i in range(1, 8)]
        self.assertEqual(hydrate_calories(days, "maintain"), days)

    def test_days_object_keeps_shape(self):
        plan = {"days": [{"day": "Day 1"}], "note": "x"}
        hydrated = hydrate_calories(plan, "maintain")
        self.assertEqual(hydrated, {"days": [{"day": "Day 1", "calories": 1900}], "note": "x"})

    def test_does_not_mutate_input(self):
        days = [{"day": "Day 1"}]
        hydrate_calories(days, "gain")
        self.assertNotIn("calories", days[0])

    def test_odd_inputs_never_raise(self):
        self.assertIsNone(hydrate_calories(None))
        self.assertEqual(hydrate_calories("plan"), "plan")
        self.assertEqual(hydrate_calories([None, 3]), [None, 3])
        huge = hydrate_calories([{"day": "Day 1", "calories": 10 ** 400}], "gain")
        self.assertEqual(huge[0]["calories"], 2200)

    def test_result_is_always_positive_int(self):
        for value in (None, "", "abc", -1, 0, float("nan"), "1,234.5", 3999.5):
            cal = hydrate_calories([{"calories": value}], "maintain")[0]["calories"]
            self.assertIsInstance(cal, int)
            self.assertGreater(cal, 0)
            self.assertFalse(math.isnan(cal))
