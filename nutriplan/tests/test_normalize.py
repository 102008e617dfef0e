import copy
import unittest

from nutriplan.meal_plans.normalize import (
    MEAL_KEYS, PlanShape, classify_payload, ensure_array, normalize_plan,
)

DAY = {
    "day": "Day 1",
    "calories": 1800,
    "meals": {
        "breakfast": ["Arroz caldo"],
        "lunch": ["Chicken tinola", "Brown rice"],
        "dinner": ["Grilled bangus"],
        "snacks": ["Saba banana"],
    },
}


class TestClassifyPayload(unittest.TestCase):

    def test_shapes_in_order(self):
        self.assertIs(classify_payload({"days": []}), PlanShape.DAYS_OBJECT)
        self.assertIs(classify_payload({"plan": {"days": []}}), PlanShape.NESTED_PLAN)
        self.assertIs(classify_payload([DAY]), PlanShape.DAY_LIST)
        self.assertIs(classify_payload(DAY), PlanShape.SINGLE_DAY)
        self.assertIs(classify_payload(None), PlanShape.EMPTY)
        self.assertIs(classify_payload("Day 1"), PlanShape.EMPTY)
        self.assertIs(classify_payload(42), PlanShape.EMPTY)

    def test_days_that_is_not_a_list_is_a_single_day(self):
        self.assertIs(classify_payload({"days": "Day 1"}), PlanShape.SINGLE_DAY)
        self.assertIs(classify_payload({"plan": {"days": None}}), PlanShape.SINGLE_DAY)


class TestEnsureArray(unittest.TestCase):

    def test_falsy_values(self):
        for value in (None, "", [], 0, False):
            self.assertEqual(ensure_array(value), [])

    def test_list_drops_blank_entries(self):
        self.assertEqual(ensure_array(["Tapsilog", "  ", "", None, " Lugaw "]), ["Tapsilog", "Lugaw"])

    def test_string_splits_on_newlines(self):
        self.assertEqual(ensure_array("Pandesal\n\n Egg \n"), ["Pandesal", "Egg"])

    def test_string_splits_on_commas_inside_prose(self):
        # Sentences with commas become separate items; kept for compatibility.
        self.assertEqual(ensure_array("Rice, egg, and coffee"), ["Rice", "egg", "and coffee"])

    def test_scalar_is_wrapped(self):
        self.assertEqual(ensure_array(3), ["3"])


class TestNormalizePlan(unittest.TestCase):

    def test_placeholder_for_non_object_entries(self):
        plan = normalize_plan([None, "oops"])
        self.assertEqual(plan[0], {"day": "Day 1", "calories": None, "meals": {k: [] for k in MEAL_KEYS}})
        self.assertEqual(plan[1]["day"], "Day 2")

    def test_top_level_meal_keys(self):
        plan = normalize_plan([{"day": "Monday", "breakfast": "Champorado", "dinner": ["Laing"]}])
        self.assertEqual(plan[0]["day"], "Monday")
        self.assertEqual(plan[0]["meals"]["breakfast"], ["Champorado"])
        self.assertEqual(plan[0]["meals"]["dinner"], ["Laing"])
        self.assertEqual(plan[0]["meals"]["lunch"], [])
        self.assertEqual(plan[0]["meals"]["snacks"], [])

    def test_missing_title_uses_index(self):
        plan = normalize_plan({"days": [{"meals": {}}, {"day": "  "}]})
        self.assertEqual([d["day"] for d in plan], ["Day 1", "Day 2"])

    def test_every_day_has_four_list_keys(self):
        plan = normalize_plan({"days": [{"meals": {"lunch": None, "extra": ["x"]}}, 7, {"meals": "rice"}]})
        for day in plan:
            self.assertEqual(sorted(day["meals"]), sorted(MEAL_KEYS))
            for items in day["meals"].values():
                self.assertIsInstance(items, list)

    def test_shapes_agree_except_count(self):
        days = [DAY, dict(DAY, day="Day 2")]
        from_nested = normalize_plan({"plan": {"days": days}})
        from_list = normalize_plan(days)
        from_single = normalize_plan(DAY)
        self.assertEqual(from_nested, from_list)
        self.assertEqual(len(from_list), 2)
        self.assertEqual(from_single, from_list[:1])

    def test_idempotent(self):
        raw = {"days": [DAY, {"breakfast": "Rice, egg"}, None, {"day": 3, "meals": {"snacks": 5}}]}
        once = normalize_plan(raw)
        twice = normalize_plan(copy.deepcopy(once))
        self.assertEqual(once, twice)

    def test_unusable_payloads(self):
        for payload in (None, 12, "plan", True):
            self.assertEqual(normalize_plan(payload), [])
