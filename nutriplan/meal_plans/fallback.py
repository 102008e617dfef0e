"""Static sample plan shown when live generation is unavailable."""
import copy
from typing import Any, Dict, List

from .calories import hydrate_calories
from .normalize import normalize_plan

# Seven hand-picked Filipino days. Calories are left to hydration so the
# sample follows the caller's goal or calorie target.
FALLBACK_PLAN: Dict[str, List[Dict[str, Any]]] = {
    "days": [
        {
            "day": "Day 1",
            "meals": {
                "breakfast": ["Arroz caldo with malunggay and boiled egg"],
                "lunch": ["Chicken tinola with green papaya", "Brown rice"],
                "dinner": ["Grilled bangus with ensaladang talong"],
                "snacks": ["Boiled saba banana"],
            },
        },
        {
            "day": "Day 2",
            "meals": {
                "breakfast": ["Pandesal with scrambled egg and tomato"],
                "lunch": ["Ginisang monggo with spinach", "Adlai rice"],
                "dinner": ["Chicken adobo sa dilaw with steamed kangkong"],
                "snacks": ["Fresh mango slices"],
            },
        },
        {
            "day": "Day 3",
            "meals": {
                "breakfast": ["Tortang talong with brown rice"],
                "lunch": ["Sinigang na hipon with vegetables"],
                "dinner": ["Pinakbet with grilled tilapia"],
                "snacks": ["Boiled kamote"],
            },
        },
        {
            "day": "Day 4",
            "meals": {
                "breakfast": ["Champorado made with oats and dark cacao"],
                "lunch": ["Chicken inasal breast with atchara", "Brown rice"],
                "dinner": ["Fish paksiw with pechay"],
                "snacks": ["Pineapple chunks"],
            },
        },
        {
            "day": "Day 5",
            "meals": {
                "breakfast": ["Bangsilog with garlic brown rice and egg whites"],
                "lunch": ["Laswa vegetable soup", "Grilled chicken skewers"],
                "dinner": ["Beef nilaga with cabbage and corn"],
                "snacks": ["Fresh buko juice"],
            },
        },
        {
            "day": "Day 6",
            "meals": {
                "breakfast": ["Lugaw with tokwa and spring onions"],
                "lunch": ["Pesang isda with bok choy", "Adlai rice"],
                "dinner": ["Ginataang kalabasa at sitaw with shrimp"],
                "snacks": ["Papaya slices with calamansi"],
            },
        },
        {
            "day": "Day 7",
            "meals": {
                "breakfast": ["Oatmeal with saba banana and peanuts"],
                "lunch": ["Chicken sotanghon soup with vegetables"],
                "dinner": ["Inihaw na pusit with tomato salad"],
                "snacks": ["Steamed corn on the cob"],
            },
        },
    ]
}


def fallback_plan(goal: Any = None, calorie_target: Any = None) -> List[Dict[str, Any]]:
    """The sample plan, normalized and hydrated like a generated one."""
    return hydrate_calories(normalize_plan(copy.deepcopy(FALLBACK_PLAN)), goal, calorie_target)
