from typing import Dict, Iterable, List

from ..models import DietPlan, RestrictionFlags
from .catalog import Category, lookup

MEAT_IDS = frozenset({"chicken", "fish", "beef", "turkey"})
GLUTEN_IDS = frozenset({"whole-grain-bread", "oats", "whole-wheat-pasta"})

VEGETABLES = ["Lettuce (2 heads)", "Tomatoes (500g)", "Cucumbers (3 units)", "Broccoli (2 bunches)",
              "Carrots (500g)", "Zucchini (3 units)", "Kale (1 bunch)"]
FRUITS = ["Bananas (1 bunch)", "Apples (6 units)", "Oranges (6 units)", "Papaya (1 unit)",
          "Lemons (6 units)", "Strawberries (1 tray)"]


def _proteins(flags: RestrictionFlags) -> List[str]:
    if flags.vegetarian:
        return ["Eggs (2 dozen)", "Tofu (500g)", "Chickpeas (500g)", "Beans (500g)", "Lentils (500g)"]
    return ["Chicken breast (1kg)", "Eggs (2 dozen)", "Fish fillet, tilapia or similar (500g)",
            "Lean beef (500g)", "Beans (500g)", "Lentils (500g)"]


def _carbs(flags: RestrictionFlags) -> List[str]:
    if flags.gluten_free:
        return ["Brown rice (1kg)", "Gluten-free bread (1 pack)", "Sweet potatoes (1kg)",
                "Tapioca flour (500g)", "Quinoa (500g)"]
    return ["Brown rice (1kg)", "Whole-grain bread (1 pack)", "Sweet potatoes (1kg)",
            "Rolled oats (500g)", "Whole-wheat pasta (500g)"]


def _dairy(flags: RestrictionFlags) -> List[str]:
    if flags.lactose_free:
        return ["Almond milk (1L)", "Lactose-free yogurt (4 units)", "Lactose-free cheese (200g)"]
    return ["Skim milk (2L)", "Natural yogurt (4 units)", "White cheese (200g)", "Ricotta (200g)"]


def _favorites(favorites: Iterable[str], flags: RestrictionFlags) -> List[str]:
    out, seen = [], set()
    for food_id in favorites:
        food = lookup(food_id)
        if food is None or food_id in seen:
            continue
        if flags.vegetarian and food_id in MEAT_IDS:
            continue
        if flags.gluten_free and food_id in GLUTEN_IDS:
            continue
        if flags.no_sweets and food.category == Category.SWEET.value:
            continue
        seen.add(food_id)
        out.append(food.label)
    return out


def build_shopping_list(plan: DietPlan, flags: RestrictionFlags) -> Dict[str, List[str]]:
    """Weekly buying guide. Section order is display order."""
    sections: Dict[str, List[str]] = {}
    favs = _favorites(plan.favorite_foods, flags)
    if favs:
        sections["Your favorites"] = favs
    sections["Proteins"] = _proteins(flags)
    sections["Carbohydrates"] = _carbs(flags)
    sections["Vegetables & Greens"] = list(VEGETABLES)
    sections["Fruits"] = list(FRUITS)
    sections["Dairy"] = _dairy(flags)
    return sections
