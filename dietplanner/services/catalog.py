from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..models import FoodCatalogEntry


class Category(str, Enum):
    PROTEIN = "protein"
    CARB = "carb"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    SWEET = "sweet"


# -----------------------------
# Favorite-food catalog shown on the form
# -----------------------------
FOOD_CATALOG: Tuple[FoodCatalogEntry, ...] = (
    # ===== PROTEINS =====
    FoodCatalogEntry("chicken", "Chicken", Category.PROTEIN.value, "🍗"),
    FoodCatalogEntry("fish", "Fish", Category.PROTEIN.value, "🐟"),
    FoodCatalogEntry("beef", "Lean beef", Category.PROTEIN.value, "🥩"),
    FoodCatalogEntry("eggs", "Eggs", Category.PROTEIN.value, "🥚"),
    FoodCatalogEntry("tofu", "Tofu", Category.PROTEIN.value, "🧈"),
    FoodCatalogEntry("lentils", "Lentils", Category.PROTEIN.value, "🫘"),
    FoodCatalogEntry("chickpeas", "Chickpeas", Category.PROTEIN.value, "🧆"),
    FoodCatalogEntry("turkey", "Turkey", Category.PROTEIN.value, "🦃"),
    # ===== CARBS =====
    FoodCatalogEntry("brown-rice", "Brown rice", Category.CARB.value, "🍚"),
    FoodCatalogEntry("sweet-potato", "Sweet potato", Category.CARB.value, "🍠"),
    FoodCatalogEntry("whole-grain-bread", "Whole-grain bread", Category.CARB.value, "🍞"),
    FoodCatalogEntry("oats", "Oats", Category.CARB.value, "🥣"),
    FoodCatalogEntry("tapioca", "Tapioca", Category.CARB.value, "🫓"),
    FoodCatalogEntry("quinoa", "Quinoa", Category.CARB.value, "🌾"),
    FoodCatalogEntry("whole-wheat-pasta", "Whole-wheat pasta", Category.CARB.value, "🍝"),
    FoodCatalogEntry("couscous", "Corn couscous", Category.CARB.value, "🌽"),
    # ===== VEGETABLES =====
    FoodCatalogEntry("broccoli", "Broccoli", Category.VEGETABLE.value, "🥦"),
    FoodCatalogEntry("spinach", "Spinach", Category.VEGETABLE.value, "🥬"),
    FoodCatalogEntry("carrot", "Carrot", Category.VEGETABLE.value, "🥕"),
    FoodCatalogEntry("zucchini", "Zucchini", Category.VEGETABLE.value, "🥒"),
    FoodCatalogEntry("tomato", "Tomato", Category.VEGETABLE.value, "🍅"),
    FoodCatalogEntry("cucumber", "Cucumber", Category.VEGETABLE.value, "🥒"),
    FoodCatalogEntry("kale", "Kale", Category.VEGETABLE.value, "🥬"),
    FoodCatalogEntry("lettuce", "Lettuce", Category.VEGETABLE.value, "🥗"),
    # ===== FRUITS =====
    FoodCatalogEntry("banana", "Banana", Category.FRUIT.value, "🍌"),
    FoodCatalogEntry("apple", "Apple", Category.FRUIT.value, "🍎"),
    FoodCatalogEntry("orange", "Orange", Category.FRUIT.value, "🍊"),
    FoodCatalogEntry("strawberry", "Strawberry", Category.FRUIT.value, "🍓"),
    FoodCatalogEntry("papaya", "Papaya", Category.FRUIT.value, "🥭"),
    FoodCatalogEntry("avocado", "Avocado", Category.FRUIT.value, "🥑"),
    FoodCatalogEntry("melon", "Melon", Category.FRUIT.value, "🍈"),
    FoodCatalogEntry("grapes", "Grapes", Category.FRUIT.value, "🍇"),
    # ===== SWEETS =====
    FoodCatalogEntry("dark-chocolate", "Dark chocolate", Category.SWEET.value, "🍫"),
    FoodCatalogEntry("acai", "Açaí", Category.SWEET.value, "🫐"),
    FoodCatalogEntry("peanut-candy", "Peanut candy", Category.SWEET.value, "🥜"),
    FoodCatalogEntry("banana-bar", "Banana sweet bar", Category.SWEET.value, "🍬"),
    FoodCatalogEntry("fruit-sorbet", "Fruit sorbet", Category.SWEET.value, "🍧"),
    FoodCatalogEntry("honey", "Honey", Category.SWEET.value, "🍯"),
)

_BY_ID: Dict[str, FoodCatalogEntry] = {f.id: f for f in FOOD_CATALOG}


def lookup(food_id: str) -> Optional[FoodCatalogEntry]:
    return _BY_ID.get(food_id)


def known_ids() -> FrozenSet[str]:
    return frozenset(_BY_ID)


def foods_in(category: Category) -> List[FoodCatalogEntry]:
    cat = Category(category).value
    return [f for f in FOOD_CATALOG if f.category == cat]


# -----------------------------
# Substitution guide (equivalent swaps shown under the plan)
# -----------------------------
SUBSTITUTION_GUIDE: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Proteins", ("Grilled chicken", "Baked fish", "Lean beef", "Eggs (2 units)", "Tofu", "Lentils")),
    ("Carbohydrates", ("Brown rice", "Sweet potato", "Quinoa", "Whole-wheat pasta", "Whole-grain bread", "Rolled oats")),
    ("Greens", ("Lettuce", "Arugula", "Spinach", "Broccoli", "Kale", "Watercress", "Chard")),
    ("Fruits", ("1 apple", "1 banana", "1 orange", "1 slice of melon", "10 strawberries", "1 pear", "2 kiwis")),
    ("Dairy", ("Skim milk", "Natural yogurt", "Almond milk", "Cottage cheese", "Ricotta", "Coconut milk")),
)
