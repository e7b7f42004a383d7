import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..models import DailyMeals, DietPlan, Energy, FoodEntry, Meal, RestrictionFlags, UserProfile, SLOTS
from .catalog import Category
from .energy import compute_energy
from .ranking import rank_category

logger = logging.getLogger(__name__)

MEALS_PER_DAY = 5
TOP_N = 3

MEAL_NAMES = {
    "breakfast": "Breakfast",
    "morningSnack": "Morning Snack",
    "lunch": "Lunch",
    "afternoonSnack": "Afternoon Snack",
    "dinner": "Dinner",
}
MEAL_TIMES = {
    "breakfast": "07:00",
    "morningSnack": "10:00",
    "lunch": "12:30",
    "afternoonSnack": "16:00",
    "dinner": "19:30",
}

# -----------------------------
# Static (not favorite-ranked) lists
# -----------------------------
DRINKS = ("1 glass of skim milk", "1 glass of fruit smoothie", "1 cup of coffee with milk")
DRINKS_LACTOSE_FREE = ("1 glass of almond milk", "1 glass of fresh juice", "1 cup of black coffee")

DINNER_SIDES = ("2 slices of whole-grain bread", "Vegetable soup", "Salad with whole-grain croutons")
DINNER_SIDES_GLUTEN_FREE = ("Mashed sweet potato", "Roasted vegetables", "Quinoa salad")

# Snack templates take the ranked fruit in the same position.
MORNING_SNACKS = ("{fruit} with 1 natural yogurt", "1 slice of white cheese and {fruit}", "{fruit} blended with skim milk")
MORNING_SNACKS_LACTOSE_FREE = ("{fruit} with 1 handful of nuts (30g)", "Lactose-free yogurt with {fruit}", "{fruit} with 1 tbsp chia seeds")
AFTERNOON_SNACKS = ("1 Greek yogurt with {fruit}", "1 slice of cheese with {fruit}", "{fruit} smoothie with milk")
AFTERNOON_SNACKS_LACTOSE_FREE = ("{fruit} with peanut butter", "{fruit} with 1 handful of almonds", "Dried fruit mix and {fruit}")

NO_SWEETS_MORNING_SNACK = "1 handful of nuts (30g)"
NO_SWEETS_AFTERNOON_SNACK = "1 banana with 1 tbsp peanut butter"
FALLBACK_FRUIT = "1 seasonal fruit"
FALLBACK_SAUTE_VEGETABLE = "onion"
FALLBACK_SALAD_GREEN = "mixed greens"


def _entry(item: str, portion: str, substitutes: Iterable[str] = ()) -> FoodEntry:
    return FoodEntry(item=item, portion=portion, substitutes=tuple(substitutes))


def _from_options(options: Sequence[str], portion: str) -> FoodEntry:
    return _entry(options[0], portion, options[1:])


def pair_text(template: str, options: Sequence[str], fallback: str) -> str:
    """Fill `{first}` and `{second}` from the top two options; a missing second uses `fallback`."""
    first = options[0] if options else fallback
    second = options[1] if len(options) > 1 else fallback
    return template.format(first=first, second=second)


def snack_options(templates: Sequence[str], fruits: Sequence[str]) -> List[str]:
    out = []
    for i, tpl in enumerate(templates):
        fruit = fruits[i] if i < len(fruits) else FALLBACK_FRUIT
        text = tpl.format(fruit=fruit)
        out.append(text[0].upper() + text[1:])
    return out


def _meal(slot: str, foods: List[FoodEntry]) -> Meal:
    return Meal(name=MEAL_NAMES[slot], foods=tuple(foods), time=MEAL_TIMES[slot])


def _breakfast(flags: RestrictionFlags, favorites: Tuple[str, ...]) -> Meal:
    protein = rank_category(favorites, flags, Category.PROTEIN, "breakfast", TOP_N)
    carb = rank_category(favorites, flags, Category.CARB, "breakfast", TOP_N)
    fruit = rank_category(favorites, flags, Category.FRUIT, "breakfast", TOP_N)
    drinks = DRINKS_LACTOSE_FREE if flags.lactose_free else DRINKS
    return _meal("breakfast", [
        _from_options(protein, "1 portion"),
        _from_options(carb, "1 portion"),
        _from_options(fruit, "1 unit"),
        _from_options(drinks, "200ml"),
    ])


def _morning_snack(flags: RestrictionFlags, favorites: Tuple[str, ...]) -> Meal:
    fruit = rank_category(favorites, flags, Category.FRUIT, "morningSnack", TOP_N)
    options = snack_options(MORNING_SNACKS_LACTOSE_FREE if flags.lactose_free else MORNING_SNACKS, fruit)
    primary = NO_SWEETS_MORNING_SNACK if flags.no_sweets else options[0]
    return _meal("morningSnack", [_entry(primary, "1 portion", options[1:])])


def _lunch(flags: RestrictionFlags, favorites: Tuple[str, ...]) -> Meal:
    carb = rank_category(favorites, flags, Category.CARB, "lunch", TOP_N)
    protein = rank_category(favorites, flags, Category.PROTEIN, "lunch", TOP_N)
    veg = rank_category(favorites, flags, Category.VEGETABLE, "lunch", TOP_N)
    foods = [
        _entry("Green salad at will", "at will", ["Mixed leaves", "Tomato and cucumber salad"]),
        _from_options(carb, "4 tbsp"),
        _entry("3 tbsp beans", "3 tbsp", ["Lentils", "Chickpeas"]),
        _from_options(protein, "150g"),
        _entry(pair_text("Sautéed vegetables ({first}, {second})", veg, FALLBACK_SAUTE_VEGETABLE),
               "1 cup", ["Steamed " + v for v in veg[2:]]),
    ]
    if not flags.no_sweets:
        sweets = rank_category(favorites, flags, Category.SWEET, "lunch")
        if sweets:
            foods.append(_from_options(sweets, "1 small portion (dessert)"))
    return _meal("lunch", foods)


def _afternoon_snack(flags: RestrictionFlags, favorites: Tuple[str, ...]) -> Meal:
    fruit = rank_category(favorites, flags, Category.FRUIT, "afternoonSnack", TOP_N)
    options = snack_options(AFTERNOON_SNACKS_LACTOSE_FREE if flags.lactose_free else AFTERNOON_SNACKS, fruit)
    primary = NO_SWEETS_AFTERNOON_SNACK if flags.no_sweets else options[0]
    return _meal("afternoonSnack", [
        _entry(primary, "1 portion", options[1:]),
        _entry("1 cup of green tea", "200ml", ["Coconut water", "Fresh juice"]),
    ])


def _dinner(flags: RestrictionFlags, favorites: Tuple[str, ...]) -> Meal:
    veg = rank_category(favorites, flags, Category.VEGETABLE, "dinner", TOP_N)
    protein = rank_category(favorites, flags, Category.PROTEIN, "dinner", TOP_N)
    sides = DINNER_SIDES_GLUTEN_FREE if flags.gluten_free else DINNER_SIDES
    return _meal("dinner", [
        _entry(pair_text("Green salad with {first} and {second}", veg, FALLBACK_SALAD_GREEN),
               "at will", ["Vegetable soup", "Vegetable broth"]),
        _from_options(protein, "150g"),
        _from_options(sides, "1 portion"),
    ])


_COMPOSERS = {
    "breakfast": _breakfast,
    "morningSnack": _morning_snack,
    "lunch": _lunch,
    "afternoonSnack": _afternoon_snack,
    "dinner": _dinner,
}


def compose_meal(slot: str, energy: Optional[Energy], flags: RestrictionFlags,
                 favorites: Optional[Iterable[str]] = None) -> Meal:
    # Portions are fixed strings; energy is not consulted.
    return _COMPOSERS[slot](flags, tuple(favorites or ()))


def generate_diet(profile: UserProfile) -> DietPlan:
    energy = compute_energy(profile)
    flags = RestrictionFlags.from_restrictions(profile.restrictions)
    favorites = tuple(profile.favorite_foods or ())
    meals = {slot: compose_meal(slot, energy, flags, favorites) for slot in SLOTS}
    logger.debug("diet for %s: bmr=%s tdee=%s target=%s focus=%s flags=%s",
                 profile.name, energy.bmr, energy.tdee, energy.target_calories, energy.diet_focus, flags)
    return DietPlan(
        bmr=energy.bmr,
        tdee=energy.tdee,
        target_calories=energy.target_calories,
        diet_focus=energy.diet_focus,
        meals_per_day=MEALS_PER_DAY,
        meals=DailyMeals(
            breakfast=meals["breakfast"],
            morning_snack=meals["morningSnack"],
            lunch=meals["lunch"],
            afternoon_snack=meals["afternoonSnack"],
            dinner=meals["dinner"],
        ),
        favorite_foods=favorites,
    )
