from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional, Tuple

SEXES = ("male", "female")
GOALS = ("lose-fast", "reduce-belly", "lose-5kg", "maintain")
ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "intense")
NO_RESTRICTION = "none"
RESTRICTIONS = ("lactose-free", "gluten-free", "vegetarian", "no-sweets")

SLOTS = ("breakfast", "morningSnack", "lunch", "afternoonSnack", "dinner")


@dataclass(frozen=True)
class UserProfile:
    name: str
    age: int
    sex: str
    height: float
    weight: float
    goal: str
    activity_level: str
    restrictions: FrozenSet[str] = frozenset()
    favorite_foods: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RestrictionFlags:
    lactose_free: bool = False
    gluten_free: bool = False
    vegetarian: bool = False
    no_sweets: bool = False

    @classmethod
    def from_restrictions(cls, restrictions: Iterable[str]) -> "RestrictionFlags":
        r = set(restrictions or ())
        return cls(
            lactose_free="lactose-free" in r,
            gluten_free="gluten-free" in r,
            vegetarian="vegetarian" in r,
            no_sweets="no-sweets" in r,
        )


@dataclass(frozen=True)
class FoodCatalogEntry:
    id: str
    label: str
    category: str
    glyph: Optional[str] = None


@dataclass(frozen=True)
class CategoryOption:
    food_id: str
    text: str


@dataclass(frozen=True)
class Energy:
    bmr: int
    tdee: int
    target_calories: int
    diet_focus: str


@dataclass(frozen=True)
class FoodEntry:
    item: str
    portion: str
    substitutes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"item": self.item, "portion": self.portion, "substitutes": list(self.substitutes)}


@dataclass(frozen=True)
class Meal:
    name: str
    foods: Tuple[FoodEntry, ...]
    time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "foods": [f.to_dict() for f in self.foods]}
        if self.time:
            out["time"] = self.time
        return out


@dataclass(frozen=True)
class DailyMeals:
    breakfast: Meal
    morning_snack: Meal
    lunch: Meal
    afternoon_snack: Meal
    dinner: Meal

    def __iter__(self) -> Iterator[Tuple[str, Meal]]:
        """Yield (slot, meal) pairs in the order they are eaten."""
        yield "breakfast", self.breakfast
        yield "morningSnack", self.morning_snack
        yield "lunch", self.lunch
        yield "afternoonSnack", self.afternoon_snack
        yield "dinner", self.dinner

    def to_dict(self) -> Dict[str, Any]:
        return {slot: meal.to_dict() for slot, meal in self}


@dataclass(frozen=True)
class DietPlan:
    bmr: int
    tdee: int
    target_calories: int
    diet_focus: str
    meals: DailyMeals
    meals_per_day: int = 5
    favorite_foods: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def deficit(self) -> int:
        return self.tdee - self.target_calories

    def to_dict(self) -> Dict[str, Any]:
        """Flattened snapshot of the plan, as stored alongside the user's saved diets."""
        return {
            "bmr": self.bmr,
            "tdee": self.tdee,
            "targetCalories": self.target_calories,
            "dietFocus": self.diet_focus,
            "mealsPerDay": self.meals_per_day,
            "meals": self.meals.to_dict(),
            "favoriteFoods": list(self.favorite_foods),
        }
