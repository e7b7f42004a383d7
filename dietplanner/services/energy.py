import math

from ..models import Energy, UserProfile

ACTIVITY_FACTORS = {"sedentary": 1.2, "light": 1.375, "moderate": 1.55, "intense": 1.725}
DEFAULT_ACTIVITY_FACTOR = 1.2

# Share of TDEE kept per goal (0.75 is a 25% deficit)
GOAL_FACTORS = {"lose-fast": 0.75, "reduce-belly": 0.80, "lose-5kg": 0.85, "maintain": 1.0}
DEFAULT_GOAL_FACTOR = 0.85

DIET_FOCUS = {
    "lose-fast": "Moderate Low Carb",
    "reduce-belly": "Anti-inflammatory",
    "lose-5kg": "Balanced",
    "maintain": "Balanced",
}
DEFAULT_DIET_FOCUS = "Balanced"


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def mifflin_st_jeor(sex: str, age: int, height_cm: float, weight_kg: float) -> int:
    return round_half_up(10*weight_kg + 6.25*height_cm - 5*age + (5 if sex == "male" else -161))


def compute_tdee(bmr: int, activity: str) -> int:
    return round_half_up(bmr * ACTIVITY_FACTORS.get(activity, DEFAULT_ACTIVITY_FACTOR))


def compute_target_calories(tdee: int, goal: str) -> int:
    return round_half_up(tdee * GOAL_FACTORS.get(goal, DEFAULT_GOAL_FACTOR))


def diet_focus(goal: str) -> str:
    return DIET_FOCUS.get(goal, DEFAULT_DIET_FOCUS)


def compute_energy(profile: UserProfile) -> Energy:
    """BMR -> TDEE -> daily target. Unknown activity/goal values fall back to the defaults above."""
    bmr = mifflin_st_jeor(profile.sex, profile.age, profile.height, profile.weight)
    tdee = compute_tdee(bmr, profile.activity_level)
    return Energy(
        bmr=bmr,
        tdee=tdee,
        target_calories=compute_target_calories(tdee, profile.goal),
        diet_focus=diet_focus(profile.goal),
    )
