import math
from typing import Any, List, Mapping

from ..errors import ProfileError
from ..models import ACTIVITY_LEVELS, GOALS, NO_RESTRICTION, RESTRICTIONS, SEXES, UserProfile
from .catalog import known_ids

MIN_AGE, MAX_AGE = 16, 100


def _multi(form: Mapping[str, Any], key: str) -> List[str]:
    """Multi-valued field from a werkzeug MultiDict, a list, or a comma-separated string."""
    if hasattr(form, "getlist"):
        raw = form.getlist(key)
    else:
        raw = form.get(key) or []
    if isinstance(raw, str):
        raw = raw.split(",")
    values = []
    for v in raw:
        for part in str(v).split(","):
            part = part.strip()
            if part and part not in values:
                values.append(part)
    return values


def _number(form: Mapping[str, Any], key: str):
    raw = str(form.get(key) or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    # nan, inf and overflowed literals like 1e400
    return value if math.isfinite(value) else None


def parse_profile(form: Mapping[str, Any]) -> UserProfile:
    name = str(form.get("name") or "").strip()
    sex = str(form.get("sex") or "").strip()
    age = _number(form, "age")
    if not name or age is None or not sex:
        raise ProfileError("Please fill in name, age and sex.")
    if sex not in SEXES:
        raise ProfileError("Please select a valid sex.")
    if not age.is_integer():
        raise ProfileError("Age must be a whole number of years.")
    age = int(age)
    if age < MIN_AGE or age > MAX_AGE:
        raise ProfileError(f"Age must be between {MIN_AGE} and {MAX_AGE} years.")

    height = _number(form, "height")
    weight = _number(form, "weight")
    if not height or not weight or height <= 0 or weight <= 0:
        raise ProfileError("Please enter your height and weight.")

    goal = str(form.get("goal") or "").strip()
    if goal not in GOALS:
        raise ProfileError("Please select your goal.")
    activity = str(form.get("activity_level") or "").strip()
    if activity not in ACTIVITY_LEVELS:
        raise ProfileError("Please select your physical activity level.")

    restrictions = [r for r in _multi(form, "restrictions") if r != NO_RESTRICTION]
    unknown = [r for r in restrictions if r not in RESTRICTIONS]
    if unknown:
        raise ProfileError(f"Unknown restriction: {unknown[0]}")

    catalog = known_ids()
    favorites = tuple(f for f in _multi(form, "favorites") if f in catalog)

    return UserProfile(
        name=name,
        age=age,
        sex=sex,
        height=height,
        weight=weight,
        goal=goal,
        activity_level=activity,
        restrictions=frozenset(restrictions),
        favorite_foods=favorites,
    )
