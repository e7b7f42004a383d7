from dietplanner.models import UserProfile


def make_profile(**overrides) -> UserProfile:
    fields = dict(
        name="Ana Souza",
        age=30,
        sex="male",
        height=180.0,
        weight=80.0,
        goal="lose-fast",
        activity_level="sedentary",
        restrictions=frozenset(),
        favorite_foods=(),
    )
    fields.update(overrides)
    return UserProfile(**fields)


def all_texts(plan):
    """Every primary item and substitute across the day."""
    out = []
    for _, meal in plan.meals:
        for food in meal.foods:
            out.append(food.item)
            out.extend(food.substitutes)
    return out
