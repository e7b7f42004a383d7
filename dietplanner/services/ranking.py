from enum import Enum
from typing import AbstractSet, Dict, Iterable, List, Optional, Tuple

from ..models import CategoryOption, RestrictionFlags
from .catalog import Category


class OptionList(Enum):
    """Every candidate list a meal can draw from, one per slot/category/restriction variant."""
    BREAKFAST_PROTEIN = "breakfast-protein"
    BREAKFAST_PROTEIN_VEGETARIAN = "breakfast-protein-vegetarian"
    BREAKFAST_CARB = "breakfast-carb"
    BREAKFAST_CARB_GLUTEN_FREE = "breakfast-carb-gluten-free"
    LUNCH_PROTEIN = "lunch-protein"
    LUNCH_PROTEIN_VEGETARIAN = "lunch-protein-vegetarian"
    LUNCH_CARB = "lunch-carb"
    LUNCH_CARB_GLUTEN_FREE = "lunch-carb-gluten-free"
    DINNER_PROTEIN = "dinner-protein"
    DINNER_PROTEIN_VEGETARIAN = "dinner-protein-vegetarian"
    FRUIT = "fruit"
    VEGETABLE = "vegetable"
    SWEET = "sweet"


# -----------------------------
# Candidate lists, in declaration (default) order.
# Each item: (catalog food id, display text)
# -----------------------------
OPTION_TABLES: Dict[OptionList, Tuple[Tuple[str, str], ...]] = {
    OptionList.BREAKFAST_PROTEIN: (
        ("eggs", "2 scrambled eggs"),
        ("turkey", "2 slices of turkey breast"),
        ("chicken", "3 tbsp shredded chicken"),
        ("fish", "3 tbsp canned tuna"),
        ("eggs", "2 boiled eggs"),
    ),
    OptionList.BREAKFAST_PROTEIN_VEGETARIAN: (
        ("eggs", "2 scrambled eggs"),
        ("tofu", "3 tbsp scrambled tofu"),
        ("eggs", "2 boiled eggs"),
        ("chickpeas", "2 tbsp hummus"),
        ("lentils", "2 tbsp lentil pâté"),
    ),
    OptionList.BREAKFAST_CARB: (
        ("whole-grain-bread", "2 slices of whole-grain bread"),
        ("tapioca", "1 medium tapioca crepe"),
        ("oats", "3 tbsp rolled oats"),
        ("couscous", "3 tbsp corn couscous"),
        ("sweet-potato", "1 small boiled sweet potato"),
    ),
    OptionList.BREAKFAST_CARB_GLUTEN_FREE: (
        ("whole-grain-bread", "2 slices of gluten-free bread"),
        ("tapioca", "1 medium tapioca crepe"),
        ("couscous", "3 tbsp corn couscous"),
        ("sweet-potato", "1 small boiled sweet potato"),
        ("quinoa", "2 tbsp quinoa flakes"),
    ),
    OptionList.LUNCH_PROTEIN: (
        ("chicken", "150g grilled chicken"),
        ("fish", "150g baked fish"),
        ("beef", "120g lean beef"),
        ("turkey", "150g roasted turkey breast"),
        ("eggs", "2 boiled eggs"),
    ),
    OptionList.LUNCH_PROTEIN_VEGETARIAN: (
        ("chickpeas", "150g sautéed chickpeas"),
        ("lentils", "150g lentils"),
        ("tofu", "2 eggs + 100g tofu"),
        ("eggs", "2-egg omelette"),
    ),
    OptionList.LUNCH_CARB: (
        ("brown-rice", "4 tbsp brown rice"),
        ("whole-wheat-pasta", "3 tbsp whole-wheat pasta"),
        ("sweet-potato", "1 medium sweet potato"),
        ("quinoa", "3 tbsp quinoa"),
        ("couscous", "3 tbsp corn couscous"),
    ),
    OptionList.LUNCH_CARB_GLUTEN_FREE: (
        ("brown-rice", "4 tbsp brown rice"),
        ("quinoa", "3 tbsp quinoa"),
        ("sweet-potato", "1 medium sweet potato"),
        ("couscous", "3 tbsp corn couscous"),
    ),
    OptionList.DINNER_PROTEIN: (
        ("fish", "150g grilled fish"),
        ("chicken", "120g shredded chicken"),
        ("eggs", "2 scrambled eggs"),
        ("turkey", "120g turkey breast"),
        ("beef", "100g lean ground beef"),
    ),
    OptionList.DINNER_PROTEIN_VEGETARIAN: (
        ("eggs", "2-egg omelette with vegetables"),
        ("tofu", "150g grilled tofu"),
        ("lentils", "1 lentil burger"),
        ("chickpeas", "4 baked falafel"),
    ),
    OptionList.FRUIT: (
        ("banana", "1 banana"),
        ("apple", "1 apple"),
        ("papaya", "1 slice of papaya"),
        ("orange", "1 orange"),
        ("strawberry", "10 strawberries"),
        ("melon", "1 slice of melon"),
        ("grapes", "1 small bunch of grapes"),
        ("avocado", "2 tbsp avocado"),
    ),
    OptionList.VEGETABLE: (
        ("broccoli", "broccoli"),
        ("carrot", "carrot"),
        ("zucchini", "zucchini"),
        ("spinach", "spinach"),
        ("kale", "kale"),
        ("tomato", "tomato"),
        ("cucumber", "cucumber"),
        ("lettuce", "lettuce"),
    ),
    OptionList.SWEET: (
        ("dark-chocolate", "2 squares of dark chocolate (70%)"),
        ("acai", "1 small bowl of açaí (150ml)"),
        ("peanut-candy", "1 peanut candy"),
        ("banana-bar", "1 banana sweet bar"),
        ("fruit-sorbet", "1 scoop of fruit sorbet"),
        ("honey", "1 tsp honey over fruit"),
    ),
}


def select_option_list(slot: str, category: Category, flags: RestrictionFlags) -> OptionList:
    """Resolve the active candidate list.

    Protein lists differ for breakfast, dinner and everything else (lunch);
    carb lists differ for breakfast and everything else.
    """
    category = Category(category)
    if category is Category.PROTEIN:
        if slot == "breakfast":
            return OptionList.BREAKFAST_PROTEIN_VEGETARIAN if flags.vegetarian else OptionList.BREAKFAST_PROTEIN
        if slot == "dinner":
            return OptionList.DINNER_PROTEIN_VEGETARIAN if flags.vegetarian else OptionList.DINNER_PROTEIN
        return OptionList.LUNCH_PROTEIN_VEGETARIAN if flags.vegetarian else OptionList.LUNCH_PROTEIN
    if category is Category.CARB:
        if slot == "breakfast":
            return OptionList.BREAKFAST_CARB_GLUTEN_FREE if flags.gluten_free else OptionList.BREAKFAST_CARB
        return OptionList.LUNCH_CARB_GLUTEN_FREE if flags.gluten_free else OptionList.LUNCH_CARB
    if category is Category.VEGETABLE:
        return OptionList.VEGETABLE
    if category is Category.FRUIT:
        return OptionList.FRUIT
    return OptionList.SWEET


def candidate_options(variant: OptionList) -> List[CategoryOption]:
    return [CategoryOption(food_id, text) for food_id, text in OPTION_TABLES[variant]]


def favorites_first(options: Iterable[CategoryOption], favorites: AbstractSet[str]) -> List[CategoryOption]:
    # Two-list partition keeps declaration order inside each tier.
    liked, rest = [], []
    for opt in options:
        (liked if opt.food_id in favorites else rest).append(opt)
    return liked + rest


def rank_category(favorites: Optional[Iterable[str]], flags: RestrictionFlags, category: Category,
                  slot: str = "lunch", limit: Optional[int] = None) -> List[str]:
    """Display texts for one category, favorites first.

    Sweets are filtered rather than reordered: only favorite sweets are offered,
    so no sweet favorites means an empty list.
    """
    favs = frozenset(favorites or ())
    options = candidate_options(select_option_list(slot, category, flags))
    if Category(category) is Category.SWEET:
        ranked = [o for o in options if o.food_id in favs]
    else:
        ranked = favorites_first(options, favs)
    texts = [o.text for o in ranked]
    return texts if limit is None else texts[:limit]
