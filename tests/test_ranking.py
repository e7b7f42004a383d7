import unittest

from dietplanner.models import CategoryOption, RestrictionFlags
from dietplanner.services.catalog import FOOD_CATALOG, Category, foods_in, known_ids, lookup
from dietplanner.services.ranking import (
    OPTION_TABLES, OptionList, favorites_first, rank_category, select_option_list,
)

NONE = RestrictionFlags()


class FavoritesFirstTests(unittest.TestCase):
    def test_single_favorite_moves_to_front_rest_keep_order(self):
        opts = [CategoryOption(x, x.lower()) for x in "ABCDE"]
        ranked = favorites_first(opts, {"C"})
        self.assertEqual([o.food_id for o in ranked], ["C", "A", "B", "D", "E"])

    def test_no_favorites_keeps_declaration_order(self):
        opts = [CategoryOption(x, x) for x in "EDCBA"]
        self.assertEqual([o.food_id for o in favorites_first(opts, set())], list("EDCBA"))

    def test_favorites_keep_relative_order(self):
        opts = [CategoryOption(x, x) for x in "ABCDE"]
        ranked = favorites_first(opts, {"E", "B"})
        self.assertEqual([o.food_id for o in ranked], ["B", "E", "A", "C", "D"])


class RankCategoryTests(unittest.TestCase):
    def test_lunch_protein_with_favorite(self):
        ranked = rank_category(["beef"], NONE, Category.PROTEIN, "lunch", 3)
        self.assertEqual(ranked, ["120g lean beef", "150g grilled chicken", "150g baked fish"])

    def test_missing_favorites_is_declaration_order(self):
        expected = [t for _, t in OPTION_TABLES[OptionList.LUNCH_PROTEIN]]
        self.assertEqual(rank_category(None, NONE, Category.PROTEIN), expected)
        self.assertEqual(rank_category([], NONE, Category.PROTEIN), expected)

    def test_two_favorites_in_declaration_order(self):
        ranked = rank_category(["eggs", "fish"], NONE, Category.PROTEIN, "lunch", 3)
        self.assertEqual(ranked, ["150g baked fish", "2 boiled eggs", "150g grilled chicken"])

    def test_limit(self):
        self.assertEqual(len(rank_category([], NONE, Category.FRUIT, "breakfast", 3)), 3)

    def test_sweets_filtered_to_favorites(self):
        self.assertEqual(rank_category([], NONE, Category.SWEET), [])
        self.assertEqual(rank_category(["banana", "tofu"], NONE, Category.SWEET), [])
        ranked = rank_category(["honey", "acai"], NONE, Category.SWEET)
        self.assertEqual(ranked, ["1 small bowl of açaí (150ml)", "1 tsp honey over fruit"])

    def test_vegetarian_swaps_protein_lists(self):
        veg = RestrictionFlags(vegetarian=True)
        self.assertIs(select_option_list("breakfast", Category.PROTEIN, veg), OptionList.BREAKFAST_PROTEIN_VEGETARIAN)
        self.assertIs(select_option_list("lunch", Category.PROTEIN, veg), OptionList.LUNCH_PROTEIN_VEGETARIAN)
        self.assertIs(select_option_list("dinner", Category.PROTEIN, veg), OptionList.DINNER_PROTEIN_VEGETARIAN)
        ranked = rank_category(["chicken"], veg, Category.PROTEIN, "lunch")
        self.assertNotIn("150g grilled chicken", ranked)

    def test_gluten_free_swaps_carb_lists(self):
        gf = RestrictionFlags(gluten_free=True)
        self.assertIs(select_option_list("breakfast", Category.CARB, gf), OptionList.BREAKFAST_CARB_GLUTEN_FREE)
        self.assertIs(select_option_list("lunch", Category.CARB, gf), OptionList.LUNCH_CARB_GLUTEN_FREE)
        self.assertIs(select_option_list("lunch", Category.CARB, NONE), OptionList.LUNCH_CARB)

    def test_every_variant_has_candidates_from_catalog(self):
        ids = known_ids()
        for variant in OptionList:
            self.assertTrue(OPTION_TABLES[variant], variant)
            for food_id, text in OPTION_TABLES[variant]:
                self.assertIn(food_id, ids)
                self.assertTrue(text)

    def test_candidates_match_their_category(self):
        self.assertEqual(lookup(OPTION_TABLES[OptionList.FRUIT][0][0]).category, Category.FRUIT.value)
        for food_id, _ in OPTION_TABLES[OptionList.SWEET]:
            self.assertEqual(lookup(food_id).category, Category.SWEET.value)


class CatalogTests(unittest.TestCase):
    def test_catalog_size_and_unique_ids(self):
        self.assertEqual(len(FOOD_CATALOG), 38)
        self.assertEqual(len(known_ids()), 38)

    def test_foods_in_category(self):
        self.assertEqual(len(foods_in(Category.PROTEIN)), 8)
        self.assertEqual(len(foods_in("sweet")), 6)
        self.assertIsNone(lookup("pizza"))


if __name__ == '__main__':
    unittest.main()
