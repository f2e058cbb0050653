import pytest

from recipe_creator.cookbook.recipe import Ingredient, Recipe


@pytest.fixture
def soup() -> Recipe:
    recipe = Recipe("Soup")
    recipe.add_ingredient(Ingredient("Carrot", 2, "pcs", 150, "Vegetable"))
    recipe.add_ingredient(Ingredient("Broth", 1, "liter", 200, "Liquid"))
    recipe.add_step("Chop the carrots")
    recipe.add_step("Simmer in broth")
    return recipe
