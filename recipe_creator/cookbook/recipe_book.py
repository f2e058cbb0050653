# cookbook/recipe_book.py — the session's collection of recipes

from __future__ import annotations
from recipe_creator.cookbook.recipe import Recipe


class RecipeBook:
    """
    In-memory list of recipes for one session. Duplicate names are allowed;
    listings are sorted by name for selection.
    """

    def __init__(self) -> None:
        self._recipes: list[Recipe] = []

    def add_recipe(self, recipe: Recipe) -> None:
        self._recipes.append(recipe)

    def sorted_recipes(self) -> list[Recipe]:
        return sorted(self._recipes, key=lambda r: (r.name.casefold(), r.name))

    def select(self, position: int) -> Recipe | None:
        """Return the recipe at 1-based position in sorted_recipes(), or None."""
        listing = self.sorted_recipes()
        if 1 <= position <= len(listing):
            return listing[position - 1]
        return None

    def is_empty(self) -> bool:
        return not self._recipes

    def __len__(self) -> int:
        return len(self._recipes)
