# ui/recipe_menu.py — interactive text menus over the recipe book

from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO, TYPE_CHECKING

from recipe_creator.cookbook.recipe import Recipe, Ingredient
from recipe_creator.ui.prompts import Console, InvalidInputError
from recipe_creator.settings import (
    CALORIE_THRESHOLD,
    MAIN_MENU_TITLE, MAIN_MENU_OPTIONS,
    EDITOR_MENU_TITLE, EDITOR_MENU_OPTIONS,
    PROMPT_RECIPE_NAME, PROMPT_INGREDIENT_NAME, PROMPT_QUANTITY, PROMPT_UNIT,
    PROMPT_CALORIES, PROMPT_FOOD_GROUP, PROMPT_STEP, PROMPT_SCALE_FACTOR,
    MSG_INVALID_CHOICE, MSG_INVALID_NUMBER, MSG_NO_RECIPES, MSG_SELECT_RECIPE,
    MSG_CALORIE_WARNING,
)

if TYPE_CHECKING:
    from recipe_creator.cookbook.recipe_book import RecipeBook

logger = logging.getLogger(__name__)


class RecipeMenu:
    """
    Menu loop over a RecipeBook.

    Main menu:     Add Recipe / Select Recipe / Exit
    Recipe editor: ingredients, steps, print, scale, reset, clear, return

    Streams are injectable so a session can be scripted. run() returns on
    Exit or when input runs out.
    """

    def __init__(
        self,
        recipe_book: RecipeBook,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self._book = recipe_book
        self._console = Console(
            sys.stdin if stdin is None else stdin,
            sys.stdout if stdout is None else stdout,
        )

    def run(self) -> None:
        try:
            self._main_loop()
        except EOFError:
            logger.debug("Input closed, leaving menu")

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------

    def _main_loop(self) -> None:
        while True:
            choice = self._choose(MAIN_MENU_TITLE, MAIN_MENU_OPTIONS)
            if choice == 1:
                self._add_recipe()
            elif choice == 2:
                self._select_recipe()
            elif choice == 3:
                return
            else:
                self._console.write_line(MSG_INVALID_CHOICE)

    def _add_recipe(self) -> None:
        name = self._console.read_line(PROMPT_RECIPE_NAME)
        recipe = Recipe(name)
        recipe.subscribe(self._on_calories_exceeded)
        self._edit_recipe(recipe)
        self._book.add_recipe(recipe)
        logger.info("Added recipe %r (%d in book)", name, len(self._book))

    def _select_recipe(self) -> None:
        if self._book.is_empty():
            self._console.write_line(MSG_NO_RECIPES)
            return

        self._console.write_line(MSG_SELECT_RECIPE)
        for i, recipe in enumerate(self._book.sorted_recipes(), start=1):
            self._console.write_line(f"{i}. {recipe.name}")

        try:
            position = self._console.read_int()
        except InvalidInputError:
            position = 0
        recipe = self._book.select(position)
        if recipe is None:
            self._console.write_line(MSG_INVALID_CHOICE)
            return
        recipe.print_recipe(self._console.out)

    # ------------------------------------------------------------------
    # Recipe editor
    # ------------------------------------------------------------------

    def _edit_recipe(self, recipe: Recipe) -> None:
        while True:
            choice = self._choose(EDITOR_MENU_TITLE, EDITOR_MENU_OPTIONS)
            try:
                if choice == 1:
                    self._add_ingredient(recipe)
                elif choice == 2:
                    recipe.add_step(self._console.read_line(PROMPT_STEP))
                elif choice == 3:
                    recipe.print_recipe(self._console.out)
                elif choice == 4:
                    recipe.scale(self._console.read_float(PROMPT_SCALE_FACTOR))
                elif choice == 5:
                    recipe.reset_quantities()
                elif choice == 6:
                    recipe.clear()
                elif choice == 7:
                    return
                else:
                    self._console.write_line(MSG_INVALID_CHOICE)
            except InvalidInputError:
                self._console.write_line(MSG_INVALID_NUMBER)

    def _add_ingredient(self, recipe: Recipe) -> None:
        # Every field is parsed before the Ingredient exists.
        name = self._console.read_line(PROMPT_INGREDIENT_NAME)
        quantity = self._console.read_float(PROMPT_QUANTITY)
        unit = self._console.read_line(PROMPT_UNIT)
        calories = self._console.read_int(PROMPT_CALORIES)
        food_group = self._console.read_line(PROMPT_FOOD_GROUP)
        recipe.add_ingredient(Ingredient(name, quantity, unit, calories, food_group))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _choose(self, title: str, options: list[str]) -> Optional[int]:
        """Print a numbered menu and read a choice; None if it isn't a number."""
        self._console.write_line()
        self._console.write_line(title)
        for i, option in enumerate(options, start=1):
            self._console.write_line(f"{i}. {option}")
        try:
            return self._console.read_int()
        except InvalidInputError:
            return None

    def _on_calories_exceeded(self, total: int) -> None:
        self._console.write_line(
            MSG_CALORIE_WARNING.format(threshold=CALORIE_THRESHOLD, total=total)
        )
