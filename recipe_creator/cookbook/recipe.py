# cookbook/recipe.py — recipe and ingredient data classes

from __future__ import annotations
import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from recipe_creator.core.event_bus import EventBus
from recipe_creator.settings import CALORIE_THRESHOLD, CALORIES_EXCEEDED

logger = logging.getLogger(__name__)


def format_quantity(quantity: float) -> str:
    """Whole numbers print without a trailing .0; anything else at full precision."""
    value = float(quantity)
    if value.is_integer():
        return f"{value:.0f}"
    return repr(value)


@dataclass
class Ingredient:
    """
    One line of a recipe. original_quantity is captured at construction
    and is what reset_quantity() restores; nothing else writes to it.
    """
    name: str
    quantity: float
    unit: str        # "pcs", "g", "liter", ... free text, never converted
    calories: int    # fixed per ingredient, not per unit
    food_group: str
    original_quantity: float = field(init=False)

    def __post_init__(self) -> None:
        self.original_quantity = self.quantity

    def reset_quantity(self) -> None:
        self.quantity = self.original_quantity

    def display(self) -> str:
        return f"{format_quantity(self.quantity)} {self.unit} {self.name}"


@dataclass
class Recipe:
    """
    A named list of ingredients and preparation steps.

    Printing a recipe whose total calories exceed CALORIE_THRESHOLD
    publishes CALORIES_EXCEEDED on the recipe's own bus; every subscribed
    listener receives the total, in subscription order, before
    print_recipe() returns.
    """
    name: str
    ingredients: list[Ingredient] = field(default_factory=list)
    steps: list[str] = field(default_factory=list)
    _bus: EventBus = field(default_factory=EventBus, init=False, repr=False, compare=False)

    # --- Building ---

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)
        logger.debug("Added %r to %s", ingredient.name, self.name)

    def remove_ingredient(self, index: int) -> None:
        if 0 <= index < len(self.ingredients):
            self.ingredients.pop(index)

    def add_step(self, description: str) -> None:
        self.steps.append(description)

    def clear(self) -> None:
        self.ingredients.clear()
        self.steps.clear()
        logger.debug("Cleared %s", self.name)

    # --- Quantities ---

    def scale(self, factor: float) -> None:
        """Multiply every current quantity by factor. Repeated calls compound."""
        for ing in self.ingredients:
            ing.quantity *= factor
        logger.debug("Scaled %s by %s", self.name, factor)

    def reset_quantities(self) -> None:
        for ing in self.ingredients:
            ing.reset_quantity()

    # --- Notification ---

    def subscribe(self, listener: Callable[[int], None]) -> None:
        self._bus.subscribe(CALORIES_EXCEEDED, listener)

    def unsubscribe(self, listener: Callable[[int], None]) -> None:
        self._bus.unsubscribe(CALORIES_EXCEEDED, listener)

    # --- Reporting ---

    @property
    def total_calories(self) -> int:
        # Flat sum: scaling a recipe does not change its calorie total.
        return sum(ing.calories for ing in self.ingredients)

    def render(self) -> str:
        lines = [f"Recipe: {self.name}", "Ingredients:"]
        lines += [ing.display() for ing in self.ingredients]
        lines += ["", "Steps:"]
        lines += [f"{i}. {step}" for i, step in enumerate(self.steps, start=1)]
        lines.append(f"Total Calories: {self.total_calories}")
        return "\n".join(lines)

    def print_recipe(self, out: Optional[TextIO] = None) -> None:
        out = sys.stdout if out is None else out
        print(self.render(), file=out)

        total = self.total_calories
        if total > CALORIE_THRESHOLD:
            logger.info("%s exceeds %d calories (%d)", self.name, CALORIE_THRESHOLD, total)
            self._bus.publish(CALORIES_EXCEEDED, total)

    def __repr__(self) -> str:
        return f"Recipe({self.name} {len(self.ingredients)} ingredients {len(self.steps)} steps)"
