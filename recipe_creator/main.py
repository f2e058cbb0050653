"""Command-line entry point for the recipe creator."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from recipe_creator.cookbook.recipe_book import RecipeBook
from recipe_creator.settings import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVELS
from recipe_creator.ui.recipe_menu import RecipeMenu

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-creator",
        description="Create recipes, scale them and print calorie summaries",
    )
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, choices=LOG_LEVELS)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    logger.debug("Starting recipe creator")
    RecipeMenu(RecipeBook()).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
