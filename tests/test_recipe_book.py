from recipe_creator.cookbook.recipe import Recipe
from recipe_creator.cookbook.recipe_book import RecipeBook


def make_book(*names: str) -> RecipeBook:
    book = RecipeBook()
    for name in names:
        book.add_recipe(Recipe(name))
    return book


def test_new_book_is_empty() -> None:
    book = RecipeBook()
    assert book.is_empty()
    assert len(book) == 0
    assert book.select(1) is None


def test_sorted_recipes_orders_by_name() -> None:
    book = make_book("Stew", "Apple Pie", "Muffins")

    assert [r.name for r in book.sorted_recipes()] == ["Apple Pie", "Muffins", "Stew"]


def test_duplicate_names_are_kept() -> None:
    book = make_book("Soup", "Soup")
    assert len(book) == 2


def test_select_is_one_based_over_sorted_listing() -> None:
    book = make_book("Stew", "Apple Pie")

    assert book.select(1).name == "Apple Pie"
    assert book.select(2).name == "Stew"
    assert book.select(0) is None
    assert book.select(3) is None
    assert book.select(-1) is None


def test_sorted_recipes_ignores_case() -> None:
    book = make_book("Stew", "apple pie", "Muffins", "muffins")

    assert [r.name for r in book.sorted_recipes()] == ["apple pie", "Muffins", "muffins", "Stew"]
    assert book.select(1).name == "apple pie"
