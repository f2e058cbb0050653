# settings.py — single source of truth for all constants

# --- Nutrition ---
CALORIE_THRESHOLD = 300     # totals strictly above this raise CALORIES_EXCEEDED

# --- Events ---
CALORIES_EXCEEDED = "CALORIES_EXCEEDED"

# --- Logging ---
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# --- Main menu ---
MAIN_MENU_TITLE = "Recipe Creator:"
MAIN_MENU_OPTIONS = [
    "Add Recipe",
    "Select Recipe",
    "Exit",
]

# --- Recipe editor ---
EDITOR_MENU_TITLE = "Add to Recipe:"
EDITOR_MENU_OPTIONS = [
    "Add Ingredients",
    "Add Step",
    "Print Recipe",
    "Scale Recipe",
    "Reset Quantities",
    "Clear Recipe",
    "Return to Recipe Creator",
]

# --- Prompts ---
PROMPT_RECIPE_NAME      = "Enter recipe name: "
PROMPT_INGREDIENT_NAME  = "Enter ingredient name: "
PROMPT_QUANTITY         = "Enter quantity: "
PROMPT_UNIT             = "Enter unit of measurement: "
PROMPT_CALORIES         = "Enter calories: "
PROMPT_FOOD_GROUP       = "Enter food group: "
PROMPT_STEP             = "Enter step description: "
PROMPT_SCALE_FACTOR     = "Enter scaling factor: "

# --- Messages ---
MSG_INVALID_CHOICE  = "Invalid choice. Please try again."
MSG_INVALID_NUMBER  = "Invalid input. Please enter a number."
MSG_NO_RECIPES      = "No recipes available."
MSG_SELECT_RECIPE   = "Select a recipe:"
MSG_CALORIE_WARNING = (
    "WARNING: This recipe exceeds {threshold} calories "
    "with a total of {total} calories!"
)
