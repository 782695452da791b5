from typing import Final

PROGRAM_LENGTH_DAYS: Final[int] = 30
FIRST_DAY: Final[int] = 1

# Upper (inclusive) day bound of the first two phases; everything after is phase 3
PHASE_ONE_LAST_DAY: Final[int] = 7
PHASE_TWO_LAST_DAY: Final[int] = 14

PHASES: Final[dict[int, dict[str, str]]] = {
    1: {
        "name": "Phase 1: Detox & De-bloat",
        "focus": "Light, easily digested food with no grease; help clear lochia and excess water.",
    },
    2: {
        "name": "Phase 2: Repair & Recovery",
        "focus": "Help the uterus and organs contract and heal; raise protein intake and support milk supply.",
    },
    3: {
        "name": "Phase 3: Nourish & Restore",
        "focus": "Rebuild strength and improve constitution with deeper, warming nourishment.",
    },
}

MEAL_SLOTS: Final[tuple[str, ...]] = (
    "Breakfast",
    "Morning snack",
    "Lunch",
    "Afternoon snack",
    "Dinner",
)

SHOPPING_CATEGORIES: Final[tuple[str, ...]] = (
    "Vegetables",
    "Meat & Poultry",
    "Seafood",
    "Grains & Dry Goods",
    "Condiments",
    "Fruit",
    "Dairy",
    "Other",
)
FALLBACK_CATEGORY: Final[str] = "Other"

SHOPPING_WINDOWS: Final[tuple[int, ...]] = (1, 3, 7)

LACTATION_SUPPORT_POLICY: Final[str] = (
    "Lactation support needed: include milk-promoting soups where appropriate "
    "(skimmed crucian carp soup, skimmed pork trotter soup, papaya) and keep fluids plentiful."
)
NO_LACTATION_POLICY: Final[str] = (
    "No lactation support needed: keep the diet light and balanced, avoid heavy milk-promoting "
    "broths to prevent blocked ducts."
)

PLAN_SYSTEM_PROMPT: Final[str] = (
    "You are a professional postpartum confinement nutritionist. Build a scientific daily meal plan "
    "from the number of days since delivery and the mother's condition. Always answer with pure JSON."
)
PLAN_USER_PROMPT: Final[str] = (
    """
    Create the confinement meal plan for postpartum day {day} (current phase: {phase_name}).
    Phase focus: {phase_focus}
    Dislikes / foods to avoid: {dislikes}. Replace the whole dish instead of just dropping the ingredient.
    Allergies: {allergies}.
    {lactation_policy}

    Principles:
    1. Combine traditional confinement practice (warming food, nothing raw or cold) with modern nutrition (low salt, high protein).
    2. Provide 5 meals: {slots}.
    3. Dish names must be specific (e.g. "millet porridge with brown sugar", not "porridge").

    Return strictly this JSON structure:
    """
)
PLAN_JSON_FORMAT: Final[str] = (
    """
{
  "meals": [
    {
      "name": str (specific dish name),
      "type": str (one of the 5 meal slots),
      "description": str (short reason or benefit, at most 20 words),
      "calories": int (estimate),
      "tags": [str, str]
    }
  ]
}
    """
)

RECIPE_SYSTEM_PROMPT: Final[str] = (
    "You are an experienced confinement chef. Provide a detailed cooking guide as pure JSON."
)
RECIPE_USER_PROMPT: Final[str] = (
    """
    Give the recipe details of "{dish}" suitable for a postpartum mother.
    Requirements: low salt, little oil, no irritating seasonings.
    Include:
    1. Ingredient list with approximate amounts.
    2. Detailed cooking steps.
    3. Recovery tips (why this dish suits a new mother).
    4. Nutrition highlight (one sentence).

    Return JSON in this format:
    """
)
RECIPE_JSON_FORMAT: Final[str] = (
    """
{
  "ingredients": [str, str],
  "steps": [str, str],
  "tips": [str, str],
  "nutritionHighlights": str
}
    """
)

SHOPPING_SYSTEM_PROMPT: Final[str] = (
    "You are a smart household assistant who is good at organizing shopping lists. Answer with pure JSON."
)
SHOPPING_USER_PROMPT: Final[str] = (
    """
    Build one merged shopping list for the following {days} day(s) of confinement meals:
    {meal_names}.

    Requirements:
    1. Merge identical ingredients (if two dishes both need eggs, add up the amount).
    2. The category must be one of: {categories}.
    3. Amounts should follow household shopping habits (e.g. 500g, 1 bunch, 3 pieces).

    Return this JSON structure:
    """
)
SHOPPING_JSON_FORMAT: Final[str] = (
    """
{
  "items": [
    {
      "name": str (ingredient),
      "amount": str (quantity),
      "category": str (category)
    }
  ]
}
    """
)
