"""Prompt and output-schema composition for provider requests."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from macro_planner.domain.profile import (
    GOAL_LABELS,
    Goal,
    MacroTargets,
    MeatType,
    UserProfile,
)
from macro_planner.domain.regions import Region, RegionProfile, region_profile

NUTRITIONIST_INSTRUCTION = (
    "You are a pragmatic nutritionist. "
    "You balance budget with local availability and preferences."
)

_FOOD_ITEM_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "description": "Name of the food item"},
        "portion": {
            "type": "string",
            "description": "Portion size (e.g., 1 cup, 100g)",
        },
        "calories": {"type": "number", "description": "Approximate calories"},
        "protein": {
            "type": "number",
            "description": "Approximate protein in grams",
        },
        "cost": {
            "type": "string",
            "description": (
                "Estimated cost with currency symbol (e.g. 'Rs. 200' or '$1.50')"
            ),
        },
    },
    "required": ["name", "portion", "calories", "protein", "cost"],
    "additionalProperties": False,
}

_MEAL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Meal name (Breakfast, Lunch, Dinner, Snack)",
        },
        "items": {"type": "array", "items": _FOOD_ITEM_SCHEMA},
        "totalCalories": {"type": "number"},
        "totalProtein": {"type": "number"},
        "notes": {
            "anyOf": [{"type": "string"}, {"type": "null"}],
            "description": "Cooking tip or preparation method (optional)",
        },
    },
    "required": ["name", "items", "totalCalories", "totalProtein", "notes"],
    "additionalProperties": False,
}

DAILY_PLAN_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "meals": {"type": "array", "items": _MEAL_SCHEMA},
        "summary": {
            "type": "object",
            "properties": {
                "totalCalories": {"type": "number"},
                "totalProtein": {"type": "number"},
                "estimatedDailyCost": {
                    "type": "string",
                    "description": "Total daily cost with currency",
                },
                "tips": {"type": "array", "items": {"type": "string"}},
            },
            "required": [
                "totalCalories",
                "totalProtein",
                "estimatedDailyCost",
                "tips",
            ],
            "additionalProperties": False,
        },
    },
    "required": ["meals", "summary"],
    "additionalProperties": False,
}

SHAKE_RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "ingredients": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "amount": {"type": "string"},
                },
                "required": ["name", "amount"],
                "additionalProperties": False,
            },
        },
        "instructions": {"type": "array", "items": {"type": "string"}},
        "macros": {
            "type": "object",
            "properties": {
                "calories": {"type": "number"},
                "protein": {"type": "number"},
                "carbs": {"type": "number"},
                "fats": {"type": "number"},
            },
            "required": ["calories", "protein", "carbs", "fats"],
            "additionalProperties": False,
        },
        "tip": {"type": "string"},
    },
    "required": ["name", "ingredients", "instructions", "macros", "tip"],
    "additionalProperties": False,
}


@dataclass(frozen=True)
class ProviderRequest:
    """Everything the provider needs for one schema-constrained generation."""

    prompt: str
    schema_name: str
    schema: dict[str, object]
    system_instruction: str | None = None


def compose_meal_plan_request(
    profile: UserProfile, targets: MacroTargets, region: Region
) -> ProviderRequest:
    """Build the one-day meal plan request for a profile and region."""
    catalog = region_profile(region)
    meats = selected_meats(profile)
    allowed = (
        ", ".join(meat.value.capitalize() for meat in meats)
        if meats
        else "Vegetarian/Basic Only"
    )

    lines = [
        "Create a highly specific, budget-friendly 1-day meal plan.",
        "",
        "User Profile:",
        f"- Region: {catalog.display_name}",
        f"- Goal: {_goal_label(profile.goal)}",
        (
            f"- Daily Targets: {_round_half_up(targets.calories)} kcal, "
            f"{_round_half_up(targets.protein_g)}g Protein, "
            f"{_round_half_up(targets.carbs_g)}g Carbs, "
            f"{_round_half_up(targets.fat_g)}g Fats"
        ),
        f"- Allowed Meats: {allowed}",
        "",
        *diet_guidelines(catalog, meats),
        "",
        "FORBIDDEN:",
        f"No {_join(catalog.forbidden)}.",
        "",
        "REQUIREMENTS:",
        f"- {catalog.currency_instruction}",
        "- Calculate exact macros to match target within +/- 5%.",
        "- Provide 3 main meals + 1-2 snacks.",
        "",
        "Output strictly valid JSON matching the schema.",
    ]
    return ProviderRequest(
        prompt="\n".join(lines),
        schema_name="daily_plan",
        schema=DAILY_PLAN_SCHEMA,
        system_instruction=NUTRITIONIST_INSTRUCTION,
    )


def compose_shake_request(ingredients: Sequence[str], region: Region) -> ProviderRequest:
    """Build the protein shake request for an ingredient selection."""
    catalog = region_profile(region)
    lines = [
        "Create a delicious and effective protein shake recipe using ONLY a "
        "subset of the ingredients provided below.",
        "Goal: Maximize protein and taste.",
        catalog.shake_context,
        "",
        f"Available Ingredients: {', '.join(ingredients)}",
        "",
        "Instructions:",
        "1. Pick the best combination from the provided list.",
        "2. Add 'Water' or 'Ice' freely if needed.",
        "3. Create a recipe with portions.",
        "4. Estimate macros.",
        "",
        "Output JSON.",
    ]
    return ProviderRequest(
        prompt="\n".join(lines),
        schema_name="shake_recipe",
        schema=SHAKE_RECIPE_SCHEMA,
    )


def selected_meats(profile: UserProfile) -> list[MeatType]:
    """Return the user's meats in catalog order."""
    return [meat for meat in MeatType if meat in profile.meat_preferences]


def diet_guidelines(catalog: RegionProfile, meats: Sequence[MeatType]) -> list[str]:
    """Return the regional staples block with one line per selected meat."""
    lines = [
        catalog.context_line,
        f"1. **Carbs**: {', '.join(catalog.carbs)}.",
        "2. **Proteins** (Prioritize User Selection):",
    ]
    lines.extend(
        f"   - **{meat.value.capitalize()}**: {catalog.meat_guidelines[meat]}"
        for meat in meats
    )
    lines.append(f"   - Staples: {', '.join(catalog.protein_staples)}.")
    lines.append(f"3. **Vegetables**: {', '.join(catalog.vegetables)}.")
    return lines


def _round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2206.5 -> 2207)."""
    return math.floor(value + 0.5)


def _goal_label(goal: Goal | str) -> str:
    try:
        return GOAL_LABELS[Goal(goal)]
    except ValueError:
        return GOAL_LABELS[Goal.MAINTAIN]


def _join(items: Sequence[str]) -> str:
    if len(items) < 2:
        return "".join(items)
    return f"{', '.join(items[:-1])}, or {items[-1]}"
