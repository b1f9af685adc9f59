"""Shake pantry offered to callers, grouped by category."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IngredientCategory:
    """Named group of selectable shake ingredients."""

    name: str
    items: tuple[str, ...]


SHAKE_INGREDIENTS: tuple[IngredientCategory, ...] = (
    IngredientCategory(
        "Liquid Base",
        (
            "Water",
            "Fresh Milk",
            "King Coconut Water",
            "Coconut Milk",
            "Soy Milk",
            "Iced Coffee",
            "Almond Milk",
        ),
    ),
    IngredientCategory(
        "Protein Power",
        (
            "Whey Protein",
            "Yogurt / Curd",
            "Peanuts",
            "Cashews (Caju)",
            "Egg Whites (Pasteurized)",
            "Chickpeas",
        ),
    ),
    IngredientCategory(
        "Fruits & Veg",
        (
            "Banana",
            "Avocado",
            "Papaya",
            "Mango",
            "Woodapple",
            "Pineapple",
            "Passion Fruit",
            "Rambutan",
            "Dates",
        ),
    ),
    IngredientCategory(
        "Flavor & Boosters",
        (
            "Oats",
            "Milo",
            "Samaposha",
            "Peanut Butter",
            "Kithul Treacle",
            "Honey",
            "Chia Seeds",
            "Cinnamon",
            "Ginger",
            "Cardamom",
        ),
    ),
)

MIN_SHAKE_INGREDIENTS = 2
