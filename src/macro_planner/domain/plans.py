"""Models for provider-generated meal plans and shake recipes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ProviderModel(BaseModel):
    """Immutable model read from camelCase provider JSON.

    Validation is strict so values must match the JSON types the output
    schema declares; numeric strings, booleans and NaN are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        strict=True,
        allow_inf_nan=False,
    )


class FoodItem(_ProviderModel):
    """Single food within a meal; cost carries its currency symbol."""

    name: str
    portion: str
    calories: float
    protein: float
    cost: str


class Meal(_ProviderModel):
    """A meal or snack with its items and totals."""

    name: str
    items: list[FoodItem]
    total_calories: float
    total_protein: float
    notes: str | None = None


class PlanSummary(_ProviderModel):
    """Day totals, cost estimate and tips."""

    total_calories: float
    total_protein: float
    estimated_daily_cost: str
    tips: list[str]


class DailyPlan(_ProviderModel):
    """Structured one-day meal plan."""

    meals: list[Meal]
    summary: PlanSummary


class ShakeIngredient(_ProviderModel):
    name: str
    amount: str


class ShakeMacros(_ProviderModel):
    calories: float
    protein: float
    carbs: float
    fats: float


class ShakeRecipe(_ProviderModel):
    """Protein shake recipe built from a subset of the pantry."""

    name: str
    ingredients: list[ShakeIngredient]
    instructions: list[str]
    macros: ShakeMacros
    tip: str
