"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from macro_planner.config import Settings
from macro_planner.containers import AppContainer
from macro_planner.domain.profile import (
    ActivityLevel,
    Gender,
    Goal,
    MeatType,
    UserProfile,
)
from macro_planner.services.generation import (
    GenerationClient,
    PlanRequestClient,
    RecipeRequestClient,
)
from macro_planner.services.planner import PlannerService

PLAN_PAYLOAD: dict[str, object] = {
    "meals": [
        {
            "name": "Breakfast",
            "items": [
                {
                    "name": "String Hoppers",
                    "portion": "10 pieces",
                    "calories": 350,
                    "protein": 6,
                    "cost": "Rs. 150",
                },
                {
                    "name": "Dhal Curry",
                    "portion": "1 cup",
                    "calories": 230,
                    "protein": 14,
                    "cost": "Rs. 80",
                },
            ],
            "totalCalories": 580,
            "totalProtein": 20,
            "notes": "Temper the dhal with mustard seeds.",
        },
        {
            "name": "Snack",
            "items": [
                {
                    "name": "Banana",
                    "portion": "1 medium",
                    "calories": 105,
                    "protein": 1.3,
                    "cost": "Rs. 40",
                }
            ],
            "totalCalories": 105,
            "totalProtein": 1.3,
            "notes": None,
        },
    ],
    "summary": {
        "totalCalories": 685,
        "totalProtein": 21.3,
        "estimatedDailyCost": "Rs. 270",
        "tips": ["Buy dhal in bulk."],
    },
}

SHAKE_PAYLOAD: dict[str, object] = {
    "name": "Banana Peanut Power",
    "ingredients": [
        {"name": "Banana", "amount": "1 medium"},
        {"name": "Peanut Butter", "amount": "2 tbsp"},
        {"name": "Fresh Milk", "amount": "250 ml"},
    ],
    "instructions": ["Add everything to a blender.", "Blend with ice."],
    "macros": {"calories": 480, "protein": 18, "carbs": 52, "fats": 22},
    "tip": "Freeze the banana for a thicker shake.",
}


@dataclass
class FakeGenerationClient(GenerationClient):
    """Fake provider returning fixed text or raising a fixed error."""

    text: str | None = None
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        system_instruction: str | None,
        schema_name: str,
        schema: dict[str, object],
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "reasoning_effort": reasoning_effort,
                "store": store,
                "prompt": prompt,
                "system_instruction": system_instruction,
                "schema_name": schema_name,
                "schema": schema,
            }
        )
        if self.error is not None:
            raise self.error
        return self.text or ""


def make_profile(**overrides: object) -> UserProfile:
    """Return the default example profile with optional overrides."""
    values: dict[str, object] = {
        "age": 25,
        "height_cm": 170,
        "weight_kg": 65,
        "gender": Gender.MALE,
        "activity_level": ActivityLevel.MODERATE,
        "goal": Goal.MAINTAIN,
        "meat_preferences": frozenset({MeatType.CHICKEN, MeatType.FISH}),
    }
    values.update(overrides)
    return UserProfile(**values)  # type: ignore[arg-type]


def make_planner(client: GenerationClient) -> PlannerService:
    options = {
        "client": client,
        "model": "gpt-5.2",
        "reasoning_effort": "low",
        "store": False,
    }
    return PlannerService(
        plan_client=PlanRequestClient(**options),
        recipe_client=RecipeRequestClient(**options),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def profile() -> UserProfile:
    return make_profile()


@pytest.fixture
def plan_text() -> str:
    return json.dumps(PLAN_PAYLOAD)


@pytest.fixture
def shake_text() -> str:
    return json.dumps(SHAKE_PAYLOAD)


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def container(
    settings: Settings, generation_client: FakeGenerationClient
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        planner_service=make_planner(generation_client),
        close_resources=close_resources,
    )
