"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from macro_planner.adapters.openai_generation_client import OpenAIGenerationClient
from macro_planner.config import Settings
from macro_planner.services.generation import PlanRequestClient, RecipeRequestClient
from macro_planner.services.planner import PlannerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    planner_service: PlannerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    openai_client = OpenAIGenerationClient.create(resolved_settings.openai_api_key)
    client_options = {
        "client": openai_client,
        "model": resolved_settings.openai_model,
        "reasoning_effort": resolved_settings.openai_reasoning_effort or None,
        "store": resolved_settings.openai_store,
    }
    planner_service = PlannerService(
        plan_client=PlanRequestClient(**client_options),
        recipe_client=RecipeRequestClient(**client_options),
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        planner_service=planner_service,
        close_resources=close_resources,
    )
