"""Schema-constrained generation of meal plans and shake recipes."""

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaMismatch

from macro_planner.domain.errors import GenerationFailure
from macro_planner.domain.plans import DailyPlan, ShakeRecipe
from macro_planner.services.prompts import ProviderRequest

PLAN_FAILURE_MESSAGE = "Failed to generate meal plan. Please try again."
RECIPE_FAILURE_MESSAGE = "Failed to generate shake recipe."

_logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class GenerationClient(Protocol):
    """Interface for a generative text provider with structured outputs."""

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
        """Return the raw response text for a single request."""


@dataclass
class _SchemaRequestClient:
    client: GenerationClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def _fetch(
        self,
        request: ProviderRequest,
        model_type: type[_ModelT],
        *,
        action: str,
        failure_message: str,
    ) -> _ModelT:
        """Run one provider round trip and validate it into ``model_type``."""
        try:
            text = await self.client.generate(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=request.prompt,
                system_instruction=request.system_instruction,
                schema_name=request.schema_name,
                schema=request.schema,
            )
        except Exception as exc:
            _logger.exception("Provider %s request failed", action)
            raise GenerationFailure(failure_message, detail=repr(exc)) from exc

        if not text or not text.strip():
            _logger.error("Provider %s returned an empty response", action)
            raise GenerationFailure(failure_message, detail="empty response")

        try:
            result = model_type.model_validate_json(text)
        except SchemaMismatch as exc:
            _logger.exception("Provider %s response is not valid schema JSON", action)
            raise GenerationFailure(failure_message, detail=str(exc)) from exc

        _logger.info("Provider %s succeeded: schema=%s", action, request.schema_name)
        return result


@dataclass
class PlanRequestClient(_SchemaRequestClient):
    """Fetches a daily meal plan for a composed request."""

    async def fetch_plan(self, request: ProviderRequest) -> DailyPlan:
        """Return a validated plan or raise GenerationFailure."""
        return await self._fetch(
            request,
            DailyPlan,
            action="meal_plan",
            failure_message=PLAN_FAILURE_MESSAGE,
        )


@dataclass
class RecipeRequestClient(_SchemaRequestClient):
    """Fetches a shake recipe for a composed request."""

    async def fetch_recipe(self, request: ProviderRequest) -> ShakeRecipe:
        """Return a validated recipe or raise GenerationFailure."""
        return await self._fetch(
            request,
            ShakeRecipe,
            action="shake_recipe",
            failure_message=RECIPE_FAILURE_MESSAGE,
        )
